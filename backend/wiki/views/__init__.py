from flask import Blueprint

wiki_bp = Blueprint("wiki", __name__)

# Import route modules so they register with wiki_bp
from . import health
from . import pages
