from flask import Flask
from sqlalchemy.exc import SQLAlchemyError
from .config import config_by_name
from .extensions import db, migrate
from .log_config import configure_logging
from .domain.exceptions import StartupError
from .application.store import PageStore
from .views import wiki_bp
from .errors import register_error_handlers


def create_app(config_name: str = "development") -> Flask:
    """
    Build the wiki application.

    The page store is brought up first so the Pages table exists before
    any route is registered; a StartupError from it aborts creation.
    """
    if config_name not in config_by_name:
        raise StartupError(
            f"unknown configuration {config_name!r}, expected one of {sorted(config_by_name)}"
        )

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    configure_logging(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    # Engines are built here; a bad URL or missing driver fails now
    try:
        db.init_app(app)
    except (SQLAlchemyError, ImportError) as exc:
        raise StartupError(f"could not set up the database engine: {exc}") from exc
    migrate.init_app(app, db)

    # -------------------------------------------------
    # Page store
    # -------------------------------------------------
    store = PageStore(db)
    with app.app_context():
        store.initialize()
    app.extensions["page_store"] = store

    # -------------------------------------------------
    # HTTP front end
    # -------------------------------------------------
    app.register_blueprint(wiki_bp)
    register_error_handlers(app)

    return app
