import pytest

from wiki import create_app
from wiki.extensions import db


@pytest.fixture
def app():
    app = create_app("testing")
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    """The page store with an application context pushed."""
    with app.app_context():
        yield app.extensions["page_store"]
