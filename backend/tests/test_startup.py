"""Tests for application creation and the server entry point."""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from wiki import create_app, server
from wiki.config import TestingConfig
from wiki.domain.exceptions import StartupError
from wiki.extensions import db


def test_pages_table_exists_after_create(app):
    with app.app_context():
        inspector = inspect(db.engine)
        assert "Pages" in inspector.get_table_names()
        columns = {c["name"] for c in inspector.get_columns("Pages")}
        assert columns == {"Id", "Name", "Content"}


def test_initialize_is_idempotent(store):
    store.upsert_page(is_new=True, page_id=None, name="Kept", content="still here")
    store.initialize()
    assert store.fetch_page("Kept")["existing"] is True


def test_table_creation_failure_aborts_startup():
    error = OperationalError("create table", {}, Exception("read-only database"))
    with patch.object(db, "create_all", side_effect=error):
        with pytest.raises(StartupError) as excinfo:
            create_app("testing")
    assert "read-only database" in str(excinfo.value)


def test_front_end_registered_after_store(app):
    assert "page_store" in app.extensions
    assert "wiki" in app.blueprints


def test_bind_failure_is_startup_error():
    with patch("wiki.server.make_server", side_effect=OSError("address already in use")):
        with pytest.raises(StartupError):
            server.start("testing")


def test_start_binds_configured_port():
    with patch("wiki.server.make_server") as make_server:
        server.start("testing")

    host, port, app = make_server.call_args.args
    assert (host, port) == ("0.0.0.0", 8080)
    assert make_server.call_args.kwargs == {"threaded": True}


def test_main_reports_startup_failure():
    with patch("wiki.server.start", side_effect=StartupError("no table")):
        assert server.main() == 1


def test_main_serves_until_interrupted():
    http_server = MagicMock(port=8080)
    http_server.serve_forever.side_effect = KeyboardInterrupt

    with patch("wiki.server.start", return_value=http_server):
        assert server.main() == 0

    http_server.server_close.assert_called_once()


def test_unknown_config_name_is_startup_error():
    with pytest.raises(StartupError) as excinfo:
        create_app("prod")
    assert "prod" in str(excinfo.value)


def test_unknown_database_dialect_is_startup_error():
    with patch.object(TestingConfig, "SQLALCHEMY_DATABASE_URI", "nosuchdialect://x"):
        with pytest.raises(StartupError) as excinfo:
            create_app("testing")
    assert "nosuchdialect" in str(excinfo.value)


def test_main_reports_unknown_config(monkeypatch):
    monkeypatch.setenv("WIKI_CONFIG", "prod")
    assert server.main() == 1


def test_main_reports_engine_failure(monkeypatch):
    monkeypatch.setenv("WIKI_CONFIG", "testing")
    with patch.object(TestingConfig, "SQLALCHEMY_DATABASE_URI", "nosuchdialect://x"):
        assert server.main() == 1
