import logging
import os
import sys

from werkzeug.serving import make_server

from wiki import create_app
from wiki.domain.exceptions import StartupError

logger = logging.getLogger(__name__)


def start(config_name: str):
    """
    Bring the page store up, then bind the HTTP server.

    Returns the bound server. Raises StartupError if either step fails.
    """
    app = create_app(config_name)
    host = app.config["WIKI_HOST"]
    port = app.config["WIKI_PORT"]

    try:
        server = make_server(host, port, app, threaded=True)
    except OSError as exc:
        raise StartupError(f"could not bind HTTP server to {host}:{port}: {exc}") from exc

    return server


def main() -> int:
    config_name = os.getenv("WIKI_CONFIG", "development")

    try:
        server = start(config_name)
    except StartupError as exc:
        logger.error("failed to initialize the page store or the HTTP server: %s", exc)
        return 1

    logger.info("page store and HTTP server initialized, listening on port %s", server.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("server shutdown by keyboard interrupt")
    finally:
        server.server_close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
