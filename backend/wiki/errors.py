import logging
from flask import render_template
from wiki.domain.exceptions import ClientInputError, RenderError, StoreError

logger = logging.getLogger(__name__)


def error_response(code: int, title: str, message: str):
    return render_template(
        "error.html",
        code=code,
        title=title,
        message=message,
    ), code


def register_error_handlers(app):
    @app.errorhandler(ClientInputError)
    def handle_client_input_error(error):
        logger.warning("rejected request: %s", error)
        return error_response(400, "Bad Request", str(error))

    @app.errorhandler(StoreError)
    def handle_store_error(error):
        logger.exception("page store failure (%s)", error.code.value)
        return error_response(500, "Internal Server Error", "The page store could not complete the request.")

    @app.errorhandler(RenderError)
    def handle_render_error(error):
        logger.exception("rendering failed")
        return error_response(500, "Internal Server Error", "The page could not be rendered.")
