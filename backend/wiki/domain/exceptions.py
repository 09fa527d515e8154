from enum import Enum


class ErrorCode(Enum):
    NO_ACTION_SPECIFIED = "no-action-specified"
    BAD_ACTION = "bad-action"
    DB_ERROR = "db-error"


class WikiError(Exception):
    """Base class for every failure the wiki reports."""


class StoreError(WikiError):
    """
    Raised by the page store.

    Covers storage engine failures (constraint violations, I/O errors,
    bad statements) as well as store requests that name no action or an
    unknown one. Never retried.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.DB_ERROR):
        super().__init__(message)
        self.code = code


class ClientInputError(WikiError):
    """Malformed or missing request parameters."""


class RenderError(WikiError):
    """Markdown or template rendering failed."""


class StartupError(WikiError):
    """The page table could not be created or the HTTP port could not be bound."""
