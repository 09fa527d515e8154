import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

from wiki.application.pages.delete_page import delete_page
from wiki.application.pages.fetch_page import PageReply, fetch_page
from wiki.application.pages.list_pages import list_pages
from wiki.application.pages.upsert_page import upsert_page
from wiki.domain.exceptions import ErrorCode, StartupError, StoreError

logger = logging.getLogger(__name__)


class Action(str, Enum):
    ALL_PAGES = "all-pages"
    FETCH_PAGE = "fetch-page"
    UPSERT_PAGE = "upsert-page"
    DELETE_PAGE = "delete-page"


class PageStore:
    """
    Owns the Pages table and answers one action per request.

    Callers either use the per-action methods or send a tagged request
    through `request(action, payload)`. Payload keys follow the form
    field names (`page`, `id`, `title`, `markdown`, `newPage`), but
    values are typed: `id` is an int and `newPage` a real bool.
    """

    def __init__(self, db: SQLAlchemy):
        self.db = db

    def initialize(self) -> None:
        """Create the Pages table if it is absent. Needs an app context."""
        try:
            self.db.create_all()
        except SQLAlchemyError as exc:
            logger.error("could not initialize the page table: %s", exc)
            raise StartupError(f"page table initialization failed: {exc}") from exc
        logger.info("database has been initialized")

    # ------------------------
    # Actions
    # ------------------------
    def all_pages(self) -> List[str]:
        return list_pages()

    def fetch_page(self, name: str) -> PageReply:
        return fetch_page(name=name)

    def upsert_page(
        self,
        *,
        is_new: bool,
        page_id: Optional[int],
        name: str,
        content: str,
    ) -> None:
        upsert_page(is_new=is_new, page_id=page_id, name=name, content=content)

    def delete_page(self, page_id: int) -> None:
        delete_page(page_id=page_id)

    # ------------------------
    # Tagged dispatch
    # ------------------------
    def request(
        self,
        action: Optional[str],
        payload: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        if not action:
            logger.error("no action specified for store request %r", payload)
            raise StoreError("no action specified", code=ErrorCode.NO_ACTION_SPECIFIED)

        try:
            action = Action(action)
        except ValueError:
            logger.error("unknown store action %r", action)
            raise StoreError(f"bad action: {action}", code=ErrorCode.BAD_ACTION) from None

        payload = payload or {}

        if action is Action.ALL_PAGES:
            return {"pages": self.all_pages()}

        if action is Action.FETCH_PAGE:
            name = self._field(action, payload, "page")
            return dict(self.fetch_page(name))

        if action is Action.UPSERT_PAGE:
            is_new = self._field(action, payload, "newPage")
            if not isinstance(is_new, bool):
                raise StoreError(
                    f"newPage must be a bool, got {is_new!r}", code=ErrorCode.BAD_ACTION
                )
            page_id = payload.get("id")
            name = self._field(action, payload, "title")
            content = self._field(action, payload, "markdown")
            self.upsert_page(is_new=is_new, page_id=page_id, name=name, content=content)
            return {}

        page_id = self._field(action, payload, "id")
        self.delete_page(page_id)
        return {}

    @staticmethod
    def _field(action: Action, payload: Mapping[str, Any], key: str) -> Any:
        try:
            return payload[key]
        except KeyError:
            raise StoreError(
                f"{action.value} request is missing '{key}'", code=ErrorCode.BAD_ACTION
            ) from None
