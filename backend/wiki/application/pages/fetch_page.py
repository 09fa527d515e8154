from datetime import datetime, timezone
from typing import TypedDict
from sqlalchemy import select
from wiki.extensions import db
from wiki.models.page import Page, UNSAVED_PAGE_ID
from wiki.utils.transaction import transactional

EMPTY_PAGE_MARKDOWN = "# A new page\n\nFeel-free to write in Markdown!\n"


class PageReply(TypedDict):
    """
    Reply for a single page lookup.

    A name with no stored row still produces a reply: the id is the
    unsaved sentinel, the content is the placeholder Markdown and
    `existing` is False.
    """
    id: int
    title: str
    rawContent: str
    newPage: str
    existing: bool
    timestamp: str


def fetch_page(*, name: str) -> PageReply:
    with transactional():
        row = db.session.execute(
            select(Page.id, Page.content).where(Page.name == name)
        ).first()

    timestamp = datetime.now(timezone.utc).astimezone().isoformat(timespec="seconds")

    if row is None:
        return {
            "id": UNSAVED_PAGE_ID,
            "title": name,
            "rawContent": EMPTY_PAGE_MARKDOWN,
            "newPage": "yes",
            "existing": False,
            "timestamp": timestamp,
        }

    page_id, content = row
    return {
        "id": page_id,
        "title": name,
        "rawContent": content or "",
        "newPage": "no",
        "existing": True,
        "timestamp": timestamp,
    }
