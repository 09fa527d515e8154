import logging
from typing import Optional
from sqlalchemy import update
from wiki.extensions import db
from wiki.models.page import Page
from wiki.utils.transaction import transactional

logger = logging.getLogger(__name__)


def upsert_page(
    *,
    is_new: bool,
    page_id: Optional[int],
    name: str,
    content: str,
) -> None:
    """
    Insert a new page or overwrite the content of an existing one.

    Rules:
    - is_new inserts (name, content); a taken name fails on the unique
      constraint and surfaces as StoreError
    - otherwise only the content of the row with page_id changes; name
      is not checked against the id
    - no history is kept
    """
    logger.info("upserting page new=%s id=%s name=%r", is_new, page_id, name)

    with transactional():
        if is_new:
            page = Page()
            page.name = name
            page.content = content
            db.session.add(page)
        else:
            db.session.execute(
                update(Page)
                .where(Page.id == page_id)
                .values(content=content)
            )
