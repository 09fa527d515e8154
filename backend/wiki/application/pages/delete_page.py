import logging
from sqlalchemy import delete
from wiki.extensions import db
from wiki.models.page import Page
from wiki.utils.transaction import transactional

logger = logging.getLogger(__name__)


def delete_page(*, page_id: int) -> None:
    """Hard-delete a page by id. Deleting a missing id is a no-op."""
    logger.info("deleting page %s", page_id)

    with transactional():
        db.session.execute(delete(Page).where(Page.id == page_id))
