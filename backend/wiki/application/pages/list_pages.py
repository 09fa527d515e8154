import logging
from typing import List
from sqlalchemy import select
from wiki.extensions import db
from wiki.models.page import Page
from wiki.utils.transaction import transactional

logger = logging.getLogger(__name__)


def list_pages() -> List[str]:
    """Names of every stored page, in whatever order the engine returns them."""
    with transactional():
        names = list(db.session.execute(select(Page.name)).scalars())

    logger.info("fetched %d pages", len(names))
    return names
