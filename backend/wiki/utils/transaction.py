from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError
from wiki.extensions import db
from wiki.domain.exceptions import StoreError


@contextmanager
def transactional():
    """
    Context manager for database transactions.

    Commits on success. On failure rolls back and re-raises; storage
    engine errors come out as StoreError.
    """
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise StoreError(str(exc.orig if getattr(exc, "orig", None) else exc)) from exc
    except Exception:
        db.session.rollback()
        raise
