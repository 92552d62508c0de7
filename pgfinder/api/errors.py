import logging
from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..core.exceptions import InternalError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(db: Session, action: str):
    """Turn database failures inside a handler into ``InternalError``."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception("%s failed", action)
        db.rollback()
        raise InternalError(f"{action} failed: {e}") from e
