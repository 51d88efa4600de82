import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import PersistenceFailure

logger = logging.getLogger(__name__)


def commit_or_raise(db: Session, message: str) -> None:
    """Commit, or roll back and raise PersistenceFailure with a user-safe message."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("%s", message)
        raise PersistenceFailure(message) from e


def as_utc(dt: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything we store is UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
