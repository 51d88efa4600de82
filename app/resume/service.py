import logging
from typing import Any, Dict

from sqlalchemy.orm import Session

from app.db.models.resume import Resume
from app.db.models.user import User
from app.db.persist import as_utc, commit_or_raise

logger = logging.getLogger(__name__)


def get_resume(db: Session, user: User) -> Resume | None:
    return db.query(Resume).filter(Resume.user_id == user.id).first()


def save_resume(db: Session, user: User, content: str) -> Resume:
    """Upsert on user_id; a user has at most one resume."""
    resume = get_resume(db, user)
    if resume is None:
        resume = Resume(user_id=user.id, content=content)
        db.add(resume)
    else:
        resume.content = content
    commit_or_raise(db, "Failed to save resume")
    logger.info("Saved resume for user=%s (%d chars)", user.id, len(content))
    return resume


def serialize_resume(resume: Resume) -> Dict[str, Any]:
    return {
        "id": str(resume.id),
        "content": resume.content,
        "created_at": as_utc(resume.created_at).isoformat(),
        "updated_at": as_utc(resume.updated_at).isoformat(),
    }
