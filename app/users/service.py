## Profile management
import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.agents.structured import StructuredGenerationClient
from app.db.models.user import User
from app.db.persist import commit_or_raise
from app.insights.service import get_or_create_insight

logger = logging.getLogger(__name__)


def normalize_industry(industry: str) -> str:
    return " ".join(industry.split())


def update_profile(
    db: Session,
    generator: StructuredGenerationClient,
    user: User,
    *,
    industry: str | None = None,
    experience: int | None = None,
    bio: str | None = None,
    skills: List[str] | None = None,
) -> User:
    """Apply the given fields; a newly chosen industry gets its insights created up front."""
    if industry is not None:
        user.industry = normalize_industry(industry) or None
    if experience is not None:
        user.experience = experience
    if bio is not None:
        user.bio = bio.strip()
    if skills is not None:
        user.skills = [s.strip() for s in skills if s.strip()]
    commit_or_raise(db, "Failed to update profile")

    if user.industry:
        get_or_create_insight(db, generator, user.industry)
    return user


def serialize_user(user: User) -> Dict[str, Any]:
    return {
        "id": str(user.id),
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "image_url": user.image_url,
        "industry": user.industry,
        "experience": user.experience,
        "bio": user.bio,
        "skills": user.skills or [],
    }
