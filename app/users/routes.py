# Profile + onboarding API
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from app.agents.structured import StructuredGenerationClient
from app.auth.deps import get_current_user
from app.db.models.user import User
from app.deps import get_db, get_generator
from app.users.service import serialize_user, update_profile

router = APIRouter(prefix="/api/profile")


class ProfileUpdate(BaseModel):
    industry: str | None = Field(default=None, max_length=200)
    experience: int | None = Field(default=None, ge=0, le=80)
    bio: str | None = None
    skills: List[str] | None = None


@router.get("")
def get_profile(user: User = Depends(get_current_user)):
    return {"user": serialize_user(user)}


@router.put("")
def put_profile(
    body: ProfileUpdate,
    db: Session = Depends(get_db),
    generator: StructuredGenerationClient = Depends(get_generator),
    user: User = Depends(get_current_user),
):
    updated = update_profile(
        db,
        generator,
        user,
        industry=body.industry,
        experience=body.experience,
        bio=body.bio,
        skills=body.skills,
    )
    return {"user": serialize_user(updated)}


@router.get("/onboarding-status")
def onboarding_status(user: User = Depends(get_current_user)):
    return {"is_onboarded": bool(user.industry)}
