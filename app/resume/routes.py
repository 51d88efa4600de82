# Resume builder API
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from app.agents.resume_writer import improve_resume_content
from app.agents.structured import StructuredGenerationClient
from app.auth.deps import get_current_user
from app.db.models.user import User
from app.deps import get_db, get_generator
from app.resume.service import get_resume, save_resume, serialize_resume

router = APIRouter(prefix="/api/resume")


class SaveResumeRequest(BaseModel):
    content: str


class ImproveRequest(BaseModel):
    current: str = Field(min_length=1)
    type: str = Field(min_length=1)  # e.g. "experience", "project", "summary"


@router.get("")
def fetch_resume(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    resume = get_resume(db, user)
    return {"resume": serialize_resume(resume) if resume else None}


@router.put("")
def put_resume(
    body: SaveResumeRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return {"resume": serialize_resume(save_resume(db, user, body.content))}


@router.post("/improve")
def improve(
    body: ImproveRequest,
    generator: StructuredGenerationClient = Depends(get_generator),
    user: User = Depends(get_current_user),
):
    improved = improve_resume_content(
        generator,
        section_type=body.type.strip(),
        current=body.current.strip(),
        industry=user.industry,
    )
    return {"content": improved}
