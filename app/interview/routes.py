# Interview prep API: quiz generation, submission, history
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.agents.schemas import QuizQuestion
from app.agents.structured import StructuredGenerationClient
from app.auth.deps import get_current_user, get_optional_user
from app.db.models.user import User
from app.deps import get_db, get_generator
from app.errors import InvalidRequest
from app.interview.service import (
    assessment_stats,
    generate_quiz,
    list_assessments,
    serialize_assessment,
    submit_quiz,
)

router = APIRouter(prefix="/api/interview")


class SubmitQuizRequest(BaseModel):
    questions: List[QuizQuestion]
    answers: List[str]


@router.post("/quiz")
def create_quiz(
    generator: StructuredGenerationClient = Depends(get_generator),
    user: User | None = Depends(get_optional_user),
):
    questions = generate_quiz(generator, user)
    return {"questions": [q.model_dump() for q in questions]}


@router.post("/assessments", status_code=201)
def submit_assessment(
    body: SubmitQuizRequest,
    db: Session = Depends(get_db),
    generator: StructuredGenerationClient = Depends(get_generator),
    user: User = Depends(get_current_user),
):
    if not body.questions:
        raise InvalidRequest("Quiz has no questions")
    try:
        assessment = submit_quiz(db, generator, user, body.questions, body.answers)
    except ValueError as e:
        raise InvalidRequest(str(e)) from e
    return serialize_assessment(assessment)


@router.get("/assessments")
def get_assessments(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return {"assessments": [serialize_assessment(a) for a in list_assessments(db, user)]}


@router.get("/stats")
def get_stats(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return assessment_stats(list_assessments(db, user))
