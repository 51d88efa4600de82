## Quiz generation, submission and history
import logging
from dataclasses import asdict
from typing import Any, Dict, List, Sequence

from sqlalchemy.orm import Session

from app.agents.interview import FALLBACK_QUIZ, generate_improvement_tip, generate_quiz_questions
from app.agents.schemas import QuizQuestion
from app.agents.structured import StructuredGenerationClient
from app.db.models.assessment import Assessment
from app.db.models.user import User
from app.db.persist import as_utc, commit_or_raise
from app.interview.scoring import score_quiz
from app.settings import settings

logger = logging.getLogger(__name__)

QUIZ_CATEGORY = "Technical"


def generate_quiz(generator: StructuredGenerationClient, user: User | None) -> List[QuizQuestion]:
    if user is None:
        # Anonymous callers get the static quiz; no model call
        return list(FALLBACK_QUIZ.questions)

    result = generate_quiz_questions(
        generator,
        industry=user.industry,
        skills=user.skills or [],
        count=settings.quiz_question_count,
    )
    if result.is_fallback:
        logger.warning("Using fallback quiz for user=%s (%s)", user.id, result.error)
    return list(result.value.questions)


def submit_quiz(
    db: Session,
    generator: StructuredGenerationClient,
    user: User,
    questions: Sequence[QuizQuestion],
    answers: Sequence[str],
) -> Assessment:
    scored = score_quiz(questions, answers)

    improvement_tip = None
    if scored.wrong_answers:
        improvement_tip = generate_improvement_tip(
            generator,
            user.industry,
            [asdict(r) for r in scored.wrong_answers],
        )

    assessment = Assessment(
        user_id=user.id,
        score=scored.score,
        total_questions=scored.total_questions,
        results=scored.results_json(),
        category=QUIZ_CATEGORY,
        improvement_tip=improvement_tip,
    )
    db.add(assessment)
    commit_or_raise(db, "Failed to save quiz result")
    logger.info("Saved assessment %s for user=%s score=%d/%d",
        assessment.id, user.id, scored.score, scored.total_questions)
    return assessment


def list_assessments(db: Session, user: User) -> List[Assessment]:
    return (
        db.query(Assessment)
        .filter(Assessment.user_id == user.id)
        .order_by(Assessment.created_at.desc())
        .all()
    )


def _percent(a: Assessment) -> float:
    if not a.total_questions:
        return 0.0
    return a.score / a.total_questions * 100


def assessment_stats(assessments: Sequence[Assessment]) -> Dict[str, Any]:
    """Aggregates for the interview dashboard. Input order does not matter."""
    if not assessments:
        return {
            "total_assessments": 0,
            "average_score": 0.0,
            "questions_answered": 0,
            "accuracy_rate": 0.0,
            "latest_score": None,
            "trend": [],
        }

    chronological = sorted(assessments, key=lambda a: as_utc(a.created_at))
    total_questions = sum(a.total_questions for a in assessments)
    total_correct = sum(a.score for a in assessments)

    return {
        "total_assessments": len(assessments),
        "average_score": round(sum(_percent(a) for a in assessments) / len(assessments), 1),
        "questions_answered": total_questions,
        "accuracy_rate": round(total_correct / total_questions * 100, 1) if total_questions else 0.0,
        "latest_score": round(_percent(chronological[-1]), 1),
        "trend": [
            {"date": as_utc(a.created_at).strftime("%b %d"), "score": round(_percent(a), 1)}
            for a in chronological
        ],
    }


def serialize_assessment(a: Assessment) -> Dict[str, Any]:
    return {
        "id": str(a.id),
        "score": a.score,
        "total_questions": a.total_questions,
        "results": a.results,
        "category": a.category,
        "improvement_tip": a.improvement_tip,
        "created_at": as_utc(a.created_at).isoformat(),
    }
