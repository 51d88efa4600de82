## Quiz scoring
from dataclasses import asdict, dataclass, field
from typing import List, Sequence

from app.agents.schemas import QuizQuestion


@dataclass(frozen=True)
class QuestionResult:
    question: str
    answer: str
    user_answer: str
    is_correct: bool
    explanation: str


@dataclass(frozen=True)
class QuizScore:
    score: int
    total_questions: int
    results: List[QuestionResult] = field(default_factory=list)

    @property
    def wrong_answers(self) -> List[QuestionResult]:
        return [r for r in self.results if not r.is_correct]

    def results_json(self) -> List[dict]:
        return [asdict(r) for r in self.results]


def score_quiz(questions: Sequence[QuizQuestion], answers: Sequence[str]) -> QuizScore:
    """Exact, case-sensitive match per question; no partial credit."""
    if len(questions) != len(answers):
        raise ValueError(f"Expected {len(questions)} answers, got {len(answers)}")

    results = [
        QuestionResult(
            question=q.question,
            answer=q.correct_answer,
            user_answer=a,
            is_correct=(a == q.correct_answer),
            explanation=q.explanation,
        )
        for q, a in zip(questions, answers)
    ]
    return QuizScore(
        score=sum(1 for r in results if r.is_correct),
        total_questions=len(questions),
        results=results,
    )
