## Interview quiz and improvement tip generation
import logging
from typing import Sequence

from app.agents.schemas import QuizPayload, QuizQuestion
from app.agents.structured import GenerationResult, StructuredGenerationClient
from app.errors import GenerationFailure

logger = logging.getLogger(__name__)

FALLBACK_QUIZ = QuizPayload(
    questions=[
        QuizQuestion(
            question="What is the capital of France?",
            options=["Berlin", "Madrid", "Paris", "Rome"],
            correct_answer="Paris",
            explanation="Paris has been the capital of France since the 10th century.",
        )
    ]
)


def build_quiz_prompt(industry: str | None, skills: Sequence[str], count: int) -> str:
    who = f"a {industry} professional" if industry else "a professional"
    expertise = f" with expertise in {', '.join(skills)}" if skills else ""

    return f"""
Generate {count} technical interview questions for {who}{expertise}.

Each question must be multiple choice with exactly 4 options.

Output must be STRICT JSON matching this schema:
{{
  "questions": [
    {{
      "question": "string",
      "options": ["string", "string", "string", "string"],
      "correctAnswer": "string",
      "explanation": "string"
    }}
  ]
}}

Rules:
- Return ONLY valid JSON, no markdown, no extra explanation.
- "correctAnswer" must be copied exactly from "options".
""".strip()


def _answers_in_options(payload: QuizPayload) -> bool:
    return all(q.correct_answer in q.options for q in payload.questions)


def generate_quiz_questions(
    generator: StructuredGenerationClient,
    *,
    industry: str | None,
    skills: Sequence[str],
    count: int,
) -> GenerationResult[QuizPayload]:
    return generator.generate(
        build_quiz_prompt(industry, skills, count),
        schema=QuizPayload,
        default=FALLBACK_QUIZ,
        validate=_answers_in_options,
    )


def build_tip_prompt(industry: str | None, wrong_answers: Sequence[dict]) -> str:
    wrong_text = "\n\n".join(
        f'Question: "{r["question"]}"\nCorrect Answer: "{r["answer"]}"\nUser Answer: "{r["user_answer"]}"'
        for r in wrong_answers
    )
    topic = f"{industry} technical interview" if industry else "technical interview"

    return f"""
The user got the following {topic} questions wrong:

{wrong_text}

Based on these mistakes, provide a short, specific improvement tip.
Don't mention the mistakes. Focus on the topic or skill to improve.
Keep it under 2 sentences and be encouraging.
""".strip()


def generate_improvement_tip(
    generator: StructuredGenerationClient,
    industry: str | None,
    wrong_answers: Sequence[dict],
) -> str | None:
    """Supplementary output: a failure here means "no tip", not an error."""
    try:
        return generator.generate_text(build_tip_prompt(industry, wrong_answers))
    except GenerationFailure:
        logger.warning("Improvement tip unavailable; saving assessment without one")
        return None
