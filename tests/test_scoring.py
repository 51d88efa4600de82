import pytest

from app.agents.schemas import QuizQuestion
from app.interview.scoring import score_quiz


def q(text, correct):
    return QuizQuestion(question=text, options=["4", "3", "5", "22"], correct_answer=correct, explanation="")


def test_score_counts_exact_matches():
    questions = [q("2+2?", "4"), q("1+2?", "3"), q("2+3?", "5")]

    scored = score_quiz(questions, ["4", "3", "22"])

    assert scored.score == 2
    assert scored.total_questions == 3
    assert [r.is_correct for r in scored.results] == [True, True, False]
    assert [r.question for r in scored.wrong_answers] == ["2+3?"]


def test_score_is_case_sensitive():
    questions = [QuizQuestion(question="Lang?", options=["Python", "python", "Go", "C"], correct_answer="Python")]

    assert score_quiz(questions, ["python"]).score == 0
    assert score_quiz(questions, ["Python"]).score == 1


def test_results_keep_expected_and_user_answers():
    scored = score_quiz([q("2+2?", "4")], ["3"])

    assert scored.results_json() == [
        {"question": "2+2?", "answer": "4", "user_answer": "3", "is_correct": False, "explanation": ""}
    ]


def test_mismatched_lengths_are_rejected():
    with pytest.raises(ValueError):
        score_quiz([q("2+2?", "4")], [])
