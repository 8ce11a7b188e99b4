# services/scoring.py
from typing import Dict, List, Optional

from services.category_status import question_marks


def correct_option_text(question: dict) -> Optional[str]:
    for option in question.get("options", []):
        if option.get("isCorrect"):
            return option.get("text")
    return None


def percentage_of(marks_obtained: int, marks_possible: int) -> float:
    if marks_possible <= 0:
        return 0.0
    return marks_obtained * 100 / marks_possible


def score_quiz(
    questions: List[dict],
    answers: Dict[str, Optional[str]],
    total_questions: int,
    passing_percentage: float,
) -> dict:
    """Score a submission against the first ``total_questions`` questions.

    ``answers`` maps question id to the chosen option text. An answer counts
    only when it equals the correct option's text exactly.
    """
    checked = questions[:min(len(questions), total_questions)]

    correct = 0
    marks_obtained = 0
    marks_possible = 0
    for question in checked:
        marks = question_marks(question)
        marks_possible += marks

        answer = answers.get(question["id"])
        if not answer:
            continue
        expected = correct_option_text(question)
        if expected is not None and expected == answer:
            correct += 1
            marks_obtained += marks

    percentage = percentage_of(marks_obtained, marks_possible)
    return {
        "score": correct,
        "marksObtained": marks_obtained,
        "totalMarks": marks_possible,
        "percentage": percentage,
        "totalQuestions": len(checked),
        "passed": percentage >= passing_percentage,
    }
