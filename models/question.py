# models/question.py
from pydantic import AfterValidator, BaseModel, Field, field_validator
from typing import Annotated, List, Optional

from settings import CATEGORIES, DIFFICULTIES


def _normalize_category(value: str) -> str:
    category = value.strip().lower()
    if category not in CATEGORIES:
        raise ValueError(f"Category must be one of {', '.join(CATEGORIES)}")
    return category


def _require_text(value: str) -> str:
    text = value.strip()
    if not text:
        raise ValueError("Text must not be blank")
    return text


def _normalize_difficulty(value: str) -> str:
    difficulty = value.strip().lower()
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Difficulty must be one of {', '.join(DIFFICULTIES)}")
    return difficulty


Category = Annotated[str, AfterValidator(_normalize_category)]
Difficulty = Annotated[str, AfterValidator(_normalize_difficulty)]
RequiredText = Annotated[str, AfterValidator(_require_text)]


class Option(BaseModel):
    text: RequiredText
    isCorrect: bool = False


class QuestionCreate(BaseModel):
    category: Category
    questionText: RequiredText
    options: List[Option] = []
    marks: int = Field(1, ge=1, le=10)
    difficulty: Difficulty = "medium"


class QuestionUpdate(BaseModel):
    category: Optional[Category] = None
    questionText: Optional[RequiredText] = None
    options: Optional[List[Option]] = None
    marks: Optional[int] = Field(None, ge=1, le=10)
    difficulty: Optional[Difficulty] = None

    @field_validator("options")
    @classmethod
    def require_two_options(cls, value):
        if value is not None and len(value) < 2:
            raise ValueError("At least 2 options are required")
        return value


def has_correct_option(options: List[dict]) -> bool:
    return any(option.get("isCorrect") for option in options)


def public_question(question: dict) -> dict:
    """Question as handed to a student: correctness flags removed."""
    return {
        "id": question["id"],
        "category": question["category"],
        "questionText": question["questionText"],
        "options": [{"text": option["text"]} for option in question.get("options", [])],
        "marks": question.get("marks") or 1,
        "difficulty": question.get("difficulty", "medium"),
    }
