# models/config.py
from pydantic import BaseModel
from datetime import datetime
from typing import Dict, Optional

# field -> (min, max, message)
CONFIG_LIMITS = {
    "quizTime": (1, 180, "Quiz time must be between 1 and 180 minutes"),
    "passingPercentage": (0, 100, "Passing percentage must be between 0 and 100"),
    "totalQuestions": (1, 200, "Total questions must be between 1 and 200"),
    "maxMarks": (10, 500, "Maximum marks must be between 10 and 500"),
}


class QuizConfig(BaseModel):
    id: Optional[str] = None
    quizTime: int = 30  # minutes
    passingPercentage: float = 40
    totalQuestions: int = 100
    maxMarks: int = 100
    categoryStatus: Dict[str, bool] = {}
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class ConfigUpdate(BaseModel):
    quizTime: Optional[int] = None
    passingPercentage: Optional[float] = None
    totalQuestions: Optional[int] = None
    maxMarks: Optional[int] = None

    def missing_fields(self):
        return [field for field in CONFIG_LIMITS if getattr(self, field) is None]

    def range_error(self) -> Optional[str]:
        for field, (low, high, message) in CONFIG_LIMITS.items():
            value = getattr(self, field)
            if value < low or value > high:
                return message
        return None
