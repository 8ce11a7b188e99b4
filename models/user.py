# models/user.py
from pydantic import BaseModel
from datetime import datetime
from typing import Dict, Optional


class UserRegister(BaseModel):
    name: Optional[str] = None
    rollNumber: Optional[str] = None
    category: Optional[str] = None


class QuizSubmission(BaseModel):
    userId: str
    answers: Dict[str, Optional[str]] = {}  # question id -> chosen option text


class UserResult(BaseModel):
    id: str
    name: str
    rollNumber: str
    category: str
    score: int = 0  # correct answers
    percentage: float = 0
    marksObtained: int = 0
    totalMarks: int = 0
    totalQuestions: int = 0
    passed: bool = False
    submittedAt: Optional[datetime] = None
    createdAt: datetime
