# models/admin.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class Admin(BaseModel):
    id: Optional[str] = None
    username: str = "admin"
    password: str = "admin123"
    email: str = "admin@shamsi.edu.pk"
    role: str = Field("admin", pattern="^(admin|super-admin)$")
    createdAt: datetime = Field(default_factory=datetime.utcnow)
    lastLogin: Optional[datetime] = None
