"""Database model for quiz players."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import isoformat_z, utcnow


def new_user_id() -> str:
    return uuid.uuid4().hex


class User(SQLModel, table=True):
    """Player identified by display name, carrying their running quiz stats."""

    __tablename__ = "users"

    id: str = ORMField(default_factory=new_user_id, primary_key=True)
    name: str
    # Lower-cased name; the unique index makes find-or-create case-insensitive.
    name_key: str = ORMField(index=True, unique=True)
    xp: int = ORMField(default=0, index=True)
    total_questions: int = 0
    correct_answers: int = 0
    accuracy: int = 0
    last_played: datetime = ORMField(default_factory=utcnow)
    created_at: datetime = ORMField(default_factory=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "xp": self.xp,
            "totalQuestions": self.total_questions,
            "correctAnswers": self.correct_answers,
            "accuracy": self.accuracy,
            "lastPlayed": isoformat_z(self.last_played),
            "createdAt": isoformat_z(self.created_at),
        }


__all__ = ["User", "new_user_id"]
