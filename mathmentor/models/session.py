"""Database model for play sessions."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class QuizSession(SQLModel, table=True):
    """A play session; the table is provisioned but nothing writes to it yet."""

    __tablename__ = "sessions"

    id: str = ORMField(default_factory=lambda: uuid.uuid4().hex, primary_key=True)
    user_id: Optional[str] = ORMField(default=None, foreign_key="users.id", index=True)
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["QuizSession"]
