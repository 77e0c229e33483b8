"""Database model exports."""

from .session import QuizSession
from .user import User

__all__ = [
    "QuizSession",
    "User",
]
