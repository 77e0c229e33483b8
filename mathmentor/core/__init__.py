"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    API_BASE_URL,
    DB_PATH,
    DB_RESET,
    HOST,
    LEADERBOARD_DEFAULT_LIMIT,
    LEADERBOARD_MAX_LIMIT,
    LOG_LEVEL,
    MAX_NAME_LENGTH,
    PORT,
)
from .database import engine, get_session
from .errors import MathMentorError, QuizGenerationError, UserNotFound, ValidationError
from .logging import configure_logging
from .time import isoformat_z, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "API_BASE_URL",
    "DB_PATH",
    "DB_RESET",
    "HOST",
    "LEADERBOARD_DEFAULT_LIMIT",
    "LEADERBOARD_MAX_LIMIT",
    "LOG_LEVEL",
    "MAX_NAME_LENGTH",
    "MathMentorError",
    "PORT",
    "QuizGenerationError",
    "UserNotFound",
    "ValidationError",
    "configure_logging",
    "engine",
    "get_session",
    "isoformat_z",
    "utcnow",
]
