"""Service layer helpers."""

from .quiz import generate_question, xp_for_answer
from .stats import apply_answer, calculate_accuracy, reset_stats
from .users import (
    count_users,
    create_or_get,
    get_leaderboard,
    get_user,
    get_user_rank,
    reset_user,
    update_stats,
)

__all__ = [
    "apply_answer",
    "calculate_accuracy",
    "count_users",
    "create_or_get",
    "generate_question",
    "get_leaderboard",
    "get_user",
    "get_user_rank",
    "reset_stats",
    "reset_user",
    "update_stats",
    "xp_for_answer",
]
