"""Per-user stat bookkeeping."""

from __future__ import annotations

from datetime import datetime

from ..models import User


def calculate_accuracy(correct_answers: int, total_questions: int) -> int:
    """Percentage of correct answers, rounded half up; 0 before any answer."""

    if total_questions <= 0:
        return 0
    return (correct_answers * 200 + total_questions) // (2 * total_questions)


def apply_answer(user: User, correct: bool, xp_gained: int, now: datetime) -> User:
    """Record one answered question on ``user`` in place."""

    user.total_questions += 1
    if correct:
        user.correct_answers += 1
    user.xp += xp_gained
    user.accuracy = calculate_accuracy(user.correct_answers, user.total_questions)
    user.last_played = now
    return user


def reset_stats(user: User, now: datetime) -> User:
    user.xp = 0
    user.total_questions = 0
    user.correct_answers = 0
    user.accuracy = calculate_accuracy(0, 0)
    user.last_played = now
    return user


__all__ = ["apply_answer", "calculate_accuracy", "reset_stats"]
