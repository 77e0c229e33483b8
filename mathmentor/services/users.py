"""User lookup, stat updates and leaderboard queries."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy import and_, or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, func, select

from ..core import MAX_NAME_LENGTH, UserNotFound, ValidationError, utcnow
from ..models import User
from .stats import apply_answer, reset_stats

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value.
MAX_XP = 2**63 - 1


def normalize_name(name: Any) -> str:
    """Trim an inbound display name and enforce storage rules."""

    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name is required")
    normalized = name.strip()
    if len(normalized) > MAX_NAME_LENGTH:
        raise ValidationError(f"Name must be {MAX_NAME_LENGTH} characters or less")
    return normalized


def parse_answer(correct: Any, xp_gained: Any) -> tuple[bool, int]:
    """Validate a stats payload, returning ``(correct, xp_gained)``.

    ``xp_gained`` must be a non-negative whole number; ``True``/``False``
    are not accepted as numbers.
    """

    if not isinstance(correct, bool):
        raise ValidationError("Invalid data provided")
    if isinstance(xp_gained, bool) or not isinstance(xp_gained, (int, float)):
        raise ValidationError("Invalid data provided")
    if isinstance(xp_gained, float) and not xp_gained.is_integer():
        raise ValidationError("Invalid data provided")
    if xp_gained < 0 or xp_gained > MAX_XP:
        raise ValidationError("Invalid data provided")
    return correct, int(xp_gained)


def _find_by_name(session: Session, name: str) -> User | None:
    return session.exec(select(User).where(User.name_key == name.lower())).first()


def create_or_get(session: Session, name: Any) -> User:
    """Return the user called ``name`` (case-insensitive), creating it if absent.

    The insert is attempted first; the unique ``name_key`` index rejects
    it when the player already exists and the stored record is returned.
    """

    normalized = normalize_name(name)
    now = utcnow()
    user = User(
        name=normalized,
        name_key=normalized.lower(),
        last_played=now,
        created_at=now,
    )
    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        existing = _find_by_name(session, normalized)
        if existing is None:
            raise
        logger.debug("Returning player %s (%s)", existing.name, existing.id)
        return existing

    session.refresh(user)
    logger.info("Created user %s (%s)", user.name, user.id)
    return user


def get_user(session: Session, user_id: str) -> User:
    user = session.get(User, user_id)
    if not user:
        raise UserNotFound(user_id)
    return user


def update_stats(session: Session, user_id: str, correct: Any, xp_gained: Any) -> User:
    """Record one answered question for ``user_id`` and return the updated user."""

    correct, xp_gained = parse_answer(correct, xp_gained)
    user = get_user(session, user_id)
    if user.xp + xp_gained > MAX_XP:
        raise ValidationError("Invalid data provided")
    apply_answer(user, correct, xp_gained, utcnow())
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def reset_user(session: Session, user_id: str) -> User:
    user = get_user(session, user_id)
    reset_stats(user, utcnow())
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("Reset stats for user %s", user_id)
    return user


def get_leaderboard(session: Session, limit: int) -> List[Dict[str, Any]]:
    """Top ``limit`` players by xp, then accuracy; rank is the list position."""

    users = session.exec(
        select(User)
        .order_by(
            User.xp.desc(),
            User.accuracy.desc(),
            User.created_at.asc(),
            User.id,
        )
        .limit(limit)
    ).all()

    return [
        {
            "id": user.id,
            "name": user.name,
            "xp": user.xp,
            "accuracy": user.accuracy,
            "totalQuestions": user.total_questions,
            "rank": index + 1,
        }
        for index, user in enumerate(users)
    ]


def get_user_rank(session: Session, user_id: str) -> int:
    """1 + the number of players strictly ahead of ``user_id``."""

    user = get_user(session, user_id)
    ahead = session.exec(
        select(func.count())
        .select_from(User)
        .where(
            or_(
                User.xp > user.xp,
                and_(User.xp == user.xp, User.accuracy > user.accuracy),
            )
        )
    ).one()
    return int(ahead) + 1


def count_users(session: Session) -> int:
    return int(session.exec(select(func.count()).select_from(User)).one())


__all__ = [
    "count_users",
    "create_or_get",
    "get_leaderboard",
    "get_user",
    "get_user_rank",
    "normalize_name",
    "parse_answer",
    "reset_user",
    "update_stats",
]
