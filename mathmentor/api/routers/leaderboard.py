"""Leaderboard endpoints."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import LEADERBOARD_DEFAULT_LIMIT, LEADERBOARD_MAX_LIMIT, get_session
from ...services.users import get_leaderboard

router = APIRouter(prefix="/api", tags=["leaderboard"])

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_limit(raw: Optional[str]) -> int:
    """Lenient ``limit`` parsing.

    Only the leading integer counts (``"2abc"`` and ``"1.5"`` read as 2 and 1);
    junk, zero or negatives fall back to the default.
    """

    match = _LEADING_INT.match(raw) if raw is not None else None
    limit = int(match.group(1)) if match else LEADERBOARD_DEFAULT_LIMIT
    if limit < 1:
        limit = LEADERBOARD_DEFAULT_LIMIT
    return min(limit, LEADERBOARD_MAX_LIMIT)


@router.get("/leaderboard")
def leaderboard(
    limit: Optional[str] = None, session: Session = Depends(get_session)
) -> List[Dict[str, Any]]:
    """Top players by xp, then accuracy, with 1-based ranks."""

    return get_leaderboard(session, _parse_limit(limit))


__all__ = ["router"]
