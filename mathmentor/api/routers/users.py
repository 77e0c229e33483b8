"""User creation, stats and maintenance endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import users as user_service

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/users")
def create_or_get_user(
    body: Dict[str, Any] = Body(...), session: Session = Depends(get_session)
):
    """Log in an existing player by name, or register a new one."""

    user = user_service.create_or_get(session, body.get("name"))
    return user.to_dict()


# Declared before /users/{user_id} so "count" is not taken for an id.
@router.get("/users/count")
def count_users(session: Session = Depends(get_session)) -> Dict[str, int]:
    return {"count": user_service.count_users(session)}


@router.get("/users/{user_id}")
def get_user(user_id: str, session: Session = Depends(get_session)):
    return user_service.get_user(session, user_id).to_dict()


@router.put("/users/{user_id}/stats")
def update_user_stats(
    user_id: str,
    body: Dict[str, Any] = Body(...),
    session: Session = Depends(get_session),
):
    """Record one answered question and return the refreshed user."""

    user = user_service.update_stats(
        session, user_id, body.get("correct"), body.get("xpGained")
    )
    return user.to_dict()


@router.get("/users/{user_id}/rank")
def get_user_rank(user_id: str, session: Session = Depends(get_session)) -> Dict[str, int]:
    return {"rank": user_service.get_user_rank(session, user_id)}


@router.put("/users/{user_id}/reset")
def reset_user(user_id: str, session: Session = Depends(get_session)) -> Dict[str, str]:
    """Zero a player's xp and counters; identity and createdAt are kept."""

    user_service.reset_user(session, user_id)
    return {"message": "User data reset successfully"}


__all__ = ["router"]
