"""Aggregate API routers."""

from fastapi import APIRouter

from .leaderboard import router as leaderboard_router
from .quiz import router as quiz_router
from .system import router as system_router
from .users import router as users_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    users_router,
    leaderboard_router,
    quiz_router,
)

__all__ = ["ALL_ROUTERS"]
