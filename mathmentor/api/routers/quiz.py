"""Quiz question endpoint."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from ...services.quiz import generate_question

router = APIRouter(prefix="/api", tags=["quiz"])


@router.get("/quiz/question")
def next_question(mode: str = "mixed") -> Dict[str, Any]:
    """A fresh question; ``mode`` is mixed, arithmetic or geometry."""

    return generate_question(mode).to_dict()


__all__ = ["router"]
