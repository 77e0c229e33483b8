"""Current-player state for quiz front ends."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..services.quiz import xp_for_answer
from .api import ApiClient, ApiError
from .storage import MemoryStore

logger = logging.getLogger(__name__)

CURRENT_USER_KEY = "mathmentor_current_user"

# Failures the context knows how to report: backend errors and transport errors.
_API_FAILURES = (ApiError, httpx.HTTPError)


class UserContext:
    """The signed-in player and a local copy of their last-known record.

    Create one per front end and pass it to whatever needs the player; the
    cached record is rewritten after every successful mutating call and
    left untouched when a call fails.
    """

    def __init__(self, api: ApiClient, store: Any = None):
        self.api = api
        self.store = store if store is not None else MemoryStore()
        self._user: Optional[Dict[str, Any]] = None
        self._load()

    # Persistence ------------------------------------------------------------

    def _load(self) -> None:
        try:
            stored = self.store.get_item(CURRENT_USER_KEY)
            self._user = json.loads(stored) if stored else None
        except (OSError, ValueError) as exc:
            logger.error("Failed to load current user: %s", exc)
            self._user = None

    def _save(self) -> None:
        try:
            if self._user is not None:
                self.store.set_item(CURRENT_USER_KEY, json.dumps(self._user))
            else:
                self.store.remove_item(CURRENT_USER_KEY)
        except (OSError, ValueError) as exc:
            logger.error("Failed to save current user: %s", exc)

    # Accessors --------------------------------------------------------------

    @property
    def current_user(self) -> Optional[Dict[str, Any]]:
        return self._user

    def has_user(self) -> bool:
        return self._user is not None

    # Mutations --------------------------------------------------------------

    def create_user(self, name: str) -> Dict[str, Any]:
        try:
            user = self.api.create_user(name)
        except _API_FAILURES as exc:
            logger.error("Failed to create user: %s", exc)
            raise
        self._user = user
        self._save()
        return user

    def update_stats(self, correct: bool, xp_gained: int = 0) -> None:
        if self._user is None:
            return
        try:
            updated = self.api.update_user_stats(self._user["id"], correct, xp_gained)
        except _API_FAILURES as exc:
            logger.error("Failed to update user stats: %s", exc)
            raise
        self._user = updated
        self._save()

    def answer(self, question: Dict[str, Any], option_index: int) -> bool:
        """Judge a picked option, award XP for it and record it on the server."""

        correct = option_index == question["correctAnswer"]
        self.update_stats(correct, xp_for_answer(question["type"], correct))
        return correct

    def reset_user_data(self) -> None:
        if self._user is None:
            return
        try:
            self.api.reset_user_data(self._user["id"])
            refreshed = self.api.get_user(self._user["id"])
        except _API_FAILURES as exc:
            logger.error("Failed to reset user data: %s", exc)
            raise
        self._user = refreshed
        self._save()

    def logout(self) -> None:
        self._user = None
        self._save()

    # Reads that degrade to empty results ------------------------------------

    def get_leaderboard(self, limit: int = 10) -> List[Dict[str, Any]]:
        try:
            return self.api.get_leaderboard(limit)
        except _API_FAILURES as exc:
            logger.error("Failed to get leaderboard: %s", exc)
            return []

    def get_user_rank(self, user_id: Optional[str] = None) -> int:
        user_id = user_id or (self._user["id"] if self._user else None)
        if user_id is None:
            return 0
        try:
            return self.api.get_user_rank(user_id)
        except _API_FAILURES as exc:
            logger.error("Failed to get user rank: %s", exc)
            return 0

    def get_user_count(self) -> int:
        try:
            return self.api.get_user_count()
        except _API_FAILURES as exc:
            logger.error("Failed to get user count: %s", exc)
            return 0


__all__ = ["CURRENT_USER_KEY", "UserContext"]
