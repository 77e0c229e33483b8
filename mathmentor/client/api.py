"""
Leaderboard API Client
HTTP communication with the MathMentor backend.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from ..core import API_BASE_URL, MathMentorError


class ApiError(MathMentorError):
    """Non-2xx response from the backend."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    """Thin wrapper over the REST endpoints; every call returns decoded JSON."""

    def __init__(self, http: Optional[httpx.Client] = None, base_url: str = API_BASE_URL):
        self.http = http or httpx.Client(timeout=20)
        self.base_url = base_url.rstrip("/")

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        r = self.http.request(method, f"{self.base_url}{path}", **kwargs)
        if r.is_error:
            try:
                payload = r.json()
            except ValueError:
                payload = None
            detail = payload.get("detail") if isinstance(payload, dict) else None
            raise ApiError(r.status_code, str(detail or f"HTTP {r.status_code}"))
        return r.json()

    def create_user(self, name: str) -> Dict[str, Any]:
        return self._request("POST", "/users", json={"name": name})

    def get_user(self, user_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/users/{user_id}")

    def update_user_stats(self, user_id: str, correct: bool, xp_gained: int = 0) -> Dict[str, Any]:
        return self._request(
            "PUT", f"/users/{user_id}/stats", json={"correct": correct, "xpGained": xp_gained}
        )

    def get_leaderboard(self, limit: int = 10) -> List[Dict[str, Any]]:
        return self._request("GET", "/leaderboard", params={"limit": limit})

    def get_user_rank(self, user_id: str) -> int:
        return self._request("GET", f"/users/{user_id}/rank")["rank"]

    def reset_user_data(self, user_id: str) -> None:
        self._request("PUT", f"/users/{user_id}/reset")

    def get_user_count(self) -> int:
        return self._request("GET", "/users/count")["count"]

    def health_check(self) -> Dict[str, str]:
        return self._request("GET", "/health")

    def get_question(self, mode: str = "mixed") -> Dict[str, Any]:
        return self._request("GET", "/quiz/question", params={"mode": mode})

    def close(self) -> None:
        self.http.close()


__all__ = ["ApiClient", "ApiError"]
