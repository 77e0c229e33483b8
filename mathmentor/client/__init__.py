"""Client-side helpers for quiz front ends."""

from .api import ApiClient, ApiError
from .context import CURRENT_USER_KEY, UserContext
from .storage import JsonFileStore, MemoryStore

__all__ = [
    "ApiClient",
    "ApiError",
    "CURRENT_USER_KEY",
    "JsonFileStore",
    "MemoryStore",
    "UserContext",
]
