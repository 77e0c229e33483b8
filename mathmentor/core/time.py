"""Timestamp helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def isoformat_z(value: Optional[datetime]) -> Optional[str]:
    """Render a UTC datetime as ``2024-01-01T12:00:00.000Z``.

    SQLite hands datetimes back without tzinfo; those are taken as UTC.
    """
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


__all__ = ["isoformat_z", "utcnow"]
