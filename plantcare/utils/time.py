"""Utility functions for time handling.

All timestamps should be UTC and timezone-aware. Bucket keys and day
arithmetic work on absolute instants (epoch seconds), never on the local
wall clock.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Any

from plantcare.constants import SECONDS_PER_DAY


def utc_now() -> datetime:
    """Return current UTC time as an aware datetime."""
    return datetime.now(timezone.utc)


def ensure_aware(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def epoch_seconds(dt: datetime) -> float:
    """Seconds since the Unix epoch for an (assumed UTC if naive) datetime."""
    return ensure_aware(dt).timestamp()


def from_epoch_seconds(seconds: float) -> datetime:
    """Aware UTC datetime from epoch seconds."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def floor_to_interval(dt: datetime, interval_seconds: float) -> datetime:
    """Left-aligned bucket start for ``dt``; a zero interval returns ``dt`` unchanged."""
    if interval_seconds <= 0:
        return dt
    seconds = epoch_seconds(dt)
    return from_epoch_seconds(math.floor(seconds / interval_seconds) * interval_seconds)


def add_days(dt: datetime, days: int) -> datetime:
    """Shift ``dt`` by a whole number of days."""
    return dt + timedelta(days=days)


def whole_days_between(start: datetime, end: datetime) -> int:
    """Full days elapsed from ``start`` to ``end``, truncated toward zero."""
    delta = epoch_seconds(end) - epoch_seconds(start)
    return int(delta / SECONDS_PER_DAY)


def coerce_datetime(value: Any) -> datetime | None:
    """
    Coerce value to datetime, returning None on failure.

    Args:
        value: String or datetime to coerce

    Returns:
        Datetime in timezone.utc or None if invalid
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw.replace("Z", "+00:00")
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    else:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return parsed
