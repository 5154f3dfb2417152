"""
Watering Domain Objects
=======================
Dataclasses for the per-plant watering schedule.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class IntervalBounds:
    """Allowed watering interval for a (stage, substrate) pair, in days."""

    min: int
    default: int
    max: int

    def clamp(self, interval_days: int) -> int:
        return max(self.min, min(self.max, interval_days))

    def contains(self, interval_days: int) -> bool:
        return self.min <= interval_days <= self.max


@dataclass
class WateringState:
    """Watering schedule of one plant.

    ``next_watering_date`` is derived (last + interval) and is ``None``
    until a watering has been recorded.
    """

    plant_id: UUID
    interval_days: int
    last_watering_date: datetime | None = None
    next_watering_date: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "plant_id": str(self.plant_id),
            "interval_days": self.interval_days,
            "last_watering_date": self.last_watering_date.isoformat() if self.last_watering_date else None,
            "next_watering_date": self.next_watering_date.isoformat() if self.next_watering_date else None,
        }


@dataclass(frozen=True)
class WateringStatus:
    """User-facing summary of when a plant needs water."""

    next_watering_date: datetime
    days_until_watering: int
    is_overdue: bool

    @property
    def message(self) -> str:
        if self.is_overdue:
            days = abs(self.days_until_watering)
            return "Water overdue by 1 day" if days == 1 else f"Water overdue by {days} days"
        if self.days_until_watering == 0:
            return "Water today"
        if self.days_until_watering == 1:
            return "Water in 1 day"
        return f"Water in {self.days_until_watering} days"
