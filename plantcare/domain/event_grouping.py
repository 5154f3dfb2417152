"""
Environmental Event Grouping
============================
Groups environmental readings into time buckets whose width depends on how
dense the readings are, so busy sensor feeds collapse into hourly or daily
summaries while sparse manual logs stay one row per reading.

Bucket width:
    events/day > 10        -> 3600 s  (hourly)
    events/day * 7 > 100   -> 86400 s (daily)
    otherwise              -> 0       (no grouping)

Bucket keys are left-aligned on UTC epoch seconds: floor(t / w) * w.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, Sequence, TypeVar

from plantcare.constants import SECONDS_PER_DAY, GroupingIntervals
from plantcare.domain.plant import EnvironmentalReading, Event
from plantcare.enums import EventType
from plantcare.utils.time import epoch_seconds, floor_to_interval

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _values(readings: Iterable[EnvironmentalReading], attr: str) -> list[float]:
    return [value for value in (getattr(r, attr) for r in readings) if value is not None]


def _avg(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


@dataclass
class EnvironmentalEventGroup:
    """Readings that share a time bucket, with per-channel aggregates.

    Channels missing from a reading are ignored; a channel missing from
    every reading aggregates to 0.
    """

    timestamp: datetime
    readings: list[EnvironmentalReading]
    grouping_interval: int
    events: list[Event] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.readings)

    @property
    def avg_temperature(self) -> float:
        return _avg(_values(self.readings, "temperature_f"))

    @property
    def min_temperature(self) -> float:
        return min(_values(self.readings, "temperature_f"), default=0.0)

    @property
    def max_temperature(self) -> float:
        return max(_values(self.readings, "temperature_f"), default=0.0)

    @property
    def avg_humidity(self) -> float:
        return _avg(_values(self.readings, "humidity_percent"))

    @property
    def min_humidity(self) -> float:
        return min(_values(self.readings, "humidity_percent"), default=0.0)

    @property
    def max_humidity(self) -> float:
        return max(_values(self.readings, "humidity_percent"), default=0.0)

    @property
    def avg_vpd(self) -> float:
        return _avg(_values(self.readings, "vpd_kpa"))

    @property
    def min_vpd(self) -> float:
        return min(_values(self.readings, "vpd_kpa"), default=0.0)

    @property
    def max_vpd(self) -> float:
        return max(_values(self.readings, "vpd_kpa"), default=0.0)

    def summary(self) -> str:
        """Human-readable one-liner; empty for ungrouped readings."""
        if self.grouping_interval == GroupingIntervals.HOURLY:
            label = "Hourly"
        elif self.grouping_interval == GroupingIntervals.DAILY:
            label = "Daily"
        else:
            return ""
        return (
            f"{label}: Temp: {self.min_temperature:.0f}-{self.max_temperature:.0f}°F, "
            f"RH: {int(self.min_humidity)}-{int(self.max_humidity)}%, "
            f"VPD: {self.avg_vpd:.1f} kPa"
        )


class EventGrouper:
    """Density-adaptive time bucketing of environmental readings."""

    @staticmethod
    def determine_grouping_interval(timestamps: Sequence[datetime]) -> int:
        """
        Pick the bucket width for a set of timestamps.

        The span is measured in days and floored at one day, so a burst of
        readings inside a few minutes counts as "per day".
        """
        if not timestamps:
            return GroupingIntervals.NONE

        seconds = [epoch_seconds(ts) for ts in timestamps]
        days_span = (max(seconds) - min(seconds)) / SECONDS_PER_DAY
        events_per_day = len(seconds) / max(days_span, 1)

        if events_per_day > GroupingIntervals.HOURLY_EVENTS_PER_DAY:
            return GroupingIntervals.HOURLY
        if events_per_day * 7 > GroupingIntervals.DAILY_EVENTS_PER_WEEK:
            return GroupingIntervals.DAILY
        return GroupingIntervals.NONE

    @classmethod
    def _bucket(
        cls,
        items: Sequence[T],
        timestamp_of: Callable[[T], datetime],
    ) -> tuple[int, list[tuple[datetime, list[T]]]]:
        interval = cls.determine_grouping_interval([timestamp_of(item) for item in items])

        if interval == GroupingIntervals.NONE:
            buckets = [(timestamp_of(item), [item]) for item in items]
        else:
            grouped: dict[datetime, list[T]] = {}
            for item in items:
                key = floor_to_interval(timestamp_of(item), interval)
                grouped.setdefault(key, []).append(item)
            buckets = list(grouped.items())

        buckets.sort(key=lambda bucket: epoch_seconds(bucket[0]), reverse=True)
        logger.debug("Grouped %d item(s) into %d bucket(s) (interval=%ss)", len(items), len(buckets), interval)
        return interval, buckets

    @classmethod
    def group_readings(cls, readings: Sequence[EnvironmentalReading]) -> list[EnvironmentalEventGroup]:
        """Group bare readings, most recent bucket first."""
        if not readings:
            return []
        interval, buckets = cls._bucket(readings, lambda r: r.timestamp)
        return [
            EnvironmentalEventGroup(timestamp=key, readings=members, grouping_interval=interval)
            for key, members in buckets
        ]

    @classmethod
    def group_events(cls, events: Sequence[Event]) -> list[EnvironmentalEventGroup]:
        """Group the environment events of a diary, most recent bucket first.

        Events of other types, and environment events without a reading,
        are ignored.
        """
        env_events = [e for e in events if e.type is EventType.ENVIRONMENT and e.environmental_data is not None]
        if not env_events:
            return []
        interval, buckets = cls._bucket(env_events, lambda e: e.timestamp)
        return [
            EnvironmentalEventGroup(
                timestamp=key,
                readings=[e.environmental_data for e in members],
                grouping_interval=interval,
                events=members,
            )
            for key, members in buckets
        ]
