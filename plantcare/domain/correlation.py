"""
Event Correlation Detection
===========================
Cross-references stress events in a plant's diary with environmental
anomalies logged within four hours of them.

Every (nearby reading x exceeded condition) pair yields one correlation, so
several hot readings around the same stress event produce repeated
"During high temp period" entries. Callers that want one line per
condition should deduplicate for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence
from uuid import UUID

from plantcare.constants import CorrelationThresholds
from plantcare.domain.plant import EnvironmentalReading, Event
from plantcare.enums import EventType
from plantcare.utils.time import epoch_seconds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventCorrelation:
    """An environmental condition observed around a diary event."""

    message: str
    related_event_id: UUID | None = None


def _anomaly_messages(reading: EnvironmentalReading) -> list[str]:
    c = CorrelationThresholds
    messages = []
    if reading.temperature_f > c.HIGH_TEMP_F:
        messages.append(c.HIGH_TEMP_MESSAGE)
    if reading.humidity_percent < c.LOW_HUMIDITY_PERCENT:
        messages.append(c.LOW_HUMIDITY_MESSAGE)
    if reading.vpd_kpa > c.HIGH_VPD_KPA:
        messages.append(c.HIGH_VPD_MESSAGE)
    return messages


class CorrelationDetector:
    """Finds environmental anomalies near stress events."""

    @staticmethod
    def _detect(
        samples: Sequence[tuple[datetime, EnvironmentalReading]],
        plant_events: Sequence[Event],
    ) -> list[EventCorrelation]:
        window = CorrelationThresholds.WINDOW_SECONDS
        correlations: list[EventCorrelation] = []

        for plant_event in plant_events:
            if plant_event.type is not EventType.STRESS:
                continue
            stress_at = epoch_seconds(plant_event.timestamp)

            for sampled_at, reading in samples:
                if abs(epoch_seconds(sampled_at) - stress_at) >= window:
                    continue
                if not reading.has_all_channels:
                    continue
                correlations.extend(
                    EventCorrelation(message=message, related_event_id=plant_event.id)
                    for message in _anomaly_messages(reading)
                )

        logger.debug(
            "Detected %d correlation(s) across %d plant event(s)",
            len(correlations),
            len(plant_events),
        )
        return correlations

    @classmethod
    def detect(cls, environmental_events: Iterable[Event], plant_events: Sequence[Event]) -> list[EventCorrelation]:
        """
        Correlate stress events with nearby environmental events.

        Args:
            environmental_events: Events carrying environmental readings;
                the event timestamp is used for the window
            plant_events: Diary events; only ``stress`` events are considered

        Returns:
            Correlations ordered by plant event, then reading, then condition
            (temperature, humidity, VPD). Not deduplicated.
        """
        samples = [(e.timestamp, e.environmental_data) for e in environmental_events if e.environmental_data is not None]
        return cls._detect(samples, plant_events)

    @classmethod
    def detect_readings(
        cls,
        readings: Iterable[EnvironmentalReading],
        plant_events: Sequence[Event],
    ) -> list[EventCorrelation]:
        """Same as :meth:`detect` for bare readings."""
        return cls._detect([(r.timestamp, r) for r in readings], plant_events)
