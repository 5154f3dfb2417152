"""
Environmental Data Service
==========================

Fetch-then-compute wrappers around event grouping, stress correlation and
the environmental health score. Each call is a self-contained unit that can
simply be re-run; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence
from uuid import UUID

from plantcare.domain.correlation import CorrelationDetector, EventCorrelation
from plantcare.domain.environmental_stats import EnvironmentalAnalyzer, EnvironmentalHealthScore, EnvironmentalStats
from plantcare.domain.event_grouping import EnvironmentalEventGroup, EventGrouper
from plantcare.domain.exceptions import PlantNotFoundError
from plantcare.domain.plant import Event
from plantcare.enums import EventType

if TYPE_CHECKING:
    from plantcare.services.protocols import EventReader, PlantReader

logger = logging.getLogger(__name__)


class EnvironmentalDataService:
    """Environmental grouping, correlations and health scoring for plant diaries."""

    def __init__(self, event_reader: "EventReader", plant_reader: "PlantReader | None" = None):
        self.event_reader = event_reader
        self.plant_reader = plant_reader
        self.logger = logger

    # ── Pure delegates ───────────────────────────────────────────────

    def group_environmental_events(self, events: Sequence[Event]) -> list[EnvironmentalEventGroup]:
        return EventGrouper.group_events(events)

    def detect_correlations(
        self,
        environmental_events: Sequence[Event],
        plant_events: Sequence[Event],
    ) -> list[EventCorrelation]:
        return CorrelationDetector.detect(environmental_events, plant_events)

    # ── Per plant ────────────────────────────────────────────────────

    def group_for_plant(self, plant_id: UUID) -> list[EnvironmentalEventGroup]:
        events = self.event_reader.fetch_events(plant_id, types=[EventType.ENVIRONMENT])
        groups = self.group_environmental_events(events)
        self.logger.debug("Plant %s: %d environment event(s) in %d group(s)", plant_id, len(events), len(groups))
        return groups

    def correlations_for_plant(self, plant_id: UUID) -> list[EventCorrelation]:
        """Stress events of a plant correlated with its environment log."""
        environmental_events = self.event_reader.fetch_events(plant_id, types=[EventType.ENVIRONMENT])
        stress_events = self.event_reader.fetch_events(plant_id, types=[EventType.STRESS])
        return self.detect_correlations(environmental_events, stress_events)

    def stats_for_plant(self, plant_id: UUID) -> EnvironmentalStats:
        events = self.event_reader.fetch_events(plant_id, types=[EventType.ENVIRONMENT])
        # newest first from the reader; stats want chronological order
        return EnvironmentalStats.from_events(list(reversed(events)))

    def health_score_for_plant(
        self,
        plant_id: UUID,
        previous_period_score: float | None = None,
    ) -> EnvironmentalHealthScore:
        """
        Health score of a plant's environment log for its current stage.

        Raises:
            PlantNotFoundError: No plant reader configured, or the plant does not exist
        """
        plant = self.plant_reader.fetch_plant(plant_id) if self.plant_reader else None
        if plant is None:
            raise PlantNotFoundError(plant_id)
        events = self.event_reader.fetch_events(plant_id, types=[EventType.ENVIRONMENT])
        return EnvironmentalAnalyzer.calculate_health_score(events, plant.stage, previous_period_score)
