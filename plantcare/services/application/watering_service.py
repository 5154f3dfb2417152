"""
Watering Service
================

Per-plant watering schedules on top of the pure WateringScheduler.

States are created lazily on first query from the plant's most recent
watering event, mutated by ``record_watering`` and ``apply_feedback``, and
dropped with ``invalidate`` whenever the plant's stage, substrate or pot
size changes. Every change is announced on the EventBus so UI and
notification consumers can refresh without observing the store.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from plantcare.domain.plant import Plant
from plantcare.domain.watering import WateringState, WateringStatus
from plantcare.domain.watering_scheduler import WateringScheduler
from plantcare.enums import EventType, PlantCareEvent, WateringFeedback
from plantcare.schemas.events import WateringChangeReason, WateringStateChangedPayload, WateringStateClearedPayload
from plantcare.utils.event_bus import EventBus
from plantcare.utils.time import ensure_aware

if TYPE_CHECKING:
    from plantcare.services.protocols import EventReader, WateringStateStore

logger = logging.getLogger(__name__)


class WateringService:
    """Watering state cache, feedback handling and status for plants."""

    def __init__(
        self,
        event_reader: "EventReader",
        state_store: "WateringStateStore | None" = None,
        event_bus: EventBus | None = None,
    ):
        """
        Args:
            event_reader: Source of diary events (newest first)
            state_store: Where computed states are kept; defaults to a fresh
                in-memory store
            event_bus: EventBus for change notifications
        """
        if state_store is None:
            from infrastructure.repositories.in_memory import InMemoryWateringStateStore

            state_store = InMemoryWateringStateStore()
        self.event_reader = event_reader
        self.state_store = state_store
        self.event_bus = event_bus or EventBus()
        self.logger = logger

    # ── State ────────────────────────────────────────────────────────

    def get_watering_state(self, plant: Plant) -> WateringState:
        """Cached state, or one computed from the most recent watering event."""
        cached = self.state_store.get(plant.id)
        if cached is not None:
            return cached

        watering_events = self.event_reader.fetch_events(plant.id, types=[EventType.WATERING])
        last_watering = watering_events[0].timestamp if watering_events else None
        interval = WateringScheduler.compute_suggested_interval(plant)

        state = WateringState(
            plant_id=plant.id,
            interval_days=interval,
            last_watering_date=last_watering,
            next_watering_date=(
                WateringScheduler.compute_next_watering_date(last_watering, interval) if last_watering else None
            ),
        )
        self.logger.debug(
            "Computed watering state for plant %s: interval=%sd last=%s",
            plant.id,
            interval,
            last_watering.isoformat() if last_watering else None,
        )
        self._store(state, "computed")
        return state

    def record_watering(self, plant: Plant, watering_date: datetime) -> WateringState:
        """Record a watering; keeps the cached interval when there is one."""
        watering_date = ensure_aware(watering_date)
        cached = self.state_store.get(plant.id)
        interval = cached.interval_days if cached else WateringScheduler.compute_suggested_interval(plant)

        state = WateringState(
            plant_id=plant.id,
            interval_days=interval,
            last_watering_date=watering_date,
            next_watering_date=WateringScheduler.compute_next_watering_date(watering_date, interval),
        )
        self.logger.info("Plant %s watered; next watering in %s day(s)", plant.id, interval)
        self._store(state, "watered")
        return state

    def apply_feedback(self, plant: Plant, feedback: WateringFeedback) -> WateringState:
        """Adjust the interval by one feedback step and re-project the next date."""
        state = self.get_watering_state(plant)
        interval = WateringScheduler.adjust_interval(state.interval_days, feedback, plant)

        next_date = state.next_watering_date
        if state.last_watering_date is not None:
            next_date = WateringScheduler.compute_next_watering_date(state.last_watering_date, interval)

        updated = WateringState(
            plant_id=plant.id,
            interval_days=interval,
            last_watering_date=state.last_watering_date,
            next_watering_date=next_date,
        )
        self._store(updated, "feedback")
        return updated

    def get_watering_status(self, plant: Plant, now: datetime | None = None) -> WateringStatus | None:
        """Status for display; ``None`` until a watering has been recorded."""
        state = self.get_watering_state(plant)
        if state.next_watering_date is None:
            return None
        return WateringScheduler.compute_watering_status(state.next_watering_date, now)

    # ── Invalidation ─────────────────────────────────────────────────

    def invalidate(self, plant_id: UUID) -> None:
        """Drop a plant's cached state, e.g. after its stage or pot size changed."""
        if self.state_store.clear(plant_id):
            self.event_bus.publish(
                PlantCareEvent.WATERING_STATE_CHANGED,
                WateringStateChangedPayload(plant_id=str(plant_id), reason="invalidated"),
            )

    def clear_all(self) -> None:
        cleared = self.state_store.clear_all()
        self.logger.debug("Cleared %d cached watering state(s)", cleared)
        self.event_bus.publish(PlantCareEvent.WATERING_STATE_CLEARED, WateringStateClearedPayload(cleared=cleared))

    def _store(self, state: WateringState, reason: WateringChangeReason) -> None:
        self.state_store.set(state)
        self.event_bus.publish(
            PlantCareEvent.WATERING_STATE_CHANGED,
            WateringStateChangedPayload(
                plant_id=str(state.plant_id),
                reason=reason,
                interval_days=state.interval_days,
                last_watering_date=state.last_watering_date.isoformat() if state.last_watering_date else None,
                next_watering_date=state.next_watering_date.isoformat() if state.next_watering_date else None,
            ),
        )
