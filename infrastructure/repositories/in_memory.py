"""
In-Memory Repositories
======================

Process-local storage for plants, diary events and watering states.
Satisfies the protocols in ``plantcare.services.protocols`` and is used as
the default backend and in tests.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from threading import Lock
from typing import Iterable, Optional
from uuid import UUID

from plantcare.domain.exceptions import EventNotFoundError, PlantNotFoundError, RepositoryError
from plantcare.domain.plant import Event, Plant
from plantcare.domain.watering import WateringState
from plantcare.enums import EventType
from plantcare.utils.time import epoch_seconds

logger = logging.getLogger(__name__)


class InMemoryPlantRepository:
    """Plant catalogue keyed by plant id."""

    def __init__(self, plants: Iterable[Plant] = ()) -> None:
        self._plants: dict[UUID, Plant] = {}
        self._lock = Lock()
        for plant in plants:
            self.add_plant(plant)

    def add_plant(self, plant: Plant) -> Plant:
        with self._lock:
            if plant.id in self._plants:
                raise RepositoryError(
                    f"Plant already exists: {plant.id}",
                    detail={"plant_id": str(plant.id)},
                )
            self._plants[plant.id] = plant
        logger.debug("Added plant %s (%s)", plant.id, plant.name)
        return plant

    def fetch_plant(self, plant_id: UUID) -> Optional[Plant]:
        with self._lock:
            return self._plants.get(plant_id)

    def get_plant(self, plant_id: UUID) -> Plant:
        """Like :meth:`fetch_plant` but raises ``PlantNotFoundError``."""
        plant = self.fetch_plant(plant_id)
        if plant is None:
            raise PlantNotFoundError(plant_id)
        return plant

    def update_plant(self, plant_id: UUID, **changes) -> Plant:
        """Replace fields of a stored plant (stage, substrate, pot size...)."""
        with self._lock:
            current = self._plants.get(plant_id)
            if current is None:
                raise PlantNotFoundError(plant_id)
            updated = replace(current, **changes)
            self._plants[plant_id] = updated
        return updated

    def list_plants(self, include_archived: bool = False) -> list[Plant]:
        with self._lock:
            plants = list(self._plants.values())
        if include_archived:
            return plants
        return [p for p in plants if not p.is_archived]


class InMemoryEventRepository:
    """Diary events keyed by event id."""

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._events: dict[UUID, Event] = {}
        self._lock = Lock()
        for event in events:
            self.add_event(event)

    def add_event(self, event: Event) -> Event:
        with self._lock:
            if event.id in self._events:
                raise RepositoryError(
                    f"Event already exists: {event.id}",
                    detail={"event_id": str(event.id)},
                )
            self._events[event.id] = event
        return event

    def fetch_events(self, plant_id: UUID, types: Optional[Iterable[EventType]] = None) -> list[Event]:
        """A plant's events, newest first."""
        wanted = set(types) if types is not None else None
        with self._lock:
            events = [
                e
                for e in self._events.values()
                if e.plant_id == plant_id and (wanted is None or e.type in wanted)
            ]
        events.sort(key=lambda e: epoch_seconds(e.timestamp), reverse=True)
        return events

    def delete_event(self, event_id: UUID) -> Event:
        with self._lock:
            event = self._events.pop(event_id, None)
        if event is None:
            raise EventNotFoundError(event_id)
        logger.debug("Deleted event %s", event_id)
        return event


class InMemoryWateringStateStore:
    """Lock-guarded map of plant id to watering state."""

    def __init__(self) -> None:
        self._store: dict[UUID, WateringState] = {}
        self._lock = Lock()

    def get(self, plant_id: UUID) -> Optional[WateringState]:
        with self._lock:
            return self._store.get(plant_id)

    def set(self, state: WateringState) -> None:
        with self._lock:
            self._store[state.plant_id] = state

    def clear(self, plant_id: UUID) -> bool:
        with self._lock:
            return self._store.pop(plant_id, None) is not None

    def clear_all(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
