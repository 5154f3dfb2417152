"""
Service protocols (structural typing interfaces).

Protocols let the application services declare the *minimal* surface they
depend on without importing a concrete repository, so any storage backend
(or a test double) can be injected.

Usage
-----
In a consumer service::

    class WateringService:
        def __init__(self, event_reader: "EventReader", ...): ...

At runtime the in-memory repositories in
``infrastructure.repositories.in_memory`` satisfy these protocols via
structural subtyping; no explicit inheritance needed.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, runtime_checkable
from uuid import UUID

from plantcare.domain.plant import Event, Plant
from plantcare.domain.watering import WateringState
from plantcare.enums import EventType


@runtime_checkable
class PlantReader(Protocol):
    """Read-only view over the plant catalogue."""

    def fetch_plant(self, plant_id: UUID) -> Optional[Plant]:
        """Return a single plant, or ``None`` if not found."""
        ...


@runtime_checkable
class EventReader(Protocol):
    """Read-only view over plant diaries."""

    def fetch_events(self, plant_id: UUID, types: Optional[Iterable[EventType]] = None) -> list[Event]:
        """Return a plant's events, newest first, optionally filtered by type."""
        ...


@runtime_checkable
class WateringStateStore(Protocol):
    """Keyed store for computed watering states.

    Implementations must be safe to call from several threads.
    """

    def get(self, plant_id: UUID) -> Optional[WateringState]:
        ...

    def set(self, state: WateringState) -> None:
        ...

    def clear(self, plant_id: UUID) -> bool:
        """Drop one plant's state; ``True`` if there was one."""
        ...

    def clear_all(self) -> int:
        """Drop every state; returns how many were dropped."""
        ...
