"""Centralized exception hierarchy for plantcare.

All domain and repository exceptions inherit from :class:`PlantCareError` so
that callers can catch a single base class when they need a broad safety net,
yet still match on specific subclasses where narrower handling is appropriate.

The algorithms themselves never raise; these errors come from the
collaborators (repositories, configuration) and are propagated unmodified
by the application services.

Hierarchy
---------
::

    PlantCareError (base)
    ├── NotFoundError            (entity does not exist)
    │   ├── PlantNotFoundError
    │   └── EventNotFoundError
    ├── RepositoryError          (persistence failure, duplicate ids)
    └── ConfigurationError       (missing / invalid config)
"""

from __future__ import annotations

from typing import Any


class PlantCareError(Exception):
    """Base exception for all plantcare errors.

    Parameters
    ----------
    message:
        Human-readable description.
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    def __init__(self, message: str = "", *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


class NotFoundError(PlantCareError):
    """Requested entity does not exist."""


class PlantNotFoundError(NotFoundError):
    """No plant with the requested id."""

    def __init__(self, plant_id: Any) -> None:
        super().__init__(f"Plant not found: {plant_id}", detail={"plant_id": str(plant_id)})
        self.plant_id = plant_id


class EventNotFoundError(NotFoundError):
    """No diary event with the requested id."""

    def __init__(self, event_id: Any) -> None:
        super().__init__(f"Event not found: {event_id}", detail={"event_id": str(event_id)})
        self.event_id = event_id


class RepositoryError(PlantCareError):
    """Persistence layer failure."""


class ConfigurationError(PlantCareError):
    """Missing or invalid application configuration."""
