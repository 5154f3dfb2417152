"""EventBus payloads published by the application services."""

from typing import Literal

from pydantic import BaseModel, Field

WateringChangeReason = Literal["computed", "watered", "feedback", "invalidated"]


class WateringStateChangedPayload(BaseModel):
    """Payload for ``watering_state_changed``."""

    schema_version: int = Field(default=1)

    plant_id: str
    reason: WateringChangeReason
    # None when the cached state was invalidated
    interval_days: int | None = None
    last_watering_date: str | None = None
    next_watering_date: str | None = None


class WateringStateClearedPayload(BaseModel):
    """Payload for ``watering_state_cleared`` (every cached state dropped)."""

    schema_version: int = Field(default=1)
    cleared: int = 0
