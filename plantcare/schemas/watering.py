"""
Watering Schemas
================

Response schema for a plant's watering schedule.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from plantcare.domain.watering import WateringState


class WateringStateSchema(BaseModel):
    """Serialized watering schedule of one plant."""

    plant_id: UUID
    interval_days: int = Field(..., ge=0, description="Days between waterings")
    last_watering_date: Optional[datetime] = None
    next_watering_date: Optional[datetime] = None

    @classmethod
    def from_domain(cls, state: WateringState) -> "WateringStateSchema":
        return cls(
            plant_id=state.plant_id,
            interval_days=state.interval_days,
            last_watering_date=state.last_watering_date,
            next_watering_date=state.next_watering_date,
        )
