"""
Plant & Diary Domain Objects
============================
Dataclasses for plants and the events logged in their diary.

A Plant's identity never changes, but its stage, substrate and pot size do
over its life. Callers replace them with :func:`dataclasses.replace` and the
scheduler re-reads them on every computation.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from plantcare.enums import EventSource, EventType, PlantStage, StressTag, SubstrateType
from plantcare.utils.psychrometrics import calculate_vpd_from_fahrenheit
from plantcare.utils.time import utc_now, whole_days_between


@dataclass
class Plant:
    """A single plant in the user's garden."""

    name: str
    stage: PlantStage
    substrate_type: SubstrateType | None = None
    pot_size_liters: float | None = None
    start_date: datetime = field(default_factory=utc_now)
    strain_name: str | None = None
    notes: str | None = None
    is_archived: bool = False
    id: UUID = field(default_factory=uuid.uuid4)

    def age_in_days(self, now: datetime | None = None) -> int:
        """Full days since the grow started."""
        return whole_days_between(self.start_date, now or utc_now())

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "stage": self.stage.value,
            "substrate_type": self.substrate_type.value if self.substrate_type else None,
            "pot_size_liters": self.pot_size_liters,
            "start_date": self.start_date.isoformat(),
            "strain_name": self.strain_name,
            "notes": self.notes,
            "is_archived": self.is_archived,
        }


@dataclass(frozen=True)
class EnvironmentalReading:
    """Temperature (°F), humidity (%) and VPD (kPa) at an instant.

    Missing sensor channels are ``None``.
    """

    timestamp: datetime
    temperature_f: float | None = None
    humidity_percent: float | None = None
    vpd_kpa: float | None = None

    @classmethod
    def from_temperature_humidity(
        cls,
        temperature_f: float,
        humidity_percent: float,
        timestamp: datetime | None = None,
    ) -> EnvironmentalReading:
        """Build a reading whose VPD is derived from temperature and humidity."""
        return cls(
            timestamp=timestamp or utc_now(),
            temperature_f=temperature_f,
            humidity_percent=humidity_percent,
            vpd_kpa=calculate_vpd_from_fahrenheit(temperature_f, humidity_percent),
        )

    @property
    def has_all_channels(self) -> bool:
        return self.temperature_f is not None and self.humidity_percent is not None and self.vpd_kpa is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "temperature_f": self.temperature_f,
            "humidity_percent": self.humidity_percent,
            "vpd_kpa": self.vpd_kpa,
        }


@dataclass(frozen=True)
class LightMeasurement:
    """Light meter reading attached to a light_check event."""

    ppfd: float | None = None
    lux: float | None = None
    dli: float | None = None
    light_type: str | None = None
    distance_meters: float | None = None


@dataclass
class Event:
    """An entry in a plant's diary."""

    plant_id: UUID
    type: EventType
    timestamp: datetime = field(default_factory=utc_now)
    volume_liters: float | None = None
    note_text: str | None = None
    photo_asset_id: str | None = None
    stress_tags: list[StressTag] = field(default_factory=list)
    source: EventSource = EventSource.MANUAL
    environmental_data: EnvironmentalReading | None = None
    light_measurement: LightMeasurement | None = None
    id: UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def environment(cls, plant_id: UUID, reading: EnvironmentalReading, **kwargs: Any) -> Event:
        """Environment event stamped with the reading's own timestamp."""
        return cls(
            plant_id=plant_id,
            type=EventType.ENVIRONMENT,
            timestamp=reading.timestamp,
            environmental_data=reading,
            **kwargs,
        )
