"""
Environmental Thresholds Value Object
======================================
Immutable min/max ranges for temperature, humidity and VPD, used to produce
simple low/high range alerts for a reading.

Following Domain-Driven Design (DDD), this is a value object:
- Immutable (frozen dataclass)
- No identity (defined by its attributes)
- Validates its own invariants
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from plantcare.constants import DefaultRangeThresholds
from plantcare.domain.plant import EnvironmentalReading
from plantcare.enums import EnvironmentalAlertType


@dataclass(frozen=True)
class EnvironmentalAlert:
    """A reading outside one side of a configured range."""

    type: EnvironmentalAlertType
    current: float
    limit: float

    @property
    def title(self) -> str:
        return _ALERT_TITLES[self.type]

    @property
    def message(self) -> str:
        t = EnvironmentalAlertType
        if self.type is t.TEMPERATURE_LOW:
            return f"{self.current:.1f}°F is below minimum of {self.limit:.1f}°F"
        if self.type is t.TEMPERATURE_HIGH:
            return f"{self.current:.1f}°F exceeds maximum of {self.limit:.1f}°F"
        if self.type is t.HUMIDITY_LOW:
            return f"{self.current:.0f}% is below minimum of {self.limit:.0f}%"
        if self.type is t.HUMIDITY_HIGH:
            return f"{self.current:.0f}% exceeds maximum of {self.limit:.0f}%"
        if self.type is t.VPD_LOW:
            return f"{self.current:.2f} kPa is below minimum of {self.limit:.2f} kPa"
        return f"{self.current:.2f} kPa exceeds maximum of {self.limit:.2f} kPa"


_ALERT_TITLES = {
    EnvironmentalAlertType.TEMPERATURE_LOW: "Temperature Too Low",
    EnvironmentalAlertType.TEMPERATURE_HIGH: "Temperature Too High",
    EnvironmentalAlertType.HUMIDITY_LOW: "Humidity Too Low",
    EnvironmentalAlertType.HUMIDITY_HIGH: "Humidity Too High",
    EnvironmentalAlertType.VPD_LOW: "VPD Too Low",
    EnvironmentalAlertType.VPD_HIGH: "VPD Too High",
}


@dataclass(frozen=True)
class EnvironmentalThresholds:
    """
    Immutable environmental ranges for range alerts.

    Attributes:
        temperature_min / temperature_max: °F (default: 70-80)
        humidity_min / humidity_max: % (default: 50-70)
        vpd_min / vpd_max: kPa (default: 0.8-1.2)
    """

    temperature_min: float = DefaultRangeThresholds.TEMP_MIN
    temperature_max: float = DefaultRangeThresholds.TEMP_MAX
    humidity_min: float = DefaultRangeThresholds.HUMIDITY_MIN
    humidity_max: float = DefaultRangeThresholds.HUMIDITY_MAX
    vpd_min: float = DefaultRangeThresholds.VPD_MIN
    vpd_max: float = DefaultRangeThresholds.VPD_MAX

    def __post_init__(self):
        """Validate range ordering after initialization."""
        for name in ("temperature", "humidity", "vpd"):
            low = getattr(self, f"{name}_min")
            high = getattr(self, f"{name}_max")
            if low > high:
                raise ValueError(f"{name} minimum {low} is above maximum {high}")
        if not (0 <= self.humidity_min <= 100 and 0 <= self.humidity_max <= 100):
            raise ValueError(
                f"Humidity must be between 0 and 100%, got {self.humidity_min}-{self.humidity_max}"
            )

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> EnvironmentalThresholds:
        """
        Create from dictionary; missing keys keep their defaults.

        Examples:
            >>> EnvironmentalThresholds.from_dict({"temperature_max": 84.0}).temperature_max
            84.0
        """
        defaults = EnvironmentalThresholds()
        return EnvironmentalThresholds(
            **{key: float(data.get(key, value)) for key, value in defaults.to_dict().items()}
        )

    def merge(self, other: dict[str, float]) -> EnvironmentalThresholds:
        """New instance with partial updates applied."""
        current = self.to_dict()
        current.update(other)
        return EnvironmentalThresholds.from_dict(current)

    def check_alerts(self, reading: EnvironmentalReading) -> list[EnvironmentalAlert]:
        """Low/high alerts for each present channel of ``reading``."""
        alerts: list[EnvironmentalAlert] = []
        t = EnvironmentalAlertType

        checks = (
            (reading.temperature_f, self.temperature_min, self.temperature_max, t.TEMPERATURE_LOW, t.TEMPERATURE_HIGH),
            (reading.humidity_percent, self.humidity_min, self.humidity_max, t.HUMIDITY_LOW, t.HUMIDITY_HIGH),
            (reading.vpd_kpa, self.vpd_min, self.vpd_max, t.VPD_LOW, t.VPD_HIGH),
        )
        for value, low, high, low_type, high_type in checks:
            if value is None:
                continue
            if value < low:
                alerts.append(EnvironmentalAlert(type=low_type, current=value, limit=low))
            elif value > high:
                alerts.append(EnvironmentalAlert(type=high_type, current=value, limit=high))

        return alerts
