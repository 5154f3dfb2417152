"""
Common Enumerations
===================

Environmental status, alert metrics and feedback enums shared by the
classification, alerting and scheduling code.
"""

from enum import Enum

from plantcare.constants import AlertDelays


class EnvironmentalStatus(str, Enum):
    """Derived status of a reading for a growth stage. Never persisted."""

    OPTIMAL = "optimal"
    CAUTION = "caution"
    CRITICAL = "critical"

    def __str__(self):
        return self.value


class EnvironmentalMetric(str, Enum):
    """Metrics that can carry an alert threshold."""

    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    VPD = "vpd"

    def __str__(self):
        return self.value

    @property
    def display_name(self) -> str:
        return "VPD" if self is EnvironmentalMetric.VPD else self.value.capitalize()

    @property
    def unit(self) -> str:
        if self is EnvironmentalMetric.TEMPERATURE:
            return "°F"
        if self is EnvironmentalMetric.HUMIDITY:
            return "%"
        return "kPa"


class AlertSensitivity(str, Enum):
    """How long a non-critical violation must persist before it is surfaced."""

    IMMEDIATE = "immediate"
    FIFTEEN_MINUTES = "15min"
    ONE_HOUR = "1h"

    def __str__(self):
        return self.value

    @property
    def delay_seconds(self) -> int:
        if self is AlertSensitivity.IMMEDIATE:
            return AlertDelays.IMMEDIATE
        if self is AlertSensitivity.FIFTEEN_MINUTES:
            return AlertDelays.FIFTEEN_MINUTES
        return AlertDelays.ONE_HOUR

    @property
    def display_name(self) -> str:
        if self is AlertSensitivity.IMMEDIATE:
            return "Immediate"
        if self is AlertSensitivity.FIFTEEN_MINUTES:
            return "After 15 minutes"
        return "After 1 hour"


class WateringFeedback(str, Enum):
    """User feedback about the timing of the last watering."""

    TOO_EARLY = "too_early"
    JUST_RIGHT = "just_right"
    TOO_LATE = "too_late"

    def __str__(self):
        return self.value


class HealthTrend(str, Enum):
    """Direction of the environmental health score between periods."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"

    def __str__(self):
        return self.value


class EnvironmentalAlertType(str, Enum):
    """Low/high range alert per metric."""

    TEMPERATURE_LOW = "temp_low"
    TEMPERATURE_HIGH = "temp_high"
    HUMIDITY_LOW = "humidity_low"
    HUMIDITY_HIGH = "humidity_high"
    VPD_LOW = "vpd_low"
    VPD_HIGH = "vpd_high"

    def __str__(self):
        return self.value
