"""
Environmental Status Classification
===================================
Classifies a temperature/humidity/VPD triple for a growth stage:

- optimal:  all three inside the stage's closed optimal ranges
- critical: otherwise, any value beyond the stage-independent absolute bounds
- caution:  everything else

The absolute bounds here (ClassifierCriticalBounds) are not the alert
critical bounds (AlertCriticalBounds); the two tables use different literals
and are never merged.
"""

from __future__ import annotations

from dataclasses import dataclass

from plantcare.constants import ClassifierCriticalBounds, OptimalRange, StageOptimalRanges
from plantcare.domain.plant import EnvironmentalReading
from plantcare.enums import EnvironmentalStatus, PlantStage


def _within(value: float, bounds: tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


def _is_optimal(temperature_f: float, humidity: float, vpd: float, ranges: OptimalRange | None) -> bool:
    if ranges is None:
        return False
    return (
        _within(temperature_f, ranges.temperature)
        and _within(humidity, ranges.humidity)
        and _within(vpd, ranges.vpd)
    )


def _is_critical(temperature_f: float, humidity: float, vpd: float) -> bool:
    b = ClassifierCriticalBounds
    return (
        temperature_f < b.TEMP_LOW
        or temperature_f > b.TEMP_HIGH
        or humidity < b.HUMIDITY_LOW
        or humidity > b.HUMIDITY_HIGH
        or vpd < b.VPD_LOW
        or vpd > b.VPD_HIGH
    )


def classify_environment(
    temperature_f: float,
    humidity: float,
    vpd: float,
    stage: PlantStage,
) -> EnvironmentalStatus:
    """
    Classify environmental conditions for a growth stage.

    Stages without an optimal row (drying, curing) are never optimal.

    Args:
        temperature_f: Temperature in °F
        humidity: Relative humidity in %
        vpd: Vapor pressure deficit in kPa
        stage: Current growth stage

    Returns:
        EnvironmentalStatus
    """
    if _is_optimal(temperature_f, humidity, vpd, StageOptimalRanges.get(stage.value)):
        return EnvironmentalStatus.OPTIMAL
    if _is_critical(temperature_f, humidity, vpd):
        return EnvironmentalStatus.CRITICAL
    return EnvironmentalStatus.CAUTION


@dataclass(frozen=True)
class EnvironmentalStatusResult:
    """A classification together with the inputs it was computed from."""

    status: EnvironmentalStatus
    temperature_f: float
    humidity: float
    vpd: float
    stage: PlantStage

    @classmethod
    def evaluate(cls, temperature_f: float, humidity: float, vpd: float, stage: PlantStage) -> EnvironmentalStatusResult:
        return cls(
            status=classify_environment(temperature_f, humidity, vpd, stage),
            temperature_f=temperature_f,
            humidity=humidity,
            vpd=vpd,
            stage=stage,
        )


def classify_reading(reading: EnvironmentalReading, stage: PlantStage) -> EnvironmentalStatusResult | None:
    """Classify a diary reading; ``None`` when any channel is missing."""
    if not reading.has_all_channels:
        return None
    return EnvironmentalStatusResult.evaluate(
        reading.temperature_f,
        reading.humidity_percent,
        reading.vpd_kpa,
        stage,
    )
