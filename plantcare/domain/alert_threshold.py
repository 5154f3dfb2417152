"""
Alert Threshold Domain Objects
==============================
Per-plant, per-metric alert thresholds and their evaluation.

A threshold is only ever violated while it is enabled. Whether a violation
is *critical* does not depend on the threshold at all: critical values
bypass the sensitivity delay and quiet hours. The delay itself is applied
by the caller; this module only classifies.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Iterable
from uuid import UUID

from plantcare.constants import AlertCriticalBounds
from plantcare.domain.plant import EnvironmentalReading
from plantcare.enums import AlertSensitivity, EnvironmentalMetric

logger = logging.getLogger(__name__)


def is_critical(value: float, metric: EnvironmentalMetric) -> bool:
    """True when ``value`` is beyond the stage-independent critical bounds for ``metric``."""
    b = AlertCriticalBounds
    if metric is EnvironmentalMetric.TEMPERATURE:
        return value < b.TEMP_LOW or value > b.TEMP_HIGH
    if metric is EnvironmentalMetric.HUMIDITY:
        return value < b.HUMIDITY_LOW or value > b.HUMIDITY_HIGH
    return value < b.VPD_LOW or value > b.VPD_HIGH


def reading_value(reading: EnvironmentalReading, metric: EnvironmentalMetric) -> float | None:
    """The channel of ``reading`` that ``metric`` refers to."""
    if metric is EnvironmentalMetric.TEMPERATURE:
        return reading.temperature_f
    if metric is EnvironmentalMetric.HUMIDITY:
        return reading.humidity_percent
    return reading.vpd_kpa


@dataclass
class AlertThreshold:
    """User-configured alert bounds for one metric of one plant."""

    plant_id: UUID
    metric: EnvironmentalMetric
    min: float | None = None
    max: float | None = None
    enabled: bool = True
    sensitivity: AlertSensitivity = AlertSensitivity.FIFTEEN_MINUTES
    id: UUID = field(default_factory=uuid.uuid4)

    def is_violated(self, value: float) -> bool:
        """Check if a value violates this threshold."""
        if not self.enabled:
            return False
        if self.min is not None and value < self.min:
            return True
        if self.max is not None and value > self.max:
            return True
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "plant_id": str(self.plant_id),
            "metric": self.metric.value,
            "min": self.min,
            "max": self.max,
            "enabled": self.enabled,
            "sensitivity": self.sensitivity.value,
        }


@dataclass(frozen=True)
class AlertViolation:
    """A violated threshold for a specific reading."""

    threshold_id: UUID
    plant_id: UUID
    metric: EnvironmentalMetric
    value: float
    is_critical: bool
    delay_seconds: int  # 0 when critical

    @property
    def message(self) -> str:
        prefix = "Critical: " if self.is_critical else ""
        return f"{prefix}{self.metric.display_name} at {self.value:.2f} {self.metric.unit}"


class AlertThresholdEvaluator:
    """Evaluates a reading against a plant's configured thresholds."""

    @staticmethod
    def evaluate(thresholds: Iterable[AlertThreshold], reading: EnvironmentalReading) -> list[AlertViolation]:
        """
        One violation per enabled threshold whose metric is present and violated.

        Args:
            thresholds: Thresholds to check (disabled ones never fire)
            reading: Reading to check; missing channels are skipped

        Returns:
            Violations in threshold order
        """
        violations: list[AlertViolation] = []
        for threshold in thresholds:
            value = reading_value(reading, threshold.metric)
            if value is None or not threshold.is_violated(value):
                continue
            critical = is_critical(value, threshold.metric)
            violations.append(
                AlertViolation(
                    threshold_id=threshold.id,
                    plant_id=threshold.plant_id,
                    metric=threshold.metric,
                    value=value,
                    is_critical=critical,
                    delay_seconds=0 if critical else threshold.sensitivity.delay_seconds,
                )
            )
        if violations:
            logger.debug("Reading at %s violated %d threshold(s)", reading.timestamp.isoformat(), len(violations))
        return violations
