"""
Environmental Statistics & Health Score
=======================================
Period aggregates over a plant's environment events, and a 0-100 health
score measuring how much of the period was spent inside the stage's optimal
ranges.

Health score:
    per metric  = readings in optimal range / readings * 100
    overall     = 0.5 * vpd + 0.3 * temperature + 0.2 * humidity

A reading missing a channel counts as out of range for that channel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from plantcare.constants import HealthScoreWeights, StageOptimalRanges
from plantcare.domain.plant import EnvironmentalReading, Event
from plantcare.enums import HealthTrend, PlantStage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricValues:
    temperature: float
    humidity: float
    vpd: float

    def to_dict(self) -> dict[str, float]:
        return {"temperature": self.temperature, "humidity": self.humidity, "vpd": self.vpd}


@dataclass(frozen=True)
class EnvironmentalStats:
    """Current, min, max and average values over a set of events."""

    current: MetricValues | None
    min: MetricValues
    max: MetricValues
    avg: MetricValues

    @classmethod
    def from_events(cls, events: Sequence[Event]) -> EnvironmentalStats:
        """
        Aggregate the readings carried by ``events``.

        ``current`` comes from the last event in the sequence and is only set
        when that event carries a complete reading. Channels with no values
        aggregate to 0.
        """
        readings = [e.environmental_data for e in events if e.environmental_data is not None]
        temps = [r.temperature_f for r in readings if r.temperature_f is not None]
        humidities = [r.humidity_percent for r in readings if r.humidity_percent is not None]
        vpds = [r.vpd_kpa for r in readings if r.vpd_kpa is not None]

        current = None
        if events:
            last = events[-1].environmental_data
            if last is not None and last.has_all_channels:
                current = MetricValues(last.temperature_f, last.humidity_percent, last.vpd_kpa)

        return cls(
            current=current,
            min=MetricValues(min(temps, default=0.0), min(humidities, default=0.0), min(vpds, default=0.0)),
            max=MetricValues(max(temps, default=0.0), max(humidities, default=0.0), max(vpds, default=0.0)),
            avg=MetricValues(_mean(temps), _mean(humidities), _mean(vpds)),
        )


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


@dataclass(frozen=True)
class EnvironmentalHealthScore:
    """Share of readings in the optimal range, per metric and weighted overall (0-100)."""

    overall: float
    temp_score: float
    humidity_score: float
    vpd_score: float
    trend: HealthTrend = HealthTrend.STABLE

    @property
    def breakdown(self) -> str:
        return f"Temp: {self.temp_score:.0f}%, Humidity: {self.humidity_score:.0f}%, VPD: {self.vpd_score:.0f}%"

    def to_dict(self) -> dict[str, object]:
        return {
            "overall": self.overall,
            "temp_score": self.temp_score,
            "humidity_score": self.humidity_score,
            "vpd_score": self.vpd_score,
            "trend": self.trend.value,
        }


def _percent_in_range(values: list[float | None], bounds: tuple[float, float], total: int) -> float:
    low, high = bounds
    hits = sum(1 for v in values if v is not None and low <= v <= high)
    return hits / total * 100


class EnvironmentalAnalyzer:
    """Computes environmental health scores for a growth stage."""

    @staticmethod
    def determine_trend(overall: float, previous_period_score: float | None) -> HealthTrend:
        if previous_period_score is None:
            return HealthTrend.STABLE
        margin = HealthScoreWeights.TREND_MARGIN
        if overall > previous_period_score + margin:
            return HealthTrend.IMPROVING
        if overall < previous_period_score - margin:
            return HealthTrend.DECLINING
        return HealthTrend.STABLE

    @classmethod
    def calculate_health_score(
        cls,
        events: Sequence[Event],
        stage: PlantStage,
        previous_period_score: float | None = None,
    ) -> EnvironmentalHealthScore:
        """
        Score a period of environment events against the stage's optimal ranges.

        Args:
            events: Events of the period; events without a reading are ignored
            stage: Growth stage whose optimal ranges apply
            previous_period_score: Overall score of the previous period, for the trend

        Returns:
            EnvironmentalHealthScore. All zeros and stable when there are no
            readings. Stages without optimal ranges score 0.
        """
        readings: list[EnvironmentalReading] = [e.environmental_data for e in events if e.environmental_data is not None]
        if not readings:
            return EnvironmentalHealthScore(overall=0.0, temp_score=0.0, humidity_score=0.0, vpd_score=0.0)

        ranges = StageOptimalRanges.get(stage.value)
        if ranges is None:
            logger.debug("No optimal ranges for stage %s; scoring zero", stage.value)
            temp_score = humidity_score = vpd_score = 0.0
        else:
            total = len(readings)
            temp_score = _percent_in_range([r.temperature_f for r in readings], ranges.temperature, total)
            humidity_score = _percent_in_range([r.humidity_percent for r in readings], ranges.humidity, total)
            vpd_score = _percent_in_range([r.vpd_kpa for r in readings], ranges.vpd, total)

        w = HealthScoreWeights
        overall = vpd_score * w.VPD + temp_score * w.TEMPERATURE + humidity_score * w.HUMIDITY

        return EnvironmentalHealthScore(
            overall=overall,
            temp_score=temp_score,
            humidity_score=humidity_score,
            vpd_score=vpd_score,
            trend=cls.determine_trend(overall, previous_period_score),
        )
