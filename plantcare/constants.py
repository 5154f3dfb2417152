"""
Application Constants
=====================

Centralized numeric tables for the plant-care algorithms.
Organized by domain for easy discovery and maintenance.

Units: temperature in °F, humidity in %, VPD in kPa, volumes in liters.

Usage:
    from plantcare.constants import StageOptimalRanges, WateringIntervals
"""

from dataclasses import dataclass

# =============================================================================
# Time Constants (seconds)
# =============================================================================

SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR


# =============================================================================
# Environmental Classification
# =============================================================================


@dataclass(frozen=True)
class OptimalRange:
    """Closed optimal ranges for one growth stage."""

    temperature: tuple[float, float]  # °F
    humidity: tuple[float, float]  # %
    vpd: tuple[float, float]  # kPa


class StageOptimalRanges:
    """Optimal environment per growth stage (closed intervals)."""

    SEEDLING = OptimalRange(temperature=(70.0, 80.0), humidity=(65.0, 75.0), vpd=(0.4, 0.8))
    VEGETATIVE = OptimalRange(temperature=(70.0, 85.0), humidity=(50.0, 70.0), vpd=(0.8, 1.2))
    FLOWERING = OptimalRange(temperature=(65.0, 80.0), humidity=(40.0, 55.0), vpd=(1.0, 1.5))

    # drying/curing have no optimal row
    _REGISTRY: dict[str, OptimalRange] = {
        "seedling": SEEDLING,
        "vegetative": VEGETATIVE,
        "flowering": FLOWERING,
    }

    @classmethod
    def get(cls, stage: str) -> OptimalRange | None:
        """Optimal ranges for a stage value, or None if the stage has none."""
        return cls._REGISTRY.get(str(stage))


class ClassifierCriticalBounds:
    """Stage-independent bounds that make a non-optimal reading critical."""

    TEMP_LOW = 60.0
    TEMP_HIGH = 95.0
    HUMIDITY_LOW = 20.0
    HUMIDITY_HIGH = 85.0
    VPD_LOW = 0.2
    VPD_HIGH = 2.5


# =============================================================================
# Alerting
# =============================================================================


class AlertCriticalBounds:
    """Per-metric bounds that bypass alert delay and quiet hours.

    Kept apart from ClassifierCriticalBounds; the literals differ.
    """

    TEMP_LOW = 50.0
    TEMP_HIGH = 95.0
    HUMIDITY_LOW = 20.0
    HUMIDITY_HIGH = 90.0
    VPD_LOW = 0.2
    VPD_HIGH = 2.5


class AlertDelays:
    """Delay before a non-critical violation is surfaced (seconds)."""

    IMMEDIATE = 0
    FIFTEEN_MINUTES = 15 * 60
    ONE_HOUR = 60 * 60


class DefaultRangeThresholds:
    """Default min/max used by range alerts when a user has not configured any."""

    TEMP_MIN = 70.0
    TEMP_MAX = 80.0
    HUMIDITY_MIN = 50.0
    HUMIDITY_MAX = 70.0
    VPD_MIN = 0.8
    VPD_MAX = 1.2


# =============================================================================
# Watering Scheduler
# =============================================================================


@dataclass(frozen=True)
class IntervalRow:
    """Watering interval bounds in days."""

    min: int
    default: int
    max: int


class WateringIntervals:
    """Watering interval bounds by (stage, substrate)."""

    FALLBACK = IntervalRow(min=2, default=3, max=7)

    _SEEDLING_SOIL = IntervalRow(min=1, default=2, max=4)
    _VEGETATIVE_SOIL = IntervalRow(min=2, default=3, max=7)
    _FLOWERING_SOIL = IntervalRow(min=2, default=3, max=6)

    # soilless and other mirror soil for the same stage
    TABLE: dict[str, dict[str, IntervalRow]] = {
        "seedling": {
            "soil": _SEEDLING_SOIL,
            "coco": IntervalRow(min=1, default=1, max=3),
            "hydro": IntervalRow(min=0, default=0, max=1),
            "soilless": _SEEDLING_SOIL,
            "other": _SEEDLING_SOIL,
        },
        "vegetative": {
            "soil": _VEGETATIVE_SOIL,
            "coco": IntervalRow(min=1, default=2, max=4),
            "hydro": IntervalRow(min=0, default=0, max=1),
            "soilless": _VEGETATIVE_SOIL,
            "other": _VEGETATIVE_SOIL,
        },
        "flowering": {
            "soil": _FLOWERING_SOIL,
            "coco": IntervalRow(min=1, default=2, max=4),
            "hydro": IntervalRow(min=0, default=0, max=1),
            "soilless": _FLOWERING_SOIL,
            "other": _FLOWERING_SOIL,
        },
    }

    DEFAULT_SUBSTRATE = "other"


# Pot size adjustment, (upper bound exclusive in liters, days).
# Sizes at or above the last bound get +1 day.
POT_SIZE_ADJUSTMENTS: tuple[tuple[float, float], ...] = (
    (5.0, -1.0),
    (10.0, -0.5),
    (20.0, 0.0),
    (40.0, 0.5),
)
LARGE_POT_ADJUSTMENT_DAYS = 1.0

# Feedback step in days
FEEDBACK_STEPS = {
    "too_early": 1,
    "just_right": 0,
    "too_late": -1,
}


# =============================================================================
# Event Aggregation & Correlation
# =============================================================================


class GroupingIntervals:
    """Density-adaptive bucket widths (seconds)."""

    NONE = 0
    HOURLY = SECONDS_PER_HOUR
    DAILY = SECONDS_PER_DAY

    HOURLY_EVENTS_PER_DAY = 10  # strictly more than this per day -> hourly
    DAILY_EVENTS_PER_WEEK = 100  # strictly more than this per week -> daily


class CorrelationThresholds:
    """Environmental anomalies checked around stress events."""

    WINDOW_SECONDS = 4 * SECONDS_PER_HOUR  # strict: |delta| < window
    HIGH_TEMP_F = 85.0
    LOW_HUMIDITY_PERCENT = 30.0
    HIGH_VPD_KPA = 1.8

    HIGH_TEMP_MESSAGE = "During high temp period"
    LOW_HUMIDITY_MESSAGE = "During low humidity"
    HIGH_VPD_MESSAGE = "High VPD stress"


# =============================================================================
# Health Score
# =============================================================================


class HealthScoreWeights:
    """Weights of the environmental health score (VPD matters most)."""

    VPD = 0.5
    TEMPERATURE = 0.3
    HUMIDITY = 0.2
    TREND_MARGIN = 5.0


# =============================================================================
# Light
# =============================================================================

MICROMOLES_PER_MOLE = 1_000_000
MAX_PHOTOPERIOD_HOURS = 24.0

COMMON_PHOTOPERIODS: tuple[tuple[float, str], ...] = (
    (12.0, "12/12"),
    (18.0, "18/6"),
    (20.0, "20/4"),
    (24.0, "24/0"),
)
