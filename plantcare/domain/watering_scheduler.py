"""
Watering Scheduler Domain Service
=================================
Computes watering intervals and adapts them from user feedback.

The interval is a single integer number of days, bounded per
(stage, substrate) by :class:`plantcare.constants.WateringIntervals`.
Feedback moves it one day at a time and saturates at the bounds:

    too_early  -> +1 day
    just_right ->  0
    too_late   -> -1 day

Nothing here raises. Unknown (stage, substrate) pairs use the fallback
row (2, 3, 7) and out-of-range intervals are clamped, not rejected.

Usage:
    interval = WateringScheduler.compute_suggested_interval(plant)
    interval = WateringScheduler.adjust_interval(interval, WateringFeedback.TOO_EARLY, plant)
"""

import logging
import math
from datetime import datetime

from plantcare.constants import (
    FEEDBACK_STEPS,
    LARGE_POT_ADJUSTMENT_DAYS,
    POT_SIZE_ADJUSTMENTS,
    WateringIntervals,
)
from plantcare.domain.plant import Plant
from plantcare.domain.watering import IntervalBounds, WateringStatus
from plantcare.enums import WateringFeedback
from plantcare.utils.time import add_days, utc_now, whole_days_between

logger = logging.getLogger(__name__)


def _round_half_away_from_zero(value: float) -> int:
    # round() is banker's rounding; 2.5 must become 3
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


class WateringScheduler:
    """Pure watering interval controller. All methods are stateless."""

    @staticmethod
    def get_bounds(plant: Plant) -> IntervalBounds:
        """Interval bounds for the plant's current stage and substrate."""
        substrate = plant.substrate_type.value if plant.substrate_type else WateringIntervals.DEFAULT_SUBSTRATE
        row = WateringIntervals.TABLE.get(plant.stage.value, {}).get(substrate)
        if row is None:
            logger.debug(
                "No watering bounds for stage=%s substrate=%s, using fallback",
                plant.stage.value,
                substrate,
            )
            row = WateringIntervals.FALLBACK
        return IntervalBounds(min=row.min, default=row.default, max=row.max)

    @staticmethod
    def pot_size_adjustment_days(pot_size_liters: float | None) -> float:
        """Larger pots hold moisture longer; smaller pots dry out faster."""
        if pot_size_liters is None:
            return 0.0
        for upper_bound, adjustment in POT_SIZE_ADJUSTMENTS:
            if pot_size_liters < upper_bound:
                return adjustment
        return LARGE_POT_ADJUSTMENT_DAYS

    @classmethod
    def compute_suggested_interval(cls, plant: Plant, current_interval_days: int | None = None) -> int:
        """
        Suggested watering interval in days.

        Args:
            plant: Plant whose stage/substrate/pot size drive the bounds
            current_interval_days: Interval from an earlier computation. When
                given it is only re-validated against the current bounds.

        Returns:
            Interval within the plant's bounds
        """
        bounds = cls.get_bounds(plant)
        if current_interval_days is not None:
            return bounds.clamp(current_interval_days)

        interval = bounds.default + cls.pot_size_adjustment_days(plant.pot_size_liters)
        return bounds.clamp(_round_half_away_from_zero(interval))

    @classmethod
    def adjust_interval(cls, current_interval_days: int, feedback: WateringFeedback, plant: Plant) -> int:
        """Apply one feedback step and clamp into the plant's bounds."""
        bounds = cls.get_bounds(plant)
        adjusted = bounds.clamp(current_interval_days + FEEDBACK_STEPS[feedback.value])
        logger.debug(
            "Watering interval %s -> %s (feedback=%s, bounds=%s..%s)",
            current_interval_days,
            adjusted,
            feedback.value,
            bounds.min,
            bounds.max,
        )
        return adjusted

    @staticmethod
    def compute_next_watering_date(last_watering_date: datetime, interval_days: int) -> datetime:
        return add_days(last_watering_date, interval_days)

    @staticmethod
    def compute_watering_status(next_watering_date: datetime, now: datetime | None = None) -> WateringStatus:
        """
        Watering status relative to ``now``.

        ``days_until_watering`` counts whole days and truncates toward zero,
        so a date 30 hours ago is one day overdue and 20 hours ago is today.
        """
        days_until = whole_days_between(now or utc_now(), next_watering_date)
        return WateringStatus(
            next_watering_date=next_watering_date,
            days_until_watering=days_until,
            is_overdue=days_until < 0,
        )
