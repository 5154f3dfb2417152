"""
Daily Light Integral
====================
DLI (mol/m²/day) from PPFD (µmol/m²/s) and photoperiod (hours):

    DLI = PPFD * hours * 3600 / 1,000,000

plus a recommendation for reaching a target DLI range by changing either
the light intensity or the photoperiod.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from plantcare.constants import COMMON_PHOTOPERIODS, MAX_PHOTOPERIOD_HOURS, MICROMOLES_PER_MOLE, SECONDS_PER_HOUR


class DLIAdjustmentKind(str, Enum):
    NONE = "none"
    INCREASE = "increase"
    DECREASE = "decrease"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class DLIAdjustment:
    """Either keep the photoperiod and change PPFD, or keep PPFD and change the photoperiod."""

    kind: DLIAdjustmentKind
    ppfd_option: float = 0.0
    photoperiod_option: float = 0.0


def _solve(target_dli: float, other: float) -> float:
    # PPFD for a photoperiod, or photoperiod for a PPFD
    if other <= 0:
        return 0.0
    return target_dli * MICROMOLES_PER_MOLE / (other * SECONDS_PER_HOUR)


class DLICalculator:
    @staticmethod
    def calculate_dli(ppfd: float, photoperiod_hours: float) -> float:
        if ppfd <= 0 or photoperiod_hours <= 0:
            return 0.0
        return ppfd * photoperiod_hours * SECONDS_PER_HOUR / MICROMOLES_PER_MOLE

    @staticmethod
    def recommend_adjustment(
        current_dli: float,
        target_min: float,
        target_max: float,
        current_ppfd: float,
        current_photoperiod: float,
    ) -> DLIAdjustment:
        """
        Recommend how to bring ``current_dli`` into ``[target_min, target_max]``.

        Below the range the options aim at ``target_min`` (photoperiod capped
        at 24 h); above it they aim at ``target_max``.
        """
        if target_min <= current_dli <= target_max:
            return DLIAdjustment(kind=DLIAdjustmentKind.NONE)

        if current_dli < target_min:
            return DLIAdjustment(
                kind=DLIAdjustmentKind.INCREASE,
                ppfd_option=_solve(target_min, current_photoperiod),
                photoperiod_option=min(_solve(target_min, current_ppfd), MAX_PHOTOPERIOD_HOURS),
            )

        return DLIAdjustment(
            kind=DLIAdjustmentKind.DECREASE,
            ppfd_option=max(_solve(target_max, current_photoperiod), 0.0),
            photoperiod_option=max(_solve(target_max, current_ppfd), 0.0),
        )

    @classmethod
    def calculate_dli_for_common_photoperiods(cls, ppfd: float) -> dict[str, float]:
        """DLI at 12/12, 18/6, 20/4 and 24/0 for one PPFD."""
        return {label: cls.calculate_dli(ppfd, hours) for hours, label in COMMON_PHOTOPERIODS}
