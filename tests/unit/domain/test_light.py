"""
DLI Calculator Tests
====================
"""

import pytest

from plantcare.domain.light import DLIAdjustmentKind, DLICalculator


class TestCalculateDLI:
    def test_formula(self):
        assert DLICalculator.calculate_dli(500, 18) == pytest.approx(32.4)

    @pytest.mark.parametrize("ppfd,hours", [(0, 18), (-100, 18), (500, 0), (500, -2)])
    def test_non_positive_inputs_give_zero(self, ppfd, hours):
        assert DLICalculator.calculate_dli(ppfd, hours) == 0.0

    def test_common_photoperiods(self):
        result = DLICalculator.calculate_dli_for_common_photoperiods(500)
        assert set(result) == {"12/12", "18/6", "20/4", "24/0"}
        assert result["12/12"] == pytest.approx(21.6)
        assert result["24/0"] == pytest.approx(43.2)


class TestRecommendAdjustment:
    def test_inside_range(self):
        adjustment = DLICalculator.recommend_adjustment(30, 25, 40, 500, 18)
        assert adjustment.kind is DLIAdjustmentKind.NONE

    def test_increase_targets_lower_bound(self):
        adjustment = DLICalculator.recommend_adjustment(21.6, 32.4, 40, 500, 12)
        assert adjustment.kind is DLIAdjustmentKind.INCREASE
        assert adjustment.ppfd_option == pytest.approx(750)
        assert adjustment.photoperiod_option == pytest.approx(18)

    def test_increase_caps_photoperiod(self):
        adjustment = DLICalculator.recommend_adjustment(5, 40, 50, 100, 12)
        assert adjustment.photoperiod_option == 24

    def test_decrease_targets_upper_bound(self):
        adjustment = DLICalculator.recommend_adjustment(43.2, 20, 32.4, 500, 24)
        assert adjustment.kind is DLIAdjustmentKind.DECREASE
        assert adjustment.ppfd_option == pytest.approx(375)
        assert adjustment.photoperiod_option == pytest.approx(18)

    def test_zero_divisors_give_zero_options(self):
        adjustment = DLICalculator.recommend_adjustment(0, 20, 30, 0, 0)
        assert adjustment.kind is DLIAdjustmentKind.INCREASE
        assert adjustment.ppfd_option == 0
        assert adjustment.photoperiod_option == 0
