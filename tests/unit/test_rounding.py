"""Unit tests for fixed-place rounding"""

import math
from voxa_metrics.utils.rounding import round_half_up, round_money, round_percentage, round_whole


def test_round_half_up_rounds_halves_away_from_zero():
    assert round_half_up(2.675, 2) == 2.68
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(-0.125, 2) == -0.13
    assert round_half_up(33.35, 1) == 33.4


def test_round_helpers():
    assert round_money(1 / 3) == 0.33
    assert round_percentage(200 / 3) == 66.7
    assert round_whole(10.5) == 11
    assert round_whole(10.49) == 10
    assert isinstance(round_whole(3.0), int)


def test_round_half_up_large_magnitudes():
    """Test values needing more than the default decimal precision"""
    assert round_half_up(1e30, 2) == 1e30
    assert round_half_up(1.7e308, 1) == 1.7e308
    assert round_half_up(1e-30, 2) == 0.0


def test_round_half_up_non_finite_passthrough():
    """Test infinities and NaN are returned unchanged"""
    assert round_half_up(float("inf"), 1) == float("inf")
    assert round_half_up(float("-inf"), 2) == float("-inf")
    assert math.isnan(round_half_up(float("nan"), 2))
    assert round_whole(float("inf")) == float("inf")
