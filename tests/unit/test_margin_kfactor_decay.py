"""
Unit tests for the rating modifiers.

- Margin of victory: squared points share
- K-factor tiers: calibration, regular, pro
- Inactivity penalty: full periods only, clamped to the floor
"""

from datetime import datetime

import pytest

from padelo.elo.decay import (
    advance_activity_date,
    calculate_inactivity_penalty,
    whole_days_between,
)
from padelo.elo.kfactor import calculate_k_factor
from padelo.elo.margin import calculate_actual_scores, format_score


class TestActualScores:
    """Tests for calculate_actual_scores."""

    def test_six_two(self):
        result = calculate_actual_scores(6, 2)
        assert result.actual_a == pytest.approx(0.9)
        assert result.actual_b == pytest.approx(0.1)
        assert result.team_a_won

    def test_shutout(self):
        result = calculate_actual_scores(0, 6)
        assert result.actual_a == 0.0
        assert result.actual_b == 1.0
        assert not result.team_a_won

    def test_scores_sum_to_one(self):
        result = calculate_actual_scores(7, 5)
        assert result.actual_a + result.actual_b == pytest.approx(1.0)

    def test_walkover_returns_none(self):
        """0-0 carries no information."""
        assert calculate_actual_scores(0, 0) is None

    def test_tie_credits_team_b(self):
        """Equal points split the score evenly but team A isn't the winner."""
        result = calculate_actual_scores(5, 5)
        assert result.actual_a == pytest.approx(0.5)
        assert not result.team_a_won

    def test_squaring_amplifies_margin(self):
        """A blowout is worth more than the plain points share."""
        result = calculate_actual_scores(6, 3)
        assert result.actual_a > 6 / 9

    def test_format_score(self):
        assert format_score(6, 2) == "6 - 2"
        assert format_score(2, 6) == "2 - 6"


class TestKFactor:
    """Tests for calculate_k_factor."""

    @pytest.mark.parametrize("tournaments_played", [0, 1])
    def test_calibration_ignores_rating(self, tournaments_played):
        assert calculate_k_factor(tournaments_played, 1350.0) == 40.0
        assert calculate_k_factor(tournaments_played, 2100.0) == 40.0

    def test_regular(self):
        assert calculate_k_factor(2, 1799.99) == 20.0

    def test_pro_threshold_inclusive(self):
        assert calculate_k_factor(2, 1800.0) == 10.0
        assert calculate_k_factor(12, 2050.0) == 10.0

    def test_custom_tiers(self):
        k = calculate_k_factor(
            3, 1500.0,
            newbie=50.0, regular=25.0, pro=12.0,
            calibration_tournaments=5, pro_threshold=1400.0,
        )
        assert k == 50.0


class TestInactivityPenalty:
    """Tests for calculate_inactivity_penalty."""

    def test_exactly_one_period_is_free(self):
        result = calculate_inactivity_penalty(1400.0, 60)
        assert result.periods == 0
        assert result.deduction == 0.0
        assert result.new_rating == 1400.0

    @pytest.mark.parametrize("days", [61, 90, 119])
    def test_one_penalty(self, days):
        result = calculate_inactivity_penalty(1400.0, days)
        assert result.periods == 1
        assert result.deduction == 25.0
        assert result.new_rating == 1375.0

    @pytest.mark.parametrize("days", [120, 150, 179])
    def test_two_penalties(self, days):
        result = calculate_inactivity_penalty(1400.0, days)
        assert result.periods == 2
        assert result.new_rating == 1350.0

    def test_clamped_to_floor(self):
        """The nominal deduction is reported even when the floor caps it."""
        result = calculate_inactivity_penalty(1010.0, 130)
        assert result.deduction == 50.0
        assert result.new_rating == 1000.0

    def test_already_at_floor(self):
        result = calculate_inactivity_penalty(1000.0, 200)
        assert result.periods == 3
        assert result.new_rating == 1000.0

    def test_custom_period(self):
        result = calculate_inactivity_penalty(1400.0, 31, period_days=30, penalty=10.0)
        assert result.periods == 1
        assert result.new_rating == 1390.0


class TestActivityClock:
    """Tests for the day counting helpers."""

    def test_partial_days_dropped(self):
        earlier = datetime(2024, 1, 1, 18, 0)
        later = datetime(2024, 3, 2, 9, 0)  # 60 days and 15 hours later
        assert whole_days_between(earlier, later) == 60

    def test_advance_by_whole_periods(self):
        start = datetime(2024, 1, 1, 10, 0)
        assert advance_activity_date(start, 2, 60) == datetime(2024, 4, 30, 10, 0)
