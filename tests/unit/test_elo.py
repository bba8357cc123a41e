"""
Unit tests for the doubles ELO calculator.

Tests the core calculation logic to ensure:
- Expected scores follow the logistic formula
- Favorites gain less than underdogs for the same result
- The rating-gap handicap only moves points between teammates
- Stronger/weaker ordering is deterministic for equal ratings
"""

import pytest

from padelo.elo.calculator import (
    PlayerSnapshot,
    calculate_expected_score,
    calculate_gap_bonus,
    calculate_pair_strength,
    calculate_team_changes,
    split_by_strength,
)
from padelo.elo.params import RatingParams


def _snap(player_id, rating, tournaments_played=5):
    return PlayerSnapshot(player_id=player_id, rating=rating, tournaments_played=tournaments_played)


class TestExpectedScore:
    """Tests for calculate_expected_score."""

    def test_equal_pairs(self):
        """Equal pair strengths give 0.5 each."""
        assert calculate_expected_score(1350.0, 1350.0) == pytest.approx(0.5)

    def test_400_point_difference(self):
        """A 400 point edge means 10:1 odds, ~0.909."""
        expected = calculate_expected_score(1900.0, 1500.0)
        assert expected == pytest.approx(10 / 11)

    def test_symmetry(self):
        """Both sides' expected scores sum to 1."""
        a = calculate_expected_score(1420.0, 1310.0)
        b = calculate_expected_score(1310.0, 1420.0)
        assert a + b == pytest.approx(1.0)
        assert a > 0.5 > b

    def test_custom_spread(self):
        """A wider spread flattens the curve."""
        narrow = calculate_expected_score(1500.0, 1400.0, spread=400.0)
        wide = calculate_expected_score(1500.0, 1400.0, spread=800.0)
        assert 0.5 < wide < narrow


class TestPairStrength:
    """Tests for calculate_pair_strength."""

    def test_average(self):
        assert calculate_pair_strength(_snap(1, 1500.0), _snap(2, 1300.0)) == 1400.0


class TestGapBonus:
    """Tests for the rating-gap handicap."""

    def test_no_gap_no_bonus(self):
        """Equally rated teammates get no handicap."""
        assert calculate_gap_bonus(0.0, 16.0, 16.0) == 0.0

    def test_full_gap(self):
        """At a 200 point gap the bonus is 10% of the average change."""
        assert calculate_gap_bonus(200.0, 16.0, 16.0) == pytest.approx(1.6)

    def test_partial_gap(self):
        """Below the cap the bonus scales linearly with the gap."""
        assert calculate_gap_bonus(50.0, 16.0, 16.0) == pytest.approx(0.4)

    def test_gap_capped(self):
        """Gaps above 200 don't grow the bonus further."""
        assert calculate_gap_bonus(600.0, 16.0, 16.0) == pytest.approx(
            calculate_gap_bonus(200.0, 16.0, 16.0)
        )

    def test_uses_absolute_changes(self):
        """Losses produce the same bonus magnitude as wins."""
        assert calculate_gap_bonus(200.0, -8.0, -16.0) == pytest.approx(1.2)


class TestSplitByStrength:
    """Tests for stronger/weaker ordering."""

    def test_higher_rating_is_stronger(self):
        stronger, weaker = split_by_strength(_snap(1, 1300.0), _snap(2, 1500.0))
        assert stronger.player_id == 2
        assert weaker.player_id == 1

    def test_tie_second_listed_is_weaker(self):
        stronger, weaker = split_by_strength(_snap(1, 1400.0), _snap(2, 1400.0))
        assert stronger.player_id == 1
        assert weaker.player_id == 2


class TestTeamChanges:
    """Tests for calculate_team_changes."""

    @pytest.fixture
    def params(self):
        return RatingParams()

    def test_equal_teammates_share_change(self, params):
        """Two newbies at the same rating get identical changes."""
        changes = calculate_team_changes(
            _snap(1, 1350.0, 0), _snap(2, 1350.0, 0), 0.4, params,
        )

        assert changes[1].k_factor == 40.0
        assert changes[1].final == pytest.approx(16.0)
        assert changes[2].final == pytest.approx(16.0)
        assert changes[1].bonus == 0.0
        assert changes[2].bonus == 0.0

    def test_handicap_moves_points_to_weaker(self, params):
        """
        Stronger teammate gains less, weaker teammate gains more.

        Regular K=20, delta 0.4 → base 8 each; 200 gap → bonus 0.8.
        """
        changes = calculate_team_changes(
            _snap(1, 1500.0), _snap(2, 1300.0), 0.4, params,
        )

        assert changes[1].base == pytest.approx(8.0)
        assert changes[1].bonus == pytest.approx(-0.8)
        assert changes[1].final == pytest.approx(7.2)
        assert changes[2].bonus == pytest.approx(0.8)
        assert changes[2].final == pytest.approx(8.8)

    def test_handicap_on_loss(self, params):
        """On a loss the stronger teammate loses more, the weaker less."""
        changes = calculate_team_changes(
            _snap(1, 1500.0), _snap(2, 1300.0), -0.4, params,
        )

        assert changes[1].final == pytest.approx(-8.8)
        assert changes[2].final == pytest.approx(-7.2)

    def test_handicap_is_zero_sum_within_team(self, params):
        """The bonus only moves points: total equals the sum of base changes."""
        changes = calculate_team_changes(
            _snap(1, 1850.0, 7), _snap(2, 1420.0, 1), 0.27, params,
        )

        total_final = changes[1].final + changes[2].final
        total_base = changes[1].base + changes[2].base
        assert total_final == pytest.approx(total_base)
        # Pro K for the stronger, newbie K for the weaker
        assert changes[1].k_factor == 10.0
        assert changes[2].k_factor == 40.0
        assert changes[1].base == pytest.approx(10.0 * 0.27)
        assert changes[2].base == pytest.approx(40.0 * 0.27)

    def test_custom_bonus_share(self):
        """Bonus share comes from the params."""
        params = RatingParams(gap_bonus_share=0.5)
        changes = calculate_team_changes(
            _snap(1, 1500.0), _snap(2, 1300.0), 0.4, params,
        )
        assert changes[2].bonus == pytest.approx(4.0)
