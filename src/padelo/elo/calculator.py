"""
ELO rating calculator for padel doubles.

Implements the standard ELO formula adapted for two-player teams:
- Team strength is the average of both teammates' ratings
- Both teammates share the team's score delta, scaled by their own K
- A rating-gap handicap moves part of the change from the stronger
  teammate to the weaker one

The ELO formula:
  Pair strength:  P_A = (R_A1 + R_A2) / 2
  Expected score: E_A = 1 / (1 + 10^((P_B - P_A) / S))
  Rating change:  dR = K * (actual - expected)

Where:
  R = Pre-match ratings of the four players
  K = Per-player volatility factor (see kfactor.py)
  S = Spread factor (400)
"""

from dataclasses import dataclass

from padelo.elo.constants import ELO_SPREAD, GAP_BONUS_DEFAULTS
from padelo.elo.kfactor import calculate_k_factor
from padelo.elo.params import RatingParams


@dataclass(frozen=True)
class PlayerSnapshot:
    """
    Frozen pre-match view of a player.

    Every calculation for a match reads from snapshots, never from live
    state, so a teammate's already-updated rating can't leak in.
    """
    player_id: int
    rating: float
    tournaments_played: int


@dataclass(frozen=True)
class RatingChange:
    """
    One player's rating change for a match.

    Attributes:
        k_factor: K used for this player
        base: K * team delta, before the handicap
        bonus: Handicap adjustment (negative for the stronger teammate)
        final: base + bonus, the change actually applied
    """
    k_factor: float
    base: float
    bonus: float
    final: float


def calculate_expected_score(
    pair_strength: float,
    opponent_strength: float,
    spread: float = ELO_SPREAD,
) -> float:
    """
    Expected score of a pair against another pair.

    Uses the logistic ELO formula:
    E = 1 / (1 + 10^((opponent - pair) / spread))

    Args:
        pair_strength: Average pre-match rating of the pair
        opponent_strength: Average pre-match rating of the opponents
        spread: Rating difference giving 10:1 odds

    Returns:
        Expected score (0.0 to 1.0)
    """
    return 1.0 / (1.0 + 10 ** ((opponent_strength - pair_strength) / spread))


def calculate_pair_strength(first: PlayerSnapshot, second: PlayerSnapshot) -> float:
    """Average pre-match rating of a pair."""
    return (first.rating + second.rating) / 2


def calculate_gap_bonus(
    rating_gap: float,
    change_stronger: float,
    change_weaker: float,
    max_difference: float | None = None,
    share: float | None = None,
) -> float:
    """
    Handicap moved from the stronger teammate to the weaker one.

    The bonus is a share of the pair's average absolute change, scaled by
    how large the rating gap is, and capped once the gap reaches
    max_difference.

    Args:
        rating_gap: Stronger rating minus weaker rating (>= 0)
        change_stronger: Base change of the stronger teammate
        change_weaker: Base change of the weaker teammate
        max_difference: Gap at which the bonus stops growing
        share: Fraction of the average change at full gap

    Returns:
        Bonus (always >= 0). Zero for equally rated teammates.

    Example:
        # 200 point gap, both teammates +16 → bonus 1.6
        calculate_gap_bonus(200.0, 16.0, 16.0)
    """
    if max_difference is None:
        max_difference = GAP_BONUS_DEFAULTS["max_difference"]
    if share is None:
        share = GAP_BONUS_DEFAULTS["share"]

    if rating_gap <= 0:
        return 0.0

    diff_coeff = min(1.0, rating_gap / max_difference)
    avg_change = (abs(change_stronger) + abs(change_weaker)) / 2
    return avg_change * share * diff_coeff


def split_by_strength(
    first: PlayerSnapshot,
    second: PlayerSnapshot,
) -> tuple[PlayerSnapshot, PlayerSnapshot]:
    """
    Order a pair as (stronger, weaker) by pre-match rating.

    Equally rated teammates keep their listed order, so the second-listed
    player counts as the weaker one.
    """
    if second.rating > first.rating:
        return second, first
    return first, second


def calculate_team_changes(
    first: PlayerSnapshot,
    second: PlayerSnapshot,
    delta: float,
    params: RatingParams,
) -> dict[int, RatingChange]:
    """
    Rating changes for both players of one team.

    Args:
        first: Snapshot of the first-listed teammate
        second: Snapshot of the second-listed teammate
        delta: Team's actual score minus expected score
        params: Rating parameters

    Returns:
        Dict of player_id → RatingChange for both teammates
    """
    stronger, weaker = split_by_strength(first, second)

    k_stronger = _k_factor(stronger, params)
    k_weaker = _k_factor(weaker, params)

    change_stronger = k_stronger * delta
    change_weaker = k_weaker * delta

    bonus = calculate_gap_bonus(
        stronger.rating - weaker.rating,
        change_stronger,
        change_weaker,
        max_difference=params.gap_bonus_max_difference,
        share=params.gap_bonus_share,
    )

    return {
        stronger.player_id: RatingChange(
            k_factor=k_stronger,
            base=change_stronger,
            bonus=-bonus,
            final=change_stronger - bonus,
        ),
        weaker.player_id: RatingChange(
            k_factor=k_weaker,
            base=change_weaker,
            bonus=bonus,
            final=change_weaker + bonus,
        ),
    }


def _k_factor(snapshot: PlayerSnapshot, params: RatingParams) -> float:
    return calculate_k_factor(
        snapshot.tournaments_played,
        snapshot.rating,
        newbie=params.k_newbie,
        regular=params.k_regular,
        pro=params.k_pro,
        calibration_tournaments=params.calibration_tournaments,
        pro_threshold=params.pro_threshold,
    )
