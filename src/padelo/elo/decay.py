"""
Inactivity penalty for ratings.

Players who stop entering tournaments keep their rating frozen, which lets
them sit on a high leaderboard spot. To counter this, every full inactivity
period (60 days by default) costs a flat number of points (25 by default).

Only full periods count: 60 days of absence cost nothing, 61-119 days cost
one penalty, 120-179 days cost two, and so on. The penalty never pushes a
rating below the floor.

Once periods are charged, the player's activity clock moves forward by
exactly those periods, so the leftover part of a period still counts toward
the next penalty.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from padelo.elo.constants import DECAY_DEFAULTS, MINIMUM_RATING


@dataclass(frozen=True)
class DecayResult:
    """
    Outcome of an inactivity check.

    Attributes:
        periods: Full inactivity periods elapsed (0 if within the grace period)
        deduction: Points nominally due for those periods
        new_rating: Rating after the deduction, clamped to the floor
    """
    periods: int
    deduction: float
    new_rating: float


def whole_days_between(earlier: datetime, later: datetime) -> int:
    """Whole days elapsed between two timestamps (partial days are dropped)."""
    return (later - earlier).days


def calculate_inactivity_penalty(
    current_rating: float,
    days_inactive: int,
    period_days: int | None = None,
    penalty: float | None = None,
    minimum_rating: float | None = None,
) -> DecayResult:
    """
    Work out the inactivity penalty for a player.

    Args:
        current_rating: Player's current rating
        days_inactive: Whole days since the player's activity clock
        period_days: Length of one inactivity period. Default from DECAY_DEFAULTS.
        penalty: Points per full period. Default from DECAY_DEFAULTS.
        minimum_rating: Rating floor. Default MINIMUM_RATING.

    Returns:
        DecayResult (unchanged rating and zero periods within the grace period)

    Examples:
        calculate_inactivity_penalty(1400.0, 60)   # → periods=0, new_rating=1400.0
        calculate_inactivity_penalty(1400.0, 130)  # → periods=2, new_rating=1350.0
        calculate_inactivity_penalty(1010.0, 130)  # → periods=2, new_rating=1000.0
    """
    if period_days is None:
        period_days = DECAY_DEFAULTS["period_days"]
    if penalty is None:
        penalty = DECAY_DEFAULTS["penalty"]
    if minimum_rating is None:
        minimum_rating = MINIMUM_RATING

    # No penalty within the grace period
    if days_inactive <= period_days:
        return DecayResult(periods=0, deduction=0.0, new_rating=current_rating)

    periods = days_inactive // period_days
    deduction = penalty * periods
    new_rating = max(minimum_rating, current_rating - deduction)

    return DecayResult(periods=periods, deduction=deduction, new_rating=new_rating)


def advance_activity_date(last_activity: datetime, periods: int, period_days: int) -> datetime:
    """Move an activity clock forward by whole inactivity periods."""
    return last_activity + timedelta(days=periods * period_days)
