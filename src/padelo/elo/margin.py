"""
Margin of victory weighting for match results.

In standard ELO a win is worth 1 and a loss 0, so a 6-5 squeaker and a 6-0
blowout move ratings by the same amount. Padel results here are recorded as
points per team, and the actual score is taken from the squared points share:

    actual_A = A^2 / (A^2 + B^2)
    actual_B = B^2 / (A^2 + B^2)

Squaring amplifies dominant results:
- 6-0 → 1.00 / 0.00
- 6-2 → 0.90 / 0.10
- 6-4 → ~0.69 / ~0.31
- 5-5 → 0.50 / 0.50

The two actual scores always sum to 1.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MarginResult:
    """
    Result of the margin-of-victory calculation.

    Attributes:
        actual_a: Actual score credited to team A (0.0 - 1.0)
        actual_b: Actual score credited to team B (0.0 - 1.0)
        team_a_won: Whether team A is credited with the win. Equal points
            credit team B, since only a strictly higher score wins for A.
    """
    actual_a: float
    actual_b: float
    team_a_won: bool


def calculate_actual_scores(team_a_points: float, team_b_points: float) -> Optional[MarginResult]:
    """
    Turn a points result into margin-weighted actual scores.

    Args:
        team_a_points: Points won by team A
        team_b_points: Points won by team B

    Returns:
        MarginResult, or None when neither team scored (walkover or missing
        score); such matches carry no rating information.

    Examples:
        calculate_actual_scores(6, 2)  # → actual_a=0.9, actual_b=0.1
        calculate_actual_scores(0, 0)  # → None
    """
    points_a_sq = team_a_points ** 2
    points_b_sq = team_b_points ** 2
    total = points_a_sq + points_b_sq

    if total == 0:
        return None

    return MarginResult(
        actual_a=points_a_sq / total,
        actual_b=points_b_sq / total,
        team_a_won=team_a_points > team_b_points,
    )


def format_score(own_points: float, opponent_points: float) -> str:
    """Format a score from one team's perspective, e.g. '6 - 2'."""
    return f"{own_points} - {opponent_points}"
