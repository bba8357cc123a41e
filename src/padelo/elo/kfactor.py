"""
K-factor tiers for calibration, regular and pro players.

New players need their ratings to converge quickly, so for their first
tournaments (the calibration period) they use the highest K regardless of
rating. After calibration, K depends on the rating:

- Newbie (fewer than calibration_tournaments played): K = 40
- Pro (rating >= pro_threshold): K = 10
- Regular (everyone else): K = 20

The K-factor is always evaluated on the pre-match state of the player.
"""

from padelo.elo.constants import K_FACTOR_DEFAULTS


def calculate_k_factor(
    tournaments_played: int,
    rating: float,
    newbie: float | None = None,
    regular: float | None = None,
    pro: float | None = None,
    calibration_tournaments: int | None = None,
    pro_threshold: float | None = None,
) -> float:
    """
    Pick the K-factor for a player.

    Args:
        tournaments_played: Distinct tournaments already credited to the player
        rating: Player's pre-match rating
        newbie: K during calibration. Default from K_FACTOR_DEFAULTS.
        regular: K after calibration below the pro threshold.
        pro: K after calibration at or above the pro threshold.
        calibration_tournaments: Tournaments needed to finish calibration.
        pro_threshold: Rating from which the pro K applies.

    Returns:
        K-factor for this player

    Examples:
        calculate_k_factor(0, 1900.0)  # → 40.0 (still calibrating)
        calculate_k_factor(5, 1900.0)  # → 10.0
        calculate_k_factor(5, 1500.0)  # → 20.0
    """
    if newbie is None:
        newbie = K_FACTOR_DEFAULTS["newbie"]
    if regular is None:
        regular = K_FACTOR_DEFAULTS["regular"]
    if pro is None:
        pro = K_FACTOR_DEFAULTS["pro"]
    if calibration_tournaments is None:
        calibration_tournaments = K_FACTOR_DEFAULTS["calibration_tournaments"]
    if pro_threshold is None:
        pro_threshold = K_FACTOR_DEFAULTS["pro_threshold"]

    if tournaments_played < calibration_tournaments:
        return newbie
    if rating >= pro_threshold:
        return pro
    return regular
