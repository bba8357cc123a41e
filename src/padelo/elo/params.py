"""Rating parameter sets and helpers for loading overrides."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from padelo.elo.constants import (
    DECAY_DEFAULTS,
    ELO_SPREAD,
    GAP_BONUS_DEFAULTS,
    INITIAL_RATING,
    K_FACTOR_DEFAULTS,
    MINIMUM_RATING,
)

logger = logging.getLogger(__name__)

DEFAULT_PARAMS_VERSION = "defaults-v1"

# Fields that must hold whole numbers
INTEGER_FIELDS = ("calibration_tournaments", "inactivity_period_days")

# Fields used as divisors
POSITIVE_FIELDS = ("inactivity_period_days", "spread", "gap_bonus_max_difference")


@dataclass
class RatingParams:
    """
    All tunable rating parameters in one object.

    Passed to RatingEngine to control the rating system behavior.
    The defaults reproduce the published padel ratings exactly, so
    only change them when experimenting.
    """
    # Rating bounds
    initial_rating: float = INITIAL_RATING
    minimum_rating: float = MINIMUM_RATING

    # K-factor tiers
    k_newbie: float = K_FACTOR_DEFAULTS["newbie"]
    k_regular: float = K_FACTOR_DEFAULTS["regular"]
    k_pro: float = K_FACTOR_DEFAULTS["pro"]
    calibration_tournaments: int = K_FACTOR_DEFAULTS["calibration_tournaments"]
    pro_threshold: float = K_FACTOR_DEFAULTS["pro_threshold"]

    # Inactivity penalty
    inactivity_period_days: int = DECAY_DEFAULTS["period_days"]
    inactivity_penalty: float = DECAY_DEFAULTS["penalty"]

    # Intra-team rating-gap handicap
    gap_bonus_max_difference: float = GAP_BONUS_DEFAULTS["max_difference"]
    gap_bonus_share: float = GAP_BONUS_DEFAULTS["share"]

    # Expected-score spread
    spread: float = ELO_SPREAD

    def to_dict(self) -> dict:
        return asdict(self)


def params_from_dict(data: dict) -> tuple[RatingParams, str]:
    """
    Build RatingParams from a mapping of overrides.

    Unknown keys, non-numeric or non-finite values, fractional counters and
    non-positive divisors make the whole mapping unusable; in that case the
    defaults are returned instead.

    Returns:
        Tuple of (params, version). The version is taken from an optional
        "name" key, or DEFAULT_PARAMS_VERSION when falling back.
    """
    overrides = dict(data)
    name = overrides.pop("name", "custom")
    known = {f.name for f in fields(RatingParams)}

    unknown = set(overrides) - known
    if unknown:
        logger.warning("Ignoring rating params with unknown keys: %s", sorted(unknown))
        return RatingParams(), DEFAULT_PARAMS_VERSION

    try:
        values = {key: float(value) for key, value in overrides.items()}
    except (TypeError, ValueError, OverflowError) as exc:
        logger.warning("Ignoring invalid rating params: %s", exc)
        return RatingParams(), DEFAULT_PARAMS_VERSION

    not_finite = sorted(key for key, value in values.items() if not math.isfinite(value))
    if not_finite:
        logger.warning("Ignoring rating params with non-finite values: %s", not_finite)
        return RatingParams(), DEFAULT_PARAMS_VERSION

    for key in INTEGER_FIELDS:
        if key not in values:
            continue
        if not values[key].is_integer():
            logger.warning("%s must be a whole number, using defaults", key)
            return RatingParams(), DEFAULT_PARAMS_VERSION
        values[key] = int(values[key])

    params = RatingParams(**values)
    for key in POSITIVE_FIELDS:
        if getattr(params, key) <= 0:
            logger.warning("%s must be positive, using defaults", key)
            return RatingParams(), DEFAULT_PARAMS_VERSION

    return params, str(name)


def load_params(path: str | Path | None) -> tuple[RatingParams, str]:
    """Return params from a JSON overrides file, or defaults if there is none."""
    if path is None:
        return RatingParams(), DEFAULT_PARAMS_VERSION

    params_path = Path(path)
    if not params_path.exists():
        logger.warning("Rating params file not found: %s", params_path)
        return RatingParams(), DEFAULT_PARAMS_VERSION

    with params_path.open(encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            logger.warning("Rating params file is not valid JSON (%s): %s", params_path, exc)
            return RatingParams(), DEFAULT_PARAMS_VERSION

    if not isinstance(data, dict):
        logger.warning("Rating params file must hold a JSON object: %s", params_path)
        return RatingParams(), DEFAULT_PARAMS_VERSION

    return params_from_dict(data)
