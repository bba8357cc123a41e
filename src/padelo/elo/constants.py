"""
Rating system constants.

Every player starts at INITIAL_RATING and can never drop below MINIMUM_RATING.
The remaining knobs are grouped by the part of the algorithm they control.

K factor: Controls rating volatility (how much a single match moves a rating)
  - Newbies get the highest K until their calibration tournaments are done
  - Pros (rating at or above the threshold) get the lowest K
  - Everyone else uses the regular K

Spread: Controls how a pair-strength difference maps to an expected score.
  400 is the classic Elo value: a 400 point gap means ~91% expected score.
"""

# Default starting rating for new players
INITIAL_RATING = 1350.0

# Hard floor, applied after every rating mutation
MINIMUM_RATING = 1000.0

# Spread used by the logistic expected-score formula
ELO_SPREAD = 400.0

# K-factor tiers
# calibration_tournaments: tournaments played before a player leaves the newbie tier
# pro_threshold: rating from which the pro K-factor applies
K_FACTOR_DEFAULTS = {
    "newbie": 40.0,
    "regular": 20.0,
    "pro": 10.0,
    "calibration_tournaments": 2,
    "pro_threshold": 1800.0,
}

# Inactivity penalty
# period_days: length of one inactivity period; only full periods are penalised
# penalty: points deducted per full period
DECAY_DEFAULTS = {
    "period_days": 60,
    "penalty": 25.0,
}

# Intra-team rating-gap handicap
# max_difference: gap at which the handicap stops growing
# share: fraction of the pair's average change moved from stronger to weaker
GAP_BONUS_DEFAULTS = {
    "max_difference": 200.0,
    "share": 0.1,
}
