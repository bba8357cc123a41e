"""
Padel rating system module.

Implements a doubles ELO variant with:
- Pair strength from the average of both teammates' ratings
- Margin-of-victory weighting from squared points
- Calibration K-factor for new players, lower K for pros
- Rating-gap handicap between stronger and weaker teammates
- Flat inactivity penalty per full inactivity period
"""

from padelo.elo.calculator import (
    PlayerSnapshot,
    RatingChange,
    calculate_expected_score,
    calculate_gap_bonus,
    calculate_team_changes,
)
from padelo.elo.constants import INITIAL_RATING, MINIMUM_RATING
from padelo.elo.decay import calculate_inactivity_penalty
from padelo.elo.history import InactivityEvent, MatchLogEntry, TournamentEvent
from padelo.elo.kfactor import calculate_k_factor
from padelo.elo.leaderboard import LeaderboardEntry, RatingPoint
from padelo.elo.margin import calculate_actual_scores
from padelo.elo.params import RatingParams, load_params
from padelo.elo.pipeline import RatingEngine, engine_to_dict, process_tournaments
from padelo.elo.settlement import settle_match
from padelo.elo.store import PlayerState, PlayerStore

__all__ = [
    "INITIAL_RATING",
    "MINIMUM_RATING",
    "InactivityEvent",
    "LeaderboardEntry",
    "MatchLogEntry",
    "PlayerSnapshot",
    "PlayerState",
    "PlayerStore",
    "RatingChange",
    "RatingEngine",
    "RatingParams",
    "RatingPoint",
    "TournamentEvent",
    "calculate_actual_scores",
    "calculate_expected_score",
    "calculate_gap_bonus",
    "calculate_inactivity_penalty",
    "calculate_k_factor",
    "calculate_team_changes",
    "engine_to_dict",
    "load_params",
    "process_tournaments",
    "settle_match",
]
