"""
Tournament input data.

Typed, read-only records for the tournament dataset and a JSON loader.
Fetching the dataset is left to the caller; this package only reads it.
"""

from padelo.data.loader import load_tournaments, parse_tournaments
from padelo.data.models import (
    Match,
    Round,
    Tournament,
    TournamentDataError,
    match_from_dict,
    tournament_from_dict,
)

__all__ = [
    "Match",
    "Round",
    "Tournament",
    "TournamentDataError",
    "load_tournaments",
    "match_from_dict",
    "parse_tournaments",
    "tournament_from_dict",
]
