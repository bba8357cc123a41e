"""
Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides
shared fixtures for all tests.
"""

from datetime import datetime, timedelta

import pytest

from padelo.data.models import Match, Round, Tournament
from padelo.elo.params import RatingParams


DAY_ZERO = datetime(2024, 1, 1, 10, 0, 0)


@pytest.fixture
def day():
    """
    Turn a day offset into a timestamp.

    day(0) is 2024-01-01 10:00, day(61) is sixty-one days later at the
    same time, so offsets map directly to whole days of inactivity.
    """
    def _day(offset: int) -> datetime:
        return DAY_ZERO + timedelta(days=offset)
    return _day


@pytest.fixture
def make_match():
    """
    Build a Match from a compact description.

    make_match(31, (1, 2), (3, 4), 6, 2) is pair 1+2 beating 3+4 six-two.
    """
    def _make(match_id, team_a, team_b, team_a_points=0, team_b_points=0) -> Match:
        return Match(
            match_id=match_id,
            team_a=tuple(team_a),
            team_b=tuple(team_b),
            team_a_points=team_a_points,
            team_b_points=team_b_points,
        )
    return _make


@pytest.fixture
def make_tournament(day):
    """
    Build a single-round Tournament played on a given day offset.

    Pass several lists of matches via rounds= for multi-round tournaments.
    """
    def _make(tournament_id, day_offset, matches=(), rounds=None) -> Tournament:
        if rounds is None:
            rounds = [matches]
        return Tournament(
            tournament_id=tournament_id,
            time_start=day(day_offset),
            rounds=tuple(Round(matches=tuple(r)) for r in rounds),
        )
    return _make


@pytest.fixture
def params():
    """Default rating parameters."""
    return RatingParams()


@pytest.fixture
def dataset_payload():
    """Raw JSON payload shaped like the upstream data.json export."""
    return [
        {
            "tournament_id": 2,
            "time_start": "2024-01-08T10:00:00Z",
            "rounds": [
                {"matches": [
                    {"id": 201,
                     "team_A_player_id_1": 1, "team_A_player_id_2": 3,
                     "team_B_player_id_1": 2, "team_B_player_id_2": 4,
                     "team_A_points": 6, "team_B_points": 4},
                ]},
            ],
        },
        {
            "tournament_id": 1,
            "time_start": "2024-01-01T10:00:00Z",
            "rounds": [
                {"matches": [
                    {"id": 101,
                     "team_A_player_id_1": 1, "team_A_player_id_2": 2,
                     "team_B_player_id_1": 3, "team_B_player_id_2": 4,
                     "team_A_points": 6, "team_B_points": 2},
                ]},
            ],
        },
    ]
