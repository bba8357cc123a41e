"""
Tournament input records.

The upstream data source delivers tournaments as JSON objects:

    {
        "tournament_id": 7,
        "time_start": "2024-03-01T10:00:00Z",
        "rounds": [
            {"matches": [
                {"id": 31,
                 "team_A_player_id_1": 1, "team_A_player_id_2": 2,
                 "team_B_player_id_1": 3, "team_B_player_id_2": 4,
                 "team_A_points": 6, "team_B_points": 2}
            ]}
        ]
    }

This module converts them into read-only dataclasses. Missing or malformed
points count as 0 (the match is then treated as a walkover by the engine).
Missing player ids, a missing tournament id or an unparseable start time are
structural problems and raise TournamentDataError.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Union

logger = logging.getLogger(__name__)

Points = Union[int, float]

PLAYER_ID_FIELDS = (
    "team_A_player_id_1",
    "team_A_player_id_2",
    "team_B_player_id_1",
    "team_B_player_id_2",
)


class TournamentDataError(ValueError):
    """Raised when tournament input is structurally invalid."""
    pass


@dataclass(frozen=True)
class Match:
    """
    One doubles match.

    Attributes:
        match_id: Match identifier from the data source
        team_a: Player ids of team A (listed order is kept)
        team_b: Player ids of team B
        team_a_points: Points won by team A
        team_b_points: Points won by team B
    """
    match_id: Any
    team_a: tuple[int, int]
    team_b: tuple[int, int]
    team_a_points: Points = 0
    team_b_points: Points = 0

    @property
    def player_ids(self) -> tuple[int, int, int, int]:
        return (*self.team_a, *self.team_b)


@dataclass(frozen=True)
class Round:
    """Ordered matches of one tournament round."""
    matches: tuple[Match, ...] = ()


@dataclass(frozen=True)
class Tournament:
    """
    One tournament.

    Attributes:
        tournament_id: Tournament identifier
        time_start: Start time (naive, UTC)
        rounds: Rounds in play order
    """
    tournament_id: Any
    time_start: datetime
    rounds: tuple[Round, ...] = ()

    @property
    def matches(self) -> list[Match]:
        """All matches in play order."""
        return [match for round_ in self.rounds for match in round_.matches]

    def participant_ids(self) -> list[int]:
        """Every player who appears in any match, in order of first appearance."""
        participants: dict[int, None] = {}
        for match in self.matches:
            for player_id in match.player_ids:
                participants.setdefault(player_id, None)
        return list(participants)


def parse_time_start(value: Any) -> datetime:
    """
    Parse a tournament start time.

    Accepts datetime objects and ISO-8601 strings (including a trailing 'Z').
    Timezone-aware values are converted to naive UTC so every tournament is
    compared on the same clock.

    Raises:
        TournamentDataError: If the value can't be parsed
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise TournamentDataError(f"Unparseable time_start: {value!r}")
    else:
        raise TournamentDataError(f"Unparseable time_start: {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_points(value: Any, match_id: Any = None) -> Points:
    """
    Parse a points value, defaulting to 0 when missing or malformed.

    Integral values come back as int so scores render as '6 - 2'.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        logger.warning("Malformed points %r in match %s, using 0", value, match_id)
        return 0
    if isinstance(value, int):
        return value

    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Malformed points %r in match %s, using 0", value, match_id)
        return 0

    if number != number or number in (float("inf"), float("-inf")):
        logger.warning("Malformed points %r in match %s, using 0", value, match_id)
        return 0
    if number.is_integer():
        return int(number)
    return number


def _parse_player_id(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        raise TournamentDataError(f"Match {data.get('id')!r} is missing {key}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise TournamentDataError(f"Match {data.get('id')!r} has invalid {key}: {value!r}")


def match_from_dict(data: dict) -> Match:
    """Build a Match from its JSON object."""
    if not isinstance(data, dict):
        raise TournamentDataError(f"Match must be an object, got {type(data).__name__}")

    a1, a2, b1, b2 = (_parse_player_id(data, key) for key in PLAYER_ID_FIELDS)
    match_id = data.get("id", data.get("match_id"))

    return Match(
        match_id=match_id,
        team_a=(a1, a2),
        team_b=(b1, b2),
        team_a_points=parse_points(data.get("team_A_points"), match_id),
        team_b_points=parse_points(data.get("team_B_points"), match_id),
    )


def tournament_from_dict(data: dict) -> Tournament:
    """
    Build a Tournament from its JSON object.

    Raises:
        TournamentDataError: If required fields are missing or invalid
    """
    if not isinstance(data, dict):
        raise TournamentDataError(f"Tournament must be an object, got {type(data).__name__}")

    tournament_id = data.get("tournament_id")
    if tournament_id is None:
        raise TournamentDataError("Tournament is missing tournament_id")

    if "time_start" not in data:
        raise TournamentDataError(f"Tournament {tournament_id!r} is missing time_start")
    time_start = parse_time_start(data["time_start"])

    rounds = []
    for round_data in data.get("rounds") or []:
        matches = tuple(match_from_dict(m) for m in (round_data or {}).get("matches") or [])
        rounds.append(Round(matches=matches))

    return Tournament(
        tournament_id=tournament_id,
        time_start=time_start,
        rounds=tuple(rounds),
    )
