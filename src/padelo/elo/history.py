"""
Rating history records.

Each player keeps an append-only list of events, one per rating-affecting
occurrence:

- TournamentEvent: rating before/after a tournament, with one MatchLogEntry
  per match the player took part in
- InactivityEvent: a penalty charged for being absent

Every record serializes to a plain dict (dates as ISO strings) for
rendering or JSON export.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Literal, Union


@dataclass(frozen=True)
class PlayerRef:
    """A player as seen at the start of a match."""
    id: int
    rating: float

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "rating": self.rating}


@dataclass(frozen=True)
class MatchLogEntry:
    """
    Full breakdown of one match from one player's perspective.

    Attributes:
        match_id: Identifier of the match
        score: Score with the player's own team first (e.g. '6 - 2')
        rating_before_match: Player's pre-match rating
        rating_after_match: Player's rating after the change and floor clamp
        partner: Teammate with their pre-match rating
        opponents: Both opponents with their pre-match ratings
        my_pair_strength: Own pair's average pre-match rating
        opponent_pair_strength: Opponent pair's average pre-match rating
        expected_score: Own pair's expected score
        actual_score: Own pair's margin-weighted actual score
        k_factor: K used for this player
        base_change: K * team delta
        bonus: Rating-gap handicap (negative for the stronger teammate)
        final_change: base_change + bonus
    """
    match_id: Any
    score: str
    rating_before_match: float
    rating_after_match: float
    partner: PlayerRef
    opponents: tuple[PlayerRef, PlayerRef]
    my_pair_strength: float
    opponent_pair_strength: float
    expected_score: float
    actual_score: float
    k_factor: float
    base_change: float
    bonus: float
    final_change: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "match_id": self.match_id,
            "score": self.score,
            "rating_before_match": self.rating_before_match,
            "partner": self.partner.to_dict(),
            "opponents": [opponent.to_dict() for opponent in self.opponents],
            "my_pair_strength": self.my_pair_strength,
            "opponent_pair_strength": self.opponent_pair_strength,
            "expected_score": self.expected_score,
            "actual_score": self.actual_score,
            "k_factor": self.k_factor,
            "base_change": self.base_change,
            "bonus": self.bonus,
            "final_change": self.final_change,
            "rating_after_match": self.rating_after_match,
        }


@dataclass
class TournamentEvent:
    """
    A player's participation in one tournament.

    Opened before the tournament's first match and closed (rating_after set,
    appended to the player's history) once all matches are settled.
    """
    id: Any
    date: date
    rating_before: float
    rating_after: float = 0.0
    matches: list[MatchLogEntry] = field(default_factory=list)
    type: Literal["tournament"] = "tournament"

    @property
    def rating_change(self) -> float:
        """Net rating change over the whole tournament."""
        return self.rating_after - self.rating_before

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "id": self.id,
            "date": self.date.isoformat(),
            "rating_before": self.rating_before,
            "matches": [match.to_dict() for match in self.matches],
            "rating_after": self.rating_after,
        }


@dataclass(frozen=True)
class InactivityEvent:
    """An inactivity penalty charged before a tournament the player skipped."""
    date: date
    rating_before: float
    rating_after: float
    deduction: float
    type: Literal["inactivity"] = "inactivity"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "date": self.date.isoformat(),
            "rating_before": self.rating_before,
            "deduction": self.deduction,
            "rating_after": self.rating_after,
        }


HistoryEvent = Union[TournamentEvent, InactivityEvent]
