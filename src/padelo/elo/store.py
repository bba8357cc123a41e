"""
In-memory player store.

Holds the mutable rating state of every player seen so far, keyed by player
id. Players are created lazily the first time they are encountered and are
never removed.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from padelo.elo.constants import INITIAL_RATING, MINIMUM_RATING
from padelo.elo.history import HistoryEvent


@dataclass
class PlayerState:
    """
    Current rating state of one player.

    Attributes:
        player_id: Player identifier
        rating: Current rating (never below the floor)
        last_activity_date: Anchor for the inactivity clock
        tournaments_played: Number of distinct tournaments credited
        matches_played: Settled matches (walkovers excluded)
        wins: Matches credited as wins
        losses: Matches credited as losses
        participated_in_tournaments: Tournament ids already credited
        detailed_history: Append-only rating events, oldest first
    """
    player_id: int
    rating: float = INITIAL_RATING
    last_activity_date: Optional[datetime] = None
    tournaments_played: int = 0
    matches_played: int = 0
    wins: int = 0
    losses: int = 0
    participated_in_tournaments: set = field(default_factory=set)
    detailed_history: list[HistoryEvent] = field(default_factory=list)

    def clamp(self, minimum_rating: float = MINIMUM_RATING) -> None:
        """Enforce the rating floor."""
        self.rating = max(minimum_rating, self.rating)

    def credit_tournament(self, tournament_id: Any) -> bool:
        """
        Count a tournament towards tournaments_played.

        Returns:
            True if the tournament was new for this player
        """
        if tournament_id in self.participated_in_tournaments:
            return False
        self.participated_in_tournaments.add(tournament_id)
        self.tournaments_played = len(self.participated_in_tournaments)
        return True

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_id": self.player_id,
            "rating": self.rating,
            "tournaments_played": self.tournaments_played,
            "matches_played": self.matches_played,
            "wins": self.wins,
            "losses": self.losses,
            "last_activity_date": (
                self.last_activity_date.isoformat() if self.last_activity_date else None
            ),
            "detailed_history": [event.to_dict() for event in self.detailed_history],
        }


class PlayerStore:
    """
    Mapping of player id → PlayerState.

    Usage:
        store = PlayerStore()
        player = store.get_or_create(17, datetime(2024, 3, 1))
        player.rating  # → 1350.0
    """

    def __init__(self, initial_rating: float = INITIAL_RATING):
        self.initial_rating = initial_rating
        self._players: dict[int, PlayerState] = {}

    def get_or_create(self, player_id: int, as_of: datetime) -> PlayerState:
        """
        Return a player's state, creating it on first sight.

        Args:
            player_id: Player identifier
            as_of: Starting point of the new player's inactivity clock

        Returns:
            Existing or freshly created PlayerState
        """
        player = self._players.get(player_id)
        if player is None:
            player = PlayerState(
                player_id=player_id,
                rating=self.initial_rating,
                last_activity_date=as_of,
            )
            self._players[player_id] = player
        return player

    def get(self, player_id: int) -> Optional[PlayerState]:
        return self._players.get(player_id)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def __iter__(self) -> Iterator[PlayerState]:
        return iter(list(self._players.values()))

    def __len__(self) -> int:
        return len(self._players)
