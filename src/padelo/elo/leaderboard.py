"""Read-only views over the player store."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional

from padelo.elo.constants import INITIAL_RATING
from padelo.elo.store import PlayerState, PlayerStore


@dataclass(frozen=True)
class LeaderboardEntry:
    """One leaderboard row. rating is rounded to the nearest integer."""
    player_id: int
    rating: int
    tournaments_played: int
    matches_played: int
    wins: int
    losses: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class RatingPoint:
    """One point of a player's rating trajectory."""
    label: str
    date: Optional[date]
    rating: int


def round_rating(rating: float) -> int:
    """Round half up, so 1349.5 displays as 1350."""
    return int(math.floor(rating + 0.5))


def build_leaderboard(store: PlayerStore) -> list[LeaderboardEntry]:
    """
    Summarise every player, highest rating first.

    Players with equal ratings keep the order in which they were first seen.
    """
    players = sorted(store, key=lambda p: p.rating, reverse=True)
    return [
        LeaderboardEntry(
            player_id=p.player_id,
            rating=round_rating(p.rating),
            tournaments_played=p.tournaments_played,
            matches_played=p.matches_played,
            wins=p.wins,
            losses=p.losses,
        )
        for p in players
    ]


def rating_series(
    player: PlayerState,
    initial_rating: float = INITIAL_RATING,
) -> list[RatingPoint]:
    """
    Rating trajectory of a player, ready to plot.

    Starts with the initial rating, followed by the post-event rating of
    every history event in date order.
    """
    points = [RatingPoint(label="start", date=None, rating=round_rating(initial_rating))]
    for event in sorted(player.detailed_history, key=lambda e: e.date):
        if event.type == "tournament":
            label = f"tournament {event.id}"
        else:
            label = "inactivity"
        points.append(RatingPoint(label=label, date=event.date, rating=round_rating(event.rating_after)))
    return points
