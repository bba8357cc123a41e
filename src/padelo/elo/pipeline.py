"""
Rating pipeline: orchestrates rating computation across all tournaments.

Tournaments are processed strictly in date order. For each tournament:

1. **Decay pass**: every known player who is NOT playing this tournament is
   checked for inactivity and penalised per full inactivity period. This
   runs before the matches so a returning player's penalty reflects the
   time they were away, not the time after they came back.
2. **Open records**: participants are created if new, and a tournament
   history record is opened with their current rating.
3. **Settlement pass**: every match of every round, in order.
4. **Close-out pass**: activity clocks move to the tournament date, records
   are closed and appended, and the tournament is credited once per player.

Usage:
    engine = RatingEngine()
    engine.process_tournaments(load_tournaments("data.json"))

    for row in engine.get_leaderboard()[:10]:
        print(row.player_id, row.rating)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from padelo.data.models import Tournament
from padelo.elo.decay import (
    advance_activity_date,
    calculate_inactivity_penalty,
    whole_days_between,
)
from padelo.elo.history import InactivityEvent, TournamentEvent
from padelo.elo.leaderboard import LeaderboardEntry, RatingPoint, build_leaderboard, rating_series
from padelo.elo.params import RatingParams
from padelo.elo.settlement import settle_match
from padelo.elo.store import PlayerState, PlayerStore

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Summary returned by RatingEngine.process_tournaments()."""
    tournaments: int = 0
    matches_settled: int = 0
    matches_skipped: int = 0
    inactivity_penalties: int = 0


class RatingEngine:
    """
    Computes ratings for every player from a tournament history.

    Usage (one-shot):
        engine = RatingEngine(tournaments)
        engine.process_tournaments()

    Usage (custom parameters):
        engine = RatingEngine(params=RatingParams(k_newbie=48.0))
        engine.process_tournaments(tournaments)
    """

    def __init__(
        self,
        tournaments: Optional[Iterable[Tournament]] = None,
        params: Optional[RatingParams] = None,
    ):
        self.params = params or RatingParams()
        self.tournaments = list(tournaments) if tournaments is not None else None
        self.store = PlayerStore(initial_rating=self.params.initial_rating)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def process_tournaments(
        self,
        tournaments: Optional[Iterable[Tournament]] = None,
    ) -> ProcessResult:
        """
        Process tournaments in date order and update the player store.

        Args:
            tournaments: Tournaments in any order. Falls back to the ones given
                         to the constructor. None or empty is a no-op.

        Returns:
            ProcessResult with counts for this run.
        """
        result = ProcessResult()
        if tournaments is None:
            tournaments = self.tournaments
        if not tournaments:
            return result

        # Stable sort, so tournaments starting at the same time keep input order
        ordered = sorted(tournaments, key=lambda t: t.time_start)

        for tournament in ordered:
            self._process_tournament(tournament, result)

        logger.info(
            "Processed %d tournaments: %d matches settled, %d skipped, "
            "%d inactivity penalties, %d players",
            result.tournaments,
            result.matches_settled,
            result.matches_skipped,
            result.inactivity_penalties,
            len(self.store),
        )
        return result

    def get_leaderboard(self) -> list[LeaderboardEntry]:
        """All players, highest rating first."""
        return build_leaderboard(self.store)

    def get_player(self, player_id: int) -> Optional[PlayerState]:
        """Full state and history of a player, or None if never seen."""
        return self.store.get(player_id)

    def get_rating_series(self, player_id: int) -> Optional[list[RatingPoint]]:
        """Rating trajectory of a player, or None if never seen."""
        player = self.store.get(player_id)
        if player is None:
            return None
        return rating_series(player, initial_rating=self.params.initial_rating)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _process_tournament(self, tournament: Tournament, result: ProcessResult) -> None:
        current_date = tournament.time_start
        tournament_id = tournament.tournament_id
        participants = tournament.participant_ids()
        participant_set = set(participants)

        logger.debug(
            "Tournament %s (%s): %d participants",
            tournament_id, current_date.date().isoformat(), len(participants),
        )

        # --- Step 1: Inactivity decay for everyone sitting this one out ---
        for player in self.store:
            if player.player_id in participant_set:
                continue
            if self._apply_decay(player, current_date):
                result.inactivity_penalties += 1

        # --- Step 2: Open a history record per participant ---
        records: dict[int, TournamentEvent] = {}
        for player_id in participants:
            player = self.store.get_or_create(player_id, current_date)
            records[player_id] = TournamentEvent(
                id=tournament_id,
                date=current_date.date(),
                rating_before=player.rating,
            )

        # --- Step 3: Settle matches in play order ---
        for match in tournament.matches:
            logs = settle_match(match, self.store, current_date, self.params)
            if not logs:
                result.matches_skipped += 1
                continue
            result.matches_settled += 1
            for player_id, log in logs.items():
                record = records.get(player_id)
                if record is not None:
                    record.matches.append(log)

        # --- Step 4: Close out ---
        for player_id in participants:
            player = self.store.get(player_id)
            player.last_activity_date = current_date
            record = records[player_id]
            record.rating_after = player.rating
            player.detailed_history.append(record)
            player.credit_tournament(tournament_id)

        result.tournaments += 1

    def _apply_decay(self, player: PlayerState, current_date: datetime) -> bool:
        """
        Charge any inactivity penalty due before current_date.

        Returns:
            True if the rating was reduced
        """
        params = self.params
        days = whole_days_between(player.last_activity_date, current_date)
        decay = calculate_inactivity_penalty(
            player.rating,
            days,
            period_days=params.inactivity_period_days,
            penalty=params.inactivity_penalty,
            minimum_rating=params.minimum_rating,
        )
        if decay.periods < 1:
            return False

        charged = False
        if decay.new_rating < player.rating:
            player.detailed_history.append(InactivityEvent(
                date=current_date.date(),
                rating_before=player.rating,
                rating_after=decay.new_rating,
                deduction=decay.deduction,
            ))
            logger.debug(
                "Player %s inactive %d days: %.1f -> %.1f",
                player.player_id, days, player.rating, decay.new_rating,
            )
            player.rating = decay.new_rating
            charged = True

        # Only whole periods move the clock; the remainder carries over
        player.last_activity_date = advance_activity_date(
            player.last_activity_date, decay.periods, params.inactivity_period_days,
        )
        return charged


def process_tournaments(
    tournaments: Iterable[Tournament],
    params: Optional[RatingParams] = None,
) -> RatingEngine:
    """Convenience wrapper: build an engine and run it over tournaments."""
    engine = RatingEngine(params=params)
    engine.process_tournaments(tournaments)
    return engine


def engine_to_dict(engine: RatingEngine) -> dict[str, Any]:
    """Export leaderboard and per-player details as JSON-ready data."""
    return {
        "params": engine.params.to_dict(),
        "leaderboard": [entry.to_dict() for entry in engine.get_leaderboard()],
        "players": {
            str(player.player_id): player.to_dict() for player in engine.store
        },
    }
