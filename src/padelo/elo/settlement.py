"""
Match settlement: applies one match to the player store.

Steps for a match between pair A and pair B:
1. Margin-weighted actual scores from the points (walkovers are skipped)
2. Frozen pre-match snapshots of all four players, then match/win/loss counters
3. Pair strengths and expected scores
4. Per-team delta = actual - expected
5. Per-player changes with K-factor and rating-gap handicap
6. Apply changes, clamp to the rating floor
7. One MatchLogEntry per player, from their own perspective
"""

import logging
from datetime import datetime

from padelo.data.models import Match
from padelo.elo.calculator import (
    PlayerSnapshot,
    RatingChange,
    calculate_expected_score,
    calculate_pair_strength,
    calculate_team_changes,
)
from padelo.elo.history import MatchLogEntry, PlayerRef
from padelo.elo.margin import calculate_actual_scores, format_score
from padelo.elo.params import RatingParams
from padelo.elo.store import PlayerStore

logger = logging.getLogger(__name__)


def settle_match(
    match: Match,
    store: PlayerStore,
    tournament_date: datetime,
    params: RatingParams,
) -> dict[int, MatchLogEntry]:
    """
    Settle one match and mutate the players involved.

    Args:
        match: Match to settle
        store: Player store (players are created if missing)
        tournament_date: Date used for any player created here
        params: Rating parameters

    Returns:
        Dict of player_id → MatchLogEntry. Empty for a walkover (no points
        scored), in which case nothing is mutated.
    """
    margin = calculate_actual_scores(match.team_a_points, match.team_b_points)
    if margin is None:
        logger.debug("Skipping match %s: no points scored", match.match_id)
        return {}

    # --- Step 1: Freeze pre-match state before touching anything ---
    snapshots: dict[int, PlayerSnapshot] = {}
    for player_id in match.player_ids:
        player = store.get_or_create(player_id, tournament_date)
        snapshots[player_id] = PlayerSnapshot(
            player_id=player_id,
            rating=player.rating,
            tournaments_played=player.tournaments_played,
        )
        player.matches_played += 1

    # --- Step 2: Win/loss bookkeeping (equal points credit team B) ---
    for player_id in match.team_a:
        player = store.get(player_id)
        if margin.team_a_won:
            player.wins += 1
        else:
            player.losses += 1
    for player_id in match.team_b:
        player = store.get(player_id)
        if margin.team_a_won:
            player.losses += 1
        else:
            player.wins += 1

    # --- Step 3: Pair strengths and expected scores ---
    a1, a2 = (snapshots[pid] for pid in match.team_a)
    b1, b2 = (snapshots[pid] for pid in match.team_b)
    pair_a = calculate_pair_strength(a1, a2)
    pair_b = calculate_pair_strength(b1, b2)

    expected_a = calculate_expected_score(pair_a, pair_b, spread=params.spread)
    expected_b = 1.0 - expected_a

    # --- Step 4: Per-player changes ---
    delta_a = margin.actual_a - expected_a
    delta_b = margin.actual_b - expected_b

    changes: dict[int, RatingChange] = {}
    changes.update(calculate_team_changes(a1, a2, delta_a, params))
    changes.update(calculate_team_changes(b1, b2, delta_b, params))

    # --- Step 5: Apply and clamp ---
    for player_id, change in changes.items():
        player = store.get(player_id)
        player.rating += change.final
        player.clamp(params.minimum_rating)

    # --- Step 6: Per-player logs ---
    logs: dict[int, MatchLogEntry] = {}
    for player_id in match.player_ids:
        in_team_a = player_id in match.team_a
        own_team, opp_team = (match.team_a, match.team_b) if in_team_a else (match.team_b, match.team_a)
        partner_id = own_team[1] if own_team[0] == player_id else own_team[0]
        change = changes[player_id]

        logs[player_id] = MatchLogEntry(
            match_id=match.match_id,
            score=(
                format_score(match.team_a_points, match.team_b_points)
                if in_team_a
                else format_score(match.team_b_points, match.team_a_points)
            ),
            rating_before_match=snapshots[player_id].rating,
            rating_after_match=store.get(player_id).rating,
            partner=PlayerRef(partner_id, snapshots[partner_id].rating),
            opponents=(
                PlayerRef(opp_team[0], snapshots[opp_team[0]].rating),
                PlayerRef(opp_team[1], snapshots[opp_team[1]].rating),
            ),
            my_pair_strength=pair_a if in_team_a else pair_b,
            opponent_pair_strength=pair_b if in_team_a else pair_a,
            expected_score=expected_a if in_team_a else expected_b,
            actual_score=margin.actual_a if in_team_a else margin.actual_b,
            k_factor=change.k_factor,
            base_change=change.base,
            bonus=change.bonus,
            final_change=change.final,
        )

    return logs
