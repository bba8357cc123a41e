#!/usr/bin/env python3
"""
Compute padel ratings from a tournament dataset.

Normal usage (print the top of the leaderboard):
    python scripts/compute_ratings.py

Different dataset / longer table:
    python scripts/compute_ratings.py --data exports/data.json --top 50

One player's full rating history:
    python scripts/compute_ratings.py --player-id 42

Dump leaderboard and all player histories as JSON:
    python scripts/compute_ratings.py --output-json ratings.json
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter

# Add src to path so this script can be run directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from padelo.config import settings
from padelo.data import TournamentDataError, load_tournaments
from padelo.elo import RatingEngine, engine_to_dict, load_params
from padelo.elo.leaderboard import round_rating
from padelo.elo.store import PlayerState

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute padel doubles ratings from a tournament dataset.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--data",
        default=settings.data_path,
        help=f"Path to the tournament JSON dataset (default: {settings.data_path}).",
    )
    parser.add_argument(
        "--params",
        default=settings.params_path,
        help="JSON file with rating parameter overrides.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=settings.leaderboard_top,
        help="Number of leaderboard rows to print.",
    )
    parser.add_argument(
        "--player-id",
        type=int,
        default=None,
        help="Print the chronological rating history of one player instead.",
    )
    parser.add_argument(
        "--output-json",
        default=None,
        help="Write leaderboard and player histories to this path.",
    )
    return parser


def _print_leaderboard(engine: RatingEngine, top: int) -> None:
    print(f"{'#':>4}  {'Player':>8}  {'Rating':>6}  {'Tourn':>5}  {'Matches':>7}  {'W':>4}  {'L':>4}")
    for rank, row in enumerate(engine.get_leaderboard()[:top], start=1):
        print(
            f"{rank:>4}  {row.player_id:>8}  {row.rating:>6}  {row.tournaments_played:>5}  "
            f"{row.matches_played:>7}  {row.wins:>4}  {row.losses:>4}"
        )


def _print_player(player: PlayerState, initial_rating: float) -> None:
    print(f"Rating history for player {player.player_id}")
    print(f"Initial rating: {round_rating(initial_rating)}")
    print("-" * 60)

    for event in sorted(player.detailed_history, key=lambda e: e.date):
        if event.type == "inactivity":
            print(
                f"{event.date}  inactivity  {round_rating(event.rating_before)} -> "
                f"{round_rating(event.rating_after)}  (-{round_rating(event.deduction)})"
            )
            continue

        change = event.rating_change
        sign = "+" if change >= 0 else ""
        print(
            f"{event.date}  tournament {event.id}  {round_rating(event.rating_before)} -> "
            f"{round_rating(event.rating_after)}  ({sign}{round_rating(change)})"
        )
        for match in event.matches:
            opp_a, opp_b = match.opponents
            print(
                f"    match {match.match_id}: {match.score}  "
                f"with {match.partner.id} ({round_rating(match.partner.rating)}) "
                f"vs {opp_a.id} ({round_rating(opp_a.rating)}) & {opp_b.id} ({round_rating(opp_b.rating)})  "
                f"change {match.final_change:+.2f}  -> {round_rating(match.rating_after_match)}"
            )


def main() -> int:
    args = _build_parser().parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        tournaments = load_tournaments(args.data)
    except (FileNotFoundError, TournamentDataError) as exc:
        print(f"ERROR: {exc}")
        return 1

    params, params_version = load_params(args.params)
    logger.info("Using rating params: %s", params_version)

    t_start = perf_counter()
    engine = RatingEngine(params=params)
    result = engine.process_tournaments(tournaments)
    elapsed = perf_counter() - t_start

    if args.player_id is not None:
        player = engine.get_player(args.player_id)
        if player is None:
            print(f"ERROR: unknown player {args.player_id}")
            return 1
        _print_player(player, params.initial_rating)
    else:
        _print_leaderboard(engine, args.top)

    print("-" * 60)
    print(f"Tournaments:            {result.tournaments}")
    print(f"Matches settled:        {result.matches_settled}")
    print(f"Matches skipped (0-0):  {result.matches_skipped}")
    print(f"Inactivity penalties:   {result.inactivity_penalties}")
    print(f"Elapsed:                {elapsed:.2f}s")

    if args.output_json:
        payload = engine_to_dict(engine)
        payload["params_version"] = params_version
        Path(args.output_json).write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote {args.output_json}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
