"""
Load tournament datasets from JSON files.

The dataset is a JSON array of tournament objects (see models.py). A top-level
object with a "tournaments" key is accepted too.

Usage:
    from padelo.data.loader import load_tournaments

    tournaments = load_tournaments("data.json")
"""

import json
import logging
from pathlib import Path
from typing import Any

from padelo.data.models import Tournament, TournamentDataError, tournament_from_dict

logger = logging.getLogger(__name__)


def parse_tournaments(payload: Any) -> list[Tournament]:
    """
    Convert decoded JSON into Tournament records.

    Args:
        payload: Decoded JSON (list of tournaments, a wrapping object, or None)

    Returns:
        Tournaments in input order (None gives an empty list)

    Raises:
        TournamentDataError: If the payload or any tournament is malformed
    """
    if payload is None:
        return []
    if isinstance(payload, dict):
        payload = payload.get("tournaments")
        if payload is None:
            raise TournamentDataError("Dataset object has no 'tournaments' key")
    if not isinstance(payload, list):
        raise TournamentDataError(
            f"Dataset must be a list of tournaments, got {type(payload).__name__}"
        )

    return [tournament_from_dict(item) for item in payload]


def load_tournaments(path: str | Path) -> list[Tournament]:
    """
    Read and parse a tournament dataset.

    Args:
        path: Path to the JSON file

    Returns:
        Tournaments in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        TournamentDataError: If the file isn't valid JSON or is malformed
    """
    data_path = Path(path)
    if not data_path.exists():
        raise FileNotFoundError(f"Tournament data not found: {data_path}")

    with data_path.open(encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as exc:
            raise TournamentDataError(f"Invalid JSON in {data_path}: {exc}")

    tournaments = parse_tournaments(payload)
    logger.info(
        "Loaded %d tournaments (%d matches) from %s",
        len(tournaments),
        sum(len(t.matches) for t in tournaments),
        data_path,
    )
    return tournaments
