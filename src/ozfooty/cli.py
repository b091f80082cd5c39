"""
Command line prediction for OzFooty.

Usage (from project root, with the virtualenv activated):

    python -m ozfooty.cli --home 1 --away 2 --league ALM

Prints the prediction as JSON. Exit codes: 0 on success, 1 when the league or
teams are rejected, 2 when team data cannot be loaded.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from ozfooty.data.data_loader import load_league_configs, load_matches, load_teams
from ozfooty.data.schema import as_matches_frame
from ozfooty.errors import PredictionError
from ozfooty.models.predictor import predict
from ozfooty.utils.logging_utils import get_logger
from ozfooty.utils.paths import get_leagues_path, get_matches_path, get_teams_path

logger = get_logger(__name__)


def run_prediction(
    home_id: str,
    away_id: str,
    league: str,
    data_dir: Optional[str] = None,
) -> int:
    """Load data, predict the fixture and print the result."""
    leagues = load_league_configs(get_leagues_path(data_dir))

    teams_result = load_teams(get_teams_path(data_dir))
    if not teams_result.ok:
        logger.error("Cannot predict without team data: %s", teams_result.error)
        return 2

    matches_result = load_matches(get_matches_path(data_dir))
    if matches_result.ok:
        matches = matches_result.data
    else:
        logger.warning("Match history unavailable; predicting from defaults.")
        matches = as_matches_frame([])

    try:
        result = predict(home_id, away_id, league, matches, teams_result.data, leagues)
    except PredictionError as exc:
        logger.error("%s", exc)
        return 1

    print(json.dumps(result.to_dict(), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Predict an Australian league fixture with OzFooty."
    )
    parser.add_argument("--home", required=True, help="Home team id.")
    parser.add_argument("--away", required=True, help="Away team id.")
    parser.add_argument("--league", required=True, help="League code, e.g. ALM.")
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory with matches.json / teams.json. "
        "If not provided, uses the default from config.py.",
    )
    args = parser.parse_args(argv)
    return run_prediction(args.home, args.away, args.league, args.data_dir)


if __name__ == "__main__":
    sys.exit(main())
