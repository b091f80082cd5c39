"""
Data loading utilities for OzFooty.

Loaders never hide a failure behind empty data. Each returns a ``LoadResult``
that says whether the source was read successfully; the caller decides
whether to carry on with defaults or abort.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Generic, Mapping, Optional, TypeVar

import pandas as pd

from ozfooty.config import AU_LEAGUES
from ozfooty.data.schema import (
    MATCH_COLUMNS,
    LeagueConfig,
    TeamRecord,
    parse_league_configs,
    parse_teams,
    validate_matches_df,
)
from ozfooty.utils.logging_utils import get_logger
from ozfooty.utils.paths import get_leagues_path, get_matches_path, get_teams_path

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Outcome of reading one data source."""

    source: Path
    data: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_matches(path: Optional[Path | str] = None) -> LoadResult[pd.DataFrame]:
    """
    Load the match history from a JSON array of match records.

    Parameters
    ----------
    path : pathlib.Path | str | None
        Path to the JSON file. If None, uses the default path from config.

    Returns
    -------
    LoadResult[pandas.DataFrame]
        The validated matches in file order, or the reason loading failed.
    """
    json_path = Path(path) if path is not None else get_matches_path()
    if not json_path.exists():
        logger.error("Match data file not found: %s", json_path)
        return LoadResult(source=json_path, error=f"File not found: {json_path}")

    logger.info("Loading match data from %s", json_path)
    try:
        with json_path.open(encoding="utf-8") as fh:
            records = json.load(fh)
        if not isinstance(records, list):
            raise ValueError("Match data must be a JSON array of records")
        df = pd.DataFrame.from_records(records) if records else pd.DataFrame(
            columns=MATCH_COLUMNS
        )
        df = validate_matches_df(df)
    except (OSError, ValueError) as exc:
        logger.error("Failed to load match data from %s: %s", json_path, exc)
        return LoadResult(source=json_path, error=str(exc))

    logger.info("Loaded %d match rows.", len(df))
    return LoadResult(source=json_path, data=df)


def load_teams(
    path: Optional[Path | str] = None,
) -> LoadResult[Dict[str, TeamRecord]]:
    """
    Load team records from a JSON object keyed by team id.

    Parameters
    ----------
    path : pathlib.Path | str | None
        Path to the JSON file. If None, uses the default path from config.

    Returns
    -------
    LoadResult[dict[str, TeamRecord]]
        Team records keyed by normalised team id, or the reason loading failed.
    """
    json_path = Path(path) if path is not None else get_teams_path()
    if not json_path.exists():
        logger.error("Team data file not found: %s", json_path)
        return LoadResult(source=json_path, error=f"File not found: {json_path}")

    logger.info("Loading team data from %s", json_path)
    try:
        with json_path.open(encoding="utf-8") as fh:
            teams = parse_teams(json.load(fh))
    except (OSError, ValueError, TypeError) as exc:
        logger.error("Failed to load team data from %s: %s", json_path, exc)
        return LoadResult(source=json_path, error=str(exc))

    logger.info("Loaded %d team records.", len(teams))
    return LoadResult(source=json_path, data=teams)


def load_league_configs(
    path: Optional[Path | str] = None,
) -> Dict[str, LeagueConfig]:
    """
    Build the supported league table.

    Starts from ``config.AU_LEAGUES`` and applies per-league overrides from
    ``leagues.json`` when that file exists. Meant to be called once at process
    start; the returned table is treated as read-only.

    Raises
    ------
    ValueError
        If the overrides name a league outside the allow-list or produce an
        invalid configuration.
    """
    raw = {code: dict(values) for code, values in AU_LEAGUES.items()}

    json_path = Path(path) if path is not None else get_leagues_path()
    if json_path.exists():
        logger.info("Applying league overrides from %s", json_path)
        with json_path.open(encoding="utf-8") as fh:
            overrides = json.load(fh)
        if not isinstance(overrides, Mapping):
            raise ValueError(
                "League overrides must be an object keyed by league code, "
                f"got {type(overrides).__name__}"
            )
        unknown = sorted(set(overrides) - set(raw))
        if unknown:
            raise ValueError(f"Leagues outside the supported list: {unknown}")
        for code, values in overrides.items():
            if not isinstance(values, Mapping):
                raise ValueError(f"League overrides for {code!r} must be an object")
            raw[code].update(values)

    try:
        leagues = parse_league_configs(raw)
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Invalid league configuration: {exc!r}") from exc
    logger.info("Configured %d supported leagues.", len(leagues))
    return leagues
