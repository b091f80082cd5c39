"""
Schema and validation utilities for match history, team records and league
configuration.

Team identifiers may arrive as strings or numbers. They are normalised to
``str`` here, at the ingestion boundary, so that every later comparison is a
plain string comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping

import pandas as pd

from ozfooty.utils.logging_utils import get_logger

logger = get_logger(__name__)

# Required columns in the match history
MATCH_COLUMNS: List[str] = [
    "teamId",
    "league",
    "goalsFor",
    "goalsAgainst",
]

STAT_FIELDS = ("goalsFor", "goalsAgainst")


def normalize_team_id(team_id: Any) -> str:
    """
    Return the canonical string form of a team identifier.

    Integral floats (e.g. ``7.0`` read back from JSON) map to ``"7"``.
    """
    if isinstance(team_id, float) and team_id.is_integer():
        return str(int(team_id))
    return str(team_id).strip()


@dataclass(frozen=True)
class TeamRecord:
    """Per-team attributes consumed by the strength modifiers."""

    points_last5: float | None = None
    injuries: Any = None
    tactics: Any = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "TeamRecord":
        points = raw.get("pointsLast5", raw.get("points_last5"))
        return cls(
            points_last5=float(points) if points is not None else None,
            injuries=raw.get("injuries"),
            tactics=raw.get("tactics"),
        )


@dataclass(frozen=True)
class LeagueConfig:
    """Configuration for one supported league."""

    code: str
    name: str
    league_avg_goals: float
    home_advantage: float

    def __post_init__(self) -> None:
        if not self.league_avg_goals > 0:
            raise ValueError(
                f"leagueAvgGoals must be positive for league {self.code!r}, "
                f"got {self.league_avg_goals}"
            )
        if not self.home_advantage > 0:
            raise ValueError(
                f"homeAdvantage must be positive for league {self.code!r}, "
                f"got {self.home_advantage}"
            )

    @classmethod
    def from_dict(cls, code: str, raw: Mapping[str, Any]) -> "LeagueConfig":
        return cls(
            code=code,
            name=str(raw["name"]),
            league_avg_goals=float(raw["leagueAvgGoals"]),
            home_advantage=float(raw["homeAdvantage"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "leagueAvgGoals": self.league_avg_goals,
            "homeAdvantage": self.home_advantage,
        }


def validate_matches_df(df: pd.DataFrame) -> pd.DataFrame:
    """
    Validate that a DataFrame conforms to the match history schema.

    Checks:
    - All required columns are present.
    - Goal columns are numeric (rows with unparseable goals are dropped).
    - Normalises ``teamId`` to strings and ``league`` to stripped strings.

    Row order is preserved; it defines which matches are the most recent.

    Parameters
    ----------
    df : pandas.DataFrame
        Raw match history DataFrame.

    Returns
    -------
    pandas.DataFrame
        A validated copy with a fresh RangeIndex.

    Raises
    ------
    ValueError
        If required columns are missing.
    """
    missing = [col for col in MATCH_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required match columns: {missing}")

    df = df.copy()
    df["teamId"] = df["teamId"].map(normalize_team_id)
    df["league"] = df["league"].astype(str).str.strip()

    for col in STAT_FIELDS:
        df[col] = pd.to_numeric(df[col], errors="coerce")

    invalid = df[list(STAT_FIELDS)].isna().any(axis=1)
    if invalid.any():
        logger.warning(
            "Dropped %d match rows with invalid goal values.", int(invalid.sum())
        )
        df = df[~invalid]

    return df.reset_index(drop=True)


def as_matches_frame(
    matches: pd.DataFrame | Iterable[Mapping[str, Any]],
) -> pd.DataFrame:
    """
    Coerce a match history (DataFrame or sequence of records) to a validated
    DataFrame.
    """
    if isinstance(matches, pd.DataFrame):
        df = matches
    else:
        records = list(matches)
        if records:
            df = pd.DataFrame.from_records(records)
        else:
            df = pd.DataFrame(columns=MATCH_COLUMNS)
    return validate_matches_df(df)


def parse_teams(raw: Mapping[Any, Mapping[str, Any]]) -> Dict[str, TeamRecord]:
    """
    Build the team mapping from raw JSON-like data keyed by team id.

    Raises
    ------
    ValueError
        If the payload is not a mapping of team id to object.
    """
    if not isinstance(raw, Mapping):
        raise ValueError(
            f"Team data must be an object keyed by team id, got {type(raw).__name__}"
        )

    teams: Dict[str, TeamRecord] = {}
    for team_id, record in raw.items():
        if not isinstance(record, Mapping):
            raise ValueError(f"Team record for {team_id!r} must be an object")
        teams[normalize_team_id(team_id)] = TeamRecord.from_dict(record)
    return teams


def parse_league_configs(
    raw: Mapping[str, Mapping[str, Any]],
) -> Dict[str, LeagueConfig]:
    """Build the league table from raw data keyed by league code."""
    return {
        code: LeagueConfig.from_dict(code, values) for code, values in raw.items()
    }
