"""
Recent form aggregation.

A team's attacking and defensive strength is taken from the average goals
scored and conceded in its last ``RECENT_FORM_WINDOW`` matches in the league.
Team ids are compared as strings (see ``schema.normalize_team_id``), so an id
given as ``7`` matches history recorded under ``"7"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pandas as pd

from ozfooty.config import DEFAULT_AVERAGE_GOALS, RECENT_FORM_WINDOW
from ozfooty.data.schema import STAT_FIELDS, normalize_team_id
from ozfooty.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TeamForm:
    """Rolling goal averages for one team in one league."""

    goals_for: float
    goals_against: float


def _recent_matches(
    matches: pd.DataFrame,
    team_id: Any,
    league: str,
    window: int,
) -> pd.DataFrame:
    mask = (matches["teamId"] == normalize_team_id(team_id)) & (
        matches["league"] == league
    )
    return matches.loc[mask].tail(window)


def average_stat(
    matches: pd.DataFrame,
    team_id: Any,
    league: str,
    stat: str,
    window: int = RECENT_FORM_WINDOW,
) -> float:
    """
    Average a goal statistic over a team's most recent league matches.

    Parameters
    ----------
    matches : pandas.DataFrame
        Validated match history (see ``schema.validate_matches_df``), oldest
        first.
    team_id : Any
        Team identifier; normalised to a string before comparison.
    league : str
        League code, matched exactly.
    stat : str
        ``"goalsFor"`` or ``"goalsAgainst"``.
    window : int
        Number of most recent matches to average.

    Returns
    -------
    float
        Unweighted mean over up to ``window`` matches, or
        ``DEFAULT_AVERAGE_GOALS`` when the team has no history in the league.

    Raises
    ------
    ValueError
        If ``stat`` is not a goal statistic.
    """
    if stat not in STAT_FIELDS:
        raise ValueError(f"Unknown stat {stat!r}; expected one of {STAT_FIELDS}")

    recent = _recent_matches(matches, team_id, league, window)
    if recent.empty:
        logger.debug(
            "No %s history for team %s; using default %.2f",
            league,
            team_id,
            DEFAULT_AVERAGE_GOALS,
        )
        return DEFAULT_AVERAGE_GOALS

    return float(recent[stat].mean())


def compute_team_form(
    matches: pd.DataFrame,
    team_id: Any,
    league: str,
    window: int = RECENT_FORM_WINDOW,
) -> TeamForm:
    """Return goals-for and goals-against averages for a team."""
    return TeamForm(
        goals_for=average_stat(matches, team_id, league, "goalsFor", window),
        goals_against=average_stat(matches, team_id, league, "goalsAgainst", window),
    )
