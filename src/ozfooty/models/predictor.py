"""
Match outcome prediction.

Given two teams and a league, this module:
- averages each team's recent goals for/against,
- turns them into base scoring rates relative to the league average (with the
  home advantage applied to the home side only),
- scales the base rates by the strength modifiers,
- scans the scoreline grid to produce win/draw/loss probabilities, the most
  likely score and the over 2.5 goals probability.

Everything here is pure: no I/O, no shared state. Callers pass in the match
history, team records and league table they loaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, Mapping, Sequence, Tuple

import pandas as pd

from ozfooty.config import LAMBDA_DECIMALS, MAX_GOALS, PROBABILITY_DECIMALS
from ozfooty.data.schema import (
    LeagueConfig,
    TeamRecord,
    as_matches_frame,
    normalize_team_id,
)
from ozfooty.errors import UnknownTeamError, UnsupportedLeagueError
from ozfooty.features.form import TeamForm, compute_team_form
from ozfooty.models.lambda_estimator import compute_lambda
from ozfooty.models.modifiers import DEFAULT_MODIFIERS, StrengthModifier
from ozfooty.models.poisson import score_grid, summarise_grid
from ozfooty.utils.logging_utils import get_logger

logger = get_logger(__name__)


def round_half_up(value: float, decimals: int) -> float:
    """
    Round for display with exact ties going up (1.125 -> 1.13).

    The float is converted to its exact decimal value first, so values that
    only look like ties (2.675 is stored as 2.67499...) round down.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class PredictionResult:
    """Rounded prediction for one fixture."""

    league: str
    home_id: str
    away_id: str
    lambda_home: float
    lambda_away: float
    home_win: float
    draw: float
    away_win: float
    predicted_score: Tuple[int, int]
    over_2_5_goals: float

    @property
    def predicted_score_label(self) -> str:
        return f"{self.predicted_score[0]}-{self.predicted_score[1]}"

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serialisable response payload."""
        return {
            "league": self.league,
            "teams": {
                "home": {"id": self.home_id, "lambda": self.lambda_home},
                "away": {"id": self.away_id, "lambda": self.lambda_away},
            },
            "probabilities": {
                "homeWin": self.home_win,
                "draw": self.draw,
                "awayWin": self.away_win,
            },
            "predictedScore": self.predicted_score_label,
            "over2_5Goals": self.over_2_5_goals,
        }


def compute_base_rates(
    home_form: TeamForm,
    away_form: TeamForm,
    league: LeagueConfig,
) -> Tuple[float, float]:
    """
    Base expected goals for each side before strength modifiers.

    Attack strength (goals for / league average) is multiplied by the
    opponent's defensive weakness (goals against / league average) and scaled
    back by the league average. Home advantage applies to the home side only.
    """
    avg = league.league_avg_goals
    base_home = (
        (home_form.goals_for / avg)
        * (away_form.goals_against / avg)
        * avg
        * league.home_advantage
    )
    base_away = (away_form.goals_for / avg) * (home_form.goals_against / avg) * avg
    return base_home, base_away


def predict(
    home_id: Any,
    away_id: Any,
    league_code: str,
    matches: pd.DataFrame | Iterable[Mapping[str, Any]],
    teams: Mapping[str, TeamRecord],
    league_configs: Mapping[str, LeagueConfig],
    modifiers: Sequence[StrengthModifier] = DEFAULT_MODIFIERS,
    max_goals: int = MAX_GOALS,
) -> PredictionResult:
    """
    Predict the outcome of a fixture.

    Parameters
    ----------
    home_id, away_id : Any
        Team identifiers; normalised to strings.
    league_code : str
        Code of a supported league.
    matches : pandas.DataFrame | iterable of mappings
        Match history, oldest first.
    teams : Mapping[str, TeamRecord]
        Team records keyed by team id.
    league_configs : Mapping[str, LeagueConfig]
        Supported leagues keyed by code.
    modifiers : Sequence[StrengthModifier]
        Strength modifiers applied to both teams.
    max_goals : int
        Highest goal count per side included in the scoreline grid.

    Returns
    -------
    PredictionResult
        Lambdas rounded to 2 dp, probabilities rounded to 3 dp.

    Raises
    ------
    UnsupportedLeagueError
        If ``league_code`` is not a supported league.
    UnknownTeamError
        If either team has no team record.
    """
    league = league_configs.get(league_code)
    if league is None:
        raise UnsupportedLeagueError(league_code)

    home_key = normalize_team_id(home_id)
    away_key = normalize_team_id(away_id)
    missing = [key for key in (home_key, away_key) if key not in teams]
    if missing:
        raise UnknownTeamError(missing)

    matches = as_matches_frame(matches)

    home_form = compute_team_form(matches, home_key, league_code)
    away_form = compute_team_form(matches, away_key, league_code)
    base_home, base_away = compute_base_rates(home_form, away_form, league)

    lambda_home = compute_lambda(base_home, teams[home_key], modifiers)
    lambda_away = compute_lambda(base_away, teams[away_key], modifiers)

    summary = summarise_grid(score_grid(lambda_home, lambda_away, max_goals))

    logger.debug(
        "%s %s v %s: base=(%.3f, %.3f) lambda=(%.3f, %.3f) score=%s",
        league_code,
        home_key,
        away_key,
        base_home,
        base_away,
        lambda_home,
        lambda_away,
        summary.predicted_score,
    )

    return PredictionResult(
        league=league.name,
        home_id=home_key,
        away_id=away_key,
        lambda_home=round_half_up(lambda_home, LAMBDA_DECIMALS),
        lambda_away=round_half_up(lambda_away, LAMBDA_DECIMALS),
        home_win=round_half_up(summary.home_win, PROBABILITY_DECIMALS),
        draw=round_half_up(summary.draw, PROBABILITY_DECIMALS),
        away_win=round_half_up(summary.away_win, PROBABILITY_DECIMALS),
        predicted_score=summary.predicted_score,
        over_2_5_goals=round_half_up(summary.over_line, PROBABILITY_DECIMALS),
    )
