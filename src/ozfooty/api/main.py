# path: src/ozfooty/api/main.py
"""
FastAPI app exposing OzFooty prediction endpoints.

Endpoints:
- GET /health                                   -> simple health check
- GET /leagues                                  -> supported leagues
- GET /api/predict?homeId=..&awayId=..&league=  -> outcome probabilities

Run from project root:

    uvicorn ozfooty.api.main:app --reload
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from ozfooty import __version__
from ozfooty.data.data_loader import load_league_configs, load_matches, load_teams
from ozfooty.data.schema import MATCH_COLUMNS, LeagueConfig, TeamRecord
from ozfooty.errors import UnknownTeamError, UnsupportedLeagueError
from ozfooty.models.predictor import predict
from ozfooty.utils.logging_utils import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="OzFooty API",
    version=__version__,
    description="Australian football match outcome predictor",
)

# Global state populated at startup (read-only afterwards)
LEAGUES: Dict[str, LeagueConfig] | None = None
MATCHES_DF: pd.DataFrame | None = None
TEAMS: Dict[str, TeamRecord] | None = None


class LeagueOut(BaseModel):
    code: str
    name: str
    leagueAvgGoals: float
    homeAdvantage: float


def _load_leagues() -> Dict[str, LeagueConfig]:
    """Load the supported league table once."""
    global LEAGUES
    if LEAGUES is None:
        LEAGUES = load_league_configs()
    return LEAGUES


def _load_matches() -> pd.DataFrame:
    """
    Load the match history.

    A failed load is not fatal: predictions fall back to default averages, so
    we log it and carry on with an empty history (retrying on next request).
    """
    global MATCHES_DF
    if MATCHES_DF is not None:
        return MATCHES_DF

    result = load_matches()
    if not result.ok:
        logger.warning(
            "Match history unavailable (%s); predicting from defaults.",
            result.error,
        )
        return pd.DataFrame(columns=MATCH_COLUMNS)

    MATCHES_DF = result.data
    return MATCHES_DF


def _load_teams() -> Dict[str, TeamRecord]:
    """Load team records; without them no prediction is possible."""
    global TEAMS
    if TEAMS is not None:
        return TEAMS

    result = load_teams()
    if not result.ok:
        raise HTTPException(
            status_code=503,
            detail=f"Team data unavailable: {result.error}",
        )

    TEAMS = result.data
    return TEAMS


@app.on_event("startup")
def startup_event() -> None:
    """Load league table and data at application startup."""
    _load_leagues()
    _load_matches()
    try:
        _load_teams()
    except HTTPException as exc:
        logger.error("Failed to load team data on startup: %s", exc.detail)


@app.get("/health")
def health() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/leagues", response_model=List[LeagueOut])
def list_leagues() -> List[LeagueOut]:
    """Return the supported leagues with their model parameters."""
    return [LeagueOut(**league.to_dict()) for league in _load_leagues().values()]


@app.get("/api/predict")
def predict_match(
    homeId: str | None = None,
    awayId: str | None = None,
    league: str | None = None,
) -> Dict[str, Any]:
    """
    Predict a fixture.

    Response:
        {
          "league": "A-League Men",
          "teams": {
            "home": {"id": "1", "lambda": 1.62},
            "away": {"id": "2", "lambda": 1.05}
          },
          "probabilities": {"homeWin": 0.49, "draw": 0.251, "awayWin": 0.236},
          "predictedScore": "1-1",
          "over2_5Goals": 0.452
        }
    """
    if not homeId or not awayId or not league:
        raise HTTPException(
            status_code=400,
            detail="Missing homeId, awayId, or league query parameter",
        )

    leagues = _load_leagues()
    if league not in leagues:
        raise HTTPException(
            status_code=400, detail="Only Australian leagues are supported"
        )

    teams = _load_teams()
    matches = _load_matches()

    try:
        result = predict(homeId, awayId, league, matches, teams, leagues)
    except UnsupportedLeagueError as exc:
        raise HTTPException(
            status_code=400, detail="Only Australian leagues are supported"
        ) from exc
    except UnknownTeamError as exc:
        logger.info("Rejected prediction request: %s", exc)
        raise HTTPException(
            status_code=400, detail="Invalid homeId or awayId"
        ) from exc

    return result.to_dict()
