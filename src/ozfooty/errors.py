"""
Exceptions raised by the OzFooty prediction core.
"""

from __future__ import annotations

from typing import Sequence


class PredictionError(Exception):
    """Base class for failures that prevent a prediction from being made."""


class UnsupportedLeagueError(PredictionError):
    """Raised when a league code is not in the supported allow-list."""

    def __init__(self, league_code: str) -> None:
        self.league_code = league_code
        super().__init__(f"Unsupported league: {league_code!r}")


class UnknownTeamError(PredictionError):
    """Raised when one or both team identifiers have no team record."""

    def __init__(self, team_ids: Sequence[str]) -> None:
        self.team_ids = list(team_ids)
        super().__init__(f"Unknown team id(s): {', '.join(self.team_ids)}")
