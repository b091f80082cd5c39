"""
Poisson goal distribution and scoreline grid.

Home and away goal counts are modelled as independent Poisson variables. The
grid covers 0..MAX_GOALS goals per side; probability mass beyond that is
discarded, so the aggregated probabilities sum to slightly less than 1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ozfooty.config import MAX_GOALS, OVER_GOALS_LINE


def poisson_pmf(lam: float, k: int) -> float:
    """Probability of exactly ``k`` goals for expected goals ``lam``."""
    if k < 0:
        return 0.0
    return math.exp(-lam) * lam**k / math.factorial(k)


def score_grid(
    lambda_home: float,
    lambda_away: float,
    max_goals: int = MAX_GOALS,
) -> np.ndarray:
    """
    Joint scoreline probabilities.

    Returns
    -------
    numpy.ndarray
        Matrix of shape (max_goals + 1, max_goals + 1) where cell ``[h, a]``
        is P(home scores h) * P(away scores a).
    """
    goals = range(max_goals + 1)
    home = np.array([poisson_pmf(lambda_home, h) for h in goals], dtype=float)
    away = np.array([poisson_pmf(lambda_away, a) for a in goals], dtype=float)
    return np.outer(home, away)


@dataclass(frozen=True)
class GridSummary:
    """Probabilities aggregated over a scoreline grid (full precision)."""

    home_win: float
    draw: float
    away_win: float
    over_line: float
    predicted_score: Tuple[int, int]


def summarise_grid(grid: np.ndarray, goals_line: float = OVER_GOALS_LINE) -> GridSummary:
    """
    Aggregate a scoreline grid into match outcome probabilities.

    The predicted score is the most probable cell; on ties the first cell in
    row-major (home, away) order wins.
    """
    home_goals, away_goals = np.indices(grid.shape)
    total_goals = home_goals + away_goals

    # argmax returns the first maximum in row-major order
    best = np.unravel_index(int(np.argmax(grid)), grid.shape)

    return GridSummary(
        home_win=float(grid[home_goals > away_goals].sum()),
        draw=float(grid[home_goals == away_goals].sum()),
        away_win=float(grid[home_goals < away_goals].sum()),
        over_line=float(grid[total_goals > goals_line].sum()),
        predicted_score=(int(best[0]), int(best[1])),
    )
