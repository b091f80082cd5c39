"""
Global configuration for the OzFooty project.

This module centralizes paths, model constants (form window, score grid size,
display rounding) and the allow-list of supported Australian leagues, so you
can tweak them in one place.
"""

import os
from pathlib import Path
from typing import Dict

# Project root = folder that contains "src", "data", "tests", etc.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

# Data directory (override with OZFOOTY_DATA_DIR)
DATA_DIR: Path = Path(os.getenv("OZFOOTY_DATA_DIR", str(PROJECT_ROOT / "data")))

# Default data files
MATCHES_FILENAME: str = "matches.json"
TEAMS_FILENAME: str = "teams.json"
LEAGUES_FILENAME: str = "leagues.json"  # optional overrides for AU_LEAGUES

# Form aggregation
RECENT_FORM_WINDOW: int = 5  # number of most recent league matches per team
DEFAULT_AVERAGE_GOALS: float = 1.0  # used when a team has no history

# Score grid: goals 0..MAX_GOALS for each side (tail beyond is discarded)
MAX_GOALS: int = 4
OVER_GOALS_LINE: float = 2.5

# Display rounding
LAMBDA_DECIMALS: int = 2
PROBABILITY_DECIMALS: int = 3

# Strength modifiers
FORM_WEIGHT: float = 0.10  # max +/- swing from recent points
MAX_POINTS_LAST5: int = 15
INJURY_STARTER_DROP: float = 0.03
INJURY_KEY_PLAYER_DROP: float = 0.06
INJURY_MAX_DROP: float = 0.25
TACTICS_STYLE_FACTORS: Dict[str, float] = {
    "attacking": 1.08,
    "possession": 1.04,
    "balanced": 1.0,
    "counter": 0.97,
    "defensive": 0.92,
}

# Logging
LOG_LEVEL: str = os.getenv("OZFOOTY_LOG_LEVEL", "INFO")

# Supported leagues. Goals are per team per match.
AU_LEAGUES: Dict[str, Dict[str, float | str]] = {
    "ALM": {
        "name": "A-League Men",
        "leagueAvgGoals": 1.45,
        "homeAdvantage": 1.12,
    },
    "ALW": {
        "name": "A-League Women",
        "leagueAvgGoals": 1.55,
        "homeAdvantage": 1.08,
    },
    "NPL_NSW": {
        "name": "NPL New South Wales",
        "leagueAvgGoals": 1.6,
        "homeAdvantage": 1.1,
    },
    "NPL_VIC": {
        "name": "NPL Victoria",
        "leagueAvgGoals": 1.55,
        "homeAdvantage": 1.1,
    },
    "AUS_CUP": {
        "name": "Australia Cup",
        "leagueAvgGoals": 1.5,
        "homeAdvantage": 1.05,
    },
}
