"""
Helper functions for data file paths used in OzFooty.
"""

from pathlib import Path
from typing import Union

from ozfooty.config import (
    DATA_DIR,
    LEAGUES_FILENAME,
    MATCHES_FILENAME,
    PROJECT_ROOT,
    TEAMS_FILENAME,
)


PathLike = Union[str, Path]


def get_project_root() -> Path:
    """Return the root directory of the OzFooty project."""
    return PROJECT_ROOT


def _data_dir(data_dir: PathLike | None) -> Path:
    return Path(data_dir) if data_dir is not None else DATA_DIR


def get_matches_path(data_dir: PathLike | None = None) -> Path:
    """
    Return the path to the match history file.

    Parameters
    ----------
    data_dir : str | Path | None
        Directory holding the data files, or None for the configured default.

    Returns
    -------
    Path
        Full path to the matches JSON file.
    """
    return _data_dir(data_dir) / MATCHES_FILENAME


def get_teams_path(data_dir: PathLike | None = None) -> Path:
    """Return the path to the team records file."""
    return _data_dir(data_dir) / TEAMS_FILENAME


def get_leagues_path(data_dir: PathLike | None = None) -> Path:
    """Return the path to the optional league overrides file."""
    return _data_dir(data_dir) / LEAGUES_FILENAME
