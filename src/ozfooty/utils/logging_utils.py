"""
Logging setup shared by every OzFooty module.

Modules call ``get_logger(__name__)`` at import time. The first call installs a
stdout handler on the root logger (level from ``OZFOOTY_LOG_LEVEL``) unless
the host application, e.g. uvicorn or streamlit, has already configured one.
"""

import logging
from typing import Optional

from ozfooty.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def _configure_root_once() -> None:
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return the logger for a module, making sure log records have somewhere to go.

    Parameters
    ----------
    name : str | None
        Usually the calling module's ``__name__``. Defaults to "ozfooty", the
        parent of every module logger in this package.

    Returns
    -------
    logging.Logger
        Logger whose records propagate to the root handler.
    """
    _configure_root_once()
    return logging.getLogger(name if name is not None else "ozfooty")
