"""
Strength modifiers applied to a team's base expected goals.

Each modifier reads one attribute of a ``TeamRecord`` and returns a strictly
positive multiplier. A missing attribute is neutral (1.0). New modifiers are
plugged in by building a ``StrengthModifier`` with the same shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Tuple

from ozfooty.config import (
    FORM_WEIGHT,
    INJURY_KEY_PLAYER_DROP,
    INJURY_MAX_DROP,
    INJURY_STARTER_DROP,
    MAX_POINTS_LAST5,
    TACTICS_STYLE_FACTORS,
)
from ozfooty.data.schema import TeamRecord
from ozfooty.utils.logging_utils import get_logger

logger = get_logger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def form_factor(points_last5: float | None) -> float:
    """
    Scale by league points won over the last five matches.

    7.5 points (half the maximum) is neutral; 15 points gives
    ``1 + FORM_WEIGHT`` and 0 points ``1 - FORM_WEIGHT``.
    """
    if points_last5 is None:
        return 1.0
    ratio = _clamp(float(points_last5) / MAX_POINTS_LAST5, 0.0, 1.0)
    return 1.0 + FORM_WEIGHT * (2.0 * ratio - 1.0)


def _count_absences(injuries: Any) -> Tuple[int, int]:
    """Return (starters_out, key_players_out)."""
    if isinstance(injuries, bool):
        return 0, 0
    if isinstance(injuries, (int, float)):
        return max(0, int(injuries)), 0
    if isinstance(injuries, Mapping):
        starters = int(injuries.get("starters_out", 0) or 0)
        key = int(injuries.get("key_out", 0) or 0)
        return max(0, starters), max(0, key)
    if isinstance(injuries, (list, tuple)):
        key = sum(
            1 for p in injuries if isinstance(p, Mapping) and p.get("key")
        )
        return len(injuries) - key, key

    logger.warning("Ignoring unrecognised injury data: %r", injuries)
    return 0, 0


def injury_factor(injuries: Any) -> float:
    """
    Reduce attacking output for absent players.

    Accepts a count of absent starters, a list of absent players (entries with
    a truthy ``key`` field are key players) or a mapping with ``starters_out``
    and ``key_out`` counts.
    """
    if not injuries:
        return 1.0
    starters, key = _count_absences(injuries)
    drop = starters * INJURY_STARTER_DROP + key * INJURY_KEY_PLAYER_DROP
    return 1.0 - min(drop, INJURY_MAX_DROP)


def tactics_factor(tactics: Any) -> float:
    """Scale by playing style, given as a string or ``{"style": ...}``."""
    if not tactics:
        return 1.0
    style = tactics.get("style") if isinstance(tactics, Mapping) else tactics
    if not isinstance(style, str):
        logger.warning("Ignoring unrecognised tactics data: %r", tactics)
        return 1.0

    factor = TACTICS_STYLE_FACTORS.get(style.strip().lower())
    if factor is None:
        logger.info("Unknown tactical style %r; treating as neutral", style)
        return 1.0
    return factor


@dataclass(frozen=True)
class StrengthModifier:
    """A named multiplier computed from one ``TeamRecord`` attribute."""

    name: str
    attribute: str
    func: Callable[[Any], float]

    def __call__(self, team: TeamRecord) -> float:
        value = self.func(getattr(team, self.attribute))
        if not value > 0:
            raise ValueError(
                f"Modifier {self.name!r} returned non-positive multiplier {value}"
            )
        return value


DEFAULT_MODIFIERS: Tuple[StrengthModifier, ...] = (
    StrengthModifier("form", "points_last5", form_factor),
    StrengthModifier("injuries", "injuries", injury_factor),
    StrengthModifier("tactics", "tactics", tactics_factor),
)
