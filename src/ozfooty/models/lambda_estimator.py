"""
Expected goals (lambda) for one team in one match.
"""

from __future__ import annotations

from typing import Sequence

from ozfooty.data.schema import TeamRecord
from ozfooty.models.modifiers import DEFAULT_MODIFIERS, StrengthModifier


def compute_lambda(
    base: float,
    team: TeamRecord,
    modifiers: Sequence[StrengthModifier] = DEFAULT_MODIFIERS,
) -> float:
    """
    Scale a base scoring rate by every strength modifier.

    No clamping is applied; the result is ``base`` times the product of the
    modifier multipliers.
    """
    lam = base
    for modifier in modifiers:
        lam *= modifier(team)
    return lam
