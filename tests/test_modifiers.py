import pytest

from ozfooty.data.schema import TeamRecord
from ozfooty.models.lambda_estimator import compute_lambda
from ozfooty.models.modifiers import (
    DEFAULT_MODIFIERS,
    StrengthModifier,
    form_factor,
    injury_factor,
    tactics_factor,
)


def test_missing_attributes_are_neutral():
    assert form_factor(None) == 1.0
    assert injury_factor(None) == 1.0
    assert injury_factor([]) == 1.0
    assert injury_factor(0) == 1.0
    assert tactics_factor(None) == 1.0
    assert tactics_factor({}) == 1.0


def test_form_factor_range():
    assert form_factor(7.5) == pytest.approx(1.0)
    assert form_factor(15) == pytest.approx(1.1)
    assert form_factor(0) == pytest.approx(0.9)
    # out-of-range points are clamped
    assert form_factor(30) == pytest.approx(1.1)
    assert form_factor(-3) == pytest.approx(0.9)


def test_injury_factor_inputs():
    assert injury_factor(2) == pytest.approx(0.94)
    assert injury_factor({"starters_out": 1, "key_out": 1}) == pytest.approx(0.91)
    assert injury_factor(
        [{"player": "A", "key": True}, {"player": "B"}]
    ) == pytest.approx(0.91)


def test_injury_factor_is_capped():
    assert injury_factor(20) == pytest.approx(0.75)
    assert injury_factor({"key_out": 11}) == pytest.approx(0.75)


def test_injury_factor_ignores_unrecognised_data():
    assert injury_factor("hamstring") == 1.0


def test_tactics_factor_styles():
    assert tactics_factor("attacking") == pytest.approx(1.08)
    assert tactics_factor({"style": "Defensive"}) == pytest.approx(0.92)
    assert tactics_factor("balanced") == 1.0
    assert tactics_factor("gegenpress") == 1.0
    assert tactics_factor({"formation": "4-3-3"}) == 1.0


def test_all_default_modifiers_are_positive():
    team = TeamRecord(points_last5=0, injuries=50, tactics="defensive")
    for modifier in DEFAULT_MODIFIERS:
        assert modifier(team) > 0


def test_non_positive_modifier_is_rejected():
    broken = StrengthModifier("broken", "tactics", lambda _: 0.0)
    with pytest.raises(ValueError):
        broken(TeamRecord())


def test_compute_lambda_neutral_team_keeps_base():
    assert compute_lambda(2.4, TeamRecord()) == pytest.approx(2.4)


def test_compute_lambda_multiplies_modifiers():
    team = TeamRecord(points_last5=15, injuries=2, tactics="attacking")
    assert compute_lambda(2.0, team) == pytest.approx(2.0 * 1.1 * 0.94 * 1.08)


def test_compute_lambda_with_custom_modifiers():
    double = StrengthModifier("double", "points_last5", lambda _: 2.0)
    assert compute_lambda(1.5, TeamRecord(), [double]) == pytest.approx(3.0)
    assert compute_lambda(1.5, TeamRecord(), []) == pytest.approx(1.5)
