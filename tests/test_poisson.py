import math

import numpy as np
import pytest

from ozfooty.models.poisson import poisson_pmf, score_grid, summarise_grid


def test_poisson_pmf_matches_formula():
    assert poisson_pmf(1.5, 2) == pytest.approx(math.exp(-1.5) * 1.5**2 / 2)
    assert poisson_pmf(2.0, 0) == pytest.approx(math.exp(-2.0))


def test_poisson_pmf_zero_lambda():
    assert poisson_pmf(0, 0) == 1
    for k in range(1, 5):
        assert poisson_pmf(0, k) == 0


def test_poisson_pmf_negative_k_is_zero():
    assert poisson_pmf(1.2, -1) == 0


def test_poisson_pmf_decreases_beyond_mode():
    lam = 2.5
    mode = math.floor(lam)
    values = [poisson_pmf(lam, k) for k in range(mode, 11)]
    assert all(a > b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize(
    "lam_home, lam_away",
    [(0.5, 0.5), (1.5, 1.2), (2.0, 0.8), (0.5, 2.0)],
)
def test_grid_mass_below_one_for_typical_lambdas(lam_home, lam_away):
    summary = summarise_grid(score_grid(lam_home, lam_away))
    total = summary.home_win + summary.draw + summary.away_win
    assert 0.9 < total < 1.0


def test_grid_mass_leaks_for_large_lambdas():
    grid = score_grid(5.0, 5.0)
    assert grid.shape == (5, 5)
    assert grid.sum() < 0.5


def test_grid_with_zero_lambdas_is_all_nil_nil():
    summary = summarise_grid(score_grid(0.0, 0.0))
    assert summary.draw == 1
    assert summary.home_win == 0
    assert summary.predicted_score == (0, 0)
    assert summary.over_line == 0


def test_summarise_grid_aggregates_cells():
    grid = np.array(
        [
            [0.10, 0.05, 0.01],
            [0.20, 0.15, 0.02],
            [0.25, 0.12, 0.03],
        ]
    )
    summary = summarise_grid(grid)
    assert summary.home_win == pytest.approx(0.20 + 0.25 + 0.12)
    assert summary.draw == pytest.approx(0.10 + 0.15 + 0.03)
    assert summary.away_win == pytest.approx(0.05 + 0.01 + 0.02)
    # h + a > 2: (1, 2), (2, 1), (2, 2)
    assert summary.over_line == pytest.approx(0.02 + 0.12 + 0.03)
    assert summary.predicted_score == (2, 0)


def test_predicted_score_ties_take_first_cell_in_scan_order():
    grid = np.array([[0.1, 0.3], [0.3, 0.1]])
    assert summarise_grid(grid).predicted_score == (0, 1)

    # equal lambdas of 1.0 make (0,0), (0,1), (1,0), (1,1) identical
    assert summarise_grid(score_grid(1.0, 1.0)).predicted_score == (0, 0)
