import pytest

from ozfooty.data.schema import LeagueConfig, TeamRecord


@pytest.fixture
def league_configs():
    return {
        "TST": LeagueConfig(
            code="TST", name="Test League", league_avg_goals=1.5, home_advantage=1.2
        ),
    }


@pytest.fixture
def neutral_teams():
    return {"10": TeamRecord(), "20": TeamRecord()}


@pytest.fixture
def scenario_matches():
    """Home team 10 averages 2.0 for / 1.0 against, away team 20 1.0 / 1.5."""
    home_rows = [(5, 4), (2, 1), (1, 1), (3, 1), (2, 1), (2, 1)]  # first is stale
    away_rows = [(1, 1), (1, 2), (1, 1), (1, 2), (1, 1.5)]
    matches = [
        {"teamId": 10, "league": "TST", "goalsFor": gf, "goalsAgainst": ga}
        for gf, ga in home_rows
    ]
    matches += [
        {"teamId": "20", "league": "TST", "goalsFor": gf, "goalsAgainst": ga}
        for gf, ga in away_rows
    ]
    return matches
