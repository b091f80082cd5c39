import json

import pandas as pd
import pytest

from ozfooty.data.data_loader import load_league_configs, load_matches, load_teams
from ozfooty.data.schema import LeagueConfig, TeamRecord
from ozfooty.utils.paths import get_matches_path, get_teams_path


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_sample_data_files_exist():
    assert get_matches_path().exists(), "matches.json should exist in data/"
    assert get_teams_path().exists(), "teams.json should exist in data/"


def test_load_sample_matches_basic_columns():
    result = load_matches()
    assert result.ok
    df = result.data
    assert isinstance(df, pd.DataFrame)
    assert len(df) > 0

    for col in ["teamId", "league", "goalsFor", "goalsAgainst"]:
        assert col in df.columns
    assert all(isinstance(team_id, str) for team_id in df["teamId"])


def test_load_sample_teams():
    result = load_teams()
    assert result.ok
    assert "1" in result.data
    assert isinstance(result.data["1"], TeamRecord)


def test_load_matches_preserves_order_and_extra_fields(tmp_path):
    path = _write(
        tmp_path / "matches.json",
        [
            {"teamId": 1, "league": "ALM", "goalsFor": 2, "goalsAgainst": 0, "venue": "A"},
            {"teamId": "1", "league": "ALM", "goalsFor": 0, "goalsAgainst": 1, "venue": "B"},
        ],
    )
    result = load_matches(path)
    assert result.ok
    assert result.data["teamId"].tolist() == ["1", "1"]
    assert result.data["venue"].tolist() == ["A", "B"]


def test_load_matches_drops_rows_with_bad_goals(tmp_path):
    path = _write(
        tmp_path / "matches.json",
        [
            {"teamId": 1, "league": "ALM", "goalsFor": "two", "goalsAgainst": 0},
            {"teamId": 1, "league": "ALM", "goalsFor": 1, "goalsAgainst": 0},
        ],
    )
    result = load_matches(path)
    assert result.ok
    assert len(result.data) == 1


def test_load_matches_missing_file_is_reported(tmp_path):
    result = load_matches(tmp_path / "nope.json")
    assert not result.ok
    assert result.data is None
    assert "not found" in result.error


def test_load_matches_invalid_json_is_reported(tmp_path):
    path = tmp_path / "matches.json"
    path.write_text("{not json", encoding="utf-8")
    result = load_matches(path)
    assert not result.ok


def test_load_matches_missing_columns_is_reported(tmp_path):
    path = _write(tmp_path / "matches.json", [{"teamId": 1, "league": "ALM"}])
    result = load_matches(path)
    assert not result.ok
    assert "goalsFor" in result.error


def test_load_matches_empty_array(tmp_path):
    result = load_matches(_write(tmp_path / "matches.json", []))
    assert result.ok
    assert result.data.empty


def test_load_teams_normalises_ids(tmp_path):
    path = _write(
        tmp_path / "teams.json",
        {"7": {"pointsLast5": 9, "injuries": 1, "tactics": "attacking"}},
    )
    result = load_teams(path)
    assert result.ok
    assert result.data == {
        "7": TeamRecord(points_last5=9.0, injuries=1, tactics="attacking")
    }


def test_load_teams_rejects_non_object(tmp_path):
    result = load_teams(_write(tmp_path / "teams.json", [1, 2, 3]))
    assert not result.ok


def test_load_league_configs_defaults(tmp_path):
    leagues = load_league_configs(tmp_path / "leagues.json")
    assert "ALM" in leagues
    assert all(league.league_avg_goals > 0 for league in leagues.values())


def test_load_league_configs_overrides(tmp_path):
    path = _write(tmp_path / "leagues.json", {"ALM": {"homeAdvantage": 1.3}})
    leagues = load_league_configs(path)
    assert leagues["ALM"].home_advantage == 1.3
    assert leagues["ALM"].name == "A-League Men"


def test_load_league_configs_rejects_other_leagues(tmp_path):
    path = _write(
        tmp_path / "leagues.json",
        {"EPL": {"name": "Premier League", "leagueAvgGoals": 1.4, "homeAdvantage": 1.1}},
    )
    with pytest.raises(ValueError):
        load_league_configs(path)


def test_league_config_requires_positive_average():
    with pytest.raises(ValueError):
        LeagueConfig(code="X", name="X", league_avg_goals=0, home_advantage=1.1)


def test_load_league_configs_rejects_non_object(tmp_path):
    with pytest.raises(ValueError):
        load_league_configs(_write(tmp_path / "leagues.json", ["ALM"]))


def test_load_league_configs_rejects_non_object_entry(tmp_path):
    with pytest.raises(ValueError):
        load_league_configs(_write(tmp_path / "leagues.json", {"ALM": 1.3}))


def test_load_league_configs_rejects_null_values(tmp_path):
    path = _write(tmp_path / "leagues.json", {"ALM": {"leagueAvgGoals": None}})
    with pytest.raises(ValueError):
        load_league_configs(path)
