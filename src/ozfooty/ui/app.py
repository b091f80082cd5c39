"""
Streamlit UI for OzFooty – Australian league match outcome predictor.

Run from project root:

    streamlit run src/ozfooty/ui/app.py
"""

from __future__ import annotations

from typing import Dict
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Ensure the project src/ directory is on sys.path so that:
#   from ozfooty.models.predictor import ...
# works when running via "streamlit run src/ozfooty/ui/app.py"
# from the project root.
# ---------------------------------------------------------------------------
SRC_ROOT = Path(__file__).resolve().parents[2]  # .../ozfooty/src
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from ozfooty.config import MAX_GOALS  # noqa: E402
from ozfooty.data.data_loader import (  # noqa: E402
    load_league_configs,
    load_matches,
    load_teams,
)
from ozfooty.data.schema import LeagueConfig, as_matches_frame  # noqa: E402
from ozfooty.errors import PredictionError  # noqa: E402
from ozfooty.models.poisson import score_grid  # noqa: E402
from ozfooty.models.predictor import PredictionResult, predict  # noqa: E402


@st.cache_resource(show_spinner=False)
def load_leagues() -> Dict[str, LeagueConfig]:
    """Load the supported league table once per server process."""
    return load_league_configs()


@st.cache_data(show_spinner=False)
def load_history() -> pd.DataFrame:
    """Load match history, falling back to an empty history with a warning."""
    result = load_matches()
    if not result.ok:
        st.warning(
            f"Match history unavailable ({result.error}); "
            "predictions use default averages."
        )
        return as_matches_frame([])
    return result.data


def score_grid_frame(result: PredictionResult) -> pd.DataFrame:
    """
    Scoreline probabilities as a table (rows: home goals, columns: away goals).

    Uses the rounded lambdas from the result, so cells are for display only.
    """
    grid = score_grid(result.lambda_home, result.lambda_away, MAX_GOALS)
    goals = list(range(MAX_GOALS + 1))
    frame = pd.DataFrame(grid, index=goals, columns=goals)
    frame.index.name = "Home goals"
    frame.columns.name = "Away goals"
    return frame


def render_result(result: PredictionResult, home_label: str, away_label: str) -> None:
    """Show a prediction: probabilities, lambdas, predicted score and grid."""
    col_left, col_right = st.columns([2, 3])

    with col_left:
        st.subheader("Prediction")
        st.write(
            f"**{home_label}** vs **{away_label}** ({result.league})"
        )
        st.metric("Predicted score", result.predicted_score_label)
        st.write(
            f"Expected goals: `{result.lambda_home}` – `{result.lambda_away}`"
        )
        st.write(f"Over 2.5 goals: `{result.over_2_5_goals:.1%}`")

        prob_df = pd.DataFrame(
            {
                "Outcome": ["Home win", "Draw", "Away win"],
                "Probability": [result.home_win, result.draw, result.away_win],
            }
        ).set_index("Outcome")
        st.bar_chart(prob_df)

    with col_right:
        st.subheader("Scoreline probabilities")
        st.dataframe(
            score_grid_frame(result).round(3),
            use_container_width=True,
        )
        st.caption("Scores above 4 goals per side are not shown.")


def main() -> None:
    st.set_page_config(
        page_title="OzFooty – Australian League Match Predictor",
        layout="wide",
    )

    st.title("⚽ OzFooty – Australian League Match Outcome Predictor")

    teams_result = load_teams()
    if not teams_result.ok:
        st.error(
            f"Could not load team data: {teams_result.error}\n\n"
            "Add `data/teams.json` (or set `OZFOOTY_DATA_DIR`) and reload."
        )
        return

    teams = teams_result.data
    leagues = load_leagues()
    matches_df = load_history()

    st.sidebar.header("Fixture")
    league_code = st.sidebar.selectbox(
        "League",
        options=list(leagues),
        format_func=lambda code: leagues[code].name,
    )

    team_ids = sorted(teams)
    if len(team_ids) < 2:
        st.error(
            "At least two teams are needed in `teams.json` to predict a fixture."
        )
        return

    selected_home = st.sidebar.selectbox("Home team", options=team_ids, index=0)
    selected_away = st.sidebar.selectbox("Away team", options=team_ids, index=1)

    if selected_home == selected_away:
        st.warning("Home and away team must be different.")
        return

    st.markdown("---")

    if st.button("🔮 Predict outcome", key="predict"):
        try:
            result = predict(
                selected_home,
                selected_away,
                league_code,
                matches_df,
                teams,
                leagues,
            )
        except PredictionError as e:
            st.error(f"Prediction failed: {e}")
        else:
            render_result(result, selected_home, selected_away)


if __name__ == "__main__":
    main()
