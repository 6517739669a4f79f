import os

import pandas as pd
import streamlit as st

from frontend.gui.components.fixtures_view import (
    FixtureBrowser,
    FixturesApiFetcher,
    today_ist,
)

# Config di base
API_URL = os.environ.get("API_URL", "http://localhost:5000")

COLUMNS = {
    "sr_no": "Sr. No.",
    "league": "League",
    "season": "Season",
    "round": "Round",
    "home_logo": " ",
    "home_team": "Home Team",
    "away_logo": "  ",
    "away_team": "Away Team",
    "date": "Date",
    "time": "Time",
}

st.set_page_config(page_title="Upcoming Football Matches", layout="wide")


def _get_browser() -> FixtureBrowser:
    # Uno stato per sessione; primo caricamento con la data di oggi
    if "browser" not in st.session_state:
        browser = FixtureBrowser(FixturesApiFetcher(API_URL))
        with st.spinner("Loading..."):
            browser.load()
        st.session_state["browser"] = browser
    return st.session_state["browser"]


def _on_date_change() -> None:
    browser: FixtureBrowser = st.session_state["browser"]
    with st.spinner("Loading..."):
        browser.set_date(st.session_state["date_filter"])


def _on_league_change() -> None:
    st.session_state["browser"].set_league(st.session_state["league_filter"])


def _on_team_change() -> None:
    st.session_state["browser"].set_team(st.session_state["team_filter"])


def _on_reset() -> None:
    browser: FixtureBrowser = st.session_state["browser"]
    with st.spinner("Loading..."):
        browser.reset()
    st.session_state["league_filter"] = browser.filters.league
    st.session_state["team_filter"] = browser.filters.team
    st.session_state["date_filter"] = browser.filters.date


browser = _get_browser()

st.title("Upcoming Football Matches")

league_labels = dict(browser.league_options)
team_labels = dict(browser.team_options)
# Opzione non più presente dopo un cambio data: torna al jolly
if st.session_state.get("league_filter") not in league_labels:
    st.session_state["league_filter"] = ""
if st.session_state.get("team_filter") not in team_labels:
    st.session_state["team_filter"] = ""

col1, col2, col3, col4 = st.columns([3, 3, 2, 1])
with col1:
    st.selectbox(
        "League",
        options=list(league_labels),
        format_func=lambda v: league_labels.get(v, v),
        key="league_filter",
        on_change=_on_league_change,
    )
with col2:
    st.selectbox(
        "Team",
        options=list(team_labels),
        format_func=lambda v: team_labels.get(v, v),
        key="team_filter",
        on_change=_on_team_change,
    )
with col3:
    if "date_filter" not in st.session_state:
        st.session_state["date_filter"] = browser.filters.date
    st.date_input("Date", min_value=today_ist(), key="date_filter", on_change=_on_date_change)
with col4:
    st.button("Reset Filters", on_click=_on_reset, type="primary")

if browser.error:
    st.error(browser.error)
else:
    df = pd.DataFrame(browser.rows(), columns=list(COLUMNS))
    if df.empty:
        st.warning("No upcoming matches for the selected filters.")
    else:
        st.dataframe(
            df.rename(columns=COLUMNS),
            use_container_width=True,
            hide_index=True,
            column_config={
                COLUMNS["home_logo"]: st.column_config.ImageColumn(width="small"),
                COLUMNS["away_logo"]: st.column_config.ImageColumn(width="small"),
            },
        )
