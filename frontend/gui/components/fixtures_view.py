from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

import requests

# IST non ha ora legale: offset fisso
IST = timezone(timedelta(hours=5, minutes=30), "IST")

ALL_LEAGUES_LABEL = "All Leagues"
ALL_TEAMS_LABEL = "All Teams"
FETCH_FALLBACK_ERROR = "Failed to load matches"

Option = Tuple[str, str]
Fixture = Dict[str, Any]


class FixtureFetchError(Exception):
    """Errore da mostrare all'utente al posto della tabella."""


def today_ist() -> date:
    return datetime.now(IST).date()


def _league_name(fixture: Fixture) -> Optional[str]:
    return (fixture.get("league") or {}).get("name")


def _team_names(fixture: Fixture) -> Tuple[Optional[str], Optional[str]]:
    teams = fixture.get("teams") or {}
    return (teams.get("home") or {}).get("name"), (teams.get("away") or {}).get("name")


def _distinct(values: List[Optional[str]]) -> List[str]:
    # dict preserva l'ordine di inserimento: primo visto, primo in lista
    return list(dict.fromkeys(v for v in values if v))


def derive_facets(fixtures: List[Fixture]) -> Tuple[List[Option], List[Option]]:
    """
    Opzioni (value, label) per i filtri lega e squadra, in ordine di prima
    apparizione e precedute dalla voce jolly ("", "All ...").
    """
    leagues = _distinct([_league_name(f) for f in fixtures])
    teams = _distinct([name for f in fixtures for name in _team_names(f)])
    league_options = [("", ALL_LEAGUES_LABEL)] + [(n, n) for n in leagues]
    team_options = [("", ALL_TEAMS_LABEL)] + [(n, n) for n in teams]
    return league_options, team_options


def filter_fixtures(fixtures: List[Fixture], league: str = "", team: str = "") -> List[Fixture]:
    out = fixtures
    if league:
        out = [f for f in out if _league_name(f) == league]
    if team:
        out = [f for f in out if team in _team_names(f)]
    return out


def format_kickoff(iso_string: Optional[str]) -> Tuple[str, str]:
    """Data (dd/mm/yyyy) e ora (hh:mm am/pm) in IST; ("", "") se non interpretabile."""
    if not iso_string:
        return "", ""
    raw = iso_string.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError:
        return "", ""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    local = dt.astimezone(IST)
    return local.strftime("%d/%m/%Y"), local.strftime("%I:%M %p").lower()


@dataclass
class FilterSelection:
    league: str = ""
    team: str = ""
    date: date = field(default_factory=today_ist)


class FixturesApiFetcher:
    """Chiama GET {api_url}/api/matches?date=YYYY-MM-DD."""

    def __init__(self, api_url: str, timeout: float = 20) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def __call__(self, day: date) -> List[Fixture]:
        try:
            r = requests.get(
                f"{self.api_url}/api/matches",
                params={"date": day.isoformat()},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise FixtureFetchError(FETCH_FALLBACK_ERROR) from e
        if not 200 <= r.status_code < 300:
            try:
                body = r.json()
            except ValueError:
                body = None
            message = body.get("error") if isinstance(body, dict) else None
            raise FixtureFetchError(message or FETCH_FALLBACK_ERROR)
        try:
            data = r.json()
        except ValueError as e:
            raise FixtureFetchError(FETCH_FALLBACK_ERROR) from e
        if not isinstance(data, list):
            raise FixtureFetchError(FETCH_FALLBACK_ERROR)
        return data


class FixtureBrowser:
    """
    Stato della vista: fixtures del giorno, sottoinsieme visibile, facet e filtri.

    Solo il cambio di data (o il reset) interroga il servizio; lega e squadra
    filtrano in locale la lista già scaricata.
    """

    def __init__(self, fetcher: Callable[[date], List[Fixture]], filters: Optional[FilterSelection] = None) -> None:
        self._fetcher = fetcher
        self.filters = filters or FilterSelection()
        self.fixtures: List[Fixture] = []
        self.visible: List[Fixture] = []
        self.league_options: List[Option] = [("", ALL_LEAGUES_LABEL)]
        self.team_options: List[Option] = [("", ALL_TEAMS_LABEL)]
        self.loading = False
        self.error: Optional[str] = None

    def load(self) -> None:
        self.loading = True
        try:
            fixtures = self._fetcher(self.filters.date)
        except FixtureFetchError as e:
            self.error = str(e) or FETCH_FALLBACK_ERROR
            # niente dati del giorno precedente: filtri locali su lista vuota
            self.fixtures = []
            self.visible = []
            self.league_options, self.team_options = derive_facets([])
            return
        finally:
            self.loading = False
        self.error = None
        self.fixtures = fixtures
        self.league_options, self.team_options = derive_facets(fixtures)
        self._apply_filters()

    def _apply_filters(self) -> None:
        self.visible = filter_fixtures(self.fixtures, self.filters.league, self.filters.team)

    def set_date(self, day: date) -> None:
        if day == self.filters.date:
            return
        self.filters.date = day
        self.load()

    def set_league(self, league: str) -> None:
        self.filters.league = league or ""
        self._apply_filters()

    def set_team(self, team: str) -> None:
        self.filters.team = team or ""
        self._apply_filters()

    def reset(self) -> None:
        self.filters = FilterSelection(league="", team="", date=today_ist())
        self.load()

    def rows(self) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []
        for i, f in enumerate(self.visible, start=1):
            league = f.get("league") or {}
            teams = f.get("teams") or {}
            home = teams.get("home") or {}
            away = teams.get("away") or {}
            day, time = format_kickoff(f.get("date"))
            out.append(
                {
                    "sr_no": i,
                    "league": league.get("name"),
                    "season": league.get("season"),
                    "round": league.get("round"),
                    "home_logo": home.get("logo"),
                    "home_team": home.get("name"),
                    "away_logo": away.get("logo"),
                    "away_team": away.get("name"),
                    "date": day,
                    "time": time,
                }
            )
        return out


__all__ = [
    "IST",
    "FixtureFetchError",
    "FixturesApiFetcher",
    "FixtureBrowser",
    "FilterSelection",
    "derive_facets",
    "filter_fixtures",
    "format_kickoff",
    "today_ist",
]
