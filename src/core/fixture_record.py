from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def _as_int(v: Any) -> Optional[int]:
    try:
        return int(v) if v is not None else None
    except (ValueError, TypeError):
        return None


def _as_dict(v: Any) -> Dict[str, Any]:
    # oggetti annidati mancanti o di tipo inatteso (es. venue stringa) -> {}
    return v if isinstance(v, dict) else {}


def parse_kickoff(value: Any) -> Optional[datetime]:
    """
    Converte la data ISO 8601 dell'API in datetime timezone-aware.
    Accetta suffisso 'Z'; un valore senza offset viene considerato UTC.
    Ritorna None se il valore non è interpretabile.
    """
    if not isinstance(value, str) or not value:
        return None
    raw = value.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


@dataclass
class LeagueInfo:
    id: Optional[int]
    name: Optional[str]
    country: Optional[str]
    season: Optional[int]
    round: Optional[str]

    @classmethod
    def from_api(cls, league: Dict[str, Any]) -> "LeagueInfo":
        return cls(
            id=_as_int(league.get("id")),
            name=league.get("name"),
            country=league.get("country"),
            season=_as_int(league.get("season")),
            round=league.get("round"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "season": self.season,
            "round": self.round,
        }


@dataclass
class TeamInfo:
    id: Optional[int]
    name: Optional[str]
    logo: Optional[str]
    winner: Optional[bool]

    @classmethod
    def from_api(cls, team: Dict[str, Any]) -> "TeamInfo":
        return cls(
            id=_as_int(team.get("id")),
            name=team.get("name"),
            logo=team.get("logo"),
            winner=team.get("winner"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "logo": self.logo,
            "winner": self.winner,
        }


@dataclass
class FixtureRecord:
    fixture_id: Optional[int]
    referee: Optional[str]
    timezone: Optional[str]
    date: Optional[str]
    venue: Optional[str]
    city: Optional[str]
    status: Any
    league: LeagueInfo
    home: TeamInfo
    away: TeamInfo
    goals: Any = None
    score: Any = None
    _kickoff: Optional[datetime] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._kickoff = parse_kickoff(self.date)

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "FixtureRecord":
        # raw è un elemento di 'response' dell'endpoint /fixtures (fixture, league, teams, goals, score)
        fixture = _as_dict(raw.get("fixture"))
        venue = _as_dict(fixture.get("venue"))
        league = _as_dict(raw.get("league"))
        teams = _as_dict(raw.get("teams"))

        return cls(
            fixture_id=_as_int(fixture.get("id")),
            referee=fixture.get("referee"),
            timezone=fixture.get("timezone"),
            date=fixture.get("date"),
            venue=venue.get("name"),
            city=venue.get("city"),
            status=fixture.get("status"),
            league=LeagueInfo.from_api(league),
            home=TeamInfo.from_api(_as_dict(teams.get("home"))),
            away=TeamInfo.from_api(_as_dict(teams.get("away"))),
            goals=raw.get("goals"),
            score=raw.get("score"),
        )

    def kickoff(self) -> Optional[datetime]:
        return self._kickoff

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fixture_id": self.fixture_id,
            "referee": self.referee,
            "timezone": self.timezone,
            "date": self.date,
            "venue": self.venue,
            "city": self.city,
            "status": self.status,
            "league": self.league.to_dict(),
            "teams": {
                "home": self.home.to_dict(),
                "away": self.away.to_dict(),
            },
            "goals": self.goals,
            "score": self.score,
        }


__all__ = ["FixtureRecord", "LeagueInfo", "TeamInfo", "parse_kickoff"]
