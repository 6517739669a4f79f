from datetime import datetime, timezone

from core.fixture_record import FixtureRecord, parse_kickoff


RAW = {
    "fixture": {
        "id": 1035034,
        "referee": "M. Oliver",
        "timezone": "UTC",
        "date": "2030-01-01T15:00:00+00:00",
        "timestamp": 1893510000,
        "periods": {"first": None, "second": None},
        "venue": {"id": 556, "name": "Old Trafford", "city": "Manchester"},
        "status": {"long": "Not Started", "short": "NS", "elapsed": None},
    },
    "league": {
        "id": 39,
        "name": "Premier League",
        "country": "England",
        "logo": "https://media.api-sports.io/football/leagues/39.png",
        "flag": "https://media.api-sports.io/flags/gb.svg",
        "season": 2029,
        "round": "Regular Season - 20",
    },
    "teams": {
        "home": {"id": 33, "name": "Manchester United", "logo": "https://l/33.png", "winner": None},
        "away": {"id": 40, "name": "Liverpool", "logo": "https://l/40.png", "winner": None},
    },
    "goals": {"home": None, "away": None},
    "score": {"halftime": {"home": None, "away": None}, "fulltime": {"home": None, "away": None}},
}


def test_to_dict_projection() -> None:
    d = FixtureRecord.from_api(RAW).to_dict()
    assert d == {
        "fixture_id": 1035034,
        "referee": "M. Oliver",
        "timezone": "UTC",
        "date": "2030-01-01T15:00:00+00:00",
        "venue": "Old Trafford",
        "city": "Manchester",
        "status": {"long": "Not Started", "short": "NS", "elapsed": None},
        "league": {
            "id": 39,
            "name": "Premier League",
            "country": "England",
            "season": 2029,
            "round": "Regular Season - 20",
        },
        "teams": {
            "home": {"id": 33, "name": "Manchester United", "logo": "https://l/33.png", "winner": None},
            "away": {"id": 40, "name": "Liverpool", "logo": "https://l/40.png", "winner": None},
        },
        "goals": {"home": None, "away": None},
        "score": RAW["score"],
    }


def test_drops_extra_upstream_fields() -> None:
    d = FixtureRecord.from_api(RAW).to_dict()
    assert "timestamp" not in d
    assert "periods" not in d
    assert "logo" not in d["league"]


def test_missing_nested_objects_tolerated() -> None:
    rec = FixtureRecord.from_api({"fixture": {"id": "7", "venue": None}, "teams": {"home": None}})
    d = rec.to_dict()
    assert d["fixture_id"] == 7
    assert d["venue"] is None
    assert d["city"] is None
    assert d["teams"]["home"]["name"] is None
    assert d["league"]["season"] is None
    assert rec.kickoff() is None


def test_kickoff_parsing() -> None:
    assert parse_kickoff("2030-01-01T08:00:00Z") == datetime(2030, 1, 1, 8, tzinfo=timezone.utc)
    assert parse_kickoff("2030-01-01T10:00:00+02:00") == datetime(2030, 1, 1, 8, tzinfo=timezone.utc)
    assert parse_kickoff("2030-01-01T08:00:00").tzinfo is not None
    assert parse_kickoff("not a date") is None
    assert parse_kickoff(None) is None


def test_nested_values_of_wrong_type_tolerated() -> None:
    rec = FixtureRecord.from_api(
        {
            "fixture": {"id": 9, "date": "2030-01-01T10:00:00Z", "venue": "Emirates"},
            "league": ["not", "a", "dict"],
            "teams": {"home": "Arsenal", "away": 42},
        }
    )
    d = rec.to_dict()
    assert d["venue"] is None
    assert d["city"] is None
    assert d["league"]["name"] is None
    assert d["teams"]["home"]["name"] is None
    assert d["teams"]["away"]["id"] is None
    assert rec.kickoff() is not None
