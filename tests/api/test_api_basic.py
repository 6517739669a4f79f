import pytest
from fastapi.testclient import TestClient

from api.app import app


@pytest.fixture(autouse=True)
def env(monkeypatch):
    monkeypatch.setenv("API_FOOTBALL_KEY", "DUMMY")


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health_without_api_key(client, monkeypatch):
    monkeypatch.delenv("API_FOOTBALL_KEY", raising=False)
    r = client.get("/health")
    assert r.status_code == 200


def test_metrics_exposition(client):
    r = client.get("/metrics")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert "matches_requests_total" in r.text
