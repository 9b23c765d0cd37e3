"""Tests for the HTTP endpoints."""
import re
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

from app import app
from app.core.dependencies import get_now, get_profile

client = TestClient(app)
PARIS = ZoneInfo("Europe/Paris")


@pytest.fixture
def frozen_clock():
    """Pin the clock seen by the endpoints to a given Paris wall time."""

    def _freeze(hour, minute, second=0):
        instant = datetime(2025, 1, 15, hour, minute, second, tzinfo=PARIS)
        app.dependency_overrides[get_now] = lambda: instant

    yield _freeze
    app.dependency_overrides.pop(get_now, None)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_next_metro_open(frozen_clock):
    frozen_clock(6, 0)
    r = client.get("/next-metro", params={"station": "Chatelet"})
    assert r.status_code == 200
    assert r.json() == {
        "station": "Chatelet",
        "line": "M1",
        "headwayMin": 3,
        "nextArrival": "06:03",
        "isLast": False,
        "timezone": "Europe/Paris",
    }


def test_next_metro_last_train(frozen_clock):
    frozen_clock(0, 50)
    r = client.get("/next-metro?station=Bastille")
    assert r.status_code == 200
    body = r.json()
    assert body["nextArrival"] == "00:53"
    assert body["isLast"] is True


def test_next_metro_closed(frozen_clock):
    frozen_clock(2, 0)
    r = client.get("/next-metro?station=Chatelet")
    assert r.status_code == 200
    assert r.json() == {"station": "Chatelet", "service": "closed", "timezone": "Europe/Paris"}


def test_next_metro_missing_station():
    r = client.get("/next-metro")
    assert r.status_code == 400
    assert r.json() == {"error": "missing station"}


def test_next_metro_empty_station():
    r = client.get("/next-metro?station=")
    assert r.status_code == 400
    assert r.json() == {"error": "missing station"}


def test_next_metro_uses_real_clock_by_default():
    r = client.get("/next-metro?station=Nation")
    assert r.status_code == 200
    body = r.json()
    assert body["station"] == "Nation"
    assert body["timezone"] == "Europe/Paris"
    if "service" in body:
        assert body["service"] == "closed"
    else:
        assert body["line"] == "M1"
        assert len(body["nextArrival"]) == 5


def test_unknown_path_returns_404():
    r = client.get("/unknown-path")
    assert r.status_code == 404
    assert r.json() == {"error": "not found"}


def test_wrong_method_returns_404():
    r = client.post("/health")
    assert r.status_code == 404
    assert r.json() == {"error": "not found"}


def test_api_docs_json():
    r = client.get("/api-docs.json")
    assert r.status_code == 200
    doc = r.json()
    assert doc["info"]["title"] == "Dernier Metro API"
    assert doc["info"]["version"] == "1.0.0"
    assert "/health" in doc["paths"]
    next_metro = doc["paths"]["/next-metro"]["get"]
    assert next_metro["tags"] == ["metro"]
    assert "400" in next_metro["responses"]
    params = {p["name"]: p for p in next_metro["parameters"]}
    assert params["station"]["in"] == "query"
    assert params["station"]["required"] is True
    assert "head" not in doc["paths"]["/health"]
    assert doc["servers"][0]["url"].startswith("http://")


def test_docs_ui():
    r = client.get("/docs")
    assert r.status_code == 200
    assert "swagger" in r.text.lower()
    assert "/api-docs.json" in r.text


def test_head_requests():
    assert client.head("/health").status_code == 200
    assert client.head("/next-metro?station=Chatelet").status_code == 200
    assert client.head("/next-metro").status_code == 400


def test_requests_are_logged(caplog):
    with caplog.at_level("INFO", logger="dernier_metro"):
        client.get("/health")
    lines = [rec.getMessage() for rec in caplog.records if rec.getMessage().startswith("GET /health")]
    assert lines
    assert re.fullmatch(r"GET /health -> 200 \(\d+\.\dms\)", lines[-1])
    assert lines[-1].endswith("ms)")


def test_failed_requests_are_logged(caplog):
    def broken_profile():
        raise RuntimeError("profile unavailable")

    app.dependency_overrides[get_profile] = broken_profile
    try:
        with caplog.at_level("INFO", logger="dernier_metro"):
            r = TestClient(app, raise_server_exceptions=False).get("/next-metro?station=Chatelet")
    finally:
        app.dependency_overrides.pop(get_profile, None)
    assert r.status_code == 500
    assert r.json() == {"error": "internal error"}
    messages = [rec.getMessage() for rec in caplog.records]
    assert any(m.startswith("GET /next-metro -> 500 (") and m.endswith("ms)") for m in messages)
