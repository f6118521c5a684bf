from fastapi.testclient import TestClient

from checkin_service.config import settings
from checkin_service.main import create_app


def test_dashboard_for_today(client):
    r = client.get("/api/dashboard")
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["date"] == "2024-06-01"
    assert data["servedCount"] == 4
    assert data["pendingCount"] == 4
    assert "seminarId" not in data
    assert {a["id"] for a in data["served"]} == {"attendee-101", "attendee-103", "attendee-201", "attendee-204"}


def test_dashboard_filters_by_seminar_and_date(client):
    data = client.get("/api/dashboard", params={"seminarId": "seminar-1", "date": "2024-05-31"}).json()["data"]
    assert data["seminarId"] == "seminar-1"
    assert data["servedCount"] == 4
    assert data["pendingCount"] == 0


def test_dashboard_reflects_check_in(client):
    client.post("/api/attendees/attendee-202/checkin")
    data = client.get("/api/dashboard", params={"seminarId": "seminar-2"}).json()["data"]
    assert data["servedCount"] == 3


def test_seeding_disabled_starts_empty(empty_env):
    with TestClient(create_app(empty_env)) as c:
        assert c.get("/api/seminars").json() == {"success": True, "data": []}
        assert c.get("/api/dashboard").json()["data"]["servedCount"] == 0


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"
    deep = client.get("/health", params={"deep": "true"}).json()
    assert deep == {"status": "ok", "details": {"service": settings.service_name, "kv": "ok"}}


def test_root(client):
    assert client.get("/").json()["status"] == "ok"


def test_request_id_is_echoed_or_generated(client):
    assert client.get("/health", headers={"X-Request-ID": "abc123"}).headers["X-Request-ID"] == "abc123"
    assert client.get("/health").headers["X-Request-ID"]
