import logging
from datetime import date

from fastapi.testclient import TestClient

from checkin_service.env import StorageEnv
from checkin_service.errors import StorageUnavailableError
from checkin_service.kv import MemoryKVStore
from checkin_service.main import create_app
from checkin_service.services import attendee_service

TODAY = date(2024, 6, 1)


class DownKV(MemoryKVStore):
    """Seeding works, every read of a value fails like a lost Mongo connection."""

    async def get(self, key):
        raise StorageUnavailableError("Storage unavailable during get")

    async def get_many(self, keys):
        raise StorageUnavailableError("Storage unavailable during get_many")


def _client(env: StorageEnv) -> TestClient:
    return TestClient(create_app(env), raise_server_exceptions=False)


def test_storage_failure_is_500_envelope():
    env = StorageEnv(kv=DownKV(), today=lambda: TODAY)
    with _client(env) as c:
        r = c.get("/api/seminars")
        assert r.status_code == 500
        assert r.json() == {"success": False, "error": "Storage unavailable during get"}

        assert c.put("/api/seminars/seminar-1", json={"room": "X"}).status_code == 500


def test_dangling_index_entry_is_500_when_strict(kv):
    env = StorageEnv(kv=kv, strict_index=True, today=lambda: TODAY)
    with _client(env) as c:
        assert c.get("/api/seminars").status_code == 200
        assert c.portal.call(kv.delete, "seminar:seminar-2") is True

        r = c.get("/api/seminars")
        assert r.status_code == 500
        body = r.json()
        assert body["success"] is False
        assert "seminar-2" in body["error"]


def test_dangling_index_entry_is_skipped_by_default(client, kv):
    client.get("/api/seminars")
    client.portal.call(kv.delete, "seminar:seminar-2")
    ids = [s["id"] for s in client.get("/api/seminars").json()["data"]]
    assert ids == ["seminar-1", "seminar-3"]


def test_duplicate_id_is_409_envelope(client, monkeypatch):
    monkeypatch.setattr(attendee_service, "_new_id", lambda: "attendee-101")
    r = client.post(
        "/api/attendees",
        json={"seminarId": "seminar-1", "fullName": "Twin", "roomNumber": "101"},
    )
    assert r.status_code == 409
    assert r.json() == {"success": False, "error": "attendee 'attendee-101' already exists"}
    assert client.get("/api/attendees", params={"roomNumber": "101"}).json()["data"][0]["fullName"] == "John Doe"


def test_corrupt_stored_record_is_500_not_400(client, kv):
    client.get("/api/seminars")
    doc = client.portal.call(kv.get, "seminar:seminar-1")
    doc["endDate"] = "not-a-date"
    client.portal.call(kv.put, "seminar:seminar-1", doc)

    r = client.get("/api/seminars")
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Stored seminar 'seminar-1' is corrupt"}
    assert client.get("/api/seminars/seminar-1").status_code == 500


def test_error_log_carries_request_id(caplog):
    env = StorageEnv(kv=DownKV(), today=lambda: TODAY)
    errors_log = logging.getLogger("checkin_service.errors")
    errors_log.addHandler(caplog.handler)
    try:
        with _client(env) as c:
            r = c.get("/api/seminars", headers={"X-Request-ID": "req-42"})
    finally:
        errors_log.removeHandler(caplog.handler)
    assert r.status_code == 500
    assert r.headers["X-Request-ID"] == "req-42"
    assert "req-42 StorageUnavailableError" in caplog.text
