SEMINAR = {
    "name": "Python in Production",
    "organizer": "PyOrg",
    "startDate": "2024-06-10T09:00:00Z",
    "endDate": "2024-06-12T17:00:00Z",
    "room": "Atlas",
}


def test_list_returns_seeded_seminars(client):
    r = client.get("/api/seminars")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert [s["id"] for s in body["data"]] == ["seminar-1", "seminar-2", "seminar-3"]
    assert body["data"][1]["startDate"].startswith("2024-06-01T09:00:00")


def test_create_and_fetch(client):
    r = client.post("/api/seminars", json=SEMINAR)
    assert r.status_code == 200
    created = r.json()["data"]
    assert created["id"]
    assert created["name"] == "Python in Production"

    r = client.get(f"/api/seminars/{created['id']}")
    assert r.status_code == 200
    assert r.json()["data"] == created

    ids = [s["id"] for s in client.get("/api/seminars").json()["data"]]
    assert ids[-1] == created["id"]


def test_create_rejects_end_before_start(client):
    r = client.post("/api/seminars", json={**SEMINAR, "endDate": "2024-06-01T00:00:00Z"})
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert "End date cannot be before start date" in body["error"]


def test_create_rejects_missing_fields(client):
    r = client.post("/api/seminars", json={"name": "Only a name"})
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_unknown_seminar_is_404(client):
    r = client.get("/api/seminars/nope")
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Seminar not found"}

    assert client.put("/api/seminars/nope", json={"room": "X"}).status_code == 404
    assert client.delete("/api/seminars/nope").status_code == 404


def test_update_patches_sent_fields(client):
    r = client.put("/api/seminars/seminar-3", json={"room": "Orion B"})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["room"] == "Orion B"
    assert data["name"] == "Digital Marketing World"


def test_update_cannot_move_end_before_start(client):
    r = client.put("/api/seminars/seminar-2", json={"endDate": "2024-05-01T00:00:00Z"})
    assert r.status_code == 400
    assert client.get("/api/seminars/seminar-2").json()["data"]["endDate"].startswith("2024-06-02")


def test_delete_cascades_to_roster(client):
    assert len(client.get("/api/seminars/seminar-1/attendees").json()["data"]) == 4

    r = client.delete("/api/seminars/seminar-1")
    assert r.status_code == 200
    assert r.json()["data"] == {"id": "seminar-1"}

    assert client.get("/api/seminars/seminar-1/attendees").json()["data"] == []
    assert client.get("/api/seminars/seminar-1").status_code == 404
    assert len(client.get("/api/seminars/seminar-2/attendees").json()["data"]) == 4
    assert client.post("/api/attendees/attendee-101/checkin").status_code == 404


def test_breakfast_report(client):
    r = client.get("/api/seminars/seminar-1/report", params={"date": "2024-06-01"})
    assert r.status_code == 200
    report = r.json()["data"]
    assert report["seminarName"] == "Cloudflare Connect 2024"
    assert report["served"] == 2
    assert report["pending"] == 2
    assert report["rows"][0] == {"fullName": "John Doe", "roomNumber": "101", "status": "Served"}
    assert report["rows"][1]["status"] == "Pending"

    yesterday = client.get("/api/seminars/seminar-1/report", params={"date": "2024-05-31"}).json()["data"]
    assert yesterday["served"] == 4


def test_report_defaults_to_today_and_validates_date(client):
    r = client.get("/api/seminars/seminar-2/report")
    assert r.json()["data"]["date"] == "2024-06-01"

    assert client.get("/api/seminars/seminar-2/report", params={"date": "tomorrow"}).status_code == 400
    assert client.get("/api/seminars/nope/report").status_code == 404
