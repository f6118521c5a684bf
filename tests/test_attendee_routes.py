def test_create_update_delete_attendee(client):
    r = client.post(
        "/api/attendees",
        json={"seminarId": "seminar-3", "fullName": "Ada Lovelace", "roomNumber": 410},
    )
    assert r.status_code == 200
    created = r.json()["data"]
    assert created["roomNumber"] == "410"
    assert created["breakfastStatus"] == {}

    r = client.put(f"/api/attendees/{created['id']}", json={"roomNumber": "411"})
    assert r.status_code == 200
    assert r.json()["data"]["roomNumber"] == "411"
    assert r.json()["data"]["fullName"] == "Ada Lovelace"

    roster = client.get("/api/seminars/seminar-3/attendees").json()["data"]
    assert [a["id"] for a in roster] == [created["id"]]

    assert client.delete(f"/api/attendees/{created['id']}").json() == {
        "success": True,
        "data": {"id": created["id"]},
    }
    assert client.delete(f"/api/attendees/{created['id']}").status_code == 404


def test_create_rejects_blank_name(client):
    r = client.post("/api/attendees", json={"seminarId": "seminar-1", "fullName": " ", "roomNumber": "1"})
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_update_unknown_attendee_is_404(client):
    r = client.put("/api/attendees/ghost", json={"fullName": "Nobody"})
    assert r.status_code == 404
    assert r.json()["error"] == "Attendee not found"


def test_bulk_import_skips_invalid_rows(client):
    r = client.post(
        "/api/attendees/bulk",
        json={
            "seminarId": "seminar-3",
            "attendees": [
                {"fullName": "X", "roomNumber": "1"},
                {"fullName": "", "roomNumber": "2"},
                {"roomNumber": "3"},
                "not a row",
            ],
        },
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert len(data) == 1
    assert data[0]["fullName"] == "X"
    assert data[0]["seminarId"] == "seminar-3"
    assert len(client.get("/api/seminars/seminar-3/attendees").json()["data"]) == 1


def test_check_in_marks_today_only(client):
    r = client.post("/api/attendees/attendee-102/checkin")
    assert r.status_code == 200
    status = r.json()["data"]["breakfastStatus"]
    assert status == {"2024-05-31": True, "2024-06-01": True}

    again = client.post("/api/attendees/attendee-102/checkin")
    assert again.json()["data"]["breakfastStatus"] == status


def test_check_in_unknown_attendee(client):
    r = client.post("/api/attendees/attendee-999/checkin")
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Attendee not found"}


def test_search_by_room(client):
    r = client.get("/api/attendees", params={"roomNumber": "305"})
    assert [a["id"] for a in r.json()["data"]] == ["attendee-201"]

    r = client.get("/api/attendees", params={"roomNumber": "305", "seminarId": "seminar-1"})
    assert r.json()["data"] == []

    r = client.get("/api/attendees", params={"seminarId": "seminar-1"})
    assert len(r.json()["data"]) == 4

    assert len(client.get("/api/attendees").json()["data"]) == 8
