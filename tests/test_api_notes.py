from datetime import datetime, timedelta, timezone

from app.db.errors import StorageError
from app.db.repositories.notes import NoteRepository


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_create_note_requires_auth(client):
    res = client.post("/note", json={"title": "t", "note": "n"})
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized"}


def test_every_note_route_requires_auth(client):
    assert client.get("/note").status_code == 401
    assert client.put("/note", json={"id": "x", "note": "n"}).status_code == 401
    assert client.delete("/note", params={"id": "x"}).status_code == 401


def test_create_then_list_notes(client, auth_headers):
    res = client.post("/note", json={"title": "t", "note": "n"}, headers=auth_headers)
    assert res.status_code == 201
    created = res.json()
    assert created["id"]
    assert created["title"] == "t"
    assert created["note"] == "n"

    res = client.get("/note", headers=auth_headers)
    assert res.status_code == 200
    notes = res.json()["notes"]
    assert [(n["id"], n["title"], n["note"]) for n in notes] == [(created["id"], "t", "n")]
    assert notes[0]["created_at"] and notes[0]["updated_at"]


def test_title_is_optional(client, auth_headers):
    res = client.post("/note", json={"note": "sans titre"}, headers=auth_headers)
    assert res.status_code == 201
    assert res.json()["title"] == ""


def test_create_note_without_body_text(client, auth_headers):
    res = client.post("/note", json={"title": "t"}, headers=auth_headers)
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request payload"}


def test_notes_are_listed_newest_first(client, auth_headers):
    ids = [
        client.post("/note", json={"title": t, "note": t}, headers=auth_headers).json()["id"]
        for t in ("A", "B", "C")
    ]
    listed = [n["id"] for n in client.get("/note", headers=auth_headers).json()["notes"]]
    assert listed == list(reversed(ids))


def test_update_note(client, auth_headers):
    note_id = client.post("/note", json={"title": "t", "note": "old"}, headers=auth_headers).json()["id"]

    res = client.put("/note", json={"id": note_id, "note": "new"}, headers=auth_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == note_id
    assert body["note"] == "new"
    assert body["updated_at"]

    listed = client.get("/note", headers=auth_headers).json()["notes"]
    assert listed[0]["note"] == "new"
    assert _parse(listed[0]["updated_at"]) >= _parse(listed[0]["created_at"])
    assert _parse(body["updated_at"]).tzinfo == timezone.utc


def test_update_unknown_note(client, auth_headers):
    res = client.put("/note", json={"id": "missing", "note": "new"}, headers=auth_headers)
    assert res.status_code == 404
    assert res.json() == {"error": "Note not found"}


def test_delete_note_is_idempotent(client, auth_headers):
    note_id = client.post("/note", json={"title": "t", "note": "n"}, headers=auth_headers).json()["id"]

    assert client.delete("/note", params={"id": note_id}, headers=auth_headers).status_code == 204
    assert client.delete("/note", params={"id": note_id}, headers=auth_headers).status_code == 204
    assert client.get("/note", headers=auth_headers).json() == {"notes": []}


def test_delete_note_without_id(client, auth_headers):
    res = client.delete("/note", headers=auth_headers)
    assert res.status_code == 400


def test_unsupported_method(client, auth_headers):
    res = client.patch("/note", json={}, headers=auth_headers)
    assert res.status_code == 405
    assert "error" in res.json()


def test_storage_failure_is_a_500(client, auth_headers, monkeypatch):
    def broken(self, title, note):
        raise StorageError("insert note: database is locked")

    monkeypatch.setattr(NoteRepository, "add_note", broken)
    res = client.post("/note", json={"title": "t", "note": "n"}, headers=auth_headers)
    assert res.status_code == 500
    assert res.json() == {"error": "insert note: database is locked"}


def test_timestamps_are_serialized_as_utc(client, auth_headers):
    client.post("/note", json={"title": "t", "note": "n"}, headers=auth_headers)
    note = client.get("/note", headers=auth_headers).json()["notes"][0]

    for field in ("created_at", "updated_at"):
        assert note[field].endswith("Z")
        stamp = _parse(note[field])
        assert stamp.tzinfo == timezone.utc
        assert abs(datetime.now(timezone.utc) - stamp) < timedelta(minutes=1)
