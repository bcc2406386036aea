from datetime import datetime, timedelta

from app.db.errors import StorageError
from app.db.repositories.sessions import SessionRepository

from conftest import USER_KEY


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_login_with_wrong_key(client):
    res = client.post("/login", json={"key": "wrong"})
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized"}


def test_login_with_malformed_body(client):
    res = client.post("/login", content="not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request payload"}

    res = client.post("/login", json={})
    assert res.status_code == 400


def test_login_then_check_session(client):
    res = client.post("/login", json={"key": USER_KEY})
    assert res.status_code == 200
    token = res.json()["token"]
    assert token

    res = client.get("/login", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 200
    body = res.json()
    assert body["subject"] == "testclient"
    assert _parse(body["expires_at"]) - _parse(body["issued_at"]) == timedelta(days=7)


def test_subject_is_the_user_agent(client):
    res = client.post("/login", json={"key": USER_KEY}, headers={"User-Agent": "media-frontend/1.0"})
    token = res.json()["token"]
    res = client.get("/login", headers={"Authorization": f"Bearer {token}"})
    assert res.json()["subject"] == "media-frontend/1.0"


def test_check_session_without_header(client):
    res = client.get("/login")
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized"}
    assert res.headers["WWW-Authenticate"] == "Bearer"


def test_check_session_with_other_scheme(client, auth_headers):
    token = auth_headers["Authorization"].split(" ", 1)[1]
    res = client.get("/login", headers={"Authorization": f"Basic {token}"})
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized"}


def test_check_session_with_garbage_token(client):
    res = client.get("/login", headers={"Authorization": "Bearer abc.def.ghi"})
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized"}


def test_logout_revokes_the_token(client, auth_headers):
    res = client.delete("/login", headers=auth_headers)
    assert res.status_code == 204

    res = client.get("/login", headers=auth_headers)
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized"}


def test_logout_leaves_other_sessions_alone(client, auth_headers):
    other = client.post("/login", json={"key": USER_KEY}).json()["token"]
    client.delete("/login", headers=auth_headers)

    res = client.get("/login", headers={"Authorization": f"Bearer {other}"})
    assert res.status_code == 200


def test_login_fails_when_token_cannot_be_persisted(client, monkeypatch):
    def broken(self, token):
        raise StorageError("insert token: disk I/O error")

    monkeypatch.setattr(SessionRepository, "add_token", broken)
    res = client.post("/login", json={"key": USER_KEY})
    assert res.status_code == 500
    assert res.json() == {"error": "Failed to persist token"}


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "env": "test"}
