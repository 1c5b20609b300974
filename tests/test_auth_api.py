"""API tests for sign-up, sign-in, sign-out and the profile."""
import uuid
from datetime import datetime, timedelta, timezone

from core.repository import UserRepository
from core.security import TOKEN_COOKIE_NAME
from database import WriteSessionLocal, models


def _email():
    return f"auth-{uuid.uuid4().hex[:12]}@example.com"


def test_signup_creates_account_and_profile(client):
    email = _email()
    resp = client.post("/api/auth/signup", json={"email": email.upper(), "password": "password123", "full_name": "Jane"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["user"]["email"] == email
    assert body["token_type"] == "bearer"

    headers = {"Authorization": f"Bearer {body['token']}"}
    profile = client.get("/api/profile", headers=headers).json()
    assert profile["id"] == body["user"]["id"]
    assert profile["email"] == email
    assert profile["full_name"] == "Jane"


def test_duplicate_signup_conflicts(client):
    email = _email()
    assert client.post("/api/auth/signup", json={"email": email, "password": "password123"}).status_code == 201
    resp = client.post("/api/auth/signup", json={"email": email, "password": "password456"})
    assert resp.status_code == 409
    assert resp.json()["error"]["details"] == {"field": "email"}


def test_concurrent_duplicate_signup_conflicts(client, monkeypatch):
    # Both requests pass the existence check; the unique email index decides.
    monkeypatch.setattr(UserRepository, "get_by_email", lambda self, email: None)
    email = _email()
    assert client.post("/api/auth/signup", json={"email": email, "password": "password123"}).status_code == 201
    resp = client.post("/api/auth/signup", json={"email": email, "password": "password456"})
    assert resp.status_code == 409
    assert resp.json()["error"]["message"] == "Email already registered"
    assert resp.json()["error"]["details"] == {"field": "email"}


def test_short_password_rejected(client):
    resp = client.post("/api/auth/signup", json={"email": _email(), "password": "123"})
    assert resp.status_code == 422


def test_signin_with_correct_and_wrong_password(client, account):
    ok = client.post("/api/auth/signin", json={"email": account["email"], "password": "password123"})
    assert ok.status_code == 200
    assert ok.json()["user"]["id"] == account["id"]

    bad = client.post("/api/auth/signin", json={"email": account["email"], "password": "nope"})
    assert bad.status_code == 401
    unknown = client.post("/api/auth/signin", json={"email": _email(), "password": "password123"})
    assert unknown.status_code == 401


def test_cookie_session_and_signout(client, account):
    client.post("/api/auth/signin", json={"email": account["email"], "password": "password123"})
    assert client.cookies.get(TOKEN_COOKIE_NAME)
    assert client.get("/api/auth/me").json()["id"] == account["id"]

    assert client.post("/api/auth/signout").json() == {"status": "ok"}
    assert client.get("/api/auth/me").status_code == 401


def test_invalid_bearer_token(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not.a.token"})
    assert resp.status_code == 401


def test_profile_update_moves_updated_at(client, account):
    stale = datetime(2000, 1, 1)
    with WriteSessionLocal() as db:
        db.get(models.Profile, account["id"]).updated_at = stale
        db.commit()
    before = client.get("/api/profile", headers=account["headers"]).json()
    assert datetime.fromisoformat(before["updated_at"]) == stale

    resp = client.patch("/api/profile", json={"full_name": "Renamed"}, headers=account["headers"])
    assert resp.status_code == 200
    after = resp.json()
    assert after["full_name"] == "Renamed"
    assert after["created_at"] == before["created_at"]
    assert datetime.fromisoformat(after["updated_at"]) > stale


def test_profile_timestamps_are_utc(client, account):
    profile = client.get("/api/profile", headers=account["headers"]).json()
    created = datetime.fromisoformat(profile["created_at"])
    assert created.tzinfo is None
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    assert abs(now - created) < timedelta(minutes=1)


def test_profile_requires_auth(client):
    assert client.get("/api/profile").status_code == 401
