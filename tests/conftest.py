"""Shared fixtures.

The environment is pointed at a throwaway SQLite file and log directory
before any application module is imported, since settings are read once.
"""
import os
import tempfile
import uuid

_TMP = tempfile.mkdtemp(prefix="nutrition-test-")
os.environ["WRITE_DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP, 'test.db')}"
os.environ.pop("READ_DATABASE_URL", None)
os.environ["LOG_DIR"] = os.path.join(_TMP, "logs")
os.environ["JWT_SECRET"] = "test-secret"
os.environ.pop("FOOD_CATALOG_CSV", None)

import pytest
from fastapi.testclient import TestClient

from database import init_db
from main import app


@pytest.fixture(scope="session", autouse=True)
def setup_db():
    """Create the schema once for the test session."""
    init_db()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def _sign_up(client, full_name="Test User"):
    email = f"user-{uuid.uuid4().hex[:12]}@example.com"
    resp = client.post("/api/auth/signup", json={"email": email, "password": "password123", "full_name": full_name})
    assert resp.status_code == 201, resp.text
    body = resp.json()
    # Drop the session cookie so each account is only used through its header.
    client.cookies.clear()
    return {"email": email, "id": body["user"]["id"], "headers": {"Authorization": f"Bearer {body['token']}"}}


@pytest.fixture
def account(client):
    """A freshly registered account with bearer headers."""
    return _sign_up(client)


@pytest.fixture
def other_account(client):
    return _sign_up(client, full_name="Someone Else")
