"""Tests for password hashing and access tokens."""
from datetime import timedelta

import pytest
from fastapi import Request

from core.exceptions import AuthenticationError
from core.security import (
    TOKEN_COOKIE_NAME,
    create_access_token,
    decode_token,
    get_token_from_request,
    hash_password,
    verify_password,
)


def test_password_hash_round_trip():
    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_verify_password_rejects_malformed_hash():
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_token_carries_subject_and_email():
    token = create_access_token(user_id="abc", email="a@example.com")
    payload = decode_token(token)
    assert payload["sub"] == "abc"
    assert payload["email"] == "a@example.com"
    assert payload["exp"] > payload["iat"]


def test_tampered_token_rejected():
    token = create_access_token(user_id="abc", email="a@example.com")
    header, payload, sig = token.split(".")
    forged = create_access_token(user_id="someone-else", email="a@example.com").split(".")[1]
    with pytest.raises(AuthenticationError) as exc_info:
        decode_token(f"{header}.{forged}.{sig}")
    assert exc_info.value.status_code == 401


def test_expired_token_rejected():
    token = create_access_token(user_id="abc", email="a@example.com", ttl=timedelta(seconds=-10))
    with pytest.raises(AuthenticationError) as exc_info:
        decode_token(token)
    assert "expired" in exc_info.value.message.lower()


@pytest.mark.parametrize("token", ["", "garbage", "a.b", "a.b.c"])
def test_malformed_token_rejected(token):
    with pytest.raises(AuthenticationError):
        decode_token(token)


def _request(headers):
    raw = [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in headers.items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw})


def test_bearer_header_wins_over_cookie():
    request = _request({"Authorization": "Bearer header-token", "Cookie": f"{TOKEN_COOKIE_NAME}=cookie-token"})
    assert get_token_from_request(request) == "header-token"


@pytest.mark.parametrize("auth", ["Bearer ", "Bearer    ", "Basic dXNlcjpwYXNz"])
def test_empty_or_other_scheme_falls_back_to_cookie(auth):
    request = _request({"Authorization": auth, "Cookie": f"{TOKEN_COOKIE_NAME}=cookie-token"})
    assert get_token_from_request(request) == "cookie-token"


def test_no_token_anywhere():
    assert get_token_from_request(_request({"Authorization": "Bearer "})) is None
