"""Password hashing, access tokens and the current-user dependency.

Passwords are hashed with bcrypt. Access tokens are HS256 JWTs signed with
`settings.jwt_secret`, accepted from an ``Authorization: Bearer`` header or
from the auth cookie set at sign-in.
"""

import base64
import hashlib
import hmac
import json
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from core.config import settings
from core.exceptions import AuthenticationError
from core.logger import get_logger
from core.repository import UserRepository
from database.deps import get_db_read
from database.models import User

logger = get_logger("core.security")

TOKEN_COOKIE_NAME = "nutrition_token"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash.
        return False


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(*, user_id: str, email: str, ttl: Optional[timedelta] = None) -> str:
    """Issue a signed token for `user_id`, valid for TOKEN_TTL_DAYS by default."""
    now = _utc_now()
    exp = now + (ttl if ttl is not None else timedelta(days=settings.token_ttl_days))
    payload = {
        "sub": user_id,
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return _jwt_encode(payload, settings.jwt_secret)


def decode_token(token: str) -> Dict[str, Any]:
    """Verify a token and return its payload.

    Raises:
        AuthenticationError: If the token is malformed, tampered or expired.
    """
    try:
        payload = _jwt_decode(token, settings.jwt_secret)
    except (ValueError, UnicodeDecodeError) as exc:
        raise AuthenticationError("Invalid token") from exc
    exp = int(payload.get("exp") or 0)
    if exp and exp < int(_utc_now().timestamp()):
        raise AuthenticationError("Token expired")
    return payload


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _b64url_decode(data: str) -> bytes:
    pad = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode((data + pad).encode("ascii"))


def _jwt_encode(payload: Dict[str, Any], secret: str) -> str:
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64url_encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("ascii")
    sig = hmac.new(secret.encode("utf-8"), signing_input, hashlib.sha256).digest()
    return f"{header_b64}.{payload_b64}.{_b64url_encode(sig)}"


def _jwt_decode(token: str, secret: str) -> Dict[str, Any]:
    parts = token.split(".")
    if len(parts) != 3:
        raise ValueError("invalid token")
    header_b64, payload_b64, sig_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("ascii")
    expected_sig = hmac.new(secret.encode("utf-8"), signing_input, hashlib.sha256).digest()
    if not hmac.compare_digest(expected_sig, _b64url_decode(sig_b64)):
        raise ValueError("bad signature")
    payload = json.loads(_b64url_decode(payload_b64).decode("utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("bad payload")
    return payload


def get_token_from_request(request: Request) -> Optional[str]:
    auth = request.headers.get("authorization") or ""
    if auth.lower().startswith("bearer "):
        token = auth.split(" ", 1)[1].strip()
        if token:
            return token
    return request.cookies.get(TOKEN_COOKIE_NAME) or None


def get_current_user(request: Request, db: Session = Depends(get_db_read)) -> User:
    """FastAPI dependency resolving the authenticated account.

    Raises:
        AuthenticationError: If no valid token is present or the account is gone.
    """
    token = get_token_from_request(request)
    if not token:
        raise AuthenticationError("Not authenticated")

    payload = decode_token(token)
    user_id = str(payload.get("sub") or "")
    if not user_id:
        raise AuthenticationError("Invalid token")

    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        logger.warning("Token for unknown account %s", user_id)
        raise AuthenticationError("User not found")
    return user
