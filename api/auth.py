"""Auth API router.

Sign-up creates the account and its profile together; sign-in returns a
bearer token and also sets it as an HTTP-only cookie for browser clients.
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from database.deps import get_db_write, get_db_read
from database.models import User
from core.config import settings
from core.exceptions import AuthenticationError, ConflictError
from core.logger import get_logger
from core.repository import UserRepository
from core.security import (
    TOKEN_COOKIE_NAME,
    create_access_token,
    get_current_user,
    hash_password,
    verify_password,
)
from schemas import SignUpRequest, SignInRequest, AccountResponse, AuthResponse

logger = get_logger("api.auth")
router = APIRouter(prefix="/api/auth", tags=["auth"])


def _set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        max_age=settings.token_ttl_days * 24 * 60 * 60,
        path="/",
    )


def _auth_response(user: User, response: Response) -> AuthResponse:
    token = create_access_token(user_id=user.id, email=user.email)
    _set_auth_cookie(response, token)
    return AuthResponse(user=AccountResponse.model_validate(user), token=token)


@router.post("/signup", response_model=AuthResponse, status_code=201)
def sign_up(payload: SignUpRequest, response: Response, db: Session = Depends(get_db_write)):
    """Create an account (and its profile) and sign it in.

    Raises:
        ConflictError: If the email is already registered.
    """
    users = UserRepository(db)
    if users.get_by_email(payload.email):
        raise ConflictError("Email already registered", field="email")

    user = users.create_with_profile(
        email=payload.email,
        password_hash=hash_password(payload.password),
        full_name=payload.full_name,
    )
    logger.info("Account created: id=%s", user.id)
    return _auth_response(user, response)


@router.post("/signin", response_model=AuthResponse)
def sign_in(payload: SignInRequest, response: Response, db: Session = Depends(get_db_read)):
    """Exchange email and password for a token.

    Raises:
        AuthenticationError: If the email is unknown or the password is wrong.
    """
    user = UserRepository(db).get_by_email(payload.email)
    if user is None or not verify_password(payload.password, user.password_hash):
        logger.info("Failed sign-in for %s", payload.email.strip().lower())
        raise AuthenticationError("Invalid email or password")
    return _auth_response(user, response)


@router.post("/signout")
def sign_out(response: Response):
    """Clear the auth cookie. Bearer tokens simply expire."""
    response.delete_cookie(TOKEN_COOKIE_NAME, path="/")
    return {"status": "ok"}


@router.get("/me", response_model=AccountResponse)
def me(user: User = Depends(get_current_user)):
    return user
