"""Schemas for sign-up, sign-in and account responses."""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


class SignUpRequest(BaseModel):
    """Payload for creating an account."""

    email: str = Field(..., min_length=3, max_length=254, examples=["jane@example.com"])
    password: str = Field(..., min_length=6, max_length=72, examples=["s3cret-pass"])
    full_name: Optional[str] = Field(None, max_length=200, examples=["Jane Doe"])

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if "@" not in value:
            raise ValueError("email must contain '@'")
        return value

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt only accepts up to 72 bytes.
        if len(value.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes")
        return value


class SignInRequest(BaseModel):
    """Payload for signing in with email and password."""

    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


class AccountResponse(BaseModel):
    id: str
    email: str
    full_name: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    """Account plus a bearer token for subsequent requests."""

    user: AccountResponse
    token: str
    token_type: str = "bearer"
