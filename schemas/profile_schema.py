"""Schemas for the user profile."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ProfileResponse(BaseModel):
    id: str
    email: str
    full_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProfileUpdateRequest(BaseModel):
    """Fields a user may change on their own profile."""

    full_name: Optional[str] = Field(None, max_length=200, examples=["Jane Doe"])
