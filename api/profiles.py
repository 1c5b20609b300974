"""Profile API router: read and update the caller's own profile."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write
from database.models import User, utc_now
from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import ProfileRepository
from core.security import get_current_user
from schemas import ProfileResponse, ProfileUpdateRequest

logger = get_logger("api.profiles")
router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse)
def get_profile(user: User = Depends(get_current_user), db: Session = Depends(get_db_read)):
    profile = ProfileRepository(db, user.id).get()
    if profile is None:
        raise NotFoundError("Profile", user.id)
    return profile


@router.patch("", response_model=ProfileResponse)
def update_profile(
    payload: ProfileUpdateRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Update the caller's profile; `updated_at` is refreshed on every call."""
    profiles = ProfileRepository(db, user.id)
    profile = profiles.get()
    if profile is None:
        raise NotFoundError("Profile", user.id)

    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(profile, field, value)
    profile.updated_at = utc_now()
    profile = profiles.update(profile)
    logger.info("Profile updated: id=%s", profile.id)
    return profile
