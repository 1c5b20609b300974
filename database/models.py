"""SQLAlchemy ORM models for the nutrition log service.

Defines the schema: User (auth account), Profile (identity mirror of an
account) and Meal (a logged food entry owned by one user). Models stay
behavior-free; ownership rules live in `core.repository`.
"""

import enum
import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Column, String, Float, Date, DateTime, ForeignKey, Index, Enum
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the form the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class MealType(str, enum.Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"


NUTRIENT_FIELDS = ("calories", "protein", "carbs", "fat", "fiber", "sugar", "sodium")


class User(Base):
    """ORM model for an authentication account."""

    __tablename__ = "users"
    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String(254), nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    full_name = Column(String, nullable=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)


class Profile(Base):
    """ORM model mirroring an account's public identity."""

    __tablename__ = "profiles"
    id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    email = Column(String(254), nullable=False)
    full_name = Column(String, nullable=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)


class Meal(Base):
    """ORM model for one logged food entry."""

    __tablename__ = "meals"
    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    food_name = Column(String, nullable=False)
    meal_type = Column(Enum(MealType, name="meal_type", native_enum=False, create_constraint=True), nullable=False)
    quantity = Column(String, default="1 serving")
    calories = Column(Float, default=0)
    protein = Column(Float, default=0)
    carbs = Column(Float, default=0)
    fat = Column(Float, default=0)
    fiber = Column(Float, default=0)
    sugar = Column(Float, default=0)
    sodium = Column(Float, default=0)
    meal_date = Column(Date, default=date.today, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    __table_args__ = (
        Index("idx_meals_user_date", "user_id", "meal_date"),
        Index("idx_meals_user_type", "user_id", "meal_type"),
    )
