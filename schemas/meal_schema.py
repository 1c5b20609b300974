"""Schemas for logging and listing meals."""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date, datetime
from database.models import MealType


class MealCreateRequest(BaseModel):
    """Payload for logging a meal. Nutrients are estimated server-side."""

    food_name: str = Field(..., min_length=1, max_length=200, examples=["chicken breast"])
    meal_type: MealType = Field(MealType.breakfast, examples=["lunch"])
    quantity: Optional[str] = Field(None, max_length=100, examples=["1 cup"], description="Free text, defaults to '1 serving'")
    meal_date: Optional[date] = Field(None, examples=["2026-10-17"], description="Defaults to today")

    @field_validator("food_name")
    @classmethod
    def food_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("food_name must not be blank")
        return value

    @field_validator("quantity")
    @classmethod
    def strip_quantity(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class MealResponse(BaseModel):
    """A logged meal as stored."""

    id: str
    food_name: str
    meal_type: MealType
    quantity: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
    sugar: float
    sodium: float
    meal_date: date
    created_at: datetime

    model_config = {"from_attributes": True}


class MealGroup(BaseModel):
    count: int
    meals: List[MealResponse]


class GroupedMealsResponse(BaseModel):
    """A day's meals split by meal type; every type is always present."""

    date: date
    breakfast: MealGroup
    lunch: MealGroup
    dinner: MealGroup
