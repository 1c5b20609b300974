"""Pydantic schema package for request and response models."""

from .auth_schema import SignUpRequest, SignInRequest, AccountResponse, AuthResponse
from .profile_schema import ProfileResponse, ProfileUpdateRequest
from .meal_schema import MealCreateRequest, MealResponse, GroupedMealsResponse
from .nutrition_schema import (
    NutritionTotals,
    DailySummary,
    MacroBreakdown,
    RecommendationReport,
    HistoryResponse,
    FoodEntry,
    FoodEstimateResponse,
)

__all__ = [
    "SignUpRequest",
    "SignInRequest",
    "AccountResponse",
    "AuthResponse",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "MealCreateRequest",
    "MealResponse",
    "GroupedMealsResponse",
    "NutritionTotals",
    "DailySummary",
    "MacroBreakdown",
    "RecommendationReport",
    "HistoryResponse",
    "FoodEntry",
    "FoodEstimateResponse",
]
