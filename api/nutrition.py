"""Nutrition analytics and food catalog endpoints.

Daily summary, macro chart data, recommendations and multi-day history are
all computed from the caller's meals on request; nothing is stored.
"""

from datetime import date, timedelta
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from database.deps import get_db_read
from database.models import User
from core.exceptions import ValidationError
from core.logger import get_logger
from core.repository import MealRepository
from core.security import get_current_user
from services.nutrition_calculator import nutrition_calculator, date_range_length
from services.nutrition_estimator import nutrition_estimator, DEFAULT_QUANTITY
from services.recommendation_engine import recommendation_service
from schemas import (
    DailySummary,
    MacroBreakdown,
    RecommendationReport,
    HistoryResponse,
    FoodEntry,
    FoodEstimateResponse,
)

logger = get_logger("api.nutrition")
router = APIRouter(prefix="/api", tags=["nutrition"])

MAX_HISTORY_DAYS = 366


def _day_meals(db: Session, user: User, day: date):
    return MealRepository(db, user.id).list_for_date(day)


@router.get("/nutrition/summary", response_model=DailySummary)
def daily_summary(
    day: Optional[date] = Query(None, alias="date"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Totals of all seven nutrients and the meal count for one day."""
    day = day or date.today()
    return nutrition_calculator.daily_summary(_day_meals(db, user, day), day)


@router.get("/nutrition/chart", response_model=MacroBreakdown)
def macro_chart(
    day: Optional[date] = Query(None, alias="date"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Macronutrient breakdown (protein, carbs, fat, fiber) for one day."""
    day = day or date.today()
    totals = nutrition_calculator.calculate_totals(_day_meals(db, user, day))
    return {"date": day, **nutrition_calculator.macro_breakdown(totals)}


@router.get("/nutrition/recommendations", response_model=RecommendationReport)
def recommendations(
    day: Optional[date] = Query(None, alias="date"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Progress against daily targets plus deficiency and excess advice."""
    day = day or date.today()
    totals = nutrition_calculator.calculate_totals(_day_meals(db, user, day))
    return {"date": day, **recommendation_service.build_report(totals)}


@router.get("/nutrition/history", response_model=HistoryResponse)
def history(
    start: Optional[date] = Query(None, description="First day, defaults to 6 days before end"),
    end: Optional[date] = Query(None, description="Last day, defaults to today"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Per-day totals over an inclusive date range.

    Raises:
        ValidationError: If start is after end or the range is too long.
    """
    end = end or date.today()
    start = start or end - timedelta(days=6)
    if start > end:
        raise ValidationError("start must not be after end", field="start")
    if date_range_length(start, end) > MAX_HISTORY_DAYS:
        raise ValidationError(f"date range must not exceed {MAX_HISTORY_DAYS} days", field="start")

    meals = MealRepository(db, user.id).list_for_range(start, end)
    days = nutrition_calculator.daily_history(meals, start, end)
    return {"start": start, "end": end, "days": days}


@router.get("/foods", response_model=List[FoodEntry])
def list_foods():
    """The food catalog used for estimates, values per 100 g."""
    return [
        {"name": name, "nutrients": nutrients}
        for name, nutrients in nutrition_estimator.catalog.items()
    ]


@router.get("/foods/estimate", response_model=FoodEstimateResponse)
def estimate_food(
    food: str = Query(..., min_length=1, max_length=200),
    quantity: Optional[str] = Query(None, max_length=100),
):
    """Preview the nutrients a meal would be logged with."""
    quantity = (quantity or "").strip() or DEFAULT_QUANTITY
    nutrients, matched = nutrition_estimator.estimate(food, quantity)
    return {
        "food_name": food,
        "quantity": quantity,
        "matched_food": matched,
        "nutrients": nutrients,
    }
