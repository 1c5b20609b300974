"""Meals API router.

Log, list and delete the caller's meals. Every query goes through
`MealRepository`, which only ever sees the caller's rows.
"""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write
from database.models import Meal, MealType, User
from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import MealRepository
from core.security import get_current_user
from services.nutrition_estimator import nutrition_estimator, DEFAULT_QUANTITY
from schemas import MealCreateRequest, MealResponse, GroupedMealsResponse

logger = get_logger("api.meals")
router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.post("", response_model=MealResponse, status_code=201)
def create_meal(
    payload: MealCreateRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Log a meal with nutrients estimated from its food name and quantity."""
    quantity = payload.quantity or DEFAULT_QUANTITY
    nutrients, matched = nutrition_estimator.estimate(payload.food_name, quantity)

    meal = Meal(
        food_name=payload.food_name,
        meal_type=payload.meal_type,
        quantity=quantity,
        meal_date=payload.meal_date or date.today(),
        **nutrients,
    )
    meal = MealRepository(db, user.id).create(meal)
    logger.info(
        "Meal added: user=%s meal=%s food=%r matched=%s type=%s",
        user.id,
        meal.id,
        meal.food_name,
        matched,
        meal.meal_type.value,
    )
    return meal


@router.get("", response_model=List[MealResponse])
def list_meals(
    day: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Return the caller's meals for one day, newest first."""
    return MealRepository(db, user.id).list_for_date(day or date.today())


@router.get("/grouped", response_model=GroupedMealsResponse)
def list_meals_grouped(
    day: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Return the caller's meals for one day split by meal type."""
    day = day or date.today()
    meals = MealRepository(db, user.id).list_for_date(day)
    groups = {meal_type.value: [] for meal_type in MealType}
    for meal in meals:
        groups[meal.meal_type.value].append(meal)
    return GroupedMealsResponse(
        date=day,
        **{
            name: {"count": len(items), "meals": [MealResponse.model_validate(m) for m in items]}
            for name, items in groups.items()
        },
    )


@router.delete("/{meal_id}", status_code=204)
def delete_meal(
    meal_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Delete one of the caller's meals.

    Raises:
        NotFoundError: If no meal with that id belongs to the caller.
    """
    if not MealRepository(db, user.id).delete_by_id(meal_id):
        raise NotFoundError("Meal", meal_id)
    logger.info("Meal deleted: user=%s meal=%s", user.id, meal_id)
    return Response(status_code=204)
