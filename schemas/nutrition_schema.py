"""Schemas for summaries, chart data, recommendations and the food catalog."""

from pydantic import BaseModel
from typing import Dict, List, Optional
from datetime import date


class NutritionTotals(BaseModel):
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: float = 0
    sugar: float = 0
    sodium: float = 0


class DailySummary(BaseModel):
    date: date
    totals: NutritionTotals
    meal_count: int
    has_data: bool


class MacroSlice(BaseModel):
    name: str
    value: float
    percentage: float


class MacroBreakdown(BaseModel):
    """Data for the macronutrient pie chart."""

    date: date
    calories: float
    slices: List[MacroSlice]


class NutrientProgress(BaseModel):
    nutrient: str
    current: float
    target: float
    unit: str
    percentage: float
    is_over: bool


class Deficiency(BaseModel):
    nutrient: str
    current: float
    target: float
    unit: str
    foods: List[str]
    message: str


class Excess(BaseModel):
    nutrient: str
    current: float
    target: float
    unit: str
    message: str


class RecommendationReport(BaseModel):
    date: date
    progress: List[NutrientProgress]
    deficiencies: List[Deficiency]
    excesses: List[Excess]
    balanced: bool
    message: Optional[str] = None
    food_suggestions: Dict[str, List[str]]


class DayHistory(BaseModel):
    date: date
    totals: NutritionTotals
    meal_count: int


class HistoryResponse(BaseModel):
    start: date
    end: date
    days: List[DayHistory]


class FoodEntry(BaseModel):
    """A catalog food with its per-100 g nutrients."""

    name: str
    nutrients: NutritionTotals


class FoodEstimateResponse(BaseModel):
    food_name: str
    quantity: str
    matched_food: Optional[str] = None
    nutrients: NutritionTotals
