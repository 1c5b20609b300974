"""Nutrition aggregation helpers.

Sums logged meals into daily totals and derives the macro breakdown shown
in the dashboard chart and the per-day history series.
"""

from datetime import date, timedelta
from typing import Dict, Iterable, List

import pandas as pd

from core.logger import get_logger
from database.models import NUTRIENT_FIELDS

logger = get_logger("services.nutrition_calculator")

# Slices of the macro chart, in display order.
MACRO_SLICES = (
    ("Protein", "protein"),
    ("Carbs", "carbs"),
    ("Fat", "fat"),
    ("Fiber", "fiber"),
)


def _value(meal, field: str) -> float:
    return float(getattr(meal, field, 0) or 0)


class NutritionCalculator:
    """Class-based nutrition aggregation used across the app."""

    def empty_totals(self) -> Dict[str, float]:
        return {field: 0.0 for field in NUTRIENT_FIELDS}

    def calculate_totals(self, meals: Iterable) -> Dict[str, float]:
        """Sum every nutrient over `meals`; missing values count as 0."""
        totals = self.empty_totals()
        for meal in meals:
            for field in NUTRIENT_FIELDS:
                totals[field] += _value(meal, field)
        return {field: round(value, 1) for field, value in totals.items()}

    def daily_summary(self, meals: List, day: date) -> Dict:
        """Totals and meal count for one day.

        `has_data` is true once any calories are logged; clients only show
        chart and recommendations when it is.
        """
        totals = self.calculate_totals(meals)
        return {
            "date": day,
            "totals": totals,
            "meal_count": len(meals),
            "has_data": totals["calories"] > 0,
        }

    def macro_breakdown(self, totals: Dict[str, float]) -> Dict:
        """Chart data: one slice per macro with grams and share of the four."""
        grams = [(label, float(totals.get(field, 0) or 0)) for label, field in MACRO_SLICES]
        total = sum(value for _, value in grams)
        slices = [
            {
                "name": label,
                "value": value,
                "percentage": round(value / total * 100, 1) if total > 0 else 0.0,
            }
            for label, value in grams
        ]
        return {"calories": totals.get("calories", 0), "slices": slices}

    def daily_history(self, meals: Iterable, start: date, end: date) -> List[Dict]:
        """Per-day totals from `start` to `end` inclusive.

        Every day in the range appears, with zeros when nothing was logged.
        """
        days = pd.date_range(start, end, freq="D").date
        rows = [
            {"meal_date": meal.meal_date, **{field: _value(meal, field) for field in NUTRIENT_FIELDS}}
            for meal in meals
        ]
        if rows:
            df = pd.DataFrame(rows)
            grouped = df.groupby("meal_date")[list(NUTRIENT_FIELDS)].sum()
            counts = df.groupby("meal_date").size()
        else:
            grouped = pd.DataFrame(columns=list(NUTRIENT_FIELDS), dtype=float)
            counts = pd.Series(dtype=int)
        grouped = grouped.reindex(days, fill_value=0.0)
        counts = counts.reindex(days, fill_value=0)

        history = []
        for day in days:
            totals = {field: round(float(grouped.at[day, field]), 1) for field in NUTRIENT_FIELDS}
            history.append({"date": day, "totals": totals, "meal_count": int(counts.at[day])})
        logger.debug("History built for %s..%s (%s days)", start, end, len(history))
        return history


def date_range_length(start: date, end: date) -> int:
    """Number of days from `start` to `end` inclusive (0 when reversed)."""
    return max((end - start + timedelta(days=1)).days, 0)


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = ["NutritionCalculator", "nutrition_calculator", "date_range_length", "MACRO_SLICES"]
