"""Nutrition estimation for logged foods.

Looks a free-text food name up in the food catalog and scales the per-100 g
values by a coarse quantity multiplier.
"""

import math
from typing import Dict, Optional, Tuple

from core.exceptions import ConfigurationError
from core.logger import get_logger
from data.food_catalog import COMMON_FOODS, DEFAULT_NUTRITION
from data.ingest_foods import parse_foods_csv
from database.models import NUTRIENT_FIELDS

logger = get_logger("services.nutrition_estimator")

DEFAULT_QUANTITY = "1 serving"

# Checked in order, case-sensitively; the first keyword found in the quantity wins.
QUANTITY_MULTIPLIERS = (
    ("cup", 1.5),
    ("slice", 0.3),
    ("piece", 1.0),
)

# Rounded to whole numbers; every other nutrient keeps one decimal.
WHOLE_NUMBER_FIELDS = {"calories", "sodium"}


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from zero for non-negative values (2.45 -> 2.5)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def quantity_multiplier(quantity: str) -> float:
    q = quantity or ""
    for keyword, multiplier in QUANTITY_MULTIPLIERS:
        if keyword in q:
            return multiplier
    return 1.0


class NutritionEstimator:
    """Estimate the seven tracked nutrients of a food entry.

    Args:
        catalog: Mapping of lower-case food name to per-100 g nutrients.
            Iteration order decides which entry wins when several match.
    """

    def __init__(self, catalog: Optional[Dict[str, Dict[str, float]]] = None):
        self.catalog = dict(catalog if catalog is not None else COMMON_FOODS)

    def extend(self, foods: Dict[str, Dict[str, float]]) -> None:
        """Add or override catalog entries; new names go after existing ones."""
        self.catalog.update(foods)

    def load_csv(self, csv_path: str) -> int:
        """Extend the catalog from a foods CSV.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        try:
            foods = parse_foods_csv(csv_path)
        except (OSError, ValueError) as exc:
            raise ConfigurationError(f"Cannot load food catalog: {exc}", config_key="FOOD_CATALOG_CSV") from exc
        self.extend(foods)
        logger.info("Food catalog extended with %s entries from %s", len(foods), csv_path)
        return len(foods)

    def match(self, food_name: str) -> Optional[str]:
        """Return the catalog key matching `food_name`, or None.

        A key matches when it is contained in the name or the name is
        contained in it, compared case-insensitively.
        """
        name = (food_name or "").strip().lower()
        if not name:
            return None
        for key in self.catalog:
            if key in name or name in key:
                return key
        return None

    def estimate(self, food_name: str, quantity: str = DEFAULT_QUANTITY) -> Tuple[Dict[str, float], Optional[str]]:
        """Estimate nutrients for `quantity` of `food_name`.

        Returns:
            Tuple of (nutrients, matched catalog key or None). Unknown foods
            get fixed default values that ignore the quantity.
        """
        key = self.match(food_name)
        if key is None:
            logger.debug("No catalog match for %r, using defaults", food_name)
            return dict(DEFAULT_NUTRITION), None

        base = self.catalog[key]
        multiplier = quantity_multiplier(quantity or DEFAULT_QUANTITY)
        nutrients = {}
        for field in NUTRIENT_FIELDS:
            scaled = base.get(field, 0) * multiplier
            nutrients[field] = round_half_up(scaled, 0 if field in WHOLE_NUMBER_FIELDS else 1)
        logger.debug("Estimated %r (%s) as %s x%s", food_name, key, multiplier, nutrients)
        return nutrients, key


# export singleton
nutrition_estimator = NutritionEstimator()
__all__ = ["NutritionEstimator", "nutrition_estimator", "quantity_multiplier", "round_half_up", "DEFAULT_QUANTITY"]
