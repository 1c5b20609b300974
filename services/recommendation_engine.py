"""Rule-based dietary recommendations.

Compares a day's nutrient totals against fixed daily targets for an
average adult and reports progress, deficiencies (with foods to add) and
excesses.
"""

from typing import Dict, List

from core.logger import get_logger

logger = get_logger("services.recommendation_engine")

# Recommended daily values (average adult).
DAILY_TARGETS = {
    "calories": 2000,
    "protein": 50,
    "carbs": 300,
    "fat": 65,
    "fiber": 25,
    "sugar": 50,
    "sodium": 2300,
}

FOOD_RECOMMENDATIONS = {
    "protein": ["chicken breast", "eggs", "greek yogurt", "lentils", "salmon"],
    "fiber": ["broccoli", "apples", "oats", "beans", "quinoa"],
    "healthy fats": ["avocado", "nuts", "olive oil", "salmon", "seeds"],
    "complex carbs": ["brown rice", "sweet potato", "quinoa", "oats", "whole grain bread"],
}

# A nutrient is deficient below this fraction of its target.
DEFICIENCY_THRESHOLDS = {
    "protein": 0.7,
    "fiber": 0.5,
}

# A nutrient is in excess above its full target.
EXCESS_NUTRIENTS = ("sugar", "sodium")

BALANCED_MESSAGE = "Your nutrition intake looks balanced for today. Keep up the great work!"


def nutrient_unit(nutrient: str) -> str:
    if nutrient == "calories":
        return "cal"
    if nutrient == "sodium":
        return "mg"
    return "g"


class RecommendationEngine:
    """Threshold checks over daily totals."""

    def __init__(self, targets: Dict[str, float] = None):
        self.targets = dict(targets or DAILY_TARGETS)

    def progress(self, totals: Dict[str, float]) -> List[Dict]:
        """Progress towards every daily target, percentage capped at 100."""
        items = []
        for nutrient, target in self.targets.items():
            current = float(totals.get(nutrient, 0) or 0)
            items.append({
                "nutrient": nutrient,
                "current": current,
                "target": target,
                "unit": nutrient_unit(nutrient),
                "percentage": round(min(current / target * 100, 100), 1),
                "is_over": current > target,
            })
        return items

    def deficiencies(self, totals: Dict[str, float]) -> List[Dict]:
        found = []
        for nutrient, fraction in DEFICIENCY_THRESHOLDS.items():
            current = float(totals.get(nutrient, 0) or 0)
            target = self.targets[nutrient]
            if current < target * fraction:
                found.append({
                    "nutrient": nutrient,
                    "current": current,
                    "target": target,
                    "unit": nutrient_unit(nutrient),
                    "foods": list(FOOD_RECOMMENDATIONS[nutrient]),
                    "message": f"Low {nutrient}. Try adding these foods: {', '.join(FOOD_RECOMMENDATIONS[nutrient])}",
                })
        return found

    def excesses(self, totals: Dict[str, float]) -> List[Dict]:
        found = []
        for nutrient in EXCESS_NUTRIENTS:
            current = float(totals.get(nutrient, 0) or 0)
            target = self.targets[nutrient]
            if current > target:
                found.append({
                    "nutrient": nutrient,
                    "current": current,
                    "target": target,
                    "unit": nutrient_unit(nutrient),
                    "message": f"High {nutrient}. Consider reducing {nutrient} intake for better health.",
                })
        return found

    def build_report(self, totals: Dict[str, float]) -> Dict:
        """Full recommendation report for one day's totals."""
        deficiencies = self.deficiencies(totals)
        excesses = self.excesses(totals)
        balanced = not deficiencies and not excesses
        logger.debug(
            "Report: %s deficiencies, %s excesses",
            len(deficiencies),
            len(excesses),
        )
        return {
            "progress": self.progress(totals),
            "deficiencies": deficiencies,
            "excesses": excesses,
            "balanced": balanced,
            "message": BALANCED_MESSAGE if balanced else None,
            "food_suggestions": {k: list(v) for k, v in FOOD_RECOMMENDATIONS.items()},
        }


# export singleton
recommendation_service = RecommendationEngine()
__all__ = ["RecommendationEngine", "recommendation_service", "DAILY_TARGETS", "FOOD_RECOMMENDATIONS", "BALANCED_MESSAGE"]
