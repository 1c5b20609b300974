"""Unit tests for the deficiency and excess rules."""
import pytest

from services.recommendation_engine import BALANCED_MESSAGE, DAILY_TARGETS, FOOD_RECOMMENDATIONS, RecommendationEngine


def _totals(**values):
    base = dict(calories=1800, protein=40, carbs=200, fat=50, fiber=15, sugar=30, sodium=1500)
    base.update(values)
    return base


def test_balanced_day():
    report = RecommendationEngine().build_report(_totals())
    assert report["balanced"] is True
    assert report["deficiencies"] == [] and report["excesses"] == []
    assert report["message"] == BALANCED_MESSAGE


def test_nothing_logged_is_deficient_in_protein_and_fiber():
    report = RecommendationEngine().build_report({})
    assert [d["nutrient"] for d in report["deficiencies"]] == ["protein", "fiber"]
    assert report["deficiencies"][0]["foods"] == FOOD_RECOMMENDATIONS["protein"]
    assert report["balanced"] is False
    assert report["message"] is None


def test_deficiency_thresholds_are_strict():
    engine = RecommendationEngine()
    # 70% of 50 g protein and 50% of 25 g fiber are exactly on the line.
    assert engine.deficiencies(_totals(protein=35, fiber=12.5)) == []
    found = engine.deficiencies(_totals(protein=34.9, fiber=12.4))
    assert {d["nutrient"] for d in found} == {"protein", "fiber"}


def test_excess_only_above_target():
    engine = RecommendationEngine()
    assert engine.excesses(_totals(sugar=50, sodium=2300)) == []
    found = engine.excesses(_totals(sugar=60, sodium=2400))
    assert [e["nutrient"] for e in found] == ["sugar", "sodium"]
    assert found[1]["unit"] == "mg"


def test_progress_caps_percentage_and_flags_over():
    progress = {p["nutrient"]: p for p in RecommendationEngine().progress(_totals(calories=3000, protein=25))}
    assert set(progress) == set(DAILY_TARGETS)
    assert progress["calories"]["percentage"] == 100
    assert progress["calories"]["is_over"] is True
    assert progress["calories"]["unit"] == "cal"
    assert progress["protein"]["percentage"] == 50.0
    assert progress["protein"]["is_over"] is False
    assert progress["fat"]["unit"] == "g"


@pytest.mark.parametrize("nutrient,value", [
    ("protein", 35),
    ("fiber", 12.5),
    ("sugar", 50),
    ("sodium", 2300),
])
def test_values_on_the_threshold_are_balanced(nutrient, value):
    report = RecommendationEngine().build_report(_totals(**{nutrient: value}))
    assert report["deficiencies"] == []
    assert report["excesses"] == []
    assert report["balanced"] is True
    assert report["message"] == BALANCED_MESSAGE
