"""Unit tests for the food lookup and quantity scaling."""
import pytest

from data.food_catalog import COMMON_FOODS, DEFAULT_NUTRITION
from services.nutrition_estimator import NutritionEstimator, quantity_multiplier, round_half_up


@pytest.fixture
def estimator():
    return NutritionEstimator()


def test_cup_scales_by_one_and_a_half(estimator):
    nutrients, matched = estimator.estimate("Chicken Breast", "1 cup")
    assert matched == "chicken breast"
    assert nutrients["calories"] == 248
    assert nutrients["protein"] == 46.5
    assert nutrients["fat"] == 5.4
    assert nutrients["sodium"] == 111


def test_capitalised_cup_is_not_a_cup(estimator):
    nutrients, matched = estimator.estimate("chicken breast", "1 Cup")
    assert matched == "chicken breast"
    assert nutrients["calories"] == 165
    assert nutrients["protein"] == 31.0


def test_slice_scales_down(estimator):
    nutrients, matched = estimator.estimate("bread", "2 slices")
    assert matched == "bread"
    assert nutrients["protein"] == 2.7
    assert nutrients["fiber"] == 0.8
    assert nutrients["sodium"] == 147


def test_plain_quantity_uses_base_values(estimator):
    nutrients, _ = estimator.estimate("banana", "100g")
    assert nutrients == {k: float(v) for k, v in COMMON_FOODS["banana"].items()}


def test_match_in_either_direction(estimator):
    assert estimator.match("pineapple") == "apple"
    assert estimator.match("egg") == "eggs"
    assert estimator.match("  Brown RICE ") == "rice"


def test_first_catalog_entry_wins(estimator):
    # "rice" precedes "chicken breast" in the catalog.
    assert estimator.match("chicken breast with rice") == "rice"


def test_unknown_food_gets_unscaled_defaults(estimator):
    nutrients, matched = estimator.estimate("pizza", "3 cups")
    assert matched is None
    assert nutrients == DEFAULT_NUTRITION


def test_blank_name_matches_nothing(estimator):
    assert estimator.match("   ") is None


@pytest.mark.parametrize("quantity,expected", [
    ("1 cup", 1.5),
    ("2 Cups", 1.0),
    ("1 slice", 0.3),
    ("1 piece", 1.0),
    ("1 serving", 1.0),
    ("", 1.0),
])
def test_quantity_multiplier(quantity, expected):
    assert quantity_multiplier(quantity) == expected


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.25, 1) == 0.3
    assert round_half_up(46.5, 1) == 46.5


def test_extend_overrides_and_appends(estimator):
    estimator.extend({"rice": dict(COMMON_FOODS["rice"], calories=999), "tofu": dict(DEFAULT_NUTRITION)})
    assert list(estimator.catalog)[0] == "rice"
    assert list(estimator.catalog)[-1] == "tofu"
    nutrients, _ = estimator.estimate("rice")
    assert nutrients["calories"] == 999
    # the module-level catalog is untouched
    assert COMMON_FOODS["rice"]["calories"] == 130
