"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from wine_lens import FoodCategory, ScoredWine, WinePreferences, WineRecommendation, WineType
from wine_lens.schema import BoundingBox, ReferenceMatch, ReferenceWineEntry, VintageMatch


def test_food_category_parse():
    """FoodCategory.parse should accept any casing."""
    assert FoodCategory.parse(" Beef ") is FoodCategory.BEEF
    assert FoodCategory.SEAFOOD.display_name == "Seafood"

    with pytest.raises(ValueError):
        FoodCategory.parse("steak")


@pytest.mark.parametrize("raw", ["Rosé", "rose", "ROSÉ", "ROSE"])
def test_wine_type_parse_ignores_accents(raw):
    assert WineType.parse(raw) is WineType.ROSE


def test_wine_type_parse_unknown():
    with pytest.raises(ValueError):
        WineType.parse("Orange")


def test_preferences_defaults():
    """Default preferences cap the price and allow every type."""
    prefs = WinePreferences()

    assert prefs.max_price == 60
    assert prefs.ignored_grapes == set()
    assert prefs.allowed_types == {WineType.RED, WineType.WHITE, WineType.ROSE}
    assert prefs.filters_nothing_by_type


def test_unrestricted_preferences():
    prefs = WinePreferences.unrestricted()

    assert prefs.accepts_price("$950")
    assert prefs.filters_nothing_by_type


def test_accepts_price():
    prefs = WinePreferences(max_price=50)

    assert prefs.accepts_price("$45")
    assert prefs.accepts_price("$50")
    assert not prefs.accepts_price("$75")
    assert not prefs.accepts_price("13/55")
    assert prefs.accepts_price(None)
    assert prefs.accepts_price("Market price")


def test_accepts_grapes_ignores_case_and_accents():
    prefs = WinePreferences(ignored_grapes={"Grüner Veltliner", "merlot"})

    assert not prefs.accepts_grapes(["Merlot"])
    assert not prefs.accepts_grapes(["gruner veltliner"])
    assert prefs.accepts_grapes(["Malbec"])
    assert prefs.accepts_grapes([])


def test_accepts_type_matches_dataset_type_text():
    reds = WinePreferences(allowed_types={WineType.RED})

    assert reds.accepts_type("Red")
    assert not reds.accepts_type("White")
    assert not reds.accepts_type("Dessert/Port")
    assert WinePreferences().accepts_type("Dessert/Port")


def test_accepts_wine_type():
    whites = WinePreferences(allowed_types={WineType.WHITE})

    assert whites.accepts_wine_type(WineType.WHITE)
    assert not whites.accepts_wine_type(WineType.RED)
    assert whites.accepts_wine_type(None)


def test_reference_match_closest_vintage():
    entry = ReferenceWineEntry(wine_id="1", name="Origem Merlot", vintages=[2020, 2019, 2005])

    match = ReferenceMatch(entry=entry, vintage_match=VintageMatch.CLOSEST, ocr_year=2010)

    assert match.closest_vintage == 2005
    assert ReferenceMatch(entry=entry).closest_vintage is None


def test_reference_entry_is_frozen():
    entry = ReferenceWineEntry(wine_id="1", name="Origem Merlot")

    with pytest.raises(ValidationError):
        entry.name = "Other"


def test_scored_wine_label_and_bounds():
    wine = ScoredWine(original_text="Origem Merlot 2019 $45", score=8, reason="Smooth red")

    assert wine.label == "Origem Merlot 2019 $45"
    assert wine.vintage_match is VintageMatch.NOT_CHECKED

    with pytest.raises(ValidationError):
        ScoredWine(original_text="x", score=11, reason="too high")


def test_recommendation_found():
    assert WineRecommendation(wine_name="Origem Merlot", reasoning="r", raw_text="t", score=8).found
    assert not WineRecommendation(wine_name="No match found", reasoning="r", raw_text="t").found


def test_bounding_box_height():
    assert BoundingBox(left=0, top=10, right=50, bottom=30).height == 20
    assert BoundingBox(left=0, top=30, right=50, bottom=10).height == 0
