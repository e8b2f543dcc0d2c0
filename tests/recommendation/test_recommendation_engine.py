"""Tests for scoring and ranking wine list entries."""

import pytest

from wine_lens.recommendation import RecommendationConfig, RecommendationEngine, recommend_wines
from wine_lens.reference import ReferenceWineStore
from wine_lens.schema import FoodCategory, MatchSource, VintageMatch, WinePreferences, WineType

ITALIAN_LIST = """
Chianti Classico Riserva 2018 $60
Origem Merlot 2019 $45
Cloudy Bay Sauvignon Blanc 2022 $52
"""

STEAKHOUSE_LIST = """
Cabernet Sauvignon, Napa Valley 2018 $95
Catena Malbec 2019 $50
Origem Merlot 2019 $45
"""


@pytest.fixture
def engine(store):
    return RecommendationEngine(store=store)


def test_keyword_scoring_ranks_by_pairing_score():
    results = recommend_wines(ITALIAN_LIST, FoodCategory.PASTA)

    assert [(wine.display_name, wine.score) for wine in results] == [
        ("Chianti Classico Riserva 2018", 10),
        ("Origem Merlot 2019", 7),
        ("Cloudy Bay Sauvignon Blanc 2022", 5),
    ]
    assert results[0].price == "$60"
    assert results[0].match_source is MatchSource.KEYWORD
    assert results[0].reference is None


def test_equal_scores_break_ties_by_name():
    results = recommend_wines(STEAKHOUSE_LIST, FoodCategory.BEEF)

    assert [(wine.display_name, wine.score) for wine in results] == [
        ("Cabernet Sauvignon, Napa Valley 2018", 10),
        ("Catena Malbec 2019", 10),
        ("Origem Merlot 2019", 8),
    ]


def test_section_keyword_scores_entries_without_their_own_keyword():
    results = recommend_wines("CHAMPAGNE\nVeuve Clicquot Brut NV\nGlass $24 | Bottle $120", FoodCategory.SEAFOOD)

    assert len(results) == 1
    assert results[0].display_name == "Veuve Clicquot Brut NV"
    assert results[0].score == 9
    assert results[0].match_source is MatchSource.SECTION


@pytest.mark.parametrize("food", list(FoodCategory))
def test_headers_alone_score_nothing(food):
    assert recommend_wines("RED WINES\nWHITE WINES\nSPARKLING\nROSÉ\nCHAMPAGNE", food) == []


def test_continuation_header_carries_section():
    results = recommend_wines("Pinot Noir cont.\nKosta Browne, Sonoma Coast 2019 $85", FoodCategory.CHICKEN)

    assert results[0].score == 9
    assert results[0].match_source is MatchSource.SECTION


def test_ocr_digit_errors_still_match_keywords():
    results = recommend_wines("Merl0t Reserve 2019 $45", FoodCategory.BEEF)

    assert results[0].score == 8
    assert results[0].display_name == "Merl0t Reserve 2019"


def test_zero_scores_are_dropped():
    assert recommend_wines("Moscato d'Asti 2021 $30", FoodCategory.BEEF) == []


def test_bare_keyword_labels_are_not_wines():
    assert recommend_wines("Merlot Blends\n\nOur Merlot", FoodCategory.BEEF) == []


def test_producer_listings_without_price_are_wines():
    text = "Whispering Angel Rosé\n\nCakebread Chardonnay\n\nDuckhorn Merlot"
    results = recommend_wines(text, FoodCategory.CHICKEN)

    assert [(wine.original_text, wine.score) for wine in results] == [
        ("Cakebread Chardonnay", 9),
        ("Whispering Angel Rosé", 7),
        ("Duckhorn Merlot", 6),
    ]


def test_producer_and_region_keyword_scores_without_store():
    wine = recommend_wines("Ruffino Chianti", FoodCategory.PASTA)[0]

    assert wine.score == 10
    assert wine.match_source is MatchSource.KEYWORD


def test_duplicate_entries_collapse():
    results = recommend_wines("Origem Merlot 2019 $45\nOrigem Merlot 2019 $45", FoodCategory.BEEF)

    assert len(results) == 1


def test_max_price_filter():
    preferences = WinePreferences(max_price=40)

    assert recommend_wines("Origem Merlot 2019 $45", FoodCategory.BEEF, preferences) == []


def test_ignored_grapes_filter():
    preferences = WinePreferences(max_price=100, ignored_grapes={"Merlot"})

    assert recommend_wines("Origem Merlot 2019 $45", FoodCategory.BEEF, preferences) == []


def test_wine_type_filter():
    preferences = WinePreferences(max_price=100, allowed_types={WineType.WHITE})

    results = recommend_wines(ITALIAN_LIST, FoodCategory.CHICKEN, preferences)

    assert [wine.display_name for wine in results] == ["Cloudy Bay Sauvignon Blanc 2022"]


def test_default_preferences_filter_nothing():
    results = recommend_wines("Cabernet Sauvignon, Napa Valley 2018 $95", FoodCategory.BEEF)

    assert results[0].price == "$95"


def test_database_match_with_confirmed_pairing(engine):
    wine = engine.recommend_wines("Origem Merlot 2019 $45", FoodCategory.BEEF)[0]

    assert wine.score == 10
    assert wine.match_source is MatchSource.DATABASE
    assert wine.reference.wine_id == "100002"
    assert wine.vintage_match is VintageMatch.EXACT


def test_database_resolves_named_wine_without_price(engine):
    wine = engine.recommend_wines("Origem Merlot", FoodCategory.BEEF)[0]

    assert wine.score == 10
    assert wine.match_source is MatchSource.DATABASE
    assert wine.reference.wine_id == "100002"
    assert wine.vintage_match is VintageMatch.NOT_CHECKED


def test_database_confirmed_without_keyword_uses_rating_tier(engine):
    wine = engine.recommend_wines("Espumante Moscatel 2019", FoodCategory.PORK)[0]

    assert wine.score == 6
    assert "confirms" in wine.reason


def test_database_unconfirmed_without_keyword_uses_lower_tier(engine):
    wine = engine.recommend_wines("Espumante Moscatel 2019", FoodCategory.BEEF)[0]

    assert wine.score == 3
    assert wine.reason.startswith("Unconfirmed pairing")


def test_database_unconfirmed_keeps_keyword_score(engine):
    wine = engine.recommend_wines("Cloudy Bay Sauvignon Blanc 2022", FoodCategory.CHICKEN)[0]

    assert wine.score == 7
    assert wine.reference.wine_id == "100006"


def test_database_bonus_is_capped(engine):
    wine = engine.recommend_wines("Catena Malbec 2019 $50", FoodCategory.BEEF)[0]

    assert wine.score == 10
    assert wine.vintage_match is VintageMatch.NOT_IN_DATABASE


def test_database_closest_vintage(engine):
    wine = engine.recommend_wines("Pinot Noir cont.\nKosta Browne, Sonoma Coast 2019 $85", FoodCategory.CHICKEN)[0]

    assert wine.score == 10
    assert wine.vintage_match is VintageMatch.CLOSEST
    assert wine.ocr_year == 2019


def test_rating_breaks_score_ties(engine):
    results = engine.recommend_wines("Chianti Classico Riserva 2018 $60\nOrigem Merlot 2019 $45", FoodCategory.PIZZA)

    assert [(wine.reference.wine_id, wine.score) for wine in results] == [("100002", 9), ("100004", 9)]


def test_keyword_path_enriches_with_reference(engine):
    wine = engine.recommend_wines("MERLOT\nOur Merlot", FoodCategory.BEEF)[0]

    assert wine.score == 9
    assert wine.match_source is MatchSource.KEYWORD
    assert wine.reference.wine_id == "100002"


def test_database_path_respects_filters(engine):
    assert engine.recommend_wines("Origem Merlot 2019 $45", FoodCategory.BEEF, WinePreferences(max_price=40)) == []
    assert (
        engine.recommend_wines(
            "Origem Merlot 2019 $45",
            FoodCategory.BEEF,
            WinePreferences(ignored_grapes={"merlot"}),
        )
        == []
    )
    assert (
        engine.recommend_wines(
            "Origem Merlot 2019 $45",
            FoodCategory.BEEF,
            WinePreferences(allowed_types={WineType.WHITE}),
        )
        == []
    )


def test_empty_store_falls_back_to_keywords():
    engine = RecommendationEngine(store=ReferenceWineStore.empty())

    wine = engine.recommend_wines("Origem Merlot 2019 $45", FoodCategory.BEEF)[0]

    assert engine.store is None
    assert wine.score == 8
    assert wine.reference is None


def test_custom_config_changes_bonus(store):
    engine = RecommendationEngine(store=store, config=RecommendationConfig(database_confirmed_bonus=0))

    wine = engine.recommend_wines("Origem Merlot 2019 $45", FoodCategory.BEEF)[0]

    assert wine.score == 8


def test_continuation_header_with_price_on_next_line():
    results = recommend_wines("Pinot Noir cont.\nKosta Browne, Sonoma Coast 2019\n$85", FoodCategory.CHICKEN)

    assert len(results) == 1
    assert "cont." not in results[0].original_text
    assert "Kosta Browne" in results[0].original_text
    assert results[0].score == 9
    assert results[0].price == "$85"


def test_multi_line_entries_with_bottle_prices():
    text = "Loscano Malbec 2020\nMendoza, Argentina\nBottle $56\nJordan Cabernet Sauvignon 2018\nAlexander Valley\nBottle $98"

    results = recommend_wines(text, FoodCategory.BEEF)

    assert results[0].score == 10
    assert "Cabernet" in results[0].original_text or "Malbec" in results[0].original_text
    assert len(results) == 2


def test_scores_stay_in_bounds(engine):
    results = engine.recommend_wines(ITALIAN_LIST + STEAKHOUSE_LIST, FoodCategory.BEEF)

    assert results
    assert all(0 < wine.score <= 10 for wine in results)
