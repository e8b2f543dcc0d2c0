"""Tests for price extraction."""

import pytest

from wine_lens.parsing.prices import (
    extract_numeric_price,
    extract_price,
    is_price_token,
    strip_trailing_price,
)


def test_extract_price_dollar_prefix():
    price = extract_price("Cabernet Sauvignon $55 by the bottle")
    assert price is not None
    assert "55" in price


def test_extract_price_euro_suffix():
    price = extract_price("Chianti Classico 42€ bottiglia")
    assert price == "42€"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Sancerre £38", "£38"),
        ("Rioja Reserva 38.50", "38.50"),
        ("Pinot Grigio 13/41", "13/41"),
        ("Malbec Mendoza 48", "48"),
        ("$ 120", "$ 120"),
    ],
)
def test_extract_price_formats(text, expected):
    assert extract_price(text) == expected


@pytest.mark.parametrize("text", ["Barolo, Viberti 2017", "Sonoma Coast", "Moscato 5.5%", ""])
def test_extract_price_none(text):
    assert extract_price(text) is None


def test_extract_price_prefers_currency_over_vintage():
    assert extract_price("Origem Merlot 2019 $45") == "$45"


def test_extract_numeric_price_glass_bottle_uses_bottle():
    assert extract_numeric_price("Pinot Grigio 13/41") == 41.0


def test_extract_numeric_price_values():
    assert extract_numeric_price("Bottle $75") == 75.0
    assert extract_numeric_price("Chianti Classico 42€ bottiglia") == 42.0
    assert extract_numeric_price("Champagne 2012") is None


def test_is_price_token():
    assert is_price_token("$45")
    assert is_price_token("Bottle")
    assert is_price_token("|")
    assert is_price_token("750ml")
    assert is_price_token("$2019")
    assert not is_price_token("2019")
    assert not is_price_token("Merlot")


def test_strip_trailing_price_keeps_vintage():
    assert strip_trailing_price("Origem Merlot 2019 $45") == "Origem Merlot 2019"
    assert strip_trailing_price("Barolo, Viberti 2017") == "Barolo, Viberti 2017"
    assert strip_trailing_price("Veuve Clicquot Brut NV Glass $24 | Bottle $120") == "Veuve Clicquot Brut NV"


def test_strip_trailing_price_of_price_only_line_keeps_text():
    assert strip_trailing_price("Bottle $75") == "Bottle $75"
