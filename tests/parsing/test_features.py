"""Tests for line features and classification."""

import pytest

from wine_lens.pairing import default_knowledge_base
from wine_lens.parsing.features import (
    LineKind,
    capitalized_word_count,
    classify_line,
    find_vintage_year,
    has_nv_marker,
    has_volume,
    is_all_caps,
    is_bare_keyword_entry,
    is_bare_keyword_line,
    is_continuation_header,
    is_generic_header,
    is_price_line,
    is_section_header,
    looks_like_new_wine_start,
    looks_like_wine_entry,
)

KB = default_knowledge_base()


def test_find_vintage_year():
    assert find_vintage_year("Chianti Classico Riserva 2018") == 2018
    assert find_vintage_year("Cuvée 1855") is None
    assert find_vintage_year("Bottle $75") is None


def test_has_volume_and_nv():
    assert has_volume("Split (187ml) $12")
    assert has_volume("Magnum 1.5L")
    assert not has_volume("Malbec 2020")
    assert has_nv_marker("Veuve Clicquot Brut NV")
    assert has_nv_marker("Krug Grande Cuvée N.V.")
    assert not has_nv_marker("Envy Cabernet")


def test_capitalization_features():
    assert capitalized_word_count("Kosta Browne, Sonoma Coast 2019") == 4
    assert is_all_caps("RED WINES")
    assert is_all_caps("ROSÉ")
    assert not is_all_caps("Red Wines")
    assert not is_all_caps("$24")


@pytest.mark.parametrize(
    "line",
    ["Glass $24 | Bottle $120", "Bottle $75", "$85", "13/41", "Glass $12 - Bottle $44"],
)
def test_is_price_line(line):
    assert is_price_line(line)


@pytest.mark.parametrize("line", ["Origem Merlot 2019 $45", "2019", "Mendoza, Argentina"])
def test_is_not_price_line(line):
    assert not is_price_line(line)


@pytest.mark.parametrize(
    "line",
    ["Pinot Noir cont.", "Merlot (cont.)", "Cabernet Sauvignon continued", "Chardonnay cont'd"],
)
def test_continuation_headers(line):
    assert is_continuation_header(line)
    assert is_section_header(line)


@pytest.mark.parametrize("line", ["Wines by the Glass", "Red Wines", "reds", "By The Bottle", "Dessert Wines"])
def test_generic_headers(line):
    assert is_generic_header(line)


@pytest.mark.parametrize("line", ["RED WINES", "SPARKLING", "ROSÉ", "CHAMPAGNE", "ITALIAN REDS"])
def test_caps_headers(line):
    assert is_section_header(line)


@pytest.mark.parametrize(
    "line",
    ["OPUS ONE 2018", "KRUG BRUT NV", "HOUSE RED $9", "Kosta Browne, Sonoma Coast 2019"],
)
def test_not_headers(line):
    assert not is_section_header(line)


def test_classify_header_extracts_most_specific_keyword():
    result = classify_line("CABERNET SAUVIGNON", KB)
    assert result.kind is LineKind.HEADER
    assert result.keyword == "cabernet sauvignon"


def test_classify_header_without_keyword_clears_section():
    result = classify_line("ITALIAN REDS", KB)
    assert result.kind is LineKind.HEADER
    assert result.keyword is None


@pytest.mark.parametrize(
    ("line", "keyword"),
    [("Merlot", "merlot"), ("Zinfandels", "zinfandel"), ("Malbec Wines", "malbec"), ("Riesling wine", "riesling")],
)
def test_bare_keyword_lines(line, keyword):
    assert is_bare_keyword_line(line, KB)
    result = classify_line(line, KB)
    assert result.kind is LineKind.BARE_KEYWORD
    assert result.keyword == keyword


@pytest.mark.parametrize("line", ["Merlot 2019", "Merlot $12", "Our House Merlot Blend", "Merlot Blends"])
def test_not_bare_keyword_lines(line):
    assert not is_bare_keyword_line(line, KB)


def test_classify_wine_content():
    assert classify_line("Origem Merlot 2019 $45", KB).kind is LineKind.WINE_CONTENT


@pytest.mark.parametrize(
    "line",
    ["Barolo, Viberti 2017", "Sancerre Loire $48", "Kosta Browne, Sonoma Coast"],
)
def test_looks_like_new_wine_start(line):
    assert looks_like_new_wine_start(line)


@pytest.mark.parametrize("line", ["Bottle $75", "Glass $24 | Bottle $120", "dry and crisp", "Castello"])
def test_does_not_look_like_new_wine_start(line):
    assert not looks_like_new_wine_start(line)


def test_looks_like_wine_entry():
    assert looks_like_wine_entry("Veuve Clicquot Brut NV Glass $24 | Bottle $120")
    assert looks_like_wine_entry("Kosta Browne, Sonoma Coast 2019 $85")
    assert not looks_like_wine_entry("Glass $12 | Bottle $44")
    assert not looks_like_wine_entry("house pour")


def test_is_bare_keyword_entry():
    assert is_bare_keyword_entry("Merlot Blends", KB)
    assert is_bare_keyword_entry("Our Merlot", KB)
    assert not is_bare_keyword_entry("Our Merlot $12", KB)
    assert not is_bare_keyword_entry("Merlot 2019", KB)
    assert not is_bare_keyword_entry("Origem Merlot Vale dos Vinhedos", KB)


@pytest.mark.parametrize("text", ["Merlot", "Rosé Wines", "House Chianti"])
def test_keyword_labels_are_bare_entries(text):
    assert is_bare_keyword_entry(text, KB)


@pytest.mark.parametrize("text", ["Ruffino Chianti", "Duckhorn Merlot", "Whispering Angel Rosé"])
def test_producer_with_keyword_is_not_bare(text):
    assert not is_bare_keyword_entry(text, KB)
