"""Tests for coalescing menu lines into wine entries."""

from wine_lens.pairing import default_knowledge_base
from wine_lens.parsing.menu_parser import MenuParser, WineEntry, select_display_name, should_split_before

KB = default_knowledge_base()


def _parse(text):
    return MenuParser(KB).coalesce_entries(text)


def test_section_header_applies_to_following_entry():
    entries = _parse("CHAMPAGNE\nVeuve Clicquot Brut NV\nGlass $24 | Bottle $120")

    assert len(entries) == 1
    entry = entries[0]
    assert entry.section_keyword == "champagne"
    assert entry.lines == ["Veuve Clicquot Brut NV", "Glass $24 | Bottle $120"]
    assert entry.display_line == "Veuve Clicquot Brut NV"
    assert entry.price == "$24"


def test_each_priced_line_becomes_its_own_entry():
    entries = _parse("Barolo, Viberti 2017 $95\nChianti Classico Riserva 2018 $60")

    assert [entry.text for entry in entries] == [
        "Barolo, Viberti 2017 $95",
        "Chianti Classico Riserva 2018 $60",
    ]


def test_vintage_and_price_on_separate_lines_join_the_name():
    entries = _parse("Kosta Browne, Sonoma Coast\n2019\n$85\nCloudy Bay Sauvignon Blanc 2022 $52")

    assert len(entries) == 2
    assert entries[0].text == "Kosta Browne, Sonoma Coast 2019 $85"
    assert entries[0].price == "$85"
    assert entries[1].text == "Cloudy Bay Sauvignon Blanc 2022 $52"


def test_bare_keyword_between_entries_sets_section():
    entries = _parse("Merlot\nOrigem Merlot 2019 $45")

    assert len(entries) == 1
    assert entries[0].section_keyword == "merlot"
    assert entries[0].lines == ["Origem Merlot 2019 $45"]


def test_bare_keyword_inside_entry_stays_content():
    entries = _parse("Origem Merlot 2019 $45\nMerlot")

    assert len(entries) == 1
    assert entries[0].lines == ["Origem Merlot 2019 $45", "Merlot"]
    assert entries[0].section_keyword is None


def test_header_without_keyword_clears_section():
    entries = _parse("MERLOT\nOrigem Merlot 2019 $45\nITALIAN REDS\nBarolo, Viberti 2017 $95")

    assert [entry.section_keyword for entry in entries] == ["merlot", None]


def test_continuation_header_sets_section():
    entries = _parse("Pinot Noir cont.\nKosta Browne, Sonoma Coast 2019 $85")

    assert len(entries) == 1
    assert entries[0].section_keyword == "pinot noir"


def test_short_lines_end_the_current_entry():
    entries = _parse("Origem Merlot\n\nCatena Malbec\n--\nCloudy Bay")

    assert [entry.text for entry in entries] == ["Origem Merlot", "Catena Malbec", "Cloudy Bay"]


def test_long_runs_are_capped():
    entries = _parse("Domaine Tempier\nBandol Rouge\nProvence France\nMourvedre Blend\nClos Cibonne")

    assert [len(entry.lines) for entry in entries] == [4, 1]


def test_headers_alone_produce_no_entries():
    assert _parse("RED WINES\nWines by the Glass\nSPARKLING") == []


def test_accepts_line_iterables():
    entries = MenuParser(KB).coalesce_entries(["  Origem Merlot 2019 $45  ", "Catena Malbec 2019 $50"])

    assert [entry.text for entry in entries] == ["Origem Merlot 2019 $45", "Catena Malbec 2019 $50"]


def test_should_split_before():
    assert not should_split_before([], "Origem Merlot 2019")
    assert should_split_before(["Origem Merlot 2019 $45"], "Catena Malbec")
    assert should_split_before(["Origem Merlot", "2019"], "Catena Malbec 2019")
    assert not should_split_before(["Origem Merlot"], "2019")
    assert not should_split_before(["Origem Merlot 2019"], "Bottle $45")


def test_entry_price_falls_back_to_glass_bottle_then_bare_number():
    assert WineEntry(lines=["Pinot Grigio", "13/41"]).price == "13/41"
    assert WineEntry(lines=["Malbec Mendoza 2019", "48"]).price == "48"
    assert WineEntry(lines=["Barolo 2017"]).price is None


def test_select_display_name_prefers_keyword_line_with_vintage():
    entry = WineEntry(lines=["Origem", "Merlot Reserva 2019 $45"])
    assert select_display_name(entry, KB) == "Merlot Reserva 2019"


def test_select_display_name_falls_back_to_vintage_line():
    entry = WineEntry(lines=["Chianti Classico Riserva", "Castello di Ama 2018 $60"])
    assert select_display_name(entry, KB) == "Castello di Ama 2018"


def test_select_display_name_skips_bare_year_and_price_lines():
    entry = WineEntry(lines=["Kosta Browne, Sonoma Coast", "2019", "$85"])
    assert select_display_name(entry, KB) == "Kosta Browne, Sonoma Coast"


def test_select_display_name_strips_serving_prices():
    entry = WineEntry(lines=["Veuve Clicquot Brut NV", "Glass $24 | Bottle $120"])
    assert select_display_name(entry, KB) == "Veuve Clicquot Brut NV"
