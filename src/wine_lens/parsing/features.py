"""Line features and the line classifier used by the menu parser.

Every feature is a pure function of one line (or one coalesced entry) so it can
be tested on its own. ``classify_line`` is the only place that combines them
into a decision about headers and bare keyword labels.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from wine_lens.normalization.text import collapse_whitespace, normalize_for_matching, normalize_for_ocr_matching
from wine_lens.pairing.knowledge import PairingKnowledgeBase
from wine_lens.parsing.prices import extract_price, is_plausible_year, is_price_token

VINTAGE_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")
VOLUME_PATTERN = re.compile(r"\b\d+(?:\.\d+)?\s*(?:ml|cl|l|oz)\b|\bmagnum\b|\bhalf[- ]bottle\b", re.IGNORECASE)
NV_PATTERN = re.compile(r"(?<![A-Za-z])N\.?V\.?(?![A-Za-z])", re.IGNORECASE)
CONTINUATION_PATTERN = re.compile(
    r"(?:\(\s*)?(?<![A-Za-z])(?:cont\.?|cont['’]?d\.?|continued)\s*\)?\s*$",
    re.IGNORECASE,
)
_NON_LETTER = re.compile(r"[^a-z]")
_PUNCTUATION = re.compile(r"[^\w\s]")

MAX_HEADER_WORDS = 4
MAX_BARE_KEYWORD_WORDS = 3
BARE_KEYWORD_SUFFIXES = ("", "s", " wine", " wines")
# Filler allowed around a keyword in a label entry ("Our Merlot", "Merlot Blends").
BARE_LABEL_WORDS = frozenset({"our", "house", "blend", "blends", "selection", "selections"})

# Compared against the letters-only lowercase projection of a line.
GENERIC_HEADERS = frozenset(
    {
        "wine",
        "wines",
        "winelist",
        "ourwines",
        "wineselection",
        "reds",
        "whites",
        "redwine",
        "redwines",
        "whitewine",
        "whitewines",
        "rosewines",
        "roses",
        "sparklingwines",
        "bubbles",
        "champagneandsparkling",
        "sparklingandchampagne",
        "dessertwines",
        "sweetwines",
        "fortifiedwines",
        "orangewines",
        "naturalwines",
        "housewine",
        "housewines",
        "bytheglass",
        "bythebottle",
        "winesbytheglass",
        "winesbythebottle",
        "halfbottles",
        "largeformat",
        "cellarselection",
        "reservelist",
        "vinsrouges",
        "vinsblancs",
        "vinirossi",
        "vinibianchi",
        "vinostintos",
        "vinosblancos",
    }
)


class LineKind(str, Enum):
    HEADER = "header"
    BARE_KEYWORD = "bare_keyword"
    WINE_CONTENT = "wine_content"


def find_vintage_year(text: str) -> int | None:
    for match in VINTAGE_PATTERN.finditer(text):
        year = int(match.group(0))
        if is_plausible_year(year):
            return year
    return None


def has_vintage(text: str) -> bool:
    return find_vintage_year(text) is not None


def has_price(text: str) -> bool:
    return extract_price(text) is not None


def has_volume(text: str) -> bool:
    return VOLUME_PATTERN.search(text) is not None


def has_nv_marker(text: str) -> bool:
    return NV_PATTERN.search(text) is not None


def word_count(text: str) -> int:
    return len(text.split())


def is_capitalized(word: str) -> bool:
    for ch in word:
        if ch.isalpha():
            return ch.isupper()
    return False


def capitalized_word_count(text: str) -> int:
    return sum(1 for word in text.split() if is_capitalized(word))


def is_all_caps(text: str) -> bool:
    letters = [ch for ch in _PUNCTUATION.sub("", text) if ch.isalpha()]
    return bool(letters) and all(ch.isupper() for ch in letters)


def is_price_line(text: str) -> bool:
    """True when every token is a price, separator or serving word."""
    tokens = text.split()
    return bool(tokens) and all(is_price_token(token) for token in tokens)


def non_price_text(text: str) -> str:
    return " ".join(token for token in text.split() if not is_price_token(token))


def is_continuation_header(text: str) -> bool:
    return CONTINUATION_PATTERN.search(text.strip()) is not None


def is_generic_header(text: str) -> bool:
    letters = _NON_LETTER.sub("", normalize_for_matching(text))
    return letters in GENERIC_HEADERS


def is_caps_header(text: str) -> bool:
    return (
        word_count(text) <= MAX_HEADER_WORDS
        and is_all_caps(text)
        and not has_vintage(text)
        and not has_price(text)
        and not has_volume(text)
        and not has_nv_marker(text)
    )


def is_section_header(text: str) -> bool:
    return is_continuation_header(text) or is_generic_header(text) or is_caps_header(text)


def bare_keyword(text: str, kb: PairingKnowledgeBase) -> str | None:
    """Keyword a short label line names on its own ("Merlot", "Rosés", "Red Wines")."""
    if word_count(text) > MAX_BARE_KEYWORD_WORDS:
        return None
    if has_vintage(text) or has_price(text) or has_volume(text):
        return None
    return _label_keyword(_label_text(text), kb)


def _label_text(text: str) -> str:
    return collapse_whitespace(_PUNCTUATION.sub(" ", normalize_for_ocr_matching(text)))


def _label_keyword(normalized: str, kb: PairingKnowledgeBase) -> str | None:
    for keyword in kb.keywords:
        if any(normalized == keyword + suffix for suffix in BARE_KEYWORD_SUFFIXES):
            return keyword
    return None


def is_bare_keyword_line(text: str, kb: PairingKnowledgeBase) -> bool:
    return bare_keyword(text, kb) is not None


def looks_like_new_wine_start(text: str) -> bool:
    if is_price_line(text):
        return False
    if has_vintage(text):
        return True
    if has_price(text) and len(non_price_text(text)) > 3:
        return True
    words = text.split()
    return len(words) >= 2 and is_capitalized(words[0]) and capitalized_word_count(" ".join(words[1:])) >= 1


def looks_like_wine_entry(text: str) -> bool:
    """Whether an entry reads like a wine listing rather than logistics."""
    if is_price_line(text):
        return False
    if has_vintage(text) or has_nv_marker(text):
        return True
    return word_count(text) >= 2 and capitalized_word_count(text) >= 2


def is_bare_keyword_entry(text: str, kb: PairingKnowledgeBase) -> bool:
    """Entry that is only a keyword label ("Merlot", "Our Merlot", "Merlot Blends").

    A producer or any other word next to the keyword makes it a wine.
    """
    if word_count(text) > MAX_BARE_KEYWORD_WORDS:
        return False
    if has_price(text) or has_vintage(text) or has_volume(text) or has_nv_marker(text):
        return False
    words = [word for word in _label_text(text).split() if word not in BARE_LABEL_WORDS]
    return bool(words) and _label_keyword(" ".join(words), kb) is not None


@dataclass(frozen=True)
class LineClassification:
    kind: LineKind
    keyword: str | None = None


def classify_line(text: str, kb: PairingKnowledgeBase) -> LineClassification:
    """Classify one trimmed line.

    Headers carry the most specific keyword they mention (or None, which
    clears the active section). Bare keyword lines carry the keyword they
    name; the parser only treats them as headers between entries.
    """
    if is_section_header(text):
        return LineClassification(LineKind.HEADER, kb.extract_keyword(text))
    keyword = bare_keyword(text, kb)
    if keyword is not None:
        return LineClassification(LineKind.BARE_KEYWORD, keyword)
    return LineClassification(LineKind.WINE_CONTENT)
