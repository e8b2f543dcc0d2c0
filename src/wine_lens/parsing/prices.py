"""Price extraction shared by the parser, the engine and user filters."""

from __future__ import annotations

import re

CURRENCY_PRICE = re.compile(
    r"[$€£]\s*(\d+(?:\.\d+)?)"
    r"|(?<![\d.])(\d+(?:\.\d+)?)\s*[$€£](?!\s*\d)"
    r"|(?<![\d.])(\d+\.\d{2})(?![\d%])"
)
GLASS_BOTTLE_PRICE = re.compile(r"\b(\d{1,4})/(\d{1,4})\b")
BARE_TRAILING_NUMBER = re.compile(r"(?:^|\s)(\d{2,5})\s*$")

YEAR_MIN = 1900
YEAR_MAX = 2099

SERVING_WORDS = frozenset(
    {
        "glass",
        "glasses",
        "bottle",
        "bottles",
        "btl",
        "gl",
        "carafe",
        "half",
        "split",
        "magnum",
        "bottiglia",
        "calice",
        "bouteille",
        "verre",
        "copa",
        "botella",
    }
)
_SEPARATOR_TOKENS = frozenset({"|", "/", "-", "–", "—", "·", "•", ":"})
_PRICE_TOKEN = re.compile(r"^[$€£]?\d+(?:\.\d+)?[$€£]?$|^\d{1,4}/\d{1,4}$")
_VOLUME_TOKEN = re.compile(r"^\(?\d+(?:\.\d+)?\s*(?:ml|cl|l|oz)\)?$", re.IGNORECASE)


def is_plausible_year(value: int) -> bool:
    return YEAR_MIN <= value <= YEAR_MAX


def extract_price(text: str) -> str | None:
    """Return the price substring of a menu line, or None.

    Currency-marked amounts win, then glass/bottle "13/41" pairs, then a bare
    trailing number that is not a vintage year.
    """
    match = CURRENCY_PRICE.search(text)
    if match:
        return match.group(0).strip()

    match = GLASS_BOTTLE_PRICE.search(text)
    if match:
        return match.group(0)

    match = BARE_TRAILING_NUMBER.search(text)
    if match and not is_plausible_year(int(match.group(1))):
        return match.group(1)
    return None


def extract_numeric_price(text: str) -> float | None:
    """Numeric value of the price in text; glass/bottle pairs use the bottle price."""
    match = CURRENCY_PRICE.search(text)
    if match:
        number = next(group for group in match.groups() if group)
        return float(number)

    match = GLASS_BOTTLE_PRICE.search(text)
    if match:
        return float(max(int(match.group(1)), int(match.group(2))))

    match = BARE_TRAILING_NUMBER.search(text)
    if match:
        value = int(match.group(1))
        if not is_plausible_year(value):
            return float(value)
    return None


def is_price_token(token: str) -> bool:
    lowered = token.lower().strip(",;")
    if not lowered:
        return True
    if lowered in SERVING_WORDS or lowered in _SEPARATOR_TOKENS:
        return True
    if _VOLUME_TOKEN.match(lowered):
        return True
    if _PRICE_TOKEN.match(lowered):
        digits = lowered.strip("$€£")
        if digits.isdigit() and len(digits) == 4 and is_plausible_year(int(digits)):
            return token[0] in "$€£" or token[-1] in "$€£"
        return True
    return False


def strip_trailing_price(line: str) -> str:
    """Drop trailing price and serving fragments, keeping a trailing vintage."""
    tokens = line.split()
    while tokens and is_price_token(tokens[-1]):
        tokens.pop()
    stripped = " ".join(tokens).rstrip(" ,;|-–—")
    return stripped or line.strip()
