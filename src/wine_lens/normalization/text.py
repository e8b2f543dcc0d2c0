"""Text normalization for OCR'd wine list text.

Two classes of OCR errors break lookups on photographed menus:

1. Dropped or mangled accents on French/Italian/Spanish/German/Portuguese
   names (Château -> Chateau, Côtes -> Cotes, Rosé -> Rose).
2. Visually similar characters swapped (0/o, 1/l, 5/s, rn/m).

Index builders and query paths must run the same function on both sides.
"""

from __future__ import annotations

import re
import unicodedata

_DIGIT_CONFUSIONS = str.maketrans({"0": "o", "1": "l", "5": "s"})
_NON_ALNUM = re.compile(r"[^a-z0-9]")
_WHITESPACE = re.compile(r"\s+")


def strip_accents(text: str) -> str:
    """Remove combining diacritical marks after NFD decomposition."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_for_matching(text: str) -> str:
    """Lowercase and strip accents."""
    return strip_accents(text.lower())


def ocr_correct_word(word: str) -> str:
    """Apply 0->o, 1->l, 5->s to a word; all-digit words are left alone."""
    if word.isdigit():
        return word
    return word.translate(_DIGIT_CONFUSIONS)


def rnm_variants(word: str) -> set[str]:
    variants = {word}
    if "rn" in word:
        variants.add(word.replace("rn", "m"))
    if "m" in word:
        variants.add(word.replace("m", "rn"))
    return variants


def ocr_word_variants(word: str) -> set[str]:
    """Original word plus digit-corrected and rn/m variants, for index lookups."""
    variants: set[str] = set()
    for base in {word, ocr_correct_word(word)}:
        variants |= rnm_variants(base)
    return variants


def normalize_for_ocr_matching(text: str) -> str:
    """Matching normalization plus character-wise digit corrections."""
    return normalize_for_matching(text).translate(_DIGIT_CONFUSIONS)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def alnum_key(text: str) -> str:
    """Lowercase alphanumeric-only projection, used to collapse duplicates."""
    return _NON_ALNUM.sub("", text.lower())
