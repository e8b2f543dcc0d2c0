"""Normalization utilities for wine-lens."""

from wine_lens.normalization.text import (
    alnum_key,
    collapse_whitespace,
    normalize_for_matching,
    normalize_for_ocr_matching,
    ocr_correct_word,
    ocr_word_variants,
    rnm_variants,
    strip_accents,
)

__all__ = [
    "alnum_key",
    "collapse_whitespace",
    "normalize_for_matching",
    "normalize_for_ocr_matching",
    "ocr_correct_word",
    "ocr_word_variants",
    "rnm_variants",
    "strip_accents",
]
