"""Menu text parsing for wine-lens."""

from wine_lens.parsing.prices import extract_numeric_price, extract_price, strip_trailing_price

__all__ = ["extract_numeric_price", "extract_price", "strip_trailing_price"]
