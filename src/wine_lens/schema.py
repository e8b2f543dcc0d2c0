"""Data models for wine-lens."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from wine_lens.normalization.text import normalize_for_matching
from wine_lens.parsing.prices import extract_numeric_price

DEFAULT_MAX_PRICE = 60
UNRESTRICTED_MAX_PRICE = 1_000_000


class FoodCategory(str, Enum):
    """Dish categories a wine can be paired with."""

    BEEF = "beef"
    PORK = "pork"
    CHICKEN = "chicken"
    PASTA = "pasta"
    FISH = "fish"
    SEAFOOD = "seafood"
    LAMB = "lamb"
    VEGETARIAN = "vegetarian"
    CHEESE = "cheese"
    DESSERT = "dessert"
    SUSHI = "sushi"
    PIZZA = "pizza"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, raw: str) -> "FoodCategory":
        value = raw.strip().lower()
        for item in cls:
            if item.value == value:
                return item
        raise ValueError(f"Unknown food category: {raw}")


class WineType(str, Enum):
    """Wine colors a user can filter on."""

    RED = "Red"
    WHITE = "White"
    ROSE = "Rosé"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str) -> "WineType":
        value = normalize_for_matching(raw.strip())
        for item in cls:
            if normalize_for_matching(item.value) == value or item.name.lower() == value:
                return item
        raise ValueError(f"Unknown wine type: {raw}")


class VintageMatch(str, Enum):
    EXACT = "exact"
    CLOSEST = "closest"
    NOT_IN_DATABASE = "not_in_database"
    NOT_CHECKED = "not_checked"


class MatchSource(str, Enum):
    DATABASE = "database"
    KEYWORD = "keyword"
    SECTION = "section"


class WinePreferences(BaseModel):
    """User filters applied to every recommendation request."""

    max_price: int = DEFAULT_MAX_PRICE
    ignored_grapes: set[str] = Field(default_factory=set)
    allowed_types: set[WineType] = Field(default_factory=lambda: set(WineType))

    @classmethod
    def unrestricted(cls) -> "WinePreferences":
        """Preferences that filter nothing out."""
        return cls(max_price=UNRESTRICTED_MAX_PRICE)

    def accepts_price(self, price_text: str | None) -> bool:
        if price_text is None:
            return True
        price = extract_numeric_price(price_text)
        if price is None:
            return True
        return price <= self.max_price

    def accepts_grapes(self, grapes: list[str]) -> bool:
        if not self.ignored_grapes:
            return True
        ignored = {normalize_for_matching(grape) for grape in self.ignored_grapes}
        return not any(normalize_for_matching(grape) in ignored for grape in grapes)

    def accepts_type(self, wine_type: str) -> bool:
        if self.filters_nothing_by_type:
            return True
        lowered = normalize_for_matching(wine_type)
        return any(normalize_for_matching(item.label) in lowered for item in self.allowed_types)

    def accepts_wine_type(self, wine_type: WineType | None) -> bool:
        # Untyped keywords (regions, blends) are never filtered out.
        if wine_type is None or self.filters_nothing_by_type:
            return True
        return wine_type in self.allowed_types

    @property
    def filters_nothing_by_type(self) -> bool:
        return len(self.allowed_types) == len(WineType)


class ReferenceWineEntry(BaseModel):
    """One wine from the reference dataset."""

    model_config = ConfigDict(frozen=True)

    wine_id: str
    name: str
    type: str = ""
    grapes: list[str] = Field(default_factory=list)
    harmonize: list[str] = Field(default_factory=list)
    abv: float | None = None
    body: str = ""
    acidity: str = ""
    country: str = ""
    region: str = ""
    winery: str = ""
    average_rating: float | None = None
    vintages: list[int] = Field(default_factory=list)


class ReferenceMatch(BaseModel):
    """Identity match of menu text against the reference dataset."""

    entry: ReferenceWineEntry
    vintage_match: VintageMatch = VintageMatch.NOT_CHECKED
    ocr_year: int | None = None

    @property
    def closest_vintage(self) -> int | None:
        if self.ocr_year is None:
            return None
        return find_closest_vintage(self.entry.vintages, self.ocr_year)


def find_closest_vintage(vintages: list[int], target_year: int) -> int | None:
    if not vintages:
        return None
    return min(vintages, key=lambda year: abs(year - target_year))


class ScoredWine(BaseModel):
    """A menu entry scored against one food category."""

    original_text: str
    score: int = Field(ge=0, le=10)
    reason: str
    reference: ReferenceWineEntry | None = None
    display_name: str | None = None
    price: str | None = None
    vintage_match: VintageMatch = VintageMatch.NOT_CHECKED
    ocr_year: int | None = None
    match_source: MatchSource = MatchSource.KEYWORD

    @property
    def label(self) -> str:
        return self.display_name or self.original_text


class WineAlternative(BaseModel):
    wine_name: str
    price: str | None = None
    score: int = Field(ge=0, le=10)
    reason: str
    reference: ReferenceWineEntry | None = None
    vintage_match: VintageMatch = VintageMatch.NOT_CHECKED
    vintage_note: str | None = None


class WineRecommendation(BaseModel):
    """Final pick for one food category, with runner-up alternatives."""

    wine_name: str
    price: str | None = None
    reasoning: str
    runner_up: str | None = None
    raw_text: str
    score: int | None = None
    reference: ReferenceWineEntry | None = None
    vintage_match: VintageMatch = VintageMatch.NOT_CHECKED
    vintage_note: str | None = None
    alternatives: list[WineAlternative] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.score is not None


class BoundingBox(BaseModel):
    """Pixel-space box of one recognized line."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def height(self) -> int:
        return max(0, self.bottom - self.top)


class OcrLine(BaseModel):
    text: str
    box: BoundingBox | None = None


class OcrResult(BaseModel):
    """Recognized text of one photo, line by line."""

    full_text: str
    lines: list[OcrLine] = Field(default_factory=list)
    image_width: int = 0
    image_height: int = 0
