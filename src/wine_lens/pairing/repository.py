"""Keyword repository for pairing knowledge."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import import_module

from wine_lens.exceptions import DatasetError
from wine_lens.normalization.text import normalize_for_matching
from wine_lens.schema import FoodCategory, WineType


@dataclass(frozen=True)
class KeywordProfile:
    keyword: str
    description: str
    scores: dict[FoodCategory, int] = field(default_factory=dict, hash=False, compare=False)
    wine_type: WineType | None = None

    def score_for(self, food: FoodCategory) -> int:
        return self.scores.get(food, 0)


@dataclass(frozen=True)
class HarmonizeRule:
    tag: str
    food: FoodCategory


class KeywordRepository:
    """Loads keyword profiles and harmonize rules from packaged data."""

    def __init__(self, version: str = "v1"):
        self.version = version
        self.profiles: list[KeywordProfile] = self._load_profiles()
        self.harmonize_rules: list[HarmonizeRule] = self._load_harmonize()

    def _load_profiles(self) -> list[KeywordProfile]:
        data = self._load_module("keywords").KEYWORDS
        profiles: list[KeywordProfile] = []
        for item in data:
            wine_type = WineType.parse(item["wine_type"]) if item.get("wine_type") else None
            profiles.append(
                KeywordProfile(
                    keyword=normalize_for_matching(item["keyword"]),
                    description=item["description"],
                    scores={FoodCategory.parse(food): int(score) for food, score in item["scores"].items()},
                    wine_type=wine_type,
                )
            )
        return profiles

    def _load_harmonize(self) -> list[HarmonizeRule]:
        data = self._load_module("harmonize").HARMONIZE
        return [HarmonizeRule(tag=item["tag"], food=FoodCategory.parse(item["food"])) for item in data]

    def _load_module(self, name: str):
        try:
            return import_module(f"wine_lens.pairing.data.{self.version}.{name}")
        except ModuleNotFoundError as e:
            raise DatasetError(f"Pairing data '{name}' not found for version {self.version}") from e
