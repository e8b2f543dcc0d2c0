"""Keyword-to-food pairing knowledge."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from wine_lens.normalization.text import collapse_whitespace, normalize_for_matching, normalize_for_ocr_matching
from wine_lens.pairing.repository import KeywordProfile, KeywordRepository
from wine_lens.schema import FoodCategory, WinePreferences


@dataclass(frozen=True)
class KeywordMatch:
    keyword: str
    profile: KeywordProfile
    score: int


class PairingKnowledgeBase:
    """Static lookup of grape, region and style keywords.

    Keys are stored normalized (lowercase, accents stripped), so "Rosé" and
    "rose" resolve to the same profile. Scanning text for keywords runs the
    OCR normalization first, so "Merl0t" still finds "merlot".
    """

    def __init__(self, repo: KeywordRepository | None = None):
        self.repo = repo or KeywordRepository()
        self._profiles: dict[str, KeywordProfile] = {}
        for profile in self.repo.profiles:
            self._profiles.setdefault(profile.keyword, profile)
        # Longest first so the most specific keyword is reported first.
        self._ordered = sorted(self._profiles, key=lambda keyword: (-len(keyword), keyword))
        self._patterns = {
            keyword: re.compile(rf"(?<![a-z]){re.escape(keyword)}s?(?![a-z])") for keyword in self._ordered
        }
        self._harmonize = {rule.tag: rule.food for rule in self.repo.harmonize_rules}

    @property
    def keywords(self) -> list[str]:
        return list(self._ordered)

    def profile(self, keyword: str) -> KeywordProfile | None:
        return self._profiles.get(normalize_for_matching(keyword.strip()))

    def score(self, keyword: str, food: FoodCategory) -> int:
        profile = self.profile(keyword)
        return profile.score_for(food) if profile else 0

    def find_keywords(self, text: str) -> list[str]:
        """All keywords present in text, most specific first."""
        normalized = collapse_whitespace(normalize_for_ocr_matching(text))
        if not normalized:
            return []
        return [keyword for keyword in self._ordered if self._patterns[keyword].search(normalized)]

    def best_match(
        self,
        text: str,
        food: FoodCategory,
        preferences: WinePreferences | None = None,
    ) -> KeywordMatch | None:
        """Highest-scoring keyword in text for food.

        Score decides, not keyword length; on a tie the more specific keyword
        found first is kept. Keywords excluded by the type filter or naming an
        ignored grape are skipped.
        """
        best: KeywordMatch | None = None
        for keyword in self.find_keywords(text):
            profile = self._profiles[keyword]
            if preferences is not None:
                if not preferences.accepts_wine_type(profile.wine_type):
                    continue
                if not preferences.accepts_grapes([keyword]):
                    continue
            score = profile.score_for(food)
            if score > 0 and (best is None or score > best.score):
                best = KeywordMatch(keyword=keyword, profile=profile, score=score)
        return best

    def extract_keyword(self, text: str) -> str | None:
        """Most specific keyword embedded in text, used for section headers."""
        found = self.find_keywords(text)
        return found[0] if found else None

    def infer_from_grapes(
        self,
        grapes: list[str],
        food: FoodCategory,
        preferences: WinePreferences | None = None,
    ) -> KeywordMatch | None:
        """Best pairing implied by a reference entry's grape list."""
        best: KeywordMatch | None = None
        for grape in grapes:
            profile = self.profile(grape)
            if profile is not None:
                candidate = KeywordMatch(keyword=profile.keyword, profile=profile, score=profile.score_for(food))
                if preferences is not None and not preferences.accepts_wine_type(profile.wine_type):
                    continue
            else:
                candidate = self.best_match(grape, food, preferences)
                if candidate is None:
                    continue
            if candidate.score > 0 and (best is None or candidate.score > best.score):
                best = candidate
        return best

    def harmonize_category(self, tag: str) -> FoodCategory | None:
        return self._harmonize.get(collapse_whitespace(normalize_for_matching(tag)))


@lru_cache(maxsize=None)
def default_knowledge_base(version: str = "v1") -> PairingKnowledgeBase:
    return PairingKnowledgeBase(KeywordRepository(version=version))
