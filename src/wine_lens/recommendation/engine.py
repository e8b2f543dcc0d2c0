"""Scoring and ranking of menu entries for a food category."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wine_lens.normalization.text import alnum_key
from wine_lens.pairing.knowledge import KeywordMatch, PairingKnowledgeBase, default_knowledge_base
from wine_lens.parsing.features import is_bare_keyword_entry, looks_like_wine_entry
from wine_lens.parsing.menu_parser import MenuParser, WineEntry, select_display_name
from wine_lens.parsing.prices import extract_price
from wine_lens.reference.store import ReferenceWineStore
from wine_lens.schema import (
    FoodCategory,
    MatchSource,
    ReferenceMatch,
    ReferenceWineEntry,
    ScoredWine,
    VintageMatch,
    WineAlternative,
    WinePreferences,
    WineRecommendation,
    find_closest_vintage,
)

logger = logging.getLogger(__name__)

NO_MATCH_NAME = "No match found"
NO_MATCH_REASONING = (
    "Could not identify any wines from the list that match known varieties. "
    "Try taking a clearer photo of the wine list."
)


@dataclass(frozen=True)
class RecommendationConfig:
    max_score: int = 10
    database_confirmed_bonus: int = 2
    enrichment_bonus: int = 1
    max_alternatives: int = 3
    high_rating: float = 4.0
    good_rating: float = 3.5
    confirmed_tiers: tuple[int, int, int] = (8, 7, 6)
    unconfirmed_tiers: tuple[int, int, int] = (5, 4, 3)


@dataclass(frozen=True)
class _Base:
    score: int
    reason: str


def vintage_note(vintage_match: VintageMatch, reference: ReferenceWineEntry | None, ocr_year: int | None) -> str | None:
    if vintage_match == VintageMatch.CLOSEST and reference is not None and ocr_year is not None:
        closest = find_closest_vintage(reference.vintages, ocr_year)
        return f"{ocr_year} not found in database, showing data for {closest} vintage"
    if vintage_match == VintageMatch.NOT_IN_DATABASE:
        return "Vintage information not available in database"
    return None


class RecommendationEngine:
    """Scores parsed menu entries against pairing keywords and the reference dataset.

    Each entry is scored once: the database-informed candidate is tried
    first and the keyword-informed candidate fills in when the entry has no
    acceptable reference match. Without a reference store only keyword
    scoring runs.
    """

    def __init__(
        self,
        store: ReferenceWineStore | None = None,
        knowledge_base: PairingKnowledgeBase | None = None,
        config: RecommendationConfig | None = None,
    ):
        self.kb = knowledge_base or default_knowledge_base()
        self.store = store if store is not None and store.wine_count else None
        self.config = config or RecommendationConfig()
        self.parser = MenuParser(self.kb)

    def recommend_wines(
        self,
        text: str,
        food: FoodCategory,
        preferences: WinePreferences | None = None,
    ) -> list[ScoredWine]:
        """Ranked, de-duplicated candidates with a positive score.

        Without preferences nothing is filtered out.
        """
        prefs = preferences or WinePreferences.unrestricted()
        entries = self.parser.coalesce_entries(text)

        scored: list[ScoredWine] = []
        for entry in entries:
            candidate = self._score_from_database(entry, food, prefs)
            if candidate is None:
                candidate = self._score_from_keywords(entry, food, prefs)
            if candidate is not None and candidate.score > 0:
                scored.append(candidate)

        ranked = sorted(scored, key=self._rank_key)
        results: list[ScoredWine] = []
        seen: set[str] = set()
        for wine in ranked:
            key = alnum_key(wine.original_text)
            if key in seen:
                continue
            seen.add(key)
            results.append(wine)

        logger.debug("Scored %d of %d entries for %s", len(results), len(entries), food.value)
        return results

    def build_recommendation(
        self,
        scored: list[ScoredWine],
        food: FoodCategory,
        raw_text: str,
    ) -> WineRecommendation:
        if not scored:
            return WineRecommendation(wine_name=NO_MATCH_NAME, price=None, reasoning=NO_MATCH_REASONING, raw_text=raw_text)

        top = scored[0]
        alternatives = [
            WineAlternative(
                wine_name=wine.label,
                price=self._price_of(wine),
                score=wine.score,
                reason=wine.reason,
                reference=wine.reference,
                vintage_match=wine.vintage_match,
                vintage_note=vintage_note(wine.vintage_match, wine.reference, wine.ocr_year),
            )
            for wine in scored[1 : 1 + self.config.max_alternatives]
        ]
        return WineRecommendation(
            wine_name=top.label,
            price=self._price_of(top),
            reasoning=f"{top.reason}. Scored {top.score}/10 as a pairing with {food.display_name}.",
            runner_up=alternatives[0].wine_name if alternatives else None,
            raw_text=raw_text,
            score=top.score,
            reference=top.reference,
            vintage_match=top.vintage_match,
            vintage_note=vintage_note(top.vintage_match, top.reference, top.ocr_year),
            alternatives=alternatives,
        )

    @staticmethod
    def _rank_key(wine: ScoredWine) -> tuple[int, float, str]:
        rating = wine.reference.average_rating if wine.reference and wine.reference.average_rating else 0.0
        return (-wine.score, -rating, wine.label.casefold())

    @staticmethod
    def _price_of(wine: ScoredWine) -> str | None:
        if wine.price:
            return extract_price(wine.price) or wine.price
        return extract_price(wine.original_text)

    def _capped(self, score: int) -> int:
        return min(score, self.config.max_score)

    def _rating_tier(self, rating: float | None, tiers: tuple[int, int, int]) -> int:
        value = rating or 0.0
        if value >= self.config.high_rating:
            return tiers[0]
        if value >= self.config.good_rating:
            return tiers[1]
        return tiers[2]

    def _section_match(self, entry: WineEntry, food: FoodCategory, prefs: WinePreferences) -> KeywordMatch | None:
        if entry.section_keyword is None or not looks_like_wine_entry(entry.text):
            return None
        profile = self.kb.profile(entry.section_keyword)
        if profile is None:
            return None
        if not prefs.accepts_wine_type(profile.wine_type) or not prefs.accepts_grapes([profile.keyword]):
            return None
        score = profile.score_for(food)
        if score <= 0:
            return None
        return KeywordMatch(keyword=profile.keyword, profile=profile, score=score)

    def _base_score(
        self,
        entry: WineEntry,
        reference: ReferenceWineEntry,
        food: FoodCategory,
        prefs: WinePreferences,
    ) -> _Base | None:
        # Order matters: on equal scores grape inference wins.
        candidates = [
            self.kb.infer_from_grapes(reference.grapes, food, prefs),
            self.kb.best_match(entry.text, food, prefs),
            self._section_match(entry, food, prefs),
        ]
        best: KeywordMatch | None = None
        for candidate in candidates:
            if candidate is not None and (best is None or candidate.score > best.score):
                best = candidate
        if best is None:
            return None
        return _Base(score=best.score, reason=best.profile.description)

    def _score_from_database(self, entry: WineEntry, food: FoodCategory, prefs: WinePreferences) -> ScoredWine | None:
        if self.store is None:
            return None
        # A label only resolves through the grape fallback; a named wine still counts.
        if is_bare_keyword_entry(entry.text, self.kb) and self.store.find_name_match(entry.text) is None:
            return None
        if not prefs.accepts_price(entry.price):
            return None
        match = self.store.find_match_with_vintage(entry.text)
        if match is None:
            return None
        reference = match.entry
        if not prefs.accepts_grapes(reference.grapes) or not prefs.accepts_type(reference.type):
            return None

        base = self._base_score(entry, reference, food, prefs)
        confirmed = self.store.harmonizes_with_food(reference, food)
        if confirmed and base is not None:
            score = self._capped(base.score + self.config.database_confirmed_bonus)
            reason = f"{base.reason}; the reference database confirms it pairs with {food.display_name.lower()}"
        elif confirmed:
            score = self._rating_tier(reference.average_rating, self.config.confirmed_tiers)
            reason = f"The reference database confirms {reference.name} pairs with {food.display_name.lower()}"
        elif base is not None:
            score = base.score
            reason = base.reason
        else:
            score = self._rating_tier(reference.average_rating, self.config.unconfirmed_tiers)
            reason = f"Unconfirmed pairing, scored from the {reference.name} rating"

        return self._scored(entry, score, reason, match, MatchSource.DATABASE)

    def _score_from_keywords(self, entry: WineEntry, food: FoodCategory, prefs: WinePreferences) -> ScoredWine | None:
        if not prefs.accepts_price(entry.price):
            return None
        if entry.section_keyword is None and is_bare_keyword_entry(entry.text, self.kb):
            return None

        source = MatchSource.KEYWORD
        match = self.kb.best_match(entry.text, food, prefs)
        reference_match: ReferenceMatch | None = None
        if match is None:
            match = self._section_match(entry, food, prefs)
            source = MatchSource.SECTION
        if match is None and self.store is not None:
            reference = self.store.find_match(entry.text)
            if reference is not None and prefs.accepts_grapes(reference.grapes) and prefs.accepts_type(reference.type):
                match = self.kb.infer_from_grapes(reference.grapes, food, prefs)
                source = MatchSource.DATABASE
                reference_match = self.store.find_match_with_vintage(entry.text)
        if match is None or match.score <= 0:
            return None

        score = match.score
        reason = match.profile.description
        if self.store is not None and reference_match is None:
            enrichment = self.store.find_match_with_vintage(entry.text)
            if enrichment is not None and prefs.accepts_grapes(enrichment.entry.grapes):
                reference_match = enrichment
                if self.store.harmonizes_with_food(enrichment.entry, food):
                    score = self._capped(score + self.config.enrichment_bonus)
        return self._scored(entry, score, reason, reference_match, source)

    def _scored(
        self,
        entry: WineEntry,
        score: int,
        reason: str,
        match: ReferenceMatch | None,
        source: MatchSource,
    ) -> ScoredWine:
        return ScoredWine(
            original_text=entry.text,
            score=score,
            reason=reason,
            reference=match.entry if match else None,
            display_name=select_display_name(entry, self.kb),
            price=entry.price,
            vintage_match=match.vintage_match if match else VintageMatch.NOT_CHECKED,
            ocr_year=match.ocr_year if match else None,
            match_source=source,
        )


def recommend_wines(
    text: str,
    food: FoodCategory,
    preferences: WinePreferences | None = None,
    *,
    store: ReferenceWineStore | None = None,
) -> list[ScoredWine]:
    """Score a wine list for a food using the packaged pairing knowledge."""
    return RecommendationEngine(store=store).recommend_wines(text, food, preferences)


def build_recommendation(scored: list[ScoredWine], food: FoodCategory, raw_text: str) -> WineRecommendation:
    return RecommendationEngine().build_recommendation(scored, food, raw_text)
