"""In-memory reference wine table with name and grape indexes."""

from __future__ import annotations

import asyncio
import logging
import re
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import IO

from wine_lens.exceptions import CacheError, DatasetError
from wine_lens.normalization.text import collapse_whitespace, normalize_for_matching, ocr_word_variants
from wine_lens.pairing.knowledge import PairingKnowledgeBase, default_knowledge_base
from wine_lens.parsing.features import find_vintage_year
from wine_lens.reference import cache
from wine_lens.reference.loader import attach_ratings, read_ratings, read_wines
from wine_lens.schema import FoodCategory, ReferenceMatch, ReferenceWineEntry, VintageMatch, find_closest_vintage

logger = logging.getLogger(__name__)

# Words that recur across unrelated wines and would cause false matches.
STOP_WORDS = frozenset(
    {
        "château", "chateau", "domaine", "clos", "casa", "bodega", "tenuta",
        "grand", "cru", "premier", "classé", "classe", "superiore",
        "del", "della", "delle", "dei", "des", "les", "the",
        "reserve", "reserva", "riserva", "selection", "estate",
        "vineyard", "vineyards", "winery", "cellars", "collection",
        "valley", "river", "hills", "county", "coast", "mountain",
        "napa", "sonoma", "russian", "santa", "san",
        "wine", "wines", "red", "white", "old", "vine", "vines",
        "special", "limited", "edition", "vintage", "bottle",
        "brut", "sec", "dry", "sweet", "noir", "blanc",
    }
)

MIN_WORD_LENGTH = 3
MIN_GRAPE_KEY_LENGTH = 4
MIN_MATCHED_WORDS = 2
MIN_MATCH_RATIO = 0.5

_NON_LETTER_OR_SPACE = re.compile(r"[^a-z\s]")
_NON_ALNUM_OR_SPACE = re.compile(r"[^a-z0-9\s]")


def index_words(name: str) -> list[str]:
    """Distinctive words of a reference wine name."""
    words = _NON_LETTER_OR_SPACE.sub(" ", normalize_for_matching(name)).split()
    return [word for word in words if len(word) >= MIN_WORD_LENGTH and word not in STOP_WORDS]


def query_words(text: str) -> list[str]:
    words = _NON_ALNUM_OR_SPACE.sub(" ", normalize_for_matching(text)).split()
    return list(dict.fromkeys(word for word in words if len(word) >= MIN_WORD_LENGTH))


class ReferenceWineStore:
    """Immutable snapshot of a reference dataset.

    A new dataset produces a new store; nothing here mutates after
    construction, so one store can serve concurrent lookups.
    """

    def __init__(
        self,
        entries: list[ReferenceWineEntry] | tuple[ReferenceWineEntry, ...] = (),
        knowledge_base: PairingKnowledgeBase | None = None,
    ):
        self._entries: tuple[ReferenceWineEntry, ...] = tuple(entries)
        self.kb = knowledge_base or default_knowledge_base()
        self._word_index: dict[str, list[tuple[int, int]]] = {}
        self._grape_index: dict[str, int] = {}
        self.build_indexes()

    @classmethod
    def empty(cls) -> "ReferenceWineStore":
        return cls(())

    @property
    def entries(self) -> tuple[ReferenceWineEntry, ...]:
        return self._entries

    @property
    def wine_count(self) -> int:
        return len(self._entries)

    def build_indexes(self) -> None:
        word_index: dict[str, list[tuple[int, int]]] = defaultdict(list)
        grape_index: dict[str, int] = {}
        for position, entry in enumerate(self._entries):
            words = set(index_words(entry.name))
            for word in words:
                word_index[word].append((position, len(words)))
            for grape in entry.grapes:
                key = collapse_whitespace(normalize_for_matching(grape))
                if len(key) >= MIN_GRAPE_KEY_LENGTH:
                    grape_index.setdefault(key, position)
        self._word_index = dict(word_index)
        self._grape_index = grape_index

    def find_match(self, text: str) -> ReferenceWineEntry | None:
        """Resolve menu text to at most one reference wine.

        Name words must cover at least two and at least half of an entry's
        distinctive words. Failing that, a grape named in the text resolves to
        the first wine made from it.
        """
        named = self.find_name_match(text)
        if named is not None:
            return named
        words = query_words(text)
        if not self._entries or not words:
            return None
        return self._match_grape(text, words)

    def find_name_match(self, text: str) -> ReferenceWineEntry | None:
        """Match on name words only, without the grape fallback."""
        if not self._entries:
            return None
        words = query_words(text)
        if not words:
            return None

        matched: dict[int, set[str]] = defaultdict(set)
        totals: dict[int, int] = {}
        for word in words:
            for variant in ocr_word_variants(word):
                if variant in STOP_WORDS:
                    continue
                for position, total in self._word_index.get(variant, ()):
                    matched[position].add(variant)
                    totals[position] = total

        best: tuple[float, int, int] | None = None
        for position, hits in matched.items():
            count = len(hits)
            ratio = count / totals[position]
            if count < MIN_MATCHED_WORDS or ratio < MIN_MATCH_RATIO:
                continue
            key = (ratio, count, -position)
            if best is None or key > best:
                best = key
        if best is None:
            return None
        return self._entries[-best[2]]

    def _match_grape(self, text: str, words: list[str]) -> ReferenceWineEntry | None:
        for word in words:
            for variant in sorted(ocr_word_variants(word)):
                position = self._grape_index.get(variant)
                if position is not None:
                    return self._entries[position]

        normalized = collapse_whitespace(_NON_ALNUM_OR_SPACE.sub(" ", normalize_for_matching(text)))
        for grape, position in self._grape_index.items():
            if " " in grape and grape in normalized:
                return self._entries[position]
        return None

    def find_match_with_vintage(self, text: str) -> ReferenceMatch | None:
        entry = self.find_match(text)
        if entry is None:
            return None
        year = find_vintage_year(text)
        if year is None:
            vintage_match = VintageMatch.NOT_CHECKED
        elif not entry.vintages:
            vintage_match = VintageMatch.NOT_IN_DATABASE
        elif year in entry.vintages:
            vintage_match = VintageMatch.EXACT
        else:
            vintage_match = VintageMatch.CLOSEST
        return ReferenceMatch(entry=entry, vintage_match=vintage_match, ocr_year=year)

    def mapped_food_categories(self, entry: ReferenceWineEntry) -> set[FoodCategory]:
        categories = set()
        for tag in entry.harmonize:
            category = self.kb.harmonize_category(tag)
            if category is not None:
                categories.add(category)
        return categories

    def harmonizes_with_food(self, entry: ReferenceWineEntry, food: FoodCategory) -> bool:
        return food in self.mapped_food_categories(entry)

    @staticmethod
    def find_closest_vintage(vintages: list[int], target_year: int) -> int | None:
        return find_closest_vintage(vintages, target_year)

    # Loading

    @classmethod
    def from_streams(
        cls,
        wines: IO,
        ratings: IO | None = None,
        knowledge_base: PairingKnowledgeBase | None = None,
    ) -> "ReferenceWineStore":
        averages = read_ratings(ratings) if ratings is not None else {}
        return cls(read_wines(wines, averages), knowledge_base)

    @classmethod
    def from_streams_parallel(
        cls,
        wines: IO,
        ratings: IO | None = None,
        knowledge_base: PairingKnowledgeBase | None = None,
    ) -> "ReferenceWineStore":
        """Parse both tables concurrently, then attach ratings in one pass."""
        if ratings is None:
            return cls.from_streams(wines, None, knowledge_base)
        with ThreadPoolExecutor(max_workers=2) as executor:
            ratings_future = executor.submit(read_ratings, ratings)
            wines_future = executor.submit(read_wines, wines)
            entries = wines_future.result()
            averages = ratings_future.result()
        return cls(attach_ratings(entries, averages), knowledge_base)

    @classmethod
    def from_cache(cls, path: str | Path, knowledge_base: PairingKnowledgeBase | None = None) -> "ReferenceWineStore":
        return cls(cache.read_cache(path), knowledge_base)

    def write_cache(self, path: str | Path) -> Path:
        return cache.write_cache(list(self._entries), path)

    @classmethod
    def load(
        cls,
        wines_path: str | Path,
        ratings_path: str | Path | None = None,
        cache_path: str | Path | None = None,
        knowledge_base: PairingKnowledgeBase | None = None,
    ) -> "ReferenceWineStore":
        """Load from the binary cache when valid, else parse the CSVs and refresh the cache."""
        if cache_path is not None and cache.is_usable(cache_path):
            try:
                store = cls.from_cache(cache_path, knowledge_base)
                logger.info("Loaded %d wines from cache %s", store.wine_count, cache_path)
                return store
            except CacheError as e:
                logger.warning("Discarding reference cache %s: %s", cache_path, e)
                cache.discard_cache(cache_path)

        try:
            with open(wines_path, "rb") as wines:
                if ratings_path is None:
                    store = cls.from_streams(wines, None, knowledge_base)
                else:
                    with open(ratings_path, "rb") as ratings:
                        store = cls.from_streams_parallel(wines, ratings, knowledge_base)
        except OSError as e:
            raise DatasetError(f"Failed to load reference dataset: {e}") from e
        logger.info("Parsed %d wines from %s", store.wine_count, wines_path)

        if cache_path is not None:
            try:
                store.write_cache(cache_path)
            except (OSError, CacheError):
                logger.exception("Failed to write reference cache %s", cache_path)
        return store

    @classmethod
    async def load_async(
        cls,
        wines_path: str | Path,
        ratings_path: str | Path | None = None,
        cache_path: str | Path | None = None,
        knowledge_base: PairingKnowledgeBase | None = None,
    ) -> "ReferenceWineStore":
        return await asyncio.to_thread(cls.load, wines_path, ratings_path, cache_path, knowledge_base)
