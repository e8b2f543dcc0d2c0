"""Long-lived recommendation service with a swappable reference dataset."""

from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import IO

from wine_lens.exceptions import DatasetError
from wine_lens.pairing.knowledge import PairingKnowledgeBase, default_knowledge_base
from wine_lens.parsing.layout import parser_input
from wine_lens.recommendation.engine import RecommendationConfig, RecommendationEngine
from wine_lens.reference.store import ReferenceWineStore
from wine_lens.schema import FoodCategory, OcrResult, WinePreferences, WineRecommendation

logger = logging.getLogger(__name__)

KEYWORD_ONLY_LABEL = "keyword-only"


class DatasetStatus(str, Enum):
    KEYWORD_ONLY = "keyword_only"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class EngineSnapshot:
    """A reference store and the engine derived from it, replaced together."""

    store: ReferenceWineStore | None
    engine: RecommendationEngine
    label: str

    @property
    def wine_count(self) -> int:
        return self.store.wine_count if self.store is not None else 0


class WineLensService:
    """Owns the live engine snapshot.

    Requests capture the snapshot once and finish against it even if a new
    dataset is swapped in meanwhile. The lock guards every status change
    and the snapshot swap.
    """

    def __init__(
        self,
        knowledge_base: PairingKnowledgeBase | None = None,
        config: RecommendationConfig | None = None,
    ):
        self.kb = knowledge_base or default_knowledge_base()
        self.config = config
        self._lock = threading.Lock()
        self._snapshot = self._build_snapshot(None, KEYWORD_ONLY_LABEL)
        self._status = DatasetStatus.KEYWORD_ONLY
        self.last_error: str | None = None

    @property
    def snapshot(self) -> EngineSnapshot:
        return self._snapshot

    @property
    def wine_count(self) -> int:
        return self._snapshot.wine_count

    @property
    def status(self) -> DatasetStatus:
        return self._status

    def _build_snapshot(self, store: ReferenceWineStore | None, label: str) -> EngineSnapshot:
        engine = RecommendationEngine(store=store, knowledge_base=self.kb, config=self.config)
        return EngineSnapshot(store=store, engine=engine, label=label)

    def _swap(self, store: ReferenceWineStore | None, label: str) -> EngineSnapshot:
        snapshot = self._build_snapshot(store, label)
        with self._lock:
            self._snapshot = snapshot
            self._status = DatasetStatus.READY if store is not None else DatasetStatus.KEYWORD_ONLY
            self.last_error = None
        logger.info("Switched to dataset %s (%d wines)", label, snapshot.wine_count)
        return snapshot

    def _mark_loading(self) -> None:
        with self._lock:
            self._status = DatasetStatus.LOADING

    def _failed(self, label: str, exc: Exception) -> None:
        with self._lock:
            self._status = DatasetStatus.FAILED
            self.last_error = str(exc)
            kept = self._snapshot.label
        logger.exception("Failed to load dataset %s, keeping %s", label, kept)

    def load(
        self,
        wines_path: str | Path,
        ratings_path: str | Path | None = None,
        cache_path: str | Path | None = None,
        label: str | None = None,
    ) -> EngineSnapshot:
        label = label or Path(wines_path).stem
        self._mark_loading()
        try:
            store = ReferenceWineStore.load(wines_path, ratings_path, cache_path, knowledge_base=self.kb)
        except DatasetError as e:
            self._failed(label, e)
            raise
        return self._swap(store, label)

    async def load_async(
        self,
        wines_path: str | Path,
        ratings_path: str | Path | None = None,
        cache_path: str | Path | None = None,
        label: str | None = None,
    ) -> EngineSnapshot:
        return await asyncio.to_thread(self.load, wines_path, ratings_path, cache_path, label)

    def load_from_streams(self, wines: IO, ratings: IO | None = None, label: str = "streams") -> EngineSnapshot:
        self._mark_loading()
        try:
            store = ReferenceWineStore.from_streams_parallel(wines, ratings, knowledge_base=self.kb)
        except DatasetError as e:
            self._failed(label, e)
            raise
        return self._swap(store, label)

    def use_keyword_only(self) -> EngineSnapshot:
        return self._swap(None, KEYWORD_ONLY_LABEL)

    def recommend(
        self,
        text: str,
        food: FoodCategory,
        preferences: WinePreferences | None = None,
    ) -> WineRecommendation:
        engine = self._snapshot.engine
        scored = engine.recommend_wines(text, food, preferences)
        return engine.build_recommendation(scored, food, text)

    def analyze_ocr(
        self,
        ocr_result: OcrResult,
        food: FoodCategory,
        preferences: WinePreferences | None = None,
    ) -> WineRecommendation:
        engine = self._snapshot.engine
        scored = engine.recommend_wines(parser_input(ocr_result), food, preferences)
        return engine.build_recommendation(scored, food, ocr_result.full_text)
