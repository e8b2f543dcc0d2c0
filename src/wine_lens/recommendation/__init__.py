"""Recommendation engine for wine-lens."""

from wine_lens.recommendation.engine import (
    NO_MATCH_NAME,
    NO_MATCH_REASONING,
    RecommendationConfig,
    RecommendationEngine,
    build_recommendation,
    recommend_wines,
)

__all__ = [
    "NO_MATCH_NAME",
    "NO_MATCH_REASONING",
    "RecommendationConfig",
    "RecommendationEngine",
    "build_recommendation",
    "recommend_wines",
]
