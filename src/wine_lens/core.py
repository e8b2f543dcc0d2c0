"""Core analysis function."""

import os
from pathlib import Path

from PIL import Image

from wine_lens.exceptions import ImageError
from wine_lens.parsing.layout import parser_input
from wine_lens.providers.base import BaseProvider
from wine_lens.recommendation.engine import RecommendationEngine
from wine_lens.reference.store import ReferenceWineStore
from wine_lens.schema import FoodCategory, OcrResult, WinePreferences, WineRecommendation

ImageInput = str | Path | Image.Image

NO_TEXT_MESSAGE = "No text found in image. Try taking a clearer photo of the wine list."


def _build_gemini_provider(api_key: str | None) -> BaseProvider:
    from wine_lens.providers.gemini import GeminiProvider

    return GeminiProvider(api_key=api_key)


def _build_ocr_provider() -> BaseProvider:
    from wine_lens.providers.google_vision_ocr import GoogleVisionOCRProvider

    return GoogleVisionOCRProvider()


def _select_provider(provider: str | BaseProvider | None, api_key: str | None) -> BaseProvider:
    if isinstance(provider, BaseProvider):
        return provider
    provider_name = (provider or os.getenv("WINE_LENS_PROVIDER", "gemini")).strip().lower()
    if provider_name in {"gemini", "vision"}:
        return _build_gemini_provider(api_key)
    if provider_name in {"ocr", "google_vision_ocr", "google-vision-ocr"}:
        return _build_ocr_provider()
    raise ValueError(f"Unsupported provider: {provider_name}")


def recognize(
    image: ImageInput,
    *,
    api_key: str | None = None,
    provider: str | BaseProvider | None = None,
) -> tuple[OcrResult, dict[str, str]]:
    """Recognize wine list text and return it with provider metadata."""
    engine = _select_provider(provider, api_key)
    result = engine.recognize(image)
    if not result.full_text.strip() and not result.lines:
        raise ImageError(NO_TEXT_MESSAGE)
    return result, engine.get_recognition_metadata() or {}


def analyze(
    image: ImageInput,
    food: FoodCategory,
    preferences: WinePreferences | None = None,
    *,
    api_key: str | None = None,
    provider: str | BaseProvider | None = None,
    store: ReferenceWineStore | None = None,
) -> WineRecommendation:
    """Recommend a wine from a photo of a wine list.

    Args:
        image: Image input - file path (str), Path object, or PIL Image.
        food: Dish category to pair with.
        preferences: Price, grape and type filters. None filters nothing.
        api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
        provider: Provider name (`gemini` or `ocr`) or a provider instance.
            Defaults to `WINE_LENS_PROVIDER` env var, then `gemini`.
        store: Reference dataset used for enrichment. Keyword-only when None.

    Returns:
        WineRecommendation, or the "No match found" recommendation when no
        listed wine could be scored.
    """
    ocr_result, _ = recognize(image, api_key=api_key, provider=provider)
    engine = RecommendationEngine(store=store)
    scored = engine.recommend_wines(parser_input(ocr_result), food, preferences)
    return engine.build_recommendation(scored, food, ocr_result.full_text)
