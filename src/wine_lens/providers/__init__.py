"""Providers for wine-lens."""

from wine_lens.providers.base import BaseProvider
from wine_lens.providers.gemini import GeminiProvider
from wine_lens.providers.google_vision_ocr import GoogleVisionOCRProvider

__all__ = ["BaseProvider", "GeminiProvider", "GoogleVisionOCRProvider"]
