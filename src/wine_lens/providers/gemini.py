"""Gemini provider implementation."""

import os

from google import genai
from google.genai import types
from pydantic import BaseModel, Field

from wine_lens.exceptions import AuthenticationError, ImageError, RateLimitError
from wine_lens.providers.base import BaseProvider, ImageInput
from wine_lens.schema import OcrLine, OcrResult

TRANSCRIPTION_PROMPT = """Transcribe this restaurant wine list photo.
Return a JSON object with a "lines" array holding every line of text exactly as printed,
top to bottom. For two-column layouts, keep a wine name and its price on the same line.

Important:
- Keep section headings (e.g. "RED WINES", "By the Glass") as their own lines
- Keep prices, vintages and bottle sizes exactly as printed
- Do not add, translate or correct any text
- Return valid JSON only, no additional text"""


class _Transcription(BaseModel):
    lines: list[str] = Field(default_factory=list)


class GeminiProvider(BaseProvider):
    """Gemini Vision API provider.

    Gemini returns text only, so recognized lines carry no bounding boxes.
    """

    def __init__(self, api_key: str | None = None, model: str = "gemini-2.0-flash", client=None):
        """Initialize Gemini provider.

        Args:
            api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
            model: Model name to use.
            client: Preconfigured genai client, mainly for tests.

        Raises:
            AuthenticationError: If no API key is provided or found.
        """
        self.model = model
        if client is not None:
            self.api_key = api_key
            self.client = client
            return

        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        if not self.api_key:
            raise AuthenticationError(
                "No API key provided. Set GEMINI_API_KEY environment variable "
                "or pass api_key parameter."
            )
        self.client = genai.Client(api_key=self.api_key)

    def recognize(self, image: ImageInput) -> OcrResult:
        """Transcribe a wine list using Gemini Vision.

        Raises:
            ImageError: If image cannot be loaded or transcribed
            RateLimitError: If API rate limit is exceeded
            AuthenticationError: If API key is invalid
        """
        pil_image = self._load_image(image)

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=[pil_image, TRANSCRIPTION_PROMPT],
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=_Transcription,
                ),
            )
            transcription = _Transcription.model_validate_json(response.text)
        except genai.errors.ClientError as e:
            if "rate" in str(e).lower() or "quota" in str(e).lower():
                raise RateLimitError(f"API rate limit exceeded: {e}") from e
            if "auth" in str(e).lower() or "key" in str(e).lower():
                raise AuthenticationError(f"Invalid API key: {e}") from e
            raise
        except Exception as e:
            raise ImageError(f"Failed to transcribe wine list: {e}") from e

        lines = [line.strip() for line in transcription.lines if line.strip()]
        width, height = pil_image.size
        return OcrResult(
            full_text="\n".join(lines),
            lines=[OcrLine(text=line) for line in lines],
            image_width=width,
            image_height=height,
        )

    def get_recognition_metadata(self) -> dict[str, str]:
        return {"provider": "gemini", "model": self.model}
