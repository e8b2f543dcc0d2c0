"""Google Vision OCR provider implementation."""

from __future__ import annotations

import json
import logging
import os
from io import BytesIO

from wine_lens.exceptions import AuthenticationError, ImageError, RateLimitError, WineLensError
from wine_lens.providers.base import BaseProvider, ImageInput
from wine_lens.schema import BoundingBox, OcrLine, OcrResult

# google.cloud.vision TextAnnotation.DetectedBreak.BreakType values.
_SPACE_BREAKS = {1, 2}  # SPACE, SURE_SPACE
_LINE_BREAKS = {3, 5}  # EOL_SURE_SPACE, LINE_BREAK
_HYPHEN_BREAK = 4


class GoogleVisionOCRProvider(BaseProvider):
    """Google Vision OCR provider.

    Uses document text detection so every recognized line keeps its bounding
    box, which the row merger needs for two-column menus.
    """

    def __init__(self, client=None):
        self.logger = logging.getLogger(__name__)
        self._last_layout = "document"

        if client is not None:
            self.client = client
            self._vision = None
            return

        try:
            from google.cloud import vision  # type: ignore
        except Exception as exc:
            raise WineLensError(
                "google-cloud-vision is required for OCR mode. "
                "Install the ocr extra and set GOOGLE_APPLICATION_CREDENTIALS."
            ) from exc

        self._vision = vision
        try:
            credentials_json = os.getenv("GOOGLE_APPLICATION_CREDENTIALS_JSON")
            if credentials_json:
                from google.oauth2 import service_account  # type: ignore

                info = json.loads(credentials_json)
                credentials = service_account.Credentials.from_service_account_info(info)
                self.client = vision.ImageAnnotatorClient(credentials=credentials)
            else:
                self.client = vision.ImageAnnotatorClient()
        except Exception as exc:
            raise AuthenticationError(
                "Failed to initialize Google Vision client. "
                "Check GOOGLE_APPLICATION_CREDENTIALS(_JSON) and GCP IAM permissions."
            ) from exc

    def _detect(self, content: bytes):
        try:
            if self._vision is not None:
                image = self._vision.Image(content=content)
            else:
                image = {"content": content}
            response = self.client.document_text_detection(image=image)
        except Exception as exc:
            message = str(exc).lower()
            if "quota" in message or "rate" in message:
                raise RateLimitError(f"OCR quota exceeded: {exc}") from exc
            if "credential" in message or "permission" in message or "auth" in message:
                raise AuthenticationError(f"OCR authentication failed: {exc}") from exc
            raise WineLensError(f"OCR request failed: {exc}") from exc

        error_obj = getattr(response, "error", None)
        error_message = getattr(error_obj, "message", "") if error_obj else ""
        if error_message:
            lowered = error_message.lower()
            if "quota" in lowered or "rate" in lowered:
                raise RateLimitError(f"OCR quota exceeded: {error_message}")
            if "permission" in lowered or "auth" in lowered:
                raise AuthenticationError(f"OCR authentication failed: {error_message}")
            raise WineLensError(f"OCR request failed: {error_message}")
        return response

    def recognize(self, image: ImageInput) -> OcrResult:
        pil_image = self._load_image(image)

        try:
            with BytesIO() as buffer:
                fmt = (pil_image.format or "PNG").upper()
                if fmt not in {"JPEG", "PNG", "WEBP"}:
                    fmt = "PNG"
                pil_image.save(buffer, format=fmt)
                content = buffer.getvalue()
            response = self._detect(content)
            width, height = pil_image.size

            document = getattr(response, "full_text_annotation", None)
            lines = _document_lines(document) if document is not None else []
            if lines:
                self._last_layout = "document"
                full_text = (getattr(document, "text", "") or "").strip() or "\n".join(line.text for line in lines)
                return OcrResult(full_text=full_text, lines=lines, image_width=width, image_height=height)

            # Plain text detection only: lines without boxes.
            self._last_layout = "text"
            annotations = getattr(response, "text_annotations", None) or []
            full_text = (getattr(annotations[0], "description", "") or "").strip() if annotations else ""
            return OcrResult(
                full_text=full_text,
                lines=[OcrLine(text=line.strip()) for line in full_text.splitlines() if line.strip()],
                image_width=width,
                image_height=height,
            )
        except (AuthenticationError, RateLimitError, ImageError, WineLensError):
            raise
        except Exception as exc:
            raise ImageError(f"Failed to recognize text with OCR: {exc}") from exc

    def get_recognition_metadata(self) -> dict[str, str]:
        return {"provider": "ocr", "layout": self._last_layout}


def _break_type(symbol) -> int:
    prop = getattr(symbol, "property", None)
    detected = getattr(prop, "detected_break", None) if prop else None
    if detected is None:
        return 0
    return int(getattr(detected, "type_", 0) or 0)


def _vertices(element) -> list[tuple[int, int]]:
    box = getattr(element, "bounding_box", None)
    points = getattr(box, "vertices", None) or []
    return [(int(getattr(point, "x", 0) or 0), int(getattr(point, "y", 0) or 0)) for point in points]


def _document_lines(document) -> list[OcrLine]:
    """Rebuild text lines from the page/block/paragraph/word/symbol tree."""
    lines: list[OcrLine] = []
    for page in getattr(document, "pages", None) or []:
        for block in getattr(page, "blocks", None) or []:
            for paragraph in getattr(block, "paragraphs", None) or []:
                text_parts: list[str] = []
                points: list[tuple[int, int]] = []
                for word in getattr(paragraph, "words", None) or []:
                    points.extend(_vertices(word))
                    for symbol in getattr(word, "symbols", None) or []:
                        text_parts.append(getattr(symbol, "text", "") or "")
                        kind = _break_type(symbol)
                        if kind in _SPACE_BREAKS:
                            text_parts.append(" ")
                        elif kind in _LINE_BREAKS or kind == _HYPHEN_BREAK:
                            if kind == _HYPHEN_BREAK:
                                text_parts.append("-")
                            _append_line(lines, text_parts, points)
                            text_parts, points = [], []
                _append_line(lines, text_parts, points)
    return lines


def _append_line(lines: list[OcrLine], text_parts: list[str], points: list[tuple[int, int]]) -> None:
    text = "".join(text_parts).strip()
    if not text:
        return
    box = None
    if points:
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        box = BoundingBox(left=min(xs), top=min(ys), right=max(xs), bottom=max(ys))
    lines.append(OcrLine(text=text, box=box))
