"""Base provider interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from PIL import Image

from wine_lens.exceptions import ImageError
from wine_lens.schema import OcrResult

ImageInput = str | Path | Image.Image


class BaseProvider(ABC):
    """Abstract base class for text-recognition providers."""

    @abstractmethod
    def recognize(self, image: ImageInput) -> OcrResult:
        """Recognize the text of a wine list photo.

        Args:
            image: Image input (file path, Path object, or PIL Image)

        Returns:
            OcrResult with the full text and one entry per recognized line
        """
        pass

    def get_recognition_metadata(self) -> dict[str, str]:
        """Return provider-specific recognition metadata."""
        return {}

    @staticmethod
    def _load_image(image: ImageInput) -> Image.Image:
        if isinstance(image, Image.Image):
            return image

        path = Path(image) if isinstance(image, str) else image
        if not path.exists():
            raise ImageError(f"Image file not found: {path}")

        try:
            return Image.open(path)
        except Exception as e:
            raise ImageError(f"Failed to open image: {e}") from e
