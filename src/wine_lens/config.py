"""Runtime configuration and persisted user preferences."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from wine_lens.schema import DEFAULT_MAX_PRICE, WinePreferences

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path.home() / ".wine-lens"
DEFAULT_CACHE_NAME = "xwines.bin"


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class WineLensConfig:
    data_dir: Path = DEFAULT_DATA_DIR
    dataset: str = "slim"
    max_price: int = DEFAULT_MAX_PRICE
    provider: str = "gemini"
    cache_name: str = DEFAULT_CACHE_NAME
    auto_load: bool = True

    @classmethod
    def from_env(cls) -> "WineLensConfig":
        data_dir = os.getenv("WINE_LENS_DATA_DIR")
        return cls(
            data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
            dataset=(os.getenv("WINE_LENS_DATASET", "slim").strip().lower() or "slim"),
            max_price=max(0, _safe_int(os.getenv("WINE_LENS_MAX_PRICE"), DEFAULT_MAX_PRICE)),
            provider=(os.getenv("WINE_LENS_PROVIDER", "gemini").strip().lower() or "gemini"),
            cache_name=os.getenv("WINE_LENS_CACHE_NAME") or DEFAULT_CACHE_NAME,
            auto_load=_parse_bool(os.getenv("WINE_LENS_AUTO_LOAD"), True),
        )

    @property
    def cache_path(self) -> Path:
        """Binary cache beside the dataset's CSVs, so each dataset keeps its own."""
        return self.data_dir / self.dataset / self.cache_name

    @property
    def preferences_path(self) -> Path:
        return self.data_dir / "preferences.json"

    def default_preferences(self) -> WinePreferences:
        return WinePreferences(max_price=self.max_price)


class PreferencesStore:
    """Persists WinePreferences as a small JSON file."""

    def __init__(self, path: str | Path, defaults: WinePreferences | None = None):
        self.path = Path(path)
        self.defaults = defaults or WinePreferences()

    def load(self) -> WinePreferences:
        if not self.path.is_file():
            return self.defaults.model_copy()
        try:
            return WinePreferences.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            return self.defaults.model_copy()

    def save(self, preferences: WinePreferences) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(preferences.model_dump_json(indent=2), encoding="utf-8")
        return self.path
