"""Tests for runtime configuration and persisted preferences."""

from pathlib import Path

from wine_lens.config import DEFAULT_DATA_DIR, PreferencesStore, WineLensConfig
from wine_lens.datasets import DatasetDownloader, DatasetSize
from wine_lens.schema import WinePreferences, WineType


def test_from_env_defaults(monkeypatch):
    for name in (
        "WINE_LENS_DATA_DIR",
        "WINE_LENS_DATASET",
        "WINE_LENS_MAX_PRICE",
        "WINE_LENS_PROVIDER",
        "WINE_LENS_CACHE_NAME",
        "WINE_LENS_AUTO_LOAD",
    ):
        monkeypatch.delenv(name, raising=False)

    config = WineLensConfig.from_env()

    assert config.data_dir == DEFAULT_DATA_DIR
    assert config.dataset == "slim"
    assert config.max_price == 60
    assert config.provider == "gemini"
    assert config.auto_load
    assert config.cache_path == DEFAULT_DATA_DIR / "slim" / "xwines.bin"


def test_from_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("WINE_LENS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("WINE_LENS_DATASET", " FULL ")
    monkeypatch.setenv("WINE_LENS_MAX_PRICE", "120")
    monkeypatch.setenv("WINE_LENS_PROVIDER", "OCR")
    monkeypatch.setenv("WINE_LENS_AUTO_LOAD", "no")

    config = WineLensConfig.from_env()

    assert config.data_dir == tmp_path
    assert config.dataset == "full"
    assert config.max_price == 120
    assert config.provider == "ocr"
    assert not config.auto_load
    assert config.preferences_path == tmp_path / "preferences.json"
    assert config.default_preferences().max_price == 120


def test_cache_path_lives_in_dataset_dir(tmp_path):
    downloader = DatasetDownloader(tmp_path)

    for dataset in DatasetSize:
        config = WineLensConfig(data_dir=tmp_path, dataset=dataset.name.lower())
        assert config.cache_path == downloader.dataset_dir(dataset) / "xwines.bin"

    assert WineLensConfig(data_dir=tmp_path, dataset="slim").cache_path != WineLensConfig(
        data_dir=tmp_path, dataset="full"
    ).cache_path


def test_invalid_max_price_falls_back(monkeypatch):
    monkeypatch.setenv("WINE_LENS_MAX_PRICE", "cheap")
    assert WineLensConfig.from_env().max_price == 60

    monkeypatch.setenv("WINE_LENS_MAX_PRICE", "-5")
    assert WineLensConfig.from_env().max_price == 0


def test_preferences_round_trip(tmp_path):
    store = PreferencesStore(tmp_path / "nested" / "preferences.json")
    prefs = WinePreferences(max_price=45, ignored_grapes={"Merlot"}, allowed_types={WineType.ROSE})

    path = store.save(prefs)

    assert path.is_file()
    assert store.load() == prefs


def test_missing_preferences_use_defaults(tmp_path):
    store = PreferencesStore(tmp_path / "preferences.json", WinePreferences(max_price=80))

    assert store.load().max_price == 80


def test_corrupt_preferences_use_defaults(tmp_path, caplog):
    path = Path(tmp_path) / "preferences.json"
    path.write_text('{"max_price": "lots"}', encoding="utf-8")

    prefs = PreferencesStore(path).load()

    assert prefs == WinePreferences()
    assert "Ignoring unreadable preferences file" in caplog.text
