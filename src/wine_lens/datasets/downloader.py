"""Fetch and unpack the X-Wines reference dataset archives."""

from __future__ import annotations

import logging
import shutil
import zipfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable
from urllib import error, request

from wine_lens.exceptions import DownloadError

logger = logging.getLogger(__name__)

WINES_CACHE = "wines.csv"
RATINGS_CACHE = "ratings.csv"
CHUNK_SIZE = 32 * 1024
TIMEOUT_SEC = 300.0


@dataclass(frozen=True)
class _DatasetSpec:
    label: str
    description: str
    url: str
    wines_filename: str
    ratings_filename: str
    required_space_mb: int
    min_wines_bytes: int
    min_ratings_bytes: int


class DatasetSize(Enum):
    SLIM = _DatasetSpec(
        label="Slim (1K wines)",
        description="1,007 wines with 150K ratings (~3 MB download)",
        url="https://repo.buildanddeploy.com/wines/XWines_Slim_1K_wines_150K_ratings.zip",
        wines_filename="XWines_Slim_1K_wines.csv",
        ratings_filename="XWines_Slim_150K_ratings.csv",
        required_space_mb=300,
        min_wines_bytes=50_000,
        min_ratings_bytes=100_000,
    )
    FULL = _DatasetSpec(
        label="Full (100K wines)",
        description="100K wines with 21M ratings (~300 MB download)",
        url="https://repo.buildanddeploy.com/wines/All-XWines_Full_100K_wines_21M_ratings.zip",
        wines_filename="XWines_Full_100K_wines.csv",
        ratings_filename="XWines_Full_21M_ratings.csv",
        required_space_mb=1024,
        min_wines_bytes=1_000_000,
        min_ratings_bytes=10_000_000,
    )

    @property
    def spec(self) -> _DatasetSpec:
        return self.value

    @classmethod
    def parse(cls, raw: str) -> "DatasetSize":
        try:
            return cls[raw.strip().upper()]
        except KeyError as e:
            raise ValueError(f"Unknown dataset: {raw}") from e


class DatasetDownloader:
    """Downloads a dataset archive into ``cache_dir/<dataset>/`` as wines.csv and ratings.csv.

    No retries: a failed download leaves any previously cached copy in place,
    removes partial files and raises DownloadError for the caller to handle.
    """

    def __init__(self, cache_dir: str | Path):
        self.cache_dir = Path(cache_dir)

    def dataset_dir(self, dataset: DatasetSize) -> Path:
        return self.cache_dir / dataset.name.lower()

    def wines_file(self, dataset: DatasetSize) -> Path:
        return self.dataset_dir(dataset) / WINES_CACHE

    def ratings_file(self, dataset: DatasetSize) -> Path:
        return self.dataset_dir(dataset) / RATINGS_CACHE

    def is_cached(self, dataset: DatasetSize) -> bool:
        wines = self.wines_file(dataset)
        ratings = self.ratings_file(dataset)
        return (
            wines.is_file()
            and ratings.is_file()
            and wines.stat().st_size >= dataset.spec.min_wines_bytes
            and ratings.stat().st_size >= dataset.spec.min_ratings_bytes
        )

    def cached_files(self, dataset: DatasetSize) -> tuple[Path, Path] | None:
        if not self.is_cached(dataset):
            return None
        return self.wines_file(dataset), self.ratings_file(dataset)

    def available_space_mb(self) -> int:
        target = self.cache_dir if self.cache_dir.exists() else self.cache_dir.parent
        return shutil.disk_usage(target).free // (1024 * 1024)

    def has_enough_space(self, dataset: DatasetSize) -> bool:
        return self.available_space_mb() >= dataset.spec.required_space_mb

    def download(
        self,
        dataset: DatasetSize,
        on_progress: Callable[[int], None] | None = None,
    ) -> tuple[Path, Path]:
        dest = self.dataset_dir(dataset)
        staging = self.cache_dir / f".{dest.name}.partial"
        shutil.rmtree(staging, ignore_errors=True)
        try:
            staging.mkdir(parents=True)
            archive = staging / "download.zip"
            try:
                self._download_archive(dataset.spec.url, archive, on_progress)
                self._extract_archive(archive, dataset, staging)
            finally:
                archive.unlink(missing_ok=True)
            self._verify(dataset, staging)
            # Replaces the whole directory so a stale binary cache goes with the old CSVs.
            shutil.rmtree(dest, ignore_errors=True)
            staging.replace(dest)
        except (OSError, zipfile.BadZipFile) as e:
            raise DownloadError(f"Failed to download {dataset.spec.label}: {e}") from e
        finally:
            shutil.rmtree(staging, ignore_errors=True)

        logger.info("Downloaded %s into %s", dataset.spec.label, dest)
        return self.wines_file(dataset), self.ratings_file(dataset)

    def clear_cache(self, dataset: DatasetSize) -> None:
        shutil.rmtree(self.dataset_dir(dataset), ignore_errors=True)

    def clear_all(self) -> None:
        shutil.rmtree(self.cache_dir, ignore_errors=True)

    def _download_archive(self, url: str, destination: Path, on_progress: Callable[[int], None] | None) -> None:
        tmp = destination.with_name(destination.name + ".tmp")
        try:
            with request.urlopen(url, timeout=TIMEOUT_SEC) as response:
                status = getattr(response, "status", 200)
                if status != 200:
                    raise DownloadError(f"HTTP {status} while downloading {url}")
                total = int(response.headers.get("Content-Length") or 0)
                downloaded = 0
                last_percent = -1
                with open(tmp, "wb") as out:
                    while True:
                        chunk = response.read(CHUNK_SIZE)
                        if not chunk:
                            break
                        out.write(chunk)
                        downloaded += len(chunk)
                        if on_progress and total > 0:
                            percent = downloaded * 100 // total
                            if percent != last_percent:
                                last_percent = percent
                                on_progress(percent)
            tmp.replace(destination)
        except (error.URLError, TimeoutError, ValueError) as e:
            raise DownloadError(f"Failed to download {url}: {e}") from e
        finally:
            tmp.unlink(missing_ok=True)

    def _extract_archive(self, archive: Path, dataset: DatasetSize, directory: Path) -> None:
        wines = directory / WINES_CACHE
        ratings = directory / RATINGS_CACHE
        with zipfile.ZipFile(archive) as zf:
            for info in zf.infolist():
                if info.is_dir():
                    continue
                name = info.filename.lower()
                if dataset.spec.wines_filename.lower() in name or name.endswith("wines.csv"):
                    target = wines
                elif dataset.spec.ratings_filename.lower() in name or name.endswith("ratings.csv"):
                    target = ratings
                else:
                    continue
                with zf.open(info) as src, open(target, "wb") as out:
                    shutil.copyfileobj(src, out, CHUNK_SIZE)

    def _verify(self, dataset: DatasetSize, directory: Path) -> None:
        wines = directory / WINES_CACHE
        ratings = directory / RATINGS_CACHE
        if not wines.is_file() or wines.stat().st_size < dataset.spec.min_wines_bytes:
            raise DownloadError("Wines CSV missing or too small after extraction")
        if not ratings.is_file() or ratings.stat().st_size < dataset.spec.min_ratings_bytes:
            raise DownloadError("Ratings CSV missing or too small after extraction")
