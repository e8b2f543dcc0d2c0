"""Reference dataset downloads for wine-lens."""

from wine_lens.datasets.downloader import DatasetDownloader, DatasetSize

__all__ = ["DatasetDownloader", "DatasetSize"]
