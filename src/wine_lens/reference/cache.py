"""Binary cache of a parsed reference dataset.

Layout (big-endian): int32 format version, int32 entry count, then per entry
the string fields as uint16 length + UTF-8 bytes, list fields as uint16 count
followed by their items, and optional floats as float64 with NaN for absent.
"""

from __future__ import annotations

import logging
import math
import os
import struct
import tempfile
from pathlib import Path

from wine_lens.exceptions import CacheError
from wine_lens.schema import ReferenceWineEntry

logger = logging.getLogger(__name__)

CACHE_VERSION = 3
MIN_CACHE_SIZE = 8

_INT = struct.Struct(">i")
_SHORT = struct.Struct(">H")
_DOUBLE = struct.Struct(">d")
_MAX_SHORT = 0xFFFF


class _Writer:
    def __init__(self) -> None:
        self.parts: list[bytes] = []

    def int(self, value: int) -> None:
        self.parts.append(_INT.pack(value))

    def count(self, value: int) -> None:
        if value > _MAX_SHORT:
            raise CacheError(f"List too long for cache: {value}")
        self.parts.append(_SHORT.pack(value))

    def string(self, value: str) -> None:
        data = value.encode("utf-8")
        self.count(len(data))
        self.parts.append(data)

    def optional_float(self, value: float | None) -> None:
        self.parts.append(_DOUBLE.pack(math.nan if value is None else value))

    def strings(self, values: list[str]) -> None:
        self.count(len(values))
        for value in values:
            self.string(value)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    def _unpack(self, fmt: struct.Struct):
        value = fmt.unpack_from(self.data, self.offset)[0]
        self.offset += fmt.size
        return value

    def int(self) -> int:
        return self._unpack(_INT)

    def count(self) -> int:
        return self._unpack(_SHORT)

    def string(self) -> str:
        length = self.count()
        end = self.offset + length
        if end > len(self.data):
            raise CacheError("Truncated string in cache")
        value = self.data[self.offset:end].decode("utf-8")
        self.offset = end
        return value

    def optional_float(self) -> float | None:
        value = self._unpack(_DOUBLE)
        return None if math.isnan(value) else value

    def strings(self) -> list[str]:
        return [self.string() for _ in range(self.count())]


def encode_entries(entries: list[ReferenceWineEntry]) -> bytes:
    writer = _Writer()
    writer.int(CACHE_VERSION)
    writer.int(len(entries))
    for entry in entries:
        writer.string(entry.wine_id)
        writer.string(entry.name)
        writer.string(entry.type)
        writer.strings(entry.grapes)
        writer.strings(entry.harmonize)
        writer.optional_float(entry.abv)
        writer.string(entry.body)
        writer.string(entry.acidity)
        writer.string(entry.country)
        writer.string(entry.region)
        writer.string(entry.winery)
        writer.optional_float(entry.average_rating)
        writer.count(len(entry.vintages))
        for year in entry.vintages:
            writer.int(year)
    return b"".join(writer.parts)


def decode_entries(data: bytes) -> list[ReferenceWineEntry]:
    reader = _Reader(data)
    try:
        version = reader.int()
        if version != CACHE_VERSION:
            raise CacheError(f"Cache version {version} does not match {CACHE_VERSION}")
        count = reader.int()
        if count < 0:
            raise CacheError(f"Invalid entry count: {count}")
        entries = []
        for _ in range(count):
            entries.append(
                ReferenceWineEntry(
                    wine_id=reader.string(),
                    name=reader.string(),
                    type=reader.string(),
                    grapes=reader.strings(),
                    harmonize=reader.strings(),
                    abv=reader.optional_float(),
                    body=reader.string(),
                    acidity=reader.string(),
                    country=reader.string(),
                    region=reader.string(),
                    winery=reader.string(),
                    average_rating=reader.optional_float(),
                    vintages=[reader.int() for _ in range(reader.count())],
                )
            )
    except (struct.error, UnicodeDecodeError) as e:
        raise CacheError(f"Corrupt cache: {e}") from e
    if reader.offset != len(data):
        raise CacheError("Unexpected trailing bytes in cache")
    return entries


def is_usable(path: str | Path) -> bool:
    path = Path(path)
    return path.is_file() and path.stat().st_size > MIN_CACHE_SIZE


def read_cache(path: str | Path) -> list[ReferenceWineEntry]:
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise CacheError(f"Failed to read cache {path}: {e}") from e
    return decode_entries(data)


def write_cache(entries: list[ReferenceWineEntry], path: str | Path) -> Path:
    """Write entries to path atomically through a temp file in the same directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = encode_entries(entries)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.replace(tmp_name, path)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.info("Wrote reference cache with %d wines to %s", len(entries), path)
    return path


def discard_cache(path: str | Path) -> None:
    try:
        Path(path).unlink(missing_ok=True)
    except OSError:
        logger.exception("Failed to delete reference cache %s", path)
