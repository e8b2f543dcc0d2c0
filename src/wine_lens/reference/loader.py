"""CSV readers for the reference wine dataset."""

from __future__ import annotations

import csv
import io
import logging
import re
from typing import IO, Iterator

from wine_lens.exceptions import DatasetError
from wine_lens.schema import ReferenceWineEntry

logger = logging.getLogger(__name__)

# Column positions in the wines table.
COL_ID = 0
COL_NAME = 1
COL_TYPE = 2
COL_GRAPES = 4
COL_HARMONIZE = 5
COL_ABV = 6
COL_BODY = 7
COL_ACIDITY = 8
COL_COUNTRY = 10
COL_REGION = 12
COL_WINERY = 14
COL_VINTAGES = 16
MIN_WINE_FIELDS = 15

# Column positions in the ratings table (RatingID,UserID,WineID,Vintage,Rating,Date).
COL_RATING_WINE_ID = 2
COL_RATING_VALUE = 4

VINTAGE_MIN = 1900
VINTAGE_MAX = 2100

_LIST_ITEM = re.compile(r"'([^']*)'|\"([^\"]*)\"|([^,\s][^,]*)")


def _text_stream(stream: IO) -> IO[str]:
    if isinstance(stream, io.TextIOBase):
        return stream
    return io.TextIOWrapper(stream, encoding="utf-8", errors="replace", newline="")


def _rows(stream: IO) -> Iterator[list[str]]:
    reader = csv.reader(_text_stream(stream))
    try:
        next(reader, None)  # header
        yield from reader
    except (OSError, csv.Error, UnicodeDecodeError) as e:
        raise DatasetError(f"Failed to read dataset: {e}") from e


def parse_list_field(raw: str) -> list[str]:
    """Decode list-like text such as "['Merlot', 'Cabernet Sauvignon']"."""
    text = raw.strip()
    if not text:
        return []
    if text.startswith("[") and text.endswith("]"):
        text = text[1:-1]
    items = [single or double or bare for single, double, bare in _LIST_ITEM.findall(text)]
    return [item.strip() for item in items if item.strip()]


def parse_vintages(raw: str) -> list[int]:
    years: list[int] = []
    for item in parse_list_field(raw):
        try:
            year = int(item)
        except ValueError:
            continue
        if VINTAGE_MIN <= year <= VINTAGE_MAX:
            years.append(year)
    return years


def _parse_float(raw: str) -> float | None:
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None


def read_ratings(stream: IO) -> dict[str, float]:
    """Average rating per wine id, truncated to one decimal.

    Rows are aggregated into running (sum, count) pairs as they stream past.
    """
    totals: dict[str, list[float]] = {}
    skipped = 0
    for row in _rows(stream):
        if len(row) <= COL_RATING_VALUE:
            skipped += 1
            continue
        rating = _parse_float(row[COL_RATING_VALUE])
        if rating is None:
            skipped += 1
            continue
        bucket = totals.setdefault(row[COL_RATING_WINE_ID].strip(), [0.0, 0])
        bucket[0] += rating
        bucket[1] += 1

    if skipped:
        logger.warning("Skipped %d malformed rating rows", skipped)
    return {wine_id: int(total / count * 10) / 10 for wine_id, (total, count) in totals.items()}


def parse_wine_row(row: list[str], ratings: dict[str, float] | None = None) -> ReferenceWineEntry | None:
    if len(row) < MIN_WINE_FIELDS:
        return None
    wine_id = row[COL_ID].strip()
    name = row[COL_NAME].strip()
    if not wine_id or not name:
        return None
    return ReferenceWineEntry(
        wine_id=wine_id,
        name=name,
        type=row[COL_TYPE].strip(),
        grapes=parse_list_field(row[COL_GRAPES]),
        harmonize=parse_list_field(row[COL_HARMONIZE]),
        abv=_parse_float(row[COL_ABV]),
        body=row[COL_BODY].strip(),
        acidity=row[COL_ACIDITY].strip(),
        country=row[COL_COUNTRY].strip(),
        region=row[COL_REGION].strip(),
        winery=row[COL_WINERY].strip(),
        average_rating=(ratings or {}).get(wine_id),
        vintages=parse_vintages(row[COL_VINTAGES]) if len(row) > COL_VINTAGES else [],
    )


def read_wines(stream: IO, ratings: dict[str, float] | None = None) -> list[ReferenceWineEntry]:
    """Parse the wines table; rows with too few fields are skipped."""
    entries: list[ReferenceWineEntry] = []
    skipped = 0
    for row in _rows(stream):
        entry = parse_wine_row(row, ratings)
        if entry is None:
            skipped += 1
            continue
        entries.append(entry)

    if skipped:
        logger.warning("Skipped %d malformed wine rows", skipped)
    return entries


def attach_ratings(entries: list[ReferenceWineEntry], ratings: dict[str, float]) -> list[ReferenceWineEntry]:
    return [
        entry.model_copy(update={"average_rating": ratings[entry.wine_id]}) if entry.wine_id in ratings else entry
        for entry in entries
    ]
