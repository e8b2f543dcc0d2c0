"""Coalesce line-based OCR output into individual wine listings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from wine_lens.pairing.knowledge import PairingKnowledgeBase, default_knowledge_base
from wine_lens.parsing.features import (
    LineKind,
    classify_line,
    has_price,
    has_vintage,
    is_price_line,
    looks_like_new_wine_start,
)
from wine_lens.parsing.prices import (
    BARE_TRAILING_NUMBER,
    CURRENCY_PRICE,
    GLASS_BOTTLE_PRICE,
    is_plausible_year,
    strip_trailing_price,
)

logger = logging.getLogger(__name__)

MIN_LINE_LENGTH = 3
MAX_ENTRY_LINES = 4


@dataclass
class WineEntry:
    """One wine listing reconstructed from consecutive lines."""

    lines: list[str]
    section_keyword: str | None = None
    text: str = field(init=False)
    display_line: str = field(init=False)
    price: str | None = field(init=False)

    def __post_init__(self) -> None:
        self.text = " ".join(self.lines)
        self.display_line = next((line for line in self.lines if not is_price_line(line)), self.lines[0])
        self.price = _entry_price(self.lines)


def _entry_price(lines: list[str]) -> str | None:
    for line in lines:
        match = CURRENCY_PRICE.search(line)
        if match:
            return match.group(0).strip()
    for line in lines:
        match = GLASS_BOTTLE_PRICE.search(line)
        if match:
            return match.group(0)
    for line in reversed(lines):
        match = BARE_TRAILING_NUMBER.search(line)
        if match and not is_plausible_year(int(match.group(1))):
            return match.group(1)
    return None


def should_split_before(current_lines: list[str], line: str) -> bool:
    """Whether line starts a new listing given the lines accumulated so far."""
    if not current_lines or not looks_like_new_wine_start(line):
        return False
    if any(has_price(existing) for existing in current_lines):
        return True
    if len(current_lines) >= 2 and any(has_vintage(existing) for existing in current_lines):
        return True
    return len(current_lines) >= MAX_ENTRY_LINES


class MenuParser:
    """Single-pass state machine over menu lines.

    Carries the active section keyword (set by headers and bare keyword
    labels) and the lines of the listing being built.
    """

    def __init__(self, knowledge_base: PairingKnowledgeBase | None = None):
        self.kb = knowledge_base or default_knowledge_base()

    def coalesce_entries(self, source: str | Iterable[str]) -> list[WineEntry]:
        lines = source.splitlines() if isinstance(source, str) else list(source)
        entries: list[WineEntry] = []
        current: list[str] = []
        section_keyword: str | None = None

        def flush() -> None:
            if current:
                entries.append(WineEntry(lines=list(current), section_keyword=section_keyword))
                current.clear()

        for raw in lines:
            line = raw.strip()
            if len(line) < MIN_LINE_LENGTH:
                flush()
                continue

            classification = classify_line(line, self.kb)
            if classification.kind is LineKind.HEADER:
                flush()
                section_keyword = classification.keyword
                continue
            if classification.kind is LineKind.BARE_KEYWORD and not current:
                section_keyword = classification.keyword
                continue

            if should_split_before(current, line):
                flush()
            current.append(line)

        flush()
        logger.debug("Coalesced %d lines into %d entries", len(lines), len(entries))
        return entries


def select_display_name(entry: WineEntry, kb: PairingKnowledgeBase) -> str:
    """Pick the line that best names the wine, without trailing price fragments."""
    chosen = None
    for line in entry.lines:
        if kb.find_keywords(line) and has_vintage(line):
            chosen = line
            break
    if chosen is None:
        chosen = next(
            (line for line in entry.lines if has_vintage(line) and len(line.split()) > 1 and not is_price_line(line)),
            None,
        )
    if chosen is None:
        chosen = next((line for line in entry.lines if len(line.split()) > 1 and kb.find_keywords(line)), None)
    if chosen is None:
        chosen = entry.display_line
    return strip_trailing_price(chosen)
