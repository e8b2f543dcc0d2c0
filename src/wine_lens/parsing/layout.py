"""Spatial merge of OCR lines that share a visual row."""

from __future__ import annotations

from wine_lens.schema import BoundingBox, OcrLine, OcrResult

ROW_OVERLAP_THRESHOLD = 0.5


def _vertical_overlap(a: BoundingBox, b: BoundingBox) -> float:
    overlap = min(a.bottom, b.bottom) - max(a.top, b.top)
    shorter = min(a.height, b.height)
    if shorter <= 0:
        return 0.0
    return max(0, overlap) / shorter


def merge_row_lines(ocr_result: OcrResult) -> list[str]:
    """Join lines whose boxes overlap vertically into left-to-right rows.

    A name on the left and its price on the right of a two-column menu are
    recognized as separate lines; merging puts them back on one row. When any
    line lacks a bounding box the recognized order is kept as is.
    """
    lines = [line for line in ocr_result.lines if line.text.strip()]
    if not lines or any(line.box is None for line in lines):
        return [line.text.strip() for line in lines]

    rows: list[list[OcrLine]] = []
    for line in sorted(lines, key=lambda item: (item.box.top, item.box.left)):
        for row in rows:
            if _vertical_overlap(row[0].box, line.box) > ROW_OVERLAP_THRESHOLD:
                row.append(line)
                break
        else:
            rows.append([line])

    return [" ".join(item.text.strip() for item in sorted(row, key=lambda item: item.box.left)) for row in rows]


def parser_input(ocr_result: OcrResult) -> str:
    """Text to feed the menu parser, preferring row-merged lines."""
    merged = merge_row_lines(ocr_result)
    if merged:
        return "\n".join(merged)
    return ocr_result.full_text
