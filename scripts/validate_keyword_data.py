"""Validate pairing keyword data consistency.

Checks:
1. Every keyword is lowercase, trimmed, and unique after accent stripping.
2. Scores are integers in 0-10 keyed by known food categories.
3. Wine types are Red, White, Rosé or null.
4. Harmonize tags are unique and map to known food categories.
"""

from __future__ import annotations

import runpy
import sys
import unicodedata
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
DATA_ROOT = ROOT / "src" / "wine_lens" / "pairing" / "data"

FOOD_CATEGORIES = {
    "beef", "pork", "chicken", "pasta", "fish", "seafood",
    "lamb", "vegetarian", "cheese", "dessert", "sushi", "pizza",
}
WINE_TYPES = {"Red", "White", "Rosé", None}


def normalize_text(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value.lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fail(message: str) -> None:
    print(f"[keyword-check] ERROR: {message}")
    raise SystemExit(1)


def load_python_constant(path: Path, key: str) -> list[dict]:
    namespace = runpy.run_path(str(path))
    if key not in namespace or not isinstance(namespace[key], list):
        fail(f"Missing or invalid constant '{key}' in {path}")
    return namespace[key]


def validate_keywords(keywords: list[dict], label: str) -> None:
    seen: set[str] = set()
    for item in keywords:
        keyword = item.get("keyword")
        if not isinstance(keyword, str) or keyword != keyword.strip().lower() or not keyword:
            fail(f"{label}: keyword must be lowercase and trimmed: {keyword!r}")
        signature = normalize_text(keyword)
        if signature in seen:
            fail(f"{label}: duplicate keyword after normalization: {keyword}")
        seen.add(signature)

        if not item.get("description"):
            fail(f"{label}: missing description for {keyword}")
        if item.get("wine_type") not in WINE_TYPES:
            fail(f"{label}: invalid wine_type for {keyword}: {item.get('wine_type')!r}")

        scores = item.get("scores")
        if not isinstance(scores, dict) or not scores:
            fail(f"{label}: missing scores for {keyword}")
        for food, score in scores.items():
            if food not in FOOD_CATEGORIES:
                fail(f"{label}: unknown food category for {keyword}: {food}")
            if not isinstance(score, int) or not 0 <= score <= 10:
                fail(f"{label}: score out of range for {keyword}/{food}: {score!r}")


def validate_harmonize(rules: list[dict], label: str) -> None:
    seen: set[str] = set()
    for rule in rules:
        tag = rule.get("tag")
        if not isinstance(tag, str) or tag != tag.strip().lower():
            fail(f"{label}: tag must be lowercase and trimmed: {tag!r}")
        if tag in seen:
            fail(f"{label}: duplicate harmonize tag: {tag}")
        seen.add(tag)
        if rule.get("food") not in FOOD_CATEGORIES:
            fail(f"{label}: unknown food category for tag {tag}: {rule.get('food')!r}")


def iter_data_versions() -> list[Path]:
    versions = [
        path
        for path in sorted(DATA_ROOT.iterdir())
        if path.is_dir() and (path / "keywords.py").exists() and (path / "harmonize.py").exists()
    ]
    if not versions:
        fail(f"No keyword data versions found under {DATA_ROOT}")
    return versions


def main() -> int:
    for version_dir in iter_data_versions():
        validate_keywords(load_python_constant(version_dir / "keywords.py", "KEYWORDS"), version_dir.name)
        validate_harmonize(load_python_constant(version_dir / "harmonize.py", "HARMONIZE"), version_dir.name)

    print("[keyword-check] OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
