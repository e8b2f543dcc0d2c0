"""Command-line interface for wine-lens."""

import argparse
import logging
import sys
from pathlib import Path

from wine_lens import __version__
from wine_lens.config import WineLensConfig
from wine_lens.core import recognize
from wine_lens.exceptions import WineLensError
from wine_lens.parsing.layout import parser_input
from wine_lens.recommendation import RecommendationEngine
from wine_lens.reference import ReferenceWineStore
from wine_lens.schema import FoodCategory, WinePreferences, WineRecommendation, WineType


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wine-lens",
        description="Recommend a wine from a wine list for the dish you ordered",
    )
    parser.add_argument("image", nargs="?", help="Path to a wine list photo")
    parser.add_argument("--text", help="Wine list text instead of an image")
    parser.add_argument("--text-file", help="File containing wine list text")
    parser.add_argument(
        "--food",
        required=True,
        help=f"Food category ({', '.join(item.value for item in FoodCategory)})",
    )
    parser.add_argument("--max-price", type=int, help="Maximum bottle price (default: WINE_LENS_MAX_PRICE or 60)")
    parser.add_argument(
        "--ignore-grape",
        action="append",
        default=[],
        help="Grape to leave out of recommendations (repeatable)",
    )
    parser.add_argument(
        "--type",
        dest="types",
        action="append",
        default=[],
        help="Allowed wine type: red, white or rose (repeatable, default: all)",
    )
    parser.add_argument("--wines", help="Reference wines CSV")
    parser.add_argument("--ratings", help="Reference ratings CSV")
    parser.add_argument("--cache", help="Binary cache path for the reference dataset")
    parser.add_argument("--provider", help="Text recognition provider (gemini or ocr)")
    parser.add_argument("--api-key", help="Gemini API key (default: GEMINI_API_KEY env var)")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")
    parser.add_argument("--version", action="version", version=f"wine-lens {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = WineLensConfig.from_env()
    try:
        food = FoodCategory.parse(args.food)
        allowed_types = {WineType.parse(item) for item in args.types} or set(WineType)
    except ValueError as e:
        parser.error(str(e))
    preferences = WinePreferences(
        max_price=args.max_price if args.max_price is not None else config.max_price,
        ignored_grapes=set(args.ignore_grape),
        allowed_types=allowed_types,
    )

    try:
        store = None
        if args.wines:
            store = ReferenceWineStore.load(args.wines, args.ratings, args.cache)

        if args.text is not None:
            text = raw_text = args.text
        elif args.text_file:
            text = raw_text = Path(args.text_file).read_text(encoding="utf-8")
        elif args.image:
            ocr_result, _ = recognize(args.image, api_key=args.api_key, provider=args.provider or config.provider)
            text, raw_text = parser_input(ocr_result), ocr_result.full_text
        else:
            parser.error("an image path, --text or --text-file is required")

        engine = RecommendationEngine(store=store)
        result = engine.build_recommendation(engine.recommend_wines(text, food, preferences), food, raw_text)
    except (WineLensError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2, exclude_none=True))
    else:
        _print_formatted(result, food)

    return 0


def _print_formatted(result: WineRecommendation, food: FoodCategory) -> None:
    """Print result in human-readable format."""
    print()
    print(f"  wine-lens  ·  {food.display_name}")
    print()

    fields = [
        ("Wine", result.wine_name),
        ("Price", result.price),
        ("Score", f"{result.score}/10" if result.found else None),
        ("Why", result.reasoning),
        ("Vintage", result.vintage_note),
        ("Rating", _format_rating(result.reference.average_rating if result.reference else None)),
    ]

    for label, value in fields:
        display = value if value else "-"
        print(f"  {label + ':':<10} {display}")

    if result.alternatives:
        print()
        print("  Alternatives:")
        for alt in result.alternatives:
            price = f" ({alt.price})" if alt.price else ""
            print(f"    {alt.score}/10  {alt.wine_name}{price}")

    print()


def _format_rating(rating: float | None) -> str | None:
    if rating is None:
        return None
    return f"{rating:.1f} / 5"


if __name__ == "__main__":
    sys.exit(main())
