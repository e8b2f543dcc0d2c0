"""Parse the reference dataset CSVs and write the binary cache ahead of time.

Usage:
  PYTHONPATH=src python scripts/build_reference_cache.py \
    --wines data/XWines_Slim_1K_wines.csv \
    --ratings data/XWines_Slim_150K_ratings.csv \
    --output ~/.wine-lens/slim/xwines.bin
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wine_lens.config import WineLensConfig
from wine_lens.exceptions import WineLensError
from wine_lens.reference import ReferenceWineStore


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the reference dataset binary cache")
    parser.add_argument("--wines", required=True, help="Wines CSV path")
    parser.add_argument("--ratings", help="Ratings CSV path")
    parser.add_argument(
        "--output",
        help="Cache path (default: WINE_LENS_DATA_DIR/<dataset>/WINE_LENS_CACHE_NAME)",
    )
    return parser.parse_args()


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args()
    output = Path(args.output).expanduser() if args.output else WineLensConfig.from_env().cache_path

    try:
        with open(args.wines, "rb") as wines:
            if args.ratings:
                with open(args.ratings, "rb") as ratings:
                    store = ReferenceWineStore.from_streams_parallel(wines, ratings)
            else:
                store = ReferenceWineStore.from_streams(wines)
        store.write_cache(output)
    except (WineLensError, OSError) as e:
        print(f"[reference-cache] ERROR: {e}")
        return 1

    print(f"[reference-cache] wrote {store.wine_count} wines to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
