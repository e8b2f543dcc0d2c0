"""Reference wine dataset for wine-lens."""

from wine_lens.reference.cache import CACHE_VERSION
from wine_lens.reference.loader import read_ratings, read_wines
from wine_lens.reference.store import ReferenceWineStore

__all__ = ["CACHE_VERSION", "ReferenceWineStore", "read_ratings", "read_wines"]
