"""wine-lens: Pick a wine from a photographed wine list for the dish you ordered."""

from wine_lens.core import analyze
from wine_lens.recommendation import build_recommendation, recommend_wines
from wine_lens.reference import ReferenceWineStore
from wine_lens.schema import FoodCategory, ScoredWine, WineAlternative, WinePreferences, WineRecommendation, WineType

__version__ = "0.1.0"

__all__ = [
    "analyze",
    "build_recommendation",
    "recommend_wines",
    "FoodCategory",
    "ReferenceWineStore",
    "ScoredWine",
    "WineAlternative",
    "WinePreferences",
    "WineRecommendation",
    "WineType",
    "__version__",
]
