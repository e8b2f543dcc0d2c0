from pathlib import Path

import pytest

from wine_lens.reference import ReferenceWineStore

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def wines_csv() -> Path:
    return FIXTURES / "wines.csv"


@pytest.fixture
def ratings_csv() -> Path:
    return FIXTURES / "ratings.csv"


@pytest.fixture
def store(wines_csv, ratings_csv) -> ReferenceWineStore:
    return ReferenceWineStore.load(wines_csv, ratings_csv)
