"""Shared test fixtures."""

from pathlib import Path

import pytest

from listings_mcp.config import ListingsConfig
from listings_mcp.engine.handler import ListingsEngine
from listings_mcp.models import Listing

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def fixture_path(name: str) -> Path:
    """Return the path of a test fixture file."""
    return FIXTURES_DIR / name


def make_listing(listing_id: str = "1", **fields) -> Listing:
    """Build a Listing with only the given fields present."""
    return Listing(id=listing_id, **fields)


@pytest.fixture
def config(tmp_path) -> ListingsConfig:
    return ListingsConfig(
        data_path=str(fixture_path("sample_listings.csv")),
        export_dir=str(tmp_path / "exports"),
    )


@pytest.fixture
def engine(config) -> ListingsEngine:
    return ListingsEngine.from_csv(config.data_path, config=config)
