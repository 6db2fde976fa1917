"""Listings engine package."""

from listings_mcp.engine.criteria import build_criteria, describe_criteria
from listings_mcp.engine.errors import (
    DataLoadFailed,
    ExportFailed,
    InvalidInput,
    ListingsError,
    UnsupportedFormat,
)
from listings_mcp.engine.handler import ListingsEngine, get_engine
from listings_mcp.engine.loader import load_listings

__all__ = [
    "build_criteria",
    "describe_criteria",
    "DataLoadFailed",
    "ExportFailed",
    "InvalidInput",
    "ListingsError",
    "UnsupportedFormat",
    "ListingsEngine",
    "get_engine",
    "load_listings",
]
