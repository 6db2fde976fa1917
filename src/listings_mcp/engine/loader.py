"""Load listings from a header-led CSV file."""

import csv
import logging
import math
import re
from collections.abc import Mapping
from pathlib import Path

from listings_mcp.engine.errors import DataLoadFailed
from listings_mcp.models import Listing

logger = logging.getLogger(__name__)

_PRICE_NOISE = re.compile(r"[$,\s]")

_TEXT_FIELDS = (
    "host_id",
    "host_name",
    "neighbourhood_group",
    "neighbourhood",
    "room_type",
    "last_review",
    "license",
)
_FLOAT_FIELDS = ("latitude", "longitude", "reviews_per_month")
_INT_FIELDS = (
    "minimum_nights",
    "number_of_reviews",
    "calculated_host_listings_count",
    "availability_365",
    "number_of_reviews_ltm",
)


def parse_text(raw: str | None) -> str | None:
    if raw is None:
        return None
    text = raw.strip()
    return text or None


def parse_float(raw: str | None) -> float | None:
    """Parse a decimal cell, returning None for blank or non-numeric values."""
    text = parse_text(raw)
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_int(raw: str | None) -> int | None:
    """Parse an integer cell. Integral decimals such as "2.0" are accepted."""
    value = parse_float(raw)
    if value is None or not value.is_integer():
        return None
    return int(value)


def parse_price(raw: str | None) -> float | None:
    """Parse a price cell such as "$1,250.00"."""
    if raw is None:
        return None
    return parse_float(_PRICE_NOISE.sub("", raw))


def parse_listing_row(row: Mapping[str, str | None]) -> Listing | None:
    """Convert one CSV row into a Listing.

    Returns None when the row has no id. Any other unparsable cell becomes
    an absent field.
    """
    listing_id = parse_text(row.get("id"))
    if listing_id is None:
        return None

    values: dict[str, object] = {
        "id": listing_id,
        "name": parse_text(row.get("name")) or "",
        "price": parse_price(row.get("price")),
    }
    for field in _TEXT_FIELDS:
        values[field] = parse_text(row.get(field))
    for field in _FLOAT_FIELDS:
        values[field] = parse_float(row.get(field))
    for field in _INT_FIELDS:
        values[field] = parse_int(row.get(field))
    return Listing(**values)


def load_listings(path: str | Path) -> list[Listing]:
    """Read every listing from a CSV file whose first line names the columns.

    Raises:
        DataLoadFailed: the file is missing, unreadable, not valid CSV, empty,
            or its header has no ``id`` column.
    """
    source = Path(path)
    listings: list[Listing] = []
    skipped = 0
    try:
        with source.open(encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None:
                raise DataLoadFailed(f"No header row in listings source: {source}")
            reader.fieldnames = [name.strip() for name in reader.fieldnames]
            if "id" not in reader.fieldnames:
                raise DataLoadFailed(f"Listings source has no 'id' column: {source}")

            for row in reader:
                listing = parse_listing_row(row)
                if listing is None:
                    skipped += 1
                    continue
                listings.append(listing)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        logger.error("Failed to load listings from %s: %s", source, exc)
        raise DataLoadFailed(f"Failed to load listings from {source}: {exc}") from exc

    if skipped:
        logger.warning("Skipped %d rows without an id in %s", skipped, source)
    logger.info("Loaded %d listings from %s", len(listings), source)
    return listings
