"""Filtering logic for listings."""

from collections.abc import Iterable

from listings_mcp.models import FilterCriteria, Listing

# (listing field, lower-bound criterion, upper-bound criterion)
RANGE_FILTERS: tuple[tuple[str, str, str], ...] = (
    ("price", "min_price", "max_price"),
    ("number_of_reviews", "min_reviews", "max_reviews"),
    ("number_of_reviews_ltm", "min_reviews_ltm", "max_reviews_ltm"),
    ("minimum_nights", "min_minimum_nights", "max_minimum_nights"),
    ("availability_365", "min_availability", "max_availability"),
)

# (listing field, substring criterion)
TEXT_FILTERS: tuple[tuple[str, str], ...] = (
    ("name", "name_contains"),
    ("neighbourhood", "neighbourhood_contains"),
    ("host_name", "host_name_contains"),
)


def within_bounds(
    value: float | None, low: float | None = None, high: float | None = None
) -> bool:
    """Inclusive range check. An absent value always passes."""
    if value is None:
        return True
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def contains_text(value: str | None, needle: str | None) -> bool:
    """Case-insensitive substring check. A missing needle always passes."""
    if not needle:
        return True
    return needle.lower() in (value or "").lower()


def matches(listing: Listing, criteria: FilterCriteria) -> bool:
    """Check if a listing satisfies every specified criterion."""
    for field, low_key, high_key in RANGE_FILTERS:
        if not within_bounds(
            getattr(listing, field), getattr(criteria, low_key), getattr(criteria, high_key)
        ):
            return False

    if criteria.room_type is not None and listing.room_type != criteria.room_type:
        return False

    for field, needle_key in TEXT_FILTERS:
        if not contains_text(getattr(listing, field), getattr(criteria, needle_key)):
            return False

    return True


def filter_listings(listings: Iterable[Listing], criteria: FilterCriteria) -> list[Listing]:
    """Return the listings matching the criteria, keeping their order."""
    return [listing for listing in listings if matches(listing, criteria)]
