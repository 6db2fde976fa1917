"""Aggregate statistics over a set of listings."""

import statistics
from collections.abc import Sequence

from listings_mcp.models import Listing, RoomType, Statistics

_ROOM_TYPES = tuple(room_type.value for room_type in RoomType)

# Statistics field -> Listing field, averaged over listings where it is present.
_AVERAGED_FIELDS: dict[str, str] = {
    "average_price": "price",
    "average_reviews": "number_of_reviews",
    "average_reviews_ltm": "number_of_reviews_ltm",
    "average_minimum_nights": "minimum_nights",
    "average_availability": "availability_365",
    "average_reviews_per_month": "reviews_per_month",
    "average_host_listings_count": "calculated_host_listings_count",
}


def present_values(listings: Sequence[Listing], field: str) -> list[float]:
    """Values of a field across listings, skipping absent ones."""
    values = (getattr(listing, field) for listing in listings)
    return [float(value) for value in values if value is not None]


def mean_or_zero(values: Sequence[float]) -> float:
    return statistics.fmean(values) if values else 0.0


def median_or_zero(values: Sequence[float]) -> float:
    """Median of the values; an even count averages the two central values."""
    return float(statistics.median(values)) if values else 0.0


def average_price_per_room_type(listings: Sequence[Listing]) -> dict[str, float]:
    """Mean price per known room type.

    Listings with an unknown room type or no price are ignored, and room
    types with no priced listings are left out.
    """
    prices: dict[str, list[float]] = {room_type: [] for room_type in _ROOM_TYPES}
    for listing in listings:
        if listing.room_type in prices and listing.price is not None:
            prices[listing.room_type].append(listing.price)
    return {
        room_type: statistics.fmean(values)
        for room_type, values in prices.items()
        if values
    }


def compute_statistics(listings: Sequence[Listing]) -> Statistics:
    """Compute the full Statistics for the given listings.

    An empty input yields zeros everywhere and an empty room type map.
    """
    if not listings:
        return Statistics()

    averages = {
        stat_name: mean_or_zero(present_values(listings, field))
        for stat_name, field in _AVERAGED_FIELDS.items()
    }
    prices = sorted(present_values(listings, "price"))

    return Statistics(
        count=len(listings),
        average_price_per_room_type=average_price_per_room_type(listings),
        median_price=median_or_zero(prices),
        min_price=prices[0] if prices else 0.0,
        max_price=prices[-1] if prices else 0.0,
        **averages,
    )
