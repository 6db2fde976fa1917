"""Build filter criteria from loose input and describe applied criteria."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from listings_mcp.engine.errors import InvalidInput
from listings_mcp.models import FilterCriteria

FILTER_LABELS: dict[str, str] = {
    "min_price": "Minimum Price",
    "max_price": "Maximum Price",
    "min_reviews": "Minimum Reviews",
    "max_reviews": "Maximum Reviews",
    "min_reviews_ltm": "Minimum Reviews (Last 12 Months)",
    "max_reviews_ltm": "Maximum Reviews (Last 12 Months)",
    "room_type": "Room Type",
    "name_contains": "Name",
    "neighbourhood_contains": "Neighbourhood",
    "min_minimum_nights": "Minimum Nights",
    "max_minimum_nights": "Maximum Nights",
    "min_availability": "Minimum Availability",
    "max_availability": "Maximum Availability",
    "host_name_contains": "Host Name",
}

NO_FILTERS_TEXT = "No filters were applied. All listings are included."


def build_criteria(raw: Mapping[str, Any] | None = None, **kwargs: Any) -> FilterCriteria:
    """Turn user-supplied values into FilterCriteria.

    Accepts numbers or numeric text for bounds. None and blank strings are
    treated as omitted.

    Raises:
        InvalidInput: a bound is not numeric, or a key is not a known criterion.
    """
    data: dict[str, Any] = {}
    for key, value in {**(raw or {}), **kwargs}.items():
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        if value is None:
            continue
        data[key] = value

    try:
        return FilterCriteria.model_validate(data)
    except ValidationError as exc:
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()})
        raise InvalidInput(f"Invalid filter input for: {', '.join(fields)}") from exc


def format_value(value: Any) -> str:
    """Render a criterion or cell value, dropping ".0" from whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_criteria(criteria: FilterCriteria | None) -> str:
    """Plain-text summary of the applied criteria, one per line."""
    lines = ["Applied Filters:", ""]
    active = criteria.active() if criteria is not None else {}
    if not active:
        lines.append(NO_FILTERS_TEXT)
    else:
        for key, value in active.items():
            lines.append(f"{FILTER_LABELS[key]}: {format_value(value)}")
    return "\n".join(lines) + "\n"
