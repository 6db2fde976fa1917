"""Pydantic data models for short-term rental listings data."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class RoomType(str, Enum):
    ENTIRE_HOME = "Entire home/apt"
    PRIVATE_ROOM = "Private room"
    SHARED_ROOM = "Shared room"
    HOTEL_ROOM = "Hotel room"


class ExportFormat(str, Enum):
    JSON = "json"
    CSV = "csv"


class Listing(BaseModel):
    """A single listing row. ``None`` means the source had no usable value."""

    id: str
    name: str = ""
    host_id: Optional[str] = None
    host_name: Optional[str] = None
    neighbourhood_group: Optional[str] = None
    neighbourhood: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    room_type: Optional[str] = None
    price: Optional[float] = None
    minimum_nights: Optional[int] = None
    number_of_reviews: Optional[int] = None
    last_review: Optional[str] = None
    reviews_per_month: Optional[float] = None
    calculated_host_listings_count: Optional[int] = None
    availability_365: Optional[int] = None
    number_of_reviews_ltm: Optional[int] = None
    license: Optional[str] = None

    model_config = {"frozen": True}


_TEXT_CRITERIA = ("room_type", "name_contains", "neighbourhood_contains", "host_name_contains")


class FilterCriteria(BaseModel):
    """Sparse filter bounds. Any field left as None imposes no constraint."""

    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_reviews: Optional[float] = None
    max_reviews: Optional[float] = None
    min_reviews_ltm: Optional[float] = None
    max_reviews_ltm: Optional[float] = None
    room_type: Optional[str] = None
    name_contains: Optional[str] = None
    neighbourhood_contains: Optional[str] = None
    min_minimum_nights: Optional[float] = None
    max_minimum_nights: Optional[float] = None
    min_availability: Optional[float] = None
    max_availability: Optional[float] = None
    host_name_contains: Optional[str] = None

    model_config = {"frozen": True, "extra": "forbid", "allow_inf_nan": False}

    @field_validator(*_TEXT_CRITERIA, mode="before")
    @classmethod
    def _blank_is_omitted(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def active(self) -> dict[str, Any]:
        """Return the specified criteria in declaration order."""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.active()


class Statistics(BaseModel):
    """Aggregates over the filtered listings."""

    count: int = 0
    average_price: float = 0.0
    average_price_per_room_type: dict[str, float] = Field(default_factory=dict)
    median_price: float = 0.0
    min_price: float = 0.0
    max_price: float = 0.0
    average_reviews: float = 0.0
    average_reviews_ltm: float = 0.0
    average_minimum_nights: float = 0.0
    average_availability: float = 0.0
    average_reviews_per_month: float = 0.0
    average_host_listings_count: float = 0.0


class HostRanking(BaseModel):
    host_id: str
    host_name: Optional[str] = None
    listing_count: int

    model_config = {"frozen": True}


class ExportDocument(BaseModel):
    """Structured export payload."""

    filtered_listings: list[Listing] = Field(
        default_factory=list, serialization_alias="filteredListings"
    )
    statistics: Statistics
    host_rankings: list[HostRanking] = Field(
        default_factory=list, serialization_alias="hostRankings"
    )
