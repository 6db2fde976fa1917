"""Tests for Pydantic data models."""

import pytest
from pydantic import ValidationError

from listings_mcp.models import (
    ExportDocument,
    ExportFormat,
    FilterCriteria,
    HostRanking,
    Listing,
    RoomType,
    Statistics,
)


def test_room_type_values():
    assert RoomType.ENTIRE_HOME.value == "Entire home/apt"
    assert RoomType.PRIVATE_ROOM.value == "Private room"
    assert RoomType.SHARED_ROOM.value == "Shared room"
    assert RoomType.HOTEL_ROOM.value == "Hotel room"
    assert len(RoomType) == 4


def test_export_format_values():
    assert ExportFormat.JSON.value == "json"
    assert ExportFormat.CSV.value == "csv"


def test_listing_minimal():
    listing = Listing(id="1")
    assert listing.name == ""
    assert listing.price is None
    assert listing.reviews_per_month is None
    assert listing.host_id is None


def test_listing_zero_is_not_absent():
    listing = Listing(id="1", price=0, number_of_reviews=0)
    assert listing.price == 0.0
    assert listing.number_of_reviews == 0


def test_listing_is_frozen():
    listing = Listing(id="1", price=100)
    with pytest.raises(ValidationError):
        listing.price = 200


def test_criteria_defaults_are_empty():
    criteria = FilterCriteria()
    assert criteria.active() == {}
    assert criteria.is_empty()


def test_criteria_blank_text_is_omitted():
    criteria = FilterCriteria(name_contains="", neighbourhood_contains="   ", room_type="")
    assert criteria.name_contains is None
    assert criteria.neighbourhood_contains is None
    assert criteria.room_type is None
    assert criteria.is_empty()


def test_criteria_active_keeps_declaration_order():
    criteria = FilterCriteria(host_name_contains="jo", max_price=300, min_price=100)
    assert list(criteria.active()) == ["min_price", "max_price", "host_name_contains"]


def test_criteria_rejects_unknown_keys():
    with pytest.raises(ValidationError):
        FilterCriteria(min_bedrooms=2)


def test_criteria_rejects_nan():
    with pytest.raises(ValidationError):
        FilterCriteria(min_price=float("nan"))


def test_statistics_defaults_are_zero():
    stats = Statistics()
    assert stats.count == 0
    assert stats.average_price == 0.0
    assert stats.median_price == 0.0
    assert stats.average_price_per_room_type == {}


def test_export_document_serializes_with_camel_case_sections():
    document = ExportDocument(
        filtered_listings=[Listing(id="1", price=100)],
        statistics=Statistics(count=1, average_price=100.0),
        host_rankings=[HostRanking(host_id="101", host_name="John", listing_count=1)],
    )
    data = document.model_dump(by_alias=True)
    assert list(data) == ["filteredListings", "statistics", "hostRankings"]
    assert data["filteredListings"][0]["id"] == "1"
    assert data["hostRankings"][0]["listing_count"] == 1
