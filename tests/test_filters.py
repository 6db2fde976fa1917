"""Unit tests for listing filters."""

import pytest

from listings_mcp.engine.filters import contains_text, filter_listings, matches, within_bounds
from listings_mcp.models import FilterCriteria
from tests.conftest import make_listing


class TestWithinBounds:
    def test_no_bounds(self):
        assert within_bounds(5)

    def test_inclusive_lower(self):
        assert within_bounds(200, low=200)

    def test_inclusive_upper(self):
        assert within_bounds(200, high=200)

    def test_below_lower(self):
        assert not within_bounds(199.99, low=200)

    def test_above_upper(self):
        assert not within_bounds(301, high=300)

    def test_absent_value_always_passes(self):
        assert within_bounds(None, low=1_000, high=0)

    def test_zero_is_a_value(self):
        assert not within_bounds(0, low=1)


class TestContainsText:
    def test_case_insensitive(self):
        assert contains_text("Cozy Studio", "cOZY")

    def test_no_match(self):
        assert not contains_text("Cozy Studio", "loft")

    def test_empty_needle_passes(self):
        assert contains_text("anything", "")
        assert contains_text(None, None)

    def test_absent_value_fails_real_needle(self):
        assert not contains_text(None, "john")


@pytest.mark.parametrize(
    "criteria",
    [
        FilterCriteria(min_price=100, max_price=100),
        FilterCriteria(min_reviews=10, max_reviews=10),
        FilterCriteria(min_reviews_ltm=3, max_reviews_ltm=3),
        FilterCriteria(min_minimum_nights=2, max_minimum_nights=2),
        FilterCriteria(min_availability=365, max_availability=365),
    ],
)
def test_exact_bound_values_pass(criteria):
    listing = make_listing(
        price=100,
        number_of_reviews=10,
        number_of_reviews_ltm=3,
        minimum_nights=2,
        availability_365=365,
    )
    assert matches(listing, criteria)


@pytest.mark.parametrize(
    "criteria",
    [
        FilterCriteria(min_price=1_000),
        FilterCriteria(max_reviews=0),
        FilterCriteria(min_reviews_ltm=50),
        FilterCriteria(min_minimum_nights=30),
        FilterCriteria(min_availability=200, max_availability=100),
    ],
)
def test_absent_fields_pass_their_bounds(criteria):
    assert matches(make_listing(), criteria)


def test_room_type_is_exact():
    listing = make_listing(room_type="Private room")
    assert matches(listing, FilterCriteria(room_type="Private room"))
    assert not matches(listing, FilterCriteria(room_type="private room"))
    assert not matches(make_listing(), FilterCriteria(room_type="Private room"))


def test_text_filters():
    listing = make_listing(name="Cozy Room", neighbourhood="Park Slope", host_name="Sarah Williams")
    assert matches(listing, FilterCriteria(name_contains="cozy"))
    assert matches(listing, FilterCriteria(neighbourhood_contains="SLOPE"))
    assert matches(listing, FilterCriteria(host_name_contains="william"))
    assert not matches(listing, FilterCriteria(host_name_contains="john"))


def test_all_criteria_must_hold():
    listing = make_listing(price=250, number_of_reviews=5, room_type="Entire home/apt")
    assert not matches(listing, FilterCriteria(min_price=200, min_reviews=10))
    assert matches(listing, FilterCriteria(min_price=200, room_type="Entire home/apt"))


def test_filter_keeps_order():
    listings = [make_listing(str(i), price=float(p)) for i, p in enumerate([300, 100, 250, 50])]
    result = filter_listings(listings, FilterCriteria(min_price=100))
    assert [listing.id for listing in result] == ["0", "1", "2"]


def test_empty_criteria_keeps_everything():
    listings = [make_listing(str(i)) for i in range(4)]
    assert filter_listings(listings, FilterCriteria()) == listings
