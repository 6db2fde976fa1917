"""Listings MCP Server — filter, summarise and export short-term rental listings."""

import logging
import sys
from typing import Optional

from fastmcp import FastMCP

from listings_mcp.engine import build_criteria, get_engine, ListingsError

# Route ALL logging to stderr — stdout is reserved for MCP protocol messages
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

mcp = FastMCP(
    name="listings",
    instructions=(
        "MCP server for exploring a short-term rental listings dataset. "
        "Use filter_listings to narrow the dataset, get_statistics and "
        "get_host_rankings to summarise the current selection, "
        "get_filtered_listings to page through it, and export_results to "
        "write it to JSON or CSV."
    ),
)


@mcp.tool()
async def filter_listings(
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    min_reviews: Optional[float] = None,
    max_reviews: Optional[float] = None,
    min_reviews_ltm: Optional[float] = None,
    max_reviews_ltm: Optional[float] = None,
    room_type: Optional[str] = None,
    name_contains: Optional[str] = None,
    neighbourhood_contains: Optional[str] = None,
    min_minimum_nights: Optional[float] = None,
    max_minimum_nights: Optional[float] = None,
    min_availability: Optional[float] = None,
    max_availability: Optional[float] = None,
    host_name_contains: Optional[str] = None,
) -> dict:
    """Filter the listings. Every bound is inclusive and optional; listings missing a field are never excluded by that field's bounds.

    Args:
        min_price: Minimum nightly price.
        max_price: Maximum nightly price.
        min_reviews: Minimum total number of reviews.
        max_reviews: Maximum total number of reviews.
        min_reviews_ltm: Minimum number of reviews in the last 12 months.
        max_reviews_ltm: Maximum number of reviews in the last 12 months.
        room_type: Exact room type: 'Entire home/apt', 'Private room', 'Shared room' or 'Hotel room'.
        name_contains: Case-insensitive substring of the listing name.
        neighbourhood_contains: Case-insensitive substring of the neighbourhood.
        min_minimum_nights: Lowest accepted minimum-nights requirement.
        max_minimum_nights: Highest accepted minimum-nights requirement.
        min_availability: Minimum days available per year (0-365).
        max_availability: Maximum days available per year (0-365).
        host_name_contains: Case-insensitive substring of the host name.

    Returns:
        The number of matching listings, the dataset size and the applied criteria.
    """
    logger.info("filter_listings called")
    try:
        criteria = build_criteria(
            min_price=min_price,
            max_price=max_price,
            min_reviews=min_reviews,
            max_reviews=max_reviews,
            min_reviews_ltm=min_reviews_ltm,
            max_reviews_ltm=max_reviews_ltm,
            room_type=room_type,
            name_contains=name_contains,
            neighbourhood_contains=neighbourhood_contains,
            min_minimum_nights=min_minimum_nights,
            max_minimum_nights=max_minimum_nights,
            min_availability=min_availability,
            max_availability=max_availability,
            host_name_contains=host_name_contains,
        )
        engine = get_engine()
        count = engine.filter(criteria)
        return {
            "filtered_count": count,
            "total_count": engine.total_count(),
            "criteria": criteria.active(),
        }
    except ListingsError as e:
        logger.error("filter_listings error: %s", e)
        return {"error": str(e)}


@mcp.tool()
async def get_statistics() -> dict:
    """Compute statistics for the currently filtered listings.

    Returns:
        Count, average/median/min/max price, average price per room type and
        averages of reviews, minimum nights, availability and host listing counts.
    """
    logger.info("get_statistics called")
    try:
        return get_engine().compute_statistics().model_dump()
    except ListingsError as e:
        logger.error("get_statistics error: %s", e)
        return {"error": str(e)}


@mcp.tool()
async def get_host_rankings(limit: Optional[int] = None) -> dict:
    """Rank hosts by number of listings in the current selection.

    Args:
        limit: How many top hosts to return. Defaults to the configured ranking limit; negative values return none.

    Returns:
        The top hosts and the total number of distinct hosts.
    """
    logger.info("get_host_rankings called: limit=%s", limit)
    try:
        engine = get_engine()
        rankings = engine.compute_rankings()
        size = limit if limit is not None else engine.config.ranking_limit
        top = rankings[: max(size, 0)]
        return {
            "host_rankings": [r.model_dump() for r in top],
            "total_hosts": len(rankings),
        }
    except ListingsError as e:
        logger.error("get_host_rankings error: %s", e)
        return {"error": str(e)}


@mcp.tool()
async def get_filtered_listings(limit: Optional[int] = None, offset: int = 0) -> dict:
    """Page through the currently filtered listings.

    Args:
        limit: Page size. Defaults to the configured sample size; negative values return none.
        offset: Index of the first listing to return.

    Returns:
        The requested listings and the total filtered count.
    """
    logger.info("get_filtered_listings called: limit=%s, offset=%s", limit, offset)
    try:
        engine = get_engine()
        listings = engine.get_filtered_listings()
        size = limit if limit is not None else engine.config.sample_size
        size = max(size, 0)
        start = max(offset, 0)
        return {
            "filtered_count": len(listings),
            "offset": start,
            "listings": [listing.model_dump() for listing in listings[start : start + size]],
        }
    except ListingsError as e:
        logger.error("get_filtered_listings error: %s", e)
        return {"error": str(e)}


@mcp.tool()
async def export_results(name: str, format: str = "json") -> dict:
    """Export the current selection to the export directory.

    Args:
        name: Output file name (directories are ignored; the file always ends in the format's extension).
        format: 'json' for listings, statistics and host rankings, or 'csv' for the listings only.

    Returns:
        The path of the written file.
    """
    logger.info("export_results called: name=%s, format=%s", name, format)
    try:
        path = get_engine().export(name, format)
        return {"path": str(path), "format": format}
    except ListingsError as e:
        logger.error("export_results error: %s", e)
        return {"error": str(e), "name": name}


def main() -> None:
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
