"""Rank hosts by how many of the given listings they own."""

from collections.abc import Iterable

from listings_mcp.models import HostRanking, Listing


def compute_host_rankings(listings: Iterable[Listing]) -> list[HostRanking]:
    """Count listings per host_id, most listings first.

    Listings without a host_id are skipped. Ties keep the order in which hosts
    were first seen, and the host name comes from the last listing seen.
    """
    counts: dict[str, int] = {}
    names: dict[str, str | None] = {}
    for listing in listings:
        if not listing.host_id:
            continue
        counts[listing.host_id] = counts.get(listing.host_id, 0) + 1
        names[listing.host_id] = listing.host_name

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [
        HostRanking(host_id=host_id, host_name=names[host_id], listing_count=count)
        for host_id, count in ranked
    ]
