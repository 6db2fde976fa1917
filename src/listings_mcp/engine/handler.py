"""Stateful engine that filters, aggregates, ranks and exports listings."""

import logging
from collections.abc import Iterable
from pathlib import Path

from listings_mcp.config import ListingsConfig
from listings_mcp.engine.export import export_path, resolve_export_format, write_export
from listings_mcp.engine.filters import filter_listings
from listings_mcp.engine.loader import load_listings
from listings_mcp.engine.rankings import compute_host_rankings
from listings_mcp.engine.stats import compute_statistics
from listings_mcp.models import (
    ExportDocument,
    ExportFormat,
    FilterCriteria,
    HostRanking,
    Listing,
    Statistics,
)

logger = logging.getLogger(__name__)


class ListingsEngine:
    """Holds the loaded listings and everything derived from the last filter.

    The baseline never changes after construction. ``filter`` is the only
    mutating call: it replaces the filtered view and clears cached
    statistics and rankings. Not thread-safe.
    """

    def __init__(
        self,
        listings: Iterable[Listing],
        config: ListingsConfig | None = None,
    ):
        self._config = config or ListingsConfig()
        self._all: tuple[Listing, ...] = tuple(listings)
        self._filtered: list[Listing] = list(self._all)
        self._statistics: Statistics | None = None
        self._rankings: list[HostRanking] | None = None
        self._last_criteria: FilterCriteria | None = None

    @classmethod
    def from_csv(
        cls, path: str | Path, config: ListingsConfig | None = None
    ) -> "ListingsEngine":
        """Load listings from a CSV file. Raises DataLoadFailed."""
        return cls(load_listings(path), config=config)

    @property
    def config(self) -> ListingsConfig:
        return self._config

    def total_count(self) -> int:
        return len(self._all)

    def filtered_count(self) -> int:
        return len(self._filtered)

    def filter(self, criteria: FilterCriteria) -> int:
        """Apply criteria to the full baseline and return the match count."""
        self._filtered = filter_listings(self._all, criteria)
        self._last_criteria = criteria
        self._statistics = None
        self._rankings = None
        logger.info(
            "Filter matched %d of %d listings (%s)",
            len(self._filtered),
            len(self._all),
            criteria.active() or "no criteria",
        )
        return len(self._filtered)

    def compute_statistics(self) -> Statistics:
        self._statistics = compute_statistics(self._filtered)
        return self._statistics.model_copy(deep=True)

    def compute_rankings(self) -> list[HostRanking]:
        self._rankings = compute_host_rankings(self._filtered)
        return [ranking.model_copy() for ranking in self._rankings]

    def get_statistics(self) -> Statistics | None:
        """Statistics for the current view, or None if not computed since the last filter."""
        if self._statistics is None:
            return None
        return self._statistics.model_copy(deep=True)

    def get_host_rankings(self) -> list[HostRanking] | None:
        if self._rankings is None:
            return None
        return [ranking.model_copy() for ranking in self._rankings]

    def get_filtered_listings(self) -> list[Listing]:
        return list(self._filtered)

    def get_last_criteria(self) -> FilterCriteria | None:
        return self._last_criteria

    def export(
        self,
        name: str,
        format: str | ExportFormat = ExportFormat.JSON,
        criteria: FilterCriteria | None = None,
    ) -> Path:
        """Export the current results under the configured export directory.

        JSON holds the filtered listings, statistics and host rankings,
        computing the latter two first if needed. CSV holds only the
        listings. ``criteria`` defaults to the last applied criteria and is
        written to the companion description file.

        Raises:
            UnsupportedFormat: ``format`` is not a known export format.
            ExportFailed: writing any of the files failed.
        """
        fmt = resolve_export_format(format)
        path = export_path(self._config.export_dir, name, fmt)
        if criteria is None:
            criteria = self._last_criteria

        document = None
        if fmt is ExportFormat.JSON:
            if self._statistics is None:
                self.compute_statistics()
            if self._rankings is None:
                self.compute_rankings()
            document = ExportDocument(
                filtered_listings=self._filtered,
                statistics=self._statistics,
                host_rankings=self._rankings,
            )

        return write_export(path, fmt, document, self._filtered, criteria)


_singleton: ListingsEngine | None = None


def get_engine() -> ListingsEngine:
    """Return a module-level singleton engine loaded from the configured CSV."""
    global _singleton
    if _singleton is None:
        config = ListingsConfig()
        _singleton = ListingsEngine.from_csv(config.data_path, config=config)
    return _singleton
