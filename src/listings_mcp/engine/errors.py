"""Exceptions raised by the listings engine."""


class ListingsError(Exception):
    """Base exception for listings engine errors."""


class DataLoadFailed(ListingsError):
    """Raised when the listings source cannot be read or parsed at all."""


class ExportFailed(ListingsError):
    """Raised when writing an export artifact fails."""


class UnsupportedFormat(ListingsError):
    """Raised when an export format is not recognised."""


class InvalidInput(ListingsError):
    """Raised when filter input cannot be turned into typed criteria."""
