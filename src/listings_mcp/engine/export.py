"""Write listings results to JSON or CSV, with a filter description file."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from listings_mcp.engine.criteria import describe_criteria, format_value
from listings_mcp.engine.errors import ExportFailed, UnsupportedFormat
from listings_mcp.models import ExportDocument, ExportFormat, FilterCriteria, Listing

logger = logging.getLogger(__name__)

FORMAT_ALIASES: dict[str, ExportFormat] = {
    "structured": ExportFormat.JSON,
    "tabular": ExportFormat.CSV,
}

CSV_COLUMNS: tuple[str, ...] = tuple(Listing.model_fields)

_CSV_SPECIAL_CHARS = (",", '"', "\n", "\r")
_EXPORT_SUFFIXES = tuple(f".{fmt.value}" for fmt in ExportFormat)


def resolve_export_format(raw: str | ExportFormat) -> ExportFormat:
    """Resolve a format name ("json", "csv", "structured", "tabular")."""
    if isinstance(raw, ExportFormat):
        return raw
    normalized = str(raw).strip().lower()
    if normalized in FORMAT_ALIASES:
        return FORMAT_ALIASES[normalized]
    try:
        return ExportFormat(normalized)
    except ValueError:
        raise UnsupportedFormat(f"Unsupported export format: {raw}") from None


def escape_csv_value(value: object) -> str:
    """Render one CSV cell.

    Cells containing a comma, quote or line break are quoted, with embedded
    quotes doubled. None becomes an empty cell.
    """
    if value is None:
        return ""
    text = format_value(value)
    if any(char in text for char in _CSV_SPECIAL_CHARS):
        return '"' + text.replace('"', '""') + '"'
    return text


def render_csv(listings: Iterable[Listing]) -> str:
    """Header row of every Listing field, then one row per listing."""
    lines = [",".join(CSV_COLUMNS)]
    for listing in listings:
        lines.append(
            ",".join(escape_csv_value(getattr(listing, column)) for column in CSV_COLUMNS)
        )
    return "\n".join(lines) + "\n"


def render_json(document: ExportDocument) -> str:
    return document.model_dump_json(indent=2, by_alias=True)


def export_path(export_dir: str | Path, name: str, fmt: ExportFormat) -> Path:
    """Target path for an export. Only the basename of ``name`` is used.

    A ".json" or ".csv" suffix that does not match ``fmt`` is replaced; any
    other name gets the format suffix appended.
    """
    file_name = Path(name).name
    if not file_name:
        raise ExportFailed(f"Invalid export file name: {name!r}")
    path = Path(export_dir) / file_name
    expected = f".{fmt.value}"
    suffix = path.suffix.lower()
    if suffix in _EXPORT_SUFFIXES and suffix != expected:
        path = path.with_suffix(expected)
    elif suffix != expected:
        path = path.with_name(path.name + expected)
    return path


def description_path(path: Path, fmt: ExportFormat) -> Path:
    """``<stem>_filters.txt`` for JSON, ``<stem>_csv_filters.txt`` for CSV."""
    suffix = "_csv_filters.txt" if fmt is ExportFormat.CSV else "_filters.txt"
    return path.with_name(f"{path.stem}{suffix}")


def _write(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        logger.error("Export write failed for %s: %s", path, exc)
        raise ExportFailed(f"Failed to export results to {path}: {exc}") from exc


def write_export(
    path: Path,
    fmt: ExportFormat,
    document: ExportDocument | None,
    listings: Sequence[Listing],
    criteria: FilterCriteria | None,
) -> Path:
    """Write the primary artifact and its filter description.

    JSON writes ``document``; CSV writes ``listings``. Files already written
    are left in place if a later write fails.
    """
    if fmt is ExportFormat.JSON:
        if document is None:
            raise ValueError("JSON export requires a document")
        _write(path, render_json(document))
    else:
        _write(path, render_csv(listings))

    _write(description_path(path, fmt), describe_criteria(criteria))
    logger.info("Exported %d listings as %s to %s", len(listings), fmt.value, path)
    return path
