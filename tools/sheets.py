"""
Sheets tools — spreadsheet metadata and cell ranges as TSV.
"""

from adapters.sheets import fetch_spreadsheet_metadata, fetch_values, fetch_values_batch
from auth import resolve_identity
from config import BULK_LIMIT
from extractors.formatting import truncate
from extractors.sheets import format_spreadsheet, format_value_range, format_value_ranges
from models import ErrorKind, ReaderError, ToolResult

from .common import tool_boundary


@tool_boundary("getting spreadsheet")
def get_spreadsheet(spreadsheet_id: str, user_email: str | None = None) -> ToolResult:
    """
    Get spreadsheet metadata: title, locale, time zone and the sheet tabs
    with their row and column counts.
    """
    identity = resolve_identity(user_email)
    metadata = fetch_spreadsheet_metadata(identity, spreadsheet_id)
    return ToolResult.text(format_spreadsheet(metadata, spreadsheet_id))


@tool_boundary("reading sheet range")
def read_sheet_range(
    spreadsheet_id: str,
    range: str,
    include_formulas: bool = False,
    user_email: str | None = None,
) -> ToolResult:
    """
    Read cell values from one range in A1 notation.

    Examples: 'Sheet1!A1:D10', 'Sheet1!A:A', 'Sheet1'. With include_formulas
    the formulas are returned instead of computed values.
    """
    identity = resolve_identity(user_email)
    value_range = fetch_values(identity, spreadsheet_id, range, include_formulas)
    return ToolResult.text(truncate(format_value_range(value_range), BULK_LIMIT))


@tool_boundary("reading sheet ranges")
def batch_read_sheet_ranges(
    spreadsheet_id: str,
    ranges: list[str],
    user_email: str | None = None,
) -> ToolResult:
    """Read several A1 ranges in one request, one section per range."""
    if not ranges:
        raise ReaderError(ErrorKind.INVALID_INPUT, "ranges must contain at least one A1 range")
    identity = resolve_identity(user_email)
    value_ranges = fetch_values_batch(identity, spreadsheet_id, ranges)
    return ToolResult.text(truncate(format_value_ranges(value_ranges), BULK_LIMIT))
