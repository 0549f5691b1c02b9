"""
Sheets adapter — Google Sheets API wrapper.

Fetches spreadsheet metadata and cell values. Values are returned as
ValueRange models; rendering lives in extractors/sheets.py.
"""

from typing import Any, cast

from models import ValueRange, CellValue
from errors import translate_errors
from adapters.services import get_sheets_service
from extractors.sheets import parse_value_range
from logging_config import log_api_call, log_api_result


# Fields to request from spreadsheets().get(): title, locale and the tab list
SPREADSHEET_METADATA_FIELDS = (
    "spreadsheetId,"
    "properties.title,properties.locale,properties.timeZone,"
    "sheets(properties(sheetId,title,index,sheetType,gridProperties(rowCount,columnCount)))"
)


def _parse_cell_value(value: Any) -> CellValue:
    """Convert API cell value to our CellValue type."""
    if value is None:
        return None
    if isinstance(value, (str, int, float, bool)):
        return value
    # API sometimes returns other types, convert to string
    return str(value)


def _to_value_range(raw: dict[str, Any], fallback_range: str) -> ValueRange:
    value_range = parse_value_range(raw, fallback_range)
    value_range.values = [[_parse_cell_value(v) for v in row] for row in value_range.values]
    return value_range


@translate_errors
def fetch_spreadsheet_metadata(identity: str, spreadsheet_id: str) -> dict[str, Any]:
    """
    Fetch title, locale, time zone and sheet properties.

    Raises:
        ReaderError: On API failure
    """
    service = get_sheets_service(identity)
    log_api_call("sheets", "spreadsheets.get", spreadsheetId=spreadsheet_id)
    result = (
        service.spreadsheets()
        .get(spreadsheetId=spreadsheet_id, fields=SPREADSHEET_METADATA_FIELDS)
        .execute()
    )
    return cast(dict[str, Any], result)


@translate_errors
def fetch_values(
    identity: str,
    spreadsheet_id: str,
    range_: str,
    include_formulas: bool = False,
) -> ValueRange:
    """
    Read one A1 range.

    Args:
        include_formulas: Return formulas instead of formatted values

    Raises:
        ReaderError: On API failure
    """
    service = get_sheets_service(identity)
    render = "FORMULA" if include_formulas else "FORMATTED_VALUE"
    log_api_call("sheets", "values.get", range=range_, valueRenderOption=render)
    result = (
        service.spreadsheets()
        .values()
        .get(
            spreadsheetId=spreadsheet_id,
            range=range_,
            valueRenderOption=render,
            dateTimeRenderOption="FORMATTED_STRING",
        )
        .execute()
    )
    return _to_value_range(result, range_)


@translate_errors
def fetch_values_batch(identity: str, spreadsheet_id: str, ranges: list[str]) -> list[ValueRange]:
    """
    Read several A1 ranges in one request. Results keep request order.

    Raises:
        ReaderError: On API failure
    """
    service = get_sheets_service(identity)
    log_api_call("sheets", "values.batchGet", ranges=ranges)
    result = (
        service.spreadsheets()
        .values()
        .batchGet(
            spreadsheetId=spreadsheet_id,
            ranges=ranges,
            valueRenderOption="FORMATTED_VALUE",
            dateTimeRenderOption="FORMATTED_STRING",
        )
        .execute()
    )
    raw_ranges = result.get("valueRanges", [])
    log_api_result("sheets", "values.batchGet", len(raw_ranges))
    return [
        _to_value_range(raw, ranges[i] if i < len(ranges) else "")
        for i, raw in enumerate(raw_ranges)
    ]
