"""
Sheets Extractor — Pure functions for rendering value grids as TSV.

Receives value rows exactly as the Values API returns them (ragged rows,
trailing empties omitted). No API calls, no MCP awareness.
"""

from typing import Any

from models import CellValue, ValueRange


def _format_cell(value: CellValue) -> str:
    """Stringify one cell. None is empty; whole floats lose their '.0'."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_delimited(values: list[list[CellValue]]) -> str:
    """
    Tab-join cells and newline-join rows. Short rows are not padded.

    Example:
        [["a", "b"], ["c"]] -> "a\\tb\\nc"
    """
    return "\n".join("\t".join(_format_cell(cell) for cell in row) for row in values)


def parse_value_range(raw: dict[str, Any], fallback_range: str = "") -> ValueRange:
    return ValueRange(range=raw.get("range") or fallback_range, values=raw.get("values") or [])


def format_value_range(value_range: ValueRange) -> str:
    if not value_range.values:
        return f"No data found in range: {value_range.range}"
    return (
        f"Range: {value_range.range}\n"
        f"Rows: {len(value_range.values)}\n\n"
        f"{to_delimited(value_range.values)}"
    )


def format_value_ranges(value_ranges: list[ValueRange]) -> str:
    """One section per range, in request order."""
    if not value_ranges:
        return "No data found in any of the requested ranges."

    sections = []
    for vr in value_ranges:
        if not vr.values:
            sections.append(f"--- {vr.range} ---\n(empty)")
        else:
            sections.append(f"--- {vr.range} ({len(vr.values)} rows) ---\n{to_delimited(vr.values)}")
    return "\n\n".join(sections)


def format_spreadsheet(spreadsheet: dict[str, Any], spreadsheet_id: str) -> str:
    """Title, locale, time zone and one line per sheet tab."""
    properties = spreadsheet.get("properties") or {}
    text = f"Spreadsheet: {properties.get('title') or '(untitled)'}\nID: {spreadsheet_id}\n"
    if properties.get("locale"):
        text += f"Locale: {properties['locale']}\n"
    if properties.get("timeZone"):
        text += f"Time zone: {properties['timeZone']}\n"

    sheets = spreadsheet.get("sheets") or []
    if not sheets:
        return text + "\nNo sheets found.\n"

    text += f"\nSheets ({len(sheets)}):\n"
    for sheet in sheets:
        p = sheet.get("properties")
        if not p:
            continue
        grid = p.get("gridProperties") or {}
        rows = grid.get("rowCount", "?")
        cols = grid.get("columnCount", "?")
        text += f'- [{p.get("index", 0)}] "{p.get("title", "")}" ({p.get("sheetType", "GRID")}, {rows} rows x {cols} cols)\n'
    return text
