"""
Tools — MCP tool implementations.

One module per Google API with the handler logic. Each handler resolves
the identity, calls adapters, formats via extractors and returns a
ToolResult; none of them raise. server.py provides thin @mcp.tool()
wrappers that call into these.
"""

from typing import Callable

from models import ToolResult

from .gmail import search_emails, get_email, list_labels, get_attachment
from .drive import search_drive_files, get_file_content, get_file_metadata
from .sheets import get_spreadsheet, read_sheet_range, batch_read_sheet_ranges
from .docs import get_document, get_document_structure
from .calendar import list_calendars, search_events, get_event, get_freebusy
from .slides import search_presentations, get_presentation, get_slide
from .directory import list_users

# Single source of truth for tool names, in registration order.
TOOLS: dict[str, Callable[..., ToolResult]] = {
    "search_emails": search_emails,
    "get_email": get_email,
    "list_labels": list_labels,
    "get_attachment": get_attachment,
    "search_drive_files": search_drive_files,
    "get_file_content": get_file_content,
    "get_file_metadata": get_file_metadata,
    "get_spreadsheet": get_spreadsheet,
    "read_sheet_range": read_sheet_range,
    "batch_read_sheet_ranges": batch_read_sheet_ranges,
    "get_document": get_document,
    "get_document_structure": get_document_structure,
    "list_calendars": list_calendars,
    "search_events": search_events,
    "get_event": get_event,
    "get_freebusy": get_freebusy,
    "search_presentations": search_presentations,
    "get_presentation": get_presentation,
    "get_slide": get_slide,
    "list_users": list_users,
}

__all__ = ["TOOLS", *TOOLS]
