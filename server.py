#!/usr/bin/env python3
"""
Google Workspace Reader MCP Server

Read-only MCP server for Google Workspace. A service account with
domain-wide delegation impersonates the requested user (or GW_USER_EMAIL)
and every tool returns flat, bounded text.

Tools by API:
- Gmail: search_emails, get_email, list_labels, get_attachment
- Drive: search_drive_files, get_file_content, get_file_metadata
- Sheets: get_spreadsheet, read_sheet_range, batch_read_sheet_ranges
- Docs: get_document, get_document_structure
- Calendar: list_calendars, search_events, get_event, get_freebusy
- Slides: search_presentations, get_presentation, get_slide
- Directory: list_users

Documentation is provided via MCP Resources, not a tool.

Architecture:
- extractors/: Pure functions (no MCP, no API calls)
- adapters/: Thin Google API wrappers
- tools/: Tool implementations (business logic, failure boundary)
- server.py: Thin MCP wrappers (this file)
"""

import os
import signal
from typing import Annotated

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.types import (
    BlobResourceContents,
    CallToolResult,
    EmbeddedResource,
    ImageContent,
    TextContent,
)
from pydantic import Field

import tools
from config import get_log_level
from logging_config import configure_logging
from models import ToolContent, ToolResult
from resources.tools import get_tool_registry, URI_PREFIX

# Initialize MCP server
mcp = FastMCP("Google Workspace Reader")

UserEmail = Annotated[
    str | None,
    Field(description="Email of the user to impersonate (defaults to GW_USER_EMAIL)"),
]
SearchLimit = Annotated[int, Field(ge=1, le=100, description="Maximum results (1-100)")]


def _to_mcp_content(item: ToolContent) -> TextContent | ImageContent | EmbeddedResource:
    if item.kind == "image":
        return ImageContent(type="image", data=item.data or "", mimeType=item.mime_type or "")
    if item.kind == "resource":
        return EmbeddedResource(
            type="resource",
            resource=BlobResourceContents(
                uri=item.uri or "",
                mimeType=item.mime_type,
                blob=item.data or "",
            ),
        )
    return TextContent(type="text", text=item.text)


def to_call_tool_result(result: ToolResult) -> CallToolResult:
    """Convert a handler's ToolResult into the MCP wire type."""
    return CallToolResult(
        content=[_to_mcp_content(item) for item in result.content],
        isError=result.is_error,
    )


# ============================================================================
# TOOLS — Gmail
# ============================================================================

@mcp.tool()
def search_emails(
    query: Annotated[str, Field(description="Gmail search query (same syntax as the Gmail search bar)")],
    max_results: SearchLimit = 10,
    user_email: UserEmail = None,
) -> CallToolResult:
    """Search a user's Gmail with Gmail query syntax. Returns subject, sender, date and snippet per hit."""
    return to_call_tool_result(tools.search_emails(query, max_results, user_email))


@mcp.tool()
def get_email(
    message_id: Annotated[str, Field(description="Gmail message ID (from search_emails)")],
    user_email: UserEmail = None,
) -> CallToolResult:
    """Get the full content of one email: headers, readable body and attachment list."""
    return to_call_tool_result(tools.get_email(message_id, user_email))


@mcp.tool()
def list_labels(user_email: UserEmail = None) -> CallToolResult:
    """List all Gmail labels for a user, system labels first."""
    return to_call_tool_result(tools.list_labels(user_email))


@mcp.tool()
def get_attachment(
    message_id: Annotated[str, Field(description="Gmail message ID")],
    attachment_id: Annotated[str, Field(description="Attachment ID (from get_email)")],
    user_email: UserEmail = None,
) -> CallToolResult:
    """Get an email attachment: images inline, text as text, other files as a binary resource (10 MB max)."""
    return to_call_tool_result(tools.get_attachment(message_id, attachment_id, user_email))


# ============================================================================
# TOOLS — Drive
# ============================================================================

@mcp.tool()
def search_drive_files(
    query: Annotated[str, Field(description="Drive query, e.g. \"name contains 'budget'\"")],
    max_results: SearchLimit = 10,
    user_email: UserEmail = None,
) -> CallToolResult:
    """Search a user's Google Drive (including shared drives) with Drive query syntax."""
    return to_call_tool_result(tools.search_drive_files(query, max_results, user_email))


@mcp.tool()
def get_file_content(
    file_id: Annotated[str, Field(description="Drive file ID")],
    user_email: UserEmail = None,
) -> CallToolResult:
    """Read a Drive file: native Docs/Sheets/Slides/Drawings are exported, text files downloaded, binaries summarized."""
    return to_call_tool_result(tools.get_file_content(file_id, user_email))


@mcp.tool()
def get_file_metadata(
    file_id: Annotated[str, Field(description="Drive file ID")],
    user_email: UserEmail = None,
) -> CallToolResult:
    """Get detailed metadata (owners, permissions, links) for a Drive file without its content."""
    return to_call_tool_result(tools.get_file_metadata(file_id, user_email))


# ============================================================================
# TOOLS — Sheets
# ============================================================================

@mcp.tool()
def get_spreadsheet(
    spreadsheet_id: Annotated[str, Field(description="Spreadsheet ID")],
    user_email: UserEmail = None,
) -> CallToolResult:
    """Get spreadsheet metadata: title, locale, time zone and sheet tabs with sizes."""
    return to_call_tool_result(tools.get_spreadsheet(spreadsheet_id, user_email))


@mcp.tool()
def read_sheet_range(
    spreadsheet_id: Annotated[str, Field(description="Spreadsheet ID")],
    range: Annotated[str, Field(description="A1 range, e.g. 'Sheet1!A1:D10' or 'Sheet1'")],
    include_formulas: Annotated[bool, Field(description="Return formulas instead of computed values")] = False,
    user_email: UserEmail = None,
) -> CallToolResult:
    """Read cell values from one A1 range as tab-separated text."""
    return to_call_tool_result(tools.read_sheet_range(spreadsheet_id, range, include_formulas, user_email))


@mcp.tool()
def batch_read_sheet_ranges(
    spreadsheet_id: Annotated[str, Field(description="Spreadsheet ID")],
    ranges: Annotated[list[str], Field(min_length=1, description="A1 ranges, e.g. ['Sheet1!A1:D10', 'Sheet2']")],
    user_email: UserEmail = None,
) -> CallToolResult:
    """Read several A1 ranges in one request, one section per range."""
    return to_call_tool_result(tools.batch_read_sheet_ranges(spreadsheet_id, ranges, user_email))


# ============================================================================
# TOOLS — Docs
# ============================================================================

@mcp.tool()
def get_document(
    document_id: Annotated[str, Field(description="Google Docs document ID")],
    user_email: UserEmail = None,
) -> CallToolResult:
    """Get the full text of a Google Doc, with tables as TSV."""
    return to_call_tool_result(tools.get_document(document_id, user_email))


@mcp.tool()
def get_document_structure(
    document_id: Annotated[str, Field(description="Google Docs document ID")],
    user_email: UserEmail = None,
) -> CallToolResult:
    """Get the heading outline of a Google Doc."""
    return to_call_tool_result(tools.get_document_structure(document_id, user_email))


# ============================================================================
# TOOLS — Calendar
# ============================================================================

@mcp.tool()
def list_calendars(user_email: UserEmail = None) -> CallToolResult:
    """List the calendars a user can see."""
    return to_call_tool_result(tools.list_calendars(user_email))


@mcp.tool()
def search_events(
    calendar_id: Annotated[str, Field(description="Calendar ID ('primary' for the user's own)")] = "primary",
    query: Annotated[str | None, Field(description="Free-text filter")] = None,
    time_min: Annotated[str | None, Field(description="ISO 8601 start, e.g. '2026-01-01T00:00:00Z'")] = None,
    time_max: Annotated[str | None, Field(description="ISO 8601 end, e.g. '2026-12-31T23:59:59Z'")] = None,
    max_results: SearchLimit = 10,
    user_email: UserEmail = None,
) -> CallToolResult:
    """Search or list calendar events in start-time order, recurring events expanded."""
    return to_call_tool_result(
        tools.search_events(calendar_id, query, time_min, time_max, max_results, user_email)
    )


@mcp.tool()
def get_event(
    event_id: Annotated[str, Field(description="Event ID (from search_events)")],
    calendar_id: Annotated[str, Field(description="Calendar ID")] = "primary",
    user_email: UserEmail = None,
) -> CallToolResult:
    """Get full details of one calendar event."""
    return to_call_tool_result(tools.get_event(event_id, calendar_id, user_email))


@mcp.tool()
def get_freebusy(
    emails: Annotated[list[str], Field(min_length=1, description="Email addresses to check")],
    time_min: Annotated[str, Field(description="ISO 8601 start")],
    time_max: Annotated[str, Field(description="ISO 8601 end")],
    user_email: UserEmail = None,
) -> CallToolResult:
    """Get busy intervals for one or more people over a time range."""
    return to_call_tool_result(tools.get_freebusy(emails, time_min, time_max, user_email))


# ============================================================================
# TOOLS — Slides
# ============================================================================

@mcp.tool()
def search_presentations(
    query: Annotated[str | None, Field(description="Optional extra Drive query")] = None,
    max_results: SearchLimit = 10,
    user_email: UserEmail = None,
) -> CallToolResult:
    """Search Google Slides presentations, most recently modified first."""
    return to_call_tool_result(tools.search_presentations(query, max_results, user_email))


@mcp.tool()
def get_presentation(
    presentation_id: Annotated[str, Field(description="Presentation ID")],
    user_email: UserEmail = None,
) -> CallToolResult:
    """Get a presentation's title, page size and one summary line per slide."""
    return to_call_tool_result(tools.get_presentation(presentation_id, user_email))


@mcp.tool()
def get_slide(
    presentation_id: Annotated[str, Field(description="Presentation ID")],
    slide_id: Annotated[str, Field(description="Slide object ID (from get_presentation)")],
    user_email: UserEmail = None,
) -> CallToolResult:
    """Get all text on one slide, including tables, groups and speaker notes."""
    return to_call_tool_result(tools.get_slide(presentation_id, slide_id, user_email))


# ============================================================================
# TOOLS — Directory
# ============================================================================

@mcp.tool()
def list_users(
    domain: Annotated[str | None, Field(description="Restrict to one domain")] = None,
    query: Annotated[str | None, Field(description="Admin SDK query, e.g. 'orgUnitPath=/Engineering'")] = None,
    max_results: Annotated[int, Field(ge=1, le=500, description="Maximum users (1-500)")] = 100,
    user_email: UserEmail = None,
) -> CallToolResult:
    """List users in the Workspace organization. user_email must be a Workspace admin."""
    return to_call_tool_result(tools.list_users(domain, query, max_results, user_email))


# ============================================================================
# RESOURCES — Self-documenting MCP capabilities
# ============================================================================

_tool_registry = get_tool_registry()
_tool_registry.register_all(tools.TOOLS)


@mcp.resource("gwreader://docs/overview")
def docs_overview() -> str:
    """Overview of the Google Workspace Reader MCP server."""
    lines = "\n".join(
        f"- `{entry['name']}`: {entry['description']} ({entry['uri']})"
        for entry in _tool_registry.list_resources()
    )
    return f"""# Google Workspace Reader

Read-only access to Gmail, Drive, Sheets, Docs, Calendar, Slides and the
Workspace directory. Nothing is ever written, cached or persisted.

## Identity

Every tool takes an optional `user_email`: the Workspace user whose data is
read. When omitted, `GW_USER_EMAIL` is used. The service account must have
domain-wide delegation for the read-only scopes.

## Output

All output is plain text. Mail bodies are capped at 50,000 characters;
documents, files, sheet ranges and slides at 100,000. Failures come back as
a single error message naming what went wrong.

## Tools

{lines}

## Resources

- `gwreader://docs/overview` — This overview
- `{URI_PREFIX}{{tool_name}}` — Per-tool documentation
"""


# ============================================================================
# AUTO-GENERATED TOOL DOCUMENTATION RESOURCES
# ============================================================================

@mcp.resource(URI_PREFIX + "{tool_name}")
def tool_resource(tool_name: str) -> str:
    """Auto-generated documentation for a specific tool from its docstring."""
    try:
        resource = _tool_registry.get_resource(f"{URI_PREFIX}{tool_name}")
        return resource["text"]
    except KeyError:
        return f"# {tool_name}()\n\nTool not found."


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================

def _shutdown_handler(signum: int, frame: object) -> None:
    """Handle termination signals by exiting immediately.

    os._exit() is required because sys.exit() raises SystemExit,
    which asyncio's event loop catches and ignores. The server
    would survive SIGTERM until stdin closes.
    """
    os._exit(0)


def main() -> None:
    load_dotenv()
    configure_logging(get_log_level())
    signal.signal(signal.SIGTERM, _shutdown_handler)
    signal.signal(signal.SIGINT, _shutdown_handler)
    mcp.run()


if __name__ == "__main__":
    main()
