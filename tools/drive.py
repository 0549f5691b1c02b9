"""
Drive tools — search, read content, read metadata.

Content reads route on MIME type: Google-native files are exported,
text-like files are downloaded, binaries get a metadata summary.
"""

from adapters.drive import (
    CONTENT_ROUTING_FIELDS,
    download_file,
    export_file,
    fetch_file_metadata,
    search_files,
)
from auth import resolve_identity
from config import BULK_LIMIT
from extractors.drive import (
    decode_content,
    export_format_for,
    format_binary,
    format_downloaded,
    format_export_failure,
    format_exported,
    format_file_metadata,
    format_file_search,
    is_readable_mime_type,
)
from extractors.formatting import truncate
from logging_config import logger
from models import ReaderError, ToolResult

from .common import tool_boundary


@tool_boundary("searching Drive")
def search_drive_files(query: str, max_results: int = 10, user_email: str | None = None) -> ToolResult:
    """
    Search a user's Google Drive with Drive query syntax.

    Examples: "name contains 'budget'",
    "mimeType = 'application/vnd.google-apps.spreadsheet'",
    "modifiedTime > '2024-01-01'", "fullText contains 'quarterly report'".
    Combine clauses with 'and'.
    """
    identity = resolve_identity(user_email)
    return ToolResult.text(format_file_search(query, search_files(identity, query, max_results)))


@tool_boundary("reading file")
def get_file_content(file_id: str, user_email: str | None = None) -> ToolResult:
    """
    Read the content of a Drive file.

    Google Docs export as plain text, Sheets as CSV (first sheet only),
    Slides as plain text, Drawings as SVG. Text-based files are downloaded
    directly. Binary files (PDFs, images, ...) return metadata and a link.
    """
    identity = resolve_identity(user_email)
    meta = fetch_file_metadata(identity, file_id, fields=CONTENT_ROUTING_FIELDS)
    name = meta.get("name", "")
    mime_type = meta.get("mimeType")

    export = export_format_for(mime_type)
    if export:
        try:
            content = decode_content(export_file(identity, file_id, export.mime_type))
        except ReaderError as e:
            # Partial result: the caller still gets the view link
            logger.warning(f"Export of {file_id} as {export.mime_type} failed: {e.message}")
            return ToolResult.error(
                format_export_failure(export.label, name, e.message, meta.get("webViewLink"))
            )
        return ToolResult.text(format_exported(export.label, name, truncate(content, BULK_LIMIT)))

    if is_readable_mime_type(mime_type):
        content = decode_content(download_file(identity, file_id))
        return ToolResult.text(format_downloaded(name, mime_type or "", truncate(content, BULK_LIMIT)))

    return ToolResult.text(format_binary(meta))


@tool_boundary("getting file metadata")
def get_file_metadata(file_id: str, user_email: str | None = None) -> ToolResult:
    """Get detailed metadata (owners, permissions, links) for a Drive file without its content."""
    identity = resolve_identity(user_email)
    return ToolResult.text(format_file_metadata(fetch_file_metadata(identity, file_id)))
