"""
Docs tools — full document text and heading outline.
"""

from adapters.docs import fetch_document
from auth import resolve_identity
from config import BULK_LIMIT
from extractors.docs import extract_headings, format_document, format_outline, parse_body
from extractors.formatting import truncate
from models import ToolResult

from .common import tool_boundary


@tool_boundary("getting document")
def get_document(document_id: str, user_email: str | None = None) -> ToolResult:
    """
    Get the full text of a Google Doc.

    Tables render as TSV, inline images as [image], horizontal rules as ---.
    """
    identity = resolve_identity(user_email)
    doc = fetch_document(identity, document_id)
    text = format_document(doc.get("title"), document_id, parse_body(doc.get("body")))
    return ToolResult.text(truncate(text, BULK_LIMIT))


@tool_boundary("getting document structure")
def get_document_structure(document_id: str, user_email: str | None = None) -> ToolResult:
    """Get the heading outline of a Google Doc."""
    identity = resolve_identity(user_email)
    doc = fetch_document(identity, document_id)
    headings = extract_headings(parse_body(doc.get("body")))
    return ToolResult.text(format_outline(doc.get("title"), document_id, headings))
