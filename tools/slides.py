"""
Slides tools — find presentations, overview them, read single slides.
"""

from adapters.drive import search_presentation_files
from adapters.slides import fetch_presentation, fetch_slide
from auth import resolve_identity
from config import BULK_LIMIT
from extractors.drive import format_presentation_search
from extractors.formatting import truncate
from extractors.slides import format_presentation, format_slide, parse_slide
from models import ToolResult

from .common import tool_boundary


@tool_boundary("searching presentations")
def search_presentations(
    query: str | None = None,
    max_results: int = 10,
    user_email: str | None = None,
) -> ToolResult:
    """
    Search for Google Slides presentations, most recently modified first.

    Without a query, lists recent presentations. Examples:
    "name contains 'Q4'", "fullText contains 'roadmap'".
    """
    identity = resolve_identity(user_email)
    files = search_presentation_files(identity, query, max_results)
    return ToolResult.text(format_presentation_search(query, files))


@tool_boundary("getting presentation")
def get_presentation(presentation_id: str, user_email: str | None = None) -> ToolResult:
    """
    Get a presentation's title, page size and a one-line summary per slide
    (ID, title, subtitle, notes indicator).
    """
    identity = resolve_identity(user_email)
    presentation = fetch_presentation(identity, presentation_id)
    return ToolResult.text(format_presentation(presentation, presentation_id))


@tool_boundary("getting slide")
def get_slide(presentation_id: str, slide_id: str, user_email: str | None = None) -> ToolResult:
    """
    Get all text on one slide: shapes, tables (as TSV), grouped elements
    and speaker notes. Use get_presentation to find slide IDs.
    """
    identity = resolve_identity(user_email)
    raw = fetch_slide(identity, presentation_id, slide_id)
    slide = parse_slide(raw)
    # pages.get may omit objectId when fields are filtered
    slide.slide_id = slide.slide_id or slide_id
    return ToolResult.text(truncate(format_slide(slide), BULK_LIMIT))
