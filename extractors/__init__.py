"""
Extractors — Pure functions for content extraction.

No MCP awareness, no Google API calls. Just transform input → output.
Easily testable with fixtures.
"""

from .formatting import truncate, format_file_size
from .gmail import (
    decode_base64url,
    parse_message_part,
    extract_email,
    readable_body,
    get_header,
)
from .docs import parse_body, extract_text, extract_headings
from .slides import (
    parse_slide,
    extract_page_text,
    extract_speaker_notes,
    summarize_slide,
)
from .sheets import to_delimited

__all__ = [
    "truncate",
    "format_file_size",
    "decode_base64url",
    "parse_message_part",
    "extract_email",
    "readable_body",
    "get_header",
    "parse_body",
    "extract_text",
    "extract_headings",
    "parse_slide",
    "extract_page_text",
    "extract_speaker_notes",
    "summarize_slide",
    "to_delimited",
]
