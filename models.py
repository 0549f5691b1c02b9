"""
Type definitions for gworkspace-reader.

Dataclasses defining the contracts between layers:
- Extractors parse raw API dicts into these tagged trees and walk them
- Adapters raise ReaderError on API failures
- Tools return ToolResult envelopes to the server

Everything here is request-scoped. Nothing is cached or persisted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ============================================================================
# ERROR TYPES
# ============================================================================

class ErrorKind(Enum):
    """Categories of errors for consistent handling."""
    CONFIGURATION = "configuration"      # Missing key path, identity, bad key file
    AUTH_EXPIRED = "auth_expired"        # Token rejected by Google
    NOT_FOUND = "not_found"              # Resource doesn't exist
    PERMISSION_DENIED = "permission_denied"  # No access, or delegation not granted
    RATE_LIMITED = "rate_limited"        # Hit API quota
    NETWORK_ERROR = "network_error"      # Connection failed or 5xx
    DECODE_ERROR = "decode_error"        # Malformed base64 or payload
    INVALID_INPUT = "invalid_input"      # Bad parameters
    TOO_LARGE = "too_large"              # Content over the inline ceiling
    UNKNOWN = "unknown"                  # Unexpected error


class ReaderError(Exception):
    """
    Structured error for consistent handling across layers.

    Adapters and auth raise these.
    Tools catch them at the handler boundary and turn them into error results.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for structured logging."""
        return {
            "error": True,
            "kind": self.kind.value,
            "message": self.message,
            **self.details,
        }


# ============================================================================
# TOOL RESULT ENVELOPE
# ============================================================================

@dataclass
class ToolContent:
    """
    One item of tool output.

    kind is "text", "image" or "resource". Images carry base64 data and a
    MIME type; resources carry a URI, MIME type and base64 blob.
    """
    kind: str
    text: str = ""
    data: str | None = None
    mime_type: str | None = None
    uri: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.kind == "text":
            return {"type": "text", "text": self.text}
        if self.kind == "image":
            return {"type": "image", "data": self.data, "mimeType": self.mime_type}
        return {
            "type": "resource",
            "resource": {"uri": self.uri, "mimeType": self.mime_type, "blob": self.data},
        }


@dataclass
class ToolResult:
    """
    Uniform result envelope returned by every tool handler.

    On failure, content holds exactly one text item and is_error is True.
    """
    content: list[ToolContent]
    is_error: bool = False

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=[ToolContent(kind="text", text=text)])

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(content=[ToolContent(kind="text", text=text)], is_error=True)

    @property
    def first_text(self) -> str:
        """Text of the first text item, or empty string."""
        for item in self.content:
            if item.kind == "text":
                return item.text
        return ""

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: content list plus isError only when set."""
        result: dict[str, Any] = {"content": [c.to_dict() for c in self.content]}
        if self.is_error:
            result["isError"] = True
        return result


# ============================================================================
# GMAIL TYPES
# ============================================================================

class PartKind(Enum):
    """Classification of a MIME part, decided once at parse time."""
    ATTACHMENT = "attachment"
    CONTAINER = "container"
    LEAF = "leaf"
    EMPTY = "empty"


@dataclass
class MailPart:
    """
    One node of a message's MIME tree.

    Only the fields relevant to the kind are populated: attachments carry
    filename/size/attachment_id, containers carry children, leaves carry
    body_data (still base64url-encoded).
    """
    kind: PartKind
    mime_type: str = ""
    filename: str = ""
    children: list["MailPart"] = field(default_factory=list)
    body_data: str | None = None
    size: int = 0
    attachment_id: str | None = None


@dataclass
class EmailAttachment:
    """Attachment descriptor. Content is fetched separately by attachment_id."""
    filename: str
    mime_type: str
    size: int
    attachment_id: str | None = None


@dataclass
class ParsedEmail:
    """Bodies and attachments pulled out of one MIME tree."""
    text_body: str | None = None
    html_body: str | None = None
    attachments: list[EmailAttachment] = field(default_factory=list)


# ============================================================================
# DOCS TYPES
# ============================================================================

class RunKind(Enum):
    TEXT = "text"
    INLINE_OBJECT = "inline_object"
    HORIZONTAL_RULE = "horizontal_rule"
    OTHER = "other"


@dataclass
class DocRun:
    """Paragraph element: a text run, inline object, rule, or something else."""
    kind: RunKind
    content: str = ""


@dataclass
class Paragraph:
    runs: list[DocRun] = field(default_factory=list)
    named_style: str | None = None


@dataclass
class DocTableCell:
    paragraphs: list[Paragraph] = field(default_factory=list)


@dataclass
class DocTable:
    rows: list[list[DocTableCell]] = field(default_factory=list)


class DocElementKind(Enum):
    PARAGRAPH = "paragraph"
    TABLE = "table"
    SECTION_BREAK = "section_break"
    OTHER = "other"


@dataclass
class DocElement:
    """Top-level structural element of a document body."""
    kind: DocElementKind
    paragraph: Paragraph | None = None
    table: DocTable | None = None


@dataclass
class Heading:
    """Heading pulled from a HEADING_n styled paragraph. level >= 1."""
    level: int
    text: str


# ============================================================================
# SLIDES TYPES
# ============================================================================

class ElementKind(Enum):
    SHAPE = "shape"
    TABLE = "table"
    GROUP = "group"
    WORD_ART = "word_art"
    OTHER = "other"


@dataclass
class PageElement:
    """
    Element on a slide or notes page.

    Shapes carry text and an optional placeholder type (TITLE, BODY, ...).
    Tables carry table_rows of cell text. Groups carry children.
    Word art carries rendered_text.
    """
    kind: ElementKind
    object_id: str = ""
    placeholder: str | None = None
    text: str = ""
    table_rows: list[list[str]] = field(default_factory=list)
    children: list["PageElement"] = field(default_factory=list)
    rendered_text: str = ""


@dataclass
class Slide:
    slide_id: str
    elements: list[PageElement] = field(default_factory=list)
    notes_elements: list[PageElement] = field(default_factory=list)


# ============================================================================
# SHEETS TYPES
# ============================================================================

# Cell values from Sheets API are strings, numbers, booleans, or None
CellValue = str | int | float | bool | None


@dataclass
class ValueRange:
    """A range of cell values. Rows may be ragged."""
    range: str
    values: list[list[CellValue]] = field(default_factory=list)
