"""
Gmail Extractor — Pure functions for walking MIME trees and formatting mail.

Raw API payload dicts are parsed once into MailPart nodes; the walk then
works on the tagged tree. No API calls, no MCP awareness.
"""

import base64
from typing import Any

from html_convert import html_to_text
from models import MailPart, PartKind, ParsedEmail, EmailAttachment

from .formatting import truncate, format_file_size

# Deeper nesting than this is treated as empty (forwarded-in-forwarded chains
# rarely pass 10)
MAX_PART_DEPTH = 64

NO_BODY_TEXT = "(No readable body content)"
NO_SUBJECT = "(no subject)"


# =============================================================================
# DECODING
# =============================================================================


def decode_base64url(data: str) -> bytes:
    """
    Decode URL-safe base64 as Gmail emits it.

    Missing padding is tolerated. Characters outside the URL-safe alphabet
    raise binascii.Error (a ValueError) rather than being skipped.
    """
    padded = data + "=" * (-len(data) % 4)
    standard = padded.replace("-", "+").replace("_", "/")
    return base64.b64decode(standard, validate=True)


def _decode_text(data: str) -> str:
    return decode_base64url(data).decode("utf-8", errors="replace")


# =============================================================================
# PARSING
# =============================================================================


def parse_message_part(raw: dict[str, Any], depth: int = 0) -> MailPart:
    """
    Classify one raw payload part and, for containers, its children.

    Precedence: a non-empty filename makes it an attachment, then non-empty
    parts make it a container, then non-empty body data makes it a leaf.
    """
    mime_type = raw.get("mimeType") or ""
    filename = raw.get("filename") or ""
    body = raw.get("body") or {}

    if filename:
        try:
            size = int(body.get("size") or 0)
        except (TypeError, ValueError):
            size = 0
        return MailPart(
            kind=PartKind.ATTACHMENT,
            mime_type=mime_type,
            filename=filename,
            size=size,
            attachment_id=body.get("attachmentId") or None,
        )

    parts = raw.get("parts") or []
    if parts:
        if depth >= MAX_PART_DEPTH:
            return MailPart(kind=PartKind.EMPTY, mime_type=mime_type)
        return MailPart(
            kind=PartKind.CONTAINER,
            mime_type=mime_type,
            children=[parse_message_part(p, depth + 1) for p in parts],
        )

    data = body.get("data")
    if data:
        return MailPart(kind=PartKind.LEAF, mime_type=mime_type, body_data=data)

    return MailPart(kind=PartKind.EMPTY, mime_type=mime_type)


# =============================================================================
# EXTRACTION
# =============================================================================


def extract_email(root: MailPart) -> ParsedEmail:
    """
    Walk a MIME tree depth-first and pull out bodies and attachments.

    The first text/plain leaf and the first text/html leaf win; later ones
    are ignored. Attachments are never read as bodies.

    Raises:
        ValueError: a leaf carries malformed base64url data
    """
    result = ParsedEmail()
    _walk(root, result)
    return result


def _walk(part: MailPart, result: ParsedEmail) -> None:
    if part.kind == PartKind.ATTACHMENT:
        result.attachments.append(
            EmailAttachment(
                filename=part.filename,
                mime_type=part.mime_type,
                size=part.size,
                attachment_id=part.attachment_id,
            )
        )
    elif part.kind == PartKind.CONTAINER:
        for child in part.children:
            _walk(child, result)
    elif part.kind == PartKind.LEAF and part.body_data:
        if part.mime_type == "text/plain" and result.text_body is None:
            result.text_body = _decode_text(part.body_data)
        elif part.mime_type == "text/html" and result.html_body is None:
            result.html_body = _decode_text(part.body_data)


def readable_body(parsed: ParsedEmail) -> str:
    """Plain text if present, else HTML stripped to text, else a placeholder."""
    if parsed.text_body:
        return parsed.text_body
    if parsed.html_body:
        return html_to_text(parsed.html_body)
    return NO_BODY_TEXT


def get_header(headers: list[dict[str, Any]] | None, name: str) -> str:
    """Case-insensitive header lookup. Empty string if absent."""
    wanted = name.lower()
    for header in headers or []:
        if (header.get("name") or "").lower() == wanted:
            return header.get("value") or ""
    return ""


# =============================================================================
# FORMATTING
# =============================================================================


def format_search_entry(message: dict[str, Any]) -> str:
    """One search hit from a metadata-format message."""
    headers = (message.get("payload") or {}).get("headers")
    subject = get_header(headers, "Subject") or NO_SUBJECT
    return (
        f"📧 {subject}\n"
        f"   ID: {message.get('id', '')}\n"
        f"   From: {get_header(headers, 'From')}\n"
        f"   To: {get_header(headers, 'To')}\n"
        f"   Date: {get_header(headers, 'Date')}\n"
        f"   Preview: {message.get('snippet') or ''}"
    )


def format_search_results(query: str, total: int, entries: list[str]) -> str:
    if not entries:
        return f'No messages found for query: "{query}"'
    header = f'Found {total} result(s) for query: "{query}" (showing {len(entries)}):'
    return header + "\n\n" + "\n\n".join(entries)


def format_attachment_line(attachment: EmailAttachment) -> str:
    line = f"- {attachment.filename} ({attachment.mime_type}, {format_file_size(attachment.size)})"
    if attachment.attachment_id:
        line += f" [attachment_id: {attachment.attachment_id}]"
    return line


def format_email(message: dict[str, Any], parsed: ParsedEmail, body_limit: int) -> str:
    """
    Full message view: headers, readable body, attachment list.

    Args:
        message: Full-format message dict (for headers and labels)
        parsed: Result of extract_email on its payload
        body_limit: Character ceiling for the body section
    """
    headers = (message.get("payload") or {}).get("headers")
    cc = get_header(headers, "Cc")

    lines = [
        f"From: {get_header(headers, 'From')}",
        f"To: {get_header(headers, 'To')}",
    ]
    if cc:
        lines.append(f"Cc: {cc}")
    lines.extend([
        f"Subject: {get_header(headers, 'Subject') or NO_SUBJECT}",
        f"Date: {get_header(headers, 'Date')}",
        f"Labels: {', '.join(message.get('labelIds') or [])}",
    ])

    text = "\n".join(lines) + "\n\n--- Body ---\n\n" + truncate(readable_body(parsed), body_limit)

    if parsed.attachments:
        text += f"\n\n--- Attachments ({len(parsed.attachments)}) ---\n"
        for attachment in parsed.attachments:
            text += "\n" + format_attachment_line(attachment)

    return text


def sort_labels(labels: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """System labels first, then the rest alphabetically (case-insensitive)."""
    return sorted(
        labels,
        key=lambda label: (label.get("type") != "system", (label.get("name") or "").lower()),
    )


def format_labels(identity: str, labels: list[dict[str, Any]]) -> str:
    if not labels:
        return "No labels found."

    lines = []
    for label in sort_labels(labels):
        parts = [f"{label.get('name', '')} ({label.get('type', 'user')})"]
        if label.get("messagesTotal") is not None:
            parts.append(f"messages: {label['messagesTotal']}")
        if label.get("messagesUnread") is not None:
            parts.append(f"unread: {label['messagesUnread']}")
        lines.append(f"- [{label.get('id', '')}] {', '.join(parts)}")

    return f"Gmail labels for {identity}:\n\n" + "\n".join(lines)
