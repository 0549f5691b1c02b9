"""
Gmail tools — search, read messages, list labels, fetch attachments.
"""

import base64

from adapters.gmail import search_messages, fetch_message, fetch_labels, fetch_attachment
from auth import resolve_identity
from config import BODY_LIMIT, BULK_LIMIT, MAX_INLINE_ATTACHMENT_BYTES
from extractors.drive import decode_content, is_readable_mime_type
from extractors.formatting import truncate, format_file_size
from extractors.gmail import (
    decode_base64url,
    extract_email,
    format_email,
    format_labels,
    format_search_entry,
    format_search_results,
    parse_message_part,
)
from models import (
    EmailAttachment,
    ErrorKind,
    ParsedEmail,
    ReaderError,
    ToolContent,
    ToolResult,
)

from .common import tool_boundary


def _message_link(message_id: str) -> str:
    return f"https://mail.google.com/mail/u/0/#all/{message_id}"


def _parse_payload(message: dict) -> ParsedEmail:
    payload = message.get("payload")
    if not payload:
        return ParsedEmail()
    try:
        return extract_email(parse_message_part(payload))
    except ValueError as e:
        raise ReaderError(
            ErrorKind.DECODE_ERROR,
            f"Malformed body data in message {message.get('id', '')}: {e}",
        ) from e


@tool_boundary("searching emails")
def search_emails(query: str, max_results: int = 10, user_email: str | None = None) -> ToolResult:
    """
    Search a user's Gmail with Gmail query syntax.

    Examples: 'from:boss@co.com subject:budget', 'is:unread newer_than:7d',
    'has:attachment filename:pdf'. Returns subject, sender, date and snippet
    for each hit.
    """
    identity = resolve_identity(user_email)
    total, messages = search_messages(identity, query, max_results)
    entries = [format_search_entry(m) for m in messages]
    return ToolResult.text(format_search_results(query, total, entries))


@tool_boundary("getting email")
def get_email(message_id: str, user_email: str | None = None) -> ToolResult:
    """
    Get the full content of one email by message ID.

    Returns headers, the readable body (plain text preferred, HTML stripped
    otherwise) and the attachment list. Use search_emails to find IDs.
    """
    identity = resolve_identity(user_email)
    message = fetch_message(identity, message_id)
    parsed = _parse_payload(message)
    return ToolResult.text(format_email(message, parsed, BODY_LIMIT))


@tool_boundary("listing labels")
def list_labels(user_email: str | None = None) -> ToolResult:
    """List all Gmail labels for a user, system labels first."""
    identity = resolve_identity(user_email)
    return ToolResult.text(format_labels(identity, fetch_labels(identity)))


def _find_attachment(parsed: ParsedEmail, attachment_id: str) -> EmailAttachment | None:
    for attachment in parsed.attachments:
        if attachment.attachment_id == attachment_id:
            return attachment
    return None


def _too_large(message_id: str, name: str, size: int) -> ToolResult:
    return ToolResult.error(
        f"Attachment {name} is {format_file_size(size)}, over the "
        f"{format_file_size(MAX_INLINE_ATTACHMENT_BYTES)} inline limit. "
        f"Open the message to download it: {_message_link(message_id)}"
    )


@tool_boundary("getting attachment")
def get_attachment(message_id: str, attachment_id: str, user_email: str | None = None) -> ToolResult:
    """
    Get the content of one email attachment.

    Images come back as image content, text-like files as text, anything
    else as an embedded binary resource. Attachments over 10 MB are not
    inlined; a link to the message is returned instead. Use get_email to
    find attachment IDs.
    """
    identity = resolve_identity(user_email)
    parsed = _parse_payload(fetch_message(identity, message_id))

    descriptor = _find_attachment(parsed, attachment_id)
    name = descriptor.filename if descriptor else "attachment"
    mime_type = descriptor.mime_type if descriptor else "application/octet-stream"

    if descriptor and descriptor.size > MAX_INLINE_ATTACHMENT_BYTES:
        return _too_large(message_id, name, descriptor.size)

    raw = fetch_attachment(identity, message_id, attachment_id)
    try:
        data = decode_base64url(raw.get("data") or "")
    except ValueError as e:
        raise ReaderError(ErrorKind.DECODE_ERROR, f"Malformed attachment data: {e}") from e

    if len(data) > MAX_INLINE_ATTACHMENT_BYTES:
        return _too_large(message_id, name, len(data))

    header = f"[Attachment: {name} ({mime_type}, {format_file_size(len(data))})]"

    if mime_type.startswith("image/"):
        return ToolResult(content=[
            ToolContent(kind="text", text=header),
            ToolContent(kind="image", data=base64.b64encode(data).decode("ascii"), mime_type=mime_type),
        ])

    if is_readable_mime_type(mime_type):
        return ToolResult.text(f"{header}\n\n{truncate(decode_content(data), BULK_LIMIT)}")

    return ToolResult(content=[
        ToolContent(kind="text", text=header),
        ToolContent(
            kind="resource",
            uri=f"gmail://messages/{message_id}/attachments/{attachment_id}",
            mime_type=mime_type,
            data=base64.b64encode(data).decode("ascii"),
        ),
    ])
