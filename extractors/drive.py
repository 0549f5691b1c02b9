"""
Drive Extractor — export routing and report formatting for Drive files.

Decides how a file's content can be turned into text (export, direct
download, or metadata only) and formats listings. No API calls.
"""

from dataclasses import dataclass
from typing import Any

from .formatting import format_file_size

GOOGLE_PRESENTATION = "application/vnd.google-apps.presentation"


@dataclass(frozen=True)
class ExportFormat:
    mime_type: str
    label: str


# Google-native types and the format each is exported as
EXPORT_FORMATS: dict[str, ExportFormat] = {
    "application/vnd.google-apps.document": ExportFormat("text/plain", "Google Doc"),
    "application/vnd.google-apps.spreadsheet": ExportFormat("text/csv", "Google Sheet (first sheet only)"),
    GOOGLE_PRESENTATION: ExportFormat("text/plain", "Google Slides"),
    "application/vnd.google-apps.drawing": ExportFormat("image/svg+xml", "Google Drawing"),
}

# Non text/* types that are still safe to download and show as text
READABLE_MIME_TYPES = frozenset({
    "application/json",
    "application/xml",
    "application/javascript",
    "application/x-javascript",
    "application/typescript",
    "application/x-yaml",
})


def export_format_for(mime_type: str | None) -> ExportFormat | None:
    return EXPORT_FORMATS.get(mime_type or "")


def is_readable_mime_type(mime_type: str | None) -> bool:
    """True for text/* and the structured-text application types."""
    if not mime_type:
        return False
    return mime_type.startswith("text/") or mime_type in READABLE_MIME_TYPES


def decode_content(data: bytes | str) -> str:
    """Downloaded media arrives as bytes; decode leniently."""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def _owner_email(file: dict[str, Any]) -> str:
    owners = file.get("owners") or []
    if owners:
        return owners[0].get("emailAddress") or "unknown"
    return "unknown"


def format_file_entry(file: dict[str, Any], icon: str = "📄", show_type: bool = True) -> str:
    lines = [f"{icon} {file.get('name', '')}", f"   ID: {file.get('id', '')}"]
    if show_type:
        lines.append(f"   Type: {file.get('mimeType', '')}")
    lines.extend([
        f"   Modified: {file.get('modifiedTime', '')}",
        f"   Size: {format_file_size(file.get('size'))}",
        f"   Owner: {_owner_email(file)}",
        f"   Shared: {'yes' if file.get('shared') else 'no'}",
        f"   Link: {file.get('webViewLink') or 'N/A'}",
    ])
    return "\n".join(lines)


def format_file_search(query: str, files: list[dict[str, Any]]) -> str:
    if not files:
        return f'No files found for query: "{query}"'
    entries = [format_file_entry(f) for f in files]
    return f'Found {len(files)} file(s) for query: "{query}":\n\n' + "\n\n".join(entries)


def format_presentation_search(query: str | None, files: list[dict[str, Any]]) -> str:
    if not files:
        return f'No presentations found for query: "{query}"' if query else "No presentations found."
    entries = [format_file_entry(f, icon="📊", show_type=False) for f in files]
    header = (
        f'Found {len(files)} presentation(s) for query: "{query}":'
        if query
        else f"Found {len(files)} presentation(s):"
    )
    return header + "\n\n" + "\n\n".join(entries)


def format_exported(label: str, name: str, content: str) -> str:
    return f"[{label}: {name}]\n\n{content}"


def format_export_failure(label: str, name: str, reason: str, link: str | None) -> str:
    return (
        f"[{label}: {name}]\n\n"
        f"Failed to export: {reason}\n\n"
        f"The file may be too large to export (10 MB limit). View it at: {link or 'N/A'}"
    )


def format_downloaded(name: str, mime_type: str, content: str) -> str:
    return f"[File: {name} ({mime_type})]\n\n{content}"


def format_binary(file: dict[str, Any]) -> str:
    return (
        f"[Binary file: {file.get('name', '')}]\n"
        f"Type: {file.get('mimeType', '')}\n"
        f"Size: {format_file_size(file.get('size'))}\n"
        f"Link: {file.get('webViewLink') or 'N/A'}\n\n"
        "Cannot display binary content. Use the link to view in browser."
    )


def format_file_metadata(file: dict[str, Any]) -> str:
    """Full metadata view with owners and permissions."""
    text = (
        f"File: {file.get('name', '')}\n"
        f"ID: {file.get('id', '')}\n"
        f"Type: {file.get('mimeType', '')}\n"
        f"Size: {format_file_size(file.get('size'))}\n"
        f"Created: {file.get('createdTime', '')}\n"
        f"Modified: {file.get('modifiedTime', '')}\n"
        f"Starred: {'yes' if file.get('starred') else 'no'}\n"
        f"Trashed: {'yes' if file.get('trashed') else 'no'}\n"
        f"Shared: {'yes' if file.get('shared') else 'no'}\n"
        f"View link: {file.get('webViewLink') or 'N/A'}\n"
        f"Download link: {file.get('webContentLink') or 'N/A'}"
    )
    if file.get("description"):
        text += f"\nDescription: {file['description']}"

    owners = file.get("owners") or []
    if owners:
        text += "\n\nOwner(s):"
        for owner in owners:
            text += f"\n- {owner.get('displayName') or 'Unknown'} ({owner.get('emailAddress') or 'N/A'})"

    permissions = file.get("permissions") or []
    if permissions:
        text += "\n\nPermissions:"
        for perm in permissions:
            who = perm.get("emailAddress") or perm.get("type") or "Unknown"
            text += f"\n- {who}: {perm.get('role', '')}"

    return text
