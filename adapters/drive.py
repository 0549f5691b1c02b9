"""
Drive adapter — Google Drive API v3 wrapper.

Search, metadata, export of native files, and direct download of stored
files. Shared drives are always included.
"""

from typing import Any, cast

from adapters.services import get_drive_service
from config import MAX_SEARCH_RESULTS
from errors import translate_errors
from logging_config import log_api_call, log_api_result

SEARCH_RESULT_FIELDS = "files(id,name,mimeType,modifiedTime,size,owners,webViewLink,shared)"

# Just enough to route content reads
CONTENT_ROUTING_FIELDS = "id,name,mimeType,size,webViewLink"

FILE_METADATA_FIELDS = (
    "id,name,mimeType,description,starred,trashed,parents,owners,"
    "permissions(emailAddress,role,type),createdTime,modifiedTime,size,"
    "webViewLink,webContentLink,shared,sharingUser"
)

PRESENTATION_MIME = "application/vnd.google-apps.presentation"


@translate_errors
def search_files(
    identity: str,
    query: str,
    max_results: int = 10,
    order_by: str | None = None,
) -> list[dict[str, Any]]:
    """
    Search for files in Drive.

    Args:
        identity: User to impersonate
        query: Drive query (e.g. "name contains 'budget'")
        max_results: Clamped to 1..100
        order_by: Optional Drive orderBy (e.g. "modifiedTime desc")

    Returns:
        File dicts with SEARCH_RESULT_FIELDS

    Raises:
        ReaderError: On API failure
    """
    max_results = max(1, min(max_results, MAX_SEARCH_RESULTS))
    service = get_drive_service(identity)

    params: dict[str, Any] = {
        "q": query,
        "fields": SEARCH_RESULT_FIELDS,
        "pageSize": max_results,
        "spaces": "drive",
        "supportsAllDrives": True,
        "includeItemsFromAllDrives": True,
    }
    if order_by:
        params["orderBy"] = order_by

    log_api_call("drive", "files.list", q=query, pageSize=max_results, orderBy=order_by)
    response = service.files().list(**params).execute()
    files = response.get("files", [])[:max_results]
    log_api_result("drive", "files.list", len(files))
    return cast(list[dict[str, Any]], files)


def search_presentation_files(
    identity: str,
    query: str | None = None,
    max_results: int = 10,
) -> list[dict[str, Any]]:
    """Search restricted to Slides files, most recently modified first."""
    mime_filter = f"mimeType = '{PRESENTATION_MIME}'"
    full_query = f"{mime_filter} and ({query})" if query else mime_filter
    return search_files(identity, full_query, max_results, order_by="modifiedTime desc")


@translate_errors
def fetch_file_metadata(identity: str, file_id: str, fields: str = FILE_METADATA_FIELDS) -> dict[str, Any]:
    """
    Get file metadata.

    Raises:
        ReaderError: On API failure
    """
    service = get_drive_service(identity)
    log_api_call("drive", "files.get", fileId=file_id)
    result = (
        service.files()
        .get(fileId=file_id, fields=fields, supportsAllDrives=True)
        .execute()
    )
    return cast(dict[str, Any], result)


@translate_errors
def export_file(identity: str, file_id: str, mime_type: str) -> bytes:
    """
    Export a Google-native file to the given MIME type.

    Drive refuses exports over 10 MB; that surfaces as a ReaderError.
    """
    service = get_drive_service(identity)
    log_api_call("drive", "files.export", fileId=file_id, mimeType=mime_type)
    result = service.files().export(fileId=file_id, mimeType=mime_type).execute()
    return cast(bytes, result)


@translate_errors
def download_file(identity: str, file_id: str) -> bytes:
    """Download a stored (non-native) file's bytes."""
    service = get_drive_service(identity)
    log_api_call("drive", "files.get_media", fileId=file_id)
    result = service.files().get_media(fileId=file_id, supportsAllDrives=True).execute()
    return cast(bytes, result)
