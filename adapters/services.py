"""
Google API service initialization.

Shared by all adapters. Every call builds a fresh service bound to one
impersonated identity: services are never cached or shared across
identities, so credentials for one user cannot leak into another's call.

All services use a transport timeout (config.get_api_timeout) to prevent
indefinite hangs when Google APIs are slow or connections stall.
"""

import google_auth_httplib2
import httplib2

__all__ = [
    "get_gmail_service",
    "get_drive_service",
    "get_sheets_service",
    "get_docs_service",
    "get_slides_service",
    "get_calendar_service",
    "get_directory_service",
]

from google.auth.credentials import Credentials
from googleapiclient.discovery import build, Resource

from auth import create_credentials
from config import get_api_timeout


def _get_authorized_http(creds: Credentials) -> google_auth_httplib2.AuthorizedHttp:
    """Create authorized HTTP client with timeout."""
    http = httplib2.Http(timeout=get_api_timeout())
    return google_auth_httplib2.AuthorizedHttp(creds, http=http)


def _build(api: str, version: str, identity: str) -> Resource:
    creds = create_credentials(identity)
    return build(api, version, http=_get_authorized_http(creds), cache_discovery=False)


def get_gmail_service(identity: str) -> Resource:
    """Gmail API v1 service acting as `identity`."""
    return _build("gmail", "v1", identity)


def get_drive_service(identity: str) -> Resource:
    """Drive API v3 service acting as `identity`."""
    return _build("drive", "v3", identity)


def get_sheets_service(identity: str) -> Resource:
    """Sheets API v4 service acting as `identity`."""
    return _build("sheets", "v4", identity)


def get_docs_service(identity: str) -> Resource:
    """Docs API v1 service acting as `identity`."""
    return _build("docs", "v1", identity)


def get_slides_service(identity: str) -> Resource:
    """Slides API v1 service acting as `identity`."""
    return _build("slides", "v1", identity)


def get_calendar_service(identity: str) -> Resource:
    """Calendar API v3 service acting as `identity`."""
    return _build("calendar", "v3", identity)


def get_directory_service(identity: str) -> Resource:
    """Admin SDK Directory API service acting as `identity` (must be an admin)."""
    return _build("admin", "directory_v1", identity)
