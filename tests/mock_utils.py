"""
Mock utilities for adapter and tool testing.

Helpers for building Google API errors and Gmail-style encoded payloads.
"""

import base64

from googleapiclient.errors import HttpError
from httplib2 import Response


def make_http_error(status: int, message: str = "Error") -> HttpError:
    """
    Create an HttpError for testing error handling.

    Args:
        status: HTTP status code (403, 404, 500, etc.)
        message: Error body

    Example:
        mock_api_chain(service, "files.get.execute", side_effect=make_http_error(404, "Not found"))
    """
    resp = Response({"status": status})
    return HttpError(resp, message.encode())


def b64url(data: str | bytes) -> str:
    """Encode the way Gmail does: URL-safe alphabet, padding stripped."""
    raw = data.encode("utf-8") if isinstance(data, str) else data
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")
