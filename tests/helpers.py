"""
Shared test helpers for gworkspace-reader.

Centralizes mock wiring patterns that repeat across test files.
"""

from __future__ import annotations

from unittest.mock import MagicMock, seal
from typing import Any


def mock_api_chain(
    mock_service: MagicMock,
    chain: str,
    response: Any = None,
    *,
    side_effect: Any = None,
) -> MagicMock:
    """Set up a mock Google API response for a chained call.

    Navigates the MagicMock attribute chain and sets return_value (or side_effect)
    on the final method. Returns the final mock method for adding assertions.

    Args:
        mock_service: The mocked service object (from a patch_*_service fixture)
        chain: Dot-separated chain. Each part except the last is treated as
               a callable method (traversed via .return_value).
               Examples: "files.get.execute", "users.messages.get.execute",
                         "spreadsheets.values.batchGet.execute"
        response: The return value for the final method
        side_effect: Alternative to response — sets side_effect instead

    Returns:
        The final mock method (for adding assertions like assert_called_once_with)

    Examples:
        # Simple:
        mock_api_chain(service, "files.get.execute", {"id": "f1"})
        # equivalent to: service.files().get().execute.return_value = {"id": "f1"}

        # Paginated responses:
        mock_api_chain(service, "users.list.execute", side_effect=[page1, page2])
    """
    parts = chain.split(".")
    obj = mock_service
    for part in parts[:-1]:
        obj = getattr(obj, part).return_value
    final = getattr(obj, parts[-1])
    if side_effect is not None:
        final.side_effect = side_effect
    elif response is not None:
        final.return_value = response
    return final


def api_method(mock_service: MagicMock, chain: str) -> MagicMock:
    """Return the mock for an API method so its call kwargs can be inspected.

    Example:
        api_method(service, "users.messages.list").assert_called_once_with(
            userId="me", q="is:unread", maxResults=10)
    """
    obj = mock_service
    parts = chain.split(".")
    for part in parts[:-1]:
        obj = getattr(obj, part).return_value
    return getattr(obj, parts[-1])


def seal_service(mock_service: MagicMock) -> None:
    """Seal a mock service after all mock_api_chain() calls.

    Prevents MagicMock from silently creating new attributes when
    production code renames an API method. Without seal, a test passes
    even if the adapter calls files().get_media() but the mock only
    set up files().get() — MagicMock returns a new MagicMock instead
    of raising.

    Must be called AFTER all mock_api_chain() calls for this service.
    """
    seal(mock_service)
