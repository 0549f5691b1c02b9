"""
Gmail adapter — Gmail API wrapper.

Lists and fetches messages, labels and attachment bodies as raw dicts.
Parsing and formatting live in extractors/gmail.py.
"""

from typing import Any, cast

from adapters.services import get_gmail_service
from config import MAX_SEARCH_RESULTS
from errors import translate_errors
from logging_config import log_api_call, log_api_result

# Headers fetched for search results — enough for a one-line summary
SEARCH_HEADERS = ["From", "To", "Subject", "Date"]


@translate_errors
def search_messages(
    identity: str,
    query: str,
    max_results: int = 10,
) -> tuple[int, list[dict[str, Any]]]:
    """
    Search messages and fetch summary metadata for each hit.

    Detail fetches run one after another, in list order.

    Args:
        identity: User to impersonate
        query: Gmail search syntax (e.g. "from:boss is:unread")
        max_results: Clamped to 1..100

    Returns:
        (resultSizeEstimate, metadata-format message dicts)

    Raises:
        ReaderError: On API failure
    """
    max_results = max(1, min(max_results, MAX_SEARCH_RESULTS))
    service = get_gmail_service(identity)

    log_api_call("gmail", "messages.list", q=query, maxResults=max_results)
    response = (
        service.users()
        .messages()
        .list(userId="me", q=query, maxResults=max_results)
        .execute()
    )
    refs = [m for m in response.get("messages", []) if m.get("id")]

    messages = []
    for ref in refs:
        detail = (
            service.users()
            .messages()
            .get(
                userId="me",
                id=ref["id"],
                format="metadata",
                metadataHeaders=SEARCH_HEADERS,
            )
            .execute()
        )
        messages.append(detail)

    log_api_result("gmail", "messages.list", len(messages))
    return response.get("resultSizeEstimate") or len(messages), messages


@translate_errors
def fetch_message(identity: str, message_id: str) -> dict[str, Any]:
    """
    Fetch a single message in full format.

    Raises:
        ReaderError: On API failure
    """
    service = get_gmail_service(identity)
    log_api_call("gmail", "messages.get", id=message_id)
    result = (
        service.users()
        .messages()
        .get(userId="me", id=message_id, format="full")
        .execute()
    )
    return cast(dict[str, Any], result)


@translate_errors
def fetch_labels(identity: str) -> list[dict[str, Any]]:
    service = get_gmail_service(identity)
    log_api_call("gmail", "labels.list")
    response = service.users().labels().list(userId="me").execute()
    labels = response.get("labels", [])
    log_api_result("gmail", "labels.list", len(labels))
    return cast(list[dict[str, Any]], labels)


@translate_errors
def fetch_attachment(identity: str, message_id: str, attachment_id: str) -> dict[str, Any]:
    """
    Fetch an attachment body.

    Returns:
        Dict with "data" (base64url) and "size"

    Raises:
        ReaderError: On API failure
    """
    service = get_gmail_service(identity)
    log_api_call("gmail", "attachments.get", messageId=message_id, id=attachment_id)
    result = (
        service.users()
        .messages()
        .attachments()
        .get(userId="me", messageId=message_id, id=attachment_id)
        .execute()
    )
    return cast(dict[str, Any], result)
