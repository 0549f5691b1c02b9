"""
Directory adapter — Admin SDK Directory API wrapper.

Lists users with a bounded pagination loop. The impersonated identity
must be a Workspace admin.
"""

from typing import Any

from adapters.services import get_directory_service
from config import DIRECTORY_PAGE_SIZE, MAX_DIRECTORY_RESULTS
from errors import translate_errors
from logging_config import log_api_call, log_api_result

USER_FIELDS = (
    "users(primaryEmail,name,orgUnitPath,isAdmin,suspended,lastLoginTime,creationTime),"
    "nextPageToken"
)


@translate_errors
def fetch_users(
    identity: str,
    domain: str | None = None,
    query: str | None = None,
    max_results: int = 100,
) -> list[dict[str, Any]]:
    """
    List directory users ordered by email.

    Pages are requested until there is no continuation token or the cap is
    reached; each page asks only for what is still needed.

    Args:
        identity: Admin to impersonate
        domain: Restrict to one domain (otherwise the whole customer)
        query: Admin SDK search query (e.g. "orgUnitPath=/Engineering")
        max_results: Clamped to 1..500

    Raises:
        ReaderError: On API failure
    """
    max_results = max(1, min(max_results, MAX_DIRECTORY_RESULTS))
    service = get_directory_service(identity)

    users: list[dict[str, Any]] = []
    page_token: str | None = None

    while True:
        params: dict[str, Any] = {
            "maxResults": min(max_results - len(users), DIRECTORY_PAGE_SIZE),
            "orderBy": "email",
            "fields": USER_FIELDS,
        }
        # The API takes one scope: a domain, or the customer as a whole
        if domain:
            params["domain"] = domain
        else:
            params["customer"] = "my_customer"
        if query:
            params["query"] = query
        if page_token:
            params["pageToken"] = page_token

        log_api_call("admin", "users.list", domain=domain, query=query, pageToken=page_token)
        response = service.users().list(**params).execute()
        users.extend(response.get("users", []))

        page_token = response.get("nextPageToken")
        if not page_token or len(users) >= max_results:
            break

    log_api_result("admin", "users.list", len(users))
    return users[:max_results]
