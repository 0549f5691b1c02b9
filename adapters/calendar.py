"""
Calendar adapter — Google Calendar API v3 wrapper.

Calendar list, event search/detail and free/busy queries as raw dicts.
Recurring events are expanded into single instances for searches.
"""

from typing import Any, cast

from adapters.services import get_calendar_service
from config import MAX_SEARCH_RESULTS
from errors import translate_errors
from logging_config import log_api_call, log_api_result


@translate_errors
def fetch_calendars(identity: str) -> list[dict[str, Any]]:
    service = get_calendar_service(identity)
    log_api_call("calendar", "calendarList.list")
    response = service.calendarList().list().execute()
    items = response.get("items", [])
    log_api_result("calendar", "calendarList.list", len(items))
    return cast(list[dict[str, Any]], items)


@translate_errors
def fetch_events(
    identity: str,
    calendar_id: str = "primary",
    query: str | None = None,
    time_min: str | None = None,
    time_max: str | None = None,
    max_results: int = 10,
) -> list[dict[str, Any]]:
    """
    List events in start-time order.

    Args:
        identity: User to impersonate
        calendar_id: Calendar to search ("primary" for the user's own)
        query: Free-text filter
        time_min: ISO 8601 lower bound (inclusive)
        time_max: ISO 8601 upper bound (exclusive)
        max_results: Clamped to 1..100

    Raises:
        ReaderError: On API failure
    """
    max_results = max(1, min(max_results, MAX_SEARCH_RESULTS))
    service = get_calendar_service(identity)

    params: dict[str, Any] = {
        "calendarId": calendar_id,
        "singleEvents": True,
        "orderBy": "startTime",
        "maxResults": max_results,
    }
    if query:
        params["q"] = query
    if time_min:
        params["timeMin"] = time_min
    if time_max:
        params["timeMax"] = time_max

    log_api_call("calendar", "events.list", calendarId=calendar_id, q=query,
                 timeMin=time_min, timeMax=time_max)
    response = service.events().list(**params).execute()
    items = response.get("items", [])
    log_api_result("calendar", "events.list", len(items))
    return cast(list[dict[str, Any]], items)


@translate_errors
def fetch_event(identity: str, calendar_id: str, event_id: str) -> dict[str, Any]:
    service = get_calendar_service(identity)
    log_api_call("calendar", "events.get", calendarId=calendar_id, eventId=event_id)
    result = service.events().get(calendarId=calendar_id, eventId=event_id).execute()
    return cast(dict[str, Any], result)


@translate_errors
def query_freebusy(
    identity: str,
    emails: list[str],
    time_min: str,
    time_max: str,
) -> dict[str, Any]:
    """
    Query busy intervals for each email.

    Returns:
        The response's "calendars" mapping (email -> {busy, errors})

    Raises:
        ReaderError: On API failure
    """
    service = get_calendar_service(identity)
    body = {
        "timeMin": time_min,
        "timeMax": time_max,
        "items": [{"id": email} for email in emails],
    }
    log_api_call("calendar", "freebusy.query", items=len(emails))
    response = service.freebusy().query(body=body).execute()
    return cast(dict[str, Any], response.get("calendars", {}))
