"""
Calendar tools — calendars, events and free/busy.
"""

from adapters.calendar import fetch_calendars, fetch_event, fetch_events, query_freebusy
from auth import resolve_identity
from extractors.calendar import (
    format_calendar_list,
    format_event,
    format_event_search,
    format_freebusy,
)
from models import ErrorKind, ReaderError, ToolResult

from .common import tool_boundary


@tool_boundary("listing calendars")
def list_calendars(user_email: str | None = None) -> ToolResult:
    """List the calendars a user can see, with role, time zone and primary flag."""
    identity = resolve_identity(user_email)
    return ToolResult.text(format_calendar_list(identity, fetch_calendars(identity)))


@tool_boundary("searching events")
def search_events(
    calendar_id: str = "primary",
    query: str | None = None,
    time_min: str | None = None,
    time_max: str | None = None,
    max_results: int = 10,
    user_email: str | None = None,
) -> ToolResult:
    """
    Search or list events on a calendar within an optional time range.

    Recurring events are expanded into instances. Times are ISO 8601,
    e.g. '2026-01-01T00:00:00Z'.
    """
    identity = resolve_identity(user_email)
    events = fetch_events(identity, calendar_id, query, time_min, time_max, max_results)
    return ToolResult.text(format_event_search(query, events))


@tool_boundary("getting event")
def get_event(event_id: str, calendar_id: str = "primary", user_email: str | None = None) -> ToolResult:
    """
    Get full details of one event: attendees with RSVP status, description,
    recurrence, conference links, attachments, reminders and timestamps.
    """
    identity = resolve_identity(user_email)
    return ToolResult.text(format_event(fetch_event(identity, calendar_id, event_id)))


@tool_boundary("querying free/busy")
def get_freebusy(
    emails: list[str],
    time_min: str,
    time_max: str,
    user_email: str | None = None,
) -> ToolResult:
    """Get busy intervals for one or more people over a time range."""
    if not emails:
        raise ReaderError(ErrorKind.INVALID_INPUT, "emails must contain at least one address")
    identity = resolve_identity(user_email)
    calendars = query_freebusy(identity, emails, time_min, time_max)
    return ToolResult.text(format_freebusy(emails, calendars, time_min, time_max))
