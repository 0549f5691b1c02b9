"""
Calendar Extractor — formatting for calendars, events and free/busy.

Pure functions over Calendar API v3 dicts.
"""

from typing import Any

NO_TITLE = "(no title)"


def _when(point: dict[str, Any] | None) -> str:
    """dateTime for timed events, date for all-day ones."""
    point = point or {}
    return point.get("dateTime") or point.get("date") or "N/A"


def _attendee_name(attendee: dict[str, Any]) -> str:
    return attendee.get("displayName") or attendee.get("email") or "unknown"


def format_calendar_list(identity: str, calendars: list[dict[str, Any]]) -> str:
    if not calendars:
        return "No calendars found."

    lines = []
    for cal in calendars:
        parts = [
            cal.get("summary") or "(unnamed)",
            f"ID: {cal.get('id', '')}",
            f"Role: {cal.get('accessRole', '')}",
            f"Timezone: {cal.get('timeZone') or 'N/A'}",
        ]
        if cal.get("primary"):
            parts.append("PRIMARY")
        if cal.get("description"):
            parts.append(f"Description: {cal['description']}")
        lines.append("- " + " | ".join(parts))

    return f"Calendars for {identity}:\n\n" + "\n".join(lines)


def format_event_entry(event: dict[str, Any]) -> str:
    parts = [
        f"📅 {event.get('summary') or NO_TITLE}",
        f"   ID: {event.get('id', '')}",
        f"   Start: {_when(event.get('start'))}",
        f"   End: {_when(event.get('end'))}",
    ]
    if event.get("location"):
        parts.append(f"   Location: {event['location']}")
    organizer = event.get("organizer")
    if organizer:
        parts.append(f"   Organizer: {organizer.get('displayName') or organizer.get('email', '')}")
    attendees = event.get("attendees") or []
    if attendees:
        listed = ", ".join(
            f"{_attendee_name(a)} ({a.get('responseStatus') or 'unknown'})" for a in attendees
        )
        parts.append(f"   Attendees: {listed}")
    if event.get("hangoutLink"):
        parts.append(f"   Meet: {event['hangoutLink']}")
    if event.get("status"):
        parts.append(f"   Status: {event['status']}")
    return "\n".join(parts)


def format_event_search(query: str | None, events: list[dict[str, Any]]) -> str:
    suffix = f' for query: "{query}"' if query else ""
    if not events:
        return f"No events found{suffix}."
    entries = [format_event_entry(e) for e in events]
    return f"Found {len(events)} event(s){suffix}:\n\n" + "\n\n".join(entries)


def format_event(event: dict[str, Any]) -> str:
    """
    Full event detail.

    Sections (attendees, description, conference, attachments, reminders)
    appear only when the event has them.
    """
    text = (
        f"Summary: {event.get('summary') or NO_TITLE}\n"
        f"Status: {event.get('status') or 'N/A'}\n"
        f"Start: {_when(event.get('start'))}\n"
        f"End: {_when(event.get('end'))}\n"
    )
    if event.get("location"):
        text += f"Location: {event['location']}\n"
    if event.get("visibility"):
        text += f"Visibility: {event['visibility']}\n"

    organizer = event.get("organizer")
    if organizer:
        text += f"Organizer: {organizer.get('displayName') or ''} <{organizer.get('email', '')}>\n"

    attendees = event.get("attendees") or []
    if attendees:
        text += f"\n--- Attendees ({len(attendees)}) ---\n"
        for a in attendees:
            text += f"- {_attendee_name(a)} ({a.get('responseStatus') or 'unknown'})"
            if a.get("organizer"):
                text += " [organizer]"
            if a.get("optional"):
                text += " [optional]"
            text += "\n"

    if event.get("description"):
        text += f"\n--- Description ---\n{event['description']}\n"

    recurrence = event.get("recurrence") or []
    if recurrence:
        text += f"\nRecurrence: {'; '.join(recurrence)}\n"

    if event.get("hangoutLink"):
        text += f"Meet link: {event['hangoutLink']}\n"
    entry_points = (event.get("conferenceData") or {}).get("entryPoints") or []
    if entry_points:
        text += "\n--- Conference ---\n"
        for ep in entry_points:
            text += f"- {ep.get('entryPointType', '')}: {ep.get('uri') or ep.get('label', '')}\n"

    attachments = event.get("attachments") or []
    if attachments:
        text += f"\n--- Attachments ({len(attachments)}) ---\n"
        for att in attachments:
            text += f"- {att.get('title', '')} ({att.get('mimeType', '')}) {att.get('fileUrl', '')}\n"

    reminders = event.get("reminders")
    if reminders:
        if reminders.get("useDefault"):
            text += "\nReminders: default\n"
        elif reminders.get("overrides"):
            text += "\nReminders:\n"
            for r in reminders["overrides"]:
                text += f"- {r.get('method', '')}: {r.get('minutes', '')} minutes before\n"

    text += f"\nCreated: {event.get('created') or 'N/A'}\n"
    text += f"Updated: {event.get('updated') or 'N/A'}\n"
    return text


def format_freebusy(
    emails: list[str],
    calendars: dict[str, Any],
    time_min: str,
    time_max: str,
) -> str:
    """One section per requested email, in request order."""
    results = []
    for email in emails:
        info = calendars.get(email)
        if not info:
            results.append(f"{email}: No data available")
            continue

        errors = info.get("errors") or []
        if errors:
            listed = ", ".join(f"{e.get('domain', '')}/{e.get('reason', '')}" for e in errors)
            results.append(f"{email}: Error — {listed}")
            continue

        busy = info.get("busy") or []
        if not busy:
            results.append(f"{email}: Free (no busy intervals)")
        else:
            intervals = "\n".join(f"  {b.get('start', '')} → {b.get('end', '')}" for b in busy)
            results.append(f"{email}: {len(busy)} busy interval(s)\n{intervals}")

    return f"Free/busy from {time_min} to {time_max}:\n\n" + "\n\n".join(results)
