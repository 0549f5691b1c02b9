"""
Directory Extractor — formatting for Admin SDK user listings.
"""

from typing import Any


def format_user(user: dict[str, Any]) -> str:
    name = user.get("name") or {}
    full_name = f"{name.get('givenName') or ''} {name.get('familyName') or ''}".strip()
    return (
        f"- {user.get('primaryEmail') or ''} ({full_name}) — "
        f"OU: {user.get('orgUnitPath') or '/'}, "
        f"Admin: {'yes' if user.get('isAdmin') else 'no'}, "
        f"Suspended: {'yes' if user.get('suspended') else 'no'}, "
        f"Last login: {user.get('lastLoginTime') or 'Never'}, "
        f"Created: {user.get('creationTime') or ''}"
    )


def format_users(users: list[dict[str, Any]]) -> str:
    if not users:
        return "No users found."
    return f"Found {len(users)} user(s):\n\n" + "\n".join(format_user(u) for u in users)
