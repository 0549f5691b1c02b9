"""
Directory tools — Workspace user listing (admin only).
"""

from adapters.directory import fetch_users
from auth import resolve_identity
from extractors.directory import format_users
from models import ToolResult

from .common import ADMIN_HINT, tool_boundary


@tool_boundary("listing users", hint=ADMIN_HINT)
def list_users(
    domain: str | None = None,
    query: str | None = None,
    max_results: int = 100,
    user_email: str | None = None,
) -> ToolResult:
    """
    List users in the Workspace organization. user_email must be an admin.

    Query uses Admin SDK syntax, e.g. 'orgUnitPath=/Engineering', 'name:John'.
    """
    identity = resolve_identity(user_email)
    return ToolResult.text(format_users(fetch_users(identity, domain, query, max_results)))
