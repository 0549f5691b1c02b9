"""
Shared helpers for tool handlers.

tool_boundary turns every handler into a single failure boundary: whatever
goes wrong inside (bad configuration, API errors, malformed payloads) comes
back as an error ToolResult, never as a raised exception.
"""

from functools import wraps
from typing import Callable, ParamSpec

from logging_config import logger
from models import ReaderError, ToolResult

P = ParamSpec("P")

ADMIN_HINT = (
    "Ensure the user_email is a Workspace admin and that domain-wide delegation "
    "includes the admin.directory.user.readonly scope."
)


def tool_boundary(
    action: str,
    hint: str | None = None,
) -> Callable[[Callable[P, ToolResult]], Callable[P, ToolResult]]:
    """
    Wrap a handler so failures become "Error {action}: {message}" results.

    Args:
        action: Gerund phrase for the message, e.g. "searching emails"
        hint: Optional remediation text appended after a blank line

    Example:
        @tool_boundary("getting document")
        def get_document(document_id: str, user_email: str | None = None) -> ToolResult:
            ...
    """

    def decorator(func: Callable[P, ToolResult]) -> Callable[P, ToolResult]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> ToolResult:
            try:
                return func(*args, **kwargs)
            except ReaderError as e:
                message = e.message
                logger.warning(f"[{func.__name__}] {e.kind.value}: {message}")
            except Exception as e:
                message = str(e) or type(e).__name__
                logger.exception(f"[{func.__name__}] unexpected error")

            text = f"Error {action}: {message}"
            if hint:
                text += f"\n\n{hint}"
            return ToolResult.error(text)

        return wrapper

    return decorator
