"""
Shared presentation helpers — truncation and human-readable sizes.

Pure functions. Limits are passed in by callers (see config.BODY_LIMIT,
config.BULK_LIMIT) so nothing here reads configuration.
"""

import math

_UNITS = ("KB", "MB", "GB")


def truncate(text: str, limit: int) -> str:
    """
    Cut text to at most `limit` characters plus a marker.

    Text at or under the limit is returned unchanged. Longer text keeps its
    first `limit` characters followed by a marker naming the limit, e.g.
    "\\n\\n[... truncated at 50,000 characters]".
    """
    if len(text) <= limit:
        return text
    return f"{text[:limit]}\n\n[... truncated at {limit:,} characters]"


def format_file_size(value: int | float | str | None) -> str:
    """
    Render a byte count as B/KB/MB/GB.

    Accepts the numeric strings Drive and Gmail return. None, negatives and
    anything unparseable become "unknown size".
    """
    if value is None or isinstance(value, bool):
        return "unknown size"
    try:
        size = float(value)
    except (TypeError, ValueError):
        return "unknown size"
    if not math.isfinite(size) or size < 0:
        return "unknown size"

    if size < 1024:
        return f"{int(size)} B"
    for unit in _UNITS:
        size /= 1024
        if size < 1024 or unit == _UNITS[-1]:
            return f"{size:.1f} {unit}"
    return "unknown size"
