#!/usr/bin/env python3
"""
CLI interface for gworkspace-reader.

Usage:
    gwreader search_emails "from:alice budget"
    gwreader get_document 1abc123def456 --user someone@corp.com
    gwreader read_sheet_range 1abc... "Sheet1!A1:D10"

This provides the same functionality as the MCP tools but via command line,
making it accessible to agents that don't support MCP.
"""

import argparse
import json
import sys
from typing import Any

from dotenv import load_dotenv

from config import get_log_level
from logging_config import configure_logging
from tools import TOOLS

# Positional and optional arguments per tool. Each entry is (flags, argparse kwargs).
_ArgSpec = tuple[tuple[str, ...], dict[str, Any]]

_MAX = (("--max-results",), {"type": int, "default": 10, "help": "Maximum results (default: 10)"})
_QUERY_OPT = (("--query",), {"help": "Optional query"})

COMMANDS: dict[str, list[_ArgSpec]] = {
    "search_emails": [(("query",), {"help": "Gmail search query"}), _MAX],
    "get_email": [(("message_id",), {})],
    "list_labels": [],
    "get_attachment": [(("message_id",), {}), (("attachment_id",), {})],
    "search_drive_files": [(("query",), {"help": "Drive query"}), _MAX],
    "get_file_content": [(("file_id",), {})],
    "get_file_metadata": [(("file_id",), {})],
    "get_spreadsheet": [(("spreadsheet_id",), {})],
    "read_sheet_range": [
        (("spreadsheet_id",), {}),
        (("range",), {"help": "A1 range, e.g. 'Sheet1!A1:D10'"}),
        (("--include-formulas",), {"action": "store_true"}),
    ],
    "batch_read_sheet_ranges": [(("spreadsheet_id",), {}), (("ranges",), {"nargs": "+"})],
    "get_document": [(("document_id",), {})],
    "get_document_structure": [(("document_id",), {})],
    "list_calendars": [],
    "search_events": [
        (("--calendar-id",), {"default": "primary"}),
        _QUERY_OPT,
        (("--time-min",), {"help": "ISO 8601 start"}),
        (("--time-max",), {"help": "ISO 8601 end"}),
        _MAX,
    ],
    "get_event": [(("event_id",), {}), (("--calendar-id",), {"default": "primary"})],
    "get_freebusy": [
        (("time_min",), {}),
        (("time_max",), {}),
        (("emails",), {"nargs": "+"}),
    ],
    "search_presentations": [_QUERY_OPT, _MAX],
    "get_presentation": [(("presentation_id",), {})],
    "get_slide": [(("presentation_id",), {}), (("slide_id",), {})],
    "list_users": [
        (("--domain",), {}),
        _QUERY_OPT,
        (("--max-results",), {"type": int, "default": 100, "help": "Maximum users (default: 100)"}),
    ],
}

# argparse namespace keys that are not handler parameters
_NON_HANDLER_KEYS = {"command", "user", "json"}


def run(args: argparse.Namespace) -> int:
    """Invoke the chosen handler and print its output. Returns the exit code."""
    handler = TOOLS[args.command]
    kwargs = {k: v for k, v in vars(args).items() if k not in _NON_HANDLER_KEYS}
    result = handler(user_email=args.user, **kwargs)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        for item in result.content:
            if item.kind == "text":
                print(item.text)
            else:
                print(f"[{item.kind} content: {item.mime_type}]")
    return 1 if result.is_error else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Read-only Google Workspace CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    gwreader search_emails "is:unread newer_than:7d"
    gwreader get_file_content 1abc123def456
    gwreader get_freebusy 2026-01-05T00:00:00Z 2026-01-06T00:00:00Z alice@corp.com bob@corp.com
    gwreader list_users --domain corp.com --user admin@corp.com
""",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--user", help="User to impersonate (default: $GW_USER_EMAIL)")
    common.add_argument("--json", action="store_true", help="Print the raw result envelope")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, arg_specs in COMMANDS.items():
        doc = (TOOLS[name].__doc__ or "").strip().split("\n")[0]
        sub = subparsers.add_parser(name, help=doc, parents=[common])
        for flags, kwargs in arg_specs:
            sub.add_argument(*flags, **kwargs)

    return parser


def main() -> None:
    load_dotenv()
    configure_logging(get_log_level())
    args = build_parser().parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
