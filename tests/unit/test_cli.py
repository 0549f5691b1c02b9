"""Tests for the command-line front end."""

import json
from unittest.mock import patch

import pytest

import cli
from models import ToolContent, ToolResult
from tools import TOOLS


class TestParser:

    def test_every_tool_has_a_command(self) -> None:
        assert set(cli.COMMANDS) == set(TOOLS)

    def test_common_flags_after_subcommand(self) -> None:
        args = cli.build_parser().parse_args(
            ["search_emails", "from:bob", "--max-results", "5", "--user", "carol@example.com", "--json"]
        )
        assert args.command == "search_emails"
        assert args.query == "from:bob"
        assert args.max_results == 5
        assert args.user == "carol@example.com"
        assert args.json is True

    def test_dashed_flags_map_to_handler_params(self) -> None:
        args = cli.build_parser().parse_args(
            ["read_sheet_range", "1sheet", "Sheet1!A1:B2", "--include-formulas"]
        )
        assert vars(args)["include_formulas"] is True
        assert vars(args)["range"] == "Sheet1!A1:B2"

    def test_variadic_arguments(self) -> None:
        args = cli.build_parser().parse_args(
            ["get_freebusy", "2026-01-05T00:00:00Z", "2026-01-06T00:00:00Z", "a@x.com", "b@x.com"]
        )
        assert args.emails == ["a@x.com", "b@x.com"]

    def test_unknown_command(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["send_email"])


class TestRun:

    def test_prints_text_and_forwards_args(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = cli.build_parser().parse_args(["get_event", "e1", "--calendar-id", "team", "--user", "bob@x.com"])
        with patch.dict(cli.TOOLS, {"get_event": lambda **kw: ToolResult.text(json.dumps(kw, sort_keys=True))}):
            code = cli.run(args)

        assert code == 0
        forwarded = json.loads(capsys.readouterr().out)
        assert forwarded == {"calendar_id": "team", "event_id": "e1", "user_email": "bob@x.com"}

    def test_error_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = cli.build_parser().parse_args(["list_labels"])
        with patch.dict(cli.TOOLS, {"list_labels": lambda **kw: ToolResult.error("Error listing labels: no")}):
            code = cli.run(args)

        assert code == 1
        assert capsys.readouterr().out.strip() == "Error listing labels: no"

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = cli.build_parser().parse_args(["list_labels", "--json"])
        with patch.dict(cli.TOOLS, {"list_labels": lambda **kw: ToolResult.text("labels")}):
            cli.run(args)

        assert json.loads(capsys.readouterr().out) == {"content": [{"type": "text", "text": "labels"}]}

    def test_binary_content_summarized(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = ToolResult(content=[
            ToolContent(kind="text", text="[Attachment: a.png (image/png, 3 B)]"),
            ToolContent(kind="image", data="AAEC", mime_type="image/png"),
        ])
        args = cli.build_parser().parse_args(["get_attachment", "m1", "a1"])
        with patch.dict(cli.TOOLS, {"get_attachment": lambda **kw: result}):
            cli.run(args)

        assert capsys.readouterr().out.splitlines() == [
            "[Attachment: a.png (image/png, 3 B)]",
            "[image content: image/png]",
        ]

    def test_missing_identity_end_to_end(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = cli.build_parser().parse_args(["list_calendars"])

        assert cli.run(args) == 1
        assert "GW_USER_EMAIL" in capsys.readouterr().out
