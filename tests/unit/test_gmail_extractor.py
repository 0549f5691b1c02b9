"""
Tests for Gmail extractor.

Tests pure extraction functions with no API calls.
"""

import binascii

import pytest
from inline_snapshot import snapshot

from models import EmailAttachment, MailPart, PartKind, ParsedEmail
from extractors.gmail import (
    MAX_PART_DEPTH,
    NO_BODY_TEXT,
    decode_base64url,
    extract_email,
    format_email,
    format_labels,
    format_search_entry,
    format_search_results,
    get_header,
    parse_message_part,
    readable_body,
    sort_labels,
)
from tests.conftest import load_fixture
from tests.mock_utils import b64url


class TestDecodeBase64Url:
    """URL-safe base64 as Gmail emits it."""

    @pytest.mark.parametrize("raw", [
        b"",
        b"a",
        b"ab",
        b"abc",
        "héllo wörld".encode(),
        bytes(range(256)),
        b"\xfb\xff\xfe",  # encodes with - and _
    ])
    def test_inverse_of_unpadded_urlsafe_encoding(self, raw: bytes) -> None:
        """Decoding undoes URL-safe encoding with padding stripped."""
        assert decode_base64url(b64url(raw)) == raw

    def test_padded_input_accepted(self) -> None:
        assert decode_base64url("YQ==") == b"a"

    @pytest.mark.parametrize("bad", ["a!b", "@@@@", "abc$"])
    def test_malformed_raises(self, bad: str) -> None:
        """Characters outside the alphabet raise instead of being skipped."""
        with pytest.raises(binascii.Error):
            decode_base64url(bad)

    def test_malformed_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode_base64url("*")


class TestParseMessagePart:
    """Classification precedence: filename, parts, body data."""

    def test_filename_wins_over_parts(self) -> None:
        part = parse_message_part({
            "mimeType": "application/pdf",
            "filename": "x.pdf",
            "body": {"size": 10, "attachmentId": "att1"},
            "parts": [{"mimeType": "text/plain", "body": {"data": b64url("no")}}],
        })
        assert part.kind == PartKind.ATTACHMENT
        assert part.size == 10
        assert part.attachment_id == "att1"
        assert part.children == []

    def test_container(self) -> None:
        part = parse_message_part({
            "mimeType": "multipart/alternative",
            "parts": [{"mimeType": "text/plain", "body": {"data": b64url("hi")}}],
        })
        assert part.kind == PartKind.CONTAINER
        assert [c.kind for c in part.children] == [PartKind.LEAF]

    def test_empty_parts_with_data_is_leaf(self) -> None:
        part = parse_message_part({"mimeType": "text/plain", "parts": [], "body": {"data": "aGk"}})
        assert part.kind == PartKind.LEAF
        assert part.body_data == "aGk"

    def test_nothing_is_empty(self) -> None:
        assert parse_message_part({"mimeType": "text/plain", "body": {"size": 0}}).kind == PartKind.EMPTY

    def test_unparseable_size_is_zero(self) -> None:
        part = parse_message_part({"filename": "a.txt", "body": {"size": "lots"}})
        assert part.size == 0

    def test_depth_guard_stops_descent(self) -> None:
        """Nesting past the limit is treated as empty, not an error."""
        raw: dict = {"mimeType": "text/plain", "body": {"data": b64url("deep")}}
        for _ in range(MAX_PART_DEPTH + 5):
            raw = {"mimeType": "multipart/mixed", "parts": [raw]}

        parsed = extract_email(parse_message_part(raw))
        assert parsed.text_body is None


class TestExtractEmail:
    """MIME tree walk against a realistic multipart message."""

    def test_first_plain_body_wins(self) -> None:
        """The forwarded message's plain part does not replace the outer one."""
        message = load_fixture("gmail", "mixed_message")
        parsed = extract_email(parse_message_part(message["payload"]))

        assert parsed.text_body == "Hi Alice,\n\nThe Q3 numbers are attached.\n\nBob"
        assert parsed.html_body == "<p>Hi Alice,</p><p>The <b>Q3</b> numbers are attached.</p><p>Bob</p>"

    def test_attachments_in_tree_order(self) -> None:
        message = load_fixture("gmail", "mixed_message")
        parsed = extract_email(parse_message_part(message["payload"]))

        assert parsed.attachments == [
            EmailAttachment("q3-report.pdf", "application/pdf", 2048, "ANGjdJ8-report"),
            EmailAttachment("chart.png", "image/png", 1572864, "ANGjdJ8-chart"),
        ]

    def test_attachment_never_read_as_body(self) -> None:
        root = parse_message_part({
            "mimeType": "multipart/mixed",
            "parts": [
                {"mimeType": "text/plain", "filename": "notes.txt", "body": {"data": b64url("attached")}},
            ],
        })
        parsed = extract_email(root)
        assert parsed.text_body is None
        assert [a.filename for a in parsed.attachments] == ["notes.txt"]

    def test_malformed_leaf_raises(self) -> None:
        root = MailPart(kind=PartKind.LEAF, mime_type="text/plain", body_data="!!!!")
        with pytest.raises(ValueError):
            extract_email(root)


class TestReadableBody:
    """Plain, then HTML, then a placeholder."""

    def test_prefers_plain(self) -> None:
        assert readable_body(ParsedEmail(text_body="plain", html_body="<p>html</p>")) == "plain"

    def test_html_fallback(self) -> None:
        message = load_fixture("gmail", "html_only")
        parsed = extract_email(parse_message_part(message["payload"]))
        assert readable_body(parsed) == "Only & HTML\nbody"

    def test_placeholder(self) -> None:
        assert readable_body(ParsedEmail()) == NO_BODY_TEXT


class TestGetHeader:

    def test_case_insensitive(self) -> None:
        headers = load_fixture("gmail", "mixed_message")["payload"]["headers"]
        assert get_header(headers, "Cc") == "carol@example.com"
        assert get_header(headers, "SUBJECT") == "Q3 numbers"

    def test_missing(self) -> None:
        assert get_header([], "From") == ""
        assert get_header(None, "From") == ""


class TestFormatting:
    """Rendered views for search, read and labels."""

    def test_search_entry(self) -> None:
        message = {
            "id": "m1",
            "snippet": "see you then",
            "payload": {"headers": [
                {"name": "From", "value": "bob@example.com"},
                {"name": "To", "value": "alice@example.com"},
                {"name": "Date", "value": "Mon, 5 Jan 2026"},
            ]},
        }
        assert format_search_entry(message) == snapshot("""\
📧 (no subject)
   ID: m1
   From: bob@example.com
   To: alice@example.com
   Date: Mon, 5 Jan 2026
   Preview: see you then\
""")

    def test_search_results_empty(self) -> None:
        assert format_search_results("is:starred", 0, []) == 'No messages found for query: "is:starred"'

    def test_search_results_header(self) -> None:
        text = format_search_results("budget", 42, ["a", "b"])
        assert text == 'Found 42 result(s) for query: "budget" (showing 2):\n\na\n\nb'

    def test_full_email(self) -> None:
        message = load_fixture("gmail", "mixed_message")
        parsed = extract_email(parse_message_part(message["payload"]))

        assert format_email(message, parsed, body_limit=50_000) == snapshot("""\
From: Bob Builder <bob@example.com>
To: alice@example.com
Cc: carol@example.com
Subject: Q3 numbers
Date: Mon, 5 Jan 2026 10:00:00 +0000
Labels: INBOX, IMPORTANT

--- Body ---

Hi Alice,

The Q3 numbers are attached.

Bob

--- Attachments (2) ---

- q3-report.pdf (application/pdf, 2.0 KB) [attachment_id: ANGjdJ8-report]
- chart.png (image/png, 1.5 MB) [attachment_id: ANGjdJ8-chart]\
""")

    def test_email_without_subject_or_cc(self) -> None:
        message = load_fixture("gmail", "html_only")
        parsed = extract_email(parse_message_part(message["payload"]))
        text = format_email(message, parsed, body_limit=50_000)

        assert "Cc:" not in text
        assert "Subject: (no subject)" in text
        assert "--- Attachments" not in text

    def test_body_truncated(self) -> None:
        message = {"payload": {"headers": []}}
        text = format_email(message, ParsedEmail(text_body="z" * 30), body_limit=10)
        assert text.endswith("z" * 10 + "\n\n[... truncated at 10 characters]")

    def test_labels_sorted_system_first(self) -> None:
        labels = [
            {"id": "Label_2", "name": "zeta", "type": "user"},
            {"id": "INBOX", "name": "INBOX", "type": "system", "messagesTotal": 10, "messagesUnread": 2},
            {"id": "Label_1", "name": "Alpha", "type": "user"},
        ]
        assert [l["id"] for l in sort_labels(labels)] == ["INBOX", "Label_1", "Label_2"]
        assert format_labels("alice@example.com", labels) == snapshot("""\
Gmail labels for alice@example.com:

- [INBOX] INBOX (system), messages: 10, unread: 2
- [Label_1] Alpha (user)
- [Label_2] zeta (user)\
""")

    def test_no_labels(self) -> None:
        assert format_labels("alice@example.com", []) == "No labels found."
