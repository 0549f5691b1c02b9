"""Tests for the regex HTML stripper used on HTML-only mail bodies."""

import pytest

from html_convert import html_to_text


class TestHtmlToText:
    """Tag stripping, entity decoding and whitespace cleanup."""

    def test_empty(self) -> None:
        assert html_to_text("") == ""

    def test_paragraphs_become_lines(self) -> None:
        """Closing block tags end a line."""
        assert html_to_text("<p>One</p><p>Two</p>") == "One\nTwo"

    def test_line_breaks(self) -> None:
        assert html_to_text("a<br>b<BR/>c<br />d") == "a\nb\nc\nd"

    def test_script_and_style_removed_with_content(self) -> None:
        html = "<style>p { color: red }</style><p>Keep</p><script type='x'>alert(1)</script>"
        assert html_to_text(html) == "Keep"

    def test_list_items_become_bullets(self) -> None:
        html = "<ul><li>First</li><li class='x'>Second</li></ul>"
        assert html_to_text(html) == "- First\n- Second"

    def test_link_tag_is_not_a_list_item(self) -> None:
        """<link> must not be mistaken for <li>."""
        assert html_to_text('<link rel="stylesheet">Body') == "Body"

    @pytest.mark.parametrize("html,expected", [
        ("a &amp; b", "a & b"),
        ("&lt;tag&gt;", "<tag>"),
        ("&quot;q&quot;", '"q"'),
        ("it&#39;s", "it's"),
        ("a&nbsp;b", "a b"),
    ])
    def test_entities(self, html: str, expected: str) -> None:
        assert html_to_text(html) == expected

    def test_entities_decoded_once(self) -> None:
        """Double-escaped text keeps one level of escaping."""
        assert html_to_text("&amp;lt;") == "&lt;"

    def test_collapses_blank_runs(self) -> None:
        """At most one blank line survives between blocks."""
        assert html_to_text("<p>A</p>\n\n\n\n<p>B</p>") == "A\n\nB"

    def test_surrounding_whitespace_trimmed(self) -> None:
        assert html_to_text("  <div>  x  </div>  ") == "x"
