"""Tests for HtmlRenderer."""

from __future__ import annotations

import pytest

from tinymark import render_markdown
from tinymark.renderers.html import HtmlRenderer
from tinymark.tokens import Token, TokenType


class TestHtmlRenderer:
    """End-to-end rendering of source text."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("# Header 1", "<h1>Header 1</h1>\n"),
            ("## Header 2\n### Header 3", "<h2>Header 2</h2>\n<h3>Header 3</h3>\n"),
            ("This is **bold** text.", "<p>This is <strong>bold</strong> text.</p>\n"),
            ("This is *italic* text.", "<p>This is <em>italic</em> text.</p>\n"),
            (
                "This is a [link](http://example.com).",
                '<p>This is a <a href="http://example.com">link</a>.</p>\n',
            ),
            (
                "This is an image ![Alt text](image.png).",
                '<p>This is an image <img src="image.png" alt="Alt text">.</p>\n',
            ),
            ("- Item 1\n- Item 2", "<ul>\n<li>Item 1</li>\n<li>Item 2</li>\n</ul>\n"),
        ],
    )
    def test_constructs(self, source: str, expected: str) -> None:
        assert render_markdown(source) == expected

    def test_mixed_document(self) -> None:
        source = "# Title\nSome **bold** text.\n- item"
        assert render_markdown(source) == (
            "<h1>Title</h1>\n<p>Some <strong>bold</strong> text.</p>\n<ul>\n<li>item</li>\n</ul>\n"
        )

    def test_complex_mixed_content(self) -> None:
        source = (
            "# Title\n"
            "Some **bold** and *italic* text with a [link](http://example.com).\n"
            "- List item 1\n"
            "- List item 2"
        )
        assert render_markdown(source) == (
            "<h1>Title</h1>\n"
            "<p>Some <strong>bold</strong> and <em>italic</em> text with a "
            '<a href="http://example.com">link</a>.</p>\n'
            "<ul>\n<li>List item 1</li>\n<li>List item 2</li>\n</ul>\n"
        )

    def test_empty_source(self) -> None:
        assert render_markdown("") == ""

    def test_only_newlines(self) -> None:
        assert render_markdown("\n\n\n") == ""


class TestDegradedRendering:
    """Malformed constructs render as literal text."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("**bold", "<p>**bold</p>\n"),
            ("#Invalid", "<p>#Invalid</p>\n"),
            ("[a](http://x", "<p>[a](http://x</p>\n"),
            ("[text]", "<p>[text]</p>\n"),
            ("![alt]", "<p>![alt]</p>\n"),
            ("-dash", "<p>-dash</p>\n"),
            ("Wow!", "<p>Wow!</p>\n"),
        ],
    )
    def test_literal_fallback(self, source: str, expected: str) -> None:
        assert render_markdown(source) == expected

    def test_unclosed_bold_has_no_strong_tag(self) -> None:
        html = render_markdown("start **bold")
        assert "<strong>" not in html
        assert "**bold" in html

    def test_nested_emphasis_split(self) -> None:
        assert render_markdown("*outer **inner** outer*") == (
            "<p><em>outer </em><em>inner</em><em> outer</em></p>\n"
        )


class TestParagraphs:
    """Paragraph and list wrapping heuristics."""

    def test_blank_line_separates_paragraphs(self) -> None:
        assert render_markdown("one\n\ntwo") == "<p>one</p>\n<p>two</p>\n"

    def test_blank_line_before_inline_token(self) -> None:
        assert render_markdown("one\n\n**two**") == "<p>one</p>\n<p><strong>two</strong></p>\n"

    def test_indented_blank_line_is_skipped(self) -> None:
        assert render_markdown("a\n\n   \n\nb") == "<p>a</p>\n<p>b</p>\n"

    def test_whitespace_line_separates_paragraphs(self) -> None:
        assert render_markdown("a\n \t\nb") == "<p>a</p>\n<p>b</p>\n"

    def test_trailing_whitespace_after_list(self) -> None:
        assert render_markdown("- a\n   ") == "<ul>\n<li>a</li>\n</ul>\n"

    def test_crlf_paragraphs(self) -> None:
        assert render_markdown("a\r\n\r\nb") == "<p>a</p>\n<p>b</p>\n"

    def test_crlf_heading(self) -> None:
        assert render_markdown("# T\r\n") == "<h1>T</h1>\n"

    def test_single_newline_stays_in_paragraph(self) -> None:
        assert render_markdown("one\ntwo") == "<p>one\ntwo</p>\n"

    def test_soft_break_before_inline_token(self) -> None:
        assert render_markdown("a\n*b*") == "<p>a\n<em>b</em></p>\n"

    def test_heading_closes_paragraph(self) -> None:
        assert render_markdown("intro\n# Next") == "<p>intro</p>\n<h1>Next</h1>\n"

    def test_text_after_heading_opens_paragraph(self) -> None:
        assert render_markdown("# T\n\nbody") == "<h1>T</h1>\n<p>body</p>\n"

    def test_list_between_paragraphs(self) -> None:
        assert render_markdown("text\n- a\n- b\nafter") == (
            "<p>text</p>\n<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n<p>after</p>\n"
        )

    def test_heading_closes_list(self) -> None:
        assert render_markdown("- a\n# H") == "<ul>\n<li>a</li>\n</ul>\n<h1>H</h1>\n"

    def test_mid_line_dash_starts_list(self) -> None:
        """Markers are recognised anywhere, not only at line start."""
        assert render_markdown("a - b") == "<p>a </p>\n<ul>\n<li>b</li>\n</ul>\n"


class TestEscaping:
    """Escaping of textual payloads."""

    def test_text_escaped(self) -> None:
        assert render_markdown('a < b & "c"') == "<p>a &lt; b &amp; &quot;c&quot;</p>\n"

    def test_heading_escaped(self) -> None:
        assert render_markdown("# <T>") == "<h1>&lt;T&gt;</h1>\n"

    def test_link_url_escaped(self) -> None:
        assert render_markdown('[x](a"b)') == '<p><a href="a&quot;b">x</a></p>\n'

    def test_image_alt_escaped(self) -> None:
        assert render_markdown("![<alt>](s.png)") == '<p><img src="s.png" alt="&lt;alt&gt;"></p>\n'

    def test_existing_entities_kept(self) -> None:
        assert render_markdown("&copy; &amp; &") == "<p>&copy; &amp; &amp;</p>\n"


class TestTokenInput:
    """Rendering hand-built token streams."""

    def test_render_tokens(self) -> None:
        tokens = [
            Token(TokenType.HEADING_2, "Links"),
            Token(TokenType.LINK, "a|b", url="http://x/?q=1|2"),
        ]
        assert HtmlRenderer().render(tokens) == (
            '<h2>Links</h2>\n<p><a href="http://x/?q=1|2">a|b</a></p>\n'
        )

    def test_accepts_iterator(self) -> None:
        tokens = iter([Token(TokenType.TEXT, "x"), Token(TokenType.LIST_ITEM, "y")])
        assert HtmlRenderer().render(tokens) == "<p>x</p>\n<ul>\n<li>y</li>\n</ul>\n"

    def test_empty_stream(self) -> None:
        assert HtmlRenderer().render([]) == ""
