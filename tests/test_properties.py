"""Property-based tests for render_markdown using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from tinymark import render_markdown
from tinymark.utils.text import escape_html

# Printable text without marker characters or line terminators
plain_text = st.text(
    alphabet=st.characters(
        blacklist_categories=("Cs", "Cc"),
        blacklist_characters="#*[!-",
    ),
    min_size=1,
    max_size=200,
).filter(lambda s: not s.isspace())


class TestRenderProperties:
    """Invariants of the full text-to-HTML pipeline."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_total_for_any_input(self, source: str) -> None:
        """render_markdown terminates and returns a string for every input."""
        assert isinstance(render_markdown(source), str)

    @given(st.text(alphabet="#*[]()!-\\ \n\tab<&\"", max_size=300))
    @settings(max_examples=300)
    def test_total_for_marker_soup(self, source: str) -> None:
        html = render_markdown(source)
        assert html.count("<p>") == html.count("</p>")
        assert html.count("<ul>") == html.count("</ul>")

    @given(plain_text)
    @settings(max_examples=200)
    def test_plain_text_is_one_paragraph(self, source: str) -> None:
        assert render_markdown(source) == f"<p>{escape_html(source)}</p>\n"

    @given(st.text(alphabet="#*[]()!-\\ \n\tab<&\"", max_size=300))
    @settings(max_examples=100)
    def test_no_raw_angle_brackets_from_input(self, source: str) -> None:
        """Every ``<`` in the output belongs to a generated tag."""
        html = render_markdown(source)
        stripped = html
        for tag in ("<p>", "</p>", "<ul>", "</ul>", "<li>", "</li>", "<strong>",
                    "</strong>", "<em>", "</em>", "</a>"):
            stripped = stripped.replace(tag, "")
        for level in range(1, 7):
            stripped = stripped.replace(f"<h{level}>", "").replace(f"</h{level}>", "")
        stripped = stripped.replace("<a href=", "").replace("<img src=", "")
        assert "<" not in stripped


class TestEscapeProperties:
    @given(st.text(max_size=500))
    @settings(max_examples=300)
    def test_escape_is_idempotent(self, text: str) -> None:
        once = escape_html(text)
        assert escape_html(once) == once

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_no_raw_specials_after_escape(self, text: str) -> None:
        escaped = escape_html(text)
        assert "<" not in escaped
        assert ">" not in escaped
        assert '"' not in escaped
