"""Convert Markdown to HTML in one call — zero config, zero deps."""

from tinymark import render_markdown

html = render_markdown("# Hello\nThis is **tinymark**, see [the docs](https://example.com).")
print(html)
