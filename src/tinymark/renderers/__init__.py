"""tinymark renderers.

Renderers convert a lexer token stream into an output format.

Available Renderers:
- HtmlRenderer: Renders tokens to HTML using StringBuilder pattern

Thread Safety:
All renderers use StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from tinymark.renderers.html import HtmlRenderer, RenderContext
from tinymark.renderers.protocol import TokenRenderer

__all__ = ["HtmlRenderer", "RenderContext", "TokenRenderer"]
