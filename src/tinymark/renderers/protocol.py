"""TokenRenderer protocol — stable interface for token stream renderers.

Any renderer that implements ``render(tokens) -> str`` conforms to this
protocol. The built-in ``HtmlRenderer`` is the reference implementation.

Example:
    from tinymark.renderers.protocol import TokenRenderer

    def render_page(renderer: TokenRenderer, source: str) -> str:
        return renderer.render(Lexer(source).tokenize())

"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from tinymark.tokens import Token


@runtime_checkable
class TokenRenderer(Protocol):
    """Protocol for token stream renderers."""

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens, in document order, to a string."""
        ...
