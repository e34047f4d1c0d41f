"""HTML renderer using StringBuilder pattern.

Walks the token stream once and wraps inline tokens in paragraphs and list
items in a ``<ul>``. There is no AST: block structure is inferred from the
token kinds and from the line breaks recorded on each token.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import NoReturn

from tinymark.config import RenderConfig, get_render_config
from tinymark.errors import RenderError
from tinymark.stringbuilder import StringBuilder
from tinymark.tokens import URL_TYPES, Token, TokenType
from tinymark.utils.logger import get_logger
from tinymark.utils.text import escape_html

logger = get_logger(__name__)


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render, ensuring thread safety when sharing
    HtmlRenderer instances across threads.
    """

    in_list: bool = False
    in_paragraph: bool = False


class HtmlRenderer:
    """Render a token stream to HTML.

    Usage:
        >>> from tinymark.lexer import Lexer
        >>> tokens = Lexer("This is **bold**.").tokenize()
        >>> HtmlRenderer().render(tokens)
        '<p>This is <strong>bold</strong>.</p>\\n'

    Thread Safety:
        Each render() call creates an independent RenderContext, ensuring
        no shared mutable state between concurrent renders.
    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration. When None, the config active in
                the current context is read at render time.
        """
        self._config = config

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens to an HTML string.

        Args:
            tokens: Tokens in document order, e.g. from ``Lexer.tokenize()``

        Returns:
            HTML string; empty for an empty token stream

        Raises:
            RenderError: If a token has an unknown type or a LINK/IMAGE token
                lacks a URL.
        """
        config = self._config or get_render_config()
        tokens = tuple(tokens)
        for token in tokens:
            if not isinstance(getattr(token, "type", None), TokenType):
                self._fail(f"Not a renderable token: {token!r}", token)

        ctx = RenderContext()
        sb = StringBuilder()
        last = len(tokens) - 1
        logger.debug("Rendering %d tokens", len(tokens))

        for index, token in enumerate(tokens):
            kind = token.type

            # List wrapping
            if kind is TokenType.LIST_ITEM:
                if ctx.in_paragraph:
                    self._close_paragraph(sb, ctx)
                if not ctx.in_list:
                    sb.open_block("ul")
                    ctx.in_list = True
            elif ctx.in_list:
                sb.close_block("ul")
                ctx.in_list = False

            # Paragraph wrapping
            if kind.is_inline:
                if ctx.in_paragraph and token.breaks_before >= 2:
                    self._close_paragraph(sb, ctx)
                if not ctx.in_paragraph:
                    sb.append("<p>")
                    ctx.in_paragraph = True
                elif token.breaks_before == 1:
                    sb.append(config.soft_break)
            elif ctx.in_paragraph:
                self._close_paragraph(sb, ctx)

            self._render_token(token, sb, config)

            if ctx.in_paragraph and (index == last or tokens[index + 1].type.is_block):
                self._close_paragraph(sb, ctx)

        if ctx.in_list:
            sb.close_block("ul")
        if ctx.in_paragraph:
            self._close_paragraph(sb, ctx)

        return sb.build()

    def _close_paragraph(self, sb: StringBuilder, ctx: RenderContext) -> None:
        sb.append("</p>\n")
        ctx.in_paragraph = False

    def _render_token(self, token: Token, sb: StringBuilder, config: RenderConfig) -> None:
        """Render a single token's HTML."""
        kind = token.type
        if kind in URL_TYPES and token.url is None:
            self._fail(f"{kind.name} token has no url", token)

        match kind:
            case TokenType.TEXT:
                sb.append(self._render_text(token.value, config))
            case TokenType.BOLD:
                sb.element("strong", escape_html(token.value))
            case TokenType.ITALIC:
                sb.element("em", escape_html(token.value))
            case TokenType.LINK:
                sb.append(f'<a href="{escape_html(token.url)}">{escape_html(token.value)}</a>')
            case TokenType.IMAGE:
                sb.append(f'<img src="{escape_html(token.url)}" alt="{escape_html(token.value)}">')
            case TokenType.LIST_ITEM:
                sb.element("li", escape_html(token.value), newline=True)
            case _ if kind.is_heading:
                sb.element(f"h{kind.heading_level}", escape_html(token.value), newline=True)
            case _:
                self._fail(f"Cannot render token type {kind.name}", token)

    def _render_text(self, text: str, config: RenderConfig) -> str:
        if config.text_transformer is not None:
            text = config.text_transformer(text)
        text = escape_html(text)
        if config.soft_break != "\n":
            text = text.replace("\n", config.soft_break)
        return text

    def _fail(self, message: str, token: object) -> NoReturn:
        logger.error("%s (token=%r)", message, token)
        raise RenderError(message, token)
