"""
tinymark — small Markdown subset to HTML converter

A single-pass lexer paired with a token-to-HTML renderer. Supports
headings, bold, italic, links, images, flat lists and paragraphs.
Malformed syntax never raises: it is rendered as the literal text.

Quick Start:
    >>> from tinymark import render_markdown
    >>> print(render_markdown("# Title\\nSome **bold** text.\\n- item"), end="")
    <h1>Title</h1>
    <p>Some <strong>bold</strong> text.</p>
    <ul>
    <li>item</li>
    </ul>

    >>> # Or keep a configured processor around
    >>> from tinymark import Markdown, RenderConfig
    >>> md = Markdown(config=RenderConfig(soft_break="<br>\\n"))
    >>> md("one\\ntwo")
    '<p>one<br>\\ntwo</p>\\n'

Installation:
    pip install tinymark              # Zero runtime dependencies
    pip install tinymark[test]        # + pytest and hypothesis
"""

from collections.abc import Iterable

from tinymark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from tinymark.errors import ConfigError, RenderError, TinymarkError
from tinymark.lexer import Cursor, Lexer
from tinymark.location import SourceLocation
from tinymark.renderers.html import HtmlRenderer
from tinymark.renderers.protocol import TokenRenderer
from tinymark.serialization import from_dict, from_json, to_dict, to_json
from tinymark.tokens import Token, TokenType
from tinymark.utils.text import escape_html

__version__ = "0.1.0"


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Lex Markdown source into a list of tokens.

    Example:
        >>> [(t.type.name, t.value) for t in tokenize("*hi* there")]
        [('ITALIC', 'hi'), ('TEXT', ' there')]
    """
    return list(Lexer(source, source_file=source_file).tokenize())


def render(tokens: Iterable[Token], *, config: RenderConfig | None = None) -> str:
    """Render a token stream to HTML.

    Uses the context config (see ``render_config_context``) unless
    ``config`` is given.
    """
    return HtmlRenderer(config).render(tokens)


def render_markdown(source: str) -> str:
    """Convert Markdown source to HTML.

    Total for every string: malformed constructs come out as literal text
    and an empty source gives an empty string.

    Example:
        >>> render_markdown("#Invalid")
        '<p>#Invalid</p>\\n'
        >>> render_markdown("")
        ''
    """
    return HtmlRenderer().render(Lexer(source).tokenize())


class Markdown:
    """High-level processor combining lexer and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("- a\\n- b")
        '<ul>\\n<li>a</li>\\n<li>b</li>\\n</ul>\\n'

        >>> # Inspect tokens
        >>> md.tokenize("## Sub")[0].level
        2

    Thread Safety:
        The config is immutable and each call builds its own lexer and
        render state. Safe to share one instance between threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(self, *, config: RenderConfig | None = None) -> None:
        """Initialize Markdown processor.

        Args:
            config: Render configuration; the context config is used if None
        """
        self._config = config
        self._renderer = HtmlRenderer(config)

    @property
    def config(self) -> RenderConfig:
        """Config this processor renders with."""
        return self._config or get_render_config()

    def __call__(self, source: str) -> str:
        """Tokenize and render in one call."""
        return self._renderer.render(Lexer(source).tokenize())

    def tokenize(self, source: str, *, source_file: str | None = None) -> list[Token]:
        """Lex source into tokens."""
        return tokenize(source, source_file=source_file)

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens to HTML."""
        return self._renderer.render(tokens)

    def render_many(self, sources: Iterable[str]) -> list[str]:
        """Render several independent sources, in order.

        Example:
            >>> Markdown().render_many(["# A", "b"])
            ['<h1>A</h1>\\n', '<p>b</p>\\n']
        """
        return [self(source) for source in sources]


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "render_markdown",
    "tokenize",
    "render",
    "Markdown",
    # Tokens
    "Token",
    "TokenType",
    "SourceLocation",
    # Components
    "Cursor",
    "Lexer",
    "HtmlRenderer",
    "TokenRenderer",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "TinymarkError",
    "ConfigError",
    "RenderError",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Utilities
    "escape_html",
]
