"""Single-pass character lexer for tinymark.

Dispatches on the character under the cursor, lets one scanner consume a
whole construct, and returns exactly one token per call. Malformed syntax
never raises; it degrades to a TEXT token holding the original characters.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state lives in the instance's Cursor; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from tinymark.lexer.charsets import WHITESPACE
from tinymark.lexer.cursor import Cursor
from tinymark.lexer.scanners import (
    EmphasisScannerMixin,
    HeadingScannerMixin,
    LinkScannerMixin,
    ListScannerMixin,
    TextScannerMixin,
)
from tinymark.tokens import Token, TokenType
from tinymark.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    HeadingScannerMixin,
    EmphasisScannerMixin,
    LinkScannerMixin,
    ListScannerMixin,
    TextScannerMixin,
):
    """Lazy, forward-only tokenizer.

    ``next_token()`` returns the next token or ``None`` once the input is
    exhausted; the sequence cannot be rewound. ``tokenize()`` wraps it as
    an iterator.

    Usage:
            >>> lexer = Lexer("# Hello\\nSome **bold** text")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(HEADING_1, 'Hello', 1:1)
        Token(TEXT, 'Some ', 2:1)
        Token(BOLD, 'bold', 2:6)
        Token(TEXT, ' text', 2:14)

    """

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        ``\\r\\n`` and lone ``\\r`` line endings are normalized to ``\\n``
        before scanning; token offsets refer to the normalized text.

        Args:
            source: Markdown source text
            source_file: Optional source file path, used in token locations

        Raises:
            TypeError: If source is not a string.
        """
        if not isinstance(source, str):
            msg = f"Lexer source must be str, got {type(source).__name__}"
            raise TypeError(msg)
        if "\r" in source:
            source = source.replace("\r\n", "\n").replace("\r", "\n")
        self._cursor = Cursor(source, source_file=source_file)
        self._token_start = self._cursor.mark()
        self._breaks_before = 0

    @property
    def cursor(self) -> Cursor:
        """The lexer's cursor, for inspecting partial progress."""
        return self._cursor

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens until the input is exhausted.

        Complexity: O(n) where n = len(source)
        """
        while (token := self.next_token()) is not None:
            yield token

    def next_token(self) -> Token | None:
        """Consume and return the next token, or None at end of input.

        Whitespace-only text touching a line boundary is skipped; the
        line breaks around it still count toward the next token's
        ``breaks_before``.
        """
        cursor = self._cursor
        breaks = cursor.breaks_behind()
        while True:
            while cursor.current == "\n":
                cursor.advance()
                breaks += 1
            if cursor.at_end:
                return None

            self._token_start = cursor.mark()
            self._breaks_before = breaks
            token = self._dispatch(cursor)
            if not self._is_blank_run(token, cursor):
                return token
            breaks += cursor.source.count("\n", self._token_start.pos, cursor.pos)

    def _dispatch(self, cursor: Cursor) -> Token:
        char = cursor.current
        if char == "#":
            return self._scan_heading(cursor)
        if char == "*":
            return self._scan_emphasis(cursor)
        if char == "[":
            return self._scan_link(cursor)
        if char == "!":
            return self._scan_image(cursor)
        if char == "-":
            return self._scan_list_item(cursor)
        return self._scan_text(cursor)

    def _is_blank_run(self, token: Token, cursor: Cursor) -> bool:
        """True for whitespace-only TEXT touching or spanning a line boundary.

        Whitespace between two inline tokens on the same line is kept.
        """
        if token.type is not TokenType.TEXT:
            return False
        if any(char not in WHITESPACE for char in token.value):
            return False
        return (
            self._token_start.col == 1
            or cursor.current in ("", "\n")
            or "\n" in cursor.source[self._token_start.pos : cursor.pos]
        )

    # =========================================================================
    # Token construction (shared by scanner mixins)
    # =========================================================================

    def _make_token(
        self, cursor: Cursor, token_type: TokenType, value: str, url: str | None = None
    ) -> Token:
        """Create a token spanning from the saved start to the cursor."""
        return Token(
            type=token_type,
            value=value,
            url=url,
            breaks_before=self._breaks_before,
            location=cursor.location_from(self._token_start),
        )

    def _degrade(self, cursor: Cursor, construct: str, literal: str) -> Token:
        """Emit malformed syntax as literal TEXT and log the fallback."""
        token = self._make_token(cursor, TokenType.TEXT, literal)
        logger.debug("Degraded %s to text at %s: %r", construct, token.location, literal)
        return token
