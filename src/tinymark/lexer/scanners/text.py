"""Plain text run scanner mixin."""

from tinymark.lexer.charsets import MARKER_CHARS
from tinymark.lexer.cursor import Cursor
from tinymark.tokens import Token, TokenType


class TextScannerMixin:
    """Mixin providing plain text scanning."""

    def _make_token(
        self, cursor: Cursor, token_type: TokenType, value: str, url: str | None = None
    ) -> Token:
        raise NotImplementedError

    def _scan_text(self, cursor: Cursor) -> Token:
        """Consume text up to the next marker character or blank line.

        Single newlines stay in the payload. The newline before or after a
        blank line (empty or only spaces and tabs) is left unconsumed so the
        next token sees it as a paragraph break.
        Trailing newlines are trimmed.
        """
        source = cursor.source
        start = cursor.pos
        while True:
            char = cursor.current
            if not char or char in MARKER_CHARS:
                break
            if char == "\n" and cursor.at_blank_line():
                break
            cursor.advance()
        return self._make_token(cursor, TokenType.TEXT, source[start : cursor.pos].rstrip("\n"))
