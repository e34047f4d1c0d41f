"""ATX heading scanner mixin."""

from tinymark.lexer.charsets import INLINE_WHITESPACE, MAX_HEADING_LEVEL, WHITESPACE
from tinymark.lexer.cursor import Cursor
from tinymark.tokens import Token, TokenType


class HeadingScannerMixin:
    """Mixin providing ``#`` heading scanning."""

    def _make_token(
        self, cursor: Cursor, token_type: TokenType, value: str, url: str | None = None
    ) -> Token:
        """Create token spanning from the saved start. Implemented by Lexer."""
        raise NotImplementedError

    def _degrade(self, cursor: Cursor, construct: str, literal: str) -> Token:
        """Emit malformed syntax as TEXT. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_heading(self, cursor: Cursor) -> Token:
        """Scan a heading starting at ``#``.

        Up to six ``#`` set the level and must be followed by whitespace;
        ``#Invalid`` falls back to plain text for the whole line. The line
        terminator is consumed but not included in the token.
        """
        level = 1
        cursor.advance()
        while cursor.current == "#" and level < MAX_HEADING_LEVEL:
            level += 1
            cursor.advance()

        if cursor.current not in WHITESPACE:
            rest = cursor.collect_line()
            cursor.skip_line_end()
            return self._degrade(cursor, "heading without space", "#" * level + rest)

        while cursor.current in INLINE_WHITESPACE:
            cursor.advance()

        content = cursor.collect_line()
        cursor.skip_line_end()
        return self._make_token(cursor, TokenType.heading(level), content)
