"""Emphasis scanner mixin for ``*italic*`` and ``**bold**``."""

from tinymark.lexer.cursor import Cursor
from tinymark.tokens import Token, TokenType


class EmphasisScannerMixin:
    """Mixin providing ``*`` scanning.

    Spans never cross a line end and never nest: the first ``*`` after the
    opener closes the span. Unclosed markers degrade to literal text.
    """

    def _make_token(
        self, cursor: Cursor, token_type: TokenType, value: str, url: str | None = None
    ) -> Token:
        raise NotImplementedError

    def _degrade(self, cursor: Cursor, construct: str, literal: str) -> Token:
        raise NotImplementedError

    def _scan_emphasis(self, cursor: Cursor) -> Token:
        cursor.advance()
        if cursor.current == "*":
            return self._scan_bold(cursor)

        content = cursor.collect_until("*")
        if cursor.current == "*":
            cursor.advance()
            return self._make_token(cursor, TokenType.ITALIC, content)
        return self._degrade(cursor, "unclosed italic", "*" + content)

    def _scan_bold(self, cursor: Cursor) -> Token:
        """Scan after ``**``; only a matching ``**`` closes the span."""
        cursor.advance()
        content = cursor.collect_until("*")
        if cursor.current == "*" and cursor.peek() == "*":
            cursor.advance()
            cursor.advance()
            return self._make_token(cursor, TokenType.BOLD, content)

        literal = "**" + content
        # A lone closing star is part of the literal, not the next token
        if cursor.current == "*":
            cursor.advance()
            literal += "*"
        return self._degrade(cursor, "unclosed bold", literal)
