"""Link and image scanner mixin."""

from dataclasses import replace

from tinymark.lexer.cursor import Cursor
from tinymark.tokens import Token, TokenType


class LinkScannerMixin:
    """Mixin providing ``[text](url)`` and ``![alt](src)`` scanning.

    Link text may span lines and contain balanced brackets; ``\\[`` is a
    literal bracket that does not change the nesting depth. The URL must
    close on the same line.
    """

    def _make_token(
        self, cursor: Cursor, token_type: TokenType, value: str, url: str | None = None
    ) -> Token:
        raise NotImplementedError

    def _degrade(self, cursor: Cursor, construct: str, literal: str) -> Token:
        raise NotImplementedError

    def _scan_link(self, cursor: Cursor) -> Token:
        cursor.advance()
        parts: list[str] = []
        depth = 1

        while not cursor.at_end:
            char = cursor.current
            if char == "\\" and cursor.peek() == "[":
                parts.append("[")
                cursor.advance()
                cursor.advance()
                continue

            if char == "[":
                depth += 1
            elif char == "]":
                depth -= 1
                if depth == 0:
                    cursor.advance()
                    break
            parts.append(char)
            cursor.advance()

        text = "".join(parts)
        if depth > 0:
            return self._degrade(cursor, "unbalanced link brackets", "[" + text)

        if cursor.current != "(":
            return self._degrade(cursor, "link without destination", f"[{text}]")

        cursor.advance()
        url = cursor.collect_until(")")
        if cursor.current != ")":
            return self._degrade(cursor, "unclosed link destination", f"[{text}]({url}")

        cursor.advance()
        return self._make_token(cursor, TokenType.LINK, text, url)

    def _scan_image(self, cursor: Cursor) -> Token:
        """Scan ``!``; anything but ``![`` is a lone literal ``!``."""
        cursor.advance()
        if cursor.current != "[":
            return self._make_token(cursor, TokenType.TEXT, "!")

        token = self._scan_link(cursor)
        if token.type is TokenType.LINK:
            return replace(token, type=TokenType.IMAGE)
        return replace(token, value="!" + token.value)
