"""List item scanner mixin."""

from tinymark.lexer.charsets import WHITESPACE
from tinymark.lexer.cursor import Cursor
from tinymark.tokens import Token, TokenType


class ListScannerMixin:
    """Mixin providing ``- item`` scanning. Lists are flat; no nesting."""

    def _make_token(
        self, cursor: Cursor, token_type: TokenType, value: str, url: str | None = None
    ) -> Token:
        raise NotImplementedError

    def _degrade(self, cursor: Cursor, construct: str, literal: str) -> Token:
        raise NotImplementedError

    def _scan_list_item(self, cursor: Cursor) -> Token:
        cursor.advance()
        if cursor.current not in WHITESPACE:
            rest = cursor.collect_line()
            cursor.skip_line_end()
            return self._degrade(cursor, "list marker without space", "-" + rest)

        cursor.advance()
        content = cursor.collect_line()
        cursor.skip_line_end()
        return self._make_token(cursor, TokenType.LIST_ITEM, content)
