"""Explicit read cursor over the lexer's source text.

The cursor is the only mutable lexer state: the source string, the current
offset, and the line/column derived from it. Scanners receive it as an
argument and advance it; nothing else moves the position.

Thread Safety:
A Cursor is owned by exactly one Lexer. Do not share it between threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from tinymark.lexer.charsets import INLINE_WHITESPACE
from tinymark.location import SourceLocation


class Mark(NamedTuple):
    """Saved cursor position, used to build token locations."""

    pos: int
    lineno: int
    col: int


@dataclass(slots=True)
class Cursor:
    """Forward-only position in a source string.

    ``current`` is the empty string once the source is exhausted, so
    membership tests against character sets need no bounds checks.

    Usage:
            >>> cursor = Cursor("ab\\ncd")
            >>> cursor.collect_until("\\n")
            'ab'
            >>> cursor.skip_line_end()
            >>> (cursor.current, cursor.lineno, cursor.col)
            ('c', 2, 1)

    """

    source: str
    pos: int = 0
    lineno: int = 1
    col: int = 1
    source_file: str | None = None

    @property
    def current(self) -> str:
        """Character under the cursor, or ``""`` at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ""

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self) -> str:
        """Character after the current one, or ``""``."""
        peek_pos = self.pos + 1
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return ""

    def advance(self) -> None:
        """Move one character forward, tracking line and column."""
        if self.pos >= len(self.source):
            return
        if self.source[self.pos] == "\n":
            self.lineno += 1
            self.col = 1
        else:
            self.col += 1
        self.pos += 1

    def collect_until(self, delimiter: str) -> str:
        """Consume up to (not including) ``delimiter``, a newline, or end of input."""
        start = self.pos
        while True:
            char = self.current
            if not char or char == delimiter or char == "\n":
                break
            self.advance()
        return self.source[start : self.pos]

    def collect_line(self) -> str:
        """Consume the rest of the current line, leaving the newline in place."""
        return self.collect_until("\n")

    def skip_line_end(self) -> None:
        """Consume a single newline if the cursor sits on one."""
        if self.current == "\n":
            self.advance()

    def at_blank_line(self) -> bool:
        """Whether the newline under the cursor ends or precedes a blank line.

        A blank line holds nothing but inline whitespace.
        """
        source = self.source
        line_start = source.rfind("\n", 0, self.pos) + 1
        if _is_blank(source[line_start : self.pos]):
            return True
        next_end = source.find("\n", self.pos + 1)
        if next_end == -1:
            next_end = len(source)
        return _is_blank(source[self.pos + 1 : next_end])

    def breaks_behind(self) -> int:
        """Count the newlines immediately before the cursor."""
        count = 0
        pos = self.pos - 1
        while pos >= 0 and self.source[pos] == "\n":
            count += 1
            pos -= 1
        return count

    def mark(self) -> Mark:
        return Mark(self.pos, self.lineno, self.col)

    def location_from(self, start: Mark) -> SourceLocation:
        """Location spanning from ``start`` to the current position."""
        return SourceLocation(
            lineno=start.lineno,
            col_offset=start.col,
            offset=start.pos,
            end_offset=self.pos,
            source_file=self.source_file,
        )


def _is_blank(line: str) -> bool:
    return all(char in INLINE_WHITESPACE for char in line)
