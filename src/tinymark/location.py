"""Source location tracking for tokens and debug logging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token in the source text.

    Line and column are 1-indexed; offsets are 0-indexed positions in the
    source string, with ``end_offset`` exclusive.

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=12, end_offset=20)
            >>> str(loc)
            '2:5'
            >>> loc.length
            8

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for log messages, e.g. ``notes.md:3:1`` or ``3:1``."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source characters covered."""
        return max(self.end_offset - self.offset, 0)
