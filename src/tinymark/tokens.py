"""Token and TokenType definitions for the tinymark lexer.

The lexer produces a stream of Token objects that the renderer consumes.
Each Token has a type, a text value, an optional URL (links and images),
and an optional source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinymark.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Block kinds (headings, list items) force paragraph and list boundaries
    in the renderer. Inline kinds (text, emphasis, links, images) live
    inside a paragraph.

    """

    # Plain text
    TEXT = auto()

    # Block elements - headings
    HEADING_1 = auto()  # # Heading
    HEADING_2 = auto()  # ## Heading
    HEADING_3 = auto()  # ### Heading
    HEADING_4 = auto()  # #### Heading
    HEADING_5 = auto()  # ##### Heading
    HEADING_6 = auto()  # ###### Heading

    # Inline elements - emphasis
    BOLD = auto()  # **bold**
    ITALIC = auto()  # *italic*

    # Inline elements - links and images
    LINK = auto()  # [text](url)
    IMAGE = auto()  # ![alt](src)

    # Block elements - lists
    LIST_ITEM = auto()  # - item

    @classmethod
    def heading(cls, level: int) -> TokenType:
        """Return the heading type for ``level`` (1-6).

        Raises:
            ValueError: If level is outside 1-6.
        """
        if not 1 <= level <= 6:
            msg = f"Heading level must be between 1 and 6, got {level}"
            raise ValueError(msg)
        return _HEADINGS[level - 1]

    @property
    def heading_level(self) -> int | None:
        """Heading level 1-6, or None for non-heading types."""
        try:
            return _HEADINGS.index(self) + 1
        except ValueError:
            return None

    @property
    def is_heading(self) -> bool:
        return self in _HEADINGS

    @property
    def is_block(self) -> bool:
        """True for kinds that close an open paragraph."""
        return self in BLOCK_TYPES

    @property
    def is_inline(self) -> bool:
        """True for kinds that are wrapped in a paragraph."""
        return self in INLINE_TYPES


_HEADINGS: tuple[TokenType, ...] = (
    TokenType.HEADING_1,
    TokenType.HEADING_2,
    TokenType.HEADING_3,
    TokenType.HEADING_4,
    TokenType.HEADING_5,
    TokenType.HEADING_6,
)

BLOCK_TYPES: frozenset[TokenType] = frozenset((*_HEADINGS, TokenType.LIST_ITEM))

INLINE_TYPES: frozenset[TokenType] = frozenset(
    (TokenType.TEXT, TokenType.BOLD, TokenType.ITALIC, TokenType.LINK, TokenType.IMAGE)
)

# Types whose ``url`` field carries a destination
URL_TYPES: frozenset[TokenType] = frozenset((TokenType.LINK, TokenType.IMAGE))


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Text payload. For LINK this is the anchor text, for IMAGE
            the alt text.
        url: Link destination or image source; None for other types.
        breaks_before: Line terminators consumed between the previous
            token's content and this token. The renderer uses it to split
            paragraphs on blank lines and to emit soft breaks.
        location: Source position, when produced by the lexer.

    Equality only considers ``type``, ``value`` and ``url``, so tests and
    callers can compare against hand-built tokens.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: str
    url: str | None = None
    breaks_before: int = field(default=0, compare=False)
    location: SourceLocation | None = field(default=None, compare=False)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        parts = [self.type.name, repr(val)]
        if self.url is not None:
            parts.append(f"url={self.url!r}")
        if self.location is not None:
            parts.append(str(self.location))
        return f"Token({', '.join(parts)})"

    @property
    def level(self) -> int | None:
        """Heading level for heading tokens, otherwise None."""
        return self.type.heading_level
