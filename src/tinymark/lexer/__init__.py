"""Character-level lexer for the tinymark Markdown subset.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, Cursor
├── core.py              # Lexer class (mixin composition + dispatch)
├── cursor.py            # Cursor: source, position, line/column
├── charsets.py          # Marker and whitespace character sets
└── scanners/            # One mixin per construct
    ├── heading.py       # # Heading
    ├── emphasis.py      # *italic*, **bold**
    ├── link.py          # [text](url), ![alt](src)
    ├── list.py          # - item
    └── text.py          # Plain text runs

Usage:
    >>> from tinymark.lexer import Lexer
    >>> [t.type.name for t in Lexer("- one\\n- two").tokenize()]
    ['LIST_ITEM', 'LIST_ITEM']

"""

from tinymark.lexer.core import Lexer
from tinymark.lexer.cursor import Cursor

__all__ = ["Cursor", "Lexer"]
