"""Character sets for O(1) classification in the lexer.

All sets are frozensets: constant-time membership and safe to share
between threads. The empty string (end of input) is never a member.
"""

# Characters that start a construct and end a plain text run
MARKER_CHARS: frozenset[str] = frozenset("#*[!-")

# ASCII whitespace, matching C isspace()
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Whitespace that does not end a line
INLINE_WHITESPACE: frozenset[str] = WHITESPACE - {"\n"}

MAX_HEADING_LEVEL = 6
