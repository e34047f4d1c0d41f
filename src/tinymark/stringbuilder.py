"""StringBuilder for O(n) HTML accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Block helpers emit the newline conventions
the HTML renderer relies on (one line per block-level tag).

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator with small HTML tag helpers.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.open_block("ul").element("li", "one", newline=True).close_block("ul")
            >>> sb.build()
            '<ul>\\n<li>one</li>\\n</ul>\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def open_block(self, tag: str) -> StringBuilder:
        """Append ``<tag>`` on its own line."""
        self._parts.append(f"<{tag}>\n")
        return self

    def close_block(self, tag: str) -> StringBuilder:
        """Append ``</tag>`` followed by a newline."""
        self._parts.append(f"</{tag}>\n")
        return self

    def element(self, tag: str, inner: str, *, newline: bool = False) -> StringBuilder:
        """Append ``<tag>inner</tag>``; ``inner`` must already be escaped."""
        self._parts.append(f"<{tag}>{inner}</{tag}>")
        if newline:
            self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
