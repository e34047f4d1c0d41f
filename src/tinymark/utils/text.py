"""Text processing utilities for tinymark.

Example:
    >>> from tinymark.utils.text import escape_html
    >>> escape_html('<a href="x">Tom & Jerry</a>')
    '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&lt;/a&gt;'
"""

from __future__ import annotations

import re

# An ampersand that does not already start a named, decimal or hex entity
_BARE_AMPERSAND = re.compile(r"&(?!(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);)")


def escape_html(text: str) -> str:
    """Escape ``<``, ``>``, ``"`` and bare ``&`` for HTML output.

    Single quotes are left alone. Ampersands that already begin an entity
    reference (``&amp;``, ``&#169;``, ``&#x27;``) are kept, which makes the
    function idempotent:

        >>> escape_html(escape_html("a < b & c"))
        'a &lt; b &amp; c'
        >>> escape_html("&copy; 2024")
        '&copy; 2024'
    """
    if not text:
        return ""
    text = _BARE_AMPERSAND.sub("&amp;", text)
    return text.replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")
