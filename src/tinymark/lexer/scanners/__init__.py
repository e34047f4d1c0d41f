"""Construct scanners composed into the Lexer.

Each mixin consumes one construct from an explicit Cursor and returns a
single Token, degrading malformed syntax to TEXT.
"""

from tinymark.lexer.scanners.emphasis import EmphasisScannerMixin
from tinymark.lexer.scanners.heading import HeadingScannerMixin
from tinymark.lexer.scanners.link import LinkScannerMixin
from tinymark.lexer.scanners.list import ListScannerMixin
from tinymark.lexer.scanners.text import TextScannerMixin

__all__ = [
    "EmphasisScannerMixin",
    "HeadingScannerMixin",
    "LinkScannerMixin",
    "ListScannerMixin",
    "TextScannerMixin",
]
