"""Utility modules for tinymark.

Provides:
- text: escape_html for output escaping
- logger: get_logger for namespaced logging
"""

from tinymark.utils.logger import get_logger
from tinymark.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
