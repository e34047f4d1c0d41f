"""Minimal logging utilities for tinymark.

Wraps the standard library logging so every logger lives under the
``tinymark`` namespace. The package installs no handlers; applications
configure output as usual.

Example:
    >>> from tinymark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Lexing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, prefixed with ``tinymark.``.

    Example:
        >>> get_logger("mymodule").name
        'tinymark.mymodule'
        >>> get_logger("tinymark.lexer.core").name
        'tinymark.lexer.core'
    """
    if not (name == "tinymark" or name.startswith("tinymark.")):
        name = f"tinymark.{name}"
    return logging.getLogger(name)
