"""Exception classes for tinymark.

Malformed Markdown never raises: the lexer degrades it to literal text.
These exceptions cover misuse of the Python API instead, such as invalid
configuration or hand-built tokens the renderer cannot handle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinymark.tokens import Token


class TinymarkError(Exception):
    """Base exception for all tinymark errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(TinymarkError):
    """Invalid render configuration value."""

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending RenderConfig field
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Invalid config option '{option}': {message}")


class RenderError(TinymarkError):
    """Error during HTML rendering.

    Raised when the renderer is handed a token it cannot render, e.g. a
    LINK without a URL. Token streams produced by the lexer never trigger it.
    """

    def __init__(self, message: str, token: Token | object | None = None) -> None:
        self.token = token
        location = getattr(token, "location", None)
        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}{message}")
