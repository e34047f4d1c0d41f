"""ContextVar-based render configuration for tinymark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
An explicit config handed to ``HtmlRenderer`` or ``Markdown`` wins; otherwise
the renderer reads whatever is active in the current context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from tinymark.config import RenderConfig, render_config_context
    from tinymark import render_markdown

    with render_config_context(RenderConfig(soft_break="<br>\\n")):
        html = render_markdown("one\\ntwo")

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator

from tinymark.errors import ConfigError


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        soft_break: Emitted for a single line break inside a paragraph.
            The default keeps the newline as-is; ``"<br>\\n"`` turns it into
            a hard break and ``" "`` joins the lines.
        text_transformer: Optional callback applied to TEXT payloads before
            escaping (e.g. typographic quote replacement).

    """

    soft_break: str = "\n"
    text_transformer: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.soft_break, str):
            raise ConfigError("soft_break", f"expected str, got {type(self.soft_break).__name__}")
        if self.text_transformer is not None and not callable(self.text_transformer):
            raise ConfigError("text_transformer", "must be callable or None")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({"soft_break": " ", "theme": "x"})
            >>> config.soft_break
            ' '

        Raises:
            ConfigError: If a known key holds an invalid value.
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(soft_break=" ")):
        ...     get_render_config().soft_break
        ' '
    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
