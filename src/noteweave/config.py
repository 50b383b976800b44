"""ContextVar-based render configuration for noteweave.

Provides context-local configuration using Python's ContextVars (PEP 567).
The module-level ``render()`` reads whatever config is active in the
current context; a ``Markdown`` instance sets its own config around each call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from noteweave.config import RenderConfig, render_config_context
    from noteweave import render

    with render_config_context(RenderConfig(greedy_emphasis=True)):
        html = render("**a** and **b**")

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        greedy_emphasis: Pair each emphasis opener with the last matching
            delimiter on the line instead of the nearest one. Reproduces the
            legacy preview, where ``**a** and **b**`` became one bold span.
        escape_html: Escape ``&``, ``<`` and ``>`` in text and code bodies.
            When off, raw HTML in a note is passed through.
        highlight: Send fenced code with a language tag to the configured
            syntax highlighter.
        link_target: Browsing context for generated links.
        text_transformer: Optional callback applied to plain text runs

    """

    greedy_emphasis: bool = False
    escape_html: bool = False
    highlight: bool = False
    link_target: str = "_blank"
    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Useful when settings come from the app's stored user preferences.
        Unknown keys are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "greedy_emphasis": True,
            ...     "theme": "dark",
            ... })
            >>> config.greedy_emphasis
            True

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
    """Get the render configuration active in this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(escape_html=True)):
        ...     html = render("<b>hi</b>")
        >>> # previous config is back in effect

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
