"""Optional syntax highlighting for fenced code.

Only used when ``RenderConfig(highlight=True)``. When noteweave[syntax] is
installed, Rosettes is picked up automatically; a host can install its own
highlighter instead.

Usage:
    from noteweave.highlighting import set_highlighter

    def my_highlighter(code: str, language: str) -> str:
        return f'<pre class="hl-{language}"><code>{code}</code></pre>'

    set_highlighter(my_highlighter)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Contract:
        - MUST return a complete ``<pre>`` element
        - MUST escape HTML entities in code
        - MAY raise; the renderer falls back to plain output
    """

    def highlight(self, code: str, language: str) -> str:
        """Highlight code and return HTML markup."""
        ...


# Simple callable-based highlighters: (code, language) -> html
SimpleHighlighter = Callable[[str, str], str]

_highlighter: Highlighter | SimpleHighlighter | None = None
_tried_rosettes: bool = False


def set_highlighter(highlighter: Highlighter | SimpleHighlighter | None) -> None:
    """Set the process-wide syntax highlighter.

    Args:
        highlighter: A Highlighter implementation, or a function taking
            (code, language) and returning HTML. Pass None to clear it.
    """
    global _highlighter
    _highlighter = highlighter


def _try_import_rosettes() -> bool:
    """Try to import and configure the Rosettes highlighter."""
    global _highlighter, _tried_rosettes

    if _tried_rosettes:
        return _highlighter is not None

    _tried_rosettes = True

    try:
        import rosettes  # type: ignore[import-not-found]
    except ImportError:
        return False

    class RosettesHighlighter:
        """Rosettes-based highlighter implementing the Highlighter protocol."""

        def highlight(self, code: str, language: str) -> str:
            result: str = rosettes.highlight(code, language=language)
            return result

    _highlighter = RosettesHighlighter()
    return True


def get_highlighter() -> Highlighter | SimpleHighlighter | None:
    """Get the current highlighter, loading Rosettes on first use if present."""
    if _highlighter is None:
        _try_import_rosettes()
    return _highlighter


def highlight(code: str, language: str) -> str | None:
    """Highlight code with the configured highlighter.

    Returns:
        Highlighted HTML, or None when no highlighter is available.
    """
    highlighter = get_highlighter()
    if highlighter is None:
        return None
    method = getattr(highlighter, "highlight", None)
    if callable(method):
        return method(code, language)
    return highlighter(code, language)  # type: ignore[operator]
