"""Text helpers shared by the renderer and the export layer.

Example:
    >>> from noteweave.utils.text import safe_filename
    >>> safe_filename("Groceries & Errands")
    'groceries___errands'
"""

from __future__ import annotations

import html as html_module
import re

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def escape_attr(value: str) -> str:
    """Escape a value for use inside a double-quoted HTML attribute.

    Escapes ``&``, ``<``, ``>`` and ``"``. Single quotes are left alone since
    every attribute the renderer writes is double-quoted.

    Examples:
        >>> escape_attr('say "hi"')
        'say &quot;hi&quot;'
    """
    if not value:
        return ""
    return html_module.escape(value, quote=False).replace('"', "&quot;")


def escape_text(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` in element content."""
    if not text:
        return ""
    return html_module.escape(text, quote=False)


def safe_filename(title: str, fallback: str = "untitled") -> str:
    """Turn a note title into a download-safe file stem.

    Every character outside ``[a-zA-Z0-9]`` becomes an underscore and the
    result is lower-cased, so whitespace becomes underscores too. Only an
    empty title falls back to ``fallback``.

    Args:
        title: Note title as typed by the user
        fallback: Stem to use for empty titles

    Returns:
        File stem without extension

    Examples:
        >>> safe_filename("Meeting Notes (Q3)")
        'meeting_notes__q3_'
        >>> safe_filename(" Trip ")
        '_trip_'
        >>> safe_filename("")
        'untitled'
    """
    stem = _UNSAFE_FILENAME_CHARS.sub("_", title).lower()
    return stem or fallback
