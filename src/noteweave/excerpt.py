"""Plain-text excerpts for the note list.

The note list shows the first few dozen characters of each note. Taking a
raw substring would show markdown syntax (``## ``, ``**``, link URLs), so the
excerpt is built from rendered plain text and cut at a word boundary.

Example:
    >>> from noteweave import extract_excerpt
    >>> extract_excerpt("# Groceries\\n\\n- **oat** milk\\n- [bread](http://shop)")
    'Groceries oat milk bread'
"""

from __future__ import annotations

from noteweave.renderers.text import PlainTextRenderer
from noteweave.scanner import BlockScanner

DEFAULT_EXCERPT_CHARS = 50


def extract_excerpt(
    source: str,
    *,
    max_chars: int = DEFAULT_EXCERPT_CHARS,
    suffix: str = "...",
) -> str:
    """Extract a plain-text excerpt from markdown.

    Blocks are joined with single spaces; blank lines, rules and markup are
    dropped. Whitespace-only notes return "" so the caller can show its own
    placeholder.

    Args:
        source: Markdown source of the note
        max_chars: Maximum length of the result, suffix included
        suffix: Appended when the text is truncated

    Returns:
        Plain-text excerpt
    """
    if not source or not source.strip():
        return ""

    blocks = BlockScanner(source).scan()
    text = " ".join(" ".join(part.split()) for part in PlainTextRenderer().render(blocks))
    return _truncate_at_word(text, max_chars, suffix)


def _truncate_at_word(text: str, length: int, suffix: str = "...") -> str:
    """Truncate at word boundary within length."""
    if not text or len(text) <= length:
        return text
    max_content = length - len(suffix)
    if max_content <= 0:
        return suffix[:length]
    truncated = text[:max_content]
    last_space = truncated.rfind(" ")
    result = truncated[:last_space].strip() if last_space > 0 else truncated.strip()
    return result + suffix if result else suffix
