"""Inline span transformer for noteweave.

Applied to the text of headings, quotes, list items and paragraphs. Code
fence bodies never reach it.
"""

from noteweave.inline.core import MAX_NESTING, InlineRenderer

__all__ = ["MAX_NESTING", "InlineRenderer"]
