"""Block-level line scanner for noteweave.

Turns markdown source into a flat list of block variants. Inline markup is
left untouched in each variant's text.

Usage:
    >>> from noteweave.scanner import BlockScanner
    >>> blocks = BlockScanner("## Notes\\n> remember").scan()
"""

from noteweave.scanner.core import BlockScanner, split_lines

__all__ = ["BlockScanner", "split_lines"]
