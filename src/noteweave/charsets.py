"""Character sets for O(1) classification.

All sets are frozensets: immutable, shared at module level, O(1) membership.

Usage:
    from noteweave.charsets import UNORDERED_LIST_MARKERS

    if content[0] in UNORDERED_LIST_MARKERS:
        ...
"""

# Block-level markers
HEADING_MARKER = "#"
QUOTE_MARKER = ">"
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-+*")
ORDERED_LIST_DELIMITER = "."
FENCE = "```"
RULE = "---"
MAX_HEADING_LEVEL = 6

# Inline characters that may start a span; everything else is plain text
INLINE_SPECIAL: frozenset[str] = frozenset("`*_~[!")

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")


def is_whitespace(char: str) -> bool:
    """Check if character is whitespace. Empty string counts as whitespace."""
    return not char or char in WHITESPACE or char.isspace()


def is_word_char(char: str) -> bool:
    """Check if character is a letter or digit (Unicode-aware)."""
    return bool(char) and char.isalnum()
