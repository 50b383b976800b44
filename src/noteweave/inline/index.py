"""Delimiter index for one run of inline text.

Openers look up their closers here instead of re-scanning the rest of the
line, which keeps a line full of unmatched markers linear. Each table is
built lazily with one left-to-right pass and then queried by bisection.

Code spans are skipped the same way the inline scanner skips them: a single
backtick that has a partner hides everything up to that partner, any other
backtick run is plain text.

"""

from __future__ import annotations

from bisect import bisect_right

from noteweave.charsets import is_whitespace, is_word_char


def run_length(text: str, pos: int) -> int:
    """Number of consecutive copies of text[pos] starting at pos."""
    char = text[pos]
    end = pos
    while end < len(text) and text[end] == char:
        end += 1
    return end - pos


def code_span_end(text: str, pos: int) -> int:
    """Position after the code span opened by a single backtick at pos, or -1."""
    if run_length(text, pos) != 1:
        return -1
    close = text.find("`", pos + 1)
    if close <= pos + 1:
        return -1
    return close + 1


def _skip_backticks(text: str, pos: int) -> int:
    end = code_span_end(text, pos)
    return end if end != -1 else pos + run_length(text, pos)


def _is_closer(text: str, close: int, delim: str) -> bool:
    if is_whitespace(text[close - 1 : close]):
        return False
    if delim[0] == "_":
        after = text[close + len(delim) : close + len(delim) + 1]
        return not is_word_char(after)
    return True


class DelimiterIndex:
    """Closer positions per delimiter and bracket pairs for one text.

    Usage:
        >>> index = DelimiterIndex("*a* and [b]")
        >>> index.nearest_closer("*", 1)
        2
        >>> index.label_end(8)
        10

    """

    __slots__ = ("_brackets", "_closers", "_last_paren", "_text")

    def __init__(self, text: str) -> None:
        self._text = text
        self._closers: dict[str, list[int]] = {}
        self._brackets: dict[int, int] | None = None
        self._last_paren: int | None = None

    def nearest_closer(self, delim: str, start: int) -> int:
        """First valid closer for delim after start, or -1."""
        closers = self._closers_for(delim)
        index = bisect_right(closers, start)
        return closers[index] if index < len(closers) else -1

    def last_closer(self, delim: str, start: int) -> int:
        """Last valid closer for delim after start, or -1."""
        closers = self._closers_for(delim)
        if closers and closers[-1] > start:
            return closers[-1]
        return -1

    def label_end(self, open_pos: int) -> int:
        """Index of the ``]`` balancing the ``[`` at open_pos, or -1."""
        if self._brackets is None:
            self._brackets = self._pair_brackets()
        return self._brackets.get(open_pos, -1)

    def closing_paren(self, start: int) -> int:
        """Index of the first ``)`` at or after start, or -1."""
        if self._last_paren is None:
            self._last_paren = self._text.rfind(")")
        if start > self._last_paren:
            return -1
        return self._text.find(")", start)

    def _closers_for(self, delim: str) -> list[int]:
        closers = self._closers.get(delim)
        if closers is None:
            closers = self._closers[delim] = self._find_closers(delim)
        return closers

    def _find_closers(self, delim: str) -> list[int]:
        """Valid closer positions for delim, in order.

        A closer inside a longer run uses the end of that run, so
        ``**a *b***`` closes strong with the last two characters. Single
        delimiters skip double runs, which belong to strong spans.
        """
        text = self._text
        char = delim[0]
        width = len(delim)
        closers: list[int] = []
        pos = 0
        text_len = len(text)

        while pos < text_len:
            current = text[pos]
            if current == "`":
                pos = _skip_backticks(text, pos)
                continue
            if current != char:
                pos += 1
                continue

            run_end = pos + run_length(text, pos)
            run = run_end - pos
            if run >= width and not (width == 1 and run == 2):
                close = run_end - width
                if _is_closer(text, close, delim):
                    closers.append(close)
            pos = run_end

        return closers

    def _pair_brackets(self) -> dict[int, int]:
        """Map each balanced ``[`` to its ``]``; unbalanced brackets are left out."""
        text = self._text
        pairs: dict[int, int] = {}
        stack: list[int] = []
        pos = 0
        text_len = len(text)

        while pos < text_len:
            char = text[pos]
            if char == "`":
                pos = _skip_backticks(text, pos)
                continue
            if char == "[":
                stack.append(pos)
            elif char == "]" and stack:
                pairs[stack.pop()] = pos
            pos += 1

        return pairs
