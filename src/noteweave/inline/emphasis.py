"""Emphasis, strong and strikethrough spans.

Delimiters pair with the nearest valid closer on the same line. With
``RenderConfig(greedy_emphasis=True)`` they pair with the last valid closer
instead, which reproduces the legacy preview's regex behaviour.

Flanking rules (simplified from CommonMark):
- An opener must not be followed by whitespace.
- A closer must not be preceded by whitespace.
- ``_`` cannot open after a letter/digit or close before one, so
  ``snake_case_name`` stays literal.

Closer positions come from the DelimiterIndex of the text being
transformed (see ``noteweave.inline.index``).

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from noteweave.charsets import is_whitespace, is_word_char
from noteweave.diagnostics import WarningCode
from noteweave.inline.index import run_length

if TYPE_CHECKING:
    from noteweave.config import RenderConfig
    from noteweave.inline.index import DelimiterIndex


class EmphasisMixin:
    """Mixin for delimiter-pair spans.

    Required Host Attributes:
        - _config: RenderConfig
        - _index: DelimiterIndex of the text being transformed
        - _in_merged_span: True while transforming a greedily merged span

    Required Host Methods:
        - _transform(text, depth, in_link) -> str
        - _wrap(tag, inner_html) -> str
        - _warn(code, message) -> None

    """

    _config: RenderConfig
    _index: DelimiterIndex
    _in_merged_span: bool

    def _try_emphasis(
        self, text: str, pos: int, depth: int, in_link: bool
    ) -> tuple[str, int] | None:
        """Try to open an emphasis span at pos (``*`` or ``_``).

        A run of three tries ``<strong><em>`` first, a run of two tries
        ``<strong>``, a single delimiter tries ``<em>``.
        """
        char = text[pos]
        run = run_length(text, pos)

        if run >= 3:
            matched = self._match_delimited(text, pos, char * 3, depth, in_link)
            if matched is not None:
                inner, end = matched
                return self._wrap("strong", self._wrap("em", inner)), end

        if run >= 2:
            matched = self._match_delimited(text, pos, char * 2, depth, in_link)
            if matched is None:
                return None
            inner, end = matched
            return self._wrap("strong", inner), end

        matched = self._match_delimited(text, pos, char, depth, in_link)
        if matched is None:
            return None
        inner, end = matched
        return self._wrap("em", inner), end

    def _try_strikethrough(
        self, text: str, pos: int, depth: int, in_link: bool
    ) -> tuple[str, int] | None:
        """Try to open a ``~~`` span at pos. A single ``~`` is literal."""
        if run_length(text, pos) < 2:
            return None
        matched = self._match_delimited(text, pos, "~~", depth, in_link)
        if matched is None:
            return None
        inner, end = matched
        return self._wrap("del", inner), end

    def _match_delimited(
        self, text: str, pos: int, delim: str, depth: int, in_link: bool
    ) -> tuple[str, int] | None:
        """Pair the opener ``delim`` at pos with a closer.

        In greedy mode a span that reaches past its nearest closer swallows
        the delimiters in between; those are not reported as unmatched.

        Returns:
            (inner_html, position after closer), or None when the opener is
            not flanking or no closer exists.
        """
        opener_end = pos + len(delim)
        if is_whitespace(text[opener_end : opener_end + 1]):
            return None
        if delim[0] == "_" and pos > 0 and is_word_char(text[pos - 1]):
            return None

        close = self._index.nearest_closer(delim, opener_end)
        if close == -1:
            if len(delim) == 2 and not self._in_merged_span:
                self._warn(WarningCode.UNMATCHED_DELIMITER, f"unmatched '{delim}'")
            return None

        if self._config.greedy_emphasis:
            last = self._index.last_closer(delim, opener_end)
            if last != close:
                inner = self._transform_merged(text[opener_end:last], depth, in_link)
                return inner, last + len(delim)

        inner = self._transform(text[opener_end:close], depth + 1, in_link)
        return inner, close + len(delim)

    def _transform_merged(self, inner_text: str, depth: int, in_link: bool) -> str:
        outer = self._in_merged_span
        self._in_merged_span = True
        try:
            return self._transform(inner_text, depth + 1, in_link)
        finally:
            self._in_merged_span = outer
