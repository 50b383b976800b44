"""Link and image spans.

Markdown:
    [label](url)   -> <a href="url" target="_blank" rel="noopener noreferrer">label</a>
    ![alt](url)    -> <img src="url" alt="alt" />

Images are tried at ``!`` before the ``[`` is ever seen, so an image is never
also read as a link. Labels are bracket-balanced; link labels are transformed
recursively (an image may sit inside a link), image alt text is literal.
URLs run to the first ``)``.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from noteweave.diagnostics import WarningCode

if TYPE_CHECKING:
    from noteweave.inline.index import DelimiterIndex


class LinkMixin:
    """Mixin for link and image parsing.

    Required Host Attributes:
        - _index: DelimiterIndex of the text being transformed

    Required Host Methods:
        - _transform(text, depth, in_link) -> str
        - _link(label_html, url) -> str
        - _image(alt, url) -> str
        - _warn(code, message) -> None

    """

    _index: DelimiterIndex

    def _try_image(self, text: str, pos: int) -> tuple[str, int] | None:
        """Try to parse ``![alt](url)`` starting at pos."""
        if text[pos + 1 : pos + 2] != "[":
            return None

        label_end = self._index.label_end(pos + 1)
        if label_end == -1:
            return None

        destination = self._parse_destination(text, label_end)
        if destination is None:
            return None

        url, end = destination
        return self._image(text[pos + 2 : label_end], url), end

    def _try_link(self, text: str, pos: int, depth: int) -> tuple[str, int] | None:
        """Try to parse ``[label](url)`` starting at pos."""
        label_end = self._index.label_end(pos)
        if label_end == -1:
            return None

        destination = self._parse_destination(text, label_end)
        if destination is None:
            return None

        url, end = destination
        label_html = self._transform(text[pos + 1 : label_end], depth + 1, True)
        return self._link(label_html, url), end

    def _parse_destination(self, text: str, label_end: int) -> tuple[str, int] | None:
        """Parse ``(url)`` directly after the label.

        Returns:
            (url, position after ``)``), or None.
        """
        if text[label_end + 1 : label_end + 2] != "(":
            return None

        close = self._index.closing_paren(label_end + 2)
        if close == -1:
            self._warn(WarningCode.INCOMPLETE_LINK, "link destination is missing ')'")
            return None

        return text[label_end + 2 : close].strip(), close + 1
