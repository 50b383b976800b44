"""List item classifier mixin."""

from __future__ import annotations

from noteweave.blocks import ListItem, ListKind
from noteweave.charsets import ORDERED_LIST_DELIMITER, UNORDERED_LIST_MARKERS

# Longer digit runs are paragraph text
_MAX_ORDINAL_DIGITS = 9


class ListClassifierMixin:
    """Mixin providing list item classification."""

    def _try_classify_list_item(self, line: str, lineno: int) -> ListItem | None:
        """Try to classify a line as a list item.

        Leading indentation is ignored; lists are flat.

        Unordered: ``-``, ``+`` or ``*`` followed by a space.
        Ordered: digits, ``.``, then a space. The number itself is dropped.

        Returns:
            ListItem if the line qualifies, None otherwise.
        """
        content = line.lstrip()
        if not content:
            return None

        if content[0] in UNORDERED_LIST_MARKERS:
            if content[1:2] != " ":
                return None
            return ListItem(lineno=lineno, kind=ListKind.UNORDERED, text=content[2:].strip())

        if content[0].isdigit():
            pos = 0
            while pos < len(content) and content[pos].isdigit():
                pos += 1
            if pos > _MAX_ORDINAL_DIGITS:
                return None
            if content[pos : pos + 2] == ORDERED_LIST_DELIMITER + " ":
                return ListItem(
                    lineno=lineno, kind=ListKind.ORDERED, text=content[pos + 2 :].strip()
                )
        return None
