"""ATX heading classifier mixin."""

from noteweave.blocks import Heading
from noteweave.charsets import HEADING_MARKER, MAX_HEADING_LEVEL


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    def _try_classify_heading(self, line: str, lineno: int) -> Heading | None:
        """Try to classify a line as an ATX heading.

        Headings start at column 0 with 1-6 ``#`` characters followed by a
        space. The whole marker run is counted before deciding the level, so
        ``###### x`` is level 6 and ``####### x`` is not a heading.

        Args:
            line: Raw line without its terminator
            lineno: 1-based line number

        Returns:
            Heading if the line qualifies, None otherwise.
        """
        level = 0
        while level < len(line) and line[level] == HEADING_MARKER:
            level += 1

        if level == 0 or level > MAX_HEADING_LEVEL:
            return None

        # Must be followed by a space
        if line[level : level + 1] != " ":
            return None

        return Heading(lineno=lineno, level=level, text=line[level + 1 :].strip())
