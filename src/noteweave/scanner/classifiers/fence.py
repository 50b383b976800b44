"""Fenced code block classifier mixin."""

from noteweave.charsets import FENCE


class FenceClassifierMixin:
    """Mixin providing fenced code detection."""

    def _try_classify_fence_start(self, line: str) -> str | None:
        """Try to classify a line as an opening fence.

        Opening fences are three backticks, optionally followed by a language
        tag. Backtick fences cannot have backticks in the info string.

        Args:
            line: Raw line without its terminator

        Returns:
            The info string ("" when absent) if the line opens a fence,
            None otherwise.
        """
        content = line.strip()
        if not content.startswith(FENCE):
            return None

        info = content[len(FENCE) :].strip()
        if "`" in info:
            return None
        return info

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line closes the current code block."""
        return line.strip() == FENCE

    def _find_closing_fence(self, lines: list[str], start: int) -> int:
        """Return the index of the first closing fence at or after start, or -1."""
        for index in range(start, len(lines)):
            if self._is_closing_fence(lines[index]):
                return index
        return -1
