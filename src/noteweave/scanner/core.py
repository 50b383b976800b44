"""Block scanner: classifies markdown lines into block variants.

The scanner walks the source once, line by line. Fenced code is consumed as
an opaque blob before any other rule sees its lines; every other line is
classified on its own.

Rule order (first match wins):
1. Fenced code (multi-line)
2. Blank line
3. Block quote
4. ATX heading
5. Horizontal rule
6. List item
7. Paragraph

Thread Safety:
    Scanner instances hold per-call state. Create one per source string.

"""

from __future__ import annotations

from collections.abc import Iterator

from noteweave.blocks import Blank, Block, CodeFence, Paragraph
from noteweave.diagnostics import RenderWarning, WarningCode
from noteweave.scanner.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    RuleClassifierMixin,
)
from noteweave.utils.logger import get_logger

logger = get_logger(__name__)


def split_lines(source: str) -> list[str]:
    """Split source into lines.

    ``\\r\\n`` and ``\\r`` are normalized to ``\\n``. A final line terminator
    ends the last line rather than starting an empty one.

    Examples:
        >>> split_lines("a\\n\\nb\\n")
        ['a', '', 'b']
        >>> split_lines("")
        []
    """
    if not source:
        return []
    text = source.replace("\r\n", "\n").replace("\r", "\n")
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


class BlockScanner(
    FenceClassifierMixin,
    QuoteClassifierMixin,
    HeadingClassifierMixin,
    RuleClassifierMixin,
    ListClassifierMixin,
):
    """Classify markdown source into a flat sequence of block variants.

    Usage:
        >>> scanner = BlockScanner("# Title\\n- a\\n- b")
        >>> [type(b).__name__ for b in scanner.scan()]
        ['Heading', 'ListItem', 'ListItem']

    """

    def __init__(self, source: str) -> None:
        """Initialize scanner.

        Args:
            source: Markdown source text
        """
        self._source = source
        self._lines = split_lines(source)
        self._warnings: list[RenderWarning] = []

    @property
    def warnings(self) -> tuple[RenderWarning, ...]:
        """Warnings recorded by the last scan()."""
        return tuple(self._warnings)

    def scan(self) -> list[Block]:
        """Scan the whole source.

        Returns:
            Block variants in source order
        """
        self._warnings.clear()
        return list(self._iter_blocks())

    def _iter_blocks(self) -> Iterator[Block]:
        lines = self._lines
        index = 0
        while index < len(lines):
            line = lines[index]
            lineno = index + 1

            info = self._try_classify_fence_start(line)
            if info is not None:
                close = self._find_closing_fence(lines, index + 1)
                if close != -1:
                    lang = info.split()[0] if info else None
                    body = "\n".join(lines[index + 1 : close])
                    yield CodeFence(lineno=lineno, lang=lang, body=body)
                    index = close + 1
                    continue
                # Unterminated: the opening line degrades to text
                self._warn_unterminated_fence(lineno)
                yield Paragraph(lineno=lineno, text=line.strip())
                index += 1
                continue

            yield self._classify_line(line, lineno)
            index += 1

    def _classify_line(self, line: str, lineno: int) -> Block:
        """Classify a single non-fence line."""
        if not line.strip():
            return Blank(lineno=lineno)

        block = (
            self._try_classify_quote(line, lineno)
            or self._try_classify_heading(line, lineno)
            or self._try_classify_rule(line, lineno)
            or self._try_classify_list_item(line, lineno)
        )
        if block is not None:
            return block
        return Paragraph(lineno=lineno, text=line.strip())

    def _warn_unterminated_fence(self, lineno: int) -> None:
        logger.debug("Unterminated code fence opened at line %d", lineno)
        self._warnings.append(
            RenderWarning(
                code=WarningCode.UNTERMINATED_FENCE,
                message="code fence is never closed; rendered as text",
                lineno=lineno,
            )
        )
