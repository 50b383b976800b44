"""Block quote classifier mixin."""

from noteweave.blocks import Quote
from noteweave.charsets import QUOTE_MARKER


class QuoteClassifierMixin:
    """Mixin providing single-line block quote classification."""

    def _try_classify_quote(self, line: str, lineno: int) -> Quote | None:
        """Try to classify a line as a block quote.

        A quote line starts at column 0 with ``>`` and a space. Consecutive
        quote lines stay separate blocks.

        Returns:
            Quote if the line qualifies, None otherwise.
        """
        if not line.startswith(QUOTE_MARKER + " "):
            return None
        return Quote(lineno=lineno, text=line[2:].strip())
