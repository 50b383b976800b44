"""Horizontal rule classifier mixin."""

from noteweave.blocks import Rule
from noteweave.charsets import RULE


class RuleClassifierMixin:
    """Mixin providing horizontal rule classification."""

    def _try_classify_rule(self, line: str, lineno: int) -> Rule | None:
        """Try to classify a line as a horizontal rule.

        Only a line that is exactly ``---`` (surrounding whitespace ignored)
        qualifies. ``----`` or ``--- x`` stay paragraph text.
        """
        if line.strip() != RULE:
            return None
        return Rule(lineno=lineno)
