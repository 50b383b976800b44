"""Render warnings and the result-with-fallback type.

Rendering never fails. Constructs that degrade to literal text are reported
as warnings next to the best-effort HTML instead.

Example:
    >>> from noteweave import render_with_warnings
    >>> result = render_with_warnings("```py\\nprint(1)")
    >>> result.warnings[0].code
    <WarningCode.UNTERMINATED_FENCE: 'unterminated-fence'>
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WarningCode(Enum):
    """Kinds of degraded markdown."""

    UNTERMINATED_FENCE = "unterminated-fence"
    UNCLOSED_CODE_SPAN = "unclosed-code-span"
    UNMATCHED_DELIMITER = "unmatched-delimiter"
    INCOMPLETE_LINK = "incomplete-link"


@dataclass(frozen=True, slots=True)
class RenderWarning:
    """A construct that was rendered as literal text.

    Attributes:
        code: Warning kind
        message: Human-readable description
        lineno: 1-based source line (0 when unknown)

    """

    code: WarningCode
    message: str
    lineno: int = 0

    def __str__(self) -> str:
        if self.lineno:
            return f"{self.lineno}: {self.message}"
        return self.message


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Best-effort HTML plus any warnings raised while producing it."""

    html: str
    warnings: tuple[RenderWarning, ...] = ()

    @property
    def ok(self) -> bool:
        """True when nothing degraded."""
        return not self.warnings
