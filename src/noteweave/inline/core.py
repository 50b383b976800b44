"""Inline span transformer.

A left-to-right scanner over one block's text. At each special character it
tries the spans that may start there; whatever does not form a span is
emitted as plain text.

Span precedence at a given position:
1. Code span (`` `code` ``), content verbatim
2. Image (``![alt](url)``)
3. Link (``[label](url)``), not inside another link label
4. Strikethrough (``~~text~~``)
5. Strong / emphasis (``**``, ``__``, ``*``, ``_``)

Output hooks (``_text``, ``_wrap``, ``_code_span``, ``_link``, ``_image``)
produce HTML here and are overridden by the plain-text renderer.

Thread Safety:
    Instances hold per-call state (current line, warning sink). Create one
    per render call.

"""

from __future__ import annotations

from noteweave.charsets import INLINE_SPECIAL
from noteweave.config import RenderConfig, get_render_config
from noteweave.diagnostics import RenderWarning, WarningCode
from noteweave.inline.emphasis import EmphasisMixin
from noteweave.inline.index import DelimiterIndex, code_span_end, run_length
from noteweave.inline.links import LinkMixin
from noteweave.stringbuilder import StringBuilder
from noteweave.utils.logger import get_logger
from noteweave.utils.text import escape_attr, escape_text

logger = get_logger(__name__)

# Deeper nesting is emitted as literal text
MAX_NESTING = 16


class InlineRenderer(EmphasisMixin, LinkMixin):
    """Transform the inline markdown of a single block into HTML.

    Usage:
        >>> InlineRenderer().render("**bold** and [link](http://x)")
        '<strong>bold</strong> and <a href="http://x" target="_blank" rel="noopener noreferrer">link</a>'

    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        warnings: list[RenderWarning] | None = None,
    ) -> None:
        """Initialize inline renderer.

        Args:
            config: Render configuration (defaults to the context's config)
            warnings: Sink for warnings; shared with the block renderer
        """
        self._config = config or get_render_config()
        self._warnings: list[RenderWarning] = warnings if warnings is not None else []
        self._lineno = 0
        self._index = DelimiterIndex("")
        self._in_merged_span = False

    @property
    def warnings(self) -> tuple[RenderWarning, ...]:
        return tuple(self._warnings)

    def render(self, text: str, lineno: int = 0) -> str:
        """Transform inline markdown to HTML.

        Args:
            text: Inline markdown of one block
            lineno: Source line, attached to warnings
        """
        self._lineno = lineno
        return self._transform(text, 0, False)

    def _transform(self, text: str, depth: int, in_link: bool) -> str:
        if not text:
            return ""

        outer_index = self._index
        self._index = DelimiterIndex(text)
        try:
            return self._scan(text, depth, in_link)
        finally:
            self._index = outer_index

    def _scan(self, text: str, depth: int, in_link: bool) -> str:
        sb = StringBuilder()
        pos = 0
        plain_start = 0
        text_len = len(text)

        while pos < text_len:
            if text[pos] not in INLINE_SPECIAL:
                pos += 1
                continue

            span = self._try_span(text, pos, depth, in_link) if depth < MAX_NESTING else None
            if span is None:
                pos += self._literal_width(text, pos)
                continue

            html, end = span
            if plain_start < pos:
                sb.append(self._text(text[plain_start:pos]))
            sb.append(html)
            pos = plain_start = end

        if plain_start < text_len:
            sb.append(self._text(text[plain_start:]))
        return sb.build()

    def _try_span(
        self, text: str, pos: int, depth: int, in_link: bool
    ) -> tuple[str, int] | None:
        """Try every span that may start at pos, in precedence order."""
        match text[pos]:
            case "`":
                return self._try_code_span(text, pos)
            case "!":
                return self._try_image(text, pos)
            case "[":
                return None if in_link else self._try_link(text, pos, depth)
            case "~":
                return self._try_strikethrough(text, pos, depth, in_link)
            case _:
                return self._try_emphasis(text, pos, depth, in_link)

    def _literal_width(self, text: str, pos: int) -> int:
        """Characters to emit literally when no span starts at pos.

        Delimiter runs are skipped whole so a failed ``**`` cannot reopen as
        ``*``. A failed ``![`` skips both characters; the ``[`` would fail
        the same way as a link.
        """
        char = text[pos]
        if char in "`*_~":
            return run_length(text, pos)
        if char == "!" and text[pos + 1 : pos + 2] == "[":
            return 2
        return 1

    # =========================================================================
    # Code spans
    # =========================================================================

    def _try_code_span(self, text: str, pos: int) -> tuple[str, int] | None:
        end = code_span_end(text, pos)
        if end == -1:
            if run_length(text, pos) == 1:
                self._warn(WarningCode.UNCLOSED_CODE_SPAN, "inline code is never closed")
            return None
        return self._code_span(text[pos + 1 : end - 1]), end

    # =========================================================================
    # Output hooks
    # =========================================================================

    def _text(self, text: str) -> str:
        transformer = self._config.text_transformer
        if transformer is not None:
            text = transformer(text)
        return escape_text(text) if self._config.escape_html else text

    def _wrap(self, tag: str, inner: str) -> str:
        return f"<{tag}>{inner}</{tag}>"

    def _code_span(self, code: str) -> str:
        if self._config.escape_html:
            code = escape_text(code)
        return f"<code>{code}</code>"

    def _link(self, label_html: str, url: str) -> str:
        target = self._config.link_target
        target_attr = f' target="{escape_attr(target)}"' if target else ""
        return f'<a href="{escape_attr(url)}"{target_attr} rel="noopener noreferrer">{label_html}</a>'

    def _image(self, alt: str, url: str) -> str:
        return f'<img src="{escape_attr(url)}" alt="{escape_attr(alt)}" />'

    def _warn(self, code: WarningCode, message: str) -> None:
        logger.debug("Line %d: %s", self._lineno, message)
        self._warnings.append(RenderWarning(code=code, message=message, lineno=self._lineno))
