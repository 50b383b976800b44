"""HTML renderer: assembles block variants into the preview fragment.

Assembly rules:
- Heading, quote, rule, code fence and paragraph blocks map to one element.
- Adjacent list items of the same kind share one ``<ul>``/``<ol>``.
- A blank line becomes ``<br />``, except a single blank line sitting
  directly between two blocks, which is dropped.

Blocks are concatenated with no separator; the ``<br />`` markers carry the
author's vertical spacing.

Thread Safety:
    All per-render state lives in locals and the warning list of the call.
    One HtmlRenderer may be shared by concurrent callers.

"""

from __future__ import annotations

from collections.abc import Sequence

from noteweave.blocks import (
    Blank,
    Block,
    CodeFence,
    Heading,
    ListItem,
    ListKind,
    Paragraph,
    Quote,
    Rule,
)
from noteweave.config import RenderConfig, get_render_config
from noteweave.diagnostics import RenderWarning
from noteweave.errors import RenderError
from noteweave.inline import InlineRenderer
from noteweave.stringbuilder import StringBuilder
from noteweave.utils.logger import get_logger
from noteweave.utils.text import escape_attr, escape_text

logger = get_logger(__name__)

LINE_BREAK = "<br />"


class HtmlRenderer:
    """Render block variants to an HTML fragment.

    Usage:
        >>> from noteweave.scanner import BlockScanner
        >>> blocks = BlockScanner("# Hello **World**").scan()
        >>> HtmlRenderer().render(blocks)
        '<h1>Hello <strong>World</strong></h1>'

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration. When None, the config active in the
                calling context is read at render time.
        """
        self._config = config

    def render(
        self,
        blocks: Sequence[Block],
        warnings: list[RenderWarning] | None = None,
    ) -> str:
        """Render blocks to HTML.

        Args:
            blocks: Block variants in source order
            warnings: Optional sink for inline warnings

        Returns:
            HTML string ("" for no blocks)

        Raises:
            RenderError: If an element of blocks is not a block variant
        """
        config = self._config or get_render_config()
        inline = InlineRenderer(config, warnings)
        sb = StringBuilder()
        open_list: ListKind | None = None

        for index, block in enumerate(blocks):
            if open_list is not None and not (
                isinstance(block, ListItem) and block.kind is open_list
            ):
                sb.append(f"</{open_list.tag}>")
                open_list = None

            match block:
                case Blank():
                    if not self._is_block_separator(blocks, index):
                        sb.append(LINE_BREAK)
                case ListItem():
                    if open_list is None:
                        open_list = block.kind
                        sb.append(f"<{open_list.tag}>")
                    sb.append("<li>")
                    sb.append(inline.render(block.text, block.lineno))
                    sb.append("</li>")
                case Heading():
                    sb.append(f"<h{block.level}>")
                    sb.append(inline.render(block.text, block.lineno))
                    sb.append(f"</h{block.level}>")
                case Quote():
                    sb.append("<blockquote>")
                    sb.append(inline.render(block.text, block.lineno))
                    sb.append("</blockquote>")
                case Rule():
                    sb.append("<hr />")
                case CodeFence():
                    self._render_code_fence(block, sb, config)
                case Paragraph():
                    sb.append("<p>")
                    sb.append(inline.render(block.text, block.lineno))
                    sb.append("</p>")
                case _:
                    raise RenderError(
                        f"cannot render {type(block).__name__!r} as a block",
                        getattr(block, "lineno", None),
                    )

        if open_list is not None:
            sb.append(f"</{open_list.tag}>")

        return sb.build()

    @staticmethod
    def _is_block_separator(blocks: Sequence[Block], index: int) -> bool:
        """True for a lone blank line with a block on both sides."""
        if index == 0 or index == len(blocks) - 1:
            return False
        return not isinstance(blocks[index - 1], Blank) and not isinstance(
            blocks[index + 1], Blank
        )

    def _render_code_fence(
        self, fence: CodeFence, sb: StringBuilder, config: RenderConfig
    ) -> None:
        """Render a fenced code block; the body bypasses inline rules."""
        if config.highlight and fence.lang:
            try:
                from noteweave.highlighting import highlight

                highlighted = highlight(fence.body, fence.lang)
            except Exception:
                logger.debug(
                    "Syntax highlighting failed for language %r", fence.lang, exc_info=True
                )
            else:
                if highlighted is not None:
                    sb.append(highlighted)
                    return

        lang_class = f' class="language-{escape_attr(fence.lang)}"' if fence.lang else ""
        body = escape_text(fence.body) if config.escape_html else fence.body
        sb.append(f"<pre><code{lang_class}>")
        sb.append(body)
        sb.append("</code></pre>")
