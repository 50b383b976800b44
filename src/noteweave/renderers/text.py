"""Plain-text renderer: markup-free text for note list previews.

Inline markers are dropped: emphasis keeps its content, links keep their
label, images keep their alt text, code spans keep their code. Code fences
contribute their first line.

Example:
    >>> from noteweave.scanner import BlockScanner
    >>> PlainTextRenderer().render(BlockScanner("# **Plan**\\n- buy [milk](x)").scan())
    ['Plan', 'buy milk']
"""

from __future__ import annotations

from collections.abc import Sequence

from noteweave.blocks import Block, CodeFence, Heading, ListItem, Paragraph, Quote
from noteweave.config import RenderConfig
from noteweave.inline import InlineRenderer


class PlainInlineRenderer(InlineRenderer):
    """Inline transformer that emits text instead of HTML."""

    def _text(self, text: str) -> str:
        return text

    def _wrap(self, tag: str, inner: str) -> str:
        return inner

    def _code_span(self, code: str) -> str:
        return code

    def _link(self, label_html: str, url: str) -> str:
        return label_html

    def _image(self, alt: str, url: str) -> str:
        return alt


class PlainTextRenderer:
    """Render block variants to one plain-text string per block.

    Blank lines and rules produce nothing.
    """

    __slots__ = ("_inline",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._inline = PlainInlineRenderer(config or RenderConfig())

    def render(self, blocks: Sequence[Block]) -> list[str]:
        parts: list[str] = []
        for block in blocks:
            text = self.render_block(block)
            if text:
                parts.append(text)
        return parts

    def render_block(self, block: Block) -> str:
        match block:
            case Heading() | Quote() | ListItem() | Paragraph():
                return self._inline.render(block.text, block.lineno).strip()
            case CodeFence():
                return block.body.split("\n", 1)[0].strip()
            case _:
                return ""
