"""Tests for HtmlRenderer block assembly."""

from __future__ import annotations

import pytest

from noteweave.blocks import (
    Blank,
    CodeFence,
    Heading,
    ListItem,
    ListKind,
    Paragraph,
    Quote,
    Rule,
)
from noteweave.config import RenderConfig
from noteweave.errors import RenderError
from noteweave.renderers.html import HtmlRenderer


def ul(lineno: int, text: str) -> ListItem:
    return ListItem(lineno=lineno, kind=ListKind.UNORDERED, text=text)


def ol(lineno: int, text: str) -> ListItem:
    return ListItem(lineno=lineno, kind=ListKind.ORDERED, text=text)


class TestHtmlRenderer:
    """Rendering hand-built block lists."""

    def test_render_nothing(self) -> None:
        assert HtmlRenderer().render([]) == ""

    def test_render_heading(self) -> None:
        html = HtmlRenderer().render([Heading(lineno=1, level=3, text="Hello *World*")])
        assert html == "<h3>Hello <em>World</em></h3>"

    def test_render_quote(self) -> None:
        html = HtmlRenderer().render([Quote(lineno=1, text="**wise**")])
        assert html == "<blockquote><strong>wise</strong></blockquote>"

    def test_render_rule(self) -> None:
        assert HtmlRenderer().render([Rule(lineno=1)]) == "<hr />"

    def test_render_paragraph(self) -> None:
        assert HtmlRenderer().render([Paragraph(lineno=1, text="Hi")]) == "<p>Hi</p>"

    def test_render_code_fence(self) -> None:
        html = HtmlRenderer().render([CodeFence(lineno=1, lang="py", body="*x* = `1`")])
        assert html == '<pre><code class="language-py">*x* = `1`</code></pre>'

    def test_render_code_fence_without_language(self) -> None:
        html = HtmlRenderer().render([CodeFence(lineno=1, lang=None, body="x")])
        assert html == "<pre><code>x</code></pre>"

    def test_code_fence_escaped_when_configured(self) -> None:
        renderer = HtmlRenderer(RenderConfig(escape_html=True))
        html = renderer.render([CodeFence(lineno=1, lang=None, body="<div>")])
        assert html == "<pre><code>&lt;div&gt;</code></pre>"

    def test_language_attribute_is_escaped(self) -> None:
        html = HtmlRenderer().render([CodeFence(lineno=1, lang='a"b', body="")])
        assert 'class="language-a&quot;b"' in html


class TestListMerging:
    """Adjacent list items share one list element."""

    def test_adjacent_items_merge(self) -> None:
        html = HtmlRenderer().render([ul(1, "a"), ul(2, "b"), ul(3, "c")])
        assert html == "<ul><li>a</li><li>b</li><li>c</li></ul>"

    def test_ordered_items_merge(self) -> None:
        html = HtmlRenderer().render([ol(1, "a"), ol(2, "b")])
        assert html == "<ol><li>a</li><li>b</li></ol>"

    def test_kind_change_starts_new_list(self) -> None:
        html = HtmlRenderer().render([ul(1, "a"), ol(2, "b")])
        assert html == "<ul><li>a</li></ul><ol><li>b</li></ol>"

    def test_blank_line_splits_lists(self) -> None:
        html = HtmlRenderer().render([ul(1, "a"), Blank(lineno=2), ul(3, "b")])
        assert html == "<ul><li>a</li></ul><ul><li>b</li></ul>"

    def test_paragraph_closes_list(self) -> None:
        html = HtmlRenderer().render([ul(1, "a"), Paragraph(lineno=2, text="p")])
        assert html == "<ul><li>a</li></ul><p>p</p>"


class TestBlankLines:
    """Blank line markers and their cleanup."""

    def test_single_blank_between_blocks_dropped(self) -> None:
        blocks = [Paragraph(lineno=1, text="a"), Blank(lineno=2), Paragraph(lineno=3, text="b")]
        assert HtmlRenderer().render(blocks) == "<p>a</p><p>b</p>"

    def test_single_blank_between_other_blocks_dropped(self) -> None:
        blocks = [Heading(lineno=1, level=1, text="T"), Blank(lineno=2), Rule(lineno=3)]
        assert HtmlRenderer().render(blocks) == "<h1>T</h1><hr />"

    def test_double_blank_keeps_markers(self) -> None:
        blocks = [
            Paragraph(lineno=1, text="a"),
            Blank(lineno=2),
            Blank(lineno=3),
            Paragraph(lineno=4, text="b"),
        ]
        assert HtmlRenderer().render(blocks) == "<p>a</p><br /><br /><p>b</p>"

    def test_leading_and_trailing_blanks_kept(self) -> None:
        blocks = [Blank(lineno=1), Paragraph(lineno=2, text="a"), Blank(lineno=3)]
        assert HtmlRenderer().render(blocks) == "<br /><p>a</p><br />"


class TestRenderErrors:
    """Objects that are not block variants."""

    def test_unknown_block_raises(self) -> None:
        with pytest.raises(RenderError, match="str"):
            HtmlRenderer().render(["not a block"])  # type: ignore[list-item]

    def test_error_carries_line(self) -> None:
        class Stray:
            lineno = 9

        with pytest.raises(RenderError) as exc_info:
            HtmlRenderer().render([Stray()])  # type: ignore[list-item]
        assert exc_info.value.lineno == 9
        assert str(exc_info.value).startswith("line 9:")
