"""Tests for the inline span transformer."""

import pytest

from noteweave.config import RenderConfig
from noteweave.diagnostics import WarningCode
from noteweave.inline import MAX_NESTING, InlineRenderer


@pytest.fixture
def inline() -> InlineRenderer:
    return InlineRenderer(RenderConfig())


class TestCodeSpans:
    """Inline code."""

    def test_code_span(self, inline: InlineRenderer) -> None:
        assert inline.render("run `make test` now") == "run <code>make test</code> now"

    def test_content_is_verbatim(self, inline: InlineRenderer) -> None:
        """Emphasis and link syntax inside code is untouched."""
        assert inline.render("`**x** [a](b)`") == "<code>**x** [a](b)</code>"

    def test_code_span_protects_emphasis_closer(self, inline: InlineRenderer) -> None:
        assert inline.render("*a `*` b*") == "<em>a <code>*</code> b</em>"

    def test_unclosed_code_span_is_literal(self) -> None:
        warnings: list = []
        inline = InlineRenderer(RenderConfig(), warnings)
        assert inline.render("it's 5 o`clock", lineno=7) == "it's 5 o`clock"
        assert [w.code for w in warnings] == [WarningCode.UNCLOSED_CODE_SPAN]
        assert warnings[0].lineno == 7

    def test_double_backticks_are_literal(self, inline: InlineRenderer) -> None:
        assert inline.render("``") == "``"


class TestStrongAndEmphasis:
    """Bold and italic spans."""

    @pytest.mark.parametrize("delim", ["**", "__"])
    def test_strong(self, inline: InlineRenderer, delim: str) -> None:
        assert inline.render(f"{delim}bold{delim}") == "<strong>bold</strong>"

    @pytest.mark.parametrize("delim", ["*", "_"])
    def test_emphasis(self, inline: InlineRenderer, delim: str) -> None:
        assert inline.render(f"{delim}it{delim}") == "<em>it</em>"

    def test_nearest_pairs(self, inline: InlineRenderer) -> None:
        """Two bold spans on one line stay two spans."""
        assert inline.render("**a** and **b**") == "<strong>a</strong> and <strong>b</strong>"

    def test_emphasis_containing_strong(self, inline: InlineRenderer) -> None:
        assert inline.render("*a **b** c*") == "<em>a <strong>b</strong> c</em>"

    def test_strong_containing_emphasis(self, inline: InlineRenderer) -> None:
        assert inline.render("**a *b* c**") == "<strong>a <em>b</em> c</strong>"

    def test_strong_closing_inside_triple_run(self, inline: InlineRenderer) -> None:
        assert inline.render("**a *b***") == "<strong>a <em>b</em></strong>"

    def test_triple_delimiters(self, inline: InlineRenderer) -> None:
        assert inline.render("***both***") == "<strong><em>both</em></strong>"

    def test_opener_followed_by_space_is_literal(self, inline: InlineRenderer) -> None:
        assert inline.render("2 * 3 * 4") == "2 * 3 * 4"

    def test_intraword_underscores_are_literal(self, inline: InlineRenderer) -> None:
        assert inline.render("snake_case_name") == "snake_case_name"

    def test_intraword_asterisks_work(self, inline: InlineRenderer) -> None:
        assert inline.render("un*frigging*believable") == "un<em>frigging</em>believable"

    def test_empty_span_is_literal(self, inline: InlineRenderer) -> None:
        assert inline.render("****") == "****"

    def test_unmatched_strong_warns(self) -> None:
        warnings: list = []
        inline = InlineRenderer(RenderConfig(), warnings)
        assert inline.render("**open") == "**open"
        assert [w.code for w in warnings] == [WarningCode.UNMATCHED_DELIMITER]

    def test_unmatched_single_does_not_warn(self) -> None:
        warnings: list = []
        inline = InlineRenderer(RenderConfig(), warnings)
        assert inline.render("*open") == "*open"
        assert warnings == []


class TestGreedyEmphasis:
    """Legacy greedy pairing."""

    def test_greedy_merges_spans(self) -> None:
        inline = InlineRenderer(RenderConfig(greedy_emphasis=True))
        assert inline.render("**a** and **b**") == "<strong>a** and **b</strong>"

    def test_greedy_single_pair_unchanged(self) -> None:
        inline = InlineRenderer(RenderConfig(greedy_emphasis=True))
        assert inline.render("say **hi**") == "say <strong>hi</strong>"

    def test_merged_span_reports_no_warnings(self) -> None:
        warnings: list = []
        inline = InlineRenderer(RenderConfig(greedy_emphasis=True), warnings)
        assert inline.render("**a** and **b**") == "<strong>a** and **b</strong>"
        assert warnings == []

    def test_unmatched_inside_unmerged_span_still_warns(self) -> None:
        warnings: list = []
        inline = InlineRenderer(RenderConfig(greedy_emphasis=True), warnings)
        assert inline.render("*a **b c*") == "<em>a **b c</em>"
        assert [w.code for w in warnings] == [WarningCode.UNMATCHED_DELIMITER]


class TestStrikethrough:
    """~~deleted~~ spans."""

    def test_strikethrough(self, inline: InlineRenderer) -> None:
        assert inline.render("~~old~~ new") == "<del>old</del> new"

    def test_single_tilde_is_literal(self, inline: InlineRenderer) -> None:
        assert inline.render("~approx~") == "~approx~"

    def test_strikethrough_with_strong(self, inline: InlineRenderer) -> None:
        assert inline.render("~~**gone**~~") == "<del><strong>gone</strong></del>"


class TestLinksAndImages:
    """Links and images."""

    def test_link(self, inline: InlineRenderer) -> None:
        assert inline.render("[text](http://example.com)") == (
            '<a href="http://example.com" target="_blank" rel="noopener noreferrer">text</a>'
        )

    def test_image(self, inline: InlineRenderer) -> None:
        assert inline.render("![alt](http://x/y.png)") == (
            '<img src="http://x/y.png" alt="alt" />'
        )

    def test_image_is_not_wrapped_in_link(self, inline: InlineRenderer) -> None:
        assert "<a " not in inline.render("![alt](http://x/y.png)")

    def test_image_inside_link(self, inline: InlineRenderer) -> None:
        html = inline.render("[![logo](l.png)](http://home)")
        assert html.startswith('<a href="http://home"')
        assert '<img src="l.png" alt="logo" />' in html

    def test_emphasis_in_label(self, inline: InlineRenderer) -> None:
        html = inline.render("[**bold** link](u)")
        assert ">" + "<strong>bold</strong> link</a>" in html

    def test_nested_link_label_is_literal(self, inline: InlineRenderer) -> None:
        html = inline.render("[a [b](c) d](e)")
        assert html.count("<a ") == 1
        assert "[b](c)" in html

    def test_url_is_stripped_and_escaped(self, inline: InlineRenderer) -> None:
        html = inline.render('[x]( http://a?b=1&c="2" )')
        assert 'href="http://a?b=1&amp;c=&quot;2&quot;"' in html

    def test_bracket_without_destination_is_literal(self, inline: InlineRenderer) -> None:
        assert inline.render("[x] done") == "[x] done"

    def test_unterminated_destination_warns(self) -> None:
        warnings: list = []
        inline = InlineRenderer(RenderConfig(), warnings)
        assert inline.render("![a](b") == "![a](b"
        assert [w.code for w in warnings] == [WarningCode.INCOMPLETE_LINK]

    def test_custom_link_target(self) -> None:
        inline = InlineRenderer(RenderConfig(link_target=""))
        assert inline.render("[a](b)") == '<a href="b" rel="noopener noreferrer">a</a>'


class TestTextHandling:
    """Plain text runs."""

    def test_plain_text_unchanged(self, inline: InlineRenderer) -> None:
        assert inline.render("just words, 100% plain!") == "just words, 100% plain!"

    def test_raw_html_passes_through(self, inline: InlineRenderer) -> None:
        assert inline.render("<b>x</b> & y") == "<b>x</b> & y"

    def test_escape_html(self) -> None:
        inline = InlineRenderer(RenderConfig(escape_html=True))
        assert inline.render("<b>x</b> & `<i>`") == "&lt;b&gt;x&lt;/b&gt; &amp; <code>&lt;i&gt;</code>"

    def test_text_transformer(self) -> None:
        inline = InlineRenderer(RenderConfig(text_transformer=str.upper))
        assert inline.render("a **b** `c`") == "A <strong>B</strong> <code>c</code>"

    def test_deep_nesting_degrades_to_text(self) -> None:
        """Greedy pairing can nest one level per delimiter pair; past the limit it is text."""
        inline = InlineRenderer(RenderConfig(greedy_emphasis=True))
        depth = MAX_NESTING + 5
        source = "*a " * depth + "x" + " a*" * depth
        html = inline.render(source)
        assert html.count("<em>") == MAX_NESTING
        assert html.count("</em>") == MAX_NESTING
        assert "x" in html
