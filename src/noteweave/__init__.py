"""
noteweave: markdown preview rendering for the NoteWeave note editor.

Turns a note's markdown into the HTML fragment shown in the live preview.
Rendering is synchronous, pure and never raises: malformed markdown degrades
to literal text.

Quick Start:
    >>> from noteweave import render
    >>> render("# Hello **World**")
    '<h1>Hello <strong>World</strong></h1>'

    >>> # Best-effort HTML plus warnings about degraded markup
    >>> from noteweave import render_with_warnings
    >>> result = render_with_warnings("**unfinished")
    >>> result.html, [w.code.value for w in result.warnings]
    ('<p>**unfinished</p>', ['unmatched-delimiter'])

    >>> # Or bundle a config with the Markdown class
    >>> from noteweave import Markdown, RenderConfig
    >>> md = Markdown(RenderConfig(escape_html=True))
    >>> md("<b>hi</b>")
    '<p>&lt;b&gt;hi&lt;/b&gt;</p>'

Installation:
    pip install noteweave              # Renderer (zero deps)
    pip install noteweave[syntax]      # + Syntax highlighting via Rosettes
"""

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
from noteweave.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from noteweave.diagnostics import RenderResult, RenderWarning, WarningCode
from noteweave.errors import ExportError, NoteweaveError, RenderError
from noteweave.excerpt import extract_excerpt
from noteweave.export import ExportedNote, export_filename, export_note
from noteweave.inline import InlineRenderer
from noteweave.renderers.html import HtmlRenderer
from noteweave.renderers.text import PlainTextRenderer
from noteweave.scanner import BlockScanner

__version__ = "0.1.0"


def scan(source: str) -> list[Block]:
    """Classify markdown source into block variants.

    Example:
        >>> [type(b).__name__ for b in scan("# Title\\n\\nText")]
        ['Heading', 'Blank', 'Paragraph']
    """
    return BlockScanner(source).scan()


def render(source: str) -> str:
    """Render markdown to an HTML fragment.

    Uses the RenderConfig active in the current context.

    Args:
        source: Markdown source text (any string, including "")

    Returns:
        HTML string ("" for empty input)
    """
    return render_with_warnings(source).html


def render_with_warnings(source: str) -> RenderResult:
    """Render markdown and report constructs that degraded to literal text.

    Args:
        source: Markdown source text

    Returns:
        RenderResult with the same HTML render() returns, plus warnings
        ordered by line
    """
    if not source:
        return RenderResult(html="")

    scanner = BlockScanner(source)
    blocks = scanner.scan()
    warnings = list(scanner.warnings)
    html = HtmlRenderer().render(blocks, warnings)
    warnings.sort(key=lambda w: w.lineno)
    return RenderResult(html=html, warnings=tuple(warnings))


class Markdown:
    """Markdown renderer bound to a fixed configuration.

    Usage:
        >>> md = Markdown(RenderConfig(greedy_emphasis=True))
        >>> md("**a** and **b**")
        '<p><strong>a** and **b</strong></p>'

    Thread Safety:
        The config is immutable and installed via ContextVar around each
        call. Safe to share between threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize Markdown renderer.

        Args:
            config: Render configuration (defaults to RenderConfig())
        """
        self._config = config or RenderConfig()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Render markdown to HTML with this instance's config."""
        return self.render_with_warnings(source).html

    def render_with_warnings(self, source: str) -> RenderResult:
        """Render markdown and collect warnings with this instance's config."""
        with render_config_context(self._config):
            return render_with_warnings(source)

    def scan(self, source: str) -> list[Block]:
        """Classify markdown source into block variants."""
        return scan(source)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "render",
    "render_with_warnings",
    "scan",
    "Markdown",
    # Block variants
    "Blank",
    "Block",
    "CodeFence",
    "Heading",
    "ListItem",
    "ListKind",
    "Paragraph",
    "Quote",
    "Rule",
    # Pipeline components
    "BlockScanner",
    "InlineRenderer",
    "HtmlRenderer",
    "PlainTextRenderer",
    # Results and errors
    "RenderResult",
    "RenderWarning",
    "WarningCode",
    "NoteweaveError",
    "RenderError",
    "ExportError",
    # Note helpers
    "extract_excerpt",
    "ExportedNote",
    "export_filename",
    "export_note",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
