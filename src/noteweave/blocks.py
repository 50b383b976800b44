"""Block variants produced by the line scanner.

Each variant describes one source line, or one fenced code block spanning
several lines. Variants are frozen dataclasses with slots, so they work
with ``match`` statements and are safe to share across threads.

Variants:
Block (base)
├── Heading      # … through ###### …
├── Quote        > …
├── Rule         ---
├── CodeFence    ``` … ```
├── ListItem     - … / + … / * … / 1. …
├── Paragraph    any other non-blank line
└── Blank        empty or whitespace-only line

Text payloads are raw markdown; inline spans are resolved at render time.
``CodeFence.body`` is never passed through inline rules.

"""

from dataclasses import dataclass
from enum import Enum


class ListKind(Enum):
    """Kind of list a list item belongs to."""

    UNORDERED = "ul"
    ORDERED = "ol"

    @property
    def tag(self) -> str:
        """HTML tag for lists of this kind."""
        return self.value


@dataclass(frozen=True, slots=True)
class Block:
    """Base class for block variants.

    Attributes:
        lineno: 1-based line where the block starts

    """

    lineno: int


@dataclass(frozen=True, slots=True)
class Heading(Block):
    """ATX heading.

    Markdown: ## text
    HTML: <h2>text</h2>

    """

    level: int
    text: str


@dataclass(frozen=True, slots=True)
class Quote(Block):
    """Single-line block quote.

    Markdown: > text
    HTML: <blockquote>text</blockquote>

    """

    text: str


@dataclass(frozen=True, slots=True)
class Rule(Block):
    """Horizontal rule.

    Markdown: ---
    HTML: <hr />

    """


@dataclass(frozen=True, slots=True)
class CodeFence(Block):
    """Fenced code block.

    Markdown: ```lang ... ```
    HTML: <pre><code class="language-lang">...</code></pre>

    """

    lang: str | None
    body: str


@dataclass(frozen=True, slots=True)
class ListItem(Block):
    """One list line. Adjacent items of the same kind share a list."""

    kind: ListKind
    text: str


@dataclass(frozen=True, slots=True)
class Paragraph(Block):
    """Non-blank line matching no other rule."""

    text: str


@dataclass(frozen=True, slots=True)
class Blank(Block):
    """Empty or whitespace-only line."""


__all__ = [
    "Blank",
    "Block",
    "CodeFence",
    "Heading",
    "ListItem",
    "ListKind",
    "Paragraph",
    "Quote",
    "Rule",
]
