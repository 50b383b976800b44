"""noteweave renderers.

Available Renderers:
- HtmlRenderer: block variants to the live-preview HTML fragment
- PlainTextRenderer: block variants to plain text for previews

"""

from noteweave.renderers.html import HtmlRenderer
from noteweave.renderers.text import PlainTextRenderer

__all__ = ["HtmlRenderer", "PlainTextRenderer"]
