"""Note export for the editor's download menu.

Markdown and text exports carry the note verbatim; HTML export carries the
rendered preview. PDF export is handled by the browser's print dialog and is
not produced here.

Example:
    >>> from noteweave.export import export_note
    >>> exported = export_note("Weekly Plan", "# Monday", "md")
    >>> exported.filename, exported.media_type
    ('weekly_plan.md', 'text/markdown')
"""

from __future__ import annotations

from dataclasses import dataclass

from noteweave.errors import ExportError
from noteweave.utils.logger import get_logger
from noteweave.utils.text import safe_filename

logger = get_logger(__name__)

MEDIA_TYPES: dict[str, str] = {
    "md": "text/markdown",
    "txt": "text/plain",
    "html": "text/html",
}


@dataclass(frozen=True, slots=True)
class ExportedNote:
    """A note ready to hand to the browser as a download.

    Attributes:
        filename: Download file name, extension included
        media_type: MIME type for the download blob
        content: File content

    """

    filename: str
    media_type: str
    content: str


def export_filename(title: str, fmt: str) -> str:
    """Build the download file name for a note.

    Examples:
        >>> export_filename("Trip: Lisbon", "txt")
        'trip__lisbon.txt'
        >>> export_filename("", "md")
        'untitled.md'
    """
    return f"{safe_filename(title)}.{fmt}"


def export_note(title: str, content: str, fmt: str) -> ExportedNote:
    """Export a note in the given format.

    Args:
        title: Note title
        content: Markdown content
        fmt: "md", "txt" or "html"

    Returns:
        ExportedNote

    Raises:
        ExportError: If fmt is not a supported format
    """
    media_type = MEDIA_TYPES.get(fmt)
    if media_type is None:
        supported = ", ".join(sorted(MEDIA_TYPES))
        raise ExportError(fmt, f"unsupported format (expected one of: {supported})")

    if fmt == "html":
        from noteweave import render

        body = render(content)
    else:
        body = content

    logger.debug("Exporting note %r as %s", title, fmt)
    return ExportedNote(filename=export_filename(title, fmt), media_type=media_type, content=body)
