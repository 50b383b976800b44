"""Exception classes for noteweave.

Rendering markdown never raises; these cover the seams around it, such as
hand-built block lists and the export layer.
"""

from __future__ import annotations


class NoteweaveError(Exception):
    """Base exception for all noteweave errors.
    
    Subclass this for specific error categories.
    """

    pass


class RenderError(NoteweaveError):
    """Error during HTML assembly.
    
    Raised when the renderer is handed an object that is not a block
    variant. Blocks produced by the scanner never trigger it.
    """

    def __init__(self, message: str, lineno: int | None = None) -> None:
        """Initialize render error with optional line number.
        
        Args:
            message: Error description
            lineno: Source line of the offending block (1-indexed)
        """
        self.message = message
        self.lineno = lineno

        location = f"line {lineno}: " if lineno is not None else ""
        super().__init__(f"{location}{message}")


class ExportError(NoteweaveError):
    """Error when a note cannot be exported in the requested format."""

    def __init__(self, fmt: str, message: str) -> None:
        """Initialize export error.
        
        Args:
            fmt: Requested export format (e.g., "pdf")
            message: Description of the problem
        """
        self.fmt = fmt
        super().__init__(f"Export format '{fmt}': {message}")
