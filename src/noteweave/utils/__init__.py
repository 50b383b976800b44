"""Utility modules for noteweave.

Provides:
- text: escape helpers and export-safe filenames
- logger: get_logger for logging
"""

from noteweave.utils.logger import get_logger
from noteweave.utils.text import escape_attr, escape_text, safe_filename

__all__ = [
    "escape_attr",
    "escape_text",
    "get_logger",
    "safe_filename",
]
