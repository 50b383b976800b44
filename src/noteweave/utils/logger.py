"""Logging helpers for noteweave.

Example:
    >>> from noteweave.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering note preview")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``noteweave``.

    The library never attaches handlers; the host application decides where
    records go.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("preview").name
        'noteweave.preview'
    """
    if not (name == "noteweave" or name.startswith("noteweave.")):
        name = f"noteweave.{name}"
    return logging.getLogger(name)
