"""Logging helper for tagscan.

The scanner only logs at DEBUG level and never installs handlers; wiring
output is left to the calling generator.

Example:
    >>> from tagscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("scanning %d characters", 120)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``tagscan``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("divide").name
        'tagscan.divide'
    """
    if not (name == "tagscan" or name.startswith("tagscan.")):
        name = f"tagscan.{name}"
    return logging.getLogger(name)
