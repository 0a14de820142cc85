"""Minimal logging utilities for japanese_codepoints.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; configure logging in the application.

Example:
    >>> from japanese_codepoints.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Building code point set")
"""

from __future__ import annotations

import logging

_ROOT = "japanese_codepoints"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "japanese_codepoints." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("registry")
        >>> logger.name
        'japanese_codepoints.registry'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
