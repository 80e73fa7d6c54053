"""Minimal logging utilities for bemjson-md.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; configure logging in the application.

Example:
    >>> from bemjson_md.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Building rules")
"""

from __future__ import annotations

import logging

_ROOT = "bemjson_md"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "bemjson_md." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'bemjson_md.mymodule'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
