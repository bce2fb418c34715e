"""Logging helpers for external-bodyxml.

The library only creates loggers; handlers and levels are left to the
application embedding it.

Example:
    >>> from external_bodyxml.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Dropping table subtree")
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "external_bodyxml"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``external_bodyxml``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("engine").name
        'external_bodyxml.engine'
    """
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
