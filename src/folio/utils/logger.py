"""Logging helper for Folio.

Wraps the standard library logging with a consistent ``folio.`` namespace.
The library never installs handlers; applications configure logging.

Example:
    >>> from folio.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger under the "folio" namespace

    Example:
        >>> get_logger("outline").name
        'folio.outline'
    """
    if not (name == "folio" or name.startswith("folio.")):
        name = f"folio.{name}"
    return logging.getLogger(name)
