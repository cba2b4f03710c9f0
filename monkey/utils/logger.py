"""Minimal logging utilities for Monkey.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from monkey.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "monkey." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("scanner")
        >>> logger.name
        'monkey.scanner'
    """
    if not (name == "monkey" or name.startswith("monkey.")):
        name = f"monkey.{name}"
    return logging.getLogger(name)
