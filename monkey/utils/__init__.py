"""Utility helpers shared across the Monkey package.

- get_logger: namespaced standard library loggers
"""

from .logger import get_logger

__all__ = ["get_logger"]
