"""Utility modules for tagscan.

Provides:
- logger: get_logger for logging
"""

from tagscan.utils.logger import get_logger

__all__ = [
    "get_logger",
]
