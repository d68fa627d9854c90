"""
Shared utilities.
"""

from .logger import AliasLogger, get_logger, setup_logger

__all__ = [
    "AliasLogger",
    "get_logger",
    "setup_logger",
]
