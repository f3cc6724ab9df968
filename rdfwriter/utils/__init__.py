"""
Utilities Module - Logging setup shared by the CLI and tests.
"""

from .logging import ColoredFormatter, PlainFormatter, setup_colored_logging

__all__ = [
    "ColoredFormatter",
    "PlainFormatter",
    "setup_colored_logging",
]
