# Area: Shared
"""
Shared utilities.

This package contains:
- Logging configuration and formatters
"""

from .logging_config import setup_logging
from .logging_formatters import JSONFormatter, TerminalFormatter

__all__ = [
    "setup_logging",
    "JSONFormatter",
    "TerminalFormatter",
]
