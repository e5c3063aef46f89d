# Area: Shared
"""
hexwire._shared.logging_config — Structured logging setup
=========================================================

Configures dual logging: terminal (colored) + optional file (JSON).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .logging_formatters import JSONFormatter, TerminalFormatter

# Package logger
logger = logging.getLogger("hexwire")


def setup_logging(
    log_file_path: Optional[Union[str, Path]] = None,
    level: Union[int, str] = logging.INFO,
) -> logging.Logger:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str | Path | None
        Where to write JSON log lines. No file handler when None.
    level : int | str
        Logging level. Defaults to INFO.

    Returns
    -------
    logging.Logger
        The configured ``hexwire`` logger.
    """
    pkg_logger = logging.getLogger("hexwire")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False
    return pkg_logger
