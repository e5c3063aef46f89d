# Area: Shared
"""
hexwire._shared.logging_formatters — Logging formatters
=======================================================

Colored terminal output and one-JSON-object-per-line file output.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        # Copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        text = super().format(record)
        for err in getattr(record, "errors", None) or ():
            text += "\n    " + self._format_field_error(err)
        return text

    @staticmethod
    def _format_field_error(err: dict) -> str:
        """One ``FieldError.to_dict()`` as ``clay: invalid_type (got 'x')``."""
        line = f"{err.get('field', '?')}: {err.get('error_type', 'error')}"
        if "received" in err:
            line += f" (got {err['received']!r})"
        return line


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    EXTRA_FIELDS = ("wire_line", "type_tag", "errors")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in self.EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)
