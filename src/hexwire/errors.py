# Area: Shared
"""
hexwire.errors — Custom exception classes
=========================================

Defines the exception hierarchy for programming and configuration errors.
Malformed wire input is never raised; it is reported through DecodeResult.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional


class HexwireError(Exception):
    """Base exception for all hexwire package errors."""
    pass


def _short_repr(value: Any, limit: int = 40) -> str:
    try:
        text = repr(value)
    except ValueError:
        # int too large for str() conversion
        return f"<{type(value).__name__} too large to display>"
    return text if len(text) <= limit else f"{text[:limit]}..."


class InvalidFieldError(HexwireError):
    """Raised when a message or resource set is built from an invalid field."""

    def __init__(self, type_name: str, field_name: str, value: Any, reason: str):
        self.type_name = type_name
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(
            f"{type_name}.{field_name}={_short_repr(value)} is invalid: {reason}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type_name": self.type_name,
            "field": self.field_name,
            "received": _short_repr(self.value),
            "reason": self.reason,
        }


class UnknownMessageTypeError(HexwireError):
    """Raised when encoding an object whose kind has no registered codec."""

    def __init__(self, obj: Any):
        self.obj = obj
        super().__init__(
            f"No codec registered for {type(obj).__name__}"
        )


class ConfigurationError(HexwireError):
    """Raised when settings fail validation."""

    def __init__(self, errors: List[str], source: Optional[str] = None):
        self.errors = errors
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(f"Invalid configuration{where}: {'; '.join(errors)}")
