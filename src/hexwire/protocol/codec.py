# Area: Protocol
"""
hexwire.protocol.codec — Public encode/decode API
=================================================

Usage
-----
    from hexwire.protocol import Discard, encode, decode

    line = encode(Discard.from_amounts("game42", 1, 0, 2, 0, 1, 0))
    # "1033|game42,1,0,2,0,1,0"

    result = decode(line)
    if result.is_valid:
        handle(result.message)
    else:
        skip(line, result.errors)
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from ..errors import UnknownMessageTypeError
from .core import (
    DecodeResult, FieldError, MessageCodec, MessageRegistry, MessageType,
    decode_line, strip_attrib_names as _strip_generic,
)

# ── Import all message modules to register their codecs ──
from .messages_discard import Discard, DiscardRequest
from .messages_game import GameState, PlayerElement

Message = Union[Discard, DiscardRequest, GameState, PlayerElement]


# ─────────────────────────────────────────────
# PUBLIC API
# ─────────────────────────────────────────────

def _require_codec(message: Message) -> MessageCodec:
    codec = MessageRegistry.codec_for(message)
    if codec is None:
        raise UnknownMessageTypeError(message)
    return codec


def encode(message: Message) -> str:
    """Render a message as one wire line, without the line terminator."""
    return _require_codec(message).encode(message)


def decode(line: str) -> DecodeResult:
    """Decode one wire line. Never raises for malformed input."""
    return decode_line(line)


def parse_data_str(message_type: Union[MessageType, int], data: str) -> DecodeResult:
    """Decode the payload part of a line (after the tag and SEP)."""
    codec = MessageRegistry.get_codec(message_type)
    if codec is None:
        return DecodeResult.failure(FieldError("type_tag", "invalid_value",
                                               received=message_type))
    return codec.parse_data_str(data)


def to_diagnostic_string(message: Message) -> str:
    """Human-readable form for logs: ``TypeName:field=value|...``."""
    _require_codec(message)
    return str(message)


def strip_attrib_names(params: str,
                       message_type: Union[MessageType, int, str, None] = None
                       ) -> Optional[str]:
    """Turn the params of a diagnostic string into a wire payload.

    With ``message_type`` (tag or type name) the kind's own variant is used,
    so nested labels like ``resources=`` are removed too. Without it, a
    leading ``TypeName:`` picks the variant; otherwise the generic strip is
    used and any value still carrying a label makes the result None.
    """
    if message_type is None:
        type_name, colon, rest = params.partition(":")
        if colon and "=" not in type_name:
            return strip_attrib_names(rest, type_name)
        stripped = _strip_generic(params)
        if stripped is None or "=" in stripped:
            return None
        return stripped
    if isinstance(message_type, str):
        codec = MessageRegistry.get_codec_by_name(message_type)
    else:
        codec = MessageRegistry.get_codec(message_type)
    if codec is None:
        return None
    return codec.strip_attrib_names(params)


def list_supported_messages() -> List[str]:
    """Type names of all registered kinds, in tag order."""
    return [MessageRegistry.get_codec(t).type_name for t in MessageRegistry.list_types()]


def get_message_info() -> List[Dict[str, object]]:
    """Metadata about every registered kind."""
    info = []
    for message_type in MessageRegistry.list_types():
        codec = MessageRegistry.get_codec(message_type)
        info.append({
            "type_tag": int(message_type),
            "type_name": codec.type_name,
            "fields": list(codec.field_names),
        })
    return info
