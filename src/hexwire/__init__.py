"""
hexwire — Text wire codec for a turn-based board-game protocol
==============================================================

Quick Start:
    from hexwire import Discard, encode, decode

    line = encode(Discard.from_amounts("game42", 1, 0, 2, 0, 1, 0))
    result = decode(line)
    assert result.message == Discard.from_amounts("game42", 1, 0, 2, 0, 1, 0)

Malformed lines decode to a DecodeResult with ``is_valid`` False and never
raise, so a transport can log and skip them.
"""

from .errors import (
    HexwireError,
    InvalidFieldError,
    UnknownMessageTypeError,
    ConfigurationError,
)
from .resources import ResourceKind, ResourceSet
from .protocol import (
    SEP,
    SEP2,
    MessageType,
    DecodeResult,
    FieldError,
    Message,
    Discard,
    DiscardRequest,
    GameState,
    PlayerElement,
    ElementAction,
    VERSION_FOR_ALWAYS_SEND_GAMESTATE,
    WAITING_FOR_DISCARDS,
    encode,
    decode,
    parse_data_str,
    to_diagnostic_string,
    strip_attrib_names,
)
from .dispatcher import LineDispatcher
from .versioning import CURRENT_VERSION, always_send_game_state

__all__ = [
    # Errors
    "HexwireError",
    "InvalidFieldError",
    "UnknownMessageTypeError",
    "ConfigurationError",
    # Resources
    "ResourceKind",
    "ResourceSet",
    # Protocol
    "SEP",
    "SEP2",
    "MessageType",
    "DecodeResult",
    "FieldError",
    "Message",
    "Discard",
    "DiscardRequest",
    "GameState",
    "PlayerElement",
    "ElementAction",
    "VERSION_FOR_ALWAYS_SEND_GAMESTATE",
    "WAITING_FOR_DISCARDS",
    "encode",
    "decode",
    "parse_data_str",
    "to_diagnostic_string",
    "strip_attrib_names",
    # Dispatch & versioning
    "LineDispatcher",
    "CURRENT_VERSION",
    "always_send_game_state",
]
__version__ = "2.5.0"
