# Area: Protocol
"""Typed game messages and their text-line wire codec."""

from .core import (
    SEP,
    SEP2,
    MAX_GAME_NAME_LENGTH,
    MessageType,
    MessageCodec,
    MessageRegistry,
    DecodeResult,
    FieldError,
    is_valid_game_name,
)
from .codec import (
    Message,
    encode,
    decode,
    parse_data_str,
    to_diagnostic_string,
    strip_attrib_names,
    list_supported_messages,
    get_message_info,
)
from .messages_discard import (
    Discard,
    DiscardRequest,
    VERSION_FOR_ALWAYS_SEND_GAMESTATE,
)
from .messages_game import (
    ElementAction,
    GameState,
    PlayerElement,
    WAITING_FOR_DISCARDS,
)

__all__ = [
    "SEP",
    "SEP2",
    "MAX_GAME_NAME_LENGTH",
    "MessageType",
    "MessageCodec",
    "MessageRegistry",
    "DecodeResult",
    "FieldError",
    "is_valid_game_name",
    "Message",
    "encode",
    "decode",
    "parse_data_str",
    "to_diagnostic_string",
    "strip_attrib_names",
    "list_supported_messages",
    "get_message_info",
    "Discard",
    "DiscardRequest",
    "VERSION_FOR_ALWAYS_SEND_GAMESTATE",
    "ElementAction",
    "GameState",
    "PlayerElement",
    "WAITING_FOR_DISCARDS",
]
