# Area: Protocol
"""
hexwire.protocol.core — Wire codec framework
============================================

Every message is one text line:

    TYPE_TAG SEP field SEP2 field SEP2 ... SEP2 field

The dispatcher splits the tag off at the first SEP without knowing the
kind's field count, then hands the remainder to that kind's codec, which
splits on SEP2. Field values never contain SEP or SEP2; there is no
escaping, so string fields are restricted to a closed identifier charset.

Decoding never raises for malformed input. It returns a DecodeResult that
either holds a fully built message or the list of field errors.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type

from ..errors import InvalidFieldError
from ..resources import INT32_MAX, INT32_MIN


# ═══════════════════════════════════════════════════════════════════
# 1. ENUMS & CONSTANTS
# ═══════════════════════════════════════════════════════════════════

SEP = "|"
SEP2 = ","

MAX_GAME_NAME_LENGTH = 30

# Letters, digits, '_', '.', '-'; inner spaces allowed; 1..30 chars.
GAME_NAME_RE = re.compile(
    r"[A-Za-z0-9_.\-](?:[A-Za-z0-9_. \-]{0,%d}[A-Za-z0-9_.\-])?"
    % (MAX_GAME_NAME_LENGTH - 2)
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class MessageType(IntEnum):
    """Wire type tags. Append only: existing values never change."""
    PLAYERELEMENT = 1024
    GAMESTATE = 1025
    DISCARDREQUEST = 1029
    DISCARD = 1033


# ═══════════════════════════════════════════════════════════════════
# 2. ERROR / RESULT TYPES
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class FieldError:
    """Single field-level decode failure."""
    field_name: str
    error_type: str        # missing | invalid_type | invalid_value | field_count
    expected: Optional[str] = None
    received: Optional[Any] = None

    def to_dict(self) -> dict:
        d = {"field": self.field_name, "error_type": self.error_type}
        if self.expected:
            d["expected"] = self.expected
        if self.received is not None:
            d["received"] = str(self.received)
        return d

    def __str__(self) -> str:
        text = f"{self.field_name}: {self.error_type}"
        if self.expected:
            text += f" (expected {self.expected}"
            if self.received is not None:
                text += f", got {self.received!r}"
            text += ")"
        return text


@dataclass
class ValidationResult:
    """Errors accumulated while reading the tokens of one payload."""
    is_valid: bool = True
    errors: List[FieldError] = field(default_factory=list)

    def add_error(self, err: FieldError):
        self.is_valid = False
        self.errors.append(err)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding one line: a whole message, or the reasons it isn't."""
    message: Optional[Any] = None
    errors: Tuple[FieldError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.message is not None

    @classmethod
    def success(cls, message: Any) -> "DecodeResult":
        return cls(message=message)

    @classmethod
    def failure(cls, *errors: FieldError) -> "DecodeResult":
        return cls(message=None, errors=tuple(errors))

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
        }


# ═══════════════════════════════════════════════════════════════════
# 3. FIELD READERS — token → value, accumulating errors
# ═══════════════════════════════════════════════════════════════════

def is_valid_game_name(value: Any) -> bool:
    return isinstance(value, str) and GAME_NAME_RE.fullmatch(value) is not None


class FieldReader:
    """Static token readers. Each returns None and records an error on failure."""

    @staticmethod
    def game_name(token: str, field_name: str,
                  result: ValidationResult) -> Optional[str]:
        if not is_valid_game_name(token):
            result.add_error(FieldError(
                field_name, "invalid_value",
                expected=f"game name of 1-{MAX_GAME_NAME_LENGTH} chars [A-Za-z0-9 _.-]",
                received=token,
            ))
            return None
        return token

    @staticmethod
    def integer(token: str, field_name: str,
                result: ValidationResult) -> Optional[int]:
        if INTEGER_RE.fullmatch(token) is None:
            result.add_error(FieldError(field_name, "invalid_type",
                                        expected="base-10 integer",
                                        received=token))
            return None
        try:
            value = int(token)
        except ValueError:
            # digit string longer than the interpreter's conversion limit
            value = None
        if value is None or not INT32_MIN <= value <= INT32_MAX:
            result.add_error(FieldError(
                field_name, "invalid_value",
                expected=f"integer in [{INT32_MIN}, {INT32_MAX}]",
                received=token if len(token) <= 16 else f"{token[:16]}...",
            ))
            return None
        return value

    @staticmethod
    def enum_member(token: str, field_name: str, enum_cls: Type[IntEnum],
                    result: ValidationResult) -> Optional[IntEnum]:
        value = FieldReader.integer(token, field_name, result)
        if value is None:
            return None
        try:
            return enum_cls(value)
        except ValueError:
            result.add_error(FieldError(
                field_name, "invalid_value",
                expected=f"one of {[m.value for m in enum_cls]}",
                received=token,
            ))
            return None


# ═══════════════════════════════════════════════════════════════════
# 4. CONSTRUCTION CHECKS — used by message __post_init__
# ═══════════════════════════════════════════════════════════════════

def check_game_name(type_name: str, value: Any) -> None:
    if not is_valid_game_name(value):
        raise InvalidFieldError(
            type_name, "game", value,
            f"must be 1-{MAX_GAME_NAME_LENGTH} chars of [A-Za-z0-9 _.-] "
            "with no leading or trailing space",
        )


def check_int(type_name: str, field_name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError(type_name, field_name, value, "expected an integer")
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidFieldError(type_name, field_name, value,
                                "outside the 32-bit signed range")


# ═══════════════════════════════════════════════════════════════════
# 5. DIAGNOSTIC FORM → PARAMETER LIST
# ═══════════════════════════════════════════════════════════════════

def strip_attrib_names(params: str) -> Optional[str]:
    """Turn ``a=1|b=2|c=3`` into ``1,2,3``.

    Returns None if any piece has no ``name=`` label.
    """
    values = []
    for piece in params.split(SEP):
        _name, eq, value = piece.partition("=")
        if not eq:
            return None
        values.append(value)
    return SEP2.join(values)


# ═══════════════════════════════════════════════════════════════════
# 6. CODEC & REGISTRY
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class MessageCodec:
    """Encode/decode/strip functions for one message kind."""
    message_type: MessageType
    message_cls: type
    field_names: Tuple[str, ...]
    encode_fields: Callable[[Any], Sequence[Any]]
    decode_fields: Callable[[List[str], ValidationResult], Any]
    strip_attrib_names: Callable[[str], Optional[str]] = strip_attrib_names

    @property
    def type_name(self) -> str:
        return self.message_cls.__name__

    @property
    def field_count(self) -> int:
        return len(self.field_names)

    def encode(self, message: Any) -> str:
        payload = SEP2.join(str(v) for v in self.encode_fields(message))
        return f"{int(self.message_type)}{SEP}{payload}"

    def parse_data_str(self, data: str) -> DecodeResult:
        tokens = data.split(SEP2)
        if len(tokens) != self.field_count:
            return DecodeResult.failure(FieldError(
                "payload", "field_count",
                expected=f"{self.field_count} fields",
                received=len(tokens),
            ))

        r = ValidationResult()
        try:
            message = self.decode_fields(tokens, r)
        except InvalidFieldError as e:
            r.add_error(FieldError(e.field_name, "invalid_value",
                                   expected=e.reason, received=e.value))
            message = None
        if not r.is_valid or message is None:
            return DecodeResult.failure(*r.errors)
        return DecodeResult.success(message)


class MessageRegistry:
    """Maps type tags → codecs."""
    _codecs: Dict[MessageType, MessageCodec] = {}

    @classmethod
    def register(cls, codec: MessageCodec) -> MessageCodec:
        if codec.message_type in cls._codecs:
            raise ValueError(f"Type tag {int(codec.message_type)} already registered "
                             f"to {cls._codecs[codec.message_type].type_name}")
        cls._codecs[codec.message_type] = codec
        return codec

    @classmethod
    def get_codec(cls, message_type: int) -> Optional[MessageCodec]:
        try:
            return cls._codecs.get(MessageType(message_type))
        except ValueError:
            return None

    @classmethod
    def get_codec_by_name(cls, type_name: str) -> Optional[MessageCodec]:
        for codec in cls._codecs.values():
            if codec.type_name == type_name:
                return codec
        return None

    @classmethod
    def codec_for(cls, message: Any) -> Optional[MessageCodec]:
        codec = cls._codecs.get(getattr(message, "MESSAGE_TYPE", None))
        if codec is None or not isinstance(message, codec.message_cls):
            return None
        return codec

    @classmethod
    def list_types(cls) -> List[MessageType]:
        return sorted(cls._codecs)


def register_codec(codec: MessageCodec) -> MessageCodec:
    return MessageRegistry.register(codec)


def decode_line(line: str) -> DecodeResult:
    """Split the tag off at the first SEP and decode the rest with its codec."""
    tag, sep, data = line.partition(SEP)
    if not sep:
        return DecodeResult.failure(FieldError("line", "missing",
                                               expected=f"TAG{SEP}payload",
                                               received=line))
    r = ValidationResult()
    message_type = FieldReader.integer(tag, "type_tag", r)
    if message_type is None:
        return DecodeResult.failure(*r.errors)

    codec = MessageRegistry.get_codec(message_type)
    if codec is None:
        return DecodeResult.failure(FieldError(
            "type_tag", "invalid_value",
            expected=f"one of {[int(t) for t in MessageRegistry.list_types()]}",
            received=message_type,
        ))
    return codec.parse_data_str(data)
