# Area: Protocol
"""
Discard messages
================
DISCARDREQUEST  Server → Client   game, num_discards
DISCARD         Client → Server   game, clay, ore, sheep, wheat, wood, unknown

A Discard is the client's answer to a DiscardRequest. If the total is wrong
the server sends the DiscardRequest again; that check lives in the rules
engine, not here.

After a correct discard, while other players still have to discard, the
server sends GameState(WAITING_FOR_DISCARDS) even though the state did not
change, so bots see the same message sequence every time. Servers 2.0.00
through 2.4.00 left that message out, and older clients follow the discard
progress without it, so it is only sent to peers at
VERSION_FOR_ALWAYS_SEND_GAMESTATE or newer (see hexwire.versioning).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional

from ..errors import InvalidFieldError
from ..resources import ResourceKind, ResourceSet
from .core import (
    FieldReader, MessageCodec, MessageType, ValidationResult,
    check_game_name, check_int, register_codec, strip_attrib_names,
)

# First version (2.5.00) that always gets the redundant GameState after a discard.
VERSION_FOR_ALWAYS_SEND_GAMESTATE = 2500


# ═══════════════════════════════════════════════════════════════════
# DISCARDREQUEST
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DiscardRequest:
    """Server asks a player to discard ``num_discards`` resources."""
    game: str
    num_discards: int

    MESSAGE_TYPE: ClassVar[MessageType] = MessageType.DISCARDREQUEST

    def __post_init__(self):
        check_game_name("DiscardRequest", self.game)
        check_int("DiscardRequest", "num_discards", self.num_discards)

    def __str__(self) -> str:
        return f"DiscardRequest:game={self.game}|numDiscards={self.num_discards}"


def _decode_discard_request(tokens: List[str],
                            r: ValidationResult) -> Optional[DiscardRequest]:
    game = FieldReader.game_name(tokens[0], "game", r)
    num_discards = FieldReader.integer(tokens[1], "num_discards", r)
    if not r.is_valid:
        return None
    return DiscardRequest(game, num_discards)


register_codec(MessageCodec(
    message_type=MessageType.DISCARDREQUEST,
    message_cls=DiscardRequest,
    field_names=("game", "num_discards"),
    encode_fields=lambda m: (m.game, m.num_discards),
    decode_fields=_decode_discard_request,
))


# ═══════════════════════════════════════════════════════════════════
# DISCARD
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Discard:
    """Resources a player has chosen to discard.

    ``resources`` is kept as given, not copied; ResourceSet is immutable.
    """
    game: str
    resources: ResourceSet

    MESSAGE_TYPE: ClassVar[MessageType] = MessageType.DISCARD

    def __post_init__(self):
        check_game_name("Discard", self.game)
        if not isinstance(self.resources, ResourceSet):
            raise InvalidFieldError("Discard", "resources", self.resources,
                                    "expected a ResourceSet")

    @classmethod
    def from_amounts(cls, game: str, clay: int, ore: int, sheep: int,
                     wheat: int, wood: int, unknown: int) -> "Discard":
        return cls(game, ResourceSet(clay, ore, sheep, wheat, wood, unknown))

    def __str__(self) -> str:
        return f"Discard:game={self.game}|resources={self.resources}"


def _encode_discard(m: Discard) -> tuple:
    return (m.game, *m.resources.amounts())


def _decode_discard(tokens: List[str], r: ValidationResult) -> Optional[Discard]:
    game = FieldReader.game_name(tokens[0], "game", r)
    amounts = [
        FieldReader.integer(token, kind.name.lower(), r)
        for kind, token in zip(ResourceKind, tokens[1:])
    ]
    if not r.is_valid:
        return None
    return Discard(game, ResourceSet(*amounts))


def strip_discard_attrib_names(params: str) -> Optional[str]:
    """``game=g|resources=clay=1|ore=0|...`` → ``g,1,0,...``"""
    return strip_attrib_names(params.replace("resources=", ""))


register_codec(MessageCodec(
    message_type=MessageType.DISCARD,
    message_cls=Discard,
    field_names=("game",) + tuple(kind.name.lower() for kind in ResourceKind),
    encode_fields=_encode_discard,
    decode_fields=_decode_discard,
    strip_attrib_names=strip_discard_attrib_names,
))
