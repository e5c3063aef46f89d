# Area: Protocol
"""
Game state and player element messages
======================================
PLAYERELEMENT  Server → Client   game, player_number, action, element_type, amount
GAMESTATE      Server → Client   game, state

State numbers and element types belong to the rules engine and pass
through as plain integers. The element action is a closed set.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, List, Optional

from ..errors import InvalidFieldError
from .core import (
    SEP2, FieldReader, MessageCodec, MessageType, ValidationResult,
    check_game_name, check_int, register_codec, strip_attrib_names,
)

WAITING_FOR_DISCARDS = 50


# ═══════════════════════════════════════════════════════════════════
# GAMESTATE
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class GameState:
    game: str
    state: int

    MESSAGE_TYPE: ClassVar[MessageType] = MessageType.GAMESTATE

    def __post_init__(self):
        check_game_name("GameState", self.game)
        check_int("GameState", "state", self.state)

    def __str__(self) -> str:
        return f"GameState:game={self.game}|state={self.state}"


def _decode_game_state(tokens: List[str], r: ValidationResult) -> Optional[GameState]:
    game = FieldReader.game_name(tokens[0], "game", r)
    state = FieldReader.integer(tokens[1], "state", r)
    if not r.is_valid:
        return None
    return GameState(game, state)


register_codec(MessageCodec(
    message_type=MessageType.GAMESTATE,
    message_cls=GameState,
    field_names=("game", "state"),
    encode_fields=lambda m: (m.game, m.state),
    decode_fields=_decode_game_state,
))


# ═══════════════════════════════════════════════════════════════════
# PLAYERELEMENT
# ═══════════════════════════════════════════════════════════════════

class ElementAction(IntEnum):
    SET = 100
    GAIN = 101
    LOSE = 102


@dataclass(frozen=True)
class PlayerElement:
    """A change to one of a player's counters, such as a resource amount."""
    game: str
    player_number: int
    action: ElementAction
    element_type: int
    amount: int

    MESSAGE_TYPE: ClassVar[MessageType] = MessageType.PLAYERELEMENT

    def __post_init__(self):
        check_game_name("PlayerElement", self.game)
        check_int("PlayerElement", "player_number", self.player_number)
        if not isinstance(self.action, ElementAction):
            raise InvalidFieldError("PlayerElement", "action", self.action,
                                    "expected an ElementAction")
        check_int("PlayerElement", "element_type", self.element_type)
        check_int("PlayerElement", "amount", self.amount)

    def __str__(self) -> str:
        return (f"PlayerElement:game={self.game}|playerNum={self.player_number}"
                f"|actionType={self.action.name}|elementType={self.element_type}"
                f"|amount={self.amount}")


def _decode_player_element(tokens: List[str],
                           r: ValidationResult) -> Optional[PlayerElement]:
    game = FieldReader.game_name(tokens[0], "game", r)
    player_number = FieldReader.integer(tokens[1], "player_number", r)
    action = FieldReader.enum_member(tokens[2], "action", ElementAction, r)
    element_type = FieldReader.integer(tokens[3], "element_type", r)
    amount = FieldReader.integer(tokens[4], "amount", r)
    if not r.is_valid:
        return None
    return PlayerElement(game, player_number, action, element_type, amount)


def strip_player_element_attrib_names(params: str) -> Optional[str]:
    """Like strip_attrib_names, but turns ``actionType=LOSE`` back into ``102``."""
    stripped = strip_attrib_names(params)
    if stripped is None:
        return None
    values = stripped.split(SEP2)
    if len(values) > 2 and values[2] in ElementAction.__members__:
        values[2] = str(int(ElementAction[values[2]]))
    return SEP2.join(values)


register_codec(MessageCodec(
    message_type=MessageType.PLAYERELEMENT,
    message_cls=PlayerElement,
    field_names=("game", "player_number", "action", "element_type", "amount"),
    encode_fields=lambda m: (m.game, m.player_number, int(m.action),
                             m.element_type, m.amount),
    decode_fields=_decode_player_element,
    strip_attrib_names=strip_player_element_attrib_names,
))
