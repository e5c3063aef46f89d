# Area: Protocol Tests
"""Tests for GameState and PlayerElement messages."""

import pytest

from hexwire.errors import InvalidFieldError
from hexwire.protocol import (
    ElementAction, GameState, MessageType, PlayerElement, WAITING_FOR_DISCARDS,
    decode, encode, strip_attrib_names,
)


class TestGameState:
    """Tests for GameState."""

    def test_encode(self):
        msg = GameState("game42", WAITING_FOR_DISCARDS)
        assert encode(msg) == "1025|game42,50"

    def test_round_trip(self):
        msg = GameState("game42", 15)
        assert decode(encode(msg)).message == msg

    def test_diagnostic_strip(self):
        msg = GameState("game42", 50)
        assert str(msg) == "GameState:game=game42|state=50"
        assert strip_attrib_names("game=game42|state=50") == "game42,50"

    def test_wrong_field_count(self):
        result = decode("1025|game42")
        assert not result.is_valid
        assert result.errors[0].error_type == "field_count"

    def test_non_int_state_rejected(self):
        with pytest.raises(InvalidFieldError):
            GameState("game42", "50")


class TestPlayerElement:
    """Tests for PlayerElement."""

    def test_action_values(self):
        assert int(ElementAction.SET) == 100
        assert int(ElementAction.GAIN) == 101
        assert int(ElementAction.LOSE) == 102

    def test_encode(self):
        msg = PlayerElement("game42", 2, ElementAction.LOSE, 1, 3)
        assert encode(msg) == "1024|game42,2,102,1,3"

    def test_round_trip(self):
        msg = PlayerElement("game42", 0, ElementAction.GAIN, 5, 2)
        result = decode(encode(msg))
        assert result.message == msg
        assert result.message.action is ElementAction.GAIN

    def test_unknown_action_rejected(self):
        result = decode("1024|game42,2,999,1,3")
        assert not result.is_valid
        assert result.errors[0].field_name == "action"

    def test_action_must_be_enum(self):
        with pytest.raises(InvalidFieldError):
            PlayerElement("game42", 2, 102, 1, 3)

    def test_diagnostic_string(self):
        msg = PlayerElement("game42", 2, ElementAction.LOSE, 1, 3)
        assert str(msg) == (
            "PlayerElement:game=game42|playerNum=2|actionType=LOSE|elementType=1|amount=3"
        )

    def test_strip_maps_action_name(self):
        msg = PlayerElement("game42", 2, ElementAction.LOSE, 1, 3)
        params = str(msg).partition(":")[2]
        stripped = strip_attrib_names(params, MessageType.PLAYERELEMENT)
        assert stripped == "game42,2,102,1,3"

    def test_strip_malformed_returns_none(self):
        assert strip_attrib_names("game=g|2", MessageType.PLAYERELEMENT) is None
