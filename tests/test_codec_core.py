# Area: Protocol Tests
"""Tests for the codec framework: line decoding, registry, readers."""

import pytest

from hexwire.errors import UnknownMessageTypeError
from hexwire.protocol import (
    Discard, DiscardRequest, ElementAction, GameState, MessageCodec,
    MessageRegistry, MessageType, PlayerElement,
    decode, encode, get_message_info, list_supported_messages,
    parse_data_str, strip_attrib_names, to_diagnostic_string,
)
from hexwire.protocol.core import FieldReader, ValidationResult, decode_line


class TestDecodeLine:
    """Tag handling before the per-kind decoder runs."""

    def test_missing_separator(self):
        result = decode_line("1033")
        assert not result.is_valid
        assert result.errors[0].field_name == "line"

    def test_non_numeric_tag(self):
        result = decode("DISCARD|game42,1,0,2,0,1,0")
        assert not result.is_valid
        assert result.errors[0].field_name == "type_tag"

    def test_unknown_tag(self):
        result = decode("9999|game42,1")
        assert not result.is_valid
        assert result.errors[0].received == 9999

    def test_empty_line(self):
        assert not decode("").is_valid

    def test_garbage_never_raises(self):
        for line in ["|", "||", ",,,", "1033|,,,,,,", "-1|x", "1033|" + "9" * 5000 + ",0,0,0,0,0,0"]:
            result = decode(line)
            assert not result.is_valid
            assert result.message is None

    def test_failure_result_to_dict(self):
        d = decode("1033|g,x,0,0,0,0,0").to_dict()
        assert d["is_valid"] is False
        assert d["errors"][0]["field"] == "clay"
        assert d["errors"][0]["received"] == "x"


class TestParseDataStr:
    def test_unknown_type(self):
        assert not parse_data_str(4242, "a,b").is_valid

    def test_accepts_plain_int_tag(self):
        assert parse_data_str(1033, "g,0,0,0,0,0,0").is_valid


class TestRegistry:
    """Tests for MessageRegistry lookups."""

    def test_list_types(self):
        assert [int(t) for t in MessageRegistry.list_types()] == [1024, 1025, 1029, 1033]

    def test_get_codec(self):
        codec = MessageRegistry.get_codec(MessageType.DISCARD)
        assert codec.message_cls is Discard
        assert codec.field_count == 7

    def test_get_codec_unknown(self):
        assert MessageRegistry.get_codec(1) is None

    def test_get_codec_by_name(self):
        assert MessageRegistry.get_codec_by_name("Discard").message_type == MessageType.DISCARD
        assert MessageRegistry.get_codec_by_name("Nope") is None

    def test_codec_for_message(self):
        msg = Discard.from_amounts("g", 0, 0, 0, 0, 0, 0)
        assert MessageRegistry.codec_for(msg).type_name == "Discard"

    def test_codec_for_other_object(self):
        assert MessageRegistry.codec_for("1033|g") is None

    def test_duplicate_tag_rejected(self):
        existing = MessageRegistry.get_codec(MessageType.DISCARD)
        duplicate = MessageCodec(
            message_type=MessageType.DISCARD,
            message_cls=object,
            field_names=("x",),
            encode_fields=lambda m: (),
            decode_fields=lambda tokens, r: None,
        )
        with pytest.raises(ValueError):
            MessageRegistry.register(duplicate)
        assert MessageRegistry.get_codec(MessageType.DISCARD) is existing

    def test_list_supported_messages(self):
        assert list_supported_messages() == [
            "PlayerElement", "GameState", "DiscardRequest", "Discard",
        ]

    def test_message_info(self):
        info = {i["type_name"]: i for i in get_message_info()}
        assert info["Discard"]["type_tag"] == 1033
        assert info["Discard"]["fields"] == [
            "game", "clay", "ore", "sheep", "wheat", "wood", "unknown",
        ]


class TestEncodeErrors:
    def test_unregistered_object(self):
        with pytest.raises(UnknownMessageTypeError):
            encode(object())


class TestFieldReader:
    """Tests for token readers."""

    def test_integer(self):
        r = ValidationResult()
        assert FieldReader.integer("-12", "n", r) == -12
        assert r.is_valid

    @pytest.mark.parametrize("token", ["", " 1", "1 ", "1.0", "0x10", "1_000", "١٢"])
    def test_integer_rejects(self, token):
        r = ValidationResult()
        assert FieldReader.integer(token, "n", r) is None
        assert not r.is_valid
        assert r.errors[0].field_name == "n"

    def test_game_name(self):
        r = ValidationResult()
        assert FieldReader.game_name("game42", "game", r) == "game42"
        assert FieldReader.game_name("bad|name", "game", r) is None
        assert len(r.errors) == 1


class TestGenericStrip:
    """Tests for strip_attrib_names without a message kind."""

    def test_basic(self):
        assert strip_attrib_names("a=1|b=2|c=3") == "1,2,3"

    def test_nested_label_returns_none(self):
        """A label left inside a value is a failure, not a payload."""
        assert strip_attrib_names("a=x=1|b=2") is None
        params = "game=game42|resources=clay=1|ore=0|sheep=2|wheat=0|wood=1|unknown=0"
        assert strip_attrib_names(params) is None

    def test_missing_label_returns_none(self):
        assert strip_attrib_names("a=1|2") is None

    def test_unknown_kind_returns_none(self):
        assert strip_attrib_names("a=1", "Nope") is None

    def test_unknown_type_name_prefix_returns_none(self):
        assert strip_attrib_names("Nope:game=g|state=1") is None

    @pytest.mark.parametrize("msg", [
        Discard.from_amounts("game42", 1, 0, 2, 0, 1, 0),
        DiscardRequest("game42", 4),
        GameState("game42", 50),
        PlayerElement("game42", 2, ElementAction.LOSE, 1, 3),
    ], ids=lambda m: type(m).__name__)
    def test_full_diagnostic_string_gives_wire_payload(self, msg):
        line = encode(msg)
        stripped = strip_attrib_names(to_diagnostic_string(msg))
        assert stripped.split(",") == line.partition("|")[2].split(",")
        assert parse_data_str(msg.MESSAGE_TYPE, stripped).message == msg
