# Area: Tools
"""
hexwire.replay — Rebuild messages from diagnostic log lines
===========================================================

Logs record messages in their diagnostic form, for example

    Discard:game=game42|resources=clay=1|ore=0|sheep=2|wheat=0|wood=1|unknown=0

This module turns such lines back into message values by stripping the
attribute names and running the ordinary wire decoder on the result.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Tuple

from .protocol import DecodeResult, FieldError, MessageRegistry

logger = logging.getLogger("hexwire.replay")


def parse_diagnostic_string(text: str) -> DecodeResult:
    """Parse ``TypeName:params`` into a message, or a failed DecodeResult."""
    type_name, colon, params = text.strip().partition(":")
    if not colon:
        return DecodeResult.failure(FieldError("line", "missing",
                                               expected="TypeName:params",
                                               received=text))

    codec = MessageRegistry.get_codec_by_name(type_name)
    if codec is None:
        return DecodeResult.failure(FieldError("type_name", "invalid_value",
                                               received=type_name))

    data = codec.strip_attrib_names(params)
    if data is None:
        return DecodeResult.failure(FieldError("params", "invalid_value",
                                               expected="name=value|...",
                                               received=params))
    return codec.parse_data_str(data)


def replay_lines(lines: Iterable[str]) -> Iterator[Tuple[str, DecodeResult]]:
    """Yield ``(line, result)`` for each non-blank diagnostic line."""
    for number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        result = parse_diagnostic_string(line)
        if not result.is_valid:
            logger.warning(f"Line {number}: cannot replay {line!r}")
        yield line, result
