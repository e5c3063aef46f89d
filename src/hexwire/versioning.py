# Area: Protocol
"""
hexwire.versioning — Protocol version numbers and sequencing policy
===================================================================

Versions are integers MAJOR*1000 + MINOR*100 + PATCH, so 2500 is 2.5.00.
The codec never looks at versions; the functions here are what the
server's sequencing code reads when deciding which extra messages to send.
"""

from __future__ import annotations

import re

from .protocol.messages_discard import VERSION_FOR_ALWAYS_SEND_GAMESTATE

CURRENT_VERSION = 2500

_VERSION_RE = re.compile(r"(\d+)\.(\d)\.(\d{2})")


def version_to_string(version: int) -> str:
    """2500 → "2.5.00"."""
    major, rest = divmod(version, 1000)
    minor, patch = divmod(rest, 100)
    return f"{major}.{minor}.{patch:02d}"


def version_from_string(text: str) -> int:
    """ "2.5.00" → 2500.

    Raises
    ------
    ValueError
        If ``text`` is not of the form MAJOR.MINOR.PATCH (PATCH two digits).
    """
    match = _VERSION_RE.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"Malformed version string: {text!r}")
    major, minor, patch = (int(g) for g in match.groups())
    return major * 1000 + minor * 100 + patch


def always_send_game_state(peer_version: int) -> bool:
    """Whether a peer gets GameState after every discard, even if unchanged.

    True from VERSION_FOR_ALWAYS_SEND_GAMESTATE (inclusive). Older peers
    infer discard progress from the other messages and skip it.
    """
    return peer_version >= VERSION_FOR_ALWAYS_SEND_GAMESTATE
