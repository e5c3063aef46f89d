# Area: Tools
"""
hexwire.cli — Command-line interface
====================================

Usage:
    python -m hexwire.cli types
    python -m hexwire.cli decode "1033|game42,1,0,2,0,1,0"
    python -m hexwire.cli replay server.log
    python -m hexwire.cli gate --peer-version 2499

Settings can also come from HEXWIRE_* environment variables or --env-file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ._shared.logging_config import setup_logging
from .config import load_settings
from .errors import ConfigurationError
from .protocol import decode, encode, get_message_info, to_diagnostic_string
from .replay import replay_lines
from .versioning import always_send_game_state, version_to_string

logger = logging.getLogger("hexwire.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexwire",
        description="Inspect and replay board-game wire messages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hexwire types
  hexwire decode "1033|game42,1,0,2,0,1,0"
  hexwire replay server.log
  HEXWIRE_PEER_VERSION=2499 hexwire gate
        """,
    )
    parser.add_argument("--env-file", type=str, help="Path to a .env file")
    parser.add_argument("--log-level", type=str, help="Override HEXWIRE_LOG_LEVEL")
    parser.add_argument("--log-file", type=str, help="Also write JSON logs here")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("types", help="List registered message kinds")

    decode_parser = subparsers.add_parser("decode", help="Decode one wire line")
    decode_parser.add_argument("line", help="Wire line, e.g. 1033|game42,1,0,2,0,1,0")

    replay_parser = subparsers.add_parser(
        "replay", help="Turn diagnostic log lines back into wire lines",
    )
    replay_parser.add_argument("path", help="File with one diagnostic string per line")

    gate_parser = subparsers.add_parser(
        "gate", help="Show whether a peer gets GameState after every discard",
    )
    gate_parser.add_argument("--peer-version", type=int, help="Peer protocol version")

    return parser


def _cmd_types() -> int:
    for info in get_message_info():
        print(f"{info['type_tag']:<6} {info['type_name']:<16} {','.join(info['fields'])}")
    return 0


def _cmd_decode(line: str) -> int:
    result = decode(line)
    if not result.is_valid:
        for error in result.errors:
            print(f"error: {error}", file=sys.stderr)
        return 1
    print(to_diagnostic_string(result.message))
    return 0


def _cmd_replay(path: str) -> int:
    failed = 0
    with open(Path(path), encoding="utf-8") as f:
        for line, result in replay_lines(f):
            if result.is_valid:
                print(encode(result.message))
            else:
                failed += 1
                print(f"error: {line}", file=sys.stderr)
    return 1 if failed else 0


def _cmd_gate(peer_version: int) -> int:
    decision = "sent" if always_send_game_state(peer_version) else "suppressed"
    print(f"peer {version_to_string(peer_version)} ({peer_version}): "
          f"GameState after discard {decision}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(
            env_file=args.env_file,
            overrides={
                "log_level": args.log_level,
                "log_file": args.log_file,
                "peer_version": getattr(args, "peer_version", None),
            },
        )
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    setup_logging(settings.log_file, settings.log_level)
    logger.debug(f"Running {args.command}")

    if args.command == "types":
        return _cmd_types()
    if args.command == "decode":
        return _cmd_decode(args.line)
    if args.command == "replay":
        try:
            return _cmd_replay(args.path)
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
    return _cmd_gate(settings.peer_version)


if __name__ == "__main__":
    sys.exit(main())
