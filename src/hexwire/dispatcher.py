# Area: Protocol
"""
hexwire.dispatcher — Wire line → decoded message → handler
==========================================================

One LineDispatcher per connection. The transport hands it one complete
line at a time. A garbled line is logged and skipped so the connection
stays open; it never reaches a handler.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Union

from .protocol import MessageType, decode
from .protocol.codec import Message

logger = logging.getLogger("hexwire.dispatch")

Handler = Callable[[Message], None]


class LineDispatcher:
    """
    Routes decoded messages to the handler registered for their type tag.

    Handlers are called synchronously on the caller's thread. Exceptions
    raised by a handler propagate to the caller.

    Not thread-safe: ``feed`` and ``garbled_count`` assume a single reader
    thread per connection.
    """

    def __init__(self, handlers: Optional[Dict[MessageType, Handler]] = None):
        self._handlers: Dict[MessageType, Handler] = dict(handlers or {})
        self.garbled_count = 0

    def on(self, message_type: Union[MessageType, int], handler: Handler) -> None:
        """Register ``handler`` for ``message_type``, replacing any earlier one."""
        self._handlers[MessageType(message_type)] = handler

    def feed(self, line: str) -> bool:
        """
        Decode one line and hand it to its handler.

        Returns True if a handler ran, False if the line was garbled or
        no handler is registered for its kind.
        """
        line = line.rstrip("\r\n")
        result = decode(line)
        if not result.is_valid:
            self.garbled_count += 1
            logger.warning(
                f"Skipping garbled line: {line!r}",
                extra={"wire_line": line,
                       "errors": [e.to_dict() for e in result.errors]},
            )
            return False

        message = result.message
        handler = self._handlers.get(message.MESSAGE_TYPE)
        if handler is None:
            logger.debug(f"No handler for {type(message).__name__}",
                         extra={"type_tag": int(message.MESSAGE_TYPE)})
            return False

        handler(message)
        return True
