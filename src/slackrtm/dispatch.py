"""
EventDispatcher - routes decoded frames to async handlers.

The transport hands every raw frame to ``handle_frame``; the dispatcher
decodes it and awaits the handler registered for the event's ``type`` tag.

Example:
    dispatcher = EventDispatcher()
    dispatcher.on("message", on_message)
    dispatcher.on("message_sent", on_sent)

    async for raw in websocket:
        await dispatcher.handle_frame(raw)
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from slackrtm.errors import SlackError
from slackrtm.events import Event, parse_frame

logger = logging.getLogger(__name__)

EventHandler = Callable[[Event], Awaitable[None]]

DECODE_ERROR_POLICIES = ("log", "raise")


class EventDispatcher:
    """
    Decode frames and dispatch events by type.

    Args:
        decode_errors: What to do with a frame that fails to decode.
            "log" drops the frame with a warning, "raise" propagates the
            SlackError to the caller.
    """

    def __init__(self, decode_errors: str = "log"):
        if decode_errors not in DECODE_ERROR_POLICIES:
            raise ValueError(
                f"Invalid decode_errors policy '{decode_errors}'. "
                f"Expected one of: {', '.join(DECODE_ERROR_POLICIES)}"
            )
        self.decode_errors = decode_errors
        self._handlers: dict[str, EventHandler] = {}

    @property
    def handlers(self) -> dict[str, EventHandler]:
        return dict(self._handlers)

    def on(self, event_type: str, handler: EventHandler) -> None:
        """Register the handler for an event type, replacing any previous one."""
        if event_type in self._handlers:
            logger.debug(f"Replacing handler for '{event_type}'")
        self._handlers[event_type] = handler

    def off(self, event_type: str) -> None:
        self._handlers.pop(event_type, None)

    async def handle_frame(self, raw: str | bytes) -> Event | None:
        """
        Decode one frame and await its handler.

        Returns:
            The decoded event, or None if the frame was dropped.

        Raises:
            SlackError: If decoding fails and the policy is "raise".
        """
        try:
            event = parse_frame(raw)
        except SlackError as e:
            if self.decode_errors == "raise":
                raise
            logger.warning(f"[Dispatch] Dropping undecodable frame: {e}")
            return None

        logger.debug(f"[Dispatch] Received event: {event.type}")

        handler = self._handlers.get(event.type)
        if handler is None:
            logger.warning(
                f"[Dispatch] Received event '{event.type}' but no handler registered. "
                f"Available handlers: {list(self._handlers.keys())}"
            )
            return event

        await handler(event)
        return event
