"""
slackrtm - event decoding and error unification for a Slack RTM client.

Event Layer:
    Event: Typed events decoded from stream frames
    parse_frame / decode_event: Raw frame -> Event
    EventDispatcher: Frame -> Event -> async handler

Entities:
    slackrtm.api: Decode contracts for messages, channels, users, files, items

Errors:
    SlackError: Base of the unified error taxonomy
    from_exception: Convert any lower-layer error into the taxonomy

Example:
    from slackrtm import EventDispatcher, MessageEvent

    async def on_message(event: MessageEvent):
        print(event.message.text)

    dispatcher = EventDispatcher()
    dispatcher.on("message", on_message)
    await dispatcher.handle_frame(raw_frame)
"""

from .errors import (
    SlackError,
    HttpError,
    UrlError,
    WebSocketError,
    Utf8Error,
    JsonParseError,
    JsonDecodeError,
    JsonEncodeError,
    ApiError,
    InternalError,
    from_exception,
    raise_for_api_error,
)
from .events import (
    Event,
    EVENT_TYPES,
    MessageEvent,
    MessageSent,
    MessageError,
    decode_event,
    parse_frame,
)
from .dispatch import EventDispatcher
from .outbound import OutboundMessage, Ping, Typing, encode_outbound
from .config import RtmConfig, load_rtm_config
from .logging_config import setup_logging

__all__ = [
    # Errors
    "SlackError",
    "HttpError",
    "UrlError",
    "WebSocketError",
    "Utf8Error",
    "JsonParseError",
    "JsonDecodeError",
    "JsonEncodeError",
    "ApiError",
    "InternalError",
    "from_exception",
    "raise_for_api_error",
    # Events
    "Event",
    "EVENT_TYPES",
    "MessageEvent",
    "MessageSent",
    "MessageError",
    "decode_event",
    "parse_frame",
    "EventDispatcher",
    # Outbound
    "OutboundMessage",
    "Ping",
    "Typing",
    "encode_outbound",
    # Configuration
    "RtmConfig",
    "load_rtm_config",
    "setup_logging",
]

__version__ = "0.1.0"
