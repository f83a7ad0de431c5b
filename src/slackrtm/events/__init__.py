"""
RTM event layer.

Components:
    Event: Tagged union of every event the stream delivers
    decode_event: Parsed frame -> Event
    parse_frame: Raw text/bytes frame -> Event
    EVENT_TYPES: The recognized wire "type" strings
"""

from .decoder import EVENT_TYPES, decode_event, parse_frame
from .event import (
    BaseEvent,
    Event,
    Hello,
    MessageError,
    MessageEvent,
    MessageSent,
    ReactionAdded,
    ReactionRemoved,
)

__all__ = [
    "BaseEvent",
    "Event",
    "EVENT_TYPES",
    "Hello",
    "MessageError",
    "MessageEvent",
    "MessageSent",
    "ReactionAdded",
    "ReactionRemoved",
    "decode_event",
    "parse_frame",
]
