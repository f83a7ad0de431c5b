"""
Frame decoder: turns one RTM frame into exactly one Event.

Two frame shapes arrive on the stream:

- Typed frames carry a string ``type`` that selects the event model from
  EVENT_TYPES.
- Confirmation frames have no ``type``. They acknowledge an outbound message
  and are told apart by the boolean ``ok``.

The ``type`` check always comes first, so a frame with both ``type`` and
``ok`` is decoded as a typed frame.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt

from slackrtm.errors import JsonDecodeError, JsonParseError, Utf8Error

from .event import (
    AccountsChanged,
    BaseEvent,
    BotAdded,
    BotChanged,
    ChannelArchive,
    ChannelCreated,
    ChannelDeleted,
    ChannelHistoryChanged,
    ChannelJoined,
    ChannelLeft,
    ChannelMarked,
    ChannelRename,
    ChannelUnarchive,
    CommandsChanged,
    EmailDomainChanged,
    EmojiChanged,
    Event,
    FileChange,
    FileCommentAdded,
    FileCommentDeleted,
    FileCommentEdited,
    FileCreated,
    FileDeleted,
    FilePrivate,
    FilePublic,
    FileShared,
    FileUnshared,
    GroupArchive,
    GroupClose,
    GroupHistoryChanged,
    GroupJoined,
    GroupLeft,
    GroupMarked,
    GroupOpen,
    GroupRename,
    GroupUnarchive,
    Hello,
    ImClose,
    ImCreated,
    ImHistoryChanged,
    ImMarked,
    ImOpen,
    ManualPresenceChange,
    MessageError,
    MessageEvent,
    MessageSent,
    PinAdded,
    PinRemoved,
    PrefChange,
    PresenceChange,
    ReactionAdded,
    ReactionRemoved,
    ReconnectUrl,
    StarAdded,
    StarRemoved,
    TeamDomainChange,
    TeamJoin,
    TeamMigrationStarted,
    TeamPlanChange,
    TeamPrefChange,
    TeamRename,
    UserChange,
    UserTyping,
)

logger = logging.getLogger(__name__)


# Wire "type" strings recognized on the stream. This is the versioned contract
# with the upstream protocol; every entry maps to exactly one event model.
EVENT_TYPES: dict[str, type[BaseEvent]] = {
    "hello": Hello,
    "message": MessageEvent,
    "user_typing": UserTyping,
    "channel_marked": ChannelMarked,
    "channel_created": ChannelCreated,
    "channel_joined": ChannelJoined,
    "channel_left": ChannelLeft,
    "channel_deleted": ChannelDeleted,
    "channel_rename": ChannelRename,
    "channel_archive": ChannelArchive,
    "channel_unarchive": ChannelUnarchive,
    "channel_history_changed": ChannelHistoryChanged,
    "im_created": ImCreated,
    "im_open": ImOpen,
    "im_close": ImClose,
    "im_marked": ImMarked,
    "im_history_changed": ImHistoryChanged,
    "group_joined": GroupJoined,
    "group_left": GroupLeft,
    "group_open": GroupOpen,
    "group_close": GroupClose,
    "group_archive": GroupArchive,
    "group_unarchive": GroupUnarchive,
    "group_rename": GroupRename,
    "group_marked": GroupMarked,
    "group_history_changed": GroupHistoryChanged,
    "file_created": FileCreated,
    "file_shared": FileShared,
    "file_unshared": FileUnshared,
    "file_public": FilePublic,
    "file_private": FilePrivate,
    "file_change": FileChange,
    "file_deleted": FileDeleted,
    "file_comment_added": FileCommentAdded,
    "file_comment_edited": FileCommentEdited,
    "file_comment_deleted": FileCommentDeleted,
    "pin_added": PinAdded,
    "pin_removed": PinRemoved,
    "presence_change": PresenceChange,
    "manual_presence_change": ManualPresenceChange,
    "pref_change": PrefChange,
    "user_change": UserChange,
    "team_join": TeamJoin,
    "star_added": StarAdded,
    "star_removed": StarRemoved,
    "reaction_added": ReactionAdded,
    "reaction_removed": ReactionRemoved,
    "emoji_changed": EmojiChanged,
    "commands_changed": CommandsChanged,
    "team_plan_change": TeamPlanChange,
    "team_pref_change": TeamPrefChange,
    "team_rename": TeamRename,
    "team_domain_change": TeamDomainChange,
    "email_domain_changed": EmailDomainChanged,
    "bot_added": BotAdded,
    "bot_changed": BotChanged,
    "accounts_changed": AccountsChanged,
    "team_migration_started": TeamMigrationStarted,
    "reconnect_url": ReconnectUrl,
}


class _Confirmation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ok: StrictBool
    reply_to: StrictInt


class _SendFailure(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: StrictInt
    msg: str


class _FailedConfirmation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    reply_to: StrictInt
    error: _SendFailure


def _decode_confirmation(frame: dict[str, Any]) -> MessageSent | MessageError:
    ack = _Confirmation.model_validate(frame)
    if ack.ok:
        # the "type" tag on confirmations is local, never read from the wire
        fields = {k: v for k, v in frame.items() if k != "type"}
        return MessageSent.model_validate(fields)

    failed = _FailedConfirmation.model_validate(frame)
    return MessageError(
        reply_to=failed.reply_to,
        code=failed.error.code,
        message=failed.error.msg,
    )


def decode_event(frame: Any) -> Event:
    """
    Decode one parsed frame into its event model.

    Args:
        frame: The frame as parsed JSON (expected to be an object).

    Returns:
        The single event the frame represents.

    Raises:
        JsonDecodeError: If the frame is not an object, its ``type`` is unknown
            or not a string, or a field the matched event requires is missing
            or malformed.
    """
    if not isinstance(frame, dict):
        raise JsonDecodeError(
            ValueError(f"Expected a frame object, got {type(frame).__name__}")
        )

    event_type = frame.get("type")
    try:
        if event_type is None:
            # message confirmations don't have a type field
            return _decode_confirmation(frame)

        if not isinstance(event_type, str):
            raise ValueError(f"Message type must be a string, got {event_type!r}")

        model = EVENT_TYPES.get(event_type)
        if model is None:
            raise ValueError(f"Unknown message type: {event_type}")

        logger.debug(f"Decoding {event_type} frame")
        return model.from_frame(frame)
    except ValueError as e:
        # ValidationError subclasses ValueError
        raise JsonDecodeError(e) from e
    except RecursionError as e:
        # message_changed frames nest messages without a depth limit
        raise JsonDecodeError(ValueError("frame nested too deeply")) from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_frame(raw: str | bytes) -> Event:
    """
    Decode a raw text frame from the stream.

    Raises:
        Utf8Error: If ``raw`` is bytes that are not valid UTF-8.
        JsonParseError: If the text is not well-formed JSON, uses NaN or
            Infinity, or is nested too deeply to parse.
        JsonDecodeError: See decode_event.
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise Utf8Error(e) from e

    try:
        frame = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError subclasses ValueError
        raise JsonParseError(e) from e

    return decode_event(frame)
