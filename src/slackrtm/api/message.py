"""
Message entity: a union of message subtypes selected by the ``subtype`` field.

A message without ``subtype`` is a standard user message. Every subtype
carries a ``ts``; the rest of the fields depend on the subtype.

Usage:
    from slackrtm.api.message import decode_message, StandardMessage

    message = decode_message({"ts": "1.2", "user": "U1", "text": "hi"})
    assert isinstance(message, StandardMessage)
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import PlainValidator, StrictBool

from slackrtm.errors import JsonDecodeError

from .types import Attachment, Comment, Edited, Entity, File, Reaction, Topic


def _validate_message(value: Any) -> "Message":
    if isinstance(value, _MessageBase):
        return value
    if not isinstance(value, dict):
        raise ValueError(f"Expected a message object, got {type(value).__name__}")

    subtype = value.get("subtype")
    if subtype is not None and not isinstance(subtype, str):
        raise ValueError(f"Message subtype must be a string, got {subtype!r}")
    model = MESSAGE_SUBTYPES.get(subtype)
    if model is None:
        raise ValueError(f"Unknown message subtype: {subtype}")
    return model.model_validate(value)


def decode_message(data: Any) -> "Message":
    """
    Decode a message object into the matching subtype model.

    Raises:
        JsonDecodeError: On unknown subtype or missing/malformed fields.
    """
    try:
        return _validate_message(data)
    except ValueError as e:
        # ValidationError is a ValueError as well
        raise JsonDecodeError(e) from e


class _MessageBase(Entity):
    ts: str
    channel: str | None = None


class StandardMessage(_MessageBase):
    """Plain message posted by a user."""

    user: str | None = None
    text: str | None = None
    is_starred: StrictBool | None = None
    pinned_to: list[str] | None = None
    reactions: list[Reaction] | None = None
    edited: Edited | None = None
    attachments: list[Attachment] | None = None


class BotMessage(_MessageBase):
    subtype: Literal["bot_message"] = "bot_message"
    text: str | None = None
    bot_id: str | None = None
    username: str | None = None
    icons: dict[str, str] | None = None
    attachments: list[Attachment] | None = None


class MeMessage(_MessageBase):
    subtype: Literal["me_message"] = "me_message"
    user: str | None = None
    text: str | None = None


class MessageChanged(_MessageBase):
    """An earlier message was edited; ``message`` is the new version."""

    subtype: Literal["message_changed"] = "message_changed"
    hidden: StrictBool | None = None
    message: MessageField | None = None
    previous_message: MessageField | None = None
    event_ts: str | None = None


class MessageDeleted(_MessageBase):
    subtype: Literal["message_deleted"] = "message_deleted"
    hidden: StrictBool | None = None
    deleted_ts: str | None = None
    event_ts: str | None = None


class _MembershipMessage(_MessageBase):
    user: str | None = None
    text: str | None = None


class ChannelJoin(_MembershipMessage):
    subtype: Literal["channel_join"] = "channel_join"
    inviter: str | None = None


class ChannelLeave(_MembershipMessage):
    subtype: Literal["channel_leave"] = "channel_leave"


class GroupJoin(_MembershipMessage):
    subtype: Literal["group_join"] = "group_join"
    inviter: str | None = None


class GroupLeave(_MembershipMessage):
    subtype: Literal["group_leave"] = "group_leave"


class ChannelTopic(_MembershipMessage):
    subtype: Literal["channel_topic"] = "channel_topic"
    topic: str | Topic | None = None


class GroupTopic(_MembershipMessage):
    subtype: Literal["group_topic"] = "group_topic"
    topic: str | Topic | None = None


class ChannelPurpose(_MembershipMessage):
    subtype: Literal["channel_purpose"] = "channel_purpose"
    purpose: str | Topic | None = None


class GroupPurpose(_MembershipMessage):
    subtype: Literal["group_purpose"] = "group_purpose"
    purpose: str | Topic | None = None


class ChannelName(_MembershipMessage):
    subtype: Literal["channel_name"] = "channel_name"
    old_name: str | None = None
    name: str | None = None


class GroupName(_MembershipMessage):
    subtype: Literal["group_name"] = "group_name"
    old_name: str | None = None
    name: str | None = None


class ChannelArchive(_MembershipMessage):
    subtype: Literal["channel_archive"] = "channel_archive"
    members: list[str] | None = None


class ChannelUnarchive(_MembershipMessage):
    subtype: Literal["channel_unarchive"] = "channel_unarchive"


class GroupArchive(_MembershipMessage):
    subtype: Literal["group_archive"] = "group_archive"
    members: list[str] | None = None


class GroupUnarchive(_MembershipMessage):
    subtype: Literal["group_unarchive"] = "group_unarchive"


class FileShare(_MembershipMessage):
    subtype: Literal["file_share"] = "file_share"
    file: File | None = None
    upload: StrictBool | None = None


class FileComment(_MembershipMessage):
    subtype: Literal["file_comment"] = "file_comment"
    file: File | None = None
    comment: Comment | None = None


class FileMention(_MembershipMessage):
    subtype: Literal["file_mention"] = "file_mention"
    file: File | None = None


class PinnedItem(_MembershipMessage):
    subtype: Literal["pinned_item"] = "pinned_item"
    item_type: str | None = None
    attachments: list[Attachment] | None = None


class UnpinnedItem(_MembershipMessage):
    subtype: Literal["unpinned_item"] = "unpinned_item"
    item_type: str | None = None
    attachments: list[Attachment] | None = None


Message = Union[
    StandardMessage,
    BotMessage,
    MeMessage,
    MessageChanged,
    MessageDeleted,
    ChannelJoin,
    ChannelLeave,
    ChannelTopic,
    ChannelPurpose,
    ChannelName,
    ChannelArchive,
    ChannelUnarchive,
    GroupJoin,
    GroupLeave,
    GroupTopic,
    GroupPurpose,
    GroupName,
    GroupArchive,
    GroupUnarchive,
    FileShare,
    FileComment,
    FileMention,
    PinnedItem,
    UnpinnedItem,
]

# Field type for models that embed a message (message_changed, items, events)
MessageField = Annotated[Message, PlainValidator(_validate_message)]

# Known message subtypes. None is the standard (subtype-less) message.
MESSAGE_SUBTYPES: dict[str | None, type[_MessageBase]] = {
    None: StandardMessage,
    "bot_message": BotMessage,
    "me_message": MeMessage,
    "message_changed": MessageChanged,
    "message_deleted": MessageDeleted,
    "channel_join": ChannelJoin,
    "channel_leave": ChannelLeave,
    "channel_topic": ChannelTopic,
    "channel_purpose": ChannelPurpose,
    "channel_name": ChannelName,
    "channel_archive": ChannelArchive,
    "channel_unarchive": ChannelUnarchive,
    "group_join": GroupJoin,
    "group_leave": GroupLeave,
    "group_topic": GroupTopic,
    "group_purpose": GroupPurpose,
    "group_name": GroupName,
    "group_archive": GroupArchive,
    "group_unarchive": GroupUnarchive,
    "file_share": FileShare,
    "file_comment": FileComment,
    "file_mention": FileMention,
    "pinned_item": PinnedItem,
    "unpinned_item": UnpinnedItem,
}

MessageChanged.model_rebuild()
