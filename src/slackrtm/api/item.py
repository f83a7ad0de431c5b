"""
Item entity: the target of a pin, star or reaction.

Items are polymorphic and selected by their ``type`` field. Pins and
reactions point at messages, files and file comments; stars can also point
at whole conversations.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import PlainValidator

from slackrtm.errors import JsonDecodeError

from .message import MessageField
from .types import Comment, Entity, File


class MessageItem(Entity):
    type: Literal["message"] = "message"
    channel: str
    message: MessageField


class FileItem(Entity):
    type: Literal["file"] = "file"
    file: File


class FileCommentItem(Entity):
    type: Literal["file_comment"] = "file_comment"
    file: File
    comment: Comment


class ChannelItem(Entity):
    type: Literal["channel"] = "channel"
    channel: str


class ImItem(Entity):
    type: Literal["im"] = "im"
    channel: str


class GroupItem(Entity):
    type: Literal["group"] = "group"
    channel: str


Item = Union[MessageItem, FileItem, FileCommentItem, ChannelItem, ImItem, GroupItem]

ITEM_TYPES: dict[str, type[Entity]] = {
    "message": MessageItem,
    "file": FileItem,
    "file_comment": FileCommentItem,
    "channel": ChannelItem,
    "im": ImItem,
    "group": GroupItem,
}


def _validate_item(value: Any) -> Item:
    if isinstance(value, tuple(ITEM_TYPES.values())):
        return value
    if not isinstance(value, dict):
        raise ValueError(f"Expected an item object, got {type(value).__name__}")

    item_type = value.get("type")
    if not isinstance(item_type, str):
        raise ValueError(f"Item type must be a string, got {item_type!r}")
    model = ITEM_TYPES.get(item_type)
    if model is None:
        raise ValueError(f"Unknown item type: {item_type}")
    return model.model_validate(value)


def decode_item(data: Any) -> Item:
    """
    Decode an item object into the matching item model.

    Raises:
        JsonDecodeError: On unknown item type or missing/malformed fields.
    """
    try:
        return _validate_item(data)
    except ValueError as e:
        raise JsonDecodeError(e) from e


ItemField = Annotated[Item, PlainValidator(_validate_item)]
