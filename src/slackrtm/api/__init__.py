"""Decode contracts for platform entities referenced by RTM events.

Usage:
    from slackrtm.api import Channel, decode_message

    channel = Channel.decode({"id": "C1", "name": "general"})
"""

from slackrtm.api.types import (
    Entity,
    Attachment,
    AttachmentField,
    Bot,
    Channel,
    Comment,
    Edited,
    File,
    Reaction,
    Topic,
    User,
    UserProfile,
)
from slackrtm.api.message import (
    Message,
    MessageField,
    MESSAGE_SUBTYPES,
    StandardMessage,
    BotMessage,
    MeMessage,
    MessageChanged,
    MessageDeleted,
    decode_message,
)
from slackrtm.api.item import (
    Item,
    ItemField,
    ITEM_TYPES,
    MessageItem,
    FileItem,
    FileCommentItem,
    ChannelItem,
    ImItem,
    GroupItem,
    decode_item,
)

__all__ = [
    "Entity",
    "Attachment",
    "AttachmentField",
    "Bot",
    "Channel",
    "Comment",
    "Edited",
    "File",
    "Reaction",
    "Topic",
    "User",
    "UserProfile",
    "Message",
    "MessageField",
    "MESSAGE_SUBTYPES",
    "StandardMessage",
    "BotMessage",
    "MeMessage",
    "MessageChanged",
    "MessageDeleted",
    "decode_message",
    "Item",
    "ItemField",
    "ITEM_TYPES",
    "MessageItem",
    "FileItem",
    "FileCommentItem",
    "ChannelItem",
    "ImItem",
    "GroupItem",
    "decode_item",
]
