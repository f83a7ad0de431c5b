"""
RTM events using tagged union pattern.

Every frame from the streaming connection becomes exactly one of the models
below. Each model carries a ``type`` tag so handlers can pattern match:

    match event:
        case MessageEvent(message=StandardMessage(text=text)):
            print(text)
        case ReactionAdded(reaction=name, user=user):
            print(f"{user} reacted with :{name}:")

Events are frozen values; nothing mutates them after decoding.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

from slackrtm.api import Bot, Channel, Comment, File, ItemField, MessageField, User


class BaseEvent(BaseModel):
    """Common config for all event models. Unknown frame fields are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @classmethod
    def from_frame(cls, frame: dict[str, Any]) -> BaseEvent:
        """
        Build the event from the fields of a frame object.

        Wire fields are matched by alias only; field names such as
        ``reaction`` are accepted when constructing events in code.
        """
        return cls.model_validate(frame, by_alias=True, by_name=False)


# --- Confirmations (frames without a "type" field) ---


class MessageSent(BaseEvent):
    """Confirmation that an outbound message with id ``reply_to`` was sent."""

    type: Literal["message_sent"] = "message_sent"
    reply_to: StrictInt
    ts: str
    text: str


class MessageError(BaseEvent):
    """Outbound message with id ``reply_to`` was rejected."""

    type: Literal["message_error"] = "message_error"
    reply_to: StrictInt
    code: StrictInt
    message: str


# --- Messages ---


class MessageEvent(BaseEvent):
    """Message event. The whole frame is the message object."""

    type: Literal["message"] = "message"
    message: MessageField

    @classmethod
    def from_frame(cls, frame: dict[str, Any]) -> MessageEvent:
        return cls.model_validate({"message": frame})


# --- Singletons ---


class Hello(BaseEvent):
    """Sent once the connection is established."""

    type: Literal["hello"] = "hello"


class AccountsChanged(BaseEvent):
    type: Literal["accounts_changed"] = "accounts_changed"


class TeamMigrationStarted(BaseEvent):
    """The team is moving to another server; expect a disconnect."""

    type: Literal["team_migration_started"] = "team_migration_started"


class ReconnectUrl(BaseEvent):
    type: Literal["reconnect_url"] = "reconnect_url"


# --- Channels ---


class UserTyping(BaseEvent):
    type: Literal["user_typing"] = "user_typing"
    channel: str
    user: str


class ChannelMarked(BaseEvent):
    type: Literal["channel_marked"] = "channel_marked"
    channel: str
    ts: str


class ChannelCreated(BaseEvent):
    type: Literal["channel_created"] = "channel_created"
    channel: Channel


class ChannelJoined(BaseEvent):
    type: Literal["channel_joined"] = "channel_joined"
    channel: Channel


class ChannelLeft(BaseEvent):
    type: Literal["channel_left"] = "channel_left"
    channel: str


class ChannelDeleted(BaseEvent):
    type: Literal["channel_deleted"] = "channel_deleted"
    channel: str


class ChannelRename(BaseEvent):
    type: Literal["channel_rename"] = "channel_rename"
    channel: Channel


class ChannelArchive(BaseEvent):
    type: Literal["channel_archive"] = "channel_archive"
    channel: str
    user: str


class ChannelUnarchive(BaseEvent):
    type: Literal["channel_unarchive"] = "channel_unarchive"
    channel: str
    user: str


class ChannelHistoryChanged(BaseEvent):
    type: Literal["channel_history_changed"] = "channel_history_changed"
    latest: str
    ts: str
    event_ts: str


# --- Direct messages ---


class ImCreated(BaseEvent):
    type: Literal["im_created"] = "im_created"
    user: str
    channel: Channel


class ImOpen(BaseEvent):
    type: Literal["im_open"] = "im_open"
    user: str
    channel: str


class ImClose(BaseEvent):
    type: Literal["im_close"] = "im_close"
    user: str
    channel: str


class ImMarked(BaseEvent):
    type: Literal["im_marked"] = "im_marked"
    channel: str
    ts: str


class ImHistoryChanged(BaseEvent):
    type: Literal["im_history_changed"] = "im_history_changed"
    latest: str
    ts: str
    event_ts: str


# --- Private groups ---


class GroupJoined(BaseEvent):
    type: Literal["group_joined"] = "group_joined"
    channel: Channel


class GroupLeft(BaseEvent):
    type: Literal["group_left"] = "group_left"
    channel: Channel


class GroupOpen(BaseEvent):
    type: Literal["group_open"] = "group_open"
    user: str
    channel: str


class GroupClose(BaseEvent):
    type: Literal["group_close"] = "group_close"
    user: str
    channel: str


class GroupArchive(BaseEvent):
    type: Literal["group_archive"] = "group_archive"
    channel: str


class GroupUnarchive(BaseEvent):
    type: Literal["group_unarchive"] = "group_unarchive"
    channel: str


class GroupRename(BaseEvent):
    type: Literal["group_rename"] = "group_rename"
    channel: Channel


class GroupMarked(BaseEvent):
    type: Literal["group_marked"] = "group_marked"
    channel: str
    ts: str


class GroupHistoryChanged(BaseEvent):
    type: Literal["group_history_changed"] = "group_history_changed"
    latest: str
    ts: str
    event_ts: str


# --- Files ---


class FileCreated(BaseEvent):
    type: Literal["file_created"] = "file_created"
    file: File


class FileShared(BaseEvent):
    type: Literal["file_shared"] = "file_shared"
    file: File


class FileUnshared(BaseEvent):
    type: Literal["file_unshared"] = "file_unshared"
    file: File


class FilePublic(BaseEvent):
    type: Literal["file_public"] = "file_public"
    file: File


class FilePrivate(BaseEvent):
    """A file was made private. The platform only sends the file id here."""

    type: Literal["file_private"] = "file_private"
    file: str


class FileChange(BaseEvent):
    type: Literal["file_change"] = "file_change"
    file: File


class FileDeleted(BaseEvent):
    type: Literal["file_deleted"] = "file_deleted"
    file_id: str
    event_ts: str


class FileCommentAdded(BaseEvent):
    type: Literal["file_comment_added"] = "file_comment_added"
    file: File
    comment: Comment


class FileCommentEdited(BaseEvent):
    type: Literal["file_comment_edited"] = "file_comment_edited"
    file: File
    comment: Comment


class FileCommentDeleted(BaseEvent):
    """``comment`` is the id of the deleted comment."""

    type: Literal["file_comment_deleted"] = "file_comment_deleted"
    file: File
    comment: str


# --- Pins, stars, reactions ---


class PinAdded(BaseEvent):
    type: Literal["pin_added"] = "pin_added"
    user: str
    channel_id: str
    item: ItemField
    event_ts: str


class PinRemoved(BaseEvent):
    type: Literal["pin_removed"] = "pin_removed"
    user: str
    channel_id: str
    item: ItemField
    has_pins: StrictBool
    event_ts: str


class StarAdded(BaseEvent):
    type: Literal["star_added"] = "star_added"
    user: str
    item: ItemField
    event_ts: str


class StarRemoved(BaseEvent):
    type: Literal["star_removed"] = "star_removed"
    user: str
    item: ItemField
    event_ts: str


class ReactionAdded(BaseEvent):
    """Reaction added. The emoji name arrives in the wire field ``name``."""

    type: Literal["reaction_added"] = "reaction_added"
    user: str
    reaction: str = Field(alias="name")
    item: ItemField
    item_user: str
    event_ts: str


class ReactionRemoved(BaseEvent):
    """Reaction removed. The emoji name arrives in the wire field ``name``."""

    type: Literal["reaction_removed"] = "reaction_removed"
    user: str
    reaction: str = Field(alias="name")
    item: ItemField
    item_user: str
    event_ts: str


# --- Presence and preferences ---


class PresenceChange(BaseEvent):
    type: Literal["presence_change"] = "presence_change"
    user: str
    presence: str


class ManualPresenceChange(BaseEvent):
    type: Literal["manual_presence_change"] = "manual_presence_change"
    presence: str


class PrefChange(BaseEvent):
    type: Literal["pref_change"] = "pref_change"
    name: str
    value: str


# --- Users, team, bots ---


class UserChange(BaseEvent):
    type: Literal["user_change"] = "user_change"
    user: User


class TeamJoin(BaseEvent):
    type: Literal["team_join"] = "team_join"
    user: User


class EmojiChanged(BaseEvent):
    type: Literal["emoji_changed"] = "emoji_changed"
    event_ts: str


class CommandsChanged(BaseEvent):
    type: Literal["commands_changed"] = "commands_changed"
    event_ts: str


class TeamPlanChange(BaseEvent):
    type: Literal["team_plan_change"] = "team_plan_change"
    plan: str


class TeamPrefChange(BaseEvent):
    type: Literal["team_pref_change"] = "team_pref_change"
    name: str
    value: StrictBool


class TeamRename(BaseEvent):
    type: Literal["team_rename"] = "team_rename"
    name: str


class TeamDomainChange(BaseEvent):
    type: Literal["team_domain_change"] = "team_domain_change"
    url: str
    domain: str


class EmailDomainChanged(BaseEvent):
    type: Literal["email_domain_changed"] = "email_domain_changed"
    email_domain: str
    event_ts: str


class BotAdded(BaseEvent):
    type: Literal["bot_added"] = "bot_added"
    bot: Bot


class BotChanged(BaseEvent):
    type: Literal["bot_changed"] = "bot_changed"
    bot: Bot


# Union type for all RTM events
Event = Union[
    MessageSent,
    MessageError,
    MessageEvent,
    Hello,
    AccountsChanged,
    TeamMigrationStarted,
    ReconnectUrl,
    UserTyping,
    ChannelMarked,
    ChannelCreated,
    ChannelJoined,
    ChannelLeft,
    ChannelDeleted,
    ChannelRename,
    ChannelArchive,
    ChannelUnarchive,
    ChannelHistoryChanged,
    ImCreated,
    ImOpen,
    ImClose,
    ImMarked,
    ImHistoryChanged,
    GroupJoined,
    GroupLeft,
    GroupOpen,
    GroupClose,
    GroupArchive,
    GroupUnarchive,
    GroupRename,
    GroupMarked,
    GroupHistoryChanged,
    FileCreated,
    FileShared,
    FileUnshared,
    FilePublic,
    FilePrivate,
    FileChange,
    FileDeleted,
    FileCommentAdded,
    FileCommentEdited,
    FileCommentDeleted,
    PinAdded,
    PinRemoved,
    StarAdded,
    StarRemoved,
    ReactionAdded,
    ReactionRemoved,
    PresenceChange,
    ManualPresenceChange,
    PrefChange,
    UserChange,
    TeamJoin,
    EmojiChanged,
    CommandsChanged,
    TeamPlanChange,
    TeamPrefChange,
    TeamRename,
    TeamDomainChange,
    EmailDomainChanged,
    BotAdded,
    BotChanged,
]
