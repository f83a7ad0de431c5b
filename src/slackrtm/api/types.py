"""
Decode contracts for the platform entities referenced inside RTM events.

The models only describe what the wire carries; entity lifecycle (fetching,
caching, persisting) lives elsewhere. Only ``id`` is required on the top-level
entities because the platform sends anything from a bare id/name pair to a
full snapshot depending on the event.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, ValidationError

from slackrtm.errors import JsonDecodeError

_E = TypeVar("_E", bound="Entity")


class Entity(BaseModel):
    """Base for immutable wire models. Unknown fields are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @classmethod
    def decode(cls: type[_E], data: Any) -> _E:
        """
        Decode a JSON object into this entity.

        Raises:
            JsonDecodeError: If a required field is missing or a field has the
                wrong shape.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise JsonDecodeError(e) from e


class Topic(Entity):
    """Topic or purpose of a channel."""

    value: str
    creator: str | None = None
    last_set: StrictInt | None = None


class Channel(Entity):
    """Channel, private group or direct-message conversation."""

    id: str
    name: str | None = None
    is_channel: StrictBool | None = None
    is_group: StrictBool | None = None
    is_im: StrictBool | None = None
    created: StrictInt | None = None
    creator: str | None = None
    is_archived: StrictBool | None = None
    is_general: StrictBool | None = None
    is_member: StrictBool | None = None
    is_open: StrictBool | None = None
    user: str | None = None
    members: list[str] | None = None
    topic: Topic | None = None
    purpose: Topic | None = None
    last_read: str | None = None
    unread_count: StrictInt | None = None
    unread_count_display: StrictInt | None = None


class UserProfile(Entity):
    first_name: str | None = None
    last_name: str | None = None
    real_name: str | None = None
    display_name: str | None = None
    email: str | None = None
    skype: str | None = None
    phone: str | None = None
    title: str | None = None
    image_24: str | None = None
    image_32: str | None = None
    image_48: str | None = None
    image_72: str | None = None
    image_192: str | None = None


class User(Entity):
    """Team member."""

    id: str
    name: str | None = None
    deleted: StrictBool | None = None
    color: str | None = None
    real_name: str | None = None
    tz: str | None = None
    tz_label: str | None = None
    tz_offset: StrictInt | None = None
    is_admin: StrictBool | None = None
    is_owner: StrictBool | None = None
    is_primary_owner: StrictBool | None = None
    is_restricted: StrictBool | None = None
    is_ultra_restricted: StrictBool | None = None
    is_bot: StrictBool | None = None
    has_2fa: StrictBool | None = None
    presence: str | None = None
    profile: UserProfile | None = None


class Bot(Entity):
    """Bot integration."""

    id: str
    name: str | None = None
    deleted: StrictBool | None = None
    app_id: str | None = None
    icons: dict[str, str] | None = None


class Comment(Entity):
    """Comment on a file."""

    id: str
    created: StrictInt | None = None
    timestamp: StrictInt | None = None
    user: str | None = None
    comment: str | None = None


class Reaction(Entity):
    """Emoji reaction summary attached to a message or file."""

    name: str
    count: StrictInt | None = None
    users: list[str] | None = None


class Edited(Entity):
    """Edit metadata of a message."""

    user: str
    ts: str


class AttachmentField(Entity):
    title: str | None = None
    value: str | None = None
    short: StrictBool | None = None


class Attachment(Entity):
    """Rich message attachment."""

    id: StrictInt | None = None
    fallback: str | None = None
    color: str | None = None
    pretext: str | None = None
    author_name: str | None = None
    author_link: str | None = None
    author_icon: str | None = None
    title: str | None = None
    title_link: str | None = None
    text: str | None = None
    fields: list[AttachmentField] | None = None
    image_url: str | None = None
    thumb_url: str | None = None
    footer: str | None = None
    footer_icon: str | None = None
    ts: StrictInt | str | None = None


class File(Entity):
    """Uploaded or externally linked file."""

    id: str
    created: StrictInt | None = None
    timestamp: StrictInt | None = None
    name: str | None = None
    title: str | None = None
    mimetype: str | None = None
    filetype: str | None = None
    pretty_type: str | None = None
    user: str | None = None
    mode: str | None = None
    editable: StrictBool | None = None
    is_external: StrictBool | None = None
    external_type: str | None = None
    size: StrictInt | None = None
    url_private: str | None = None
    url_private_download: str | None = None
    permalink: str | None = None
    permalink_public: str | None = None
    is_public: StrictBool | None = None
    public_url_shared: StrictBool | None = None
    channels: list[str] | None = None
    groups: list[str] | None = None
    ims: list[str] | None = None
    initial_comment: Comment | None = None
    num_stars: StrictInt | None = None
    comments_count: StrictInt | None = None
    is_starred: StrictBool | None = None
    pinned_to: list[str] | None = None
    reactions: list[Reaction] | None = None
