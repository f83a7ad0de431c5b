"""Frame factories for unit tests.

This module provides factory functions that build wire frames the way the
RTM stream delivers them (already parsed from JSON), so tests can decode them
without a live connection.

MINIMAL_FRAMES holds, for every recognized event type, the smallest frame the
decoder accepts. Every key in those frames is required by its event model.
"""

import copy
import json
from typing import Any, Dict, Optional


class FrameFactory:
    """Factory for creating RTM frames and the entity objects inside them."""

    @staticmethod
    def channel(id: str = "C12345678", **extra: Any) -> Dict[str, Any]:
        """Create a channel object."""
        return {"id": id, **extra}

    @staticmethod
    def user(id: str = "U12345678", **extra: Any) -> Dict[str, Any]:
        """Create a user object."""
        return {"id": id, **extra}

    @staticmethod
    def bot(id: str = "B12345678", **extra: Any) -> Dict[str, Any]:
        return {"id": id, **extra}

    @staticmethod
    def file(id: str = "F12345678", **extra: Any) -> Dict[str, Any]:
        """Create a file object."""
        return {"id": id, **extra}

    @staticmethod
    def comment(id: str = "Fc12345678", **extra: Any) -> Dict[str, Any]:
        return {"id": id, **extra}

    @staticmethod
    def message_item(
        channel: str = "C12345678", ts: str = "1234567890.218332"
    ) -> Dict[str, Any]:
        """Create an item pointing at a message."""
        return {"type": "message", "channel": channel, "message": {"ts": ts}}

    @staticmethod
    def file_item(id: str = "F12345678") -> Dict[str, Any]:
        return {"type": "file", "file": {"id": id}}

    @staticmethod
    def standard_message(
        ts: str = "1234567890.218332",
        user: Optional[str] = "U12345678",
        text: Optional[str] = "Hello world",
        channel: Optional[str] = "C12345678",
        **extra: Any,
    ) -> Dict[str, Any]:
        """Create a typed "message" frame for a standard user message."""
        frame: Dict[str, Any] = {"type": "message", "ts": ts}
        if user is not None:
            frame["user"] = user
        if text is not None:
            frame["text"] = text
        if channel is not None:
            frame["channel"] = channel
        frame.update(extra)
        return frame

    @staticmethod
    def sent_ok(
        reply_to: int = 1, ts: str = "1234567890.218332", text: str = "Hello world"
    ) -> Dict[str, Any]:
        """Create a successful send confirmation frame."""
        return {"ok": True, "reply_to": reply_to, "ts": ts, "text": text}

    @staticmethod
    def sent_error(
        reply_to: int = 1, code: int = 2, msg: str = "message text is missing"
    ) -> Dict[str, Any]:
        """Create a failed send confirmation frame."""
        return {
            "ok": False,
            "reply_to": reply_to,
            "error": {"code": code, "msg": msg},
        }

    @staticmethod
    def minimal(event_type: str) -> Dict[str, Any]:
        """Return a fresh copy of the minimal frame for an event type."""
        return copy.deepcopy(MINIMAL_FRAMES[event_type])

    @staticmethod
    def raw(frame: Any) -> str:
        """Serialize a frame as the transport would deliver it."""
        return json.dumps(frame)


factory = FrameFactory()

_TS = "1234567890.218332"

MINIMAL_FRAMES: Dict[str, Dict[str, Any]] = {
    "hello": {"type": "hello"},
    "message": {"type": "message", "ts": _TS},
    "user_typing": {"type": "user_typing", "channel": "C1", "user": "U1"},
    "channel_marked": {"type": "channel_marked", "channel": "C1", "ts": _TS},
    "channel_created": {"type": "channel_created", "channel": {"id": "C1"}},
    "channel_joined": {"type": "channel_joined", "channel": {"id": "C1"}},
    "channel_left": {"type": "channel_left", "channel": "C1"},
    "channel_deleted": {"type": "channel_deleted", "channel": "C1"},
    "channel_rename": {"type": "channel_rename", "channel": {"id": "C1"}},
    "channel_archive": {"type": "channel_archive", "channel": "C1", "user": "U1"},
    "channel_unarchive": {"type": "channel_unarchive", "channel": "C1", "user": "U1"},
    "channel_history_changed": {
        "type": "channel_history_changed",
        "latest": _TS,
        "ts": _TS,
        "event_ts": _TS,
    },
    "im_created": {"type": "im_created", "user": "U1", "channel": {"id": "D1"}},
    "im_open": {"type": "im_open", "user": "U1", "channel": "D1"},
    "im_close": {"type": "im_close", "user": "U1", "channel": "D1"},
    "im_marked": {"type": "im_marked", "channel": "D1", "ts": _TS},
    "im_history_changed": {
        "type": "im_history_changed",
        "latest": _TS,
        "ts": _TS,
        "event_ts": _TS,
    },
    "group_joined": {"type": "group_joined", "channel": {"id": "G1"}},
    "group_left": {"type": "group_left", "channel": {"id": "G1"}},
    "group_open": {"type": "group_open", "user": "U1", "channel": "G1"},
    "group_close": {"type": "group_close", "user": "U1", "channel": "G1"},
    "group_archive": {"type": "group_archive", "channel": "G1"},
    "group_unarchive": {"type": "group_unarchive", "channel": "G1"},
    "group_rename": {"type": "group_rename", "channel": {"id": "G1"}},
    "group_marked": {"type": "group_marked", "channel": "G1", "ts": _TS},
    "group_history_changed": {
        "type": "group_history_changed",
        "latest": _TS,
        "ts": _TS,
        "event_ts": _TS,
    },
    "file_created": {"type": "file_created", "file": {"id": "F1"}},
    "file_shared": {"type": "file_shared", "file": {"id": "F1"}},
    "file_unshared": {"type": "file_unshared", "file": {"id": "F1"}},
    "file_public": {"type": "file_public", "file": {"id": "F1"}},
    "file_private": {"type": "file_private", "file": "F1"},
    "file_change": {"type": "file_change", "file": {"id": "F1"}},
    "file_deleted": {"type": "file_deleted", "file_id": "F1", "event_ts": _TS},
    "file_comment_added": {
        "type": "file_comment_added",
        "file": {"id": "F1"},
        "comment": {"id": "Fc1"},
    },
    "file_comment_edited": {
        "type": "file_comment_edited",
        "file": {"id": "F1"},
        "comment": {"id": "Fc1"},
    },
    "file_comment_deleted": {
        "type": "file_comment_deleted",
        "file": {"id": "F1"},
        "comment": "Fc1",
    },
    "pin_added": {
        "type": "pin_added",
        "user": "U1",
        "channel_id": "C1",
        "item": {"type": "file", "file": {"id": "F1"}},
        "event_ts": _TS,
    },
    "pin_removed": {
        "type": "pin_removed",
        "user": "U1",
        "channel_id": "C1",
        "item": {"type": "file", "file": {"id": "F1"}},
        "has_pins": False,
        "event_ts": _TS,
    },
    "presence_change": {"type": "presence_change", "user": "U1", "presence": "away"},
    "manual_presence_change": {"type": "manual_presence_change", "presence": "away"},
    "pref_change": {"type": "pref_change", "name": "messages_theme", "value": "dense"},
    "user_change": {"type": "user_change", "user": {"id": "U1"}},
    "team_join": {"type": "team_join", "user": {"id": "U1"}},
    "star_added": {
        "type": "star_added",
        "user": "U1",
        "item": {"type": "channel", "channel": "C1"},
        "event_ts": _TS,
    },
    "star_removed": {
        "type": "star_removed",
        "user": "U1",
        "item": {"type": "channel", "channel": "C1"},
        "event_ts": _TS,
    },
    "reaction_added": {
        "type": "reaction_added",
        "user": "U1",
        "name": "thumbsup",
        "item": {"type": "message", "channel": "C1", "message": {"ts": _TS}},
        "item_user": "U2",
        "event_ts": _TS,
    },
    "reaction_removed": {
        "type": "reaction_removed",
        "user": "U1",
        "name": "thumbsup",
        "item": {"type": "message", "channel": "C1", "message": {"ts": _TS}},
        "item_user": "U2",
        "event_ts": _TS,
    },
    "emoji_changed": {"type": "emoji_changed", "event_ts": _TS},
    "commands_changed": {"type": "commands_changed", "event_ts": _TS},
    "team_plan_change": {"type": "team_plan_change", "plan": "std"},
    "team_pref_change": {
        "type": "team_pref_change",
        "name": "slackbot_responses_only_admins",
        "value": True,
    },
    "team_rename": {"type": "team_rename", "name": "New Team Name"},
    "team_domain_change": {
        "type": "team_domain_change",
        "url": "https://my.slack.com",
        "domain": "my",
    },
    "email_domain_changed": {
        "type": "email_domain_changed",
        "email_domain": "example.com",
        "event_ts": _TS,
    },
    "bot_added": {"type": "bot_added", "bot": {"id": "B1"}},
    "bot_changed": {"type": "bot_changed", "bot": {"id": "B1"}},
    "accounts_changed": {"type": "accounts_changed"},
    "team_migration_started": {"type": "team_migration_started"},
    "reconnect_url": {"type": "reconnect_url"},
}
