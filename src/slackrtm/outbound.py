"""
Outbound RTM frames (client -> server).

The ``id`` of an OutboundMessage is echoed back as ``reply_to`` in the
MessageSent / MessageError confirmation for that message.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, StrictInt

from slackrtm.errors import JsonEncodeError

logger = logging.getLogger(__name__)


class _Outbound(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: StrictInt


class OutboundMessage(_Outbound):
    """Message posted to a channel over the socket."""

    type: Literal["message"] = "message"
    channel: str
    text: str


class Typing(_Outbound):
    """Typing indicator for a channel."""

    type: Literal["typing"] = "typing"
    channel: str


class Ping(_Outbound):
    type: Literal["ping"] = "ping"


def encode_outbound(payload: _Outbound | Mapping[str, Any]) -> str:
    """
    Serialize an outbound frame to JSON text.

    Raises:
        JsonEncodeError: If the payload holds values JSON cannot represent.
    """
    data = payload.model_dump() if isinstance(payload, BaseModel) else dict(payload)
    try:
        text = json.dumps(data, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise JsonEncodeError(e) from e

    logger.debug(f"Encoded outbound {data.get('type')} frame")
    return text
