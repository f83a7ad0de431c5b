"""
Unified error taxonomy for the RTM client.

Every failure the client stack can hit (HTTP calls, the streaming socket,
UTF-8 decoding, JSON parsing and schema decoding, JSON encoding, Web API
rejections) is converted into one of the SlackError subclasses below, so
transport and application code only ever catch a single exception family.

Usage:
    from slackrtm.errors import SlackError, from_exception

    try:
        event = parse_frame(raw)
    except SlackError as e:
        logger.warning(f"Dropping frame: {e}")
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx
from pydantic import ValidationError
from websockets.exceptions import WebSocketException

logger = logging.getLogger(__name__)


class SlackError(Exception):
    """Base exception for all RTM client errors."""

    label = "Error"

    def __init__(self, cause: BaseException | None = None, message: str | None = None):
        if message is None:
            message = repr(cause)
        super().__init__(message)
        self.message = message
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        """The lower-layer error this one wraps, if any."""
        return self._cause

    def __str__(self) -> str:
        detail = repr(self._cause) if self._cause is not None else repr(self.message)
        return f"{self.label}: {detail}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class HttpError(SlackError):
    """HTTP client error."""

    label = "Http Error"

    def __init__(self, cause: httpx.HTTPError):
        super().__init__(cause)


class UrlError(SlackError):
    """A request URL could not be parsed."""

    label = "Url Error"

    def __init__(self, cause: Exception):
        super().__init__(cause)


class WebSocketError(SlackError):
    """Streaming socket error."""

    label = "WebSocket Error"

    def __init__(self, cause: WebSocketException):
        super().__init__(cause)


class Utf8Error(SlackError):
    """A text frame was not valid UTF-8."""

    label = "Utf8 Decode Error"

    def __init__(self, cause: UnicodeDecodeError):
        super().__init__(cause)


class JsonParseError(SlackError):
    """
    Frame text was not well-formed JSON.

    The cause is a json.JSONDecodeError, a ValueError for the non-standard
    constants NaN and Infinity, or a RecursionError for nesting too deep to
    parse.
    """

    label = "Json Parse Error"

    def __init__(self, cause: ValueError | RecursionError):
        super().__init__(cause)


class JsonDecodeError(SlackError):
    """
    Well-formed JSON with missing or wrongly shaped fields.

    The cause is either a pydantic ValidationError or, for dispatch-level
    failures such as an unrecognized event type, a ValueError.
    """

    label = "Json Decode Error"

    def __init__(self, cause: ValueError):
        super().__init__(cause, message=str(cause))


class JsonEncodeError(SlackError):
    """An outbound payload could not be serialized."""

    label = "Json Encode Error"

    def __init__(self, cause: Exception):
        super().__init__(cause)


class ApiError(SlackError):
    """The Web API rejected a call with an error string."""

    label = "Slack Api Error"

    def __init__(self, error: str):
        super().__init__(None, message=error)


class InternalError(SlackError):
    """Errors that do not fit under the other kinds, e.g. local I/O."""

    label = "Internal Error"

    def __init__(self, message: str):
        super().__init__(None, message=message)


# --- Conversions from lower-layer error domains ---

_URL_ERRORS = (httpx.InvalidURL, httpx.UnsupportedProtocol)


def _has_url_cause(exc: BaseException) -> bool:
    """Walk the cause/context chain looking for a URL parsing failure."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, _URL_ERRORS):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False


def from_http_error(exc: httpx.HTTPError | httpx.InvalidURL) -> SlackError:
    """Convert an httpx error, re-tagging URL parsing failures as UrlError."""
    if _has_url_cause(exc):
        return UrlError(exc)
    return HttpError(exc)


def from_websocket_error(exc: WebSocketException) -> WebSocketError:
    return WebSocketError(exc)


def from_unicode_error(exc: UnicodeDecodeError) -> Utf8Error:
    return Utf8Error(exc)


def from_json_parse_error(exc: json.JSONDecodeError) -> JsonParseError:
    return JsonParseError(exc)


def from_validation_error(exc: ValidationError) -> JsonDecodeError:
    return JsonDecodeError(exc)


def from_json_encode_error(exc: TypeError | ValueError) -> JsonEncodeError:
    return JsonEncodeError(exc)


def from_os_error(exc: OSError) -> InternalError:
    return InternalError(repr(exc))


def from_exception(exc: BaseException) -> SlackError:
    """
    Route any exception into the taxonomy.

    Order matters: JSONDecodeError, UnicodeDecodeError and ValidationError
    are all ValueError subclasses, so they are checked before the generic
    fallthrough. Anything unrecognized becomes an InternalError.
    """
    if isinstance(exc, SlackError):
        return exc
    if isinstance(exc, (httpx.HTTPError, httpx.InvalidURL)):
        return from_http_error(exc)
    if isinstance(exc, WebSocketException):
        return from_websocket_error(exc)
    if isinstance(exc, UnicodeDecodeError):
        return from_unicode_error(exc)
    if isinstance(exc, json.JSONDecodeError):
        return from_json_parse_error(exc)
    if isinstance(exc, ValidationError):
        return from_validation_error(exc)
    if isinstance(exc, OSError):
        return from_os_error(exc)

    logger.debug(f"No dedicated error kind for {type(exc).__name__}")
    return InternalError(repr(exc))


def raise_for_api_error(body: Mapping[str, Any]) -> Mapping[str, Any]:
    """
    Check a Web API response body.

    Raises:
        ApiError: If the body reports ``ok: false``. The error string from the
            body is carried as the message ("unknown_error" when absent).
    """
    if body.get("ok") is False:
        error = body.get("error")
        raise ApiError(error if isinstance(error, str) else "unknown_error")
    return body
