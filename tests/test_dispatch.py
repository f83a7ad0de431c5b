"""Tests for EventDispatcher."""

import logging
from unittest.mock import AsyncMock

import pytest

from slackrtm.dispatch import EventDispatcher
from slackrtm.errors import JsonDecodeError, JsonParseError, Utf8Error
from slackrtm.events import Hello, MessageEvent, MessageSent
from tests.fixtures import factory


class TestEventDispatcherConstruction:
    def test_default_policy_is_log(self):
        dispatcher = EventDispatcher()

        assert dispatcher.decode_errors == "log"
        assert dispatcher.handlers == {}

    def test_rejects_unknown_policy(self):
        with pytest.raises(ValueError) as exc_info:
            EventDispatcher(decode_errors="ignore")

        assert "ignore" in str(exc_info.value)

    def test_on_and_off(self):
        dispatcher = EventDispatcher()
        handler = AsyncMock()

        dispatcher.on("hello", handler)
        assert dispatcher.handlers == {"hello": handler}

        dispatcher.off("hello")
        assert dispatcher.handlers == {}


class TestHandleFrame:
    """Test routing of decoded frames to handlers."""

    async def test_calls_handler_for_type(self):
        dispatcher = EventDispatcher()
        on_message = AsyncMock()
        dispatcher.on("message", on_message)

        event = await dispatcher.handle_frame(factory.raw(factory.standard_message()))

        assert isinstance(event, MessageEvent)
        on_message.assert_awaited_once_with(event)

    async def test_confirmation_routed_by_local_tag(self):
        dispatcher = EventDispatcher()
        on_sent = AsyncMock()
        dispatcher.on("message_sent", on_sent)

        event = await dispatcher.handle_frame(factory.raw(factory.sent_ok(reply_to=7)))

        assert event == MessageSent(reply_to=7, ts="1234567890.218332", text="Hello world")
        on_sent.assert_awaited_once()

    async def test_bytes_frame(self):
        dispatcher = EventDispatcher()
        on_hello = AsyncMock()
        dispatcher.on("hello", on_hello)

        await dispatcher.handle_frame(b'{"type": "hello"}')

        on_hello.assert_awaited_once_with(Hello())

    async def test_missing_handler_returns_event(self, caplog):
        dispatcher = EventDispatcher()
        dispatcher.on("message", AsyncMock())

        with caplog.at_level(logging.WARNING, logger="slackrtm.dispatch"):
            event = await dispatcher.handle_frame('{"type": "hello"}')

        assert isinstance(event, Hello)
        assert "no handler registered" in caplog.text

    async def test_other_handlers_not_called(self):
        dispatcher = EventDispatcher()
        on_message = AsyncMock()
        dispatcher.on("message", on_message)

        await dispatcher.handle_frame('{"type": "hello"}')

        on_message.assert_not_awaited()


class TestDecodeErrorPolicy:
    """Frames that fail to decode are dropped or raised per policy."""

    @pytest.mark.parametrize(
        "raw",
        ['{"type": "brand_new_event"}', '{"type": ', b"\xff\xfe", '{"type": "message"}'],
    )
    async def test_log_policy_drops_frame(self, raw, caplog):
        dispatcher = EventDispatcher(decode_errors="log")
        handler = AsyncMock()
        dispatcher.on("message", handler)

        with caplog.at_level(logging.WARNING, logger="slackrtm.dispatch"):
            result = await dispatcher.handle_frame(raw)

        assert result is None
        handler.assert_not_awaited()
        assert "Dropping undecodable frame" in caplog.text

    async def test_log_policy_drops_deeply_nested_frame(self, caplog):
        dispatcher = EventDispatcher(decode_errors="log")

        with caplog.at_level(logging.WARNING, logger="slackrtm.dispatch"):
            result = await dispatcher.handle_frame("[" * 100000 + "]" * 100000)

        assert result is None
        assert "Dropping undecodable frame" in caplog.text

    async def test_log_message_names_unknown_type(self, caplog):
        dispatcher = EventDispatcher()

        with caplog.at_level(logging.WARNING, logger="slackrtm.dispatch"):
            await dispatcher.handle_frame('{"type": "brand_new_event"}')

        assert "brand_new_event" in caplog.text

    @pytest.mark.parametrize(
        "raw,kind",
        [
            ('{"type": "brand_new_event"}', JsonDecodeError),
            ('{"type": ', JsonParseError),
            (b"\xff\xfe", Utf8Error),
        ],
    )
    async def test_raise_policy_propagates(self, raw, kind):
        dispatcher = EventDispatcher(decode_errors="raise")

        with pytest.raises(kind):
            await dispatcher.handle_frame(raw)

    async def test_handler_errors_propagate(self):
        """Only decode errors are subject to the policy."""
        dispatcher = EventDispatcher(decode_errors="log")
        dispatcher.on("hello", AsyncMock(side_effect=RuntimeError("handler failed")))

        with pytest.raises(RuntimeError):
            await dispatcher.handle_frame('{"type": "hello"}')
