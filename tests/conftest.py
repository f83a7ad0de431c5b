"""
Pytest fixtures for slackrtm tests.

Frames are built by tests.fixtures.factory; the fixtures here hand out the
common ones.
"""

import pytest

from tests.fixtures import factory


@pytest.fixture
def standard_message_frame() -> dict:
    """A typed "message" frame for a plain user message."""
    return factory.standard_message()


@pytest.fixture
def sent_ok_frame() -> dict:
    return factory.sent_ok()


@pytest.fixture
def sent_error_frame() -> dict:
    return factory.sent_error()
