"""
Pytest configuration and fixtures for json_query tests.
"""

from datetime import datetime, timezone

import pytest
from aiogram.types import CallbackQuery, Chat, Message, Update, User

from json_query.config import reset_settings

TEST_USER = User(id=1, is_bot=False, first_name="Test")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reset the settings singleton around every test."""
    reset_settings()
    yield
    reset_settings()


def make_callback_query(data=None) -> CallbackQuery:
    """CallbackQuery with the given callback_data (None = no data field)."""
    return CallbackQuery(
        id="1",
        from_user=TEST_USER,
        chat_instance="test",
        data=data,
    )


def make_callback_update(data=None, update_id: int = 1) -> Update:
    return Update(update_id=update_id, callback_query=make_callback_query(data))


def make_message_update(text: str = "hello", update_id: int = 1) -> Update:
    return Update(
        update_id=update_id,
        message=Message(
            message_id=1,
            date=datetime.fromtimestamp(0, tz=timezone.utc),
            chat=Chat(id=1, type="private"),
            text=text,
        ),
    )


@pytest.fixture
def callback_query_factory():
    return make_callback_query


@pytest.fixture
def callback_update_factory():
    return make_callback_update


@pytest.fixture
def message_update_factory():
    return make_message_update
