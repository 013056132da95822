"""Tests for the in-memory message store."""

import pytest

from locallibrary.modules.message.store import InMemoryMessageStore, default_messages


@pytest.mark.asyncio
async def test_default_messages_are_listed_first():
    store = InMemoryMessageStore(default_messages())

    messages = await store.get_messages()

    assert [(message.text, message.user) for message in messages] == [("Hi there!", "Amando"), ("Hello World!", "Charles")]


@pytest.mark.asyncio
async def test_add_message_appends():
    """Test new messages are appended after existing ones."""
    store = InMemoryMessageStore(default_messages())

    added = await store.add_message(text="Good book", user="Dana")
    messages = await store.get_messages()

    assert len(messages) == 3
    assert messages[-1] == added
    assert added.added is not None


@pytest.mark.asyncio
async def test_stores_are_independent():
    """Test two stores never share messages."""
    first = InMemoryMessageStore()
    second = InMemoryMessageStore()

    await first.add_message(text="Only here", user="Eve")

    assert len(await first.get_messages()) == 1
    assert await second.get_messages() == []
