"""Tests for the application factory."""

import pytest

from locallibrary.infrastructure.app_factory import create_application
from locallibrary.infrastructure.config.settings import get_settings
from locallibrary.interfaces.web import router
from locallibrary.modules.message.store import InMemoryMessageStore


@pytest.mark.asyncio
async def test_each_application_gets_its_own_seeded_store():
    first = create_application(router=router)
    second = create_application(router=router)

    assert first.state.message_store is not second.state.message_store
    assert len(await first.state.message_store.get_messages()) == 2


@pytest.mark.asyncio
async def test_unseeded_message_board():
    settings = get_settings().model_copy(update={"MESSAGE_BOARD_SEEDED": False})

    application = create_application(router=router, settings=settings)

    assert await application.state.message_store.get_messages() == []


def test_injected_store_is_used():
    store = InMemoryMessageStore()

    application = create_application(router=router, message_store=store)

    assert application.state.message_store is store
    assert application.title == "Local Library"
