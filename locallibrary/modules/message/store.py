"""Message board storage.

Handlers depend on the :class:`MessageStore` interface; the application
creates one :class:`InMemoryMessageStore` per app instance and injects it.
Messages live in process memory only and are not shared between worker
processes.
"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from typing import Iterable, List, Optional

from .schemas import Message


class MessageStore(ABC):
    """Append-only collection of message board entries."""

    @abstractmethod
    async def add_message(self, text: str, user: str) -> Message:
        """Append a message and return it."""

    @abstractmethod
    async def get_messages(self) -> List[Message]:
        """Return all messages, oldest first."""


class InMemoryMessageStore(MessageStore):
    """Message store held in process memory."""

    def __init__(self, initial: Optional[Iterable[Message]] = None) -> None:
        self._messages: List[Message] = list(initial or [])

    async def add_message(self, text: str, user: str) -> Message:
        message = Message(text=text, user=user, added=datetime.now(UTC))
        self._messages.append(message)
        return message

    async def get_messages(self) -> List[Message]:
        return list(self._messages)


def default_messages() -> List[Message]:
    """The greetings a fresh message board starts with."""
    now = datetime.now(UTC)
    return [
        Message(text="Hi there!", user="Amando", added=now),
        Message(text="Hello World!", user="Charles", added=now),
    ]
