"""
Message storage: two interchangeable backends behind one interface.
- SqlMessageStore: relational table (Postgres in production, sqlite works too)
- JsonFileMessageStore: single JSON document, fallback when DATABASE_URL is unset
Backend is picked once at startup (see factory.create_store), never per request.
"""
from abc import ABC, abstractmethod
from typing import List

from nexa_chat.schemas.message import HealthStatus, Message


class MessageStore(ABC):
    mode: str = ""

    @abstractmethod
    def initialize(self) -> None:
        """Create the table / store file if missing. Safe to call repeatedly."""

    @abstractmethod
    def list_messages(self, chat_name: str) -> List[Message]:
        """All messages of a room, oldest first. Empty list for an unknown room."""

    @abstractmethod
    def append_message(self, chat_name: str, sender: str, text: str) -> Message:
        """Persist a new message; id and timestamp are assigned here, never by the client."""

    @abstractmethod
    def health_check(self) -> HealthStatus:
        ...
