"""
Per-chat session state: working set and pending filter input.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Optional

from src.core.plants.errors import EmptyWorkingSet
from src.core.plants.models import Plant


@dataclass
class PendingFilter:
    """Filter waiting for values typed by the user."""
    fields: tuple[str, ...]
    values: list[str] = field(default_factory=list)

    @property
    def required_count(self) -> int:
        return len(self.fields)

    @property
    def is_complete(self) -> bool:
        return len(self.values) >= self.required_count

    @property
    def next_field(self) -> str:
        """Field whose value is expected next."""
        return self.fields[len(self.values)]

    def add_value(self, value: str) -> None:
        self.values.append(value)


@dataclass
class ChatSession:
    """State owned by a single chat."""
    plants: list[Plant] = field(default_factory=list)
    pending_filter: Optional[PendingFilter] = None


class SessionStore:
    """
    In-memory sessions keyed by chat id.

    Entries live for the process lifetime. Use `lock(chat_id)` around
    any read-modify-write of a chat's state.
    """

    def __init__(self):
        self._sessions: dict[int, ChatSession] = {}
        self._locks: dict[int, asyncio.Lock] = {}

    def _session(self, chat_id: int) -> ChatSession:
        session = self._sessions.get(chat_id)
        if session is None:
            session = self._sessions[chat_id] = ChatSession()
        return session

    def lock(self, chat_id: int) -> asyncio.Lock:
        """Get lock serializing event handling for a chat."""
        lock = self._locks.get(chat_id)
        if lock is None:
            lock = self._locks[chat_id] = asyncio.Lock()
        return lock

    # Working set

    def get_plants(self, chat_id: int) -> list[Plant]:
        return self._session(chat_id).plants

    def require_plants(self, chat_id: int) -> list[Plant]:
        """Get working set, raising EmptyWorkingSet if nothing is loaded."""
        plants = self.get_plants(chat_id)
        if not plants:
            raise EmptyWorkingSet(chat_id)
        return plants

    def set_plants(self, chat_id: int, plants: list[Plant]) -> None:
        self._session(chat_id).plants = list(plants)

    # Pending filter

    def get_pending_filter(self, chat_id: int) -> Optional[PendingFilter]:
        return self._session(chat_id).pending_filter

    def set_pending_filter(self, chat_id: int, pending: PendingFilter) -> None:
        self._session(chat_id).pending_filter = pending

    def clear_pending_filter(self, chat_id: int) -> None:
        self._session(chat_id).pending_filter = None
