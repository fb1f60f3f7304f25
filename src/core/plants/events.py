"""
Inbound chat events and the outbound sink interface.
"""

from dataclasses import dataclass
from typing import Protocol, Sequence, Union


@dataclass(frozen=True)
class CallbackEvent:
    """Inline button pressed."""
    chat_id: int
    token: str


@dataclass(frozen=True)
class TextEvent:
    """Plain text message."""
    chat_id: int
    body: str


@dataclass(frozen=True)
class DocumentEvent:
    """Uploaded file."""
    chat_id: int
    filename: str
    payload: bytes


Event = Union[CallbackEvent, TextEvent, DocumentEvent]

# Rows of (label, callback token)
ButtonRows = Sequence[Sequence[tuple[str, str]]]


class ChatSink(Protocol):
    """Outbound side of the chat transport."""

    async def send_text(self, chat_id: int, text: str) -> None:
        ...

    async def send_buttons(self, chat_id: int, text: str, buttons: ButtonRows) -> None:
        ...

    async def send_document(self, chat_id: int, filename: str, payload: bytes) -> None:
        ...
