"""
Plants module for the plant data bot.
Handles working sets, filter input and file round trips per chat.
"""

from src.core.plants.models import Plant, PlantField
from src.core.plants.errors import (
    PlantBotError,
    DecodeError,
    UnrecognizedToken,
    EmptyWorkingSet,
    TransportFailure,
)
from src.core.plants.commands import (
    Command,
    SelectFilter,
    Sort,
    Download,
    SortOrder,
    ExportFormat,
    parse_command,
)
from src.core.plants.events import CallbackEvent, TextEvent, DocumentEvent, Event, ChatSink
from src.core.plants.session import SessionStore, PendingFilter

__all__ = [
    # Models
    "Plant",
    "PlantField",
    # Errors
    "PlantBotError",
    "DecodeError",
    "UnrecognizedToken",
    "EmptyWorkingSet",
    "TransportFailure",
    # Commands
    "Command",
    "SelectFilter",
    "Sort",
    "Download",
    "SortOrder",
    "ExportFormat",
    "parse_command",
    # Events
    "CallbackEvent",
    "TextEvent",
    "DocumentEvent",
    "Event",
    "ChatSink",
    # Session
    "SessionStore",
    "PendingFilter",
]
