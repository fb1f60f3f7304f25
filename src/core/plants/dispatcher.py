"""
Plant bot state machine.

Routes chat events to handlers, keeps per-chat state in the session store
and talks back through the chat sink.
"""

import logging
from typing import Awaitable, Callable, Optional

from src.core.plants import messages
from src.core.plants.commands import (
    Command,
    Download,
    SelectFilter,
    Sort,
    parse_command,
)
from src.core.plants.errors import (
    DecodeError,
    EmptyWorkingSet,
    TransportFailure,
    UnrecognizedToken,
)
from src.core.plants.events import (
    CallbackEvent,
    ChatSink,
    DocumentEvent,
    Event,
    TextEvent,
)
from src.core.plants.models import PlantField
from src.core.plants.session import PendingFilter, SessionStore
from src.core.plants.transforms import apply_filter, build_filter, sort_by_latin_name
from src.data.codecs import BaseCodec, default_codecs, get_codec

logger = logging.getLogger(__name__)

CommandHandler = Callable[[int, Command], Awaitable[None]]


class PlantDispatcher:
    """Handles one chat event at a time per chat."""

    def __init__(
        self,
        sink: ChatSink,
        store: Optional[SessionStore] = None,
        codecs: Optional[dict[str, BaseCodec]] = None,
    ):
        self.sink = sink
        self.store = store or SessionStore()
        self.codecs = codecs if codecs is not None else default_codecs()
        self._command_handlers: dict[type, CommandHandler] = {
            SelectFilter: self._handle_select_filter,
            Sort: self._handle_sort,
            Download: self._handle_download,
        }

    async def handle(self, event: Optional[Event]) -> None:
        """
        Handle a single inbound event.

        Never raises: failures are logged and the event is dropped.
        """
        if event is None:
            return

        logger.info(f"Received {type(event).__name__} from chat {event.chat_id}")

        try:
            async with self.store.lock(event.chat_id):
                await self._route(event)
        except TransportFailure as e:
            logger.warning(f"Failed to send response to chat {event.chat_id}: {e}")
        except Exception as e:
            logger.error(f"Error handling update for chat {event.chat_id}: {e}", exc_info=True)

    async def _route(self, event: Event) -> None:
        if isinstance(event, CallbackEvent):
            await self.handle_callback(event.chat_id, event.token)
        elif isinstance(event, TextEvent):
            await self.handle_text(event.chat_id, event.body)
        elif isinstance(event, DocumentEvent):
            await self.handle_document(event.chat_id, event.filename, event.payload)

    # =========================================================================
    # TEXT
    # =========================================================================

    async def handle_text(self, chat_id: int, body: str) -> None:
        """Route a text message: /start, filter value or unknown command."""
        if body == messages.START_COMMAND:
            await self.sink.send_text(chat_id, messages.WELCOME_MESSAGE)
        elif self.store.get_pending_filter(chat_id) is not None:
            await self.handle_filter_input(chat_id, body)
        else:
            await self.sink.send_text(chat_id, messages.UNKNOWN_COMMAND_MESSAGE)

    async def handle_filter_input(self, chat_id: int, value: str) -> None:
        """Collect one filter value, applying the filter once all are in."""
        pending = self.store.get_pending_filter(chat_id)
        pending.add_value(value)

        if not pending.is_complete:
            await self.sink.send_text(chat_id, messages.field_prompt(pending.next_field))
            return

        plant_filter = build_filter(pending.fields, pending.values)
        plants = apply_filter(self.store.get_plants(chat_id), plant_filter)
        self.store.set_plants(chat_id, plants)
        self.store.clear_pending_filter(chat_id)

        selection = "+".join(pending.fields)
        logger.info(f"Filter by {selection} applied for chat {chat_id}: {len(plants)} plants left")
        await self.sink.send_text(chat_id, messages.filter_done(selection, len(plants)))

    # =========================================================================
    # CALLBACKS
    # =========================================================================

    async def handle_callback(self, chat_id: int, token: str) -> None:
        """Run the action behind an inline button token."""
        try:
            self.store.require_plants(chat_id)
        except EmptyWorkingSet:
            await self.sink.send_text(chat_id, messages.NO_DATA_MESSAGE)
            return

        try:
            command = parse_command(token)
        except UnrecognizedToken as e:
            logger.warning(str(e))
            return

        await self._command_handlers[type(command)](chat_id, command)

    async def _handle_select_filter(self, chat_id: int, command: SelectFilter) -> None:
        pending = PendingFilter(command.fields)
        self.store.set_pending_filter(chat_id, pending)
        await self.sink.send_text(chat_id, messages.field_prompt(pending.next_field))

    async def _handle_sort(self, chat_id: int, command: Sort) -> None:
        sort_by_latin_name(self.store.get_plants(chat_id), command.order)
        await self.sink.send_text(
            chat_id, messages.sort_done(PlantField.LATIN_NAME.value, command.order)
        )

    async def _handle_download(self, chat_id: int, command: Download) -> None:
        filename = command.format.filename
        codec = get_codec(filename, self.codecs)
        payload = codec.encode(self.store.get_plants(chat_id))
        await self.sink.send_document(chat_id, filename, payload)

    # =========================================================================
    # DOCUMENTS
    # =========================================================================

    async def handle_document(self, chat_id: int, filename: str, payload: bytes) -> None:
        logger.info(f"Received document: {filename}")

        codec = get_codec(filename, self.codecs)
        if codec is None:
            await self.sink.send_text(chat_id, messages.UNSUPPORTED_FORMAT_MESSAGE)
            return

        try:
            plants = codec.decode(payload)
        except DecodeError as e:
            logger.error(f"Failed to decode {filename}: {e}")
            await self.sink.send_text(chat_id, messages.UNREADABLE_FILE_MESSAGE)
            return

        for plant in plants:
            logger.debug(f"Loaded plant: {plant.latin_name}")

        self.store.set_plants(chat_id, plants)
        logger.info(f"Loaded {len(plants)} plants for chat {chat_id}")
        await self.sink.send_buttons(chat_id, messages.CHOOSE_ACTION_MESSAGE, messages.ACTION_BUTTONS)
