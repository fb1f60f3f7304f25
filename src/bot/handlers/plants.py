"""
Telegram handlers for the plant data bot.
Converts aiogram updates into chat events for the plant dispatcher.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from aiogram import Bot, F, Router
from aiogram.exceptions import TelegramAPIError
from aiogram.types import CallbackQuery, Message

from src.core.plants.dispatcher import PlantDispatcher
from src.core.plants.events import CallbackEvent, DocumentEvent, TextEvent

logger = logging.getLogger(__name__)

router = Router(name="plants")


@router.callback_query(F.data)
async def handle_callback(callback: CallbackQuery, plant_dispatcher: PlantDispatcher) -> None:
    """Handle inline button press."""
    try:
        await callback.answer()
    except TelegramAPIError as e:
        logger.warning(f"Failed to answer callback {callback.data!r}: {e}")

    if callback.message is None:
        logger.warning(f"Callback {callback.data!r} without message, skipping")
        return

    await plant_dispatcher.handle(
        CallbackEvent(chat_id=callback.message.chat.id, token=callback.data)
    )


@router.message(F.text)
async def handle_text(message: Message, plant_dispatcher: PlantDispatcher) -> None:
    """Handle /start, filter values and anything else typed by the user."""
    await plant_dispatcher.handle(TextEvent(chat_id=message.chat.id, body=message.text))


@router.message(F.document)
async def handle_document(
    message: Message,
    bot: Bot,
    plant_dispatcher: PlantDispatcher,
    download_dir: Optional[Path] = None,
) -> None:
    """Download uploaded file to a temporary location and pass it on."""
    document = message.document
    filename = document.file_name or ""

    fd, tmp_name = tempfile.mkstemp(suffix=Path(filename).suffix, dir=download_dir)
    os.close(fd)
    tmp_path = Path(tmp_name)

    try:
        try:
            await bot.download(document, destination=tmp_path)
            payload = tmp_path.read_bytes()
        except Exception as e:
            logger.error(f"Failed to download document {filename}: {e}", exc_info=True)
            return

        logger.info(f"Document {filename} downloaded to {tmp_path}")
        await plant_dispatcher.handle(
            DocumentEvent(chat_id=message.chat.id, filename=filename, payload=payload)
        )
    finally:
        tmp_path.unlink(missing_ok=True)
