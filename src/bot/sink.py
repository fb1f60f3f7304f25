"""
Outbound chat sink on top of aiogram Bot.
"""

import logging

from aiogram import Bot
from aiogram.exceptions import TelegramAPIError
from aiogram.types import BufferedInputFile

from src.bot.keyboards.actions import build_inline_keyboard
from src.core.plants.errors import TransportFailure
from src.core.plants.events import ButtonRows

logger = logging.getLogger(__name__)


class TelegramSink:
    """Sends bot responses to Telegram chats."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send_text(self, chat_id: int, text: str) -> None:
        try:
            await self.bot.send_message(chat_id=chat_id, text=text)
        except TelegramAPIError as e:
            raise TransportFailure(f"send_message failed: {e}") from e

    async def send_buttons(self, chat_id: int, text: str, buttons: ButtonRows) -> None:
        try:
            await self.bot.send_message(
                chat_id=chat_id,
                text=text,
                reply_markup=build_inline_keyboard(buttons),
            )
        except TelegramAPIError as e:
            raise TransportFailure(f"send_message with keyboard failed: {e}") from e

    async def send_document(self, chat_id: int, filename: str, payload: bytes) -> None:
        logger.info(f"Sending {filename} ({len(payload)} bytes) to chat {chat_id}")
        try:
            await self.bot.send_document(
                chat_id=chat_id,
                document=BufferedInputFile(payload, filename=filename),
            )
        except TelegramAPIError as e:
            raise TransportFailure(f"send_document failed: {e}") from e
