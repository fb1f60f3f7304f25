"""
Inline keyboards built from (label, callback token) rows.
"""

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from src.core.plants.events import ButtonRows


def build_inline_keyboard(rows: ButtonRows) -> InlineKeyboardMarkup:
    """Keyboard with one builder row per input row."""
    builder = InlineKeyboardBuilder()
    for row in rows:
        builder.row(
            *(InlineKeyboardButton(text=label, callback_data=token) for label, token in row)
        )
    return builder.as_markup()
