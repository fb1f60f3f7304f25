"""
Bot handlers registration.
"""

from aiogram import Dispatcher

from src.bot.handlers.plants import router as plants_router


def register_handlers(dp: Dispatcher) -> None:
    """Register all handlers to dispatcher."""
    dp.include_router(plants_router)
