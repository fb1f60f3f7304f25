"""
Telegram bot initialization and configuration.
"""

from aiogram import Bot, Dispatcher
from aiogram.fsm.storage.memory import MemoryStorage

from src.bot.sink import TelegramSink
from src.config import settings
from src.core.plants.dispatcher import PlantDispatcher


def create_bot() -> Bot:
    """Create configured Telegram bot instance."""
    # Plain text messages: plant data may contain HTML-like characters
    return Bot(token=settings.telegram_bot_token)


def create_dispatcher(bot: Bot) -> Dispatcher:
    """Create dispatcher with storage and the plant state machine."""
    storage = MemoryStorage()
    dp = Dispatcher(storage=storage)
    dp["plant_dispatcher"] = PlantDispatcher(sink=TelegramSink(bot))
    dp["download_dir"] = settings.download_dir
    return dp


# Global instances
bot: Bot | None = None
dp: Dispatcher | None = None


def get_bot() -> Bot:
    """Get or create bot instance."""
    global bot
    if bot is None:
        bot = create_bot()
    return bot


def get_dispatcher() -> Dispatcher:
    """Get or create dispatcher instance."""
    global dp
    if dp is None:
        dp = create_dispatcher(get_bot())
    return dp
