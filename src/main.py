"""
Plant data Telegram bot - Main entry point.
"""

import asyncio
import logging
import sys

from src.bot.bot import get_bot, get_dispatcher
from src.bot.handlers import register_handlers
from src.config import settings


# Fix for Windows asyncio
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())


def configure_logging() -> None:
    """Log to console and, if configured, to the log file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_path = settings.log_path
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
    # aiogram logs every handled update
    logging.getLogger("aiogram.event").setLevel(logging.WARNING)


configure_logging()
logger = logging.getLogger(__name__)


async def on_startup() -> None:
    """Log startup."""
    logger.info("Plant bot started")


async def on_shutdown() -> None:
    """Log shutdown. Session state is memory-only and is dropped."""
    logger.info("Plant bot stopped")


async def main() -> None:
    """Main function to run the bot."""
    bot = get_bot()
    dp = get_dispatcher()

    # Register handlers
    register_handlers(dp)

    # Register startup/shutdown hooks
    dp.startup.register(on_startup)
    dp.shutdown.register(on_shutdown)

    # Start polling
    logger.info("Bot is starting...")
    try:
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        await bot.session.close()


if __name__ == "__main__":
    asyncio.run(main())
