import asyncio
import logging
import aiohttp
from dotenv import load_dotenv
from aiogram import Bot, Dispatcher, types

# Загрузка переменных окружения до импорта модулей, читающих их при импорте
load_dotenv()

from .config import BOT_TOKEN
from .handlers import setup_handlers
from .logger import UserLoggingMiddleware, setup_logging
from shared_lib.config import API_JWT, API_TIMEOUT_SECONDS, DEFAULT_LANG
from shared_lib.i18n import translator
from shared_lib.services.backend_api import create_backend_api_client
from shared_lib.services.schedule_builder import ScheduleService

logger = logging.getLogger(__name__)


async def set_bot_commands(bot: Bot):
    """Sets the bot's command list in the UI."""
    commands = [
        types.BotCommand(command="today", description=translator.gettext(DEFAULT_LANG, "command_desc_today")),
        types.BotCommand(command="tomorrow", description=translator.gettext(DEFAULT_LANG, "command_desc_tomorrow")),
    ]
    await bot.set_my_commands(commands, scope=types.BotCommandScopeDefault())
    logger.info("Bot commands have been set.")


async def on_error(event: types.ErrorEvent):
    logger.error(f"Unhandled bot error for update {event.update.update_id}: {event.exception}", exc_info=event.exception)


async def main():
    if not BOT_TOKEN:
        logger.critical("BOT_TOKEN is not configured. Set it in your environment or .env file.")
        return
    if not API_JWT:
        logger.critical("API_JWT is not configured. Set it in your environment or .env file.")
        return

    bot = Bot(BOT_TOKEN)

    # Graceful shutdown handler
    async def on_shutdown(dispatcher: Dispatcher):
        logger.warning("Shutting down...")
        await bot.session.close()

    # Общий таймаут для всех запросов к бэкенду
    timeout = aiohttp.ClientTimeout(total=API_TIMEOUT_SECONDS)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        schedule_service = ScheduleService(create_backend_api_client(session))

        dp = Dispatcher()
        dp.shutdown.register(on_shutdown)
        dp.errors.register(on_error)
        dp.update.middleware(UserLoggingMiddleware())

        setup_handlers(dp, schedule_service=schedule_service)

        await set_bot_commands(bot)
        logger.info("Telegram inline bot is running.")
        await dp.start_polling(bot)


if __name__ == '__main__':
    setup_logging()
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.error('Bot stopped!')
