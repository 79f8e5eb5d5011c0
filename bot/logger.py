import logging
from aiogram import BaseMiddleware
from aiogram.types import Update
import os

from .config import LOG_DIR, BOT_LOG_FILE_NAME

LOG_FILE = os.path.join(LOG_DIR, BOT_LOG_FILE_NAME)


def setup_logging():
    """Console + file logging for the bot process."""
    # Убедимся, что директория для логов существует
    os.makedirs(LOG_DIR, exist_ok=True)
    logging.getLogger("aiogram.event").setLevel(logging.WARNING)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s",
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.FileHandler(LOG_FILE, encoding='utf-8'), # Логирование в файл
            logging.StreamHandler()
        ]
    )


class UserLoggingMiddleware(BaseMiddleware):
    async def __call__(self, handler, event: Update, data):
        console_log_message = "Получено неизвестное обновление."

        if event.message and event.message.from_user:
            user = event.message.from_user
            action_type = "command" if event.message.text and event.message.text.startswith('/') else "text_message"
            details = event.message.text or f"Message type: {event.message.content_type}"
            console_log_message = f"User: {user.full_name} (@{user.username or 'no_username'}), Action: {action_type}, Details: {details[:100]}"
        elif event.inline_query:
            user = event.inline_query.from_user
            console_log_message = f"User: {user.full_name} (@{user.username or 'no_username'}), Action: inline_query, Details: {event.inline_query.query[:100]}"

        logging.info(console_log_message)
        return await handler(event, data)
