# bot/handlers/schedule.py

from aiogram import Router
from aiogram.enums import ParseMode
from aiogram.filters import Command
from aiogram.types import Message, InlineQuery, InlineQueryResultArticle, InputTextMessageContent
import logging
import time

from shared_lib.config import DEFAULT_LANG
from shared_lib.errors import ErrorKind, describe_error
from shared_lib.i18n import translator
from shared_lib.schemas import ScheduleTarget
from shared_lib.services.schedule_builder import ScheduleService


class ScheduleManager:
    def __init__(self, schedule_service: ScheduleService, lang: str = DEFAULT_LANG):
        self.router = Router()
        self.schedule_service = schedule_service
        self.lang = lang
        self._register_handlers()

    def _register_handlers(self):
        self.router.message(Command("today"))(self.cmd_today)
        self.router.message(Command("tomorrow"))(self.cmd_tomorrow)
        self.router.inline_query()(self.handle_inline_query)

    async def cmd_today(self, message: Message):
        await self._reply_with_schedule(message, ScheduleTarget.TODAY)

    async def cmd_tomorrow(self, message: Message):
        await self._reply_with_schedule(message, ScheduleTarget.TOMORROW)

    def _error_text(self, error: Exception, context: str) -> str:
        kind, text = describe_error(error, self.lang)
        if kind == ErrorKind.INFRASTRUCTURE:
            logging.error(f"{context}. Error: {error}", exc_info=error)
        return text

    async def _reply_with_schedule(self, message: Message, target: ScheduleTarget):
        if not message.from_user:
            await message.answer(translator.gettext(self.lang, "user_not_detected"))
            return

        try:
            result = await self.schedule_service.build_schedule_message(message.from_user.id, target)
        except Exception as e:
            await message.answer(self._error_text(e, f"Unhandled /{target.value} command error"))
            return

        await message.answer(result.message_text, parse_mode=ParseMode.HTML)

    async def handle_inline_query(self, inline_query: InlineQuery):
        stamp = int(time.time() * 1000)
        try:
            result = await self.schedule_service.build_schedule_message(inline_query.from_user.id, ScheduleTarget.TODAY)
            article = InlineQueryResultArticle(
                id=f"schedule-{stamp}",
                title=result.title,
                description=result.description,
                input_message_content=InputTextMessageContent(
                    message_text=result.message_text,
                    parse_mode=ParseMode.HTML,
                ),
            )
        except Exception as e:
            text = self._error_text(e, "Unhandled inline query error")
            article = InlineQueryResultArticle(
                id=f"error-{stamp}",
                title=translator.gettext(self.lang, "inline_error_title"),
                description=text,
                input_message_content=InputTextMessageContent(message_text=text),
            )

        await inline_query.answer([article], cache_time=0, is_personal=True)
