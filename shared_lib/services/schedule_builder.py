# shared_lib/services/schedule_builder.py
import logging
from datetime import tzinfo
from typing import Optional

from shared_lib.config import DEFAULT_LANG
from shared_lib.errors import (
    GroupNotAssigned,
    GroupScheduleNotFound,
    NoScheduleForDay,
    ScheduleNotReady,
    UserNotRegistered,
)
from shared_lib.i18n import translator
from shared_lib.schemas import Schedule, ScheduleMessage, ScheduleTarget, UserResponse
from shared_lib.services.backend_api import BackendAPIClient, BackendAPIError
from shared_lib.services.schedule_service import compose_day_message, get_app_timezone, select_day

logger = logging.getLogger(__name__)


class ScheduleService:
    """Resolves a Telegram user to their group's schedule and renders the requested day."""
    def __init__(self, api_client: BackendAPIClient, tz: Optional[tzinfo] = None, lang: str = DEFAULT_LANG):
        self.api_client = api_client
        self.tz = tz
        self.lang = lang

    async def build_schedule_message(
        self,
        telegram_id: int,
        target: ScheduleTarget | str = ScheduleTarget.TODAY) -> ScheduleMessage:
        target = ScheduleTarget(target)
        tz = self.tz or get_app_timezone()

        user = await self._fetch_user(telegram_id)
        if not user.group:
            logger.info(f"User {telegram_id} has no group assigned.")
            raise GroupNotAssigned(translator.gettext(self.lang, "error_group_not_assigned"))

        schedule = await self._fetch_schedule(user.group)
        day = select_day(schedule, target, tz=tz)
        if day is None:
            logger.info(f"No day for '{target.value}' in the schedule of group {schedule.name}.")
            day_label = translator.gettext(self.lang, f"target_{target.value}")
            raise NoScheduleForDay(
                target,
                translator.gettext(self.lang, "error_no_schedule_for_day", day_label=day_label)
            )

        return compose_day_message(day, schedule.name, tz, self.lang)

    async def _fetch_user(self, telegram_id: int) -> UserResponse:
        try:
            return await self.api_client.get_user_by_telegram_id(telegram_id)
        except BackendAPIError as e:
            if e.status == 404:
                logger.info(f"Telegram user {telegram_id} is not registered.")
                raise UserNotRegistered(translator.gettext(self.lang, "error_user_not_registered")) from e
            raise

    async def _fetch_schedule(self, group_name: str) -> Schedule:
        try:
            return await self.api_client.get_schedule_by_group_name(group_name)
        except BackendAPIError as e:
            if e.status == 404:
                logger.info(f"Schedule for group {group_name} not found.")
                raise GroupScheduleNotFound(
                    group_name,
                    translator.gettext(self.lang, "error_group_schedule_not_found", group_name=group_name)
                ) from e
            if e.status == 503:
                logger.info(f"Schedule for group {group_name} is not ready yet.")
                raise ScheduleNotReady(translator.gettext(self.lang, "error_schedule_not_ready")) from e
            raise
