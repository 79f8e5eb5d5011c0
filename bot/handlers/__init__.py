from aiogram import Router

from .schedule import ScheduleManager


def setup_handlers(dp: Router, schedule_service):
    """Function to setup all handlers"""
    schedule_manager = ScheduleManager(schedule_service)
    dp.include_router(schedule_manager.router)
