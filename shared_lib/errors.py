# shared_lib/errors.py
from enum import Enum

from shared_lib.config import DEFAULT_LANG
from shared_lib.i18n import translator
from shared_lib.schemas import ScheduleTarget


class ErrorKind(str, Enum):
    DOMAIN = "domain"
    INFRASTRUCTURE = "infrastructure"


class BotError(Exception):
    """
    A condition the user can act on (register, wait, ask an admin).
    `message` is for logs, `display_message` is shown to the user as is.
    """
    kind = ErrorKind.DOMAIN

    def __init__(self, message: str, display_message: str):
        super().__init__(message)
        self.message = message
        self.display_message = display_message


class UserNotRegistered(BotError):
    def __init__(self, display_message: str):
        super().__init__("Telegram user not found in API.", display_message)


class GroupNotAssigned(BotError):
    def __init__(self, display_message: str):
        super().__init__("Group is not assigned to the user.", display_message)


class GroupScheduleNotFound(BotError):
    def __init__(self, group_name: str, display_message: str):
        super().__init__("Group schedule not found.", display_message)
        self.group_name = group_name


class ScheduleNotReady(BotError):
    def __init__(self, display_message: str):
        super().__init__("Schedule not ready yet.", display_message)


class NoScheduleForDay(BotError):
    def __init__(self, target: ScheduleTarget, display_message: str):
        super().__init__(f"No schedule for {target.value}.", display_message)
        self.target = target


def describe_error(error: BaseException, lang: str = DEFAULT_LANG) -> tuple[ErrorKind, str]:
    """Returns the error kind and the text that may be shown to the user."""
    if isinstance(error, BotError):
        return error.kind, error.display_message
    return ErrorKind.INFRASTRUCTURE, translator.gettext(lang, "error_unexpected")
