from enum import Enum, IntEnum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LessonType(IntEnum):
    DEFAULT = 0
    ADDITIONAL = 1
    BREAK = 2
    CONSULTATION = 3
    INDEPENDENT_WORK = 4
    EXAM = 5
    EXAM_WITH_GRADE = 6
    EXAM_DEFAULT = 7
    COURSE_PROJECT = 8
    COURSE_PROJECT_DEFENSE = 9
    PRACTICE = 10
    DIFFERENTIATED_EXAM = 11


class ScheduleTarget(str, Enum):
    TODAY = "today"
    TOMORROW = "tomorrow"


# Пользователь бэкенда, привязанный к Telegram-аккаунту
class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Union[int, str]
    username: Optional[str] = None
    role: Optional[str] = None
    access_token: Optional[str] = Field(default=None, alias="accessToken")
    telegram_id: Optional[int] = Field(default=None, alias="telegramId")
    group: Optional[str] = None


class LessonBoundaries(BaseModel):
    # ISO-8601 строки; не парсим здесь, чтобы при ошибке показать как есть
    start: str
    end: str


class LessonSubGroup(BaseModel):
    teacher: Optional[str] = None
    cabinet: Optional[str] = None


class Lesson(BaseModel):
    name: Optional[str] = None
    group: Optional[str] = None
    range: Optional[List[int]] = None
    type: Union[LessonType, int, str] = Field(default=LessonType.DEFAULT, union_mode="left_to_right")
    time: LessonBoundaries
    subgroups: Optional[List[Optional[LessonSubGroup]]] = None

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value):
        """Known values become LessonType, anything else is kept as the raw token."""
        if isinstance(value, str) and value in LessonType.__members__:
            return LessonType[value]
        try:
            return LessonType(value)
        except ValueError:
            return value

    @property
    def period_range(self) -> Optional[Tuple[int, int]]:
        if not self.range:
            return None
        return self.range[0], self.range[-1]


class Day(BaseModel):
    name: str
    date: str
    street: Optional[str] = None
    lessons: List[Lesson] = []


class Schedule(BaseModel):
    name: str
    days: List[Day] = []


# Готовое сообщение: title/description для превью inline-режима, message_text в HTML
class ScheduleMessage(BaseModel):
    title: str
    description: str
    message_text: str
