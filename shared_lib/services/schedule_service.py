# shared_lib/services/schedule_service.py
from datetime import date, datetime, timedelta, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo

from aiogram.utils.text_decorations import html_decoration

from shared_lib.config import APP_TIMEZONE, DEFAULT_LANG
from shared_lib.i18n import translator
from shared_lib.schemas import Day, Lesson, LessonType, Schedule, ScheduleMessage, ScheduleTarget

# --- Configuration for Lesson Labels ---
LESSON_TYPE_LABELS: dict[LessonType, str] = {
    LessonType.DEFAULT: 'Занятие',
    LessonType.ADDITIONAL: 'Дополнительное занятие',
    LessonType.BREAK: 'Перемена',
    LessonType.CONSULTATION: 'Консультация',
    LessonType.INDEPENDENT_WORK: 'Самостоятельная работа',
    LessonType.EXAM: 'Зачёт',
    LessonType.EXAM_WITH_GRADE: 'Зачёт с оценкой',
    LessonType.EXAM_DEFAULT: 'Экзамен',
    LessonType.COURSE_PROJECT: 'Курсовой проект',
    LessonType.COURSE_PROJECT_DEFENSE: 'Защита курсового проекта',
    LessonType.PRACTICE: 'Практика',
    LessonType.DIFFERENTIATED_EXAM: 'Дифференцированный зачёт',
}


def get_app_timezone() -> tzinfo:
    """Configured zone, or the host's local zone when APP_TIMEZONE is not set."""
    if APP_TIMEZONE:
        return ZoneInfo(APP_TIMEZONE)
    return datetime.now().astimezone().tzinfo


def get_lesson_type_label(lesson_type: Any) -> str:
    label = LESSON_TYPE_LABELS.get(lesson_type)
    if label is None:
        # Unknown type from the backend: show the raw token.
        return str(lesson_type)
    return label


def escape_html(value: str) -> str:
    """Escapes &, <, > and the double quote for Telegram HTML."""
    return html_decoration.quote(value).replace('"', '&quot;')


def _parse_iso(value: Optional[str], tz: tzinfo) -> Optional[datetime]:
    """Naive values are taken as `tz` local time. Returns None instead of raising."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=tz)
        return parsed.astimezone(tz)
    except (ValueError, OverflowError):
        return None


def parse_day_date(day: Day, tz: Optional[tzinfo] = None) -> Optional[date]:
    parsed = _parse_iso(day.date, tz or get_app_timezone())
    return parsed.date() if parsed else None


# --- Day Selection ---

def select_day(
    schedule: Schedule,
    target: ScheduleTarget | str,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None) -> Optional[Day]:
    """
    Returns the first day of the schedule whose date falls on today or tomorrow
    (calendar days in `tz`). Days with an empty or malformed date never match.
    """
    tz = tz or get_app_timezone()
    target = ScheduleTarget(target)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=tz)

    wanted = now.astimezone(tz).date()
    if target == ScheduleTarget.TOMORROW:
        wanted += timedelta(days=1)

    for day in schedule.days:
        if parse_day_date(day, tz) == wanted:
            return day
    return None


# --- Lesson Formatting ---

def format_time_range(lesson: Lesson, tz: Optional[tzinfo] = None) -> str:
    tz = tz or get_app_timezone()
    start = _parse_iso(lesson.time.start, tz)
    end = _parse_iso(lesson.time.end, tz)

    start_text = start.strftime('%H:%M') if start else lesson.time.start
    end_text = end.strftime('%H:%M') if end else lesson.time.end
    return f"{start_text}-{end_text}"


def get_lesson_title(lesson: Lesson) -> str:
    return lesson.name or get_lesson_type_label(lesson.type)


def _lesson_type_suffix(lesson: Lesson) -> str:
    # Only named lessons get the type note, and "Занятие" is never worth repeating.
    if not lesson.name or lesson.type == LessonType.DEFAULT:
        return ""
    return " " + html_decoration.italic(f"({escape_html(get_lesson_type_label(lesson.type))})")


def _format_period_index(first: int, last: int) -> str:
    if first == last:
        return str(first)
    return f"{first}–{last}"


def _break_minutes(lesson: Lesson, tz: tzinfo) -> Optional[int]:
    start = _parse_iso(lesson.time.start, tz)
    end = _parse_iso(lesson.time.end, tz)
    if start is None or end is None:
        return None
    return abs(int((end - start).total_seconds() / 60))


def _format_lesson_details(lesson: Lesson, lang: str) -> list[str]:
    parts = []

    subgroups = [subgroup for subgroup in lesson.subgroups or [] if subgroup is not None]
    for index, subgroup in enumerate(subgroups, start=1):
        label_parts = []
        if subgroup.teacher:
            label_parts.append(subgroup.teacher)
        if subgroup.cabinet:
            label_parts.append(translator.gettext(lang, "cabinet_prefix", cabinet=subgroup.cabinet))
        if not label_parts:
            continue
        marker = " " + translator.gettext(lang, "subgroup_marker", index=index) if len(subgroups) > 1 else ""
        parts.append(f"• {escape_html(', '.join(label_parts))}{marker}")

    if lesson.group:
        parts.append(f"• {escape_html(lesson.group)}")

    period = lesson.period_range
    if period and period[0] != period[1]:
        parts.append("• " + translator.gettext(lang, "period_span", first=period[0], last=period[1]))

    return parts


def format_lesson(lesson: Lesson, tz: Optional[tzinfo] = None, lang: str = DEFAULT_LANG) -> str:
    """Renders one lesson as an HTML block: headline plus detail bullets."""
    tz = tz or get_app_timezone()
    time_range = format_time_range(lesson, tz)
    title = escape_html(get_lesson_title(lesson))
    type_note = _lesson_type_suffix(lesson)
    period = lesson.period_range

    lines = []
    if period is not None:
        index = _format_period_index(*period)
        headline = html_decoration.bold(escape_html(f"{index}. {time_range}"))
        lines.append(f"{headline} — {title}{type_note}")
    elif lesson.type == LessonType.BREAK:
        line = escape_html(get_lesson_type_label(lesson.type))
        minutes = _break_minutes(lesson, tz)
        if minutes is not None:
            line += " — " + translator.gettext(lang, "break_minutes", minutes=minutes)
        lines.append(line)
    else:
        lines.append(f"{html_decoration.bold(escape_html(time_range))} {title}{type_note}")

    lines.extend(_format_lesson_details(lesson, lang))
    return "\n".join(lines)


# --- Day Message ---

def format_day_title(day: Day, tz: Optional[tzinfo] = None, lang: str = DEFAULT_LANG) -> str:
    day_date = parse_day_date(day, tz)
    if day_date is None:
        return day.name
    month_name = translator.gettext(lang, f"month_{day_date.month - 1}_gen")
    return f"{day.name}, {day_date.day} {month_name}"


def format_day_message(day: Day, group_name: str, tz: Optional[tzinfo] = None, lang: str = DEFAULT_LANG) -> str:
    header_parts = [
        html_decoration.bold(escape_html(group_name)),
        escape_html(format_day_title(day, tz, lang)),
    ]
    if day.street:
        header_parts.append(escape_html(day.street))
    header = "\n".join(header_parts)

    if not day.lessons:
        return f"{header}\n\n{translator.gettext(lang, 'schedule_no_lessons_day')}"

    lessons_text = "\n\n".join(
        block for block in (format_lesson(lesson, tz, lang) for lesson in day.lessons) if block
    )
    return f"{header}\n\n{lessons_text}"


def build_description(day: Day, tz: Optional[tzinfo] = None, lang: str = DEFAULT_LANG) -> str:
    """Plain-text preview of the first two lessons for the inline result."""
    if not day.lessons:
        return translator.gettext(lang, "schedule_no_lessons_short")

    return "; ".join(
        f"{format_time_range(lesson, tz)} {get_lesson_title(lesson)}".strip()
        for lesson in day.lessons[:2]
    )


def compose_day_message(day: Day, group_name: str, tz: Optional[tzinfo] = None, lang: str = DEFAULT_LANG) -> ScheduleMessage:
    tz = tz or get_app_timezone()
    return ScheduleMessage(
        title=f"{group_name} - {format_day_title(day, tz, lang)}",
        description=build_description(day, tz, lang),
        message_text=format_day_message(day, group_name, tz, lang),
    )
