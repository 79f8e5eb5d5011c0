from datetime import datetime, timedelta, timezone

from shared_lib.schemas import Day, Schedule, ScheduleTarget
from shared_lib.services.schedule_service import parse_day_date, select_day

NOW = datetime(2024, 6, 10, 12, 0, tzinfo=timezone.utc)
MSK = timezone(timedelta(hours=3))


def _schedule(*dates):
    return Schedule(name="CS-101", days=[Day(name=f"day-{i}", date=d) for i, d in enumerate(dates)])


def test_selects_today_and_tomorrow(utc):
    schedule = _schedule("2024-06-09", "2024-06-10", "2024-06-11")
    assert select_day(schedule, ScheduleTarget.TODAY, now=NOW, tz=utc).date == "2024-06-10"
    assert select_day(schedule, ScheduleTarget.TOMORROW, now=NOW, tz=utc).date == "2024-06-11"


def test_accepts_plain_string_target(utc):
    schedule = _schedule("2024-06-11")
    assert select_day(schedule, "tomorrow", now=NOW, tz=utc).date == "2024-06-11"


def test_no_matching_day_returns_none(utc):
    schedule = _schedule("2024-06-01", "2024-06-12")
    assert select_day(schedule, ScheduleTarget.TODAY, now=NOW, tz=utc) is None
    assert select_day(schedule, ScheduleTarget.TOMORROW, now=NOW, tz=utc) is None


def test_empty_schedule(utc):
    assert select_day(Schedule(name="CS-101"), ScheduleTarget.TODAY, now=NOW, tz=utc) is None


def test_malformed_dates_never_match(utc):
    schedule = _schedule("", "not-a-date", "2024-13-45", "2024-06-10")
    day = select_day(schedule, ScheduleTarget.TODAY, now=NOW, tz=utc)
    assert day.name == "day-3"


def test_first_match_wins(utc):
    schedule = _schedule("2024-06-10", "2024-06-10")
    assert select_day(schedule, ScheduleTarget.TODAY, now=NOW, tz=utc).name == "day-0"


def test_calendar_day_not_24_hour_window(utc):
    late_evening = datetime(2024, 6, 10, 23, 59, tzinfo=timezone.utc)
    schedule = _schedule("2024-06-11")
    assert select_day(schedule, ScheduleTarget.TOMORROW, now=late_evening, tz=utc) is not None
    assert select_day(schedule, ScheduleTarget.TODAY, now=late_evening, tz=utc) is None


def test_today_is_taken_in_application_timezone():
    # 22:30 UTC is already the next day in Moscow
    now = datetime(2024, 6, 10, 22, 30, tzinfo=timezone.utc)
    schedule = _schedule("2024-06-10", "2024-06-11")
    assert select_day(schedule, ScheduleTarget.TODAY, now=now, tz=MSK).date == "2024-06-11"


def test_naive_now_is_taken_as_local(utc):
    schedule = _schedule("2024-06-10")
    assert select_day(schedule, ScheduleTarget.TODAY, now=datetime(2024, 6, 10, 8, 0), tz=utc) is not None


def test_timestamp_dates_are_converted(utc):
    day = Day(name="Tuesday", date="2024-06-10T22:00:00Z")
    assert parse_day_date(day, MSK).isoformat() == "2024-06-11"
    assert parse_day_date(day, utc).isoformat() == "2024-06-10"
    assert parse_day_date(Day(name="x", date="garbage"), utc) is None


def test_out_of_range_date_never_matches(utc):
    schedule = _schedule("0001-01-01T00:00:00+05:00", "2024-06-10")
    assert select_day(schedule, ScheduleTarget.TODAY, now=NOW, tz=utc).name == "day-1"
    assert parse_day_date(Day(name="x", date="0001-01-01T00:00:00+05:00"), utc) is None
