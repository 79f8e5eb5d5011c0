from datetime import timezone

import pytest

from shared_lib.schemas import Day, Lesson


@pytest.fixture
def utc():
    return timezone.utc


@pytest.fixture
def make_lesson():
    def _make(start="2024-06-10T09:00:00Z", end="2024-06-10T10:30:00Z", **fields):
        return Lesson.model_validate({"type": 0, "time": {"start": start, "end": end}, **fields})
    return _make


@pytest.fixture
def monday(make_lesson):
    return Day(
        name="Monday",
        date="2024-06-10",
        street="Main Hall",
        lessons=[make_lesson(range=[1, 1])],
    )
