from shared_lib.schemas import LessonType
from shared_lib.services.schedule_service import LESSON_TYPE_LABELS, get_lesson_type_label


def test_every_lesson_type_has_a_label():
    assert set(LESSON_TYPE_LABELS) == set(LessonType)
    for lesson_type in LessonType:
        assert get_lesson_type_label(lesson_type)


def test_known_labels():
    assert get_lesson_type_label(LessonType.DEFAULT) == "Занятие"
    assert get_lesson_type_label(LessonType.BREAK) == "Перемена"
    assert get_lesson_type_label(LessonType.EXAM_DEFAULT) == "Экзамен"
    assert get_lesson_type_label(LessonType.DIFFERENTIATED_EXAM) == "Дифференцированный зачёт"


def test_plain_int_uses_the_same_table():
    assert get_lesson_type_label(2) == "Перемена"


def test_unknown_type_falls_back_to_raw_token():
    assert get_lesson_type_label(42) == "42"
    assert get_lesson_type_label("SEMINAR") == "SEMINAR"
