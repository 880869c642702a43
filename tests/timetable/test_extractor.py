import pytest

from src.class_attendance.class_attendance.core.enums import Category
from src.class_attendance.class_attendance.core.exceptions import ExtractionError
from src.class_attendance.class_attendance.timetable.extractor import TimetableExtractor, extract
from src.class_attendance.class_attendance.timetable.model import LectureSlot

OS = LectureSlot("OS", Category.THEORY)
DA_LAB = LectureSlot("DA", Category.LAB)


def test_small_vocabulary_scenario():
    extractor = TimetableExtractor.from_tokens(["OS", "DA Lab"])

    result = extractor.extract("Mo OS Tu DA Lab We Timetable generated")

    assert result.schedule == {
        "Monday": frozenset({OS}),
        "Tuesday": frozenset({DA_LAB}),
    }
    assert result.subjects == {"OS", "DA"}


def test_default_vocabulary_full_week(timetable_text):
    result = extract(timetable_text)

    assert set(result.schedule) == {"Monday", "Tuesday", "Wednesday", "Thursday", "Friday"}
    assert result.schedule["Wednesday"] == frozenset(
        {LectureSlot("Discrete", Category.THEORY), OS}
    )
    assert result.schedule["Friday"] == frozenset({LectureSlot("Stats", Category.THEORY)})
    assert result.subjects == {"OS", "DA", "DSA", "Stats", "IoT", "Discrete"}


def test_substring_matching_cross_matches_lab_and_theory(timetable_text):
    # "DA Lab" also contains "DA": both slots are recorded.
    result = extract(timetable_text)

    assert DA_LAB in result.schedule["Tuesday"]
    assert LectureSlot("DA", Category.THEORY) in result.schedule["Tuesday"]


def test_absent_weekday_means_no_classes():
    result = TimetableExtractor.from_tokens(["OS"]).extract("Mo OS Fr OS")

    assert set(result.schedule) == {"Monday", "Friday"}


def test_repeated_weekday_last_write_wins():
    extractor = TimetableExtractor.from_tokens(["OS", "DA Lab"])

    result = extractor.extract("Mo OS Tu DA Lab Mo DA Lab")

    assert result.schedule["Monday"] == frozenset({DA_LAB})
    # Subjects seen in the overwritten segment still count.
    assert result.subjects == {"OS", "DA"}


def test_repeated_weekday_can_overwrite_with_nothing():
    result = TimetableExtractor.from_tokens(["OS"]).extract("Mo OS Tu OS Mo nothing here")

    assert "Monday" not in result.schedule
    assert result.schedule["Tuesday"] == frozenset({OS})


def test_terminal_marker_stops_scanning():
    extractor = TimetableExtractor.from_tokens(["OS", "DA Lab"])

    result = extractor.extract("Mo OS Timetable generated Tu DA Lab")

    assert result.schedule == {"Monday": frozenset({OS})}
    assert result.subjects == {"OS"}


def test_text_before_first_marker_is_ignored():
    result = TimetableExtractor.from_tokens(["OS", "DA Lab"]).extract("DA Lab header Mo OS")

    assert result.schedule == {"Monday": frozenset({OS})}


def test_no_recognized_subject_raises():
    with pytest.raises(ExtractionError):
        extract("Mo Tu We Th Fr Timetable generated")

    with pytest.raises(ExtractionError):
        extract("")


def test_subject_outside_any_weekday_segment_does_not_count():
    with pytest.raises(ExtractionError):
        TimetableExtractor.from_tokens(["OS"]).extract("OS Timetable generated Mo OS")


def test_iter_day_segments_in_text_order():
    extractor = TimetableExtractor.from_tokens(["OS"])

    assert list(extractor.iter_day_segments("Mo a Tu b Mo c")) == [
        ("Monday", " a "),
        ("Tuesday", " b "),
        ("Monday", " c"),
    ]
