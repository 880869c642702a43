from datetime import date, timedelta

from src.class_attendance.class_attendance.attendance.model import AttendanceRecord
from src.class_attendance.class_attendance.core.enums import AttendanceStatus, Category
from src.class_attendance.class_attendance.stats.aggregator import aggregate, attendance_percentage

A = AttendanceStatus.ATTENDED
M = AttendanceStatus.MISSED
C = AttendanceStatus.CANCELLED


def _records(subject, items):
    start = date(2024, 1, 1)
    return [
        AttendanceRecord(user_id=1, log_date=start + timedelta(days=i), subject=subject, category=cat, status=st)
        for i, (cat, st) in enumerate(items)
    ]


def test_da_scenario_theory_flagged_lab_hidden():
    records = _records(
        "DA",
        [(Category.THEORY, A), (Category.THEORY, A), (Category.THEORY, M), (Category.LAB, C)],
    )

    view = aggregate(records, 75)

    assert len(view.subjects) == 1
    da = view.subjects[0]
    assert [b.category for b in da.buckets] == [Category.THEORY]
    theory = da.bucket(Category.THEORY)
    assert (theory.attended, theory.held, theory.percentage) == (2, 3, 66.7)
    assert theory.below_threshold is True
    assert da.bucket(Category.LAB) is None
    assert (da.total_attended, da.total_held, da.overall_percentage) == (2, 3, 66.7)
    assert da.overall_below_threshold is True


def test_zero_held_is_vacuously_compliant():
    assert attendance_percentage(0, 0) == 100.0


def test_subject_with_only_cancelled_records_is_omitted():
    view = aggregate(_records("OS", [(Category.THEORY, C), (Category.LAB, C)]), 75)

    assert view.subjects == []


def test_cancelled_records_do_not_change_ratio():
    base = _records("OS", [(Category.THEORY, A), (Category.THEORY, M), (Category.THEORY, A)])
    with_cancelled = base + _records("OS", [(Category.THEORY, C), (Category.THEORY, C)])

    before = aggregate(base, 75).subjects[0].bucket(Category.THEORY)
    after = aggregate(with_cancelled, 75).subjects[0].bucket(Category.THEORY)

    assert (before.attended, before.held, before.percentage) == (after.attended, after.held, after.percentage)


def test_subjects_sorted_theory_before_lab_and_overall():
    records = (
        _records("OS", [(Category.THEORY, A)])
        + _records("DSA", [(Category.LAB, A), (Category.LAB, M), (Category.THEORY, A), (Category.THEORY, A)])
        + _records("DA", [(Category.THEORY, M)])
    )

    view = aggregate(records, 75)

    assert [s.subject for s in view.subjects] == ["DA", "DSA", "OS"]
    dsa = view.subjects[1]
    assert [b.category for b in dsa.buckets] == [Category.THEORY, Category.LAB]
    assert dsa.bucket(Category.LAB).percentage == 50.0
    assert dsa.bucket(Category.LAB).below_threshold is True
    assert dsa.bucket(Category.THEORY).percentage == 100.0
    assert dsa.overall_percentage == 75.0
    # Equal to the threshold is not below it.
    assert dsa.overall_below_threshold is False
    assert view.subjects[0].overall_percentage == 0.0


def test_to_dict_uses_plain_values():
    view = aggregate(_records("OS", [(Category.LAB, A)]), 80)

    data = view.to_dict()

    assert data["threshold"] == 80
    assert data["subjects"][0]["buckets"][0]["category"] == "Lab"
    assert data["subjects"][0]["overall_percentage"] == 100.0


def test_empty_log():
    assert aggregate([], 75).subjects == []


def test_percentage_rounds_half_way_values_up():
    assert [attendance_percentage(a, 16) for a in (1, 5, 13)] == [6.3, 31.3, 81.3]


def test_bucket_percentage_rounds_half_way_values_up():
    records = _records("OS", [(Category.THEORY, A)] + [(Category.THEORY, M)] * 15)

    theory = aggregate(records, 75).subjects[0].bucket(Category.THEORY)

    assert (theory.attended, theory.held, theory.percentage) == (1, 16, 6.3)
