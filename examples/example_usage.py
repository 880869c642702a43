"""Example: run the timetable -> attendance -> summary pipeline without Flask or MySQL.

Usage: python examples/example_usage.py timetable.pdf 2024-01-01
"""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.class_attendance.class_attendance.attendance.synchronizer import synchronize
from src.class_attendance.class_attendance.common.datetime_utils import parse_iso_date, today_local
from src.class_attendance.class_attendance.profiles.model import Profile
from src.class_attendance.class_attendance.stats.aggregator import aggregate
from src.class_attendance.class_attendance.timetable.document import extract_document_text
from src.class_attendance.class_attendance.timetable.extractor import extract


def main():
    if len(sys.argv) < 3:
        print("Usage: example_usage.py <timetable.pdf> <start YYYY-MM-DD>")
        sys.exit(1)

    path = Path(sys.argv[1])
    result = extract(extract_document_text(path.read_bytes(), filename=path.name))
    profile = Profile(
        user_id=1,
        start_date=parse_iso_date(sys.argv[2]),
        attendance_threshold=75,
        weekly_schedule=result.schedule,
        subjects=result.subjects,
    )

    sync = synchronize(profile, today_local())
    print(f"{len(sync.new_records)} lectures since {profile.start_date}")
    for s in aggregate(sync.new_records, profile.attendance_threshold).subjects:
        print(s.subject, s.total_attended, "/", s.total_held, f"{s.overall_percentage}%")


if __name__ == "__main__":
    main()
