from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import FrozenSet, Optional

from ..timetable.model import WeeklySchedule


@dataclass(frozen=True)
class Profile:
    """Thực thể miền (domain): hồ sơ điểm danh của sinh viên.

    Lưu ý: weekly_schedule là nguồn duy nhất cho ánh xạ thứ -> buổi học.
    """

    user_id: int
    start_date: Optional[date]
    attendance_threshold: int
    weekly_schedule: WeeklySchedule = field(default_factory=dict)
    subjects: FrozenSet[str] = frozenset()
    last_processed_date: Optional[date] = None

    def with_checkpoint(self, checkpoint: Optional[date]) -> "Profile":
        return replace(self, last_processed_date=checkpoint)
