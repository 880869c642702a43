from __future__ import annotations

from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.session import StudentSession
from ..core.constants import DEFAULT_ATTENDANCE_THRESHOLD
from .aggregator import aggregate
from .model import SummaryView


class SummaryService:
    def __init__(self, attendance: AttendanceRepository, *, default_threshold: int = DEFAULT_ATTENDANCE_THRESHOLD):
        self._attendance = attendance
        self._default_threshold = int(default_threshold)

    def build_summary(self, ctx: StudentSession, *, threshold: Optional[int] = None) -> SummaryView:
        if threshold is None:
            threshold = ctx.profile.attendance_threshold if ctx.profile else self._default_threshold

        records = self._attendance.list_for_user(ctx.user_id)
        return aggregate(records, threshold)
