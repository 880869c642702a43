from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def insert_missing(self, records: Sequence[AttendanceRecord]) -> int:
        """Insert records whose (user_id, date, subject, category) is not stored yet.

        Existing rows are left untouched. Returns the number of inserted rows.
        """

        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def update_status(self, *, record_id: int, user_id: int, status: AttendanceStatus) -> bool:
        raise NotImplementedError

    def delete_all_for_user(self, user_id: int) -> int:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        """All records of a user, newest date first."""

        raise NotImplementedError

    def list_for_user_and_date(self, user_id: int, log_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
