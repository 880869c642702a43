from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus, Category


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi điểm danh của một buổi học.

    record_id là None cho bản ghi vừa sinh, chưa lưu CSDL.
    """

    user_id: int
    log_date: date
    subject: str
    category: Category
    status: AttendanceStatus
    record_id: Optional[int] = None

    @property
    def key(self) -> tuple:
        return (self.user_id, self.log_date, self.subject, self.category)
