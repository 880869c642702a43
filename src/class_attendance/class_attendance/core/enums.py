from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Loại buổi học: lý thuyết hoặc thực hành."""

    THEORY = "Theory"
    LAB = "Lab"


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh lưu trong CSDL."""

    MISSED = "Missed"
    ATTENDED = "Attended"
    CANCELLED = "Cancelled"
