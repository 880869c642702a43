from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol

from ..timetable.model import WeeklySchedule
from .model import Profile


class ProfileRepository(Protocol):
    """Giao diện repository cho Profile.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def get_for_user(self, user_id: int) -> Optional[Profile]:
        raise NotImplementedError

    def create(self, profile: Profile) -> None:
        raise NotImplementedError

    def replace_schedule(self, *, user_id: int, schedule: WeeklySchedule, subjects: Iterable[str]) -> bool:
        """Store a new schedule and clear last_processed_date."""

        raise NotImplementedError

    def set_last_processed_date(self, *, user_id: int, value: date) -> bool:
        raise NotImplementedError
