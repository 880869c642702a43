from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from src.class_attendance.class_attendance.attendance.model import AttendanceRecord
from src.class_attendance.class_attendance.core.enums import AttendanceStatus, Category
from src.class_attendance.class_attendance.profiles.model import Profile
from src.class_attendance.class_attendance.timetable.model import LectureSlot
from src.class_attendance.class_attendance.users.model import User


class InMemoryAttendance:
    """Mimics the UNIQUE (user_id, log_date, subject_name, category) key of attendance_log."""

    def __init__(self):
        self._by_id: dict[int, AttendanceRecord] = {}
        self._keys: set[tuple] = set()
        self._id = 0
        self.insert_calls = 0

    def insert_missing(self, records):
        self.insert_calls += 1
        inserted = 0
        for r in records:
            if r.key in self._keys:
                continue
            self._id += 1
            self._by_id[self._id] = replace(r, record_id=self._id)
            self._keys.add(r.key)
            inserted += 1
        return inserted

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._by_id.get(record_id)

    def update_status(self, *, record_id: int, user_id: int, status: AttendanceStatus) -> bool:
        rec = self._by_id.get(record_id)
        if not rec or rec.user_id != user_id:
            return False
        self._by_id[record_id] = replace(rec, status=status)
        return True

    def delete_all_for_user(self, user_id: int) -> int:
        doomed = [k for k, r in self._by_id.items() if r.user_id == user_id]
        for k in doomed:
            self._keys.discard(self._by_id.pop(k).key)
        return len(doomed)

    def list_for_user(self, user_id: int):
        items = [r for r in self._by_id.values() if r.user_id == user_id]
        items.sort(key=lambda r: r.log_date, reverse=True)
        return items

    def list_for_user_and_date(self, user_id: int, log_date: date):
        return [r for r in self._by_id.values() if r.user_id == user_id and r.log_date == log_date]

    def all(self):
        return list(self._by_id.values())


class InMemoryProfiles:
    def __init__(self):
        self.profiles: dict[int, Profile] = {}
        self.fail_checkpoint = False

    def get_for_user(self, user_id: int) -> Optional[Profile]:
        return self.profiles.get(user_id)

    def create(self, profile: Profile) -> None:
        self.profiles[profile.user_id] = profile

    def replace_schedule(self, *, user_id, schedule, subjects) -> bool:
        current = self.profiles.get(user_id)
        if not current:
            return False
        self.profiles[user_id] = replace(
            current, weekly_schedule=schedule, subjects=frozenset(subjects), last_processed_date=None
        )
        return True

    def set_last_processed_date(self, *, user_id: int, value: date) -> bool:
        from src.class_attendance.class_attendance.core.exceptions import StorageError

        if self.fail_checkpoint:
            raise StorageError("connection lost")
        self.profiles[user_id] = self.profiles[user_id].with_checkpoint(value)
        return True


class InMemoryUsers:
    def __init__(self):
        self.users: dict[int, User] = {}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        for u in self.users.values():
            if u.username == username:
                return u
        return None

    def create_user(self, *, full_name: str, username: str, password_hash: str) -> int:
        user_id = len(self.users) + 1
        self.users[user_id] = User(user_id=user_id, full_name=full_name, username=username, password_hash=password_hash)
        return user_id


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def profiles_repo():
    return InMemoryProfiles()


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def os_monday_profile():
    # 2024-01-01 is a Monday
    return Profile(
        user_id=1,
        start_date=date(2024, 1, 1),
        attendance_threshold=75,
        weekly_schedule={"Monday": frozenset({LectureSlot("OS", Category.THEORY)})},
        subjects=frozenset({"OS"}),
    )


TIMETABLE_TEXT = (
    "Department of CSE Mo OS DA DSA Lab Tu Stats DA Lab IoT We Discrete m OS "
    "Th IoT Lab DSA Fr Stats Timetable generated: aSc Timetables"
)


@pytest.fixture
def timetable_text():
    return TIMETABLE_TEXT
