from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_ATTENDANCE_THRESHOLD
from .database.connection import DatabaseConnection
from .profiles.mysql_profile_repository import MySQLProfileRepository
from .profiles.repository import ProfileRepository
from .stats.service import SummaryService
from .timetable.extractor import TimetableExtractor
from .timetable.service import TimetableService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    profiles_repo: ProfileRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    user_service: UserService
    timetable_service: TimetableService
    attendance_service: AttendanceService
    summary_service: SummaryService


def build_services(
    *,
    users_repo: UserRepository,
    profiles_repo: ProfileRepository,
    attendance_repo: AttendanceRepository,
    extractor: TimetableExtractor | None = None,
    default_threshold: int = DEFAULT_ATTENDANCE_THRESHOLD,
) -> Container:
    return Container(
        users_repo=users_repo,
        profiles_repo=profiles_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        timetable_service=TimetableService(profiles_repo, attendance_repo, extractor=extractor),
        attendance_service=AttendanceService(attendance_repo, profiles_repo),
        summary_service=SummaryService(attendance_repo, default_threshold=default_threshold),
    )


def build_container(*, db_config: dict, default_threshold: int = DEFAULT_ATTENDANCE_THRESHOLD) -> Container:
    conn = DatabaseConnection.from_dict(db_config)
    return build_services(
        users_repo=MySQLUserRepository(conn),
        profiles_repo=MySQLProfileRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        default_threshold=default_threshold,
    )
