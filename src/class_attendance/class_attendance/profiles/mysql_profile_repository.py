from __future__ import annotations

import json
from datetime import date
from typing import Iterable, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, load_json_column, normalize_mysql_date
from ..timetable.model import WeeklySchedule, schedule_from_json, schedule_to_json
from .model import Profile
from .repository import ProfileRepository


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user(self, user_id: int) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, start_date, attendance_threshold, weekly_schedule, subjects, last_processed_date
                FROM profiles
                WHERE user_id=%s
                """,
                (int(user_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Profile(
                user_id=int(r["user_id"]),
                start_date=normalize_mysql_date(r.get("start_date")),
                attendance_threshold=int(r["attendance_threshold"]),
                weekly_schedule=schedule_from_json(load_json_column(r.get("weekly_schedule"))),
                subjects=frozenset(load_json_column(r.get("subjects")) or []),
                last_processed_date=normalize_mysql_date(r.get("last_processed_date")),
            )

    def create(self, profile: Profile) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO profiles(user_id, start_date, attendance_threshold, weekly_schedule, subjects, last_processed_date)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(profile.user_id),
                    profile.start_date,
                    int(profile.attendance_threshold),
                    json.dumps(schedule_to_json(profile.weekly_schedule)),
                    json.dumps(sorted(profile.subjects)),
                    profile.last_processed_date,
                ),
            )

    def replace_schedule(self, *, user_id: int, schedule: WeeklySchedule, subjects: Iterable[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE profiles
                SET weekly_schedule=%s, subjects=%s, last_processed_date=NULL
                WHERE user_id=%s
                """,
                (json.dumps(schedule_to_json(schedule)), json.dumps(sorted(subjects)), int(user_id)),
            )
            if cur.rowcount > 0:
                return True

            # Unchanged values report 0 affected rows.
            cur.execute("SELECT 1 AS found FROM profiles WHERE user_id=%s", (int(user_id),))
            return fetchone(cur) is not None

    def set_last_processed_date(self, *, user_id: int, value: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE profiles SET last_processed_date=%s WHERE user_id=%s",
                (value, int(user_id)),
            )
            return cur.rowcount > 0
