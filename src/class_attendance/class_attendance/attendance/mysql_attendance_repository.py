from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus, Category
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "record_id, user_id, log_date, subject_name, category, status"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        user_id=int(r["user_id"]),
        log_date=normalize_mysql_date(r["log_date"]),
        subject=r["subject_name"],
        category=Category(r["category"]),
        status=AttendanceStatus(r["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert_missing(self, records: Sequence[AttendanceRecord]) -> int:
        if not records:
            return 0

        with db_cursor(self._conn_factory) as (_, cur):
            # No-op update on duplicates keeps the stored status.
            cur.executemany(
                """
                INSERT INTO attendance_log(user_id, log_date, subject_name, category, status)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE record_id=record_id
                """,
                [
                    (int(r.user_id), r.log_date, r.subject, r.category.value, r.status.value)
                    for r in records
                ],
            )
            return max(int(cur.rowcount), 0)

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_log WHERE record_id=%s", (int(record_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def update_status(self, *, record_id: int, user_id: int, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance_log SET status=%s WHERE record_id=%s AND user_id=%s",
                (status.value, int(record_id), int(user_id)),
            )
            if cur.rowcount > 0:
                return True

            # Same status again reports 0 affected rows; the row still exists.
            cur.execute(
                "SELECT 1 AS found FROM attendance_log WHERE record_id=%s AND user_id=%s",
                (int(record_id), int(user_id)),
            )
            return fetchone(cur) is not None

    def delete_all_for_user(self, user_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_log WHERE user_id=%s", (int(user_id),))
            return int(cur.rowcount)

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_log
                WHERE user_id=%s
                ORDER BY log_date DESC, subject_name ASC
                """,
                (int(user_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_user_and_date(self, user_id: int, log_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_log
                WHERE user_id=%s AND log_date=%s
                ORDER BY subject_name ASC, category DESC
                """,
                (int(user_id), log_date),
            )
            return [_to_record(r) for r in fetchall(cur)]
