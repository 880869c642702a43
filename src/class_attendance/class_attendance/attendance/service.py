from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union

from ..common.datetime_utils import today_local
from ..common.session import StudentSession
from ..core.enums import AttendanceStatus, Category
from ..core.exceptions import StorageError, ValidationError
from ..profiles.repository import ProfileRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .synchronizer import synchronize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncOutcome:
    session: StudentSession
    generated: int
    inserted: int
    checkpoint: date
    checkpoint_saved: bool


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, profiles: ProfileRepository):
        self._attendance = attendance
        self._profiles = profiles

    def load_session(self, user_id: int) -> StudentSession:
        return StudentSession(user_id=int(user_id), profile=self._profiles.get_for_user(int(user_id)))

    def synchronize(self, ctx: StudentSession, *, today: Optional[date] = None) -> SyncOutcome:
        """Backfill Missed records up to today and advance the checkpoint.

        Record insertion is idempotent, so a checkpoint write that fails after
        the insert is logged and left for the next run to redo.
        """

        today = today or today_local()
        profile = ctx.require_profile()

        result = synchronize(profile, today)
        inserted = self._attendance.insert_missing(result.new_records)
        logger.info(
            "sync user=%s from=%s to=%s generated=%d inserted=%d",
            ctx.user_id,
            profile.last_processed_date or profile.start_date,
            today,
            len(result.new_records),
            inserted,
        )

        checkpoint_saved = True
        if result.checkpoint != profile.last_processed_date:
            try:
                self._profiles.set_last_processed_date(user_id=ctx.user_id, value=result.checkpoint)
            except StorageError:
                logger.exception("Error updating last_processed_date for user=%s", ctx.user_id)
                checkpoint_saved = False

        if checkpoint_saved:
            ctx = ctx.with_profile(profile.with_checkpoint(result.checkpoint))

        return SyncOutcome(
            session=ctx,
            generated=len(result.new_records),
            inserted=inserted,
            checkpoint=result.checkpoint,
            checkpoint_saved=checkpoint_saved,
        )

    def mark_status(self, ctx: StudentSession, *, record_id: int, status: Union[AttendanceStatus, str]) -> None:
        try:
            new_status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown attendance status: {status!r}")

        if not self._attendance.update_status(record_id=int(record_id), user_id=ctx.user_id, status=new_status):
            raise ValidationError("Attendance record not found")

    def records_for_date(self, ctx: StudentSession, log_date: date) -> List[AttendanceRecord]:
        rows = self._attendance.list_for_user_and_date(ctx.user_id, log_date)
        return sorted(rows, key=lambda r: (r.subject, r.category != Category.THEORY))

    def schedule_for_date_ui(self, ctx: StudentSession, log_date: date) -> dict:
        rows = self.records_for_date(ctx, log_date)
        return {
            "date": log_date.strftime("%Y-%m-%d"),
            "lectures": [self._to_ui(r) for r in rows],
        }

    def _to_ui(self, r: AttendanceRecord) -> dict:
        return {
            "id": r.record_id,
            "subject": r.subject,
            "category": r.category.value,
            "status": r.status.value,
        }
