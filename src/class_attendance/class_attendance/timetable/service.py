from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_iso_date
from ..common.session import StudentSession
from ..common.validators import require_percentage
from ..core.exceptions import ValidationError
from ..profiles.model import Profile
from ..profiles.repository import ProfileRepository
from .document import extract_document_text
from .extractor import TimetableExtractor
from .model import ExtractionResult

logger = logging.getLogger(__name__)


class TimetableService:
    """Use cases: onboarding with a timetable upload, and replacing the timetable."""

    def __init__(
        self,
        profiles: ProfileRepository,
        attendance: AttendanceRepository,
        *,
        extractor: Optional[TimetableExtractor] = None,
    ):
        self._profiles = profiles
        self._attendance = attendance
        self._extractor = extractor or TimetableExtractor()

    def parse_upload(self, data: bytes, *, filename: Optional[str] = None) -> ExtractionResult:
        text = extract_document_text(data, filename=filename)
        result = self._extractor.extract(text)
        logger.info(
            "timetable parsed: days=%d subjects=%s",
            len(result.schedule),
            ",".join(sorted(result.subjects)),
        )
        return result

    def setup_profile(
        self,
        ctx: StudentSession,
        *,
        start_date: Union[date, str, None],
        min_attendance,
        data: Optional[bytes],
        filename: Optional[str] = None,
    ) -> Profile:
        if not start_date or min_attendance in (None, "") or not data:
            raise ValidationError("All fields are required.")

        if ctx.profile is not None or self._profiles.get_for_user(ctx.user_id):
            raise ValidationError("Profile already exists")

        if isinstance(start_date, str):
            try:
                start_date = parse_iso_date(start_date)
            except ValueError:
                raise ValidationError("Start date must be YYYY-MM-DD")

        threshold = require_percentage(min_attendance, "Minimum attendance")
        result = self.parse_upload(data, filename=filename)

        profile = Profile(
            user_id=ctx.user_id,
            start_date=start_date,
            attendance_threshold=threshold,
            weekly_schedule=result.schedule,
            subjects=result.subjects,
        )
        self._profiles.create(profile)
        return profile

    def replace_schedule(self, ctx: StudentSession, *, data: Optional[bytes], filename: Optional[str] = None) -> Profile:
        """Destructive reset: wipe the attendance log and restart from start_date.

        The upload is parsed before anything is deleted, so an unrecognized
        document leaves the current schedule and log as they are.
        """

        profile = ctx.require_profile()
        if not data:
            raise ValidationError("Timetable file is required")

        result = self.parse_upload(data, filename=filename)

        deleted = self._attendance.delete_all_for_user(ctx.user_id)
        if not self._profiles.replace_schedule(user_id=ctx.user_id, schedule=result.schedule, subjects=result.subjects):
            raise ValidationError("Failed to update timetable")
        logger.info("schedule reset user=%s deleted_records=%d", ctx.user_id, deleted)

        return Profile(
            user_id=profile.user_id,
            start_date=profile.start_date,
            attendance_threshold=profile.attendance_threshold,
            weekly_schedule=result.schedule,
            subjects=result.subjects,
            last_processed_date=None,
        )
