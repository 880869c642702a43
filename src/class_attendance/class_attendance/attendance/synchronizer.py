from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List

from ..common.datetime_utils import is_weekend, iter_days, weekday_name
from ..core.enums import AttendanceStatus
from ..core.exceptions import ProfileIncompleteError
from ..profiles.model import Profile
from .model import AttendanceRecord

DEFAULT_STATUS = AttendanceStatus.MISSED


@dataclass(frozen=True)
class SyncResult:
    new_records: List[AttendanceRecord]
    checkpoint: date


def _first_unprocessed_day(profile: Profile) -> date:
    if profile.last_processed_date is not None:
        return profile.last_processed_date + timedelta(days=1)
    return profile.start_date


def synchronize(profile: Profile, today: date) -> SyncResult:
    """Records for every scheduled lecture from the last checkpoint through today.

    Pure: the caller persists the records with an insert-if-missing upsert and
    stores the returned checkpoint. Weekends and weekdays without lectures
    produce nothing. Re-deriving an already processed range yields the same
    records, so a failed checkpoint write is safe to retry.
    """

    if not isinstance(profile.start_date, date):
        raise ProfileIncompleteError("Profile has no start date")

    start = _first_unprocessed_day(profile)
    records: List[AttendanceRecord] = []

    for day in iter_days(start, today):
        if is_weekend(day):
            continue

        slots = profile.weekly_schedule.get(weekday_name(day)) or ()
        for slot in sorted(slots, key=lambda s: (s.subject, s.category.value)):
            records.append(
                AttendanceRecord(
                    user_id=profile.user_id,
                    log_date=day,
                    subject=slot.subject,
                    category=slot.category,
                    status=DEFAULT_STATUS,
                )
            )

    checkpoint = today
    if profile.last_processed_date is not None and profile.last_processed_date > today:
        checkpoint = profile.last_processed_date

    return SyncResult(new_records=records, checkpoint=checkpoint)
