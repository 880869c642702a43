from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Mapping

from ..core.constants import SCHOOL_DAYS
from ..core.enums import Category
from ..core.exceptions import ValidationError


@dataclass(frozen=True, order=True)
class LectureSlot:
    """Thực thể miền (domain): một buổi học trong thời khoá biểu tuần."""

    subject: str
    category: Category


@dataclass(frozen=True)
class SubjectToken:
    """One entry of the recognized-subject vocabulary."""

    token: str
    canonical_name: str
    category: Category


# Weekday name -> lectures held that day. Absent weekday means no classes.
WeeklySchedule = Dict[str, FrozenSet[LectureSlot]]


@dataclass(frozen=True)
class ExtractionResult:
    schedule: WeeklySchedule
    subjects: FrozenSet[str]


def schedule_to_json(schedule: Mapping[str, Iterable[LectureSlot]]) -> dict:
    """Serialize a weekly schedule for the profile JSON column."""
    out: dict = {}
    for day in SCHOOL_DAYS:
        if day not in schedule:
            continue
        out[day] = [
            {"subject": slot.subject, "category": slot.category.value}
            for slot in sorted(schedule[day], key=lambda s: (s.subject, s.category.value))
        ]
    return out


def _slot_from_json(value: Any) -> LectureSlot:
    if isinstance(value, dict):
        try:
            return LectureSlot(subject=str(value["subject"]).strip(), category=Category(value["category"]))
        except (KeyError, ValueError):
            raise ValidationError(f"Invalid lecture entry: {value!r}")

    # Legacy form: "OS Theory" / "DA Lab"
    if isinstance(value, str):
        for category in Category:
            suffix = f" {category.value}"
            if value.endswith(suffix):
                return LectureSlot(subject=value[: -len(suffix)].strip(), category=category)

    raise ValidationError(f"Invalid lecture entry: {value!r}")


def schedule_from_json(data: Mapping[str, Any] | None) -> WeeklySchedule:
    if not data:
        return {}

    schedule: WeeklySchedule = {}
    for day, entries in data.items():
        if day not in SCHOOL_DAYS:
            raise ValidationError(f"Invalid weekday in schedule: {day!r}")
        schedule[day] = frozenset(_slot_from_json(e) for e in (entries or []))
    return schedule
