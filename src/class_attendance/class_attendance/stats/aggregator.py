from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus, Category
from .model import BucketStats, SubjectSummary, SummaryView

# Theory before Lab in every summary row.
CATEGORY_ORDER = (Category.THEORY, Category.LAB)


@dataclass
class _Counter:
    attended: int = 0
    held: int = 0


def attendance_percentage(attended: int, held: int) -> float:
    """Percentage rounded to one decimal; nothing held counts as fully attended."""
    if held <= 0:
        return 100.0
    # Ties round up, on the exact binary value of the ratio.
    return float(Decimal(attended / held * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def is_below_threshold(percentage: float, threshold: int) -> bool:
    return percentage < threshold


def aggregate(records: Iterable[AttendanceRecord], threshold: int) -> SummaryView:
    counters: Dict[str, Dict[Category, _Counter]] = defaultdict(lambda: {c: _Counter() for c in CATEGORY_ORDER})

    for r in records:
        counter = counters[r.subject][r.category]
        if r.status == AttendanceStatus.CANCELLED:
            continue
        counter.held += 1
        if r.status == AttendanceStatus.ATTENDED:
            counter.attended += 1

    subjects = []
    for subject in sorted(counters):
        by_category = counters[subject]

        buckets = []
        for category in CATEGORY_ORDER:
            c = by_category[category]
            if c.held <= 0:
                continue
            pct = attendance_percentage(c.attended, c.held)
            buckets.append(
                BucketStats(
                    category=category,
                    attended=c.attended,
                    held=c.held,
                    percentage=pct,
                    below_threshold=is_below_threshold(pct, threshold),
                )
            )

        if not buckets:
            continue

        total_attended = sum(c.attended for c in by_category.values())
        total_held = sum(c.held for c in by_category.values())
        overall = attendance_percentage(total_attended, total_held)
        subjects.append(
            SubjectSummary(
                subject=subject,
                buckets=buckets,
                total_attended=total_attended,
                total_held=total_held,
                overall_percentage=overall,
                overall_below_threshold=is_below_threshold(overall, threshold),
            )
        )

    return SummaryView(threshold=int(threshold), subjects=subjects)
