from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import List

from ..core.enums import Category


@dataclass(frozen=True)
class BucketStats:
    """Read-model: thống kê một môn theo một loại buổi học."""

    category: Category
    attended: int
    held: int
    percentage: float
    below_threshold: bool


@dataclass(frozen=True)
class SubjectSummary:
    subject: str
    buckets: List[BucketStats]
    total_attended: int
    total_held: int
    overall_percentage: float
    overall_below_threshold: bool

    def bucket(self, category: Category):
        for b in self.buckets:
            if b.category == category:
                return b
        return None


@dataclass(frozen=True)
class SummaryView:
    threshold: int
    subjects: List[SubjectSummary]

    def to_dict(self) -> dict:
        data = asdict(self)
        for s in data["subjects"]:
            for b in s["buckets"]:
                b["category"] = b["category"].value
        return data
