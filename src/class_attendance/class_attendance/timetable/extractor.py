from __future__ import annotations

import re
from typing import Dict, Iterator, Optional, Sequence, Set, Tuple

from ..core.constants import TERMINAL_MARKER, WEEKDAY_MARKERS
from ..core.exceptions import ExtractionError
from .model import ExtractionResult, LectureSlot, SubjectToken, WeeklySchedule
from .vocabulary import DEFAULT_VOCABULARY, build_vocabulary


class TimetableExtractor:
    """Turn the flat text of a generated timetable into a weekly schedule.

    The text is scanned left to right for weekday abbreviations. Every weekday
    marker owns the text up to the next marker, and that segment is searched
    for each vocabulary token by plain substring containment. A weekday that
    appears twice keeps only its last segment's result. The subject set is the
    union of every weekday segment's matches, overwritten segments included;
    text before the first weekday marker is never searched.
    """

    def __init__(
        self,
        vocabulary: Sequence[SubjectToken] = DEFAULT_VOCABULARY,
        *,
        day_markers: Optional[Dict[str, str]] = None,
        terminal_marker: str = TERMINAL_MARKER,
    ):
        self._vocabulary = tuple(vocabulary)
        self._day_markers = dict(day_markers or WEEKDAY_MARKERS)
        self._terminal_marker = terminal_marker

        markers = sorted([*self._day_markers, terminal_marker], key=len, reverse=True)
        self._marker_re = re.compile("|".join(re.escape(m) for m in markers))

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> "TimetableExtractor":
        return cls(build_vocabulary(tokens))

    def iter_day_segments(self, raw_text: str) -> Iterator[Tuple[str, str]]:
        """Yield (weekday, segment) pairs in text order."""
        found = list(self._marker_re.finditer(raw_text or ""))
        for i, match in enumerate(found):
            marker = match.group(0)
            if marker == self._terminal_marker:
                return

            end = found[i + 1].start() if i + 1 < len(found) else len(raw_text)
            yield self._day_markers[marker], raw_text[match.end():end]

    def match_segment(self, segment: str) -> Set[LectureSlot]:
        return {
            LectureSlot(subject=entry.canonical_name, category=entry.category)
            for entry in self._vocabulary
            if entry.token in segment
        }

    def extract(self, raw_text: str) -> ExtractionResult:
        schedule: WeeklySchedule = {}
        subjects: Set[str] = set()

        for day, segment in self.iter_day_segments(raw_text):
            slots = self.match_segment(segment)
            schedule[day] = frozenset(slots)
            subjects.update(slot.subject for slot in slots)

        if not subjects:
            raise ExtractionError("no recognized subjects")

        # A weekday without lectures is the same as an absent weekday.
        schedule = {day: slots for day, slots in schedule.items() if slots}
        return ExtractionResult(schedule=schedule, subjects=frozenset(subjects))


def extract(raw_text: str) -> ExtractionResult:
    """Extract with the default subject vocabulary."""
    return TimetableExtractor().extract(raw_text)
