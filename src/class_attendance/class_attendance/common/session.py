from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.exceptions import ProfileIncompleteError
from ..profiles.model import Profile


@dataclass(frozen=True)
class StudentSession:
    """Per-request context handed to services instead of module globals."""

    user_id: int
    profile: Optional[Profile] = None

    def require_profile(self) -> Profile:
        if self.profile is None:
            raise ProfileIncompleteError("Complete the timetable setup first")
        return self.profile

    def with_profile(self, profile: Optional[Profile]) -> "StudentSession":
        return replace(self, profile=profile)
