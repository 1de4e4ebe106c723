"""
Exercise log query and result value objects.
"""

import datetime as dt
from dataclasses import dataclass, field
from typing import List, Optional

from domain.models.exercise import Exercise
from domain.models.user import User


@dataclass(frozen=True)
class LogQuery:
    """
    Bounds applied to a user's exercise log.

    Both date bounds are inclusive whole calendar days and independent of
    each other. ``limit`` truncates the filtered, ordered log.
    """

    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 1:
            raise ValueError(f"limit must be positive, got {self.limit}")

    def includes(self, exercise_date: dt.date) -> bool:
        """Check whether a date falls inside the query bounds."""
        if self.date_from is not None and exercise_date < self.date_from:
            return False
        if self.date_to is not None and exercise_date > self.date_to:
            return False
        return True


@dataclass
class ExerciseLog:
    """A user's filtered and limited exercise log."""

    user: User
    entries: List[Exercise] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of entries after filtering and limiting."""
        return len(self.entries)
