"""
Exercise entity logged against a user.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from domain.dates import format_calendar_date


class Exercise(BaseModel):
    """
    A single logged exercise.

    Exercises reference exactly one user and are immutable once stored.
    The ``date`` is a calendar date with no time component; ``created_at``
    is the store timestamp and only serves to keep same-day entries in
    insertion order.

    Examples:
        >>> exercise = Exercise(
        ...     id="e-1",
        ...     user_id="u-1",
        ...     description="Morning run",
        ...     duration=30,
        ...     date="2020-02-02",
        ... )
        >>> exercise.display_date
        'Sun Feb 02 2020'
    """

    id: str = Field(..., min_length=1, description="Store-assigned identifier")
    user_id: str = Field(..., min_length=1, description="Owning user ID")
    description: str = Field(..., min_length=1, description="What was done")
    duration: int = Field(..., gt=0, description="Duration in minutes")
    date: dt.date = Field(..., description="Calendar date of the exercise")
    created_at: Optional[dt.datetime] = Field(
        default=None, description="Store insertion timestamp"
    )

    @property
    def display_date(self) -> str:
        """Date in the fixed human-readable log format."""
        return format_calendar_date(self.date)
