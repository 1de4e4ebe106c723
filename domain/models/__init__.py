"""
Domain models for the Exercise Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- User: A person whose exercises are tracked
- Exercise: A single logged activity with duration and calendar date
- LogQuery: Date bounds and limit applied to a user's log
- ExerciseLog: The filtered log returned for a user

Usage:
    >>> from datetime import date
    >>> from domain.models import LogQuery

    >>> query = LogQuery(date_from=date(2023, 1, 1), limit=10)
    >>> query.includes(date(2023, 1, 1))
    True
"""

from domain.models.exercise import Exercise
from domain.models.exercise_log import ExerciseLog, LogQuery
from domain.models.user import User

__all__ = [
    "Exercise",
    "ExerciseLog",
    "LogQuery",
    "User",
]
