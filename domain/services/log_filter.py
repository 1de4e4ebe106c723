"""
Exercise log filtering.

Applies a LogQuery to a user's exercises:
1. Keep exercises whose date falls within the inclusive bounds
2. Order ascending by date, ties kept in creation order
3. Truncate to the first ``limit`` entries

Stores that can push the query down (e.g. Supabase) must produce the
same sequence as this function.
"""

import datetime as dt
from typing import Iterable, List

from domain.models import Exercise, LogQuery

_EPOCH = dt.datetime.min.replace(tzinfo=dt.timezone.utc)


def log_order_key(exercise: Exercise):
    """Sort key for log ordering: date first, then creation time."""
    created_at = exercise.created_at or _EPOCH
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=dt.timezone.utc)
    return (exercise.date, created_at)


def filter_exercise_log(
    exercises: Iterable[Exercise],
    query: LogQuery,
) -> List[Exercise]:
    """
    Filter, order and limit a user's exercises.

    Args:
        exercises: Exercises in insertion order
        query: Date bounds and limit

    Returns:
        Matching exercises in log order, at most ``query.limit`` long
    """
    matching = [ex for ex in exercises if query.includes(ex.date)]
    # sorted() is stable, so identical keys keep insertion order
    matching = sorted(matching, key=log_order_key)

    if query.limit is not None:
        matching = matching[: query.limit]

    return matching
