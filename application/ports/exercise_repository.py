"""
Exercise repository port (interface).

This Protocol defines the contract for exercise persistence and log
queries. Infrastructure implementations (e.g., Supabase) must satisfy
this interface.
"""

import datetime as dt
from typing import Dict, List, Protocol

from domain.models import LogQuery


class ExerciseRepository(Protocol):
    """
    Repository interface for logged exercises.

    Records are plain dictionaries with ``id``, ``user_id``,
    ``description``, ``duration``, ``date`` and ``created_at`` keys.
    """

    def create(
        self,
        user_id: str,
        *,
        description: str,
        duration: int,
        date: dt.date,
    ) -> Dict:
        """
        Insert a new exercise for an existing user.

        Args:
            user_id: ID of the owning user
            description: Non-empty description
            duration: Positive duration in minutes
            date: Calendar date of the exercise

        Returns:
            The created exercise dictionary

        Raises:
            StoreError: On persistence failure
        """
        ...

    def list_for_user(self, user_id: str, query: LogQuery) -> List[Dict]:
        """
        Get a user's exercises matching a log query.

        Implementations must return the same sequence as
        ``domain.services.filter_exercise_log``: inclusive date bounds,
        ascending by date then creation order, truncated to ``query.limit``.

        Args:
            user_id: ID of the owning user
            query: Date bounds and limit

        Returns:
            List of exercise dictionaries in log order
        """
        ...
