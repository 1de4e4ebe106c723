"""
GetExerciseLog Use Case.

Retrieves a user's exercise log, optionally bounded by date and length.
"""

import logging
from typing import Any

from application.ports import ExerciseRepository, UserRepository
from application.use_cases.lookup import get_user_or_raise
from application.validation import parse_optional_date, parse_optional_limit
from domain.models import Exercise, ExerciseLog, LogQuery

logger = logging.getLogger(__name__)


class GetExerciseLogUseCase:
    """
    Use case for reading a user's exercise log.

    ``date_from`` and ``date_to`` are inclusive whole days; either may be
    omitted. The log is ordered ascending by date (creation order within a
    day) and ``limit`` keeps only the first entries of the filtered log.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        exercise_repo: ExerciseRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            user_repo: Repository for user lookups
            exercise_repo: Repository for exercise queries
        """
        self._user_repo = user_repo
        self._exercise_repo = exercise_repo

    def execute(
        self,
        user_id: str,
        date_from: Any = None,
        date_to: Any = None,
        limit: Any = None,
    ) -> ExerciseLog:
        """
        Get the filtered, limited exercise log for a user.

        Args:
            user_id: ID of the user
            date_from: Optional raw ``YYYY-MM-DD`` lower bound
            date_to: Optional raw ``YYYY-MM-DD`` upper bound
            limit: Optional raw positive integer

        Returns:
            ExerciseLog with the user and matching entries

        Raises:
            ValidationError: If a bound or the limit is malformed
            NotFoundError: If the user does not exist
        """
        user = get_user_or_raise(self._user_repo, user_id)

        query = LogQuery(
            date_from=parse_optional_date(date_from, "from"),
            date_to=parse_optional_date(date_to, "to"),
            limit=parse_optional_limit(limit),
        )

        records = self._exercise_repo.list_for_user(user.id, query)
        entries = [Exercise.model_validate(r) for r in records]

        logger.info(
            f"Exercise log for user {user.id}: {len(entries)} entries "
            f"(from={query.date_from}, to={query.date_to}, limit={query.limit})"
        )
        return ExerciseLog(user=user, entries=entries)
