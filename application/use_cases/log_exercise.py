"""
LogExercise Use Case.

Validates and persists a single exercise for an existing user.
"""

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from application.exceptions import ValidationError
from application.ports import ExerciseRepository, UserRepository
from application.use_cases.lookup import get_user_or_raise
from application.validation import parse_optional_date, parse_positive_int, require_text
from domain.dates import utc_today
from domain.models import Exercise, User

logger = logging.getLogger(__name__)


@dataclass
class LogExerciseResult:
    """Result of the LogExercise use case execution."""

    user: User
    exercise: Exercise


class LogExerciseUseCase:
    """
    Use case for logging an exercise against a user.

    Orchestrates the following workflow:
    1. Validate description and duration
    2. Resolve the date (default: today in UTC)
    3. Resolve the user, failing if unknown
    4. Persist the exercise

    With ``lenient_dates`` enabled, a date that is present but cannot be
    parsed falls back to today instead of failing validation.

    Usage:
        >>> use_case = LogExerciseUseCase(user_repo, exercise_repo)
        >>> result = use_case.execute(
        ...     user_id="3f2b...",
        ...     description="Morning run",
        ...     duration="30",
        ...     date="2020-02-02",
        ... )
        >>> result.exercise.display_date
        'Sun Feb 02 2020'
    """

    def __init__(
        self,
        user_repo: UserRepository,
        exercise_repo: ExerciseRepository,
        *,
        lenient_dates: bool = False,
        today: Callable[[], dt.date] = utc_today,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            user_repo: Repository for user lookups
            exercise_repo: Repository for exercise persistence
            lenient_dates: Treat unparsable dates as absent
            today: Clock returning the default exercise date
        """
        self._user_repo = user_repo
        self._exercise_repo = exercise_repo
        self._lenient_dates = lenient_dates
        self._today = today

    def execute(
        self,
        user_id: str,
        description: Any,
        duration: Any,
        date: Any = None,
    ) -> LogExerciseResult:
        """
        Log an exercise.

        Args:
            user_id: ID of the user the exercise belongs to
            description: Raw description from the request
            duration: Raw duration (int or digit string) in minutes
            date: Optional raw ``YYYY-MM-DD`` date

        Returns:
            LogExerciseResult with the user and the stored exercise

        Raises:
            ValidationError: If any input is malformed
            NotFoundError: If the user does not exist
            StoreError: If persistence fails
        """
        description = require_text(description, "description")
        duration = parse_positive_int(duration, "duration")
        exercise_date = self._resolve_date(date)

        user = get_user_or_raise(self._user_repo, user_id)

        record = self._exercise_repo.create(
            user.id,
            description=description,
            duration=duration,
            date=exercise_date,
        )
        exercise = Exercise.model_validate(record)
        logger.info(
            f"Logged exercise {exercise.id} for user {user.id}: "
            f"{exercise.duration} min on {exercise.date.isoformat()}"
        )
        return LogExerciseResult(user=user, exercise=exercise)

    def _resolve_date(self, value: Any) -> dt.date:
        """Parse the optional date, applying the default and leniency rules."""
        try:
            parsed: Optional[dt.date] = parse_optional_date(value, "date")
        except ValidationError:
            if not self._lenient_dates:
                raise
            logger.warning(f"Ignoring unparsable exercise date {value!r}, defaulting to today")
            parsed = None

        return parsed if parsed is not None else self._today()
