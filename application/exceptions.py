"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
The API layer maps each of them to an HTTP status and an
``{"error": message}`` body.
"""

from typing import Optional


class ExerciseTrackerError(Exception):
    """Base class for all expected application errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ExerciseTrackerError):
    """Malformed or missing input (username, description, duration, date, limit)."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(ExerciseTrackerError):
    """A referenced user does not exist."""

    pass


class ConflictError(ExerciseTrackerError):
    """A write violated a uniqueness constraint in the store."""

    pass


class StoreError(ExerciseTrackerError):
    """The underlying store failed to complete an operation."""

    pass
