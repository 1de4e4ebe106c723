"""
Store handle port (interface).

A store handle owns the connection to the persistence backend. It is
opened once when the application starts, handed to each request through
dependency injection, and closed on shutdown.
"""

from typing import Protocol

from application.ports.exercise_repository import ExerciseRepository
from application.ports.user_repository import UserRepository


class StoreHandle(Protocol):
    """Open connection to a persistence backend."""

    def user_repository(self) -> UserRepository:
        """Get the user repository bound to this handle."""
        ...

    def exercise_repository(self) -> ExerciseRepository:
        """Get the exercise repository bound to this handle."""
        ...

    def close(self) -> None:
        """Release the underlying connection. Safe to call twice."""
        ...
