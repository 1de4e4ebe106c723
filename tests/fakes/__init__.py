"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Supports fail_next() to inject store failures
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeUserRepository, create_user_repo

    # Direct instantiation
    repo = FakeUserRepository()
    repo.seed([{"id": "u1", "username": "alice"}])

    # Factory function with pre-populated data
    repo = create_user_repo(num_users=3)
"""
from tests.fakes.exercise_repository import FakeExerciseRepository
from tests.fakes.store import FakeStore
from tests.fakes.user_repository import FakeUserRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_user_repo(*, num_users: int = 0) -> FakeUserRepository:
    """
    Create a FakeUserRepository with optional pre-populated users.

    Args:
        num_users: Number of users to generate (user1, user2, ...)

    Returns:
        Configured FakeUserRepository
    """
    repo = FakeUserRepository()
    repo.seed([{"username": f"user{i + 1}"} for i in range(num_users)])
    return repo


__all__ = [
    "FakeUserRepository",
    "FakeExerciseRepository",
    "FakeStore",
    "create_user_repo",
]
