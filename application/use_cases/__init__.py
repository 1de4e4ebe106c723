"""
Application Use Cases for the Exercise Tracker API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses
- Failures are raised as application exceptions

Usage:
    from application.use_cases import (
        RegisterUserUseCase,
        LogExerciseUseCase,
        GetExerciseLogUseCase,
    )

    # Register a user
    result = RegisterUserUseCase(user_repo=user_repo).execute("fcc_test")

    # Log an exercise
    result = LogExerciseUseCase(user_repo, exercise_repo).execute(
        user_id=result.user.id,
        description="Morning run",
        duration=30,
    )

    # Read the log
    log = GetExerciseLogUseCase(user_repo, exercise_repo).execute(
        user_id=result.user.id,
        date_from="2023-01-01",
        limit=10,
    )
"""

from application.use_cases.get_exercise_log import GetExerciseLogUseCase
from application.use_cases.log_exercise import LogExerciseResult, LogExerciseUseCase
from application.use_cases.register_user import (
    ListUsersResult,
    RegisterUserResult,
    RegisterUserUseCase,
)

__all__ = [
    # RegisterUser
    "RegisterUserUseCase",
    "RegisterUserResult",
    "ListUsersResult",
    # LogExercise
    "LogExerciseUseCase",
    "LogExerciseResult",
    # GetExerciseLog
    "GetExerciseLogUseCase",
]
