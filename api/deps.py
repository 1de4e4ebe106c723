"""
FastAPI Dependency Providers for the Exercise Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings are cached per-process (lru_cache)
- The store handle is opened once in the app lifespan and read from app.state
- Repository and use case providers create new instances per-request
- Request bodies are accepted as JSON or form data

Usage in routers:
    from api.deps import get_register_user_use_case
    from application.use_cases import RegisterUserUseCase

    @router.get("/api/users")
    def list_users(
        use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
    ):
        return use_case.list_users().users

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_user_repo] = lambda: FakeUserRepository()
"""

import json
from typing import Any, Dict

from fastapi import Depends, HTTPException, Request

from application.exceptions import ValidationError
from application.ports import ExerciseRepository, StoreHandle, UserRepository
from application.use_cases import (
    GetExerciseLogUseCase,
    LogExerciseUseCase,
    RegisterUserUseCase,
)
from backend.settings import Settings, get_settings as _get_settings

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Store Provider
# =============================================================================


def get_store(request: Request) -> StoreHandle:
    """
    Get the store handle opened by the application lifespan.

    Raises HTTPException 503 if the store is not open (for example when
    the app is served without running its lifespan).

    Returns:
        StoreHandle: Open store handle

    Raises:
        HTTPException: 503 if no store is available
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Store has not been opened.",
        )
    return store


# =============================================================================
# Repository Providers
# =============================================================================


def get_user_repo(store: StoreHandle = Depends(get_store)) -> UserRepository:
    """
    Get UserRepository implementation.

    The return type is the Protocol to enable easy mocking.

    Args:
        store: Open store handle (injected)

    Returns:
        UserRepository: Repository for user persistence
    """
    return store.user_repository()


def get_exercise_repo(store: StoreHandle = Depends(get_store)) -> ExerciseRepository:
    """
    Get ExerciseRepository implementation.

    The return type is the Protocol to enable easy mocking.

    Args:
        store: Open store handle (injected)

    Returns:
        ExerciseRepository: Repository for exercise persistence and log queries
    """
    return store.exercise_repository()


# =============================================================================
# Use Case Providers
# =============================================================================


def get_register_user_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
) -> RegisterUserUseCase:
    """Get RegisterUserUseCase with injected repository."""
    return RegisterUserUseCase(user_repo=user_repo)


def get_log_exercise_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    settings: Settings = Depends(get_settings),
) -> LogExerciseUseCase:
    """Get LogExerciseUseCase honouring the configured date policy."""
    return LogExerciseUseCase(
        user_repo=user_repo,
        exercise_repo=exercise_repo,
        lenient_dates=settings.lenient_exercise_dates,
    )


def get_exercise_log_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> GetExerciseLogUseCase:
    """Get GetExerciseLogUseCase with injected repositories."""
    return GetExerciseLogUseCase(user_repo=user_repo, exercise_repo=exercise_repo)


# =============================================================================
# Request Body Provider
# =============================================================================


async def get_request_payload(request: Request) -> Dict[str, Any]:
    """
    Read the request body as a flat dict.

    HTML forms post ``application/x-www-form-urlencoded``; API clients
    post JSON. An empty body is an empty dict.

    Returns:
        Dict of submitted fields

    Raises:
        ValidationError: If the body is not valid JSON or not a JSON object
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body.strip():
        return {}

    try:
        payload = json.loads(body)
    except ValueError:
        raise ValidationError("Request body must be JSON or form data")

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Store
    "get_store",
    # Repositories
    "get_user_repo",
    "get_exercise_repo",
    # Use cases
    "get_register_user_use_case",
    "get_log_exercise_use_case",
    "get_exercise_log_use_case",
    # Request body
    "get_request_payload",
]
