"""
API package for the Exercise Tracker API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Exception handlers producing {"error": ...} bodies
- routers/: API route handlers
- schemas/: Response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_store,
    get_user_repo,
    get_exercise_repo,
    get_register_user_use_case,
    get_log_exercise_use_case,
    get_exercise_log_use_case,
    get_request_payload,
)

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
