"""
Users router for user registration, exercise logging and log retrieval.

This router contains endpoints for:
- POST /api/users - Register a user (idempotent per username)
- GET /api/users - List all users
- POST /api/users/{user_id}/exercises - Log an exercise for a user
- GET /api/users/{user_id}/logs - Get a user's filtered exercise log

Request bodies may be JSON or HTML form data.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import (
    get_exercise_log_use_case,
    get_log_exercise_use_case,
    get_register_user_use_case,
    get_request_payload,
)
from api.schemas import (
    ErrorResponse,
    ExerciseLogResponse,
    ExerciseResponse,
    UserResponse,
)
from application.use_cases import (
    GetExerciseLogUseCase,
    LogExerciseUseCase,
    RegisterUserUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


# =============================================================================
# User Endpoints
# =============================================================================


@router.post("", response_model=UserResponse)
def create_user_endpoint(
    payload: Dict[str, Any] = Depends(get_request_payload),
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
):
    """
    Register a user.

    Submitting a username that already exists returns the existing user.

    Body:
        username: Non-empty username

    Returns:
        The user's username and id
    """
    result = use_case.execute(payload.get("username"))
    return UserResponse.from_user(result.user)


@router.get("", response_model=List[UserResponse])
def list_users_endpoint(
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
):
    """
    List all users in creation order.

    Returns:
        Array of users (empty when none exist)
    """
    result = use_case.list_users()
    return [UserResponse.from_user(user) for user in result.users]


# =============================================================================
# Exercise Endpoints
# =============================================================================


@router.post(
    "/{user_id}/exercises",
    response_model=ExerciseResponse,
    responses={404: {"model": ErrorResponse}},
)
def log_exercise_endpoint(
    user_id: str,
    payload: Dict[str, Any] = Depends(get_request_payload),
    use_case: LogExerciseUseCase = Depends(get_log_exercise_use_case),
):
    """
    Log an exercise for a user.

    Body:
        description: Non-empty description
        duration: Positive whole number of minutes
        date: Optional YYYY-MM-DD date, defaults to today (UTC)

    Returns:
        The user's id and username plus the stored exercise
    """
    result = use_case.execute(
        user_id=user_id,
        description=payload.get("description"),
        duration=payload.get("duration"),
        date=payload.get("date"),
    )
    return ExerciseResponse.from_result(result)


@router.get(
    "/{user_id}/logs",
    response_model=ExerciseLogResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_logs_endpoint(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from", description="Inclusive lower bound, YYYY-MM-DD"),
    date_to: Optional[str] = Query(None, alias="to", description="Inclusive upper bound, YYYY-MM-DD"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    use_case: GetExerciseLogUseCase = Depends(get_exercise_log_use_case),
):
    """
    Get a user's exercise log.

    Args:
        user_id: ID of the user
        from: Optional inclusive lower date bound
        to: Optional inclusive upper date bound
        limit: Optional positive maximum entry count

    Returns:
        The user with the entry count and log entries in date order
    """
    exercise_log = use_case.execute(
        user_id=user_id,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
    )
    return ExerciseLogResponse.from_log(exercise_log)
