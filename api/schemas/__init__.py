"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- users: Users, exercises and exercise log responses
"""

from api.schemas.users import (
    ErrorResponse,
    ExerciseLogResponse,
    ExerciseResponse,
    LogEntryResponse,
    UserResponse,
)

__all__ = [
    "ErrorResponse",
    "ExerciseLogResponse",
    "ExerciseResponse",
    "LogEntryResponse",
    "UserResponse",
]
