"""
Pydantic models for the users, exercises and logs endpoints.

Dates in responses are pre-rendered in the fixed human-readable form
(e.g. "Mon Jan 01 1990"), so they are typed as plain strings here.
"""

from typing import List

from pydantic import BaseModel, Field

from application.use_cases import LogExerciseResult
from domain.models import Exercise, ExerciseLog, User


class UserResponse(BaseModel):
    """A registered user."""
    username: str
    id: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(username=user.username, id=user.id)


class ExerciseResponse(BaseModel):
    """An exercise just logged, echoed with its owner."""
    id: str = Field(..., description="ID of the user the exercise belongs to")
    username: str
    description: str
    duration: int
    date: str

    @classmethod
    def from_result(cls, result: LogExerciseResult) -> "ExerciseResponse":
        return cls(
            id=result.user.id,
            username=result.user.username,
            description=result.exercise.description,
            duration=result.exercise.duration,
            date=result.exercise.display_date,
        )


class LogEntryResponse(BaseModel):
    """One entry of an exercise log."""
    description: str
    duration: int
    date: str

    @classmethod
    def from_exercise(cls, exercise: Exercise) -> "LogEntryResponse":
        return cls(
            description=exercise.description,
            duration=exercise.duration,
            date=exercise.display_date,
        )


class ExerciseLogResponse(BaseModel):
    """A user's filtered exercise log."""
    id: str
    username: str
    count: int = Field(..., description="Number of entries after filtering and limiting")
    log: List[LogEntryResponse] = []

    @classmethod
    def from_log(cls, exercise_log: ExerciseLog) -> "ExerciseLogResponse":
        return cls(
            id=exercise_log.user.id,
            username=exercise_log.user.username,
            count=exercise_log.count,
            log=[LogEntryResponse.from_exercise(e) for e in exercise_log.entries],
        )


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str
