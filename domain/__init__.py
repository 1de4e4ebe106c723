"""
Domain layer for the Exercise Tracker API.

This package contains pure domain models and services that are independent
of infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Exercise,
    ExerciseLog,
    LogQuery,
    User,
)

__all__ = [
    "Exercise",
    "ExerciseLog",
    "LogQuery",
    "User",
]
