"""
Port interfaces (Protocols) for the Exercise Tracker API.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with fake implementations
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.exercise_repository import ExerciseRepository
from application.ports.store import StoreHandle
from application.ports.user_repository import UserRepository

__all__ = [
    "ExerciseRepository",
    "StoreHandle",
    "UserRepository",
]
