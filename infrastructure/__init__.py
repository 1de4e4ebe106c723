"""
Infrastructure Layer for the Exercise Tracker API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase and in-memory store handles and repositories
"""

# Re-export database components for convenient access
from infrastructure.db import (
    InMemoryExerciseRepository,
    InMemoryStore,
    InMemoryUserRepository,
    StoreClosedError,
    StoreConfigurationError,
    SupabaseExerciseRepository,
    SupabaseStore,
    SupabaseUserRepository,
    open_store,
)

__all__ = [
    "open_store",
    "SupabaseStore",
    "InMemoryStore",
    "StoreConfigurationError",
    "StoreClosedError",
    "SupabaseUserRepository",
    "InMemoryUserRepository",
    "SupabaseExerciseRepository",
    "InMemoryExerciseRepository",
]
