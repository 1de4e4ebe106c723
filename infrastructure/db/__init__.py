"""
Infrastructure Database Layer.

This package provides the store handles and repository implementations
behind the interfaces defined in application.ports. These implementations
are injected into use cases and routers for clean separation of concerns
and testability.

Usage:
    from infrastructure.db import open_store

    # Open the configured store once per process
    store = open_store("supabase", supabase_url=SUPABASE_URL, supabase_key=SUPABASE_KEY)

    # Repositories are cheap views over the open handle
    user_repo = store.user_repository()
    exercise_repo = store.exercise_repository()

    store.close()
"""

from infrastructure.db.exercise_repository import (
    InMemoryExerciseRepository,
    SupabaseExerciseRepository,
)
from infrastructure.db.store import (
    InMemoryStore,
    StoreClosedError,
    StoreConfigurationError,
    SupabaseStore,
    open_store,
)
from infrastructure.db.user_repository import InMemoryUserRepository, SupabaseUserRepository

__all__ = [
    # Store handles
    "open_store",
    "SupabaseStore",
    "InMemoryStore",
    "StoreConfigurationError",
    "StoreClosedError",

    # User persistence
    "SupabaseUserRepository",
    "InMemoryUserRepository",

    # Exercise persistence
    "SupabaseExerciseRepository",
    "InMemoryExerciseRepository",
]
