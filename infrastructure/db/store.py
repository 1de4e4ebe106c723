"""
Store handles with an explicit open/close lifecycle.

The application opens exactly one handle at startup (see the lifespan in
``backend.main``), keeps it on ``app.state.store`` and closes it on
shutdown. Repositories are created per request from the open handle.

Usage:
    store = open_store("supabase", supabase_url=url, supabase_key=key)
    try:
        users = store.user_repository()
        ...
    finally:
        store.close()
"""

import logging
import threading
from typing import Dict, Optional

from supabase import Client, create_client

from infrastructure.db.exercise_repository import (
    InMemoryExerciseRepository,
    SupabaseExerciseRepository,
)
from infrastructure.db.user_repository import InMemoryUserRepository, SupabaseUserRepository

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ("supabase", "memory")


class StoreConfigurationError(RuntimeError):
    """The selected store backend cannot be opened with the given settings."""

    pass


class StoreClosedError(RuntimeError):
    """A repository was requested from a handle that has been closed."""

    pass


class SupabaseStore:
    """Store handle wrapping a Supabase client."""

    def __init__(self, client: Client):
        self._client: Optional[Client] = client

    @property
    def client(self) -> Client:
        if self._client is None:
            raise StoreClosedError("Supabase store has been closed")
        return self._client

    def user_repository(self) -> SupabaseUserRepository:
        return SupabaseUserRepository(self.client)

    def exercise_repository(self) -> SupabaseExerciseRepository:
        return SupabaseExerciseRepository(self.client)

    def close(self) -> None:
        if self._client is None:
            return
        # The sync client keeps one pooled httpx session for PostgREST calls
        session = getattr(self._client.postgrest, "session", None)
        if session is not None:
            session.close()
        self._client = None
        logger.info("Supabase store closed")


class InMemoryStore:
    """
    Store handle keeping all records in process memory.

    Data is lost when the process exits. Intended for local development
    (``STORE_BACKEND=memory``) and tests.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: Dict[str, Dict] = {}
        self._exercises: Dict[str, Dict] = {}
        self._closed = False

    def user_repository(self) -> InMemoryUserRepository:
        self._ensure_open()
        return InMemoryUserRepository(self._users, self._lock)

    def exercise_repository(self) -> InMemoryExerciseRepository:
        self._ensure_open()
        return InMemoryExerciseRepository(self._exercises, self._lock)

    def close(self) -> None:
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise StoreClosedError("In-memory store has been closed")


def open_store(
    backend: str,
    *,
    supabase_url: Optional[str] = None,
    supabase_key: Optional[str] = None,
):
    """
    Open a store handle for the configured backend.

    Args:
        backend: "supabase" or "memory"
        supabase_url: Supabase project URL (required for "supabase")
        supabase_key: Supabase API key (required for "supabase")

    Returns:
        An open StoreHandle

    Raises:
        StoreConfigurationError: If the backend is unknown or its
            connection settings are missing
    """
    if backend == "memory":
        logger.warning("Using in-memory store; data will not survive a restart")
        return InMemoryStore()

    if backend != "supabase":
        raise StoreConfigurationError(
            f"Unknown store backend '{backend}'. Must be one of: {SUPPORTED_BACKENDS}"
        )

    if not supabase_url or not supabase_key:
        raise StoreConfigurationError(
            "Supabase store selected but SUPABASE_URL and a Supabase key are not configured"
        )

    client = create_client(supabase_url, supabase_key)
    logger.info(f"Supabase store opened for {supabase_url}")
    return SupabaseStore(client)
