"""
UserRepository implementations.

- SupabaseUserRepository: queries the ``users`` table
- InMemoryUserRepository: process-local storage for development and tests
"""

import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from supabase import Client

from application.exceptions import ConflictError
from infrastructure.db.query import is_uuid, run_query

USERS_TABLE = "users"
USER_COLUMNS = "id, username, created_at"


class SupabaseUserRepository:
    """
    Supabase-backed user repository implementation.

    Username uniqueness is enforced by a unique index on ``users.username``;
    violations surface as ConflictError.
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def create(self, username: str) -> Dict:
        response = run_query(
            self._client.table(USERS_TABLE).insert({"username": username}),
            "create user",
        )
        return response.data[0]

    def get_by_id(self, user_id: str) -> Optional[Dict]:
        # The id column is a uuid; anything else can never match
        if not is_uuid(user_id):
            return None

        response = run_query(
            self._client.table(USERS_TABLE)
            .select(USER_COLUMNS)
            .eq("id", user_id)
            .limit(1),
            "look up user",
        )
        return response.data[0] if response.data else None

    def get_by_username(self, username: str) -> Optional[Dict]:
        response = run_query(
            self._client.table(USERS_TABLE)
            .select(USER_COLUMNS)
            .eq("username", username)
            .limit(1),
            "look up username",
        )
        return response.data[0] if response.data else None

    def list_all(self) -> List[Dict]:
        response = run_query(
            self._client.table(USERS_TABLE)
            .select(USER_COLUMNS)
            .order("created_at"),
            "list users",
        )
        return response.data or []


class InMemoryUserRepository:
    """
    In-memory implementation of UserRepository.

    Records live in a dict owned by the store handle, so every repository
    created from the same handle sees the same users.
    """

    def __init__(self, users: Optional[Dict[str, Dict]] = None, lock: Optional[threading.Lock] = None):
        self._users: Dict[str, Dict] = users if users is not None else {}
        self._lock = lock or threading.Lock()

    def create(self, username: str) -> Dict:
        with self._lock:
            if any(u["username"] == username for u in self._users.values()):
                raise ConflictError("Could not create user: record already exists")

            user_id = str(uuid.uuid4())
            record = {
                "id": user_id,
                "username": username,
                "created_at": datetime.now(timezone.utc),
            }
            self._users[user_id] = record
            return dict(record)

    def get_by_id(self, user_id: str) -> Optional[Dict]:
        with self._lock:
            record = self._users.get(user_id)
            return dict(record) if record else None

    def get_by_username(self, username: str) -> Optional[Dict]:
        with self._lock:
            for record in self._users.values():
                if record["username"] == username:
                    return dict(record)
            return None

    def list_all(self) -> List[Dict]:
        with self._lock:
            # dicts keep insertion order, which is creation order here
            return [dict(r) for r in self._users.values()]
