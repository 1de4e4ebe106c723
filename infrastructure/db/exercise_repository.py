"""
ExerciseRepository implementations.

- SupabaseExerciseRepository: queries the ``exercises`` table, pushing the
  log bounds, ordering and limit into the query
- InMemoryExerciseRepository: process-local storage filtered with
  ``domain.services.filter_exercise_log``
"""

import datetime as dt
import threading
import uuid
from typing import Dict, List, Optional

from supabase import Client

from domain.models import Exercise, LogQuery
from domain.services import filter_exercise_log
from infrastructure.db.query import run_query

EXERCISES_TABLE = "exercises"
EXERCISE_COLUMNS = "id, user_id, description, duration, date, created_at"


class SupabaseExerciseRepository:
    """
    Supabase-backed exercise repository implementation.

    The ``date`` column is a Postgres ``date``, so inclusive ``gte``/``lte``
    comparisons against ``YYYY-MM-DD`` bounds cover whole calendar days.
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def create(
        self,
        user_id: str,
        *,
        description: str,
        duration: int,
        date: dt.date,
    ) -> Dict:
        response = run_query(
            self._client.table(EXERCISES_TABLE).insert(
                {
                    "user_id": user_id,
                    "description": description,
                    "duration": duration,
                    "date": date.isoformat(),
                }
            ),
            "save exercise",
        )
        return response.data[0]

    def list_for_user(self, user_id: str, query: LogQuery) -> List[Dict]:
        builder = (
            self._client.table(EXERCISES_TABLE)
            .select(EXERCISE_COLUMNS)
            .eq("user_id", user_id)
        )

        if query.date_from is not None:
            builder = builder.gte("date", query.date_from.isoformat())
        if query.date_to is not None:
            builder = builder.lte("date", query.date_to.isoformat())

        builder = builder.order("date").order("created_at")

        if query.limit is not None:
            builder = builder.limit(query.limit)

        response = run_query(builder, "fetch exercise log")
        return response.data or []


class InMemoryExerciseRepository:
    """
    In-memory implementation of ExerciseRepository.

    Records live in a dict owned by the store handle, so every repository
    created from the same handle sees the same exercises.
    """

    def __init__(
        self,
        exercises: Optional[Dict[str, Dict]] = None,
        lock: Optional[threading.Lock] = None,
    ):
        self._exercises: Dict[str, Dict] = exercises if exercises is not None else {}
        self._lock = lock or threading.Lock()

    def create(
        self,
        user_id: str,
        *,
        description: str,
        duration: int,
        date: dt.date,
    ) -> Dict:
        record = {
            "id": str(uuid.uuid4()),
            "user_id": user_id,
            "description": description,
            "duration": duration,
            "date": date,
            "created_at": dt.datetime.now(dt.timezone.utc),
        }
        with self._lock:
            self._exercises[record["id"]] = record
        return dict(record)

    def list_for_user(self, user_id: str, query: LogQuery) -> List[Dict]:
        with self._lock:
            owned = [
                Exercise.model_validate(r)
                for r in self._exercises.values()
                if r["user_id"] == user_id
            ]
        return [ex.model_dump() for ex in filter_exercise_log(owned, query)]
