"""
Query execution helpers for the Supabase repositories.

Translates driver failures into the application error taxonomy so that
callers never see postgrest or httpx exceptions.
"""

import logging
import uuid

import httpx
from postgrest.exceptions import APIError

from application.exceptions import ConflictError, StoreError

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def run_query(query, operation: str):
    """
    Execute a postgrest query builder.

    Args:
        query: Request builder returned by ``client.table(...)...``
        operation: Short description used in error messages ("create user")

    Returns:
        The postgrest API response

    Raises:
        ConflictError: On a unique constraint violation
        StoreError: On any other database or transport failure
    """
    try:
        return query.execute()
    except APIError as e:
        if e.code == UNIQUE_VIOLATION:
            raise ConflictError(f"Could not {operation}: record already exists") from e
        logger.error(f"Store error during '{operation}': [{e.code}] {e.message}")
        raise StoreError(f"Could not {operation}") from e
    except httpx.HTTPError as e:
        logger.error(f"Store unreachable during '{operation}': {e}")
        raise StoreError(f"Could not {operation}: store unavailable") from e


def is_uuid(value: str) -> bool:
    """Check whether a string is a well-formed UUID."""
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True
