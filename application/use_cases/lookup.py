"""
Shared user lookup for use cases that act on an existing user.
"""

from application.exceptions import NotFoundError
from application.ports import UserRepository
from domain.models import User


def get_user_or_raise(user_repo: UserRepository, user_id: str) -> User:
    """
    Resolve a user ID to a User.

    Raises:
        NotFoundError: If no user has this ID (or the ID is malformed)
    """
    record = user_repo.get_by_id(user_id) if user_id else None
    if record is None:
        raise NotFoundError(f"User {user_id} not found")
    return User.model_validate(record)
