"""
RegisterUser Use Case.

Creates users and lists them. Registration is idempotent: submitting a
username that already exists returns the existing user instead of failing.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List

from application.exceptions import ConflictError
from application.ports import UserRepository
from application.validation import require_text
from domain.models import User

logger = logging.getLogger(__name__)


@dataclass
class RegisterUserResult:
    """Result of the RegisterUser use case execution."""

    user: User
    created: bool = True


@dataclass
class ListUsersResult:
    """Result of listing users."""

    users: List[User] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.users)


class RegisterUserUseCase:
    """
    Use case for creating and listing users.

    Orchestrates the following workflow for registration:
    1. Validate the username
    2. Return the existing user if the username is taken
    3. Otherwise insert a new user
    4. If the insert loses a race on the uniqueness constraint,
       re-read and return the user that won

    Usage:
        >>> use_case = RegisterUserUseCase(user_repo=user_repo)
        >>> result = use_case.execute("fcc_test")
        >>> result.user.id
        '3f2b...'
    """

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            user_repo: Repository for user persistence
        """
        self._user_repo = user_repo

    def execute(self, username: Any) -> RegisterUserResult:
        """
        Register a user, or return the existing one with that username.

        Args:
            username: Raw username from the request

        Returns:
            RegisterUserResult with the user and whether it was created

        Raises:
            ValidationError: If the username is missing or empty
            ConflictError: If the username clashes but cannot be re-read
        """
        username = require_text(username, "username")

        existing = self._user_repo.get_by_username(username)
        if existing is not None:
            logger.info(f"Username '{username}' already registered, returning existing user")
            return RegisterUserResult(user=User.model_validate(existing), created=False)

        try:
            record = self._user_repo.create(username)
        except ConflictError:
            # Another request inserted the same username between our read and write
            winner = self._user_repo.get_by_username(username)
            if winner is None:
                raise
            logger.info(f"Username '{username}' registered concurrently, returning winner")
            return RegisterUserResult(user=User.model_validate(winner), created=False)

        user = User.model_validate(record)
        logger.info(f"Created user {user.id} ('{user.username}')")
        return RegisterUserResult(user=user, created=True)

    def list_users(self) -> ListUsersResult:
        """
        List all users in creation order.

        Returns:
            ListUsersResult with every user
        """
        records = self._user_repo.list_all()
        return ListUsersResult(users=[User.model_validate(r) for r in records])
