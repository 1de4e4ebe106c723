"""
User repository port (interface).

This Protocol defines the contract for user persistence.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.
"""

from typing import Dict, List, Optional, Protocol


class UserRepository(Protocol):
    """
    Repository interface for user records.

    Records are plain dictionaries with ``id`` and ``username`` keys.
    """

    def create(self, username: str) -> Dict:
        """
        Insert a new user.

        Args:
            username: Unique, already-validated username

        Returns:
            The created user dictionary, including its generated ``id``

        Raises:
            ConflictError: If the username is already taken
            StoreError: On any other persistence failure
        """
        ...

    def get_by_id(self, user_id: str) -> Optional[Dict]:
        """
        Get a user by ID.

        Malformed identifiers are treated as unknown and return None.

        Args:
            user_id: The user identifier

        Returns:
            User dictionary if found, None otherwise
        """
        ...

    def get_by_username(self, username: str) -> Optional[Dict]:
        """
        Get a user by exact username.

        Args:
            username: The username

        Returns:
            User dictionary if found, None otherwise
        """
        ...

    def list_all(self) -> List[Dict]:
        """
        List all users in creation order.

        Returns:
            List of user dictionaries
        """
        ...
