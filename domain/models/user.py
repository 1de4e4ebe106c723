"""
User entity.
"""

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A person whose exercises are tracked.

    Users are created once on signup and never mutated. The ``id`` is
    assigned by the store; ``username`` is unique across all users.

    Examples:
        >>> user = User(id="5f0c...", username="fcc_test")
        >>> user.username
        'fcc_test'
    """

    id: str = Field(..., min_length=1, description="Store-assigned identifier")
    username: str = Field(..., min_length=1, description="Unique username")
