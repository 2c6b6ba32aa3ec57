"""User repository protocol."""

from typing import Protocol, Optional

from cost_tracker.domain.models import User


class UserRepository(Protocol):
    """Interface for user data access."""

    def create(self, user: User) -> User:
        """Persist a new user."""
        ...

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Retrieve user by ID."""
        ...

    def exists(self, user_id: int) -> bool:
        """Check whether a user with this ID is registered."""
        ...

    def list_all(self) -> list[User]:
        """List all users."""
        ...
