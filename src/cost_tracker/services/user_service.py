"""User registry service."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from cost_tracker.core.exceptions import ValidationError, NotFoundError
from cost_tracker.core.parsing import parse_date, parse_int, require_text
from cost_tracker.domain.models import User
from cost_tracker.repositories.protocols import CostRepository, UserRepository


@dataclass
class UserCreate:
    """Raw input for registering a user."""

    user_id: Any = None
    first_name: Any = None
    last_name: Any = None
    birthday: Any = None


@dataclass
class UserSummary:
    """A user together with the total of all their costs."""

    user: User
    total: Decimal


class UserService:
    """Service for registering and looking up cost owners."""

    def __init__(
        self,
        user_repo: UserRepository,
        cost_repo: CostRepository,
    ):
        self._user_repo = user_repo
        self._cost_repo = cost_repo

    def add_user(self, data: UserCreate) -> User:
        """Validate and register a new user."""
        user = User(
            user_id=parse_int(data.user_id, "id"),
            first_name=require_text(data.first_name, "first_name"),
            last_name=require_text(data.last_name, "last_name"),
            birthday=parse_date(data.birthday, "birthday"),
        )
        if self._user_repo.exists(user.user_id):
            raise ValidationError(f"user already exists: {user.user_id}")
        return self._user_repo.create(user)

    def list_users(self) -> list[User]:
        """List all users."""
        return self._user_repo.list_all()

    def get_user_summary(self, user_id: Any) -> UserSummary:
        """Get a user and the total of their costs (0 when they have none)."""
        user_id = parse_int(user_id, "id")
        user = self._user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return UserSummary(user=user, total=self._cost_repo.sum_for_owner(user_id))
