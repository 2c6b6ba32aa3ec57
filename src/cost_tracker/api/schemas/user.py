"""Pydantic schemas for user endpoints."""

from datetime import date
from typing import Any

from pydantic import BaseModel

from cost_tracker.domain.models import User
from cost_tracker.services import UserSummary


class UserCreateRequest(BaseModel):
    """Request body for POST /api/users (validated by the service)."""

    id: Any = None
    first_name: Any = None
    last_name: Any = None
    birthday: Any = None


class UserResponse(BaseModel):
    """Response schema for a single user."""

    id: int
    first_name: str
    last_name: str
    birthday: date

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.user_id,
            first_name=user.first_name,
            last_name=user.last_name,
            birthday=user.birthday,
        )


class UserSummaryResponse(BaseModel):
    """Response schema for GET /api/users/{id}."""

    first_name: str
    last_name: str
    id: int
    total: float

    @classmethod
    def from_domain(cls, summary: UserSummary) -> "UserSummaryResponse":
        return cls(
            first_name=summary.user.first_name,
            last_name=summary.user.last_name,
            id=summary.user.user_id,
            total=float(summary.total),
        )
