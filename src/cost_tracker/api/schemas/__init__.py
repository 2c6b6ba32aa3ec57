"""Pydantic schemas for API request/response."""

from cost_tracker.api.schemas.cost import (
    CostCreateRequest,
    CostResponse,
    ReportItemResponse,
    ReportResponse,
)
from cost_tracker.api.schemas.user import (
    UserCreateRequest,
    UserResponse,
    UserSummaryResponse,
)
from cost_tracker.api.schemas.log import (
    LogEventRequest,
    LogEventResponse,
    DeveloperResponse,
)

__all__ = [
    "CostCreateRequest",
    "CostResponse",
    "ReportItemResponse",
    "ReportResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserSummaryResponse",
    "LogEventRequest",
    "LogEventResponse",
    "DeveloperResponse",
]
