"""Pydantic schemas for log collection and team info endpoints."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from cost_tracker.domain.models import LogEvent
from cost_tracker.services import LogEventCreate


class LogEventRequest(BaseModel):
    """Request body for POST /internal/logs."""

    model_config = ConfigDict(populate_by_name=True)

    timestamp: Any = None
    level: Any = None
    service: Any = None
    endpoint: Any = None
    method: Any = None
    message: Any = None
    status_code: Any = Field(default=None, alias="statusCode")

    def to_create(self) -> LogEventCreate:
        return LogEventCreate(
            timestamp=self.timestamp,
            level=self.level,
            service=self.service,
            endpoint=self.endpoint,
            method=self.method,
            message=self.message,
            status_code=self.status_code,
        )


class LogEventResponse(BaseModel):
    """Response schema for a stored log event."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    timestamp: datetime
    level: str
    service: str
    endpoint: str
    method: str
    message: str
    status_code: Optional[int] = Field(default=None, alias="statusCode")

    @classmethod
    def from_domain(cls, event: LogEvent) -> "LogEventResponse":
        return cls(
            id=event.log_id,
            timestamp=event.timestamp,
            level=event.level,
            service=event.service,
            endpoint=event.endpoint,
            method=event.method,
            message=event.message,
            status_code=event.status_code,
        )


class DeveloperResponse(BaseModel):
    first_name: str
    last_name: str
