"""Log collection service."""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from cost_tracker.core.exceptions import ValidationError
from cost_tracker.core.parsing import parse_int, parse_timestamp
from cost_tracker.core.timezone import Clock, now_local
from cost_tracker.domain.models import LogEvent, LogLevel
from cost_tracker.repositories.protocols import LogRepository


@dataclass
class LogEventCreate:
    """Incoming log event; missing fields fall back to defaults."""

    timestamp: Optional[Any] = None
    level: Optional[str] = None
    service: Optional[str] = None
    endpoint: Optional[str] = None
    method: Optional[str] = None
    message: Optional[str] = None
    status_code: Optional[Any] = None

    def to_payload(self) -> dict:
        """Wire form accepted by POST /internal/logs."""
        timestamp = self.timestamp
        if isinstance(timestamp, datetime):
            timestamp = timestamp.isoformat()
        return {
            "timestamp": timestamp,
            "level": self.level,
            "service": self.service,
            "endpoint": self.endpoint,
            "method": self.method,
            "message": self.message,
            "statusCode": self.status_code,
        }


class LogService:
    """Stores log events sent by the services and lists them back."""

    def __init__(self, log_repo: LogRepository, clock: Clock = now_local):
        self._log_repo = log_repo
        self._clock = clock

    def record(self, data: LogEventCreate) -> LogEvent:
        """Normalize and store a log event."""
        if data.timestamp in (None, ""):
            timestamp = self._clock()
        else:
            timestamp = parse_timestamp(data.timestamp, "timestamp")

        status_code = None
        if data.status_code is not None:
            status_code = parse_int(data.status_code, "statusCode")

        for name in ("level", "service", "endpoint", "method", "message"):
            value = getattr(data, name)
            if value is not None and not isinstance(value, str):
                raise ValidationError(f"invalid {name}")

        event = LogEvent(
            log_id=uuid.uuid4().hex,
            timestamp=timestamp,
            level=data.level or LogLevel.INFO.value,
            service=data.service or "unknown",
            endpoint=data.endpoint or "",
            method=data.method or "",
            message=data.message or "",
            status_code=status_code,
        )
        return self._log_repo.create(event)

    def list_logs(self) -> list[LogEvent]:
        """List all stored log events, newest first."""
        return self._log_repo.list_recent()
