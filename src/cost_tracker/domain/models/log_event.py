"""Log collection models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class LogEvent:
    """A stored log event received from one of the services."""

    log_id: str
    timestamp: datetime
    level: str
    service: str
    endpoint: str
    method: str
    message: str
    status_code: Optional[int] = field(default=None)
