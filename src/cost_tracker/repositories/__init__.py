"""Repository layer - data access abstractions and implementations."""

from cost_tracker.repositories.protocols import (
    UserRepository,
    CostRepository,
    ReportCacheRepository,
    LogRepository,
    DeveloperRepository,
)

__all__ = [
    "UserRepository",
    "CostRepository",
    "ReportCacheRepository",
    "LogRepository",
    "DeveloperRepository",
]
