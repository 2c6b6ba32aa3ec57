"""Domain layer - pure business models with no external dependencies."""

from cost_tracker.domain.models import (
    CostCategory,
    LogLevel,
    CostEntry,
    MonthlyReport,
    ReportItem,
    User,
    LogEvent,
    Developer,
)

__all__ = [
    "CostCategory",
    "LogLevel",
    "CostEntry",
    "MonthlyReport",
    "ReportItem",
    "User",
    "LogEvent",
    "Developer",
]
