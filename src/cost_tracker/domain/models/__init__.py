"""Domain models package."""

from cost_tracker.domain.models.enums import CostCategory, LogLevel
from cost_tracker.domain.models.cost import CostEntry
from cost_tracker.domain.models.report import MonthlyReport, ReportItem, empty_categories
from cost_tracker.domain.models.user import User
from cost_tracker.domain.models.log_event import LogEvent
from cost_tracker.domain.models.developer import Developer

__all__ = [
    "CostCategory",
    "LogLevel",
    "CostEntry",
    "MonthlyReport",
    "ReportItem",
    "empty_categories",
    "User",
    "LogEvent",
    "Developer",
]
