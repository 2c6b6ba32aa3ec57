"""Repository protocol definitions (interfaces)."""

from cost_tracker.repositories.protocols.user_repo import UserRepository
from cost_tracker.repositories.protocols.cost_repo import CostRepository
from cost_tracker.repositories.protocols.report_cache_repo import ReportCacheRepository
from cost_tracker.repositories.protocols.log_repo import LogRepository, DeveloperRepository

__all__ = [
    "UserRepository",
    "CostRepository",
    "ReportCacheRepository",
    "LogRepository",
    "DeveloperRepository",
]
