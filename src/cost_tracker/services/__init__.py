"""Service layer - business logic orchestration."""

from cost_tracker.services.cost_ledger_service import CostLedgerService, CostCreate
from cost_tracker.services.report_engine import ReportEngine
from cost_tracker.services.user_service import UserService, UserCreate, UserSummary
from cost_tracker.services.log_service import LogService, LogEventCreate
from cost_tracker.services.about_service import AboutService

__all__ = [
    "CostLedgerService",
    "CostCreate",
    "ReportEngine",
    "UserService",
    "UserCreate",
    "UserSummary",
    "LogService",
    "LogEventCreate",
    "AboutService",
]
