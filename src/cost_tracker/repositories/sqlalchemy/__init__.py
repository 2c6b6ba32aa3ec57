"""SQLAlchemy repository implementations."""

from cost_tracker.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    reset_database,
    store_errors,
    Base,
)
from cost_tracker.repositories.sqlalchemy.user_repo import SqlAlchemyUserRepository
from cost_tracker.repositories.sqlalchemy.cost_repo import SqlAlchemyCostRepository
from cost_tracker.repositories.sqlalchemy.report_cache_repo import SqlAlchemyReportCacheRepository
from cost_tracker.repositories.sqlalchemy.log_repo import (
    SqlAlchemyLogRepository,
    SqlAlchemyDeveloperRepository,
)

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "reset_database",
    "store_errors",
    "Base",
    "SqlAlchemyUserRepository",
    "SqlAlchemyCostRepository",
    "SqlAlchemyReportCacheRepository",
    "SqlAlchemyLogRepository",
    "SqlAlchemyDeveloperRepository",
]
