"""Dependency injection for FastAPI."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from cost_tracker.config.settings import get_settings
from cost_tracker.core.timezone import Clock, now_local
from cost_tracker.observability import LogSink, dispatch, endpoint_log_event
from cost_tracker.repositories.sqlalchemy.database import get_db
from cost_tracker.repositories.sqlalchemy import (
    SqlAlchemyUserRepository,
    SqlAlchemyCostRepository,
    SqlAlchemyReportCacheRepository,
    SqlAlchemyLogRepository,
    SqlAlchemyDeveloperRepository,
)
from cost_tracker.services import (
    CostLedgerService,
    ReportEngine,
    UserService,
    LogService,
    AboutService,
)


def get_clock() -> Clock:
    """Provide the time source (overridden in tests)."""
    return now_local


def get_log_sink(request: Request) -> LogSink:
    """Provide the process-wide log sink set up at startup."""
    return request.app.state.log_sink


def log_access(message: str):
    """Build a dependency that reports an endpoint access to the log sink."""

    def _log_access(request: Request, sink: LogSink = Depends(get_log_sink)) -> None:
        dispatch(
            sink,
            endpoint_log_event(
                get_settings().service_name,
                request.method,
                request.url.path,
                message,
            ),
        )

    return _log_access


def get_user_repo(db: Session = Depends(get_db)) -> SqlAlchemyUserRepository:
    """Provide UserRepository instance."""
    return SqlAlchemyUserRepository(db)


def get_cost_repo(db: Session = Depends(get_db)) -> SqlAlchemyCostRepository:
    """Provide CostRepository instance."""
    return SqlAlchemyCostRepository(db)


def get_report_cache_repo(db: Session = Depends(get_db)) -> SqlAlchemyReportCacheRepository:
    """Provide ReportCacheRepository instance."""
    return SqlAlchemyReportCacheRepository(db)


def get_log_repo(db: Session = Depends(get_db)) -> SqlAlchemyLogRepository:
    """Provide LogRepository instance."""
    return SqlAlchemyLogRepository(db)


def get_developer_repo(db: Session = Depends(get_db)) -> SqlAlchemyDeveloperRepository:
    """Provide DeveloperRepository instance."""
    return SqlAlchemyDeveloperRepository(db)


def get_cost_ledger_service(
    cost_repo: SqlAlchemyCostRepository = Depends(get_cost_repo),
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
    clock: Clock = Depends(get_clock),
) -> CostLedgerService:
    """Provide CostLedgerService instance."""
    return CostLedgerService(
        cost_repo=cost_repo,
        user_repo=user_repo,
        clock=clock,
    )


def get_report_engine(
    cost_repo: SqlAlchemyCostRepository = Depends(get_cost_repo),
    cache_repo: SqlAlchemyReportCacheRepository = Depends(get_report_cache_repo),
    clock: Clock = Depends(get_clock),
) -> ReportEngine:
    """Provide ReportEngine instance."""
    return ReportEngine(
        cost_repo=cost_repo,
        cache_repo=cache_repo,
        clock=clock,
    )


def get_user_service(
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
    cost_repo: SqlAlchemyCostRepository = Depends(get_cost_repo),
) -> UserService:
    """Provide UserService instance."""
    return UserService(user_repo=user_repo, cost_repo=cost_repo)


def get_log_service(
    log_repo: SqlAlchemyLogRepository = Depends(get_log_repo),
    clock: Clock = Depends(get_clock),
) -> LogService:
    """Provide LogService instance."""
    return LogService(log_repo=log_repo, clock=clock)


def get_about_service(
    developer_repo: SqlAlchemyDeveloperRepository = Depends(get_developer_repo),
) -> AboutService:
    """Provide AboutService instance."""
    return AboutService(developer_repo=developer_repo)
