"""
Pytest configuration and fixtures for cost tracker tests.

This module provides:
- In-memory SQLite database fixtures
- A controllable clock pinned in UTC
- Repository and service fixtures
- Factory helpers for users and costs
- A recording log sink for fire-and-forget log events
"""

import threading
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

import pytest
import pytz
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from cost_tracker.main import app
from cost_tracker.api.deps import get_clock
from cost_tracker.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from cost_tracker.repositories.sqlalchemy import orm_models  # noqa: F401
from cost_tracker.repositories.sqlalchemy import (
    SqlAlchemyUserRepository,
    SqlAlchemyCostRepository,
    SqlAlchemyReportCacheRepository,
    SqlAlchemyLogRepository,
    SqlAlchemyDeveloperRepository,
)
from cost_tracker.services import (
    CostLedgerService,
    CostCreate,
    ReportEngine,
    UserService,
    UserCreate,
    LogService,
    AboutService,
)
from cost_tracker.services.log_service import LogEventCreate
from cost_tracker.domain.models import CostEntry, User
from cost_tracker.config.settings import Settings, set_settings, reset_settings


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 12,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in UTC."""
    return pytz.utc.localize(datetime(year, month, day, hour, minute, second))


class FakeClock:
    """Clock whose current time is set by the test."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)

    def set(self, now: datetime) -> None:
        self.now = now


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests (mid-June 2024)."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    """Controllable clock starting at fixed_now."""
    return FakeClock(fixed_now)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Clean, file-free settings for every test
    reset_database()
    set_settings(Settings(database_url="sqlite://", timezone="UTC", _env_file=None))

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    reset_database()
    reset_settings()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def user_repo(test_session) -> SqlAlchemyUserRepository:
    """Provide test UserRepository."""
    return SqlAlchemyUserRepository(test_session)


@pytest.fixture
def cost_repo(test_session) -> SqlAlchemyCostRepository:
    """Provide test CostRepository."""
    return SqlAlchemyCostRepository(test_session)


@pytest.fixture
def report_cache_repo(test_session) -> SqlAlchemyReportCacheRepository:
    """Provide test ReportCacheRepository."""
    return SqlAlchemyReportCacheRepository(test_session)


@pytest.fixture
def log_repo(test_session) -> SqlAlchemyLogRepository:
    """Provide test LogRepository."""
    return SqlAlchemyLogRepository(test_session)


@pytest.fixture
def developer_repo(test_session) -> SqlAlchemyDeveloperRepository:
    """Provide test DeveloperRepository."""
    return SqlAlchemyDeveloperRepository(test_session)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service(cost_repo, user_repo, clock) -> CostLedgerService:
    """Provide test CostLedgerService."""
    return CostLedgerService(
        cost_repo=cost_repo,
        user_repo=user_repo,
        clock=clock,
        tz=pytz.utc,
    )


@pytest.fixture
def report_engine(cost_repo, report_cache_repo, clock) -> ReportEngine:
    """Provide test ReportEngine."""
    return ReportEngine(
        cost_repo=cost_repo,
        cache_repo=report_cache_repo,
        clock=clock,
        tz=pytz.utc,
    )


@pytest.fixture
def user_service(user_repo, cost_repo) -> UserService:
    """Provide test UserService."""
    return UserService(user_repo=user_repo, cost_repo=cost_repo)


@pytest.fixture
def log_service(log_repo, clock) -> LogService:
    """Provide test LogService."""
    return LogService(log_repo=log_repo, clock=clock)


@pytest.fixture
def about_service(developer_repo) -> AboutService:
    """Provide test AboutService."""
    return AboutService(developer_repo=developer_repo)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def user_factory(user_service) -> Callable[..., User]:
    """Factory for registering test users."""

    def _create_user(
        user_id: int = 123,
        first_name: str = "Mosh",
        last_name: str = "Israeli",
        birthday: str = "1990-01-01",
    ) -> User:
        return user_service.add_user(
            UserCreate(
                user_id=user_id,
                first_name=first_name,
                last_name=last_name,
                birthday=birthday,
            )
        )

    return _create_user


@pytest.fixture
def cost_factory(ledger_service) -> Callable[..., CostEntry]:
    """Factory for admitting test costs through the ledger gatekeeper."""

    def _create_cost(
        owner_id: int = 123,
        category: str = "food",
        amount=Decimal("50"),
        description: str = "lunch",
        occurred_at: Optional[datetime] = None,
    ) -> CostEntry:
        return ledger_service.admit(
            CostCreate(
                description=description,
                category=category,
                owner_id=owner_id,
                amount=amount,
                occurred_at=occurred_at,
            )
        )

    return _create_cost


@pytest.fixture
def sample_user(user_factory) -> User:
    """Register the default user (id 123)."""
    return user_factory()


# =============================================================================
# LOG SINK FIXTURES
# =============================================================================


class RecordingLogSink:
    """Log sink that keeps emitted events in memory."""

    def __init__(self):
        self.events: list[LogEventCreate] = []
        self._cond = threading.Condition()

    def emit(self, event: LogEventCreate) -> None:
        with self._cond:
            self.events.append(event)
            self._cond.notify_all()

    def wait_for(
        self,
        predicate: Callable[[list[LogEventCreate]], bool],
        timeout: float = 2.0,
    ) -> bool:
        """Block until predicate(events) holds or timeout expires."""
        with self._cond:
            return self._cond.wait_for(lambda: predicate(self.events), timeout=timeout)

    def messages(self) -> list[str]:
        with self._cond:
            return [e.message for e in self.events]


@pytest.fixture
def log_sink() -> RecordingLogSink:
    """Provide an in-memory log sink."""
    return RecordingLogSink()


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, clock, log_sink) -> TestClient:
    """Provide FastAPI test client with test database, clock and log sink."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as c:
        # Replace the sink configured at startup
        app.state.log_sink = log_sink
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def bucket(report_json: dict, category: str) -> list[dict]:
    """Return the items of one category from a report response body."""
    for entry in report_json["categorizedEntries"]:
        if category in entry:
            return entry[category]
    raise KeyError(category)
