"""SQLAlchemy implementations of LogRepository and DeveloperRepository."""

from sqlalchemy.orm import Session

from cost_tracker.core.timezone import to_utc_naive, from_utc_naive
from cost_tracker.domain.models import Developer, LogEvent
from cost_tracker.repositories.sqlalchemy.database import store_errors
from cost_tracker.repositories.sqlalchemy.orm_models import DeveloperORM, LogEventORM


class SqlAlchemyLogRepository:
    """SQLAlchemy-backed log event store."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, event: LogEvent) -> LogEvent:
        """Persist a log event."""
        orm_event = LogEventORM(
            log_id=event.log_id,
            timestamp=to_utc_naive(event.timestamp),
            level=event.level,
            service=event.service,
            endpoint=event.endpoint,
            method=event.method,
            message=event.message,
            status_code=event.status_code,
        )
        with store_errors(self._db, "write log"):
            self._db.add(orm_event)
            self._db.commit()
            self._db.refresh(orm_event)
        return self._to_domain(orm_event)

    def list_recent(self) -> list[LogEvent]:
        """List all log events, newest first."""
        with store_errors(self._db, "read logs"):
            orm_events = (
                self._db.query(LogEventORM)
                .order_by(LogEventORM.timestamp.desc())
                .all()
            )
        return [self._to_domain(e) for e in orm_events]

    @staticmethod
    def _to_domain(orm: LogEventORM) -> LogEvent:
        return LogEvent(
            log_id=orm.log_id,
            timestamp=from_utc_naive(orm.timestamp),
            level=orm.level,
            service=orm.service,
            endpoint=orm.endpoint,
            method=orm.method,
            message=orm.message,
            status_code=orm.status_code,
        )


class SqlAlchemyDeveloperRepository:
    """SQLAlchemy-backed team roster."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, developer: Developer) -> Developer:
        orm_dev = DeveloperORM(
            first_name=developer.first_name,
            last_name=developer.last_name,
        )
        with store_errors(self._db, "add developer"):
            self._db.add(orm_dev)
            self._db.commit()
        return developer

    def list_all(self) -> list[Developer]:
        with store_errors(self._db, "read developers"):
            orm_devs = (
                self._db.query(DeveloperORM)
                .order_by(DeveloperORM.developer_id)
                .all()
            )
        return [Developer(first_name=d.first_name, last_name=d.last_name) for d in orm_devs]

    def count(self) -> int:
        with store_errors(self._db, "read developers"):
            return self._db.query(DeveloperORM).count()
