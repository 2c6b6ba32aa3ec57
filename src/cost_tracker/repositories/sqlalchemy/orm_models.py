"""SQLAlchemy ORM model definitions.

Timestamps are stored as naive UTC; repositories convert at the boundary.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    DateTime,
    Text,
    Index,
    UniqueConstraint,
    Enum as SqlEnum,
)
from sqlalchemy.types import TypeDecorator

from cost_tracker.repositories.sqlalchemy.database import Base
from cost_tracker.domain.models.enums import CostCategory


class DecimalText(TypeDecorator):
    """Exact decimal stored as text (SQLite has no native decimal type)."""

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class UserORM(Base):
    """SQLAlchemy model for User."""

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    birthday = Column(Date, nullable=False)


class CostORM(Base):
    """SQLAlchemy model for CostEntry (ledger row)."""

    __tablename__ = "costs"

    # Insertion sequence; report buckets follow this order
    seq = Column(Integer, primary_key=True, autoincrement=True)
    cost_id = Column(String(36), unique=True, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(SqlEnum(CostCategory), nullable=False)
    owner_id = Column(Integer, nullable=False)
    amount = Column(DecimalText, nullable=False)
    occurred_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("ix_costs_owner_occurred", "owner_id", "occurred_at"),
    )


class MonthlyReportORM(Base):
    """SQLAlchemy model for a cached MonthlyReport."""

    __tablename__ = "reports"

    report_id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    entries_json = Column(Text, nullable=False)
    computed_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("owner_id", "year", "month", name="uq_reports_owner_year_month"),
    )


class LogEventORM(Base):
    """SQLAlchemy model for a collected log event."""

    __tablename__ = "logs"

    log_id = Column(String(36), primary_key=True)
    timestamp = Column(DateTime, nullable=False, index=True)
    level = Column(String(20), nullable=False)
    service = Column(String(100), nullable=False)
    endpoint = Column(Text, nullable=False)
    method = Column(String(10), nullable=False)
    message = Column(Text, nullable=False)
    status_code = Column(Integer, nullable=True)


class DeveloperORM(Base):
    """SQLAlchemy model for a team member."""

    __tablename__ = "developers"

    developer_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
