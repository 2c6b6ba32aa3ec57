"""SQLAlchemy implementation of ReportCacheRepository."""

import json
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cost_tracker.core.timezone import now_local, to_utc_naive, from_utc_naive
from cost_tracker.domain.models import (
    CostCategory,
    MonthlyReport,
    ReportItem,
    empty_categories,
)
from cost_tracker.repositories.sqlalchemy.database import store_errors
from cost_tracker.repositories.sqlalchemy.orm_models import MonthlyReportORM


class SqlAlchemyReportCacheRepository:
    """
    SQLAlchemy-backed cache of closed-month reports.

    The unique constraint on (owner_id, year, month) is what makes
    insert_if_absent safe under concurrent writers: the database rejects the
    second insert and the existing row stands.
    """

    def __init__(self, db: Session):
        self._db = db

    def get(self, owner_id: int, year: int, month: int) -> Optional[MonthlyReport]:
        """Get the cached report for a key, if one exists."""
        with store_errors(self._db, "read report cache"):
            orm_report = (
                self._db.query(MonthlyReportORM)
                .filter(
                    MonthlyReportORM.owner_id == owner_id,
                    MonthlyReportORM.year == year,
                    MonthlyReportORM.month == month,
                )
                .first()
            )
        return self._to_domain(orm_report) if orm_report else None

    def insert_if_absent(self, report: MonthlyReport) -> bool:
        """Insert a report; return False if the key is already stored."""
        orm_report = MonthlyReportORM(
            owner_id=report.owner_id,
            year=report.year,
            month=report.month,
            entries_json=self.dump_entries(report.categorized_entries),
            computed_at=to_utc_naive(report.computed_at or now_local()),
        )
        with store_errors(self._db, "write report cache"):
            try:
                self._db.add(orm_report)
                self._db.commit()
            except IntegrityError:
                # Another writer stored this key first
                self._db.rollback()
                return False
        return True

    def count(self, owner_id: int, year: int, month: int) -> int:
        """Number of stored rows for a key."""
        with store_errors(self._db, "read report cache"):
            return (
                self._db.query(MonthlyReportORM)
                .filter(
                    MonthlyReportORM.owner_id == owner_id,
                    MonthlyReportORM.year == year,
                    MonthlyReportORM.month == month,
                )
                .count()
            )

    @staticmethod
    def dump_entries(entries: dict[CostCategory, list[ReportItem]]) -> str:
        """Serialize buckets as the ordered list of single-key objects."""
        payload = [
            {
                category.value: [
                    {
                        "amount": str(item.amount),
                        "description": item.description,
                        "day_of_month": item.day_of_month,
                    }
                    for item in items
                ]
            }
            for category, items in entries.items()
        ]
        return json.dumps(payload)

    @staticmethod
    def load_entries(raw: str) -> dict[CostCategory, list[ReportItem]]:
        """Inverse of dump_entries; missing categories come back empty."""
        entries = empty_categories()
        for bucket in json.loads(raw):
            for name, items in bucket.items():
                entries[CostCategory(name)] = [
                    ReportItem(
                        amount=Decimal(item["amount"]),
                        description=item["description"],
                        day_of_month=item["day_of_month"],
                    )
                    for item in items
                ]
        return entries

    @classmethod
    def _to_domain(cls, orm: MonthlyReportORM) -> MonthlyReport:
        """Convert ORM model to domain model."""
        return MonthlyReport(
            owner_id=orm.owner_id,
            year=orm.year,
            month=orm.month,
            categorized_entries=cls.load_entries(orm.entries_json),
            computed_at=from_utc_naive(orm.computed_at),
        )
