"""SQLAlchemy implementation of CostRepository."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from cost_tracker.core.timezone import to_utc_naive, from_utc_naive
from cost_tracker.domain.models import CostEntry
from cost_tracker.repositories.sqlalchemy.database import store_errors
from cost_tracker.repositories.sqlalchemy.orm_models import CostORM


class SqlAlchemyCostRepository:
    """SQLAlchemy-backed cost ledger."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, entry: CostEntry) -> CostEntry:
        """Append a new entry to the ledger."""
        orm_cost = self._to_orm(entry)
        with store_errors(self._db, "add cost"):
            self._db.add(orm_cost)
            self._db.commit()
            self._db.refresh(orm_cost)
        return self._to_domain(orm_cost)

    def list_for_owner_between(
        self,
        owner_id: int,
        start: datetime,
        end: datetime,
    ) -> list[CostEntry]:
        """List an owner's entries in [start, end), in insertion order."""
        with store_errors(self._db, "read costs"):
            orm_costs = (
                self._db.query(CostORM)
                .filter(
                    CostORM.owner_id == owner_id,
                    CostORM.occurred_at >= to_utc_naive(start),
                    CostORM.occurred_at < to_utc_naive(end),
                )
                .order_by(CostORM.seq)
                .all()
            )
        return [self._to_domain(c) for c in orm_costs]

    def sum_for_owner(self, owner_id: int) -> Decimal:
        """Total amount of all of an owner's entries."""
        # Amounts are stored as text, so the sum is done here to stay exact
        with store_errors(self._db, "read costs"):
            rows = (
                self._db.query(CostORM.amount)
                .filter(CostORM.owner_id == owner_id)
                .all()
            )
        return sum((amount for (amount,) in rows), Decimal("0"))

    @staticmethod
    def _to_orm(entry: CostEntry) -> CostORM:
        """Convert domain model to ORM model."""
        return CostORM(
            cost_id=entry.cost_id,
            description=entry.description,
            category=entry.category,
            owner_id=entry.owner_id,
            amount=entry.amount,
            occurred_at=to_utc_naive(entry.occurred_at),
        )

    @staticmethod
    def _to_domain(orm: CostORM) -> CostEntry:
        """Convert ORM model to domain model."""
        return CostEntry(
            cost_id=orm.cost_id,
            description=orm.description,
            category=orm.category,
            owner_id=orm.owner_id,
            amount=orm.amount,
            occurred_at=from_utc_naive(orm.occurred_at),
        )
