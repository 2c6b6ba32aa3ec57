"""CostEntry domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from cost_tracker.domain.models.enums import CostCategory


@dataclass(frozen=True)
class CostEntry:
    """
    Ledger record for a single expense (source of truth).

    Entries are append-only: created once, never edited or deleted.
    occurred_at is never earlier than the moment the entry was admitted,
    which is what keeps the entry set of a closed month fixed.
    """

    cost_id: str
    description: str
    category: CostCategory
    owner_id: int
    amount: Decimal
    occurred_at: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.category, CostCategory):
            object.__setattr__(self, "category", CostCategory(self.category))
