"""Monthly report models (derived from the cost ledger)."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from cost_tracker.domain.models.enums import CostCategory


@dataclass(frozen=True)
class ReportItem:
    """One itemized cost inside a category bucket."""

    amount: Decimal
    description: str
    day_of_month: int


def empty_categories() -> dict[CostCategory, list[ReportItem]]:
    """Return one empty bucket per category, in canonical order."""
    return {category: [] for category in CostCategory}


@dataclass
class MonthlyReport:
    """
    Itemized costs of one owner for one calendar month, grouped by category.

    Cached once the month is closed. Never edited afterwards; rebuilding it
    from the ledger always yields the same content.
    """

    owner_id: int
    year: int
    month: int
    categorized_entries: dict[CostCategory, list[ReportItem]] = field(
        default_factory=empty_categories
    )
    computed_at: Optional[datetime] = field(default=None)

    @property
    def key(self) -> tuple[int, int, int]:
        """Cache key of this report."""
        return (self.owner_id, self.year, self.month)

    def add(self, category: CostCategory, item: ReportItem) -> None:
        """Append an item to the bucket for ``category``."""
        self.categorized_entries[category].append(item)
