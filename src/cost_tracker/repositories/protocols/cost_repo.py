"""Cost ledger repository protocol."""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from cost_tracker.domain.models import CostEntry


class CostRepository(Protocol):
    """Interface for the append-only cost ledger."""

    def create(self, entry: CostEntry) -> CostEntry:
        """Append a new entry to the ledger."""
        ...

    def list_for_owner_between(
        self,
        owner_id: int,
        start: datetime,
        end: datetime,
    ) -> list[CostEntry]:
        """
        List an owner's entries with start <= occurred_at < end.

        Results follow ledger insertion order.
        """
        ...

    def sum_for_owner(self, owner_id: int) -> Decimal:
        """Total amount of all of an owner's entries (0 when none)."""
        ...
