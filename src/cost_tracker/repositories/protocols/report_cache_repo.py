"""Report cache repository protocol for derived monthly reports."""

from typing import Protocol, Optional

from cost_tracker.domain.models import MonthlyReport


class ReportCacheRepository(Protocol):
    """Keyed store of precomputed reports, keyed by (owner_id, year, month)."""

    def get(self, owner_id: int, year: int, month: int) -> Optional[MonthlyReport]:
        """Get the cached report for a key, if one exists."""
        ...

    def insert_if_absent(self, report: MonthlyReport) -> bool:
        """
        Insert a report unless its key is already present.

        Returns False when another writer already stored the key; the
        existing row is left untouched. Must be atomic with respect to
        concurrent callers. Other store failures raise StoreError.
        """
        ...

    def count(self, owner_id: int, year: int, month: int) -> int:
        """Number of stored rows for a key (0 or 1)."""
        ...
