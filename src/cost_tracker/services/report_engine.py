"""Report engine for monthly, per-category cost reports."""

import logging
from typing import Any, Optional

import pytz

from cost_tracker.core.exceptions import StoreError, ValidationError
from cost_tracker.core.months import MAX_YEAR, MIN_YEAR, is_month_closed, month_bounds
from cost_tracker.core.parsing import parse_int
from cost_tracker.core.timezone import Clock, get_ledger_tz, now_local
from cost_tracker.domain.models import MonthlyReport, ReportItem
from cost_tracker.repositories.protocols import CostRepository, ReportCacheRepository

logger = logging.getLogger(__name__)


class ReportEngine:
    """
    Engine for computing monthly reports from the ledger.

    Reports for closed months are computed once and then served from the
    report cache. Open months are always recomputed and never cached.
    Caching is sound because the ledger refuses backdated entries: once a
    month has ended, nothing can be added to it.
    """

    def __init__(
        self,
        cost_repo: CostRepository,
        cache_repo: ReportCacheRepository,
        clock: Clock = now_local,
        tz: Optional[pytz.BaseTzInfo] = None,
    ):
        self._cost_repo = cost_repo
        self._cache_repo = cache_repo
        self._clock = clock
        self._tz = tz or get_ledger_tz()

    def get_report(self, owner_id: Any, year: Any, month: Any) -> MonthlyReport:
        """
        Get the itemized report of an owner's costs for a calendar month.

        Raises:
            ValidationError: owner_id not an integer, year outside
                [1970, 3000] or month outside [1, 12]
            StoreError: the cache lookup or ledger scan failed
        """
        owner_id, year, month = self._validate(owner_id, year, month)

        closed = is_month_closed(year, month, self._clock(), self._tz)
        if closed:
            cached = self._cache_repo.get(owner_id, year, month)
            if cached is not None:
                return cached

        report = self.compute(owner_id, year, month)

        if closed:
            self._store(report)
        return report

    def compute(self, owner_id: int, year: int, month: int) -> MonthlyReport:
        """Build a report by scanning the ledger, bypassing the cache."""
        start, end = month_bounds(year, month, self._tz)
        entries = self._cost_repo.list_for_owner_between(owner_id, start, end)

        report = MonthlyReport(owner_id=owner_id, year=year, month=month)
        for entry in entries:
            report.add(
                entry.category,
                ReportItem(
                    amount=entry.amount,
                    description=entry.description,
                    day_of_month=entry.occurred_at.astimezone(self._tz).day,
                ),
            )
        report.computed_at = self._clock()
        return report

    def _store(self, report: MonthlyReport) -> None:
        """Best-effort cache population; failures never reach the caller."""
        try:
            inserted = self._cache_repo.insert_if_absent(report)
        except StoreError as exc:
            logger.debug("Report cache write failed for %s: %s", report.key, exc)
            return
        if not inserted:
            logger.debug("Report %s already cached by a concurrent request", report.key)

    @staticmethod
    def _validate(owner_id: Any, year: Any, month: Any) -> tuple[int, int, int]:
        owner_id = parse_int(owner_id, "ownerId")
        year = parse_int(year, "year")
        month = parse_int(month, "month")
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise ValidationError("invalid year")
        if not 1 <= month <= 12:
            raise ValidationError("invalid month")
        return owner_id, year, month
