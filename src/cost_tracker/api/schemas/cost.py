"""Pydantic schemas for cost and report endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cost_tracker.domain.models import CostEntry, MonthlyReport


class CostCreateRequest(BaseModel):
    """
    Request body for POST /api/add-cost.

    Fields are deliberately untyped: the ledger service validates them so
    that every rejection uses the same error shape.
    """

    model_config = ConfigDict(populate_by_name=True)

    description: Any = None
    category: Any = None
    owner_id: Any = Field(default=None, alias="ownerId")
    amount: Any = None
    occurred_at: Any = Field(default=None, alias="occurredAt")


class CostResponse(BaseModel):
    """Response schema for a created cost entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    description: str
    category: str
    owner_id: int = Field(alias="ownerId")
    amount: float
    occurred_at: datetime = Field(alias="occurredAt")

    @classmethod
    def from_domain(cls, entry: CostEntry) -> "CostResponse":
        return cls(
            id=entry.cost_id,
            description=entry.description,
            category=entry.category.value,
            owner_id=entry.owner_id,
            amount=float(entry.amount),
            occurred_at=entry.occurred_at,
        )


class ReportItemResponse(BaseModel):
    """One itemized cost in a report bucket."""

    model_config = ConfigDict(populate_by_name=True)

    amount: float
    description: str
    day_of_month: int = Field(alias="dayOfMonth")


class ReportResponse(BaseModel):
    """
    Response schema for GET /api/report.

    categorizedEntries is a list of five single-key objects, one per
    category, in canonical order.
    """

    model_config = ConfigDict(populate_by_name=True)

    owner_id: int = Field(alias="ownerId")
    year: int
    month: int
    categorized_entries: list[dict[str, list[ReportItemResponse]]] = Field(
        alias="categorizedEntries"
    )

    @classmethod
    def from_domain(cls, report: MonthlyReport) -> "ReportResponse":
        # Decimal amounts become plain numbers only here, at the wire boundary
        buckets = [
            {
                category.value: [
                    ReportItemResponse(
                        amount=float(item.amount),
                        description=item.description,
                        day_of_month=item.day_of_month,
                    )
                    for item in items
                ]
            }
            for category, items in report.categorized_entries.items()
        ]
        return cls(
            owner_id=report.owner_id,
            year=report.year,
            month=report.month,
            categorized_entries=buckets,
        )
