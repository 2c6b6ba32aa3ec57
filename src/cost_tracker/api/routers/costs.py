"""Cost ledger and monthly report endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from cost_tracker.api.deps import get_cost_ledger_service, get_report_engine, log_access
from cost_tracker.api.schemas import CostCreateRequest, CostResponse, ReportResponse
from cost_tracker.core.exceptions import StoreError
from cost_tracker.services import CostCreate, CostLedgerService, ReportEngine

router = APIRouter(prefix="/api", tags=["costs"])


@router.post(
    "/add-cost",
    response_model=CostResponse,
    dependencies=[Depends(log_access("endpoint accessed: POST /api/add-cost"))],
)
def add_cost(
    data: CostCreateRequest,
    ledger: CostLedgerService = Depends(get_cost_ledger_service),
) -> CostResponse:
    """Admit a new cost entry into the ledger."""
    try:
        entry = ledger.admit(
            CostCreate(
                description=data.description,
                category=data.category,
                owner_id=data.owner_id,
                amount=data.amount,
                occurred_at=data.occurred_at,
            )
        )
    except StoreError as exc:
        raise StoreError("failed to add cost") from exc
    return CostResponse.from_domain(entry)


@router.get(
    "/report",
    response_model=ReportResponse,
    dependencies=[Depends(log_access("endpoint accessed: GET /api/report"))],
)
def get_report(
    owner_id: Optional[str] = Query(None, alias="ownerId"),
    year: Optional[str] = Query(None),
    month: Optional[str] = Query(None),
    engine: ReportEngine = Depends(get_report_engine),
) -> ReportResponse:
    """Get an owner's itemized costs for a month, grouped by category."""
    try:
        report = engine.get_report(owner_id, year, month)
    except StoreError as exc:
        raise StoreError("failed to generate report") from exc
    return ReportResponse.from_domain(report)
