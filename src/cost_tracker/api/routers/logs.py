"""Log collection endpoints."""

from fastapi import APIRouter, Depends

from cost_tracker.api.deps import get_log_service
from cost_tracker.api.schemas import LogEventRequest, LogEventResponse
from cost_tracker.services import LogService

router = APIRouter(tags=["logs"])


@router.post("/internal/logs", response_model=LogEventResponse)
def write_log(
    data: LogEventRequest,
    service: LogService = Depends(get_log_service),
) -> LogEventResponse:
    """Store a log event sent by one of the services."""
    return LogEventResponse.from_domain(service.record(data.to_create()))


@router.get("/api/logs", response_model=list[LogEventResponse])
def list_logs(service: LogService = Depends(get_log_service)) -> list[LogEventResponse]:
    """List all collected log events, newest first."""
    return [LogEventResponse.from_domain(e) for e in service.list_logs()]
