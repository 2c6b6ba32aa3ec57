"""Team information endpoint."""

from fastapi import APIRouter, Depends

from cost_tracker.api.deps import get_about_service, log_access
from cost_tracker.api.schemas import DeveloperResponse
from cost_tracker.services import AboutService

router = APIRouter(prefix="/api", tags=["about"])


@router.get(
    "/about",
    response_model=list[DeveloperResponse],
    dependencies=[Depends(log_access("endpoint accessed: GET /api/about"))],
)
def about(service: AboutService = Depends(get_about_service)) -> list[DeveloperResponse]:
    """List the developers (first and last names only)."""
    return [
        DeveloperResponse(first_name=d.first_name, last_name=d.last_name)
        for d in service.list_developers()
    ]
