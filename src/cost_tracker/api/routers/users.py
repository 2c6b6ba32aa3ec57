"""User registry endpoints."""

from fastapi import APIRouter, Depends

from cost_tracker.api.deps import get_user_service, log_access
from cost_tracker.api.schemas import UserCreateRequest, UserResponse, UserSummaryResponse
from cost_tracker.services import UserCreate, UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "",
    response_model=UserResponse,
    dependencies=[Depends(log_access("endpoint accessed: POST /api/users"))],
)
def add_user(
    data: UserCreateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Register a new user."""
    user = service.add_user(
        UserCreate(
            user_id=data.id,
            first_name=data.first_name,
            last_name=data.last_name,
            birthday=data.birthday,
        )
    )
    return UserResponse.from_domain(user)


@router.get(
    "",
    response_model=list[UserResponse],
    dependencies=[Depends(log_access("endpoint accessed: GET /api/users"))],
)
def list_users(service: UserService = Depends(get_user_service)) -> list[UserResponse]:
    """List all users."""
    return [UserResponse.from_domain(u) for u in service.list_users()]


@router.get(
    "/{user_id}",
    response_model=UserSummaryResponse,
    dependencies=[Depends(log_access("endpoint accessed: GET /api/users/:id"))],
)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserSummaryResponse:
    """Get a user with the total of all their costs."""
    return UserSummaryResponse.from_domain(service.get_user_summary(user_id))
