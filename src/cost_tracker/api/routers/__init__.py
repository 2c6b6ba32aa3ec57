"""API routers package."""

from cost_tracker.api.routers.costs import router as costs_router
from cost_tracker.api.routers.users import router as users_router
from cost_tracker.api.routers.logs import router as logs_router
from cost_tracker.api.routers.about import router as about_router

__all__ = [
    "costs_router",
    "users_router",
    "logs_router",
    "about_router",
]
