"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cost_tracker.config.settings import get_settings
from cost_tracker.config.logging_config import setup_logging
from cost_tracker.repositories.sqlalchemy import SqlAlchemyDeveloperRepository
from cost_tracker.repositories.sqlalchemy.database import init_db, get_session
from cost_tracker.api.routers import costs_router, users_router, logs_router, about_router
from cost_tracker.core.exceptions import AppError
from cost_tracker.observability import build_log_sink, dispatch, request_log_event
from cost_tracker.services import AboutService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    setup_logging()
    init_db()

    db = get_session()
    try:
        AboutService(SqlAlchemyDeveloperRepository(db)).seed_developers(settings.developers)
    finally:
        db.close()

    app.state.log_sink = build_log_sink(settings)
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Personal cost tracking with cached monthly reports",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(costs_router)
app.include_router(users_router)
app.include_router(logs_router)
app.include_router(about_router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Report every request to the log sink once it has been handled."""
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        sink = getattr(request.app.state, "log_sink", None)
        if sink is not None:
            dispatch(
                sink,
                request_log_event(
                    get_settings().service_name,
                    request.method,
                    request.url.path,
                    status_code,
                    (time.perf_counter() - started) * 1000,
                ),
            )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": -1, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies get the same error shape as service errors."""
    return JSONResponse(
        status_code=400,
        content={"code": -1, "message": "invalid request body"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"code": -1, "message": "internal server error"},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
