"""Client side of centralized log collection.

Every service reports request and endpoint-access events to the log
collector. Emitting is fire-and-forget: a sink never raises and a failed
delivery is only reported to the local logger.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional, Protocol

import requests
from sqlalchemy.orm import Session

from cost_tracker.config.settings import Settings
from cost_tracker.core.exceptions import AppError
from cost_tracker.core.timezone import now_local
from cost_tracker.repositories.sqlalchemy import SqlAlchemyLogRepository, get_session
from cost_tracker.services.log_service import LogEventCreate, LogService

logger = logging.getLogger(__name__)

MAX_PENDING_EVENTS = 1000


class LogSink(Protocol):
    """Destination for log events."""

    def emit(self, event: LogEventCreate) -> None:
        """Deliver an event; must never raise."""
        ...


class HttpLogSink:
    """Forwards events to a remote collector's POST /internal/logs."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 2.0,
        session: Optional[requests.Session] = None,
    ):
        self._url = base_url.rstrip("/") + "/internal/logs"
        self._timeout = timeout
        self._session = session or requests.Session()

    def emit(self, event: LogEventCreate) -> None:
        try:
            response = self._session.post(self._url, json=event.to_payload(), timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("logclient: failed to send log to %s: %s", self._url, exc)


class LocalLogSink:
    """Stores events in this process's own log table."""

    def __init__(self, session_factory: Callable[[], Session] = get_session):
        self._session_factory = session_factory

    def emit(self, event: LogEventCreate) -> None:
        db = self._session_factory()
        try:
            LogService(SqlAlchemyLogRepository(db)).record(event)
        except AppError as exc:
            logger.warning("logclient: failed to store log locally: %s", exc.message)
        finally:
            db.close()


class LogDispatcher:
    """
    Runs sink deliveries on a small thread pool.

    At most ``max_pending`` events may be queued or in flight; further events
    are dropped until a delivery finishes, so a slow collector cannot grow
    the queue without limit.
    """

    def __init__(self, max_workers: int = 2, max_pending: int = MAX_PENDING_EVENTS):
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="log-sink")
        self._slots = threading.BoundedSemaphore(max_pending)

    def submit(self, sink: LogSink, event: LogEventCreate) -> Optional[Future]:
        """Queue a delivery; return None if the event was dropped."""
        if not self._slots.acquire(blocking=False):
            logger.warning("logclient: delivery queue full, dropping event for %s", event.endpoint)
            return None
        try:
            return self._executor.submit(self._deliver, sink, event)
        except RuntimeError:
            # Executor already shut down (interpreter exit)
            self._slots.release()
            raise

    def _deliver(self, sink: LogSink, event: LogEventCreate) -> None:
        try:
            sink.emit(event)
        finally:
            self._slots.release()


_dispatcher = LogDispatcher()


def dispatch(sink: LogSink, event: LogEventCreate) -> Optional[Future]:
    """Hand an event to a worker thread and return without waiting."""
    return _dispatcher.submit(sink, event)


def build_log_sink(settings: Settings) -> LogSink:
    """HTTP sink when a collector URL is configured, local storage otherwise."""
    if settings.logs_service_url:
        return HttpLogSink(
            settings.logs_service_url,
            timeout=settings.log_forward_timeout_seconds,
        )
    return LocalLogSink()


def request_log_event(
    service: str,
    method: str,
    endpoint: str,
    status_code: int,
    duration_ms: float,
) -> LogEventCreate:
    """Event describing a finished HTTP request."""
    return LogEventCreate(
        timestamp=now_local(),
        level="info",
        service=service,
        endpoint=endpoint,
        method=method,
        message=f"http request received (duration {duration_ms:.0f}ms)",
        status_code=status_code,
    )


def endpoint_log_event(
    service: str,
    method: str,
    endpoint: str,
    message: str,
) -> LogEventCreate:
    """Event recording that a specific endpoint was accessed."""
    return LogEventCreate(
        timestamp=now_local(),
        level="info",
        service=service,
        endpoint=endpoint,
        method=method,
        message=message,
    )
