"""Log forwarding to the central log collector."""

from cost_tracker.observability.log_client import (
    LogSink,
    HttpLogSink,
    LocalLogSink,
    LogDispatcher,
    build_log_sink,
    dispatch,
    request_log_event,
    endpoint_log_event,
)

__all__ = [
    "LogSink",
    "HttpLogSink",
    "LocalLogSink",
    "LogDispatcher",
    "build_log_sink",
    "dispatch",
    "request_log_event",
    "endpoint_log_event",
]
