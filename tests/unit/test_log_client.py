"""
Unit tests for the log client.

Tests cover:
- HTTP sink payload and failure handling (requests mocked)
- Local sink storage
- Sink selection from settings
- Fire-and-forget dispatch with a bounded backlog
"""

import threading
from unittest.mock import MagicMock

import requests
from sqlalchemy.orm import sessionmaker

from cost_tracker.config.settings import Settings
from cost_tracker.observability import (
    HttpLogSink,
    LocalLogSink,
    LogDispatcher,
    build_log_sink,
    dispatch,
    endpoint_log_event,
    request_log_event,
)
from cost_tracker.repositories.sqlalchemy import SqlAlchemyLogRepository
from cost_tracker.services.log_service import LogEventCreate

from tests.conftest import RecordingLogSink


class TestEventBuilders:

    def test_request_event_message(self):
        event = request_log_event("costs", "GET", "/api/report", 200, 12.4)

        assert event.level == "info"
        assert event.service == "costs"
        assert event.status_code == 200
        assert event.message == "http request received (duration 12ms)"
        assert event.timestamp is not None

    def test_endpoint_event_has_no_status(self):
        event = endpoint_log_event("costs", "POST", "/api/add-cost",
                                   "endpoint accessed: POST /api/add-cost")

        assert event.status_code is None
        assert event.message == "endpoint accessed: POST /api/add-cost"


class TestHttpLogSink:

    def test_posts_payload_to_collector(self):
        """
        GIVEN an HTTP sink pointing at http://logs:3002/
        WHEN I emit an event
        THEN it POSTs the camelCase payload to /internal/logs
        """
        session = MagicMock(spec=requests.Session)
        sink = HttpLogSink("http://logs:3002/", timeout=1.5, session=session)

        sink.emit(LogEventCreate(level="info", service="costs", message="hi", status_code=201))

        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0] == "http://logs:3002/internal/logs"
        assert kwargs["timeout"] == 1.5
        assert kwargs["json"]["statusCode"] == 201
        assert kwargs["json"]["message"] == "hi"

    def test_connection_error_is_swallowed(self):
        session = MagicMock(spec=requests.Session)
        session.post.side_effect = requests.ConnectionError("collector down")
        sink = HttpLogSink("http://logs:3002", session=session)

        sink.emit(LogEventCreate(message="lost"))

        session.post.assert_called_once()

    def test_http_error_status_is_swallowed(self):
        session = MagicMock(spec=requests.Session)
        session.post.return_value.raise_for_status.side_effect = requests.HTTPError("500")
        sink = HttpLogSink("http://logs:3002", session=session)

        sink.emit(LogEventCreate(message="rejected"))


class TestLocalLogSink:

    def test_stores_event(self, test_engine):
        factory = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
        sink = LocalLogSink(session_factory=factory)

        sink.emit(LogEventCreate(timestamp="2024-06-15T10:00:00Z", message="stored"))

        db = factory()
        try:
            assert [e.message for e in SqlAlchemyLogRepository(db).list_recent()] == ["stored"]
        finally:
            db.close()

    def test_invalid_event_is_swallowed(self, test_engine):
        factory = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
        sink = LocalLogSink(session_factory=factory)

        sink.emit(LogEventCreate(timestamp="garbage"))

        db = factory()
        try:
            assert SqlAlchemyLogRepository(db).list_recent() == []
        finally:
            db.close()


class TestSinkSelection:

    def test_http_sink_when_url_configured(self):
        settings = Settings(logs_service_url="http://logs:3002", _env_file=None)

        assert isinstance(build_log_sink(settings), HttpLogSink)

    def test_local_sink_by_default(self):
        settings = Settings(_env_file=None)

        assert isinstance(build_log_sink(settings), LocalLogSink)


class TestDispatch:

    def test_dispatch_delivers_in_background(self):
        sink = RecordingLogSink()

        future = dispatch(sink, LogEventCreate(message="async"))
        future.result(timeout=2)

        assert sink.messages() == ["async"]

    def test_backlog_is_bounded(self):
        """
        GIVEN a dispatcher allowing two pending events and a stalled sink
        WHEN a third event is submitted
        THEN it is dropped, and room frees up once deliveries finish
        """
        release = threading.Event()

        class StalledSink(RecordingLogSink):
            def emit(self, event):
                release.wait(timeout=5)
                super().emit(event)

        sink = StalledSink()
        dispatcher = LogDispatcher(max_workers=1, max_pending=2)

        first = dispatcher.submit(sink, LogEventCreate(message="one"))
        second = dispatcher.submit(sink, LogEventCreate(message="two"))
        dropped = dispatcher.submit(sink, LogEventCreate(message="three"))

        assert first is not None
        assert second is not None
        assert dropped is None

        release.set()
        first.result(timeout=5)
        second.result(timeout=5)

        later = dispatcher.submit(sink, LogEventCreate(message="four"))
        assert later is not None
        later.result(timeout=5)
        assert sink.messages() == ["one", "two", "four"]
