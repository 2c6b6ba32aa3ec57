"""Log event and developer repository protocols."""

from typing import Protocol

from cost_tracker.domain.models import Developer, LogEvent


class LogRepository(Protocol):
    """Interface for collected log events."""

    def create(self, event: LogEvent) -> LogEvent:
        """Persist a log event."""
        ...

    def list_recent(self) -> list[LogEvent]:
        """List all log events, newest first."""
        ...


class DeveloperRepository(Protocol):
    """Interface for the team roster."""

    def create(self, developer: Developer) -> Developer:
        ...

    def list_all(self) -> list[Developer]:
        ...

    def count(self) -> int:
        ...
