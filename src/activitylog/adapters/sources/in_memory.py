"""In-memory source adapter for log entries."""

from activitylog.core.models import LogEntry


class InMemoryLogSource:
    """In-memory implementation of LogSourcePort.

    Stores log entries in a list. Suitable for testing and for callers
    that build entries programmatically.
    """

    def __init__(self, entries: list[LogEntry] | None = None) -> None:
        self._entries: list[LogEntry] = list(entries or [])

    def write(self, entry: LogEntry) -> None:
        """Append a log entry to the source."""
        self._entries.append(entry)

    def load(self) -> tuple[LogEntry, ...]:
        """Return a snapshot of the entries in write order."""
        return tuple(self._entries)
