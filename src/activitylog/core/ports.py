"""Port interfaces for log entry sources.

These protocols define the contracts that source adapters must implement.
The core domain depends only on these interfaces, not concrete implementations.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from activitylog.core.models import LogEntry


@runtime_checkable
class LogSourcePort(Protocol):
    """Port for loading a snapshot of log entries.

    Adapters implementing this protocol supply the entries a report is
    built from. Examples: TextFileLogSource, InMemoryLogSource.
    """

    def load(self) -> Sequence[LogEntry]:
        """Load all log entries.

        Returns:
            Sequence of LogEntry objects in source order.

        Raises:
            LogSourceError: If the source cannot supply entries.
        """
        ...
