"""activitylog - frequency, date and hour reports over user activity logs."""

from activitylog.adapters.sources import InMemoryLogSource, TextFileLogSource
from activitylog.core.config import DEFAULT_FORMAT, ReportFormat
from activitylog.core.errors import (
    ActivityLogError,
    InvalidParameterError,
    LogSourceError,
)
from activitylog.core.models import FrequencyEntry, LogEntry
from activitylog.core.ports import LogSourcePort
from activitylog.core.reports import ReportManager

__all__ = [
    "DEFAULT_FORMAT",
    "ActivityLogError",
    "FrequencyEntry",
    "InMemoryLogSource",
    "InvalidParameterError",
    "LogEntry",
    "LogSourceError",
    "LogSourcePort",
    "ReportFormat",
    "ReportManager",
    "TextFileLogSource",
]
