"""Source adapters implementing LogSourcePort."""

from activitylog.adapters.sources.in_memory import InMemoryLogSource
from activitylog.adapters.sources.text_file import (
    TextFileLogSource,
    parse_log_line,
    parse_timestamp,
)

__all__ = [
    "InMemoryLogSource",
    "TextFileLogSource",
    "parse_log_line",
    "parse_timestamp",
]
