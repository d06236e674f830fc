"""Chronological ordering of a single entry group."""

from collections.abc import Iterable
from datetime import datetime

from activitylog.core.models import LogEntry


def chronological_key(entry: LogEntry) -> tuple[datetime, str, str]:
    """Sort key: timestamp, then action+resource case-insensitively."""
    description = entry.action + entry.resource
    return (entry.timestamp, description.casefold(), description)


def sort_group(entries: Iterable[LogEntry]) -> list[LogEntry]:
    """Return the entries in chronological order.

    Entries with the same timestamp are ordered alphabetically by action
    and resource.
    """
    return sorted(entries, key=chronological_key)
