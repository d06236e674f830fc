"""NDJSON encoder for log entries and activity frequencies."""

import json
from collections.abc import Iterable

from activitylog.core.models import FrequencyEntry, LogEntry


def _join(objects: Iterable[dict[str, object]]) -> str:
    lines = [json.dumps(obj) for obj in objects]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def encode_entries(entries: Iterable[LogEntry]) -> str:
    """Encode log entries to newline-delimited JSON.

    Args:
        entries: An iterable of LogEntry objects.

    Returns:
        NDJSON string with one JSON object per line.
        Timestamps are ISO-8601 strings. Empty string if no entries.
    """
    return _join(
        {
            "username": entry.username,
            "timestamp": entry.timestamp.isoformat(),
            "action": entry.action,
            "resource": entry.resource,
        }
        for entry in entries
    )


def encode_frequencies(entries: Iterable[FrequencyEntry]) -> str:
    """Encode ranked activities to newline-delimited JSON."""
    return _join({"activity": e.activity, "count": e.count} for e in entries)
