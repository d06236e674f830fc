"""Plain-text rendering of activity reports."""

from collections.abc import Iterable

from activitylog.core.config import DEFAULT_FORMAT, ReportFormat
from activitylog.core.models import LogEntry


def render_entry(entry: LogEntry, fmt: ReportFormat = DEFAULT_FORMAT) -> str:
    """Render an entry as ``"username, timestamp, action, resource"``."""
    timestamp = entry.timestamp.strftime(fmt.timestamp_pattern)
    return f"{entry.username}, {timestamp}, {entry.action}, {entry.resource}"


def render_report(
    title: str,
    lines: Iterable[str],
    fmt: ReportFormat = DEFAULT_FORMAT,
) -> str:
    """Wrap report lines in a titled bracket block.

    Args:
        title: Report name written on the opening line.
        lines: Result lines, one per row.
        fmt: Supplies the indentation for each row.

    Returns:
        ``"<title> [\\n"``, one indented line per row, then ``"]\\n"``.
    """
    parts = [f"{title} [\n"]
    for line in lines:
        parts.append(f"{fmt.indent}{line}\n")
    parts.append("]\n")
    return "".join(parts)
