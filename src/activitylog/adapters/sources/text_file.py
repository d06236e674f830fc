"""Text file source adapter for user activity logs.

Each non-blank line holds one record::

    username, MM/DD/YYYY hh:mm:ssAM, action, resource

An optional ``USERNAME, TIMESTAMP, ACTION, RESOURCE`` header line is skipped.
"""

import logging
import re
from datetime import datetime
from pathlib import Path

from activitylog.core.errors import LogSourceError
from activitylog.core.models import LogEntry

logger = logging.getLogger(__name__)

_HEADER_FIELDS = ("username", "timestamp", "action", "resource")

_TIMESTAMP = re.compile(
    r"(?P<month>[0-9]{2})/(?P<day>[0-9]{2})/(?P<year>[0-9]{4})\s+"
    r"(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"\s*(?P<meridiem>[AaPp][Mm])?"
)


def parse_timestamp(text: str) -> datetime:
    """Parse a ``MM/DD/YYYY hh:mm:ssAM`` timestamp.

    A 12-hour clock is used when an AM/PM suffix is present, except that
    hours 13-23 are read as 24-hour times and ``00`` reads as 12.
    Without a suffix the hour is read on a 24-hour clock.

    Raises:
        ValueError: If the text is not a valid timestamp.
    """
    match = _TIMESTAMP.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    hour = int(match["hour"])
    meridiem = match["meridiem"]
    if meridiem is not None and hour <= 12:
        hour = hour % 12
        if meridiem.upper() == "PM":
            hour += 12
    return datetime(
        int(match["year"]),
        int(match["month"]),
        int(match["day"]),
        hour,
        int(match["minute"]),
        int(match["second"]),
    )


def _split_fields(line: str) -> list[str]:
    return [field.strip() for field in line.split(",", 3)]


def _is_header(line: str) -> bool:
    return tuple(f.lower() for f in _split_fields(line)) == _HEADER_FIELDS


def parse_log_line(line: str) -> LogEntry:
    """Parse one record into a LogEntry.

    Fields are split on the first three commas, so the resource may
    itself contain commas.

    Raises:
        ValueError: If the line does not have four fields, the username is
            empty, or the timestamp is invalid.
    """
    fields = _split_fields(line)
    if len(fields) != 4:
        raise ValueError(f"expected 4 fields, got {len(fields)}")
    username, timestamp, action, resource = fields
    return LogEntry(
        username=username,
        timestamp=parse_timestamp(timestamp),
        action=action,
        resource=resource,
    )


class TextFileLogSource:
    """LogSourcePort implementation reading records from a text file."""

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        """Initialize the source.

        Args:
            path: Location of the log file.
            encoding: Text encoding of the file.
        """
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        """Location of the log file."""
        return self._path

    def load(self) -> tuple[LogEntry, ...]:
        """Read and parse every record in the file.

        Raises:
            LogSourceError: If the file cannot be read or a line is malformed.
        """
        try:
            text = self._path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise LogSourceError(
                "file does not exist or cannot be read", str(self._path)
            ) from e

        entries: list[LogEntry] = []
        header_checked = False
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            if not header_checked:
                header_checked = True
                if _is_header(line):
                    continue
            try:
                entries.append(parse_log_line(line))
            except ValueError as e:
                raise LogSourceError(str(e), str(self._path), line_number) from e

        logger.debug("Loaded %d log entries from %s", len(entries), self._path)
        return tuple(entries)
