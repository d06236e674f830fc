"""Formatting configuration shared by the report components."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportFormat:
    """Date/time patterns and layout used when keying and rendering entries.

    Attributes:
        date_pattern: strftime pattern for date keys and date queries.
        timestamp_pattern: strftime pattern for rendered entry timestamps.
        indent: Prefix written before each report line.
    """

    date_pattern: str = "%m/%d/%Y"
    timestamp_pattern: str = "%m/%d/%Y %I:%M:%S%p"
    indent: str = "   "


DEFAULT_FORMAT = ReportFormat()
