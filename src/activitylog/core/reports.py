"""Report generation over a snapshot of user activity log entries.

ReportManager validates query parameters, builds the frequency table and the
date/hour indexes lazily (once per manager), and sorts only the group a
query asks for.
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from activitylog.core.config import DEFAULT_FORMAT, ReportFormat
from activitylog.core.encoding.text import render_entry, render_report
from activitylog.core.errors import InvalidParameterError
from activitylog.core.frequency import build_frequency_table, rank_activities
from activitylog.core.indexing import GroupIndex, build_date_index, build_hour_index
from activitylog.core.models import FrequencyEntry, LogEntry
from activitylog.core.ports import LogSourcePort
from activitylog.core.sorting import sort_group

logger = logging.getLogger(__name__)

INVALID_COUNT_MESSAGE = "Please enter a number > 0\n"
INVALID_DATE_MESSAGE = "Please enter a valid date in the format MM/DD/YYYY"
INVALID_HOUR_MESSAGE = "Please enter a valid hour between 0 (12AM) and 23 (11PM)\n"

TOP_ACTIVITIES_TITLE = "Top User Activities Report"


def no_activities_on(date: str) -> str:
    """Message for a valid date with no recorded entries."""
    return f"No activities were recorded on {date}"


def no_activities_during(hour: int) -> str:
    """Message for a valid hour with no recorded entries."""
    return f"No activities were recorded during hour {hour}"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ReportManager:
    """Answers top-activity, date and hour queries over a fixed set of entries.

    Example:
        ```python
        from activitylog import ReportManager, TextFileLogSource

        manager = ReportManager.from_source(TextFileLogSource("records.txt"))
        print(manager.top_activities_report(10))
        print(manager.date_report("02/27/2020"))
        ```
    """

    def __init__(
        self,
        entries: Iterable[LogEntry],
        fmt: ReportFormat = DEFAULT_FORMAT,
    ) -> None:
        """Initialize the manager with a snapshot of entries.

        Args:
            entries: Log entries to report on. Copied into a tuple.
            fmt: Date/time patterns and indentation used for keys and output.
        """
        self._entries: tuple[LogEntry, ...] = tuple(entries)
        self._fmt = fmt
        self._frequencies: dict[str, int] | None = None
        self._date_index: GroupIndex[str] | None = None
        self._hour_index: GroupIndex[int] | None = None

    @classmethod
    def from_source(
        cls,
        source: LogSourcePort,
        fmt: ReportFormat = DEFAULT_FORMAT,
    ) -> "ReportManager":
        """Load entries from a source and build a manager over them.

        Raises:
            LogSourceError: If the source cannot supply entries.
        """
        return cls(source.load(), fmt=fmt)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """The entries this manager reports on, in source order."""
        return self._entries

    @property
    def fmt(self) -> ReportFormat:
        """Formatting configuration used by this manager."""
        return self._fmt

    def frequency_table(self) -> dict[str, int]:
        """Return a copy of the activity frequency table."""
        return dict(self._get_frequencies())

    def date_index(self) -> GroupIndex[str]:
        """Return the entries grouped by date string (``fmt.date_pattern``)."""
        if self._date_index is None:
            self._date_index = build_date_index(self._entries, self._fmt)
        return self._date_index

    def hour_index(self) -> GroupIndex[int]:
        """Return the entries grouped by hour of day."""
        if self._hour_index is None:
            self._hour_index = build_hour_index(self._entries)
        return self._hour_index

    def _get_frequencies(self) -> dict[str, int]:
        if self._frequencies is None:
            self._frequencies = build_frequency_table(self._entries)
        return self._frequencies

    # === Structured queries ===

    def top_activities(self, number: int) -> list[FrequencyEntry]:
        """Return the ``number`` most frequent activities.

        Activities are ordered by count descending, then alphabetically
        (case-insensitive). Fewer are returned if the log has fewer
        distinct activities.

        Raises:
            InvalidParameterError: If ``number`` is not a positive integer.
        """
        if not _is_int(number) or number <= 0:
            raise InvalidParameterError(INVALID_COUNT_MESSAGE)
        logger.debug("Top activities query: number=%d", number)
        return rank_activities(self._get_frequencies(), number)

    def entries_on(self, date: str) -> list[LogEntry] | None:
        """Return the entries recorded on ``date`` in chronological order.

        Args:
            date: Calendar date in the configured ``date_pattern``
                (``MM/DD/YYYY`` by default).

        Returns:
            Sorted entries, or None if nothing was recorded on that date.

        Raises:
            InvalidParameterError: If ``date`` is not a valid date in that pattern.
        """
        key = self._date_key(date)
        logger.debug("Date query: date=%s", key)
        group = self.date_index().get(key)
        if group is None:
            return None
        return sort_group(group)

    def entries_during(self, hour: int) -> list[LogEntry] | None:
        """Return the entries recorded during ``hour`` in chronological order.

        Args:
            hour: Hour of day, 0 (12AM) to 23 (11PM).

        Returns:
            Sorted entries, or None if nothing was recorded during that hour.

        Raises:
            InvalidParameterError: If ``hour`` is outside [0, 23].
        """
        if not _is_int(hour) or not 0 <= hour <= 23:
            raise InvalidParameterError(INVALID_HOUR_MESSAGE)
        logger.debug("Hour query: hour=%d", hour)
        group = self.hour_index().get(hour)
        if group is None:
            return None
        return sort_group(group)

    def _date_key(self, date: str) -> str:
        pattern = self._fmt.date_pattern
        if not isinstance(date, str):
            raise InvalidParameterError(INVALID_DATE_MESSAGE)
        try:
            parsed = datetime.strptime(date, pattern)
        except ValueError as e:
            raise InvalidParameterError(INVALID_DATE_MESSAGE) from e
        # Keys must already be in canonical form: zero-padded, four-digit year.
        if parsed.year < 1000 or parsed.strftime(pattern) != date:
            raise InvalidParameterError(INVALID_DATE_MESSAGE)
        return date

    # === Text reports ===

    def top_activities_report(self, number: int) -> str:
        """Render the top activities report, or the validation message."""
        try:
            ranked = self.top_activities(number)
        except InvalidParameterError as e:
            return e.message
        return self.render_top(ranked)

    def date_report(self, date: str) -> str:
        """Render the entries recorded on ``date``, or an explanatory message."""
        try:
            entries = self.entries_on(date)
        except InvalidParameterError as e:
            return e.message
        if entries is None:
            return no_activities_on(date)
        return self.render_date(date, entries)

    def hour_report(self, hour: int) -> str:
        """Render the entries recorded during ``hour``, or an explanatory message."""
        try:
            entries = self.entries_during(hour)
        except InvalidParameterError as e:
            return e.message
        if entries is None:
            return no_activities_during(hour)
        return self.render_hour(hour, entries)

    def render_top(self, ranked: Iterable[FrequencyEntry]) -> str:
        """Render ranked activities as the top activities report."""
        lines = (entry.description for entry in ranked)
        return render_report(TOP_ACTIVITIES_TITLE, lines, self._fmt)

    def render_date(self, date: str, entries: Iterable[LogEntry]) -> str:
        """Render sorted entries as the report for ``date``."""
        return self._render_entries(f"Activities recorded on {date}", entries)

    def render_hour(self, hour: int, entries: Iterable[LogEntry]) -> str:
        """Render sorted entries as the report for ``hour``."""
        return self._render_entries(f"Activities recorded during hour {hour}", entries)

    def _render_entries(self, title: str, entries: Iterable[LogEntry]) -> str:
        lines = (render_entry(entry, self._fmt) for entry in entries)
        return render_report(title, lines, self._fmt)
