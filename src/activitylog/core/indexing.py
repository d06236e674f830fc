"""Partitioning of log entries into date and hour groups.

Groups keep the order entries were read in, which is not chronological.
Callers sort the single group they need with ``sort_group``.
"""

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Generic, TypeVar

from activitylog.core.config import DEFAULT_FORMAT, ReportFormat
from activitylog.core.models import LogEntry

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class GroupIndex(Generic[K]):
    """Read-only mapping of key to the entries sharing that key."""

    def __init__(self, groups: dict[K, tuple[LogEntry, ...]]) -> None:
        self._groups = groups

    def get(self, key: K) -> tuple[LogEntry, ...] | None:
        """Return the group for ``key``, or None if no entry has that key."""
        return self._groups.get(key)

    def keys(self) -> list[K]:
        """Return the keys in first-seen order."""
        return list(self._groups)

    def total(self) -> int:
        """Return the number of entries across all groups."""
        return sum(len(group) for group in self._groups.values())

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __iter__(self) -> Iterator[K]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)


def build_index(
    entries: Iterable[LogEntry],
    key_func: Callable[[LogEntry], K],
) -> GroupIndex[K]:
    """Group entries by ``key_func`` in a single pass.

    Args:
        entries: Log entries to partition.
        key_func: Computes the group key of an entry.

    Returns:
        GroupIndex whose groups preserve input order.
    """
    groups: dict[K, list[LogEntry]] = {}
    for entry in entries:
        key = key_func(entry)
        group = groups.get(key)
        if group is None:
            groups[key] = [entry]
        else:
            group.append(entry)
    return GroupIndex({key: tuple(group) for key, group in groups.items()})


def build_date_index(
    entries: Iterable[LogEntry],
    fmt: ReportFormat = DEFAULT_FORMAT,
) -> GroupIndex[str]:
    """Group entries by calendar date rendered with ``fmt.date_pattern``."""
    index = build_index(entries, lambda e: e.timestamp.strftime(fmt.date_pattern))
    logger.debug("Built date index with %d dates", len(index))
    return index


def build_hour_index(entries: Iterable[LogEntry]) -> GroupIndex[int]:
    """Group entries by hour of day (0-23)."""
    index = build_index(entries, lambda e: e.hour)
    logger.debug("Built hour index with %d hours", len(index))
    return index
