"""Activity frequency counting and top-K ranking."""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping

from activitylog.core.models import FrequencyEntry, LogEntry

logger = logging.getLogger(__name__)


def build_frequency_table(entries: Iterable[LogEntry]) -> dict[str, int]:
    """Count how often each activity occurs.

    Args:
        entries: Log entries to aggregate. Not modified.

    Returns:
        Mapping of activity key to occurrence count.
        Empty mapping if there are no entries.
    """
    table = Counter(entry.activity for entry in entries)
    logger.debug("Built frequency table with %d distinct activities", len(table))
    return dict(table)


def _rank_key(item: tuple[str, int]) -> tuple[int, str, str]:
    activity, count = item
    # Exact key breaks ties between keys that differ only by case.
    return (-count, activity.casefold(), activity)


def rank_activities(table: Mapping[str, int], n: int) -> list[FrequencyEntry]:
    """Rank activities by count descending, then alphabetically.

    Alphabetical order is case-insensitive.

    Args:
        table: Mapping of activity key to count.
        n: Maximum number of activities to return.

    Returns:
        Up to ``n`` FrequencyEntry objects, most frequent first.
        Empty list if ``n`` is not positive.
    """
    if n <= 0:
        return []
    ranked = sorted(table.items(), key=_rank_key)
    return [FrequencyEntry(activity=a, count=c) for a, c in ranked[:n]]


def select_top(table: Mapping[str, int], n: int) -> list[str]:
    """Return the ``n`` most frequent activities as ``"count: activity"`` lines."""
    return [entry.description for entry in rank_activities(table, n)]
