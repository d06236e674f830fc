"""Core domain models for user activity logs."""

import datetime
from dataclasses import dataclass


def activity_key(action: str, resource: str) -> str:
    """Build the key that identifies an activity.

    Two entries describe the same activity iff their keys are equal
    (case-sensitive).
    """
    return f"{action} {resource}"


@dataclass(frozen=True)
class LogEntry:
    """A single logged user action.

    Attributes:
        username: Name of the user who performed the action.
        timestamp: Local date and time of the action, second precision.
        action: What the user did (e.g., call, register).
        resource: What the action was performed on.
    """

    username: str
    timestamp: datetime.datetime
    action: str
    resource: str

    def __post_init__(self) -> None:
        if not self.username:
            raise ValueError("username must not be empty")

    @property
    def activity(self) -> str:
        """Activity key derived from action and resource."""
        return activity_key(self.action, self.resource)

    @property
    def date(self) -> datetime.date:
        """Calendar date of the entry."""
        return self.timestamp.date()

    @property
    def hour(self) -> int:
        """Hour of day in [0, 23]."""
        return self.timestamp.hour


@dataclass(frozen=True)
class FrequencyEntry:
    """Number of times one activity occurs in a log.

    Attributes:
        activity: The activity key (action and resource).
        count: Number of occurrences, always positive.
    """

    activity: str
    count: int

    @property
    def description(self) -> str:
        """Render as ``"<count>: <action> <resource>"``."""
        return f"{self.count}: {self.activity}"
