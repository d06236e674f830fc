"""Exceptions raised by activitylog."""


class ActivityLogError(Exception):
    """Base class for all activitylog errors."""


class InvalidParameterError(ActivityLogError, ValueError):
    """A query parameter was rejected before any report work was done.

    Attributes:
        message: User-facing explanation, suitable for printing as-is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LogSourceError(ActivityLogError):
    """Log entries could not be loaded from their source.

    Attributes:
        path: Location of the source that failed.
        line_number: 1-based line of the offending record, if any.
    """

    def __init__(self, message: str, path: str, line_number: int | None = None) -> None:
        self.path = path
        self.line_number = line_number
        if line_number is not None:
            message = f"{path}:{line_number}: {message}"
        else:
            message = f"{path}: {message}"
        super().__init__(message)
