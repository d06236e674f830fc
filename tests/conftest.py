"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

try:
    import httpx
except ImportError:
    httpx = None

from activitylog.adapters.sources.text_file import parse_log_line
from activitylog.core.models import LogEntry
from activitylog.core.reports import ReportManager

# Sample log with a header line, an extra space before one action and
# two entries sharing the 02/27/2020 05:30:50PM timestamp.
SAMPLE_RECORDS = """\
USERNAME, TIMESTAMP, ACTION, RESOURCE
labyrum, 04/06/2013 07:30:42PM, call, office OV04392
mwwarstl, 12/13/2019 09:40:48PM, register, HL3 Code 691
mwwarstl, 02/22/2016 11:09:46PM, register, HL3 Code 691
mwwarstl, 02/27/2020 07:18:42AM, notify, HL6 Code 783
mwwarstl, 02/27/2020 05:30:50PM, register, HL3 Code 691
labyrum, 02/27/2020 05:30:50PM, call, office OV04392
labyrum, 02/19/2017 06:16:58PM, register, HL3 Code 691
mwwarstl, 01/04/2016 12:44:52PM,  register, HL3 Code 691
labyrum, 11/08/2016 10:43:29AM, register, HL3 Code 691
mwwarstl, 07/06/2015 04:17:06PM, register, HL3 Code 691
labyrum, 12/18/2017 03:02:54AM, register, HL3 Code 691
labyrum, 09/11/2016 09:14:44PM, register, HL3 Code 691
labyrum, 04/15/2017 09:14:59PM, notify, HL6 Code 783
labyrum, 10/06/2016 04:58:44AM, register, HL3 Code 691
labyrum, 01/23/2017 12:05:22AM, register, HL3 Code 691
labyrum, 09/12/2023 01:00:15AM, unmerge, notification NX1115
labyrum, 01/24/2024 12:16:27AM, view, HL7 Code 422
"""


@pytest.fixture
def make_entry() -> Callable[..., LogEntry]:
    """Factory fixture for LogEntry objects with sensible defaults."""

    def _make(
        username: str = "alice",
        timestamp: datetime | str = datetime(2020, 2, 27, 17, 30, 50),
        action: str = "call",
        resource: str = "office OV04392",
    ) -> LogEntry:
        if isinstance(timestamp, str):
            timestamp = datetime.strptime(timestamp, "%m/%d/%Y %I:%M:%S%p")
        return LogEntry(
            username=username, timestamp=timestamp, action=action, resource=resource
        )

    return _make


@pytest.fixture
def records_path(tmp_path: Path) -> Path:
    """Write the sample records to a temporary log file."""
    path = tmp_path / "records.txt"
    path.write_text(SAMPLE_RECORDS, encoding="utf-8")
    return path


@pytest.fixture
def sample_entries() -> list[LogEntry]:
    """Entries parsed from the sample records, in file order."""
    return [parse_log_line(line) for line in SAMPLE_RECORDS.splitlines()[1:]]


@pytest.fixture
def manager(sample_entries: list[LogEntry]) -> ReportManager:
    """ReportManager over the sample entries."""
    return ReportManager(sample_entries)


# === ASGI Test Fixtures ===


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Usage:
        async def test_something(asgi_test_client):
            async with asgi_test_client(app) as client:
                response = await client.get("/reports/top", params={"n": 3})
    """
    if httpx is None:
        pytest.skip("httpx not installed")

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client
