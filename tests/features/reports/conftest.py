"""BDD step definitions for activity report features."""

from dataclasses import dataclass

import pytest
from pytest_bdd import given, parsers, then, when

from activitylog.adapters.sources.text_file import parse_log_line
from activitylog.core.models import LogEntry
from activitylog.core.reports import ReportManager


@dataclass
class ReportScenarioContext:
    """Shared state between steps in a report scenario."""

    manager: ReportManager | None = None
    output: str = ""

    def lines(self) -> list[str]:
        """Report rows without the title line, footer or indentation."""
        rows = self.output.splitlines()[1:-1]
        return [row.removeprefix(self.manager.fmt.indent) for row in rows]


@pytest.fixture
def ctx() -> ReportScenarioContext:
    """Fresh scenario context for each test."""
    return ReportScenarioContext()


# === Given ===


@given("the sample activity log")
def given_sample_log(
    ctx: ReportScenarioContext, sample_entries: list[LogEntry]
) -> None:
    """Report on the sample records."""
    ctx.manager = ReportManager(sample_entries)


@given("an activity log with entries:")
def given_log_with_entries(
    ctx: ReportScenarioContext, datatable: list[list[str]]
) -> None:
    """Build a log from a username/timestamp/action/resource table."""
    _header, *rows = datatable
    ctx.manager = ReportManager(parse_log_line(", ".join(row)) for row in rows)


# === When ===


@when(parsers.parse("I request the top {number:d} activities"))
def when_request_top(ctx: ReportScenarioContext, number: int) -> None:
    """Run the top activities report."""
    ctx.output = ctx.manager.top_activities_report(number)


@when(parsers.parse('I request the report for date "{date}"'))
def when_request_date(ctx: ReportScenarioContext, date: str) -> None:
    """Run the date report."""
    ctx.output = ctx.manager.date_report(date)


@when(parsers.parse("I request the report for hour {hour:d}"))
def when_request_hour(ctx: ReportScenarioContext, hour: int) -> None:
    """Run the hour report."""
    ctx.output = ctx.manager.hour_report(hour)


# === Then ===


@then(parsers.parse('the report title is "{title}"'))
def then_title_is(ctx: ReportScenarioContext, title: str) -> None:
    """The first line names the report and opens the bracket."""
    assert ctx.output.splitlines()[0] == f"{title} ["
    assert ctx.output.endswith("]\n")


@then(parsers.parse("the report has {count:d} lines"))
def then_report_has_lines(ctx: ReportScenarioContext, count: int) -> None:
    """Count the rows between header and footer."""
    assert len(ctx.lines()) == count


@then(parsers.parse('report line {number:d} is "{text}"'))
def then_report_line_is(ctx: ReportScenarioContext, number: int, text: str) -> None:
    """Check one row of the report (1-based)."""
    assert ctx.lines()[number - 1] == text


@then(parsers.parse('the output is the message "{message}"'))
def then_output_is_message(ctx: ReportScenarioContext, message: str) -> None:
    """The query produced a single message instead of a report."""
    assert ctx.output.rstrip("\n") == message
    assert "[" not in ctx.output
