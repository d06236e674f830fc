"""FastAPI adapter for activity report endpoints."""

from fastapi import APIRouter, Query, Response

from activitylog.core.encoding.ndjson import encode_entries, encode_frequencies
from activitylog.core.errors import InvalidParameterError
from activitylog.core.reports import (
    ReportManager,
    no_activities_during,
    no_activities_on,
)

_TEXT = "text/plain; charset=utf-8"
_NDJSON = "application/x-ndjson"


def _text(body: str, status_code: int = 200) -> Response:
    return Response(content=body, status_code=status_code, media_type=_TEXT)


def create_report_router(manager: ReportManager) -> APIRouter:
    """Create a FastAPI router exposing the reports of a ReportManager.

    Invalid parameters answer 422 and dates/hours with no entries answer 404,
    both with the same message the text report would contain.

    Args:
        manager: ReportManager holding the loaded log entries.

    Returns:
        APIRouter with /reports/*, /activities/top and /entries endpoints.
    """
    router = APIRouter()

    @router.get("/reports/top")
    async def get_top_report(n: int = Query(...)) -> Response:
        """Return the top activities report as plain text."""
        try:
            ranked = manager.top_activities(n)
        except InvalidParameterError as e:
            return _text(e.message, 422)
        return _text(manager.render_top(ranked))

    @router.get("/reports/date")
    async def get_date_report(date: str = Query(...)) -> Response:
        """Return the entries recorded on a MM/DD/YYYY date as plain text."""
        try:
            entries = manager.entries_on(date)
        except InvalidParameterError as e:
            return _text(e.message, 422)
        if entries is None:
            return _text(no_activities_on(date), 404)
        return _text(manager.render_date(date, entries))

    @router.get("/reports/hour")
    async def get_hour_report(hour: int = Query(...)) -> Response:
        """Return the entries recorded during an hour of day as plain text."""
        try:
            entries = manager.entries_during(hour)
        except InvalidParameterError as e:
            return _text(e.message, 422)
        if entries is None:
            return _text(no_activities_during(hour), 404)
        return _text(manager.render_hour(hour, entries))

    @router.get("/activities/top")
    async def get_top_activities(n: int = Query(...)) -> Response:
        """Return the top activities as NDJSON ``{"activity", "count"}`` rows."""
        try:
            ranked = manager.top_activities(n)
        except InvalidParameterError as e:
            return _text(e.message, 422)
        return Response(content=encode_frequencies(ranked), media_type=_NDJSON)

    @router.get("/entries")
    async def get_entries(
        date: str | None = Query(default=None),
        hour: int | None = Query(default=None),
    ) -> Response:
        """Return the sorted entries of one date or one hour as NDJSON.

        Exactly one of ``date`` and ``hour`` must be given. An empty body
        means nothing was recorded for that date or hour.
        """
        if (date is None) == (hour is None):
            return _text("Specify exactly one of date or hour", 422)
        try:
            if date is not None:
                entries = manager.entries_on(date)
            else:
                entries = manager.entries_during(hour)
        except InvalidParameterError as e:
            return _text(e.message, 422)
        return Response(content=encode_entries(entries or []), media_type=_NDJSON)

    return router
