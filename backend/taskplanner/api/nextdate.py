"""
Next-date API endpoint.

Exposes the recurrence engine directly; answers in plain text.
"""

from fastapi import APIRouter, Query, status
from fastapi.responses import PlainTextResponse

from taskplanner.api.deps import AppSettings
from taskplanner.core.exceptions import SchedulerError
from taskplanner.core.logger import setup_logger
from taskplanner.services.recurrence import next_date
from taskplanner.utils.date_utils import today

logger = setup_logger(__name__)

router = APIRouter()


@router.get("/nextdate", response_class=PlainTextResponse)
async def get_next_date(
    settings: AppSettings,
    now: str = Query("", description="Reference date, YYYYMMDD (default: today)"),
    date: str = Query("", description="Anchor date, YYYYMMDD"),
    repeat: str = Query("", description="Recurrence rule"),
) -> PlainTextResponse:
    """Return the next occurrence of ``date`` under ``repeat`` not before ``now``."""
    try:
        result = next_date(
            now or today(), date, repeat, allow_multi_day=settings.TODO_MULTI_DAY_RULES
        )
    except SchedulerError as exc:
        logger.debug("nextdate rejected now=%r date=%r repeat=%r: %s", now, date, repeat, exc)
        return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)
    return PlainTextResponse(result)
