# festivos/routes/holidays.py
"""
JSON and iCal endpoints for Colombian holidays.
"""

import datetime

from fastapi import APIRouter, HTTPException, Query, Response

from festivos.core.calendar_export import generate_ical, generate_ical_for_years
from festivos.core.easter import easter_sunday
from festivos.core.holidays import (
    following_monday,
    get_holiday,
    get_holiday_dates_for_year,
    get_holidays_for_year,
    get_next_holiday,
    get_previous_holiday,
    is_long_weekend,
)
from festivos.core.logging_config import get_logger
from festivos.core.models import ResolvedHoliday
from festivos.core.validators import validate_date_params, validate_year_param

logger = get_logger(__name__)

router = APIRouter(prefix="/api/holidays", tags=["holidays"])

#: Widest span the multi-year iCal feed accepts.
MAX_ICAL_YEARS = 50


def _holiday_to_dict(holiday: ResolvedHoliday) -> dict:
    data = holiday.model_dump(mode="json")
    data.update(
        weekday=holiday.date.strftime("%A"),
        kind=holiday.kind.value,
        description=holiday.category.description,
        is_civil=holiday.is_civil,
        is_transferable=holiday.is_transferable,
    )
    return data


def _ical_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/calendar; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )


# ============ Calendar feeds ============


@router.get("/calendar.ics")
async def get_calendar_range(
    start_year: int = Query(...),
    end_year: int = Query(...),
):
    """iCal feed for start_year..end_year inclusive."""
    start_year = validate_year_param(start_year)
    end_year = validate_year_param(end_year)
    if end_year < start_year:
        raise HTTPException(status_code=400, detail="end_year must not be before start_year")
    if end_year - start_year + 1 > MAX_ICAL_YEARS:
        raise HTTPException(status_code=400, detail=f"At most {MAX_ICAL_YEARS} years per feed")

    return _ical_response(
        generate_ical_for_years(start_year, end_year),
        f"festivos-{start_year}-{end_year}.ics",
    )


@router.get("/{year}/calendar.ics")
async def get_calendar(year: int):
    """iCal feed with every holiday of the year."""
    year = validate_year_param(year)
    return _ical_response(generate_ical(year), f"festivos-{year}.ics")


# ============ Year ============


@router.get("/{year}")
async def list_holidays(year: int):
    """All holidays of the year, sorted by observed date."""
    year = validate_year_param(year)
    holidays = get_holidays_for_year(year)
    return {
        "year": year,
        "count": len(holidays),
        "holidays": [_holiday_to_dict(h) for h in holidays],
    }


@router.get("/{year}/dates")
async def list_holiday_dates(year: int):
    """Observed dates only, ISO formatted."""
    year = validate_year_param(year)
    return {
        "year": year,
        "dates": [d.isoformat() for d in get_holiday_dates_for_year(year)],
    }


@router.get("/{year}/easter")
async def get_easter(year: int):
    year = validate_year_param(year)
    return {"year": year, "easter_sunday": easter_sunday(year).isoformat()}


# ============ Single date ============


@router.get("/check/{year}/{month}/{day}")
async def check_date(year: int, month: int, day: int):
    """Whether the date is a holiday, and which one."""
    date = validate_date_params(year, month, day)
    holiday = get_holiday(date)
    return {
        "date": date.isoformat(),
        "is_holiday": holiday is not None,
        "holiday": _holiday_to_dict(holiday) if holiday else None,
    }


@router.get("/next/{year}/{month}/{day}")
async def next_holiday(year: int, month: int, day: int):
    """
    First holiday after the date in the same year.

    404 after the year's last holiday.
    """
    date = validate_date_params(year, month, day)
    holiday = get_next_holiday(date)
    if holiday is None:
        raise HTTPException(status_code=404, detail=f"No holiday after {date.isoformat()} in {date.year}")
    return _holiday_to_dict(holiday)


@router.get("/previous/{year}/{month}/{day}")
async def previous_holiday(year: int, month: int, day: int):
    """
    Last holiday before the date in the same year.

    404 before the year's first holiday.
    """
    date = validate_date_params(year, month, day)
    holiday = get_previous_holiday(date)
    if holiday is None:
        raise HTTPException(status_code=404, detail=f"No holiday before {date.isoformat()} in {date.year}")
    return _holiday_to_dict(holiday)


@router.get("/long-weekend/{year}/{month}/{day}")
async def long_weekend(year: int, month: int, day: int):
    """Whether the Monday after the date is a holiday."""
    date = validate_date_params(year, month, day)
    if date > datetime.date.max - datetime.timedelta(days=7):
        raise HTTPException(status_code=400, detail="Invalid date")

    monday = following_monday(date)
    result = is_long_weekend(date)
    logger.debug(f"Long weekend check {date} -> {monday}: {result}")
    return {
        "date": date.isoformat(),
        "next_monday": monday.isoformat(),
        "is_long_weekend": result,
    }
