"""
Holiday engine: resolves a holiday catalog into the observed dates of a year.

Fixed holidays keep their month/day, Easter-based ones are an offset from
Easter Sunday, and every transferable holiday not already on a Monday moves
to the following Monday (Law 51 of 1983).

Next/previous lookups stay inside the calendar year of the given date: after
the last holiday of a year there is no "next" one, before the first there is
no "previous" one.
"""

import datetime
import logging
from collections.abc import Iterable
from functools import lru_cache

from festivos.core.catalog import COLOMBIAN_HOLIDAYS
from festivos.core.config import MONDAY
from festivos.core.easter import easter_sunday
from festivos.core.models import HolidayDefinition, ResolvedHoliday
from festivos.core.validators import require_date, require_year

logger = logging.getLogger(__name__)

Catalog = tuple[HolidayDefinition, ...]


def next_monday(date_: datetime.date) -> datetime.date:
    """date_ itself if it is a Monday, otherwise the first Monday after it."""
    days_ahead = (MONDAY - date_.weekday()) % 7
    return date_ + datetime.timedelta(days=days_ahead)


def following_monday(date_: datetime.date) -> datetime.date:
    """First Monday strictly after date_ (a Monday gives the next week's)."""
    days_ahead = (MONDAY - date_.weekday() - 1) % 7 + 1
    return date_ + datetime.timedelta(days=days_ahead)


def resolve_holiday(
    definition: HolidayDefinition,
    year: int,
    easter: datetime.date | None = None,
) -> ResolvedHoliday:
    """Resolve one definition to its observed date in year."""
    year = require_year(year)
    if easter is None:
        easter = easter_sunday(year)
    base = definition.rule.base_date(year, easter)
    observed = next_monday(base) if definition.is_transferable else base
    return ResolvedHoliday.from_definition(definition, observed)


@lru_cache(maxsize=256)
def _resolve_year(catalog: Catalog, year: int) -> tuple[ResolvedHoliday, ...]:
    easter = easter_sunday(year)
    resolved = [resolve_holiday(definition, year, easter) for definition in catalog]
    # sorted() is stable, so same-date entries keep catalog order
    resolved = sorted(resolved, key=lambda h: h.date)
    logger.debug("Resolved %d holidays for %d (easter=%s)", len(resolved), year, easter)
    return tuple(resolved)


def get_holidays_for_year(
    year: int,
    catalog: Iterable[HolidayDefinition] = COLOMBIAN_HOLIDAYS,
) -> list[ResolvedHoliday]:
    """
    All holidays of year, sorted by observed date.

    Args:
        year: Calendar year (datetime.MINYEAR..MAXYEAR)
        catalog: Holiday definitions to resolve (any iterable), Colombian by default

    Returns:
        A new list of ResolvedHoliday, one per catalog entry

    Raises:
        InvalidArgumentError: If year is None or not an int
    """
    year = require_year(year)
    return list(_resolve_year(tuple(catalog), year))


def get_holiday_dates_for_year(
    year: int,
    catalog: Iterable[HolidayDefinition] = COLOMBIAN_HOLIDAYS,
) -> list[datetime.date]:
    """Observed dates of all holidays of year, sorted."""
    return [holiday.date for holiday in get_holidays_for_year(year, catalog)]


def get_holiday(
    date_: datetime.date,
    catalog: Iterable[HolidayDefinition] = COLOMBIAN_HOLIDAYS,
) -> ResolvedHoliday | None:
    """The holiday observed on date_, or None."""
    date_ = require_date(date_)
    for holiday in get_holidays_for_year(date_.year, catalog):
        if holiday.date == date_:
            return holiday
    return None


def is_holiday(
    date_: datetime.date,
    catalog: Iterable[HolidayDefinition] = COLOMBIAN_HOLIDAYS,
) -> bool:
    """True if date_ is an observed holiday."""
    return get_holiday(date_, catalog) is not None


def get_next_holiday(
    date_: datetime.date,
    catalog: Iterable[HolidayDefinition] = COLOMBIAN_HOLIDAYS,
) -> ResolvedHoliday | None:
    """First holiday strictly after date_ in the same year, or None."""
    date_ = require_date(date_)
    return next(
        (holiday for holiday in get_holidays_for_year(date_.year, catalog) if holiday.date > date_),
        None,
    )


def get_next_holiday_date(
    date_: datetime.date,
    catalog: Iterable[HolidayDefinition] = COLOMBIAN_HOLIDAYS,
) -> datetime.date | None:
    holiday = get_next_holiday(date_, catalog)
    return holiday.date if holiday else None


def get_previous_holiday(
    date_: datetime.date,
    catalog: Iterable[HolidayDefinition] = COLOMBIAN_HOLIDAYS,
) -> ResolvedHoliday | None:
    """Last holiday strictly before date_ in the same year, or None."""
    date_ = require_date(date_)
    previous = None
    for holiday in get_holidays_for_year(date_.year, catalog):
        if holiday.date >= date_:
            break
        previous = holiday
    return previous


def get_previous_holiday_date(
    date_: datetime.date,
    catalog: Iterable[HolidayDefinition] = COLOMBIAN_HOLIDAYS,
) -> datetime.date | None:
    holiday = get_previous_holiday(date_, catalog)
    return holiday.date if holiday else None


def is_long_weekend(
    date_: datetime.date,
    catalog: Iterable[HolidayDefinition] = COLOMBIAN_HOLIDAYS,
) -> bool:
    """
    True if the Monday after date_ is a holiday ("puente").

    The Monday is always strictly after date_: given a Monday, the next
    week's Monday is checked. The Monday may fall in the following year.
    """
    date_ = require_date(date_)
    try:
        monday = following_monday(date_)
    except OverflowError:
        # Monday would be past datetime.date.max, where no holiday exists
        return False
    return is_holiday(monday, catalog)
