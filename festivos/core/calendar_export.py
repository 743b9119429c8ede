"""iCal feeds of Colombian holidays."""

import datetime
import re
import unicodedata

from icalendar import Calendar, Event

from festivos.core.config import ICAL_PRODID, ICAL_TIMEZONE, ICAL_UID_DOMAIN
from festivos.core.holidays import get_holidays_for_year
from festivos.core.models import ResolvedHoliday
from festivos.core.validators import InvalidArgumentError, require_year


def _slugify(name: str) -> str:
    """ASCII slug for UIDs: "Día de San José" -> "dia-de-san-jose"."""
    ascii_name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", "-", ascii_name.lower()).strip("-")


def _new_calendar(name: str) -> Calendar:
    cal = Calendar()
    cal.add("prodid", ICAL_PRODID)
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", name)
    cal.add("x-wr-timezone", ICAL_TIMEZONE)
    return cal


def _create_holiday_event(holiday: ResolvedHoliday, stamp: datetime.datetime) -> Event:
    """
    Build an all-day VEVENT for a holiday.

    Args:
        holiday: Resolved holiday
        stamp: DTSTAMP shared by every event of the feed

    Returns:
        icalendar Event
    """
    event = Event()
    event.add("summary", holiday.name)
    event.add("uid", f"{holiday.date.isoformat()}_{_slugify(holiday.name)}@{ICAL_UID_DOMAIN}")

    # All-day event: DTEND is exclusive
    event.add("dtstart", holiday.date)
    event.add("dtend", holiday.date + datetime.timedelta(days=1))

    event.add("description", holiday.category.description)
    event.add("categories", [holiday.category.value])
    event.add("transp", "TRANSPARENT")
    event.add("dtstamp", stamp)
    return event


def generate_ical(year: int) -> str:
    """
    iCal feed with one all-day event per holiday of year.

    Raises:
        InvalidArgumentError: If year is None or not an int
    """
    return generate_ical_for_years(year, year)


def generate_ical_for_years(start_year: int, end_year: int) -> str:
    """
    iCal feed covering start_year..end_year inclusive.

    Raises:
        InvalidArgumentError: If a year is invalid or end_year < start_year
    """
    start_year = require_year(start_year, "start_year")
    end_year = require_year(end_year, "end_year")
    if end_year < start_year:
        raise InvalidArgumentError(f"end_year {end_year} is before start_year {start_year}")

    if start_year == end_year:
        name = f"Festivos Colombia {start_year}"
    else:
        name = f"Festivos Colombia {start_year}-{end_year}"
    cal = _new_calendar(name)

    stamp = datetime.datetime.now(datetime.timezone.utc)
    for year in range(start_year, end_year + 1):
        for holiday in get_holidays_for_year(year):
            cal.add_component(_create_holiday_event(holiday, stamp))

    return cal.to_ical().decode("utf-8")
