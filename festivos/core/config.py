# festivos/core/config.py

import os
from typing import Final


# ==========================
# Service
# ==========================

#: Name reported by /health and used as the logging/Sentry release prefix.
SERVICE_NAME: Final[str] = "festivos"

#: Package version, kept in sync with pyproject.toml.
SERVICE_VERSION: Final[str] = "0.1.0"

#: ISO 3166 code of the only supported country.
COUNTRY_CODE: Final[str] = "CO"

#: True when the PRODUCTION environment variable is "true".
#: Switches logging to JSON files and enables Sentry.
IS_PRODUCTION: Final[bool] = os.getenv("PRODUCTION", "false").lower() == "true"


# ==========================
# Calendar
# ==========================

#: Number of public holidays Colombia observes every year under Law 51/1983.
#: Transfers to Monday only move holidays, so the count never changes.
HOLIDAYS_PER_YEAR: Final[int] = 18

#: Weekday index of Monday as returned by datetime.date.weekday().
MONDAY: Final[int] = 0


# ==========================
# iCal export
# ==========================

#: PRODID of generated calendars.
ICAL_PRODID: Final[str] = "-//Festivos Colombia//festivos//"

#: Domain part of generated VEVENT UIDs.
ICAL_UID_DOMAIN: Final[str] = "festivos"

#: Informational timezone of the feed. Holidays are all-day events, so no
#: VTIMEZONE is emitted.
ICAL_TIMEZONE: Final[str] = "America/Bogota"
