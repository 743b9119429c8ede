import datetime

import pytest
from icalendar import Calendar

from festivos.core.calendar_export import _slugify, generate_ical, generate_ical_for_years
from festivos.core.validators import InvalidArgumentError


class TestCalendarExport:
    def test_generate_ical_is_valid(self):
        """Generated iCal parses and has one VEVENT per holiday."""
        cal = Calendar.from_ical(generate_ical(2024))

        assert str(cal["x-wr-calname"]) == "Festivos Colombia 2024"
        assert str(cal["prodid"]) == "-//Festivos Colombia//festivos//"
        assert len(cal.walk("VEVENT")) == 18

    def test_events_are_all_day(self):
        cal = Calendar.from_ical(generate_ical(2024))
        first = cal.walk("VEVENT")[0]

        assert str(first["summary"]) == "Año Nuevo"
        assert first["dtstart"].dt == datetime.date(2024, 1, 1)
        assert first["dtend"].dt == datetime.date(2024, 1, 2)
        assert str(first["description"]) == "Fixed Civil Holiday"

    def test_transferred_holiday_uses_observed_date(self):
        cal = Calendar.from_ical(generate_ical(2024))
        epiphany = next(e for e in cal.walk("VEVENT") if str(e["summary"]) == "Día de los Reyes Magos")

        assert epiphany["dtstart"].dt == datetime.date(2024, 1, 8)
        assert str(epiphany["uid"]) == "2024-01-08_dia-de-los-reyes-magos@festivos"

    def test_uids_are_unique_even_for_colliding_holidays(self):
        cal = Calendar.from_ical(generate_ical(2025))
        uids = [str(e["uid"]) for e in cal.walk("VEVENT")]
        assert len(set(uids)) == len(uids) == 18

    def test_multi_year_feed(self):
        cal = Calendar.from_ical(generate_ical_for_years(2024, 2026))

        assert str(cal["x-wr-calname"]) == "Festivos Colombia 2024-2026"
        assert len(cal.walk("VEVENT")) == 54

    def test_rejects_reversed_range(self):
        with pytest.raises(InvalidArgumentError):
            generate_ical_for_years(2026, 2024)

    def test_rejects_missing_year(self):
        with pytest.raises(InvalidArgumentError):
            generate_ical(None)


class TestSlugify:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Año Nuevo", "ano-nuevo"),
            ("Día de la Diversidad Étnica y Cultural", "dia-de-la-diversidad-etnica-y-cultural"),
            ("San Pedro y San Pablo", "san-pedro-y-san-pablo"),
        ],
    )
    def test_slugify(self, name, expected):
        assert _slugify(name) == expected
