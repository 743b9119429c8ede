"""Tests for holiday categories, definitions and resolved holidays."""

import datetime

import pytest
from pydantic import ValidationError

from festivos.core.catalog import (
    COLOMBIAN_HOLIDAYS,
    EASTER_BASED_HOLIDAYS,
    FIXED_HOLIDAYS,
    TRANSFERABLE_HOLIDAYS,
)
from festivos.core.models import (
    EasterOffset,
    FixedDate,
    HolidayCategory,
    HolidayDefinition,
    HolidayKind,
    ResolvedHoliday,
    easter_holiday,
    fixed_holiday,
)


class TestHolidayCategory:
    def test_kinds(self):
        assert HolidayCategory.FIXED_CIVIL.kind is HolidayKind.FIXED
        assert HolidayCategory.FIXED_RELIGIOUS.kind is HolidayKind.FIXED
        assert HolidayCategory.EASTER_BASED_RELIGIOUS.kind is HolidayKind.RELATIVE_TO_DATE
        assert HolidayCategory.TRANSFERABLE_CIVIL.kind is HolidayKind.TRANSFERABLE
        assert HolidayCategory.TRANSFERABLE_RELIGIOUS.kind is HolidayKind.TRANSFERABLE

    def test_only_transferable_kinds_transfer(self):
        transferable = {c for c in HolidayCategory if c.is_transferable}
        assert transferable == {HolidayCategory.TRANSFERABLE_CIVIL, HolidayCategory.TRANSFERABLE_RELIGIOUS}

    def test_civil_flag(self):
        civil = {c for c in HolidayCategory if c.is_civil}
        assert civil == {HolidayCategory.FIXED_CIVIL, HolidayCategory.TRANSFERABLE_CIVIL}

    def test_every_category_has_description(self):
        for category in HolidayCategory:
            assert category.description

    def test_reserved_kinds_exist(self):
        assert HolidayKind("FORMULA_BASED") is HolidayKind.FORMULA_BASED
        assert HolidayKind("LUNAR_BASED") is HolidayKind.LUNAR_BASED


class TestHolidayDefinition:
    def test_fixed_holiday_fields(self):
        definition = fixed_holiday("Navidad", 12, 25, HolidayCategory.FIXED_RELIGIOUS)
        assert (definition.month, definition.day) == (12, 25)
        assert definition.easter_offset is None
        assert not definition.is_transferable

    def test_easter_holiday_fields(self):
        definition = easter_holiday("Corpus Christi", 60, HolidayCategory.TRANSFERABLE_RELIGIOUS)
        assert definition.easter_offset == 60
        assert definition.month is None
        assert definition.day is None
        assert definition.is_transferable

    def test_fixed_category_requires_month_day(self):
        with pytest.raises(ValidationError):
            easter_holiday("Año Nuevo", 0, HolidayCategory.FIXED_CIVIL)

    def test_easter_category_requires_offset(self):
        with pytest.raises(ValidationError):
            fixed_holiday("Jueves Santo", 3, 28, HolidayCategory.EASTER_BASED_RELIGIOUS)

    def test_transferable_accepts_both_rules(self):
        fixed_holiday("San José", 3, 19, HolidayCategory.TRANSFERABLE_RELIGIOUS)
        easter_holiday("Ascensión", 39, HolidayCategory.TRANSFERABLE_RELIGIOUS)

    @pytest.mark.parametrize("month, day", [(0, 1), (13, 1), (4, 31), (2, 29), (1, 0)])
    def test_rejects_days_missing_from_some_year(self, month, day):
        with pytest.raises(ValidationError):
            FixedDate(month=month, day=day)

    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            fixed_holiday("", 1, 1, HolidayCategory.FIXED_CIVIL)

    def test_rule_is_discriminated_from_dict(self):
        definition = HolidayDefinition.model_validate(
            {"name": "Viernes Santo", "category": "EASTER_BASED_RELIGIOUS", "rule": {"rule": "easter", "offset": -2}}
        )
        assert isinstance(definition.rule, EasterOffset)
        assert definition.easter_offset == -2

    def test_is_immutable(self):
        definition = FIXED_HOLIDAYS[0]
        with pytest.raises(ValidationError):
            definition.name = "Otro"


class TestCatalog:
    def test_group_sizes(self):
        assert len(FIXED_HOLIDAYS) == 6
        assert len(EASTER_BASED_HOLIDAYS) == 5
        assert len(TRANSFERABLE_HOLIDAYS) == 7
        assert len(COLOMBIAN_HOLIDAYS) == 18

    def test_names_are_unique(self):
        names = [d.name for d in COLOMBIAN_HOLIDAYS]
        assert len(set(names)) == len(names)

    def test_easter_offsets(self):
        offsets = {d.name: d.easter_offset for d in EASTER_BASED_HOLIDAYS}
        assert offsets == {
            "Jueves Santo": -3,
            "Viernes Santo": -2,
            "Ascensión del Señor": 39,
            "Corpus Christi": 60,
            "Sagrado Corazón": 68,
        }

    def test_transferable_group_all_transfer(self):
        assert all(d.is_transferable for d in TRANSFERABLE_HOLIDAYS)
        assert not any(d.is_transferable for d in FIXED_HOLIDAYS)


class TestResolvedHoliday:
    def make(self, name, day):
        return ResolvedHoliday(name=name, category=HolidayCategory.FIXED_CIVIL, date=day)

    def test_equality_by_date_only(self):
        a = self.make("A", datetime.date(2025, 6, 30))
        b = ResolvedHoliday(
            name="B", category=HolidayCategory.TRANSFERABLE_RELIGIOUS, date=datetime.date(2025, 6, 30)
        )
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_ordering_by_date(self):
        late = self.make("A", datetime.date(2024, 12, 25))
        early = self.make("Z", datetime.date(2024, 1, 1))
        assert early < late
        assert late >= early
        assert sorted([late, early]) == [early, late]

    def test_not_equal_to_plain_date(self):
        holiday = self.make("A", datetime.date(2024, 1, 1))
        assert holiday != datetime.date(2024, 1, 1)

    def test_json_dump(self):
        holiday = self.make("Año Nuevo", datetime.date(2024, 1, 1))
        assert holiday.model_dump(mode="json") == {
            "name": "Año Nuevo",
            "category": "FIXED_CIVIL",
            "date": "2024-01-01",
        }

    def test_from_definition(self):
        definition = TRANSFERABLE_HOLIDAYS[0]
        holiday = ResolvedHoliday.from_definition(definition, datetime.date(2024, 1, 8))
        assert holiday.name == "Día de los Reyes Magos"
        assert holiday.kind is HolidayKind.TRANSFERABLE
        assert holiday.is_transferable
        assert not holiday.is_civil
