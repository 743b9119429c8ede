import datetime
import enum
from functools import total_ordering
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class HolidayKind(str, enum.Enum):
    """Base ways a holiday date can be determined."""

    FIXED = "FIXED"  # same month/day every year
    RELATIVE_TO_DATE = "RELATIVE_TO_DATE"  # offset from another date (Easter)
    TRANSFERABLE = "TRANSFERABLE"  # moved by a rule (Ley de Puentes)
    FORMULA_BASED = "FORMULA_BASED"  # reserved, no implementation
    LUNAR_BASED = "LUNAR_BASED"  # reserved, no implementation


class HolidayCategory(str, enum.Enum):
    """
    Official Colombian holiday categories (Law 51 of 1983).

    Each category combines a base HolidayKind with a civil/religious flag.
    Only the transferable flag changes how a date is resolved.
    """

    FIXED_CIVIL = "FIXED_CIVIL"
    FIXED_RELIGIOUS = "FIXED_RELIGIOUS"
    EASTER_BASED_RELIGIOUS = "EASTER_BASED_RELIGIOUS"
    TRANSFERABLE_CIVIL = "TRANSFERABLE_CIVIL"
    TRANSFERABLE_RELIGIOUS = "TRANSFERABLE_RELIGIOUS"

    @property
    def kind(self) -> HolidayKind:
        return _CATEGORY_INFO[self][0]

    @property
    def description(self) -> str:
        return _CATEGORY_INFO[self][1]

    @property
    def is_civil(self) -> bool:
        return _CATEGORY_INFO[self][2]

    @property
    def is_transferable(self) -> bool:
        return self.kind is HolidayKind.TRANSFERABLE


_CATEGORY_INFO: dict[HolidayCategory, tuple[HolidayKind, str, bool]] = {
    HolidayCategory.FIXED_CIVIL: (HolidayKind.FIXED, "Fixed Civil Holiday", True),
    HolidayCategory.FIXED_RELIGIOUS: (HolidayKind.FIXED, "Fixed Religious Holiday", False),
    HolidayCategory.EASTER_BASED_RELIGIOUS: (
        HolidayKind.RELATIVE_TO_DATE,
        "Easter Based Religious Holiday",
        False,
    ),
    HolidayCategory.TRANSFERABLE_CIVIL: (HolidayKind.TRANSFERABLE, "Transferable Civil Holiday", True),
    HolidayCategory.TRANSFERABLE_RELIGIOUS: (
        HolidayKind.TRANSFERABLE,
        "Transferable Religious Holiday",
        False,
    ),
}


class FixedDate(BaseModel):
    """Same month and day every year."""

    model_config = ConfigDict(frozen=True)

    rule: Literal["fixed"] = "fixed"
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @model_validator(mode="after")
    def _check_day_exists(self) -> "FixedDate":
        # 2001 is not a leap year: rejects Feb 29 and Apr 31 alike
        try:
            datetime.date(2001, self.month, self.day)
        except ValueError as e:
            raise ValueError(f"{self.month:02d}-{self.day:02d} is not a day of every year") from e
        return self

    def base_date(self, year: int, easter: datetime.date) -> datetime.date:
        return datetime.date(year, self.month, self.day)


class EasterOffset(BaseModel):
    """Signed number of days from Easter Sunday."""

    model_config = ConfigDict(frozen=True)

    rule: Literal["easter"] = "easter"
    offset: int

    def base_date(self, year: int, easter: datetime.date) -> datetime.date:
        return easter + datetime.timedelta(days=self.offset)


DateRule = Annotated[Union[FixedDate, EasterOffset], Field(discriminator="rule")]


class HolidayDefinition(BaseModel):
    """One entry of a holiday catalog: a name, a category and a date rule."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    category: HolidayCategory
    rule: DateRule

    @model_validator(mode="after")
    def _check_rule_matches_category(self) -> "HolidayDefinition":
        kind = self.category.kind
        if kind is HolidayKind.FIXED and not isinstance(self.rule, FixedDate):
            raise ValueError(f"{self.name}: {self.category.value} requires a fixed month/day")
        if kind is HolidayKind.RELATIVE_TO_DATE and not isinstance(self.rule, EasterOffset):
            raise ValueError(f"{self.name}: {self.category.value} requires an Easter offset")
        return self

    @property
    def month(self) -> int | None:
        return self.rule.month if isinstance(self.rule, FixedDate) else None

    @property
    def day(self) -> int | None:
        return self.rule.day if isinstance(self.rule, FixedDate) else None

    @property
    def easter_offset(self) -> int | None:
        return self.rule.offset if isinstance(self.rule, EasterOffset) else None

    @property
    def is_transferable(self) -> bool:
        return self.category.is_transferable


def fixed_holiday(name: str, month: int, day: int, category: HolidayCategory) -> HolidayDefinition:
    """Definition of a holiday on a fixed month/day (moved or not, per category)."""
    return HolidayDefinition(name=name, category=category, rule=FixedDate(month=month, day=day))


def easter_holiday(name: str, offset: int, category: HolidayCategory) -> HolidayDefinition:
    """Definition of a holiday a signed number of days from Easter Sunday."""
    return HolidayDefinition(name=name, category=category, rule=EasterOffset(offset=offset))


@total_ordering
class ResolvedHoliday(BaseModel):
    """
    A holiday resolved to its observed date in a given year.

    Two resolved holidays are equal when they fall on the same date; name and
    category are not part of the identity. Sorting is by date.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    category: HolidayCategory
    date: datetime.date

    @classmethod
    def from_definition(cls, definition: HolidayDefinition, date: datetime.date) -> "ResolvedHoliday":
        return cls(name=definition.name, category=definition.category, date=date)

    @property
    def kind(self) -> HolidayKind:
        return self.category.kind

    @property
    def is_civil(self) -> bool:
        return self.category.is_civil

    @property
    def is_transferable(self) -> bool:
        return self.category.is_transferable

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedHoliday):
            return NotImplemented
        return self.date == other.date

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ResolvedHoliday):
            return NotImplemented
        return self.date < other.date

    def __hash__(self) -> int:
        return hash(self.date)
