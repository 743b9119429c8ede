import datetime
from fastapi import HTTPException, status


class InvalidArgumentError(ValueError):
    """A required date or year argument was missing or of the wrong type."""


def require_date(value: object, name: str = "date") -> datetime.date:
    """
    Ensure value is a calendar date.

    A datetime is narrowed to its date part so that comparisons against
    resolved holidays stay date-to-date. None or any other type raises
    InvalidArgumentError.
    """
    if value is None:
        raise InvalidArgumentError(f"The {name} must not be None")
    if isinstance(value, datetime.datetime):
        return value.date()
    if not isinstance(value, datetime.date):
        raise InvalidArgumentError(
            f"The {name} must be a datetime.date, got {type(value).__name__}"
        )
    return value


def require_year(value: object, name: str = "year") -> int:
    """
    Ensure value is a representable calendar year (datetime.MINYEAR..MAXYEAR).

    bool is rejected even though it is an int subclass.
    """
    if value is None:
        raise InvalidArgumentError(f"The {name} must not be None")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"The {name} must be an int, got {type(value).__name__}"
        )
    if not datetime.MINYEAR <= value <= datetime.MAXYEAR:
        raise InvalidArgumentError(
            f"The {name} must be between {datetime.MINYEAR} and {datetime.MAXYEAR}, got {value}"
        )
    return value


def validate_year_param(year: int) -> int:
    """Same as require_year but for route handlers: invalid years give HTTP 400."""
    try:
        return require_year(year)
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e


def validate_date_params(year: int, month: int, day: int) -> datetime.date:
    """
    Build a date from path parameters.

    Impossible dates (month 13, Feb 30, year 0) give HTTP 400.
    """
    try:
        return datetime.date(year, month, day)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid date",
        )
