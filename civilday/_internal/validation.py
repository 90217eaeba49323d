"""Validation utilities for civilday.

This module checks that day components name a real calendar date.

This module is not part of the public API.
"""

from __future__ import annotations

from civilday._internal.calendar import days_in_month
from civilday._internal.constants import MAX_YEAR, MIN_YEAR
from civilday.errors import InvalidDateError


def validate_integer(name: str, value: object) -> None:
    """Validate that a component is a plain integer.

    ``bool`` is rejected even though it subclasses ``int``.

    Raises:
        InvalidDateError: If value is not an int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDateError(
            f"{name} must be an integer, got {type(value).__name__}"
        )


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        InvalidDateError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidDateError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        InvalidDateError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise InvalidDateError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        InvalidDateError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDateError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate a full (year, month, day) triple.

    Args:
        year: The year to validate.
        month: The month to validate.
        day: The day to validate.

    Raises:
        InvalidDateError: If the triple is not a real Gregorian date.

    Examples:
        >>> validate_date(2024, 2, 29)
        >>> validate_date(2023, 2, 29)
        Traceback (most recent call last):
        ...
        civilday.errors.InvalidDateError: day must be between 1 and 28 for 2023-02, got 29
    """
    validate_integer("year", year)
    validate_integer("month", month)
    validate_integer("day", day)
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


__all__ = [
    "validate_integer",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
]
