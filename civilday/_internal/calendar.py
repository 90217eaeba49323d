"""Calendar utilities for civilday.

This module provides the pure proleptic Gregorian arithmetic a Day is built
on: leap years, month lengths, and conversions between (year, month, day)
triples and ordinal day numbers.

Ordinal 1 = 0001-01-01, matching ``datetime.date.toordinal()``. Ordinals
extend below 1 for year 0 and negative (astronomical) years.

This module is not part of the public API.
"""

from __future__ import annotations

from civilday._internal.constants import DAYS_IN_MONTH, UNIX_EPOCH_ORDINAL

# Days in one full 400-year Gregorian cycle
_DAYS_PER_400_YEARS = 146_097
_DAYS_PER_100_YEARS = 36_524
_DAYS_PER_4_YEARS = 1_461


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ordinal day number.

    The ordinal for 0001-01-01 is 1; 0000-12-31 is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(1970, 1, 1)
        719163
    """
    # Floor division keeps this valid for year <= 0
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to year, month, day.

    Ordinals at or below zero are shifted into positive range by whole
    400-year cycles, which repeat exactly in the Gregorian calendar.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> ordinal_to_ymd(719163)
        (1970, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    cycles = 0
    if ordinal <= 0:
        cycles = (-ordinal) // _DAYS_PER_400_YEARS + 1
        ordinal += cycles * _DAYS_PER_400_YEARS

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1
    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, _DAYS_PER_100_YEARS)
    n4, n = divmod(n, _DAYS_PER_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1 - cycles * 400

    # Last day of a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def ordinal_to_weekday(ordinal: int) -> int:
    """Return the day of week for an ordinal (Monday=0, Sunday=6).

    0001-01-01 (ordinal 1) was a Monday in the proleptic calendar.
    """
    return (ordinal - 1) % 7


def ordinal_to_unix_days(ordinal: int) -> int:
    """Return days since 1970-01-01 for an ordinal."""
    return ordinal - UNIX_EPOCH_ORDINAL


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ordinal_to_weekday",
    "ordinal_to_unix_days",
]
