"""Display formats for Day values.

Every format is a pure function of the day's (year, month, day) triple
and fixed English name tables. Numbers are never zero-padded.

    Function                     Example (2020-04-05)
    ---------------------------  ----------------------
    format_description           4/5/2020
    format_short_description     4/5
    format_key                   4:5:2020
    format_short_month_day       Apr 5
    format_short_month_day_year  Apr 5, 2020
    format_short_month           Apr
    format_full                  April 5, 2020
    format_weekday_date          Sunday, Apr 5
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from civilday._internal.constants import (
    MONTH_NAMES,
    SHORT_MONTH_NAMES,
    WEEKDAY_NAMES,
)

if TYPE_CHECKING:
    from civilday.core.day import Day

KEY_SEPARATOR = ":"


def format_description(day: Day) -> str:
    """Format as ``M/D/YYYY``."""
    return f"{day.month}/{day.day}/{day.year}"


def format_short_description(day: Day) -> str:
    """Format as ``M/D``."""
    return f"{day.month}/{day.day}"


def format_key(day: Day) -> str:
    """Format as the canonical serialization key ``M:D:YYYY``.

    ``Day.from_key`` parses this back into an equal Day.
    """
    return KEY_SEPARATOR.join(str(n) for n in (day.month, day.day, day.year))


def format_short_month(day: Day) -> str:
    return SHORT_MONTH_NAMES[day.month]


def format_short_month_day(day: Day) -> str:
    """Format as ``Apr 5``."""
    return f"{SHORT_MONTH_NAMES[day.month]} {day.day}"


def format_short_month_day_year(day: Day) -> str:
    """Format as ``Apr 5, 2020``."""
    return f"{SHORT_MONTH_NAMES[day.month]} {day.day}, {day.year}"


def format_full(day: Day) -> str:
    """Format as ``April 5, 2020``."""
    return f"{MONTH_NAMES[day.month]} {day.day}, {day.year}"


def format_weekday_date(day: Day) -> str:
    """Format as ``Sunday, Apr 5``.

    The weekday comes from the date itself, so it does not depend on any
    timezone.
    """
    return f"{WEEKDAY_NAMES[day.weekday]}, {format_short_month_day(day)}"


__all__ = [
    "KEY_SEPARATOR",
    "format_description",
    "format_short_description",
    "format_key",
    "format_short_month",
    "format_short_month_day",
    "format_short_month_day_year",
    "format_full",
    "format_weekday_date",
]
