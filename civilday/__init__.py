"""Civilday: a calendar-day value type.

Civilday represents a single civil day (year, month, day) independent of
time of day, with exact day arithmetic, fixed English display formats, a
canonical ``M:D:YYYY`` key, and timezone-aware conversions to and from
absolute instants.

Core Types:
    Day: A civil day in the proleptic Gregorian calendar
    AnyDay: Sentinel that sorts before every Day (singleton ANY_DAY)

Functions:
    day_range: Iterate days between two bounds
    days_between: Signed number of days between two days
    resolve_timezone: Turn a zone name, offset string or tzinfo into a tzinfo

Exceptions:
    CivilDayError: Base exception
    InvalidDateError: Triple is not a real calendar date
    ParseError: Malformed key or JSON payload
    TimezoneError: Unknown timezone or unusable instant
    SentinelError: Arithmetic or formatting on AnyDay

Example:
    >>> from civilday import Day
    >>> d = Day.from_key("2:28:2020")
    >>> (d + 1).full_formatted_string
    'February 29, 2020'
    >>> d.contains(d.start_of_day("Asia/Tokyo"), "Asia/Tokyo")
    True
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from civilday.core.any_day import ANY_DAY, AnyDay
from civilday.core.day import Day
from civilday.core.ranges import day_range, days_between

# Units
from civilday.units.timezone import resolve_timezone

# Exceptions
from civilday.errors import (
    CivilDayError,
    InvalidDateError,
    ParseError,
    SentinelError,
    TimezoneError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "ANY_DAY",
    "AnyDay",
    "Day",
    # Functions
    "day_range",
    "days_between",
    "resolve_timezone",
    # Exceptions
    "CivilDayError",
    "InvalidDateError",
    "ParseError",
    "SentinelError",
    "TimezoneError",
]
