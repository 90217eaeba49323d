"""Civilday exception hierarchy.

All civilday-specific exceptions inherit from CivilDayError.
"""

from __future__ import annotations


class CivilDayError(Exception):
    """Base exception for all civilday errors."""

    pass


class InvalidDateError(CivilDayError):
    """Invalid calendar date.

    Raised when a (year, month, day) triple does not name a real day in
    the proleptic Gregorian calendar.

    Examples:
        - Month value outside 1-12
        - February 29 in a non-leap year
        - April 31
    """

    pass


class ParseError(CivilDayError):
    """Failed to parse a serialized day.

    Examples:
        - Key with more or fewer than three ``:``-separated tokens
        - Non-numeric token in a key
        - JSON payload without a ``value`` field
    """

    pass


class TimezoneError(CivilDayError):
    """Invalid timezone or instant.

    Examples:
        - Unknown IANA zone name
        - Naive datetime passed where an instant is required
        - Local midnight that cannot be represented as a datetime
    """

    pass


class SentinelError(CivilDayError, TypeError):
    """Misuse of the AnyDay sentinel.

    AnyDay only takes part in ordering. Arithmetic, distance, conversion
    and formatting on it are programming errors, so this also derives
    from TypeError.
    """

    pass


__all__ = [
    "CivilDayError",
    "InvalidDateError",
    "ParseError",
    "TimezoneError",
    "SentinelError",
]
