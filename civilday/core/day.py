"""Day class representing a single civil day.

This module provides the Day class: one calendar day in the proleptic
Gregorian calendar, independent of time of day and of timezone, with
conversions to and from absolute instants in any timezone.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import re
from typing import TYPE_CHECKING, Any, NoReturn, overload

from civilday._internal.calendar import (
    is_leap_year,
    ordinal_to_unix_days,
    ordinal_to_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from civilday._internal.constants import SECONDS_PER_DAY
from civilday._internal.validation import validate_date
from civilday.errors import InvalidDateError, ParseError, SentinelError, TimezoneError
from civilday.format import display
from civilday.units import timezone as _tz

if TYPE_CHECKING:
    from civilday.units.timezone import TimezoneLike

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"([+-]?[0-9]{1,9}):([+-]?[0-9]{1,9}):([+-]?[0-9]{1,9})")


class Day:
    """A civil day in the proleptic Gregorian calendar.

    Day names a calendar date without a time of day. It is anchored to
    an ordinal day number (days since 0001-01-01), which makes day
    arithmetic exact across month ends, year ends and leap days.

    Equality, ordering and hashing depend only on (year, month, day), so
    a Day reached through arithmetic is interchangeable with one built
    directly. Days are immutable; every operation returns a new Day.

    Attributes:
        year: The year (astronomical numbering, -9999 to 9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Day(2020, 4, 5)
        >>> d.description
        '4/5/2020'
        >>> d + 1
        Day(2020, 4, 6)
        >>> Day.from_key(d.key) == d
        True

        >>> Day(2021, 2, 29)
        Traceback (most recent call last):
        ...
        civilday.errors.InvalidDateError: day must be between 1 and 28 for 2021-02, got 29
    """

    __slots__ = ("_year", "_month", "_day", "_ordinal")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Day from year, month and day.

        Args:
            year: The year (can be 0 or negative, astronomical numbering).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            InvalidDateError: If the triple is not a real calendar date.
        """
        validate_date(year, month, day)

        self._year: int = year
        self._month: int = month
        self._day: int = day
        self._ordinal: int = ymd_to_ordinal(year, month, day)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Day:
        """Create a Day from an ordinal day number (1 = 0001-01-01).

        Raises:
            InvalidDateError: If the resulting date is out of range.

        Examples:
            >>> Day.from_ordinal(737520)
            Day(2020, 4, 5)
        """
        year, month, day = ordinal_to_ymd(ordinal)
        return cls(year, month, day)

    @classmethod
    def from_key(cls, key: str) -> Day:
        """Parse a Day from its canonical ``M:D:YYYY`` key.

        The key must be exactly three decimal integers of at most nine
        digits, separated by colons. Signs are accepted so that BCE keys
        round trip.

        Args:
            key: The serialized key, e.g. ``"4:5:2020"``.

        Returns:
            The parsed Day.

        Raises:
            ParseError: If the key is malformed or names no real date.

        Examples:
            >>> Day.from_key("4:5:2020")
            Day(2020, 4, 5)

            >>> Day.from_key("4/5/2020")
            Traceback (most recent call last):
            ...
            civilday.errors.ParseError: Invalid day key: '4/5/2020'. Expected M:D:YYYY
        """
        if not isinstance(key, str):
            raise ParseError(f"day key must be a string, got {type(key).__name__}")

        match = _KEY_PATTERN.fullmatch(key)
        if not match:
            raise ParseError(f"Invalid day key: {key!r}. Expected M:D:YYYY")

        month, day, year = (int(token) for token in match.groups())
        try:
            return cls(year, month, day)
        except InvalidDateError as e:
            raise ParseError(f"Day key {key!r} is not a valid date: {e}") from e

    @classmethod
    def from_instant(cls, instant: _datetime.datetime, tz: TimezoneLike) -> Day:
        """Return the Day ``instant`` falls on in timezone ``tz``.

        Args:
            instant: A timezone-aware datetime.
            tz: A tzinfo, IANA zone name, or UTC offset string.

        Raises:
            TimezoneError: If instant is naive or tz is unknown.

        Examples:
            >>> import datetime
            >>> utc = datetime.timezone.utc
            >>> instant = datetime.datetime(2020, 4, 5, 2, 30, tzinfo=utc)
            >>> Day.from_instant(instant, "UTC")
            Day(2020, 4, 5)
            >>> Day.from_instant(instant, "America/Chicago")
            Day(2020, 4, 4)
        """
        year, month, day = _tz.decompose(instant, tz)
        return cls(year, month, day)

    @classmethod
    def today_in(cls, tz: TimezoneLike) -> Day:
        """Return the current Day in timezone ``tz``."""
        return cls.from_instant(_tz.now(), tz)

    @classmethod
    def today(cls) -> Day:
        """Return the current Day in the process's local timezone."""
        current = _tz.now()
        return cls.from_instant(current, _tz.local_timezone(current))

    @classmethod
    def from_date(cls, date: _datetime.date) -> Day:
        """Create a Day from a ``datetime.date``.

        A ``datetime.datetime`` is rejected; use ``from_instant`` so the
        timezone is explicit.

        Raises:
            TypeError: If date is not a plain ``datetime.date``.
        """
        if isinstance(date, _datetime.datetime) or not isinstance(date, _datetime.date):
            raise TypeError(f"expected datetime.date, got {type(date).__name__}")
        return cls(date.year, date.month, date.day)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def weekday(self) -> int:
        """Return the day of the week (Monday=0, Sunday=6).

        Examples:
            >>> Day(2020, 4, 5).weekday  # Sunday
            6
        """
        return ordinal_to_weekday(self._ordinal)

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    @property
    def description(self) -> str:
        """The day as ``M/D/YYYY``, e.g. ``4/5/2020``."""
        return display.format_description(self)

    @property
    def short_description(self) -> str:
        """The day as ``M/D``, e.g. ``4/5``."""
        return display.format_short_description(self)

    @property
    def key(self) -> str:
        """The canonical serialization key ``M:D:YYYY``, e.g. ``4:5:2020``.

        Suitable as a mapping key in external stores;
        ``Day.from_key(d.key) == d`` always holds.
        """
        return display.format_key(self)

    @property
    def short_month_day_string(self) -> str:
        """The day as ``Apr 5``."""
        return display.format_short_month_day(self)

    @property
    def short_month_day_year_string(self) -> str:
        """The day as ``Apr 5, 2020``."""
        return display.format_short_month_day_year(self)

    @property
    def short_month_string(self) -> str:
        """The abbreviated month name, e.g. ``Apr``."""
        return display.format_short_month(self)

    @property
    def full_formatted_string(self) -> str:
        """The day as ``April 5, 2020``."""
        return display.format_full(self)

    @property
    def weekday_date_string(self) -> str:
        """The day as ``Sunday, Apr 5``."""
        return display.format_weekday_date(self)

    def to_ordinal(self) -> int:
        """Return the ordinal day number (1 = 0001-01-01)."""
        return self._ordinal

    def to_date(self) -> _datetime.date:
        """Return the equivalent ``datetime.date``.

        Raises:
            InvalidDateError: If the year is outside 1-9999, which
                ``datetime.date`` cannot hold.
        """
        try:
            return _datetime.date(self._year, self._month, self._day)
        except ValueError as e:
            raise InvalidDateError(f"{self!r} cannot be represented as a date") from e

    def timestamp(self) -> float:
        """Return POSIX seconds of this day's midnight in UTC.

        Examples:
            >>> Day(1970, 1, 2).timestamp()
            86400.0
        """
        return float(ordinal_to_unix_days(self._ordinal) * SECONDS_PER_DAY)

    def start_of_day(self, tz: TimezoneLike) -> _datetime.datetime:
        """Return the instant this day begins in timezone ``tz``.

        The (year, month, day) triple is interpreted as local midnight
        under ``tz``'s rules, so the same Day starts at different instants
        in different timezones.

        Args:
            tz: A tzinfo, IANA zone name, or UTC offset string.

        Returns:
            An aware UTC datetime.

        Raises:
            TimezoneError: If tz is unknown or the instant cannot be
                represented.

        Examples:
            >>> Day(2020, 4, 5).start_of_day("+02:00")
            datetime.datetime(2020, 4, 4, 22, 0, tzinfo=datetime.timezone.utc)
        """
        return _tz.compose_midnight(self._year, self._month, self._day, tz)

    def contains(self, instant: _datetime.datetime, tz: TimezoneLike) -> bool:
        """Check whether ``instant`` falls on this day in timezone ``tz``.

        The day covers the half-open window from its local midnight up to
        the next day's local midnight. If either bound cannot be computed
        the answer is False.

        Args:
            instant: A timezone-aware datetime.
            tz: A tzinfo, IANA zone name, or UTC offset string.

        Raises:
            TimezoneError: If instant is naive or tz is unknown.

        Examples:
            >>> d = Day(2020, 4, 5)
            >>> d.contains(d.start_of_day("UTC"), "UTC")
            True
        """
        _tz.require_aware(instant)
        zone = _tz.resolve_timezone(tz)
        try:
            start = self.start_of_day(zone)
            end = self.add_days(1).start_of_day(zone)
        except (TimezoneError, InvalidDateError) as e:
            logger.debug("No bounds for %r in %s: %s", self, zone, e)
            return False
        return start <= instant < end

    def add_days(self, days: int) -> Day:
        """Return the Day ``days`` after this one (negative for before).

        Args:
            days: Number of days to add.

        Raises:
            TypeError: If days is not an integer.
            InvalidDateError: If the result is out of range.

        Examples:
            >>> Day(2020, 2, 28).add_days(1)
            Day(2020, 2, 29)
            >>> Day(2021, 1, 1).add_days(-1)
            Day(2020, 12, 31)
        """
        if isinstance(days, bool) or not isinstance(days, int):
            raise TypeError(f"days must be an integer, got {type(days).__name__}")
        return Day.from_ordinal(self._ordinal + days)

    def distance_in_days(self, other: Day) -> int:
        """Return the signed number of days from this Day to ``other``.

        ``self.add_days(self.distance_in_days(other)) == other``.

        Raises:
            SentinelError: If other is AnyDay.
            TypeError: If other is not a Day.

        Examples:
            >>> Day(2020, 2, 28).distance_in_days(Day(2020, 3, 1))
            2
            >>> Day(2020, 3, 1).distance_in_days(Day(2020, 2, 28))
            -2
        """
        if not isinstance(other, Day):
            _reject_operand(other, "distance_in_days")
        return other._ordinal - self._ordinal

    def advanced(self, by: int) -> Day:
        """Alias of ``add_days`` for stride-style callers."""
        return self.add_days(by)

    def distance(self, to: Day) -> int:
        """Alias of ``distance_in_days`` for stride-style callers."""
        return self.distance_in_days(to)

    def to_json(self) -> dict[str, Any]:
        """Return the day as a JSON-serializable dictionary.

        Examples:
            >>> Day(2020, 4, 5).to_json()
            {'_type': 'Day', 'value': '4:5:2020'}
        """
        return {"_type": "Day", "value": self.key}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Day:
        """Create a Day from a dictionary produced by ``to_json``.

        Raises:
            ParseError: If the data is invalid.
        """
        if not isinstance(data, dict):
            raise ParseError(f"expected dict, got {type(data).__name__}")

        type_tag = data.get("_type", "Day")
        if type_tag != "Day":
            raise ParseError(f"expected _type 'Day', got {type_tag!r}")

        value = data.get("value")
        if not value:
            raise ParseError("missing 'value' field for Day")

        return cls.from_key(value)

    def _key_tuple(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __add__(self, other: object) -> Day:
        """Add a number of days.

        Examples:
            >>> Day(2020, 12, 31) + 1
            Day(2021, 1, 1)
        """
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add_days(other)

    __radd__ = __add__

    @overload
    def __sub__(self, other: int) -> Day: ...

    @overload
    def __sub__(self, other: Day) -> int: ...

    def __sub__(self, other: object) -> Day | int:
        """Subtract a number of days, or another Day.

        Subtracting an int returns a Day; subtracting a Day returns the
        number of days between them.

        Examples:
            >>> Day(2020, 3, 1) - 1
            Day(2020, 2, 29)
            >>> Day(2020, 3, 1) - Day(2020, 2, 1)
            29
        """
        if isinstance(other, Day):
            return other.distance_in_days(self)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add_days(-other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self._key_tuple() == other._key_tuple()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Compare by year, then month, then day."""
        if not isinstance(other, Day):
            return NotImplemented
        return self._key_tuple() < other._key_tuple()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self._key_tuple() <= other._key_tuple()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self._key_tuple() > other._key_tuple()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self._key_tuple() >= other._key_tuple()

    def __hash__(self) -> int:
        return hash(self._key_tuple())

    def __repr__(self) -> str:
        return f"Day({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.description


def _reject_operand(other: object, operation: str) -> NoReturn:
    # Imported here to avoid circular imports
    from civilday.core.any_day import AnyDay

    if isinstance(other, AnyDay):
        logger.debug("AnyDay passed to Day.%s", operation)
        raise SentinelError(f"AnyDay is not a valid operand for {operation}")
    raise TypeError(f"expected Day, got {type(other).__name__}")


__all__ = ["Day"]
