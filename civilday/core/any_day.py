"""AnyDay sentinel: an open-ended lower bound for Day ordering.

AnyDay stands for "no particular day". It sorts before every Day and is
equal only to itself, so it can open a range or act as a wildcard key in
ordered collections. It is deliberately a separate type: it has no year,
month or day, and any attempt to do arithmetic on it, measure distance
with it, convert it or format it raises SentinelError.

Use the module-level ``ANY_DAY`` instance; ``AnyDay()`` returns it too.

Examples:
    >>> from civilday import ANY_DAY, Day
    >>> ANY_DAY < Day(1, 1, 1)
    True
    >>> sorted([Day(2020, 4, 5), ANY_DAY])
    [AnyDay, Day(2020, 4, 5)]
    >>> ANY_DAY + 1
    Traceback (most recent call last):
    ...
    civilday.errors.SentinelError: AnyDay does not support add_days
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, NoReturn

from civilday.core.day import Day
from civilday.errors import SentinelError

logger = logging.getLogger(__name__)


class AnyDay:
    """The singleton lower bound that precedes every Day."""

    __slots__ = ()

    _instance: ClassVar[AnyDay | None] = None

    def __new__(cls) -> AnyDay:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def _fail(self, operation: str) -> NoReturn:
        logger.debug("Rejected AnyDay.%s", operation)
        raise SentinelError(f"AnyDay does not support {operation}")

    # Calendar fields have no meaning on the sentinel

    @property
    def year(self) -> int:
        self._fail("year")

    @property
    def month(self) -> int:
        self._fail("month")

    @property
    def day(self) -> int:
        self._fail("day")

    @property
    def description(self) -> str:
        self._fail("description")

    @property
    def short_description(self) -> str:
        self._fail("short_description")

    @property
    def key(self) -> str:
        self._fail("key")

    @property
    def short_month_day_string(self) -> str:
        self._fail("short_month_day_string")

    @property
    def short_month_day_year_string(self) -> str:
        self._fail("short_month_day_year_string")

    @property
    def short_month_string(self) -> str:
        self._fail("short_month_string")

    @property
    def full_formatted_string(self) -> str:
        self._fail("full_formatted_string")

    @property
    def weekday_date_string(self) -> str:
        self._fail("weekday_date_string")

    def add_days(self, days: int) -> NoReturn:
        self._fail("add_days")

    def distance_in_days(self, other: object) -> NoReturn:
        self._fail("distance_in_days")

    def advanced(self, by: int) -> NoReturn:
        self._fail("add_days")

    def distance(self, to: object) -> NoReturn:
        self._fail("distance_in_days")

    def start_of_day(self, tz: object) -> NoReturn:
        self._fail("start_of_day")

    def contains(self, instant: object, tz: object) -> NoReturn:
        self._fail("contains")

    def to_json(self) -> dict[str, Any]:
        """Return the sentinel as a JSON-serializable dictionary."""
        return {"_type": "AnyDay", "value": None}

    def __add__(self, other: object) -> NoReturn:
        self._fail("add_days")

    __radd__ = __add__

    def __sub__(self, other: object) -> NoReturn:
        self._fail("subtraction")

    def __rsub__(self, other: object) -> NoReturn:
        self._fail("subtraction")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AnyDay):
            return True
        if isinstance(other, Day):
            return False
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Day):
            return True
        if isinstance(other, AnyDay):
            return False
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, (Day, AnyDay)):
            return True
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, (Day, AnyDay)):
            return False
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, AnyDay):
            return True
        if isinstance(other, Day):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(AnyDay)

    def __reduce__(self) -> str:
        return "ANY_DAY"

    def __repr__(self) -> str:
        return "AnyDay"

    def __str__(self) -> str:
        return "AnyDay"


ANY_DAY = AnyDay()


__all__ = ["AnyDay", "ANY_DAY"]
