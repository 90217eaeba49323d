"""Day range helpers.

This module provides functions that treat Day as a discretely strided
sequence:
    - day_range: Iterate days between two bounds
    - days_between: Signed number of days between two bounds
"""

from __future__ import annotations

from typing import Iterator

from civilday.core.any_day import AnyDay
from civilday.core.day import Day
from civilday.errors import SentinelError


def _require_day(value: object, name: str) -> Day:
    if isinstance(value, AnyDay):
        raise SentinelError(f"{name} cannot be AnyDay in a day range")
    if not isinstance(value, Day):
        raise TypeError(f"{name} must be a Day, got {type(value).__name__}")
    return value


def day_range(
    start: Day,
    stop: Day,
    step: int = 1,
    *,
    inclusive: bool = False,
) -> Iterator[Day]:
    """Iterate days from ``start`` towards ``stop``.

    Works like ``range``: ``stop`` is excluded unless ``inclusive`` is
    set, and a negative ``step`` walks backwards.

    Args:
        start: First day yielded.
        stop: Bound of the range.
        step: Days between yielded values (non-zero).
        inclusive: Also yield ``stop`` when the stride lands on it.

    Returns:
        An iterator over the days, in order of iteration.

    Raises:
        ValueError: If step is zero.
        SentinelError: If either bound is AnyDay.

    Examples:
        >>> list(day_range(Day(2020, 2, 27), Day(2020, 3, 1)))
        [Day(2020, 2, 27), Day(2020, 2, 28), Day(2020, 2, 29)]
        >>> list(day_range(Day(2020, 3, 1), Day(2020, 2, 28), -1, inclusive=True))
        [Day(2020, 3, 1), Day(2020, 2, 29), Day(2020, 2, 28)]
    """
    start = _require_day(start, "start")
    stop = _require_day(stop, "stop")
    if isinstance(step, bool) or not isinstance(step, int):
        raise TypeError(f"step must be an integer, got {type(step).__name__}")
    if step == 0:
        raise ValueError("step must not be zero")

    span = start.distance_in_days(stop)
    if inclusive:
        span += 1 if step > 0 else -1

    return (start.add_days(offset) for offset in range(0, span, step))


def days_between(start: Day, stop: Day) -> int:
    """Return the signed number of days from ``start`` to ``stop``.

    Examples:
        >>> days_between(Day(2020, 12, 31), Day(2021, 1, 1))
        1
    """
    return _require_day(start, "start").distance_in_days(_require_day(stop, "stop"))


__all__ = ["day_range", "days_between"]
