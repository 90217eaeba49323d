"""Core day types.

This module provides:
    - Day: A civil day in the proleptic Gregorian calendar
    - AnyDay / ANY_DAY: The lower bound sentinel that precedes every Day
    - day_range, days_between: Range helpers over Day
"""

from __future__ import annotations

from civilday.core.any_day import ANY_DAY, AnyDay
from civilday.core.day import Day
from civilday.core.ranges import day_range, days_between

__all__: list[str] = [
    "ANY_DAY",
    "AnyDay",
    "Day",
    "day_range",
    "days_between",
]
