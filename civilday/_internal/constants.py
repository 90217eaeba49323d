"""Internal constants for civilday.

These constants define the limits and fixed name tables used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_DAY: int = 24 * 60 * 60  # 86_400

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Years the standard library datetime can hold; instants outside are rejected
MIN_INSTANT_YEAR: int = 1
MAX_INSTANT_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# English en_US names, 1-indexed like DAYS_IN_MONTH
MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

SHORT_MONTH_NAMES: tuple[str, ...] = tuple(name[:3] for name in MONTH_NAMES)

# Monday=0 through Sunday=6, matching datetime.date.weekday()
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Ordinal of 1970-01-01 (ordinal 1 = 0001-01-01)
UNIX_EPOCH_ORDINAL: int = 719_163


__all__ = [
    "SECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_INSTANT_YEAR",
    "MAX_INSTANT_YEAR",
    "DAYS_IN_MONTH",
    "MONTH_NAMES",
    "SHORT_MONTH_NAMES",
    "WEEKDAY_NAMES",
    "UNIX_EPOCH_ORDINAL",
]
