"""Timezone resolution and instant/day conversion.

This module is the only place civilday touches wall-clock time. It turns
caller-supplied timezone specifications into ``tzinfo`` objects and offers
two conversions, both parameterized explicitly by timezone:

    - decompose: absolute instant -> local (year, month, day)
    - compose_midnight: local (year, month, day) -> absolute instant

Instants are timezone-aware ``datetime.datetime`` values. Results are
always normalized to UTC.

Named zones come from the IANA database through ``zoneinfo``; the
``tzdata`` package supplies the database on hosts that lack one.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import re
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from civilday._internal.constants import MAX_INSTANT_YEAR, MIN_INSTANT_YEAR
from civilday.errors import TimezoneError

logger = logging.getLogger(__name__)

TimezoneLike = Union[str, _datetime.tzinfo]

UTC = _datetime.timezone.utc

# Maximum offset is +/- 14 hours (Pacific/Kiritimati is UTC+14)
_MAX_OFFSET_SECONDS = 14 * 60 * 60

_OFFSET_PATTERN = re.compile(r"([+-])(\d{2})(?::?(\d{2}))?")


def resolve_timezone(tz: TimezoneLike) -> _datetime.tzinfo:
    """Resolve a timezone specification into a ``tzinfo``.

    Supported inputs:
        - Any ``datetime.tzinfo`` instance (returned unchanged)
        - "Z", "z" or "UTC": UTC
        - "+HH:MM", "-HHMM", "+HH": fixed UTC offset
        - An IANA name such as "America/New_York"

    Args:
        tz: Timezone specification.

    Returns:
        A tzinfo usable with ``datetime``.

    Raises:
        TimezoneError: If the specification cannot be resolved.

    Examples:
        >>> resolve_timezone("UTC")
        datetime.timezone.utc
        >>> resolve_timezone("+05:30")
        datetime.timezone(datetime.timedelta(seconds=19800))
        >>> resolve_timezone("Europe/Paris")
        zoneinfo.ZoneInfo(key='Europe/Paris')
    """
    if isinstance(tz, _datetime.tzinfo):
        return tz
    if not isinstance(tz, str):
        raise TimezoneError(
            f"expected str or tzinfo, got {type(tz).__name__}"
        )

    s = tz.strip()
    if not s:
        raise TimezoneError("timezone name must not be empty")
    if s.upper() in ("Z", "UTC"):
        return UTC

    match = _OFFSET_PATTERN.fullmatch(s)
    if match:
        return _offset_timezone(s, *match.groups())

    try:
        zone = ZoneInfo(s)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise TimezoneError(f"Unknown timezone: {tz!r}") from e

    logger.debug("Resolved timezone %r from the IANA database", s)
    return zone


def _offset_timezone(
    s: str, sign_str: str, hours_str: str, minutes_str: str | None
) -> _datetime.timezone:
    hours = int(hours_str)
    minutes = int(minutes_str) if minutes_str else 0

    if minutes > 59:
        raise TimezoneError(f"Offset minutes out of range: {s!r}")

    offset_seconds = hours * 3600 + minutes * 60
    if offset_seconds > _MAX_OFFSET_SECONDS:
        raise TimezoneError(f"Offset hours out of range: {s!r}")

    sign = 1 if sign_str == "+" else -1
    if offset_seconds == 0:
        return UTC
    return _datetime.timezone(_datetime.timedelta(seconds=sign * offset_seconds))


def local_timezone(
    instant: _datetime.datetime | None = None,
) -> _datetime.tzinfo:
    """Return the process's local timezone at ``instant``.

    The result is the fixed offset in effect at ``instant`` (right now
    when omitted), which is what deciding "today" needs.
    """
    if instant is None:
        instant = now()
    tz = instant.astimezone().tzinfo
    if tz is None:  # pragma: no cover - astimezone() always attaches one
        raise TimezoneError("could not determine the local timezone")
    return tz


def now() -> _datetime.datetime:
    """Return the current instant as an aware UTC datetime."""
    return _datetime.datetime.now(UTC)


def require_aware(instant: _datetime.datetime) -> None:
    """Check that ``instant`` is an aware datetime.

    Raises:
        TimezoneError: If instant is not a datetime or is naive.
    """
    if not isinstance(instant, _datetime.datetime):
        raise TimezoneError(
            f"expected datetime instant, got {type(instant).__name__}"
        )
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise TimezoneError(
            f"instant must be timezone-aware, got naive {instant.isoformat()}"
        )


def decompose(
    instant: _datetime.datetime, tz: TimezoneLike
) -> tuple[int, int, int]:
    """Return the local (year, month, day) of ``instant`` in ``tz``.

    Args:
        instant: An aware datetime.
        tz: The timezone whose calendar decides the day.

    Returns:
        Tuple of (year, month, day).

    Raises:
        TimezoneError: If instant is naive, tz cannot be resolved, or the
            local time falls outside the representable range.

    Examples:
        >>> late = _datetime.datetime(2020, 4, 5, 3, 0, tzinfo=UTC)
        >>> decompose(late, "America/Los_Angeles")
        (2020, 4, 4)
    """
    require_aware(instant)
    zone = resolve_timezone(tz)
    try:
        local = instant.astimezone(zone)
    except OverflowError as e:
        raise TimezoneError(
            f"{instant.isoformat()} has no representable local time in {zone}"
        ) from e
    return (local.year, local.month, local.day)


def compose_midnight(
    year: int, month: int, day: int, tz: TimezoneLike
) -> _datetime.datetime:
    """Return the instant local midnight of a day begins in ``tz``.

    Where midnight is skipped by a transition, the first existing moment
    of the day is returned. That is the transition instant, also when the
    gap opens before midnight on the previous day. Where midnight repeats,
    the earlier occurrence is returned.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month.
        tz: The timezone whose midnight is wanted.

    Returns:
        An aware datetime in UTC.

    Raises:
        TimezoneError: If the instant cannot be represented by ``datetime``.

    Examples:
        >>> compose_midnight(2020, 4, 5, "America/New_York")
        datetime.datetime(2020, 4, 5, 4, 0, tzinfo=datetime.timezone.utc)
    """
    zone = resolve_timezone(tz)
    if year < MIN_INSTANT_YEAR or year > MAX_INSTANT_YEAR:
        raise TimezoneError(
            f"year {year} is outside the instant range "
            f"{MIN_INSTANT_YEAR}-{MAX_INSTANT_YEAR}"
        )
    local = _datetime.datetime(year, month, day, tzinfo=zone)
    try:
        start = local.astimezone(UTC)
        if _wall_time(start, zone) == local.replace(tzinfo=None):
            return start
        # Midnight falls in a gap. fold=1 lands before the transition and
        # fold=0 after it; the day begins at the transition itself.
        before = local.replace(fold=1).astimezone(UTC)
        return _first_instant_on(local.date(), before, start, zone)
    except OverflowError as e:
        raise TimezoneError(
            f"midnight of {year}-{month:02d}-{day:02d} in {zone} "
            "is not representable"
        ) from e


def _wall_time(
    instant: _datetime.datetime, zone: _datetime.tzinfo
) -> _datetime.datetime:
    return instant.astimezone(zone).replace(tzinfo=None)


def _first_instant_on(
    date: _datetime.date,
    before: _datetime.datetime,
    after: _datetime.datetime,
    zone: _datetime.tzinfo,
) -> _datetime.datetime:
    """Bisect to the first whole second in (before, after] local to ``date``."""
    low, high = 0, int((after - before).total_seconds())
    while high - low > 1:
        mid = (low + high) // 2
        candidate = before + _datetime.timedelta(seconds=mid)
        if _wall_time(candidate, zone).date() >= date:
            high = mid
        else:
            low = mid
    logger.debug("Midnight of %s is skipped in %s", date, zone)
    return before + _datetime.timedelta(seconds=high)


__all__ = [
    "TimezoneLike",
    "UTC",
    "resolve_timezone",
    "local_timezone",
    "now",
    "require_aware",
    "decompose",
    "compose_midnight",
]
