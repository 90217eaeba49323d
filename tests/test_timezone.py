"""Tests for timezone resolution and instant conversions."""

from __future__ import annotations

import datetime
from zoneinfo import ZoneInfo

import pytest

from civilday import Day
from civilday.errors import TimezoneError
from civilday.units.timezone import (
    UTC,
    compose_midnight,
    decompose,
    local_timezone,
    resolve_timezone,
)


def utc(*args: int) -> datetime.datetime:
    return datetime.datetime(*args, tzinfo=UTC)


class LateNightJump(datetime.tzinfo):
    """Fixed zone that jumps from UTC-3 to UTC-2 at 23:30 on 2021-10-09.

    Local clocks go from 23:29:59 straight to 00:30:00, so midnight of
    2021-10-10 never happens and that day begins at 02:30 UTC.
    """

    transition = datetime.datetime(2021, 10, 10, 2, 30)
    gap = (
        datetime.datetime(2021, 10, 9, 23, 30),
        datetime.datetime(2021, 10, 10, 0, 30),
    )

    def utcoffset(self, dt):
        wall = dt.replace(tzinfo=None)
        if wall < self.gap[0]:
            return datetime.timedelta(hours=-3)
        if wall >= self.gap[1]:
            return datetime.timedelta(hours=-2)
        return datetime.timedelta(hours=-2 if dt.fold else -3)

    def dst(self, dt):
        return None

    def tzname(self, dt):
        return None

    def fromutc(self, dt):
        moment = dt.replace(tzinfo=None)
        hours = -3 if moment < self.transition else -2
        return (moment + datetime.timedelta(hours=hours)).replace(tzinfo=self)


class TestResolveTimezone:
    """Tests for resolve_timezone()."""

    @pytest.mark.parametrize("tz_text", ["Z", "z", "UTC", "utc", "+00:00", "-0000"])
    def test_utc_variants(self, tz_text: str) -> None:
        assert resolve_timezone(tz_text) is UTC

    @pytest.mark.parametrize(
        "tz_text, seconds",
        [
            ("+05:30", 19800),
            ("+0530", 19800),
            ("-05:00", -18000),
            ("-0500", -18000),
            ("+09", 32400),
            ("+14:00", 50400),
        ],
    )
    def test_offsets(self, tz_text: str, seconds: int) -> None:
        tz = resolve_timezone(tz_text)
        assert tz.utcoffset(None) == datetime.timedelta(seconds=seconds)

    def test_iana_name(self) -> None:
        assert resolve_timezone("America/New_York") == ZoneInfo("America/New_York")

    def test_tzinfo_passthrough(self) -> None:
        tz = datetime.timezone(datetime.timedelta(hours=3))
        assert resolve_timezone(tz) is tz

    @pytest.mark.parametrize(
        "tz_text", ["Not/A_Zone", "+15:00", "+05:60", "", "+123", "+5", "+12:3"]
    )
    def test_invalid(self, tz_text: str) -> None:
        with pytest.raises(TimezoneError):
            resolve_timezone(tz_text)

    def test_wrong_type(self) -> None:
        with pytest.raises(TimezoneError, match="expected str or tzinfo"):
            resolve_timezone(5)  # type: ignore[arg-type]

    def test_local_timezone(self) -> None:
        assert isinstance(local_timezone(), datetime.tzinfo)

    def test_local_timezone_at_instant(self) -> None:
        instant = utc(2020, 4, 5, 2, 30)
        tz = local_timezone(instant)
        assert tz.utcoffset(None) == instant.astimezone().utcoffset()


class TestDecompose:
    """Tests for decompose() and Day.from_instant()."""

    def test_utc(self) -> None:
        assert decompose(utc(2020, 4, 5, 23, 59), "UTC") == (2020, 4, 5)

    def test_west_of_utc(self) -> None:
        assert decompose(utc(2020, 4, 5, 3), "America/Los_Angeles") == (2020, 4, 4)

    def test_east_of_utc(self) -> None:
        assert decompose(utc(2020, 4, 5, 20), "Asia/Tokyo") == (2020, 4, 6)

    def test_instant_in_other_zone(self) -> None:
        instant = datetime.datetime(2020, 4, 5, 1, 0, tzinfo=ZoneInfo("Europe/Paris"))
        assert decompose(instant, "UTC") == (2020, 4, 4)

    def test_naive_instant_rejected(self) -> None:
        with pytest.raises(TimezoneError, match="timezone-aware"):
            decompose(datetime.datetime(2020, 4, 5), "UTC")

    def test_date_rejected(self) -> None:
        with pytest.raises(TimezoneError, match="expected datetime"):
            decompose(datetime.date(2020, 4, 5), "UTC")  # type: ignore[arg-type]

    def test_from_instant(self) -> None:
        instant = utc(2020, 4, 5, 2, 30)
        assert Day.from_instant(instant, "UTC") == Day(2020, 4, 5)
        assert Day.from_instant(instant, "America/Chicago") == Day(2020, 4, 4)


class TestComposeMidnight:
    """Tests for compose_midnight() and Day.start_of_day()."""

    def test_utc(self) -> None:
        assert compose_midnight(2020, 4, 5, "UTC") == utc(2020, 4, 5)

    def test_result_is_utc(self) -> None:
        start = compose_midnight(2020, 4, 5, "Asia/Tokyo")
        assert start.tzinfo is UTC
        assert start == utc(2020, 4, 4, 15)

    def test_daylight_time(self) -> None:
        assert Day(2020, 4, 5).start_of_day("America/New_York") == utc(2020, 4, 5, 4)

    def test_standard_time(self) -> None:
        assert Day(2020, 1, 5).start_of_day("America/New_York") == utc(2020, 1, 5, 5)

    def test_fixed_offset(self) -> None:
        assert Day(2020, 4, 5).start_of_day("+02:00") == utc(2020, 4, 4, 22)

    def test_start_differs_from_utc_anchor(self) -> None:
        d = Day(2020, 4, 5)
        assert d.start_of_day("UTC") != d.start_of_day("America/New_York")

    def test_skipped_midnight(self) -> None:
        """Sao Paulo jumped from 00:00 to 01:00 on 2018-11-04."""
        start = Day(2018, 11, 4).start_of_day("America/Sao_Paulo")
        assert start == utc(2018, 11, 4, 3)
        local = start.astimezone(ZoneInfo("America/Sao_Paulo"))
        assert (local.day, local.hour) == (4, 1)

    def test_gap_opening_before_midnight(self) -> None:
        zone = LateNightJump()
        start = Day(2021, 10, 10).start_of_day(zone)
        assert start == utc(2021, 10, 10, 2, 30)
        assert decompose(start, zone) == (2021, 10, 10)
        assert decompose(start - datetime.timedelta(seconds=1), zone) == (2021, 10, 9)

    def test_gap_partitions_neighbouring_days(self) -> None:
        zone = LateNightJump()
        inside_gap_hour = utc(2021, 10, 10, 2, 45)
        assert Day(2021, 10, 10).contains(inside_gap_hour, zone)
        assert not Day(2021, 10, 9).contains(inside_gap_hour, zone)
        assert Day(2021, 10, 9).contains(utc(2021, 10, 10, 2, 29, 59), zone)

    def test_year_outside_instant_range(self) -> None:
        with pytest.raises(TimezoneError, match="outside the instant range"):
            Day(0, 6, 1).start_of_day("UTC")

    def test_unrepresentable_instant(self) -> None:
        with pytest.raises(TimezoneError, match="not representable"):
            Day(1, 1, 1).start_of_day("+05:00")


class TestContains:
    """Tests for Day.contains()."""

    @pytest.mark.parametrize(
        "tz", ["UTC", "America/New_York", "Asia/Kolkata", "Pacific/Auckland", "-03:30"]
    )
    def test_start_is_contained(self, tz: str) -> None:
        d = Day(2020, 4, 5)
        assert d.contains(d.start_of_day(tz), tz)

    @pytest.mark.parametrize(
        "tz", ["UTC", "America/New_York", "Asia/Kolkata", "Pacific/Auckland", "-03:30"]
    )
    def test_second_before_start_is_not_contained(self, tz: str) -> None:
        d = Day(2020, 4, 5)
        before = d.start_of_day(tz) - datetime.timedelta(seconds=1)
        assert not d.contains(before, tz)
        assert d.add_days(-1).contains(before, tz)

    def test_window_is_half_open(self) -> None:
        d = Day(2020, 4, 5)
        end = d.add_days(1).start_of_day("UTC")
        assert d.contains(end - datetime.timedelta(microseconds=1), "UTC")
        assert not d.contains(end, "UTC")

    def test_same_instant_in_different_zones(self) -> None:
        instant = utc(2020, 4, 5, 2, 30)
        assert Day(2020, 4, 5).contains(instant, "UTC")
        assert not Day(2020, 4, 5).contains(instant, "America/Chicago")
        assert Day(2020, 4, 4).contains(instant, "America/Chicago")

    def test_short_day_at_dst_start(self) -> None:
        """2020-03-08 lasted 23 hours in New York."""
        d = Day(2020, 3, 8)
        start = d.start_of_day("America/New_York")
        assert d.contains(start + datetime.timedelta(hours=22, minutes=59), "America/New_York")
        assert not d.contains(start + datetime.timedelta(hours=23), "America/New_York")

    def test_long_day_at_dst_end(self) -> None:
        """2020-11-01 lasted 25 hours in New York."""
        d = Day(2020, 11, 1)
        start = d.start_of_day("America/New_York")
        assert d.contains(start + datetime.timedelta(hours=24, minutes=30), "America/New_York")
        assert not d.contains(start + datetime.timedelta(hours=25), "America/New_York")

    def test_uncomputable_bounds_return_false(self) -> None:
        assert not Day(0, 6, 1).contains(utc(1, 1, 1), "UTC")
        assert not Day(1, 1, 1).contains(utc(1, 1, 1, 12), "+05:00")
        assert not Day(9999, 12, 31).contains(utc(9999, 12, 31, 12), "UTC")

    def test_naive_instant_rejected(self) -> None:
        with pytest.raises(TimezoneError):
            Day(2020, 4, 5).contains(datetime.datetime(2020, 4, 5, 12), "UTC")

    def test_unknown_zone_rejected(self) -> None:
        with pytest.raises(TimezoneError):
            Day(2020, 4, 5).contains(utc(2020, 4, 5, 12), "Nowhere/Special")


class TestToday:
    """Tests for Day.today() and Day.today_in()."""

    def test_today_in(self, frozen_now) -> None:
        assert Day.today_in("UTC") == Day(2020, 4, 5)
        assert Day.today_in("America/Chicago") == Day(2020, 4, 4)
        assert Day.today_in("Asia/Tokyo") == Day(2020, 4, 5)

    def test_today_in_follows_clock(self, frozen_now) -> None:
        frozen_now(utc(2021, 1, 1, 0, 0))
        assert Day.today_in("UTC") == Day(2021, 1, 1)
        assert Day.today_in("-01:00") == Day(2020, 12, 31)

    def test_today_uses_local_timezone(self, frozen_now, monkeypatch) -> None:
        from civilday.units import timezone as tz_module

        monkeypatch.setattr(
            tz_module, "local_timezone", lambda instant=None: ZoneInfo("America/Chicago")
        )
        assert Day.today() == Day(2020, 4, 4)

    def test_today_unpatched(self) -> None:
        d = Day.today()
        assert isinstance(d, Day)
        assert d.year >= 2024

    def test_today_reads_clock_once(self, monkeypatch) -> None:
        from civilday.units import timezone as tz_module

        reads = []

        def fake_now() -> datetime.datetime:
            reads.append(1)
            return utc(2020, 4, 5, 2, 30)

        seen = []

        def fake_local(instant=None):
            seen.append(instant)
            return datetime.timezone(datetime.timedelta(hours=-5))

        monkeypatch.setattr(tz_module, "now", fake_now)
        monkeypatch.setattr(tz_module, "local_timezone", fake_local)
        assert Day.today() == Day(2020, 4, 4)
        assert len(reads) == 1
        assert seen == [utc(2020, 4, 5, 2, 30)]
