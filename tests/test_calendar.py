"""Instant <-> calendar conversion tests."""

from unittest.mock import patch

import pytest

from epochdate._errors import DomainUnderflowError
from epochdate.calendar import now, to_calendar, to_instant
from epochdate.fields import CalendarFields
from epochdate.timezone import UTC, TimezoneOffset

MS_PER_DAY = 86_400_000


class TestToCalendar:
    def test_epoch(self):
        fields = to_calendar(0, UTC)
        assert (fields.year, fields.month, fields.day) == (1970, 1, 1)
        assert (fields.hour, fields.minute, fields.second, fields.millisecond) == (0, 0, 0, 0)
        assert fields.day_of_week == 4

    def test_timezone_defaults_to_utc(self):
        assert to_calendar(0).timezone is UTC

    def test_utc(self):
        fields = to_calendar(1721300611846, UTC)
        assert fields.year == 2024
        assert fields.month == 7
        assert fields.day == 18
        assert fields.hour == 11
        assert fields.minute == 3
        assert fields.second == 31
        assert fields.millisecond == 846

    def test_negative_offset(self):
        tz = TimezoneOffset(offset_minutes=-480, name="-0800")
        fields = to_calendar(1721301768079, tz)
        assert (fields.year, fields.month, fields.day) == (2024, 7, 18)
        assert fields.hour == 3
        assert fields.minute == 22
        assert fields.second == 48
        assert fields.millisecond == 79

    def test_positive_offset_crosses_midnight(self, sgt):
        # 2024-07-18T20:00:00Z is 04:00 the next day in Singapore.
        fields = to_calendar(1721332800000, sgt)
        assert (fields.year, fields.month, fields.day, fields.hour) == (2024, 7, 19, 4)
        assert fields.day_of_week == 5

    def test_carries_timezone(self, pst):
        assert to_calendar(1721301768079, pst).timezone is pst

    def test_leap_day(self):
        fields = to_calendar(1709164800000, UTC)
        assert (fields.month, fields.day) == (2, 29)

    def test_common_year_rolls_into_march(self):
        fields = to_calendar(1677542400000 + MS_PER_DAY, UTC)
        assert (fields.year, fields.month, fields.day) == (2023, 3, 1)

    def test_year_end(self):
        fields = to_calendar(946684799999, UTC)
        assert (fields.year, fields.month, fields.day) == (1999, 12, 31)
        assert (fields.hour, fields.minute, fields.second, fields.millisecond) == (23, 59, 59, 999)

    def test_century_exception_2100(self):
        # 2100-02-28 plus one day is March 1st; 2100 is not a leap year.
        fields = to_calendar(4107456000000 + MS_PER_DAY, UTC)
        assert (fields.year, fields.month, fields.day) == (2100, 3, 1)

    def test_shift_to_exact_epoch(self, pst):
        fields = to_calendar(8 * 3_600_000, pst)
        assert (fields.year, fields.month, fields.day, fields.hour) == (1970, 1, 1, 0)


class TestToCalendarErrors:
    def test_negative_instant(self):
        with pytest.raises(DomainUnderflowError):
            to_calendar(-1, UTC)

    def test_negative_offset_underflow(self, pst):
        with pytest.raises(DomainUnderflowError) as exc_info:
            to_calendar(0, pst)
        assert "-08:00" in exc_info.value.internal()

    def test_underflow_by_one_millisecond(self, pst):
        with pytest.raises(DomainUnderflowError):
            to_calendar(8 * 3_600_000 - 1, pst)


class TestToInstant:
    def test_epoch(self):
        assert to_instant(CalendarFields(1970, 1, 1)) == 0

    def test_utc(self):
        fields = CalendarFields(2024, 7, 18, 11, 3, 31, 846)
        assert to_instant(fields) == 1721300611846

    def test_negative_offset_is_added_back(self):
        tz = TimezoneOffset(offset_minutes=-480, name="PST")
        fields = CalendarFields(2024, 7, 18, 3, 22, 48, 79, timezone=tz)
        assert to_instant(fields) == 1721301768079

    def test_positive_offset_is_subtracted(self, sgt):
        fields = CalendarFields(2024, 7, 19, 4, timezone=sgt)
        assert to_instant(fields) == 1721332800000

    def test_leap_day(self):
        assert to_instant(CalendarFields(2024, 2, 29)) == 1709164800000
        assert to_instant(CalendarFields(2024, 3, 1)) == 1709164800000 + MS_PER_DAY

    def test_underflow(self, sgt):
        with pytest.raises(DomainUnderflowError):
            to_instant(CalendarFields(1970, 1, 1, timezone=sgt))

    def test_fields_are_not_validated(self):
        # Day 32 of January is simply February 1st.
        assert to_instant(CalendarFields(1970, 1, 32)) == 31 * MS_PER_DAY


class TestRoundTrip:
    INSTANTS = [
        0,
        1,
        999,
        MS_PER_DAY - 1,
        MS_PER_DAY,
        68_169_600_000,  # 1972-02-29
        951_782_400_000,  # 2000-02-29
        1_709_164_800_000,
        1_721_301_190_892,
        4_107_542_400_000,  # 2100-03-01
        253_402_300_799_999,  # 9999-12-31T23:59:59.999
    ]

    OFFSETS = [0, 1, -1, 330, -480, 545, 1439, -1439]

    def test_round_trip(self):
        for offset in self.OFFSETS:
            tz = TimezoneOffset(offset_minutes=offset, name="T")
            for instant in self.INSTANTS:
                if instant + offset * 60_000 < 0:
                    continue
                assert to_instant(to_calendar(instant, tz)) == instant, (instant, offset)

    def test_round_trip_every_hour_of_a_leap_year(self):
        tz = TimezoneOffset(offset_minutes=-210, name="NST")
        start = 1_704_067_200_000  # 2024-01-01T00:00:00Z
        for instant in range(start, start + 366 * MS_PER_DAY, 3_600_000 + 1):
            assert to_instant(to_calendar(instant, tz)) == instant

    def test_day_of_week_agrees_with_epoch_day(self):
        for days in range(0, 3000, 37):
            fields = to_calendar(days * MS_PER_DAY, UTC)
            assert fields.day_of_week == (days + 4) % 7


class TestNow:
    def test_uses_wall_clock(self):
        with patch("epochdate.calendar.time.time_ns", return_value=1721300611846_123456):
            fields = now()
        assert fields == to_calendar(1721300611846, UTC)

    def test_applies_timezone(self, pst):
        with patch("epochdate.calendar.time.time_ns", return_value=1721301768079_000000):
            fields = now(pst)
        assert fields.hour == 3
        assert fields.timezone is pst
