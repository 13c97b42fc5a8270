#!/usr/bin/env python3
"""Test suite for DateTimeValue and time system conversions"""

import io
import unittest
from datetime import datetime, timedelta, timezone

from pygnsstime.core.date import CalendarDate, InvalidDate
from pygnsstime.core.datetime import DateTimeValue
from pygnsstime.core.time import TimeOfDay

# Tolerances (seconds)
FLOAT_TOL = 5e-6
JULIAN_TOL = 2.1e-5  # half a float64 ulp of present-day Julian dates is 2.01e-5 s


def diff_seconds(a, b):
    """Absolute difference between two instants in seconds"""
    return abs(a.instant - b.instant) / 1e9


class TestDateTimeConstruction(unittest.TestCase):
    """Test construction and field accessors"""

    def test_fields(self):
        """Nanosecond resolution breakdown"""
        dt = DateTimeValue(2025, 2, 7, 11, 30, 45, 123, 456, 789)
        self.assertEqual(dt.year, 2025)
        self.assertEqual(dt.month, 2)
        self.assertEqual(dt.day, 7)
        self.assertEqual(dt.hour, 11)
        self.assertEqual(dt.minute, 30)
        self.assertEqual(dt.second, 45)
        self.assertEqual(dt.millisecond, 123)
        self.assertEqual(dt.microsecond, 456)
        self.assertEqual(dt.nanosecond, 789)

    def test_invalid_date(self):
        self.assertRaises(InvalidDate, DateTimeValue, 2025, 2, 30)
        self.assertRaises(InvalidDate, DateTimeValue, 2025, 13, 1, 12)

    def test_time_components_carry(self):
        dt = DateTimeValue(2025, 2, 7, 24, 0, 61)
        self.assertEqual(str(dt), "2025-02-08 00:01:01.000")

    def test_combine_and_decompose(self):
        """date + time recomposes exactly"""
        date = CalendarDate(2025, 2, 7)
        time = TimeOfDay(11, 30, 45.123456789)
        dt = DateTimeValue.combine(date, time)
        self.assertEqual(dt.date(), date)
        self.assertEqual(dt.time(), time)
        self.assertEqual(dt, DateTimeValue(2025, 2, 7, 11, 30, 45, 123, 456, 789))

    def test_before_unix_epoch(self):
        dt = DateTimeValue(1969, 12, 31, 23, 59, 59, 500)
        self.assertLess(dt.instant, 0)
        self.assertEqual(dt.date(), CalendarDate(1969, 12, 31))
        self.assertEqual(dt.time(), TimeOfDay(23, 59, 59.5))
        self.assertEqual(dt.unix_timestamp(), -0.5)

    def test_string_form(self):
        dt = DateTimeValue(2025, 2, 7, 11, 30, 45, 123, 456, 789)
        self.assertEqual(str(dt), "2025-02-07 11:30:45.123")
        self.assertEqual(repr(dt), "DateTimeValue(2025, 2, 7, 11, 30, 45, 123, 456, 789)")


class TestDateTimeSetters(unittest.TestCase):
    """Test field setters and shifts"""

    def setUp(self):
        self.dt = DateTimeValue(2025, 2, 7, 11, 30, 45, 123, 456, 789)

    def test_set_hour_isolation(self):
        """set_hour leaves date, minute, second and sub-second untouched"""
        for hour in range(24):
            dt = self.dt.copy()
            dt.set_hour(hour)
            self.assertEqual(dt.hour, hour)
            self.assertEqual(dt.date(), self.dt.date())
            self.assertEqual(dt.instant % 3_600_000_000_000, self.dt.instant % 3_600_000_000_000)

    def test_set_minute_and_second(self):
        self.dt.set_minute(5)
        self.dt.set_second(9)
        self.assertEqual(str(self.dt), "2025-02-07 11:05:09.123")
        self.assertEqual((self.dt.millisecond, self.dt.microsecond, self.dt.nanosecond),
                         (123, 456, 789))

    def test_set_fractional_second(self):
        """A fractional second replaces the sub-second part too"""
        self.dt.set_second(30.5)
        self.assertEqual(str(self.dt), "2025-02-07 11:30:30.500")
        self.assertEqual((self.dt.millisecond, self.dt.microsecond, self.dt.nanosecond),
                         (500, 0, 0))
        self.assertEqual((self.dt.hour, self.dt.minute), (11, 30))

    def test_time_setter_overflow_carries_into_date(self):
        self.dt.set_hour(25)
        self.assertEqual(self.dt.date(), CalendarDate(2025, 2, 8))
        self.assertEqual(self.dt.hour, 1)

    def test_set_date_fields(self):
        self.dt.set_year(2024)
        self.dt.set_month(12)
        self.dt.set_day(31)
        self.assertEqual(self.dt, DateTimeValue(2024, 12, 31, 11, 30, 45, 123, 456, 789))

    def test_set_invalid_day(self):
        before = self.dt.instant
        self.assertRaises(InvalidDate, self.dt.set_day, 29)
        self.assertEqual(self.dt.instant, before)

    def test_subsecond_setters(self):
        self.dt.set_millisecond(999)
        self.assertEqual((self.dt.millisecond, self.dt.microsecond, self.dt.nanosecond),
                         (999, 456, 789))
        self.dt.set_microsecond(1)
        self.assertEqual((self.dt.millisecond, self.dt.microsecond, self.dt.nanosecond),
                         (999, 1, 789))
        self.dt.set_nanosecond(0)
        self.assertEqual((self.dt.millisecond, self.dt.microsecond, self.dt.nanosecond),
                         (999, 1, 0))
        self.assertEqual(self.dt.second, 45)

    def test_increment(self):
        """Shifting by 1 day, 45 minutes, 10 seconds and 123 microseconds"""
        self.dt.add_days(1)
        self.dt.add_minutes(45)
        self.dt.add_seconds(10)
        self.dt.add_microseconds(123)

        self.assertEqual(self.dt.year, 2025)
        self.assertEqual(self.dt.month, 2)
        self.assertEqual(self.dt.day, 8)
        self.assertEqual(self.dt.hour, 12)
        self.assertEqual(self.dt.minute, 15)
        self.assertEqual(self.dt.second, 55)
        self.assertEqual(self.dt.millisecond, 123)
        self.assertEqual(self.dt.microsecond, 579)
        self.assertEqual(self.dt.nanosecond, 789)

    def test_other_shifts(self):
        dt = DateTimeValue(2025, 2, 7)
        dt.add_hours(-1)
        dt.add_milliseconds(1500)
        dt.add_nanoseconds(1)
        self.assertEqual(dt, DateTimeValue(2025, 2, 6, 23, 0, 1, 500, 0, 1))

    def test_add_months_and_years(self):
        dt = DateTimeValue(2025, 11, 15, 6)
        dt.add_months(3)
        self.assertEqual(dt, DateTimeValue(2026, 2, 15, 6))
        dt.add_months(-14)
        self.assertEqual(dt, DateTimeValue(2024, 12, 15, 6))
        dt.add_years(-24)
        self.assertEqual(dt, DateTimeValue(2000, 12, 15, 6))

        self.assertRaises(InvalidDate, DateTimeValue(2025, 1, 31).add_months, 1)
        self.assertRaises(InvalidDate, DateTimeValue(2024, 2, 29).add_years, 1)


class TestGPSConversions(unittest.TestCase):
    """Test GPS and BeiDou conversions"""

    def setUp(self):
        self.dt = DateTimeValue(2025, 2, 7, 11, 30, 45)

    def test_gps_week_sow(self):
        week, sow = self.dt.gps_week_sow()
        self.assertEqual(week, 2352)
        self.assertAlmostEqual(sow, 473463, delta=1e-6)

        dt2 = DateTimeValue.from_gps_week_sow(week, sow)
        self.assertEqual(dt2, self.dt)

    def test_gps_epoch(self):
        """GPS time runs 18 s ahead of UTC"""
        self.assertEqual(DateTimeValue(1980, 1, 6).gps_week_sow(), (0, 18.0))
        self.assertEqual(DateTimeValue(1980, 1, 5, 23, 59, 42).gps_week_sow(), (0, 0.0))
        self.assertEqual(DateTimeValue(1980, 1, 5).gps_week_sow(), (-1, 518418.0))

    def test_gps_seconds(self):
        seconds = self.dt.gps_seconds()
        self.assertEqual(seconds, 2352 * 604800 + 473463)
        self.assertEqual(DateTimeValue.from_gps_seconds(seconds), self.dt)

    def test_bds_week_sow(self):
        week, sow = self.dt.bds_week_sow()
        self.assertEqual((week, sow), (996, 473449.0))
        self.assertEqual(DateTimeValue.from_bds_week_sow(week, sow), self.dt)

    def test_bds_sow_not_renormalized(self):
        """BDS seconds of week may be negative just after a GPS week rollover"""
        dt = DateTimeValue.from_gps_week_sow(2352, 5.0)
        week, sow = dt.bds_week_sow()
        self.assertEqual((week, sow), (996, -9.0))
        self.assertEqual(DateTimeValue.from_bds_week_sow(week, sow), dt)

    def test_bds_seconds(self):
        seconds = self.dt.bds_seconds()
        self.assertEqual(seconds, 996 * 604800 + 473449)
        self.assertEqual(DateTimeValue.from_bds_seconds(seconds), self.dt)
        # BDT ran 4 s ahead of UTC at the BDS epoch under the fixed offsets
        self.assertEqual(DateTimeValue(2006, 1, 1).bds_seconds(), 4.0)
        self.assertEqual(DateTimeValue.from_bds_seconds(4), DateTimeValue(2006, 1, 1))

    def test_year_doy_to_gps(self):
        """Year 2025, day 195.75 lands in GPS week 2375"""
        dt = DateTimeValue.from_year_doy(2025, 195.75)
        week, sow = dt.gps_week_sow()
        self.assertEqual(week, 2375)
        self.assertEqual(sow, 151218)

        year, doy = DateTimeValue.from_gps_week_sow(week, sow).year_doy()
        self.assertEqual(year, 2025)
        self.assertAlmostEqual(doy, 195.75, delta=1e-6)

    def test_negative_week(self):
        """Conversions are defined before the GPS epoch"""
        dt = DateTimeValue.from_gps_week_sow(-10, 100.0)
        self.assertEqual(dt.gps_week_sow(), (-10, 100.0))
        self.assertLess(dt, DateTimeValue(1980, 1, 6))


class TestOtherConversions(unittest.TestCase):
    """Test day-of-year, Julian date, Unix timestamp and weekday views"""

    def setUp(self):
        self.dt = DateTimeValue(2025, 2, 7, 11, 30, 45)

    def test_year_doy(self):
        year, doy = self.dt.year_doy()
        self.assertEqual(year, 2025)
        self.assertAlmostEqual(doy, 38 + 41445 / 86400, delta=1e-12)
        self.assertEqual(self.dt.day_of_year(), 38)
        self.assertEqual(DateTimeValue.from_year_doy(year, doy), self.dt)

    def test_year_doy_integer(self):
        self.assertEqual(DateTimeValue.from_year_doy(2024, 366), DateTimeValue(2024, 12, 31))
        self.assertEqual(DateTimeValue(2024, 12, 31).year_doy(), (2024, 366.0))

    def test_year_doy_out_of_range_is_logged(self):
        with self.assertLogs('pygnsstime.core.datetime', level='WARNING'):
            dt = DateTimeValue.from_year_doy(2025, 400)
        self.assertEqual(dt, DateTimeValue(2026, 2, 4))

    def test_julian_date(self):
        self.assertEqual(DateTimeValue(1970, 1, 1).julian_date(), 2440587.5)
        self.assertEqual(DateTimeValue(2000, 1, 1, 12).julian_date(), 2451545.0)

        jd = self.dt.julian_date()
        self.assertAlmostEqual(jd, 2460713.9796875, delta=1e-9)
        self.assertLessEqual(diff_seconds(DateTimeValue.from_julian_date(jd), self.dt), JULIAN_TOL)

    def test_unix_timestamp(self):
        ts = self.dt.unix_timestamp()
        self.assertEqual(ts, 1738927845.0)
        self.assertEqual(DateTimeValue.from_unix_timestamp(ts), self.dt)
        self.assertEqual(DateTimeValue.from_unix_timestamp(-86400), DateTimeValue(1969, 12, 31))

    def test_day_of_week(self):
        """ISO encoding, 1 = Monday ... 7 = Sunday"""
        self.assertEqual(self.dt.day_of_week(), 5)  # Friday
        self.assertEqual(DateTimeValue(2025, 2, 9).day_of_week(), 7)
        self.assertEqual(DateTimeValue(2025, 2, 10).day_of_week(), 1)
        self.assertEqual(DateTimeValue(1969, 12, 31, 23).day_of_week(), 3)

    def test_week_of_year(self):
        """Sunday-based weeks, week 1 contains January 1"""
        self.assertEqual(DateTimeValue(2025, 1, 1).week_of_year(), 1)
        self.assertEqual(DateTimeValue(2025, 1, 4).week_of_year(), 1)   # Saturday
        self.assertEqual(DateTimeValue(2025, 1, 5).week_of_year(), 2)   # Sunday
        self.assertEqual(self.dt.week_of_year(), 6)
        self.assertEqual(DateTimeValue(2023, 1, 1).week_of_year(), 1)   # Sunday
        self.assertEqual(DateTimeValue(2023, 12, 31).week_of_year(), 53)


class TestRoundTrips(unittest.TestCase):
    """Test round trips for instants with sub-second parts"""

    def setUp(self):
        self.instants = [
            DateTimeValue(2025, 2, 7, 11, 30, 45, 123, 456, 789),
            DateTimeValue(1999, 8, 21, 23, 59, 59, 999, 999, 999),
            DateTimeValue(2006, 1, 1, 0, 0, 13, 250),
            DateTimeValue(1975, 6, 30, 1, 2, 3, 4, 5, 6),
            DateTimeValue(2040, 12, 31, 18, 45, 0, 0, 0, 1),
        ]

    def test_week_sow_round_trips_are_exact(self):
        for dt in self.instants:
            with self.subTest(dt=str(dt)):
                self.assertEqual(DateTimeValue.from_gps_week_sow(*dt.gps_week_sow()), dt)
                self.assertEqual(DateTimeValue.from_bds_week_sow(*dt.bds_week_sow()), dt)

    def test_scalar_round_trips(self):
        for dt in self.instants:
            with self.subTest(dt=str(dt)):
                self.assertLessEqual(diff_seconds(DateTimeValue.from_gps_seconds(dt.gps_seconds()), dt),
                                     FLOAT_TOL)
                self.assertLessEqual(diff_seconds(DateTimeValue.from_bds_seconds(dt.bds_seconds()), dt),
                                     FLOAT_TOL)
                self.assertLessEqual(diff_seconds(DateTimeValue.from_year_doy(*dt.year_doy()), dt),
                                     FLOAT_TOL)
                self.assertLessEqual(
                    diff_seconds(DateTimeValue.from_unix_timestamp(dt.unix_timestamp()), dt),
                    FLOAT_TOL)
                self.assertLessEqual(diff_seconds(DateTimeValue.from_julian_date(dt.julian_date()), dt),
                                     JULIAN_TOL)


class TestDateTimeOperators(unittest.TestCase):
    """Test ordering and arithmetic with TimeOfDay"""

    def test_date_plus_time(self):
        dt = CalendarDate(2025, 2, 7) + TimeOfDay(11, 30, 45)
        self.assertIsInstance(dt, DateTimeValue)
        self.assertEqual((dt.time().hour, dt.time().minute, dt.time().second), (11, 30, 45.0))

    def test_increment_with_time_of_day(self):
        dt = CalendarDate(2025, 2, 7) + TimeOfDay(11, 30, 45)
        dt += TimeOfDay(3, 35, 40)
        self.assertEqual((dt.time().hour, dt.time().minute, dt.time().second), (15, 6, 25.0))
        dt += TimeOfDay(10, 56, 17)
        self.assertEqual(str(dt), "2025-02-08 02:02:42.000")
        dt -= TimeOfDay(26, 32, 42)
        self.assertEqual(str(dt), "2025-02-06 23:30:00.000")

    def test_shift_returns_new_value(self):
        dt = DateTimeValue(2025, 2, 7)
        later = dt + TimeOfDay(1)
        earlier = dt - TimeOfDay(1)
        self.assertEqual(dt, DateTimeValue(2025, 2, 7))
        self.assertEqual(later - earlier, TimeOfDay(2))

    def test_increment_leaves_alias_unchanged(self):
        start = DateTimeValue(2025, 2, 7, 11, 30, 45)
        later = start
        later += TimeOfDay(1)
        self.assertIsNot(later, start)
        self.assertEqual(str(start), "2025-02-07 11:30:45.000")
        self.assertEqual(str(later), "2025-02-07 12:30:45.000")
        later -= TimeOfDay(2)
        self.assertEqual(start, DateTimeValue(2025, 2, 7, 11, 30, 45))

    def test_ordering(self):
        a = DateTimeValue(2025, 2, 7, 11, 30, 45)
        b = DateTimeValue(2025, 2, 7, 11, 30, 45, nanosecond=1)
        self.assertLess(a, b)
        self.assertGreater(b, a)
        self.assertNotEqual(a, b)
        self.assertEqual(sorted([b, a]), [a, b])
        self.assertEqual(a, a.copy())

    def test_not_hashable(self):
        """Values change in place through their setters, so they are not hashable"""
        with self.assertRaises(TypeError):
            hash(DateTimeValue(2025, 2, 7))

    def test_mismatched_operand(self):
        with self.assertRaises(TypeError):
            DateTimeValue(2025, 2, 7) + 3600
        with self.assertRaises(TypeError):
            CalendarDate(2025, 2, 7) + CalendarDate(2025, 2, 8)


class TestStandardLibraryInterop(unittest.TestCase):
    """Test conversion to and from datetime.datetime"""

    def test_from_aware_datetime(self):
        utc = datetime(2025, 2, 7, 11, 30, 45, 123456, tzinfo=timezone.utc)
        tokyo = utc.astimezone(timezone(timedelta(hours=9)))
        expected = DateTimeValue(2025, 2, 7, 11, 30, 45, 123, 456)
        self.assertEqual(DateTimeValue.from_datetime(utc), expected)
        self.assertEqual(DateTimeValue.from_datetime(tokyo), expected)

    def test_from_naive_datetime_warns(self):
        with self.assertWarns(UserWarning):
            dt = DateTimeValue.from_datetime(datetime(2025, 2, 7, 11, 30, 45))
        self.assertEqual(dt, DateTimeValue(2025, 2, 7, 11, 30, 45))

    def test_to_datetime(self):
        dt = DateTimeValue(2025, 2, 7, 11, 30, 45, 123, 456, 789)
        self.assertEqual(dt.to_datetime(),
                         datetime(2025, 2, 7, 11, 30, 45, 123456, tzinfo=timezone.utc))


class TestPrintAll(unittest.TestCase):
    """Test the all-views diagnostic output"""

    def test_to_dict(self):
        views = DateTimeValue(2025, 2, 7, 11, 30, 45).to_dict()
        self.assertEqual(views['datetime'], "2025-02-07 11:30:45.000")
        self.assertEqual(views['gps_week_sow'], (2352, 473463.0))
        self.assertEqual(views['bds_week_sow'], (996, 473449.0))
        self.assertEqual(views['unix_timestamp'], 1738927845.0)
        self.assertEqual(views['week_of_year'], 6)
        self.assertEqual(views['day_of_week'], 5)

    def test_print_all(self):
        out = io.StringIO()
        DateTimeValue(2025, 2, 7, 11, 30, 45).print_all(file=out)
        text = out.getvalue()
        self.assertIn("DateTime: 2025-2-7 11:30:45.0,0,0", text)
        self.assertIn("GPS Week and Sec: (2352, 473463.0)", text)
        self.assertIn("GPS Seconds: 1422963063.0", text)
        self.assertIn("BDS Week and Sec: (996, 473449.0)", text)
        self.assertIn("Unix Timestamp: 1738927845.0", text)
        self.assertIn("Week of Year: 6", text)
        self.assertIn("Day of Week: 5", text)


if __name__ == '__main__':
    unittest.main()
