# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Date-Time Values and Time System Conversions

This module provides DateTimeValue - a single instant on a continuous,
leap-second-naive time axis, with conversions to and from:

- Gregorian calendar date and time of day
- GPS week + seconds of week, GPS seconds
- BeiDou week + seconds of week, BeiDou seconds
- Year + fractional day of year
- Julian date
- Unix timestamp

The instant is stored as integer nanoseconds since 1970-01-01 00:00:00 UTC.
Float views are produced with one correctly rounded division and float
inputs are converted through their exact binary value, so round trips only
lose what the float itself cannot represent.
"""

import logging
import sys
import warnings
from datetime import datetime, timezone
from fractions import Fraction
from typing import Dict, Tuple, Union

from .constants import (
    GPS_BDS_OFFSET_NS, GPS_BDS_WEEKS, GPS_EPOCH_NS, GPS_UTC_OFFSET_NS,
    JD_UNIX_EPOCH_EXACT, NS_PER_DAY, NS_PER_HOUR, NS_PER_MIN, NS_PER_MS,
    NS_PER_SEC, NS_PER_US, NS_PER_WEEK, UNIX_EPOCH_NS,
)
from .date import (
    CalendarDate, InvalidDate, civil_from_days, days_from_civil,
    is_valid_date, weekday_from_days,
)
from .time import Seconds, TimeOfDay, ns_to_seconds, scale_to_ns, seconds_to_ns

logger = logging.getLogger(__name__)


class DateTimeValue:
    """Instant on a continuous time axis

    Parameters
    ----------
    year, month, day : int
        Gregorian calendar date, validated (``InvalidDate``)
    hour, minute, second, millisecond, microsecond, nanosecond : int
        Time of day components. They are summed as durations, so values
        outside their usual range carry into the next field.

    Examples
    --------
    >>> dt = DateTimeValue(2025, 2, 7, 11, 30, 45)
    >>> dt.gps_week_sow()
    (2352, 473463.0)
    >>> str(DateTimeValue.from_year_doy(2025, 195.75))
    '2025-07-14 18:00:00.000'
    """

    __slots__ = ('_ns',)

    def __init__(self, year: int, month: int, day: int, hour: int = 0, minute: int = 0,
                 second: Seconds = 0, millisecond: int = 0, microsecond: int = 0,
                 nanosecond: int = 0):
        if not is_valid_date(int(year), int(month), int(day)):
            raise InvalidDate(year, month, day)
        self._ns = (days_from_civil(int(year), int(month), int(day)) * NS_PER_DAY
                    + int(hour) * NS_PER_HOUR
                    + int(minute) * NS_PER_MIN
                    + seconds_to_ns(second)
                    + int(millisecond) * NS_PER_MS
                    + int(microsecond) * NS_PER_US
                    + int(nanosecond))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_nanoseconds(cls, ns: int) -> 'DateTimeValue':
        """Create from nanoseconds since 1970-01-01 00:00:00 UTC"""
        dt = cls.__new__(cls)
        dt._ns = int(ns)
        return dt

    @classmethod
    def combine(cls, date: CalendarDate, time: TimeOfDay) -> 'DateTimeValue':
        """Create from a calendar date and a time of day (exact)"""
        return cls.from_nanoseconds(date.days * NS_PER_DAY + time.nanoseconds)

    @classmethod
    def _from_gps_ns(cls, gps_ns: int) -> 'DateTimeValue':
        return cls.from_nanoseconds(GPS_EPOCH_NS + gps_ns - GPS_UTC_OFFSET_NS)

    @classmethod
    def from_gps_week_sow(cls, week: int, sow: Seconds) -> 'DateTimeValue':
        """
        Create from GPS week and seconds of week

        Parameters:
        -----------
        week : int
            GPS week number (any sign)
        sow : float
            Seconds of week, not required to lie in [0, 604800)

        Returns:
        --------
        DateTimeValue
        """
        return cls._from_gps_ns(int(week) * NS_PER_WEEK + seconds_to_ns(sow))

    @classmethod
    def from_gps_seconds(cls, gps_seconds: Seconds) -> 'DateTimeValue':
        """Create from seconds since the GPS epoch (GPS time scale)"""
        return cls._from_gps_ns(seconds_to_ns(gps_seconds))

    @classmethod
    def from_bds_week_sow(cls, week: int, sow: Seconds) -> 'DateTimeValue':
        """
        Create from BeiDou week and seconds of week

        Same as ``from_gps_week_sow(week + 1356, sow + 14)``, evaluated
        without rounding the shifted seconds of week.
        """
        return cls._from_gps_ns((int(week) + GPS_BDS_WEEKS) * NS_PER_WEEK
                                + seconds_to_ns(sow) + GPS_BDS_OFFSET_NS)

    @classmethod
    def from_bds_seconds(cls, bds_seconds: Seconds) -> 'DateTimeValue':
        """Create from seconds since the BeiDou epoch (BDT time scale)"""
        return cls._from_gps_ns(seconds_to_ns(bds_seconds)
                                + GPS_BDS_WEEKS * NS_PER_WEEK + GPS_BDS_OFFSET_NS)

    @classmethod
    def from_year_doy(cls, year: int, doy: Union[int, float]) -> 'DateTimeValue':
        """
        Create from year and (fractional) day of year

        Parameters:
        -----------
        year : int
            Calendar year
        doy : float
            Day of year, 1-based. The integer part selects the day and the
            fractional part is the elapsed fraction of that day.

        Returns:
        --------
        DateTimeValue
        """
        if not 1 <= doy < 367:
            logger.warning(f"Day of year {doy} outside [1, 367) for year {year}")
        jan1 = days_from_civil(int(year), 1, 1)
        return cls.from_nanoseconds((jan1 - 1) * NS_PER_DAY + scale_to_ns(doy, NS_PER_DAY))

    @classmethod
    def from_julian_date(cls, jd: float) -> 'DateTimeValue':
        """Create from Julian date (UTC time scale)"""
        days = Fraction(float(jd)) - JD_UNIX_EPOCH_EXACT
        return cls.from_nanoseconds(UNIX_EPOCH_NS + round(days * NS_PER_DAY))

    @classmethod
    def from_unix_timestamp(cls, unix_ts: Seconds) -> 'DateTimeValue':
        """Create from Unix timestamp (seconds since 1970-01-01, may be negative)"""
        return cls.from_nanoseconds(UNIX_EPOCH_NS + seconds_to_ns(unix_ts))

    @classmethod
    def from_datetime(cls, dt: datetime) -> 'DateTimeValue':
        """
        Create from a standard library datetime

        Naive datetimes are taken as UTC. Aware datetimes are shifted to
        UTC by their utcoffset.
        """
        if dt.tzinfo is None:
            warnings.warn("Datetime has no timezone, assuming UTC", stacklevel=2)
            offset_ns = 0
        else:
            offset = dt.utcoffset()
            offset_ns = ((offset.days * 86400 + offset.seconds) * NS_PER_SEC
                         + offset.microseconds * NS_PER_US)
        value = cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second,
                    microsecond=dt.microsecond)
        value._ns -= offset_ns
        return value

    # ------------------------------------------------------------------
    # Decomposition
    # ------------------------------------------------------------------

    @property
    def instant(self) -> int:
        """Nanoseconds since 1970-01-01 00:00:00 UTC"""
        return self._ns

    def _days(self) -> int:
        return self._ns // NS_PER_DAY

    def _tod_ns(self) -> int:
        return self._ns % NS_PER_DAY

    def date(self) -> CalendarDate:
        """Calendar date of the instant"""
        return CalendarDate.from_days(self._days())

    def time(self) -> TimeOfDay:
        """Time of day of the instant, in [00:00, 24:00)"""
        return TimeOfDay.from_nanoseconds(self._tod_ns())

    def _recompose(self, date: CalendarDate, time: TimeOfDay):
        self._ns = date.days * NS_PER_DAY + time.nanoseconds

    @property
    def year(self) -> int:
        return civil_from_days(self._days())[0]

    @property
    def month(self) -> int:
        return civil_from_days(self._days())[1]

    @property
    def day(self) -> int:
        return civil_from_days(self._days())[2]

    @property
    def hour(self) -> int:
        return self._tod_ns() // NS_PER_HOUR

    @property
    def minute(self) -> int:
        return self._tod_ns() % NS_PER_HOUR // NS_PER_MIN

    @property
    def second(self) -> int:
        return self._tod_ns() % NS_PER_MIN // NS_PER_SEC

    @property
    def millisecond(self) -> int:
        return self._tod_ns() % NS_PER_SEC // NS_PER_MS

    @property
    def microsecond(self) -> int:
        return self._tod_ns() % NS_PER_MS // NS_PER_US

    @property
    def nanosecond(self) -> int:
        return self._tod_ns() % NS_PER_US

    # ------------------------------------------------------------------
    # Field setters
    # ------------------------------------------------------------------

    def set_year(self, year: int):
        """Replace the year, keeping every other field (``InvalidDate`` on Feb 29)"""
        date = self.date()
        date.set_year(year)
        self._recompose(date, self.time())

    def set_month(self, month: int):
        """Replace the month, keeping every other field"""
        date = self.date()
        date.set_month(month)
        self._recompose(date, self.time())

    def set_day(self, day: int):
        """Replace the day of month, keeping every other field"""
        date = self.date()
        date.set_day(day)
        self._recompose(date, self.time())

    def set_hour(self, hour: int):
        """Replace the hour; values past 23 carry into the following days"""
        time = self.time()
        time.set_hour(hour)
        self._recompose(self.date(), time)

    def set_minute(self, minute: int):
        """Replace the minute; values past 59 carry into the hour"""
        time = self.time()
        time.set_minute(minute)
        self._recompose(self.date(), time)

    def set_second(self, second: Seconds):
        """Replace the seconds

        A whole number keeps the current sub-second part; a fractional value
        replaces the sub-second part as well.
        """
        time = self.time()
        second_ns = seconds_to_ns(second)
        if second_ns % NS_PER_SEC == 0:
            second_ns += self._tod_ns() % NS_PER_SEC
        time.set_second(0)
        self._recompose(self.date(), time + TimeOfDay.from_nanoseconds(second_ns))

    def _set_subsecond(self, subsecond_ns: int):
        self._ns += subsecond_ns - self._tod_ns() % NS_PER_SEC

    def set_millisecond(self, millisecond: int):
        """Replace the milliseconds, keeping microseconds and nanoseconds"""
        sub = self._tod_ns() % NS_PER_SEC
        self._set_subsecond(int(millisecond) * NS_PER_MS + sub % NS_PER_MS)

    def set_microsecond(self, microsecond: int):
        """Replace the microseconds, keeping milliseconds and nanoseconds"""
        sub = self._tod_ns() % NS_PER_SEC
        self._set_subsecond(sub // NS_PER_MS * NS_PER_MS + int(microsecond) * NS_PER_US
                            + sub % NS_PER_US)

    def set_nanosecond(self, nanosecond: int):
        """Replace the nanoseconds, keeping milliseconds and microseconds"""
        sub = self._tod_ns() % NS_PER_SEC
        self._set_subsecond(sub // NS_PER_US * NS_PER_US + int(nanosecond))

    # ------------------------------------------------------------------
    # Shifts
    # ------------------------------------------------------------------

    def add_years(self, years: int):
        """Move by whole calendar years (``InvalidDate`` when landing on Feb 29 of a common year)"""
        self.set_year(self.year + int(years))

    def add_months(self, months: int):
        """Move by whole calendar months, rolling the year as needed"""
        date = self.date()
        year, month0 = divmod(date.year * 12 + date.month - 1 + int(months), 12)
        self._recompose(CalendarDate(year, month0 + 1, date.day), self.time())

    def add_days(self, days: int):
        self._ns += int(days) * NS_PER_DAY

    def add_hours(self, hours: int):
        self._ns += int(hours) * NS_PER_HOUR

    def add_minutes(self, minutes: int):
        self._ns += int(minutes) * NS_PER_MIN

    def add_seconds(self, seconds: Seconds):
        self._ns += seconds_to_ns(seconds)

    def add_milliseconds(self, milliseconds: int):
        self._ns += int(milliseconds) * NS_PER_MS

    def add_microseconds(self, microseconds: int):
        self._ns += int(microseconds) * NS_PER_US

    def add_nanoseconds(self, nanoseconds: int):
        self._ns += int(nanoseconds)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def _gps_ns(self) -> int:
        return self._ns - GPS_EPOCH_NS + GPS_UTC_OFFSET_NS

    def gps_week_sow(self) -> Tuple[int, float]:
        """
        GPS week and seconds of week

        Returns:
        --------
        tuple : (week, sow)
            week is floored (negative before the GPS epoch), sow in [0, 604800)
        """
        week, sow_ns = divmod(self._gps_ns(), NS_PER_WEEK)
        return week, ns_to_seconds(sow_ns)

    def gps_seconds(self) -> float:
        """Seconds since the GPS epoch on the GPS time scale"""
        return ns_to_seconds(self._gps_ns())

    def bds_week_sow(self) -> Tuple[int, float]:
        """
        BeiDou week and seconds of week

        Derived from the GPS pair as (week - 1356, sow - 14). The seconds of
        week are not renormalized and lie in [-14, 604786).
        """
        week, sow_ns = divmod(self._gps_ns(), NS_PER_WEEK)
        return week - GPS_BDS_WEEKS, ns_to_seconds(sow_ns - GPS_BDS_OFFSET_NS)

    def bds_seconds(self) -> float:
        """Seconds since the BeiDou epoch on the BDT time scale"""
        return ns_to_seconds(self._gps_ns() - GPS_BDS_WEEKS * NS_PER_WEEK - GPS_BDS_OFFSET_NS)

    def day_of_year(self) -> int:
        """Day of year, 1-based"""
        days = self._days()
        return days - days_from_civil(civil_from_days(days)[0], 1, 1) + 1

    def year_doy(self) -> Tuple[int, float]:
        """
        Year and fractional day of year

        Returns:
        --------
        tuple : (year, doy)
            doy = day of year (1-based) + elapsed fraction of the day
        """
        days = self._days()
        year = civil_from_days(days)[0]
        doy = days - days_from_civil(year, 1, 1) + 1
        return year, (doy * NS_PER_DAY + self._tod_ns()) / NS_PER_DAY

    def julian_date(self) -> float:
        """Julian date (UTC time scale)"""
        # single integer division so the result is rounded once
        num, den = JD_UNIX_EPOCH_EXACT.numerator, JD_UNIX_EPOCH_EXACT.denominator
        return ((self._ns - UNIX_EPOCH_NS) * den + num * NS_PER_DAY) / (den * NS_PER_DAY)

    def unix_timestamp(self) -> float:
        """Seconds since 1970-01-01 00:00:00 UTC (negative before)"""
        return ns_to_seconds(self._ns - UNIX_EPOCH_NS)

    def day_of_week(self) -> int:
        """ISO day of week, 1 = Monday ... 7 = Sunday"""
        return weekday_from_days(self._days()) or 7

    def week_of_year(self) -> int:
        """
        Week of year, 1-based

        Weeks start on Sunday and week 1 is the one containing January 1.
        This is not the ISO-8601 week number.
        """
        days = self._days()
        jan1 = days_from_civil(civil_from_days(days)[0], 1, 1)
        return (days - jan1 + weekday_from_days(jan1)) // 7 + 1

    def to_datetime(self, tz=timezone.utc) -> datetime:
        """
        Convert to a standard library datetime

        Nanoseconds are truncated to microseconds. Raises ValueError outside
        the years supported by ``datetime``.
        """
        year, month, day = civil_from_days(self._days())
        tod = self._tod_ns()
        dt = datetime(year, month, day, tod // NS_PER_HOUR, tod % NS_PER_HOUR // NS_PER_MIN,
                      tod % NS_PER_MIN // NS_PER_SEC, tod % NS_PER_SEC // NS_PER_US,
                      tzinfo=timezone.utc)
        return dt.astimezone(tz)

    def to_dict(self) -> Dict[str, Union[str, int, float, Tuple]]:
        """
        Convert to dictionary with all time representations

        Returns
        -------
        dict
            Dictionary keyed by view name
        """
        return {
            'datetime': str(self),
            'gps_week_sow': self.gps_week_sow(),
            'gps_seconds': self.gps_seconds(),
            'bds_week_sow': self.bds_week_sow(),
            'bds_seconds': self.bds_seconds(),
            'year_doy': self.year_doy(),
            'julian_date': self.julian_date(),
            'unix_timestamp': self.unix_timestamp(),
            'week_of_year': self.week_of_year(),
            'day_of_week': self.day_of_week(),
        }

    def print_all(self, file=None):
        """Print every time representation of this instant"""
        out = file if file is not None else sys.stdout
        print("========= DateTime Value =========", file=out)
        print(f"DateTime: {self.year}-{self.month}-{self.day} {self.hour}:{self.minute}:"
              f"{self.second}.{self.millisecond},{self.microsecond},{self.nanosecond}", file=out)
        print(f"GPS Week and Sec: {self.gps_week_sow()}", file=out)
        print(f"GPS Seconds: {self.gps_seconds()}", file=out)
        print(f"BDS Week and Sec: {self.bds_week_sow()}", file=out)
        print(f"BDS Seconds: {self.bds_seconds()}", file=out)
        print(f"Year and Doy: {self.year_doy()}", file=out)
        print(f"Julian Date: {self.julian_date()}", file=out)
        print(f"Unix Timestamp: {self.unix_timestamp()}", file=out)
        print(f"Week of Year: {self.week_of_year()}", file=out)
        print(f"Day of Week: {self.day_of_week()}", file=out)
        print("==================================", file=out)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def copy(self) -> 'DateTimeValue':
        """Create a copy of this instant"""
        return DateTimeValue.from_nanoseconds(self._ns)

    def __add__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        from .operators import datetime_plus_time
        return datetime_plus_time(self, other)

    def __sub__(self, other):
        from .operators import datetime_difference, datetime_minus_time
        if isinstance(other, TimeOfDay):
            return datetime_minus_time(self, other)
        if isinstance(other, DateTimeValue):
            return datetime_difference(self, other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        return self._ns == other._ns

    def __lt__(self, other):
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        return self._ns < other._ns

    def __le__(self, other):
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        return self._ns <= other._ns

    def __gt__(self, other):
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        return self._ns > other._ns

    def __ge__(self, other):
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        return self._ns >= other._ns

    __hash__ = None

    def __str__(self):
        return f"{self.date()} {self.time()}"

    def __repr__(self):
        return (f"DateTimeValue({self.year}, {self.month}, {self.day}, {self.hour}, "
                f"{self.minute}, {self.second}, {self.millisecond}, {self.microsecond}, "
                f"{self.nanosecond})")


__all__ = ['DateTimeValue']
