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

"""Gregorian Calendar Dates

Day counts are computed with integer civil-calendar arithmetic on the
proleptic Gregorian calendar, so no year range limit applies (unlike
``datetime.date`` which stops at years 1..9999).
"""

from typing import Tuple

from .constants import UNIX_EPOCH_WEEKDAY
from .time import TimeOfDay


class InvalidDate(ValueError):
    """Year/month/day triple that does not name a real Gregorian day"""

    def __init__(self, year: int, month: int, day: int):
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"Invalid calendar date: year={year}, month={month}, day={day}")


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule"""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month (month in 1..12)"""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Check that a year/month/day triple names a real calendar day"""
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def days_from_civil(year: int, month: int, day: int) -> int:
    """
    Convert a Gregorian date to days since 1970-01-01

    Parameters:
    -----------
    year : int
        Proleptic Gregorian year (may be zero or negative)
    month : int
        Month (1-12)
    day : int
        Day of month

    Returns:
    --------
    int
        Days since 1970-01-01 (negative before the epoch)
    """
    y = year - (1 if month <= 2 else 0)
    era = y // 400
    yoe = y - era * 400
    mp = (month + 9) % 12
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """
    Convert days since 1970-01-01 to a Gregorian date

    Parameters:
    -----------
    days : int
        Days since 1970-01-01

    Returns:
    --------
    tuple : (year, month, day)
    """
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def weekday_from_days(days: int) -> int:
    """Weekday of a day count, 0 = Sunday ... 6 = Saturday"""
    return (days + UNIX_EPOCH_WEEKDAY) % 7


class CalendarDate:
    """Gregorian calendar day (year, month, day)

    The triple always names a real day. Construction and the field setters
    raise ``InvalidDate`` instead of carrying an out-of-range field into the
    next month; a failed setter leaves the date unchanged.
    """

    __slots__ = ('_year', '_month', '_day')

    def __init__(self, year: int, month: int, day: int):
        year, month, day = int(year), int(month), int(day)
        if not is_valid_date(year, month, day):
            raise InvalidDate(year, month, day)
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def from_days(cls, days: int) -> 'CalendarDate':
        """Create from days since 1970-01-01"""
        return cls(*civil_from_days(int(days)))

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
    def days(self) -> int:
        """Days since 1970-01-01"""
        return days_from_civil(self._year, self._month, self._day)

    def set_year(self, year: int):
        """Replace the year, keeping month and day"""
        self._replace(int(year), self._month, self._day)

    def set_month(self, month: int):
        """Replace the month, keeping year and day"""
        self._replace(self._year, int(month), self._day)

    def set_day(self, day: int):
        """Replace the day, keeping year and month"""
        self._replace(self._year, self._month, int(day))

    def _replace(self, year: int, month: int, day: int):
        if not is_valid_date(year, month, day):
            raise InvalidDate(year, month, day)
        self._year, self._month, self._day = year, month, day

    def copy(self) -> 'CalendarDate':
        """Create a copy of this date"""
        return CalendarDate(self._year, self._month, self._day)

    def _key(self) -> Tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() >= other._key()

    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        from .operators import date_plus_time
        return date_plus_time(self, other)

    def __str__(self):
        if self._year < 0:
            return f"-{-self._year:04d}-{self._month:02d}-{self._day:02d}"
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"

    def __repr__(self):
        return f"CalendarDate({self._year}, {self._month}, {self._day})"


__all__ = [
    'InvalidDate', 'CalendarDate',
    'is_leap_year', 'days_in_month', 'is_valid_date',
    'days_from_civil', 'civil_from_days', 'weekday_from_days',
]
