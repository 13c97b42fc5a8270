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

"""Arithmetic between dates, times of day and date-time values

The ``+``/``-`` operators of the value types dispatch here.
"""

from .date import CalendarDate
from .datetime import DateTimeValue
from .time import TimeOfDay


def _check(value, expected, name):
    if not isinstance(value, expected):
        raise TypeError(f"{name} must be {expected.__name__}, got {type(value).__name__}")


def date_plus_time(date: CalendarDate, time: TimeOfDay) -> DateTimeValue:
    """Compose a date and a time of day into an instant (exact)"""
    _check(date, CalendarDate, 'date')
    _check(time, TimeOfDay, 'time')
    return DateTimeValue.combine(date, time)


def datetime_plus_time(dt: DateTimeValue, time: TimeOfDay) -> DateTimeValue:
    """Shift an instant forward by a duration"""
    _check(dt, DateTimeValue, 'dt')
    _check(time, TimeOfDay, 'time')
    return DateTimeValue.from_nanoseconds(dt.instant + time.nanoseconds)


def datetime_minus_time(dt: DateTimeValue, time: TimeOfDay) -> DateTimeValue:
    """Shift an instant backward by a duration"""
    _check(dt, DateTimeValue, 'dt')
    _check(time, TimeOfDay, 'time')
    return DateTimeValue.from_nanoseconds(dt.instant - time.nanoseconds)


def datetime_difference(a: DateTimeValue, b: DateTimeValue) -> TimeOfDay:
    """Elapsed duration a - b, may span several days or be negative"""
    _check(a, DateTimeValue, 'a')
    _check(b, DateTimeValue, 'b')
    return TimeOfDay.from_nanoseconds(a.instant - b.instant)


def time_plus_time(a: TimeOfDay, b: TimeOfDay) -> TimeOfDay:
    """Sum of two durations, no wraparound at midnight"""
    _check(a, TimeOfDay, 'a')
    _check(b, TimeOfDay, 'b')
    return a + b


def time_minus_time(a: TimeOfDay, b: TimeOfDay) -> TimeOfDay:
    """Difference of two durations, no wraparound at midnight"""
    _check(a, TimeOfDay, 'a')
    _check(b, TimeOfDay, 'b')
    return a - b


__all__ = [
    'date_plus_time', 'datetime_plus_time', 'datetime_minus_time',
    'datetime_difference', 'time_plus_time', 'time_minus_time',
]
