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

"""Time of Day"""

import numbers
from fractions import Fraction
from typing import Tuple, Union

from .constants import NS_PER_HOUR, NS_PER_MIN, NS_PER_MS, NS_PER_SEC

Seconds = Union[int, float]


def scale_to_ns(value: Seconds, unit_ns: int) -> int:
    """
    Convert a count of some time unit to integer nanoseconds

    Floats are converted through their exact binary value and rounded
    once to the nearest nanosecond.

    Parameters:
    -----------
    value : int or float
        Number of units (numpy scalars accepted)
    unit_ns : int
        Length of one unit in nanoseconds

    Returns:
    --------
    int
        Nanoseconds
    """
    if isinstance(value, numbers.Integral):
        return int(value) * unit_ns
    return round(Fraction(float(value)) * unit_ns)


def seconds_to_ns(seconds: Seconds) -> int:
    """Convert seconds to integer nanoseconds"""
    return scale_to_ns(seconds, NS_PER_SEC)


def ns_to_seconds(ns: int) -> float:
    """Convert integer nanoseconds to float seconds (correctly rounded)"""
    return ns / NS_PER_SEC


def _split_hms(ns: int) -> Tuple[int, int, int]:
    # truncates toward zero so every component carries the sign of ns
    sign = -1 if ns < 0 else 1
    hours, rem = divmod(abs(ns), NS_PER_HOUR)
    minutes, rem = divmod(rem, NS_PER_MIN)
    return sign * hours, sign * minutes, sign * rem


class TimeOfDay:
    """Duration since midnight

    Backed by a single integer count of nanoseconds. hour/minute/second are
    derived from it and may describe more than one day: adding two values
    never wraps around midnight.

    Parameters
    ----------
    hour : int
        Hours
    minute : int
        Minutes
    second : float
        Seconds, including the sub-second part
    """

    __slots__ = ('_ns',)

    def __init__(self, hour: int = 0, minute: int = 0, second: Seconds = 0.0):
        self._ns = int(hour) * NS_PER_HOUR + int(minute) * NS_PER_MIN + seconds_to_ns(second)

    @classmethod
    def from_seconds(cls, seconds: Seconds) -> 'TimeOfDay':
        """Create from seconds since midnight"""
        return cls.from_nanoseconds(seconds_to_ns(seconds))

    @classmethod
    def from_nanoseconds(cls, ns: int) -> 'TimeOfDay':
        """Create from nanoseconds since midnight"""
        t = cls.__new__(cls)
        t._ns = int(ns)
        return t

    @property
    def nanoseconds(self) -> int:
        """Offset from midnight in nanoseconds"""
        return self._ns

    @property
    def offset_from_midnight(self) -> float:
        """Offset from midnight in seconds"""
        return ns_to_seconds(self._ns)

    @property
    def hour(self) -> int:
        return _split_hms(self._ns)[0]

    @property
    def minute(self) -> int:
        return _split_hms(self._ns)[1]

    @property
    def second(self) -> float:
        """Seconds after the last whole minute, with the sub-second part"""
        return ns_to_seconds(_split_hms(self._ns)[2])

    def set_hour(self, hour: int):
        _, minute, sec_ns = _split_hms(self._ns)
        self._ns = int(hour) * NS_PER_HOUR + minute * NS_PER_MIN + sec_ns

    def set_minute(self, minute: int):
        hour, _, sec_ns = _split_hms(self._ns)
        self._ns = hour * NS_PER_HOUR + int(minute) * NS_PER_MIN + sec_ns

    def set_second(self, second: Seconds):
        hour, minute, _ = _split_hms(self._ns)
        self._ns = hour * NS_PER_HOUR + minute * NS_PER_MIN + seconds_to_ns(second)

    def copy(self) -> 'TimeOfDay':
        """Create a copy of this time of day"""
        return TimeOfDay.from_nanoseconds(self._ns)

    def __eq__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._ns == other._ns

    def __lt__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._ns < other._ns

    def __le__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._ns <= other._ns

    def __gt__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._ns > other._ns

    def __ge__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._ns >= other._ns

    def __add__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return TimeOfDay.from_nanoseconds(self._ns + other._ns)

    def __sub__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return TimeOfDay.from_nanoseconds(self._ns - other._ns)

    def __str__(self):
        hours, minutes, sec_ns = _split_hms(abs(self._ns))
        seconds, sub_ns = divmod(sec_ns, NS_PER_SEC)
        sign = '-' if self._ns < 0 else ''
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{sub_ns // NS_PER_MS:03d}"

    def __repr__(self):
        return f"TimeOfDay.from_nanoseconds({self._ns})"


__all__ = ['TimeOfDay', 'scale_to_ns', 'seconds_to_ns', 'ns_to_seconds']
