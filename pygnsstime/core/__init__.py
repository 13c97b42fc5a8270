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

"""Core Date/Time Module.

This module provides the value types and conversion arithmetic:

- **Constants**: epochs, fixed GPS/BDS offsets and unit conversions
- **CalendarDate**: proleptic Gregorian (year, month, day)
- **TimeOfDay**: duration since midnight (hour, minute, fractional second)
- **DateTimeValue**: a single instant with conversions to GPS week/SOW,
  GPS seconds, BDS week/SOW, BDS seconds, year/day-of-year, Julian date
  and Unix timestamp
- **Operators**: date + time, date-time +/- time composition

Example Usage:
    >>> from pygnsstime.core import *
    >>>
    >>> dt = CalendarDate(2025, 2, 7) + TimeOfDay(11, 30, 45)
    >>> week, sow = dt.gps_week_sow()   # (2352, 473463.0)
    >>> dt2 = DateTimeValue.from_gps_week_sow(week, sow)
    >>> dt2 == dt
    True
"""

from .constants import *
from .date import *
from .time import *
from .datetime import *
from .operators import *
