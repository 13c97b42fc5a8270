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

"""
pygnsstime - Date/Time Values for GNSS Processing

Calendar dates, times of day and instants with exact conversions between
Gregorian calendar time, GPS and BeiDou week/seconds-of-week, GPS and BeiDou
seconds, year/day-of-year, Julian date and Unix timestamps.
"""

__version__ = "1.0.0"
__author__ = "PyINS Development Team"
__title__ = "pygnsstime"
__description__ = "Date/time values and GNSS time system conversions"

from .core import *
