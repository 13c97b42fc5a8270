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

"""Time System Constants"""

from fractions import Fraction

# Unit conversions (integer nanoseconds)
NS_PER_US = 1_000
NS_PER_MS = 1_000_000
NS_PER_SEC = 1_000_000_000
NS_PER_MIN = 60 * NS_PER_SEC
NS_PER_HOUR = 3600 * NS_PER_SEC
NS_PER_DAY = 86400 * NS_PER_SEC
NS_PER_WEEK = 7 * NS_PER_DAY

SECONDS_PER_DAY = 86400
SECONDS_PER_WEEK = 604800

# Epochs as days since 1970-01-01 (GPS 1980-01-06, BeiDou 2006-01-01)
UNIX_EPOCH_DAYS = 0
GPS_EPOCH_DAYS = 3657
BDS_EPOCH_DAYS = 13149

# Epochs as nanoseconds since 1970-01-01
UNIX_EPOCH_NS = UNIX_EPOCH_DAYS * NS_PER_DAY
GPS_EPOCH_NS = GPS_EPOCH_DAYS * NS_PER_DAY
BDS_EPOCH_NS = BDS_EPOCH_DAYS * NS_PER_DAY

# Julian date of 1970-01-01 00:00:00 UTC
JD_UNIX_EPOCH = 2440587.5
JD_UNIX_EPOCH_EXACT = Fraction(4881175, 2)

# Fixed time system offsets (not updated at runtime)
GPS_UTC_OFFSET = 18            # GPS-UTC leap seconds (s)
BDS_UTC_OFFSET = 4             # BDS-UTC leap seconds (s)
GPS_BDS_OFFSET = GPS_UTC_OFFSET - BDS_UTC_OFFSET  # GPS-BeiDou offset (s)
GPS_BDS_WEEKS = 1356           # BDS epoch relative to GPS epoch (weeks)

GPS_UTC_OFFSET_NS = GPS_UTC_OFFSET * NS_PER_SEC
GPS_BDS_OFFSET_NS = GPS_BDS_OFFSET * NS_PER_SEC

# Weekday encoding
UNIX_EPOCH_WEEKDAY = 4         # 1970-01-01 was a Thursday (0 = Sunday)

__all__ = [
    'NS_PER_US', 'NS_PER_MS', 'NS_PER_SEC', 'NS_PER_MIN', 'NS_PER_HOUR',
    'NS_PER_DAY', 'NS_PER_WEEK', 'SECONDS_PER_DAY', 'SECONDS_PER_WEEK',
    'UNIX_EPOCH_DAYS', 'GPS_EPOCH_DAYS', 'BDS_EPOCH_DAYS',
    'UNIX_EPOCH_NS', 'GPS_EPOCH_NS', 'BDS_EPOCH_NS',
    'JD_UNIX_EPOCH', 'JD_UNIX_EPOCH_EXACT',
    'GPS_UTC_OFFSET', 'BDS_UTC_OFFSET', 'GPS_BDS_OFFSET', 'GPS_BDS_WEEKS',
    'GPS_UTC_OFFSET_NS', 'GPS_BDS_OFFSET_NS',
    'UNIX_EPOCH_WEEKDAY',
]
