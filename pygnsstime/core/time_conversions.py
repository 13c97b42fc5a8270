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

"""Vectorised time conversions.

Array versions of the DateTimeValue conversions, for processing the epochs of
a whole observation file at once. They work in float64 seconds, so they carry
the usual float64 resolution (about 0.2 us for present-day GPS seconds);
use DateTimeValue when exact nanosecond round trips matter.

Scalars in give scalars out, arrays in give numpy arrays out.
"""

from typing import Iterable

import numpy as np
import pandas as pd

from .constants import (
    GPS_BDS_OFFSET, GPS_BDS_WEEKS, GPS_EPOCH_DAYS, GPS_UTC_OFFSET,
    JD_UNIX_EPOCH, SECONDS_PER_DAY, SECONDS_PER_WEEK,
)
from .datetime import DateTimeValue

# Unix timestamp of the GPS epoch (1980-01-06)
GPS_EPOCH_UNIX = GPS_EPOCH_DAYS * SECONDS_PER_DAY

# GPS seconds of the BDS epoch, including the GPS-BDS offset
BDS_EPOCH_GPS_SECONDS = GPS_BDS_WEEKS * SECONDS_PER_WEEK + GPS_BDS_OFFSET


def _unwrap(value):
    """Return a Python scalar for 0-d results"""
    if np.ndim(value) == 0:
        return np.asarray(value).item()
    return value


def unix_to_gps_week_sow(unix_seconds):
    """
    Convert Unix seconds to GPS week and seconds of week.

    Parameters
    ----------
    unix_seconds : float or array-like
        Seconds since 1970-01-01 00:00:00 UTC

    Returns
    -------
    gps_week : int or np.ndarray
        GPS week number
    sow : float or np.ndarray
        Seconds of week in [0, 604800)
    """
    gps_seconds = np.asarray(unix_seconds, dtype=np.float64) - GPS_EPOCH_UNIX + GPS_UTC_OFFSET
    week = np.floor_divide(gps_seconds, SECONDS_PER_WEEK)
    sow = gps_seconds - week * SECONDS_PER_WEEK
    return _unwrap(week.astype(np.int64)), _unwrap(sow)


def gps_week_sow_to_unix(gps_week, sow):
    """
    Convert GPS week and seconds of week to Unix seconds.

    Parameters
    ----------
    gps_week : int or array-like
        GPS week number
    sow : float or array-like
        Seconds of week

    Returns
    -------
    float or np.ndarray
        Seconds since 1970-01-01 00:00:00 UTC
    """
    week = np.asarray(gps_week, dtype=np.int64)
    sow = np.asarray(sow, dtype=np.float64)
    return _unwrap(week * float(SECONDS_PER_WEEK) + sow + (GPS_EPOCH_UNIX - GPS_UTC_OFFSET))


def unix_to_julian_date(unix_seconds):
    """Convert Unix seconds to Julian date."""
    return _unwrap(JD_UNIX_EPOCH + np.asarray(unix_seconds, dtype=np.float64) / SECONDS_PER_DAY)


def julian_date_to_unix(jd):
    """Convert Julian date to Unix seconds."""
    return _unwrap((np.asarray(jd, dtype=np.float64) - JD_UNIX_EPOCH) * SECONDS_PER_DAY)


def gps_seconds_to_bds_seconds(gps_seconds):
    """Convert GPS seconds (since 1980-01-06) to BDS seconds (since 2006-01-01)."""
    return _unwrap(np.asarray(gps_seconds, dtype=np.float64) - BDS_EPOCH_GPS_SECONDS)


def bds_seconds_to_gps_seconds(bds_seconds):
    """Convert BDS seconds (since 2006-01-01) to GPS seconds (since 1980-01-06)."""
    return _unwrap(np.asarray(bds_seconds, dtype=np.float64) + BDS_EPOCH_GPS_SECONDS)


def conversion_table(instants: Iterable[DateTimeValue]) -> pd.DataFrame:
    """
    Tabulate every time representation of a sequence of instants.

    Parameters
    ----------
    instants : iterable of DateTimeValue
        Instants to tabulate

    Returns
    -------
    pd.DataFrame
        One row per instant; week/seconds pairs and year/doy are split into
        separate columns.
    """
    rows = []
    for dt in instants:
        views = dt.to_dict()
        gps_week, gps_sow = views.pop('gps_week_sow')
        bds_week, bds_sow = views.pop('bds_week_sow')
        year, doy = views.pop('year_doy')
        views.update({
            'gps_week': gps_week, 'gps_sow': gps_sow,
            'bds_week': bds_week, 'bds_sow': bds_sow,
            'year': year, 'doy': doy,
        })
        rows.append(views)

    columns = ['datetime', 'gps_week', 'gps_sow', 'gps_seconds', 'bds_week', 'bds_sow',
               'bds_seconds', 'year', 'doy', 'julian_date', 'unix_timestamp',
               'week_of_year', 'day_of_week']
    return pd.DataFrame(rows, columns=columns)


__all__ = [
    'unix_to_gps_week_sow', 'gps_week_sow_to_unix',
    'unix_to_julian_date', 'julian_date_to_unix',
    'gps_seconds_to_bds_seconds', 'bds_seconds_to_gps_seconds',
    'conversion_table',
]
