# envsetup/core/timebase.py
"""
Time and state-scalar representations.

Every model in the environment works with time as seconds since J2000
(TDB). Callers may hand in plain floats, numpy floating scalars
(np.float64, np.longdouble) or astropy Time objects; the helpers here
convert between them without collapsing a Time to a single double first,
so extended-precision states can be evaluated at extended-precision times.
"""

from __future__ import annotations

from typing import Any, Type

import numpy as np
from astropy import units as u
from astropy.time import Time, TimeDelta

J2000_JD = 2451545.0
SECONDS_PER_DAY = 86400.0

J2000_EPOCH = Time(J2000_JD, format="jd", scale="tdb")


def scalar_type(dtype: Any) -> Type[np.floating]:
    """
    Normalize a state-scalar representation (np.float64, "longdouble",
    np.dtype(...)) to its numpy scalar type.
    """
    try:
        scalar = np.dtype(dtype).type
    except TypeError as exc:
        raise ValueError(f"Unsupported state scalar type: {dtype!r}") from exc
    if not issubclass(scalar, np.floating):
        raise ValueError(f"State scalar type must be floating point, got {dtype!r}.")
    return scalar


def check_time_type(time_type: Any) -> Any:
    """Accept float, a numpy floating type or astropy Time."""
    if time_type is float or time_type is Time:
        return time_type
    return scalar_type(time_type)


def seconds_since_j2000(time: Any, dtype: Any = np.float64) -> np.floating:
    """
    Convert a time to seconds since J2000 (TDB) in the given scalar type.

    For astropy Time the two-part Julian date is differenced part by part,
    so np.longdouble keeps sub-microsecond resolution over centuries.
    """
    scalar = scalar_type(dtype)
    if isinstance(time, Time):
        tdb = time.tdb
        days = (scalar(tdb.jd1) - scalar(J2000_JD)) + scalar(tdb.jd2)
        return scalar(days * scalar(SECONDS_PER_DAY))
    if isinstance(time, u.Quantity):
        return scalar(time.to_value(u.s))
    return scalar(time)


def coerce_time(time: Any, time_type: Any = float) -> Any:
    """Express `time` in the requested time representation."""
    if time_type is Time:
        if isinstance(time, Time):
            return time
        return J2000_EPOCH + TimeDelta(float(seconds_since_j2000(time)), format="sec")
    if time_type is float:
        return float(seconds_since_j2000(time, np.float64))
    return seconds_since_j2000(time, time_type)


__all__ = [
    "J2000_JD",
    "J2000_EPOCH",
    "SECONDS_PER_DAY",
    "scalar_type",
    "check_time_type",
    "seconds_since_j2000",
    "coerce_time",
]
