# envsetup/core/config.py
"""
Environment configuration.

EnvironmentConfig holds the choices that apply to the whole system of
bodies rather than to a single body: the global frame every state must be
expressible in, and the numeric representation used for base-frame states.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

import numpy as np
from astropy.time import Time

from .timebase import check_time_type, scalar_type

_TIME_TYPE_NAMES: Dict[str, Any] = {
    "float": float,
    "float64": np.float64,
    "longdouble": np.longdouble,
    "astropy": Time,
    "time": Time,
}


def _scalar_name(scalar) -> str:
    # "float128" is platform specific; "longdouble" resolves everywhere
    if scalar is np.longdouble:
        return "longdouble"
    return np.dtype(scalar).name


@dataclass
class EnvironmentConfig:
    """
    Global frame + numeric settings.

    global_frame_origin      : name of the origin all states are expressed
                               relative to (e.g. "SSB", "Earth").
    global_frame_orientation : name of the axes (e.g. "ECLIPJ2000", "J2000").
    state_dtype              : numpy floating type of base-frame states.
    time_type                : float, a numpy floating type or astropy Time.
    """
    global_frame_origin: str = "SSB"
    global_frame_orientation: str = "ECLIPJ2000"
    state_dtype: Any = np.float64
    time_type: Any = float

    def __post_init__(self):
        if not self.global_frame_origin:
            raise ValueError("global_frame_origin must be a non-empty name.")
        if not self.global_frame_orientation:
            raise ValueError("global_frame_orientation must be a non-empty name.")
        self.state_dtype = scalar_type(self.state_dtype)
        self.time_type = check_time_type(self.time_type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnvironmentConfig":
        """
        Build from a plain mapping, e.g. parsed JSON:

            {"global_frame_origin": "Earth",
             "global_frame_orientation": "J2000",
             "state_dtype": "longdouble",
             "time_type": "astropy"}
        """
        unknown = set(data) - {
            "global_frame_origin", "global_frame_orientation", "state_dtype", "time_type",
        }
        if unknown:
            raise ValueError(f"Unknown environment config keys: {sorted(unknown)}")

        kwargs: Dict[str, Any] = dict(data)
        time_type = kwargs.get("time_type")
        if isinstance(time_type, str):
            name = time_type.lower()
            if name in _TIME_TYPE_NAMES:
                kwargs["time_type"] = _TIME_TYPE_NAMES[name]
            else:
                try:
                    kwargs["time_type"] = scalar_type(name)
                except ValueError:
                    raise ValueError(f"Unknown time_type '{time_type}'.") from None
        return cls(**kwargs)

    def as_dict(self) -> Dict[str, str]:
        """Inverse of from_dict."""
        if self.time_type is Time:
            time_name = "astropy"
        elif self.time_type is float:
            time_name = "float"
        else:
            time_name = _scalar_name(self.time_type)
        return {
            "global_frame_origin": self.global_frame_origin,
            "global_frame_orientation": self.global_frame_orientation,
            "state_dtype": _scalar_name(self.state_dtype),
            "time_type": time_name,
        }


__all__ = ["EnvironmentConfig"]
