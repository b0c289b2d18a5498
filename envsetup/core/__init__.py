"""
Core Definitions
================

- Body constants catalogue (mu, radius, luminosity).
- Error hierarchy for environment setup.
- EnvironmentConfig (global frame + numeric representation).
- Time / state-scalar representation helpers.
"""

from .bodies import BodyConstants, SUN, EARTH, MOON, MARS, KNOWN_BODIES, body_constants
from .errors import (
    BodySetupError,
    CycleDetected,
    SubModelCreationFailure,
    MissingFrameOrigin,
    FrameOrientationMismatch,
)
from .config import EnvironmentConfig
from .timebase import (
    J2000_EPOCH,
    scalar_type,
    check_time_type,
    seconds_since_j2000,
    coerce_time,
)

__all__ = [
    "BodyConstants",
    "SUN",
    "EARTH",
    "MOON",
    "MARS",
    "KNOWN_BODIES",
    "body_constants",
    "BodySetupError",
    "CycleDetected",
    "SubModelCreationFailure",
    "MissingFrameOrigin",
    "FrameOrientationMismatch",
    "EnvironmentConfig",
    "J2000_EPOCH",
    "scalar_type",
    "check_time_type",
    "seconds_since_j2000",
    "coerce_time",
]
