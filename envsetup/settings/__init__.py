"""
Body Settings
=============

Data-only configuration of the bodies in an environment:
- BodySettings : per-body aggregate of optional model settings.
- Per-domain settings (ephemeris, rotation, gravity, atmosphere, shape,
  aerodynamics, radiation pressure, gravity field variations).
"""

from .models import (
    DEFAULT_FRAME_ORIGIN,
    DEFAULT_FRAME_ORIENTATION,
    STATE_COLUMNS,
    EphemerisSettings,
    ConstantEphemerisSettings,
    KeplerEphemerisSettings,
    TabulatedEphemerisSettings,
    RotationModelSettings,
    SimpleRotationModelSettings,
    SynchronousRotationModelSettings,
    GravityFieldSettings,
    CentralGravityFieldSettings,
    SphericalHarmonicsGravityFieldSettings,
    ExponentialAtmosphereSettings,
    BodyShapeSettings,
    SphericalBodyShapeSettings,
    OblateSpheroidBodyShapeSettings,
    ConstantAerodynamicCoefficientSettings,
    CannonballRadiationPressureSettings,
    GravityFieldVariationSettings,
    BasicSolidBodyTideSettings,
)
from .body_settings import BodySettings

__all__ = [
    "BodySettings",
    "DEFAULT_FRAME_ORIGIN",
    "DEFAULT_FRAME_ORIENTATION",
    "STATE_COLUMNS",
    "EphemerisSettings",
    "ConstantEphemerisSettings",
    "KeplerEphemerisSettings",
    "TabulatedEphemerisSettings",
    "RotationModelSettings",
    "SimpleRotationModelSettings",
    "SynchronousRotationModelSettings",
    "GravityFieldSettings",
    "CentralGravityFieldSettings",
    "SphericalHarmonicsGravityFieldSettings",
    "ExponentialAtmosphereSettings",
    "BodyShapeSettings",
    "SphericalBodyShapeSettings",
    "OblateSpheroidBodyShapeSettings",
    "ConstantAerodynamicCoefficientSettings",
    "CannonballRadiationPressureSettings",
    "GravityFieldVariationSettings",
    "BasicSolidBodyTideSettings",
]
