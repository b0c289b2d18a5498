"""
Environment Models
==================

Runtime objects built from body settings:
- Body / BaseStateInterface
- Ephemerides, rotational ephemerides, gravity fields (+ variations),
  atmospheres, shapes, aerodynamic coefficients, radiation pressure.

Every domain has a factory `create_*(settings, body, bodies)` which gets
the body under construction and the bodies created before it.
"""

from .body import BaseStateInterface, Body, NamedBodyMap
from .ephemeris import (
    Ephemeris,
    ConstantEphemeris,
    KeplerEphemeris,
    TabulatedEphemeris,
    create_ephemeris,
)
from .rotation import (
    RotationalEphemeris,
    SimpleRotationalEphemeris,
    SynchronousRotationalEphemeris,
    create_rotation_model,
)
from .gravity import (
    CentralGravityField,
    SphericalHarmonicsGravityField,
    BasicSolidBodyTideVariation,
    create_gravity_field,
    create_gravity_field_variation,
)
from .atmosphere import ExponentialAtmosphere, create_atmosphere_model
from .shape import SphericalBodyShape, OblateSpheroidBodyShape, create_body_shape_model
from .aerodynamics import (
    ConstantAerodynamicCoefficientInterface,
    create_aerodynamic_coefficient_interface,
)
from .radiation import CannonballRadiationPressureInterface, create_radiation_pressure_interface

__all__ = [
    "BaseStateInterface",
    "Body",
    "NamedBodyMap",
    "Ephemeris",
    "ConstantEphemeris",
    "KeplerEphemeris",
    "TabulatedEphemeris",
    "create_ephemeris",
    "RotationalEphemeris",
    "SimpleRotationalEphemeris",
    "SynchronousRotationalEphemeris",
    "create_rotation_model",
    "CentralGravityField",
    "SphericalHarmonicsGravityField",
    "BasicSolidBodyTideVariation",
    "create_gravity_field",
    "create_gravity_field_variation",
    "ExponentialAtmosphere",
    "create_atmosphere_model",
    "SphericalBodyShape",
    "OblateSpheroidBodyShape",
    "create_body_shape_model",
    "ConstantAerodynamicCoefficientInterface",
    "create_aerodynamic_coefficient_interface",
    "CannonballRadiationPressureInterface",
    "create_radiation_pressure_interface",
]
