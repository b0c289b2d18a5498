"""
envsetup
========

Environment setup for astrodynamics simulations: builds the bodies of a
simulation from per-body model settings and makes every body's state
expressible in one global frame before propagation starts.

Subpackages:
- envsetup.core        : constants catalogue, errors, config, time representation
- envsetup.settings    : BodySettings and per-domain model settings
- envsetup.environment : Body, base-frame state interface, model factories
- envsetup.setup       : creation order, body construction, frame enforcement

Quick start:

    from envsetup import BodySettings, EnvironmentConfig, create_system_of_bodies
    from envsetup.settings import ConstantEphemerisSettings, KeplerEphemerisSettings

    settings = {
        "Earth": BodySettings(ephemeris_settings=ConstantEphemerisSettings([1.5e11, 0, 0, 0, 3e4, 0])),
        "Moon": BodySettings(ephemeris_settings=KeplerEphemerisSettings(
            [3.844e8, 0.055, 0.09, 0.0, 0.0, 0.0],
            central_body_gravitational_parameter=3.986004418e14,
            frame_origin="Earth")),
    }
    bodies = create_system_of_bodies(settings, EnvironmentConfig("SSB", "ECLIPJ2000"))
    bodies["Moon"].state_in_base_frame_from_ephemeris(0.0)
"""

from .core import (
    EnvironmentConfig,
    BodySetupError,
    CycleDetected,
    SubModelCreationFailure,
    MissingFrameOrigin,
    FrameOrientationMismatch,
)
from .settings import BodySettings
from .environment import BaseStateInterface, Body, NamedBodyMap
from .setup import (
    resolve_creation_order,
    construct_bodies,
    enforce_global_frame,
    create_system_of_bodies,
    body_frame_table,
    ModelFactories,
)

__all__ = [
    "EnvironmentConfig",
    "BodySetupError",
    "CycleDetected",
    "SubModelCreationFailure",
    "MissingFrameOrigin",
    "FrameOrientationMismatch",
    "BodySettings",
    "BaseStateInterface",
    "Body",
    "NamedBodyMap",
    "resolve_creation_order",
    "construct_bodies",
    "enforce_global_frame",
    "create_system_of_bodies",
    "body_frame_table",
    "ModelFactories",
]

__version__ = "0.1.0"
