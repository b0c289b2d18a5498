"""
Shared fixtures for envsetup tests.
"""
import numpy as np
import pytest

from envsetup.core.bodies import EARTH, MOON, SUN
from envsetup.settings import (
    BodySettings,
    CentralGravityFieldSettings,
    ConstantEphemerisSettings,
    KeplerEphemerisSettings,
    SimpleRotationModelSettings,
    SphericalBodyShapeSettings,
)

EARTH_STATE = np.array([1.496e11, 2.0e9, -1.0e7, -4.0e2, 2.978e4, 1.0])
SUN_STATE = np.array([-7.0e8, 1.0e8, 2.0e7, 1.0e1, -8.0, 0.1])


def constant_body(state, origin="SSB", orientation="ECLIPJ2000", **kwargs):
    return BodySettings(
        ephemeris_settings=ConstantEphemerisSettings(state, frame_origin=origin, frame_orientation=orientation),
        **kwargs,
    )


@pytest.fixture
def earth_moon_settings():
    """Moon (Kepler about Earth), Earth (constant about SSB); Moon listed first."""
    moon = BodySettings(
        ephemeris_settings=KeplerEphemerisSettings(
            [3.844e8, 0.0549, 0.09, 0.3, 0.2, 1.0],
            epoch_of_initial_state=0.0,
            frame_origin="Earth",
        ),
        gravity_field_settings=CentralGravityFieldSettings.from_constants(MOON),
    )
    earth = constant_body(
        EARTH_STATE,
        gravity_field_settings=CentralGravityFieldSettings.from_constants(EARTH),
        shape_settings=SphericalBodyShapeSettings.from_constants(EARTH),
        rotation_model_settings=SimpleRotationModelSettings(
            base_frame_orientation="ECLIPJ2000",
            target_frame_orientation="IAU_Earth",
            initial_orientation=np.eye(3),
            initial_time=0.0,
            rotation_rate=7.2921150e-5,
        ),
    )
    return {"Moon": moon, "Earth": earth}


@pytest.fixture
def sun_earth_moon_settings(earth_moon_settings):
    settings = dict(earth_moon_settings)
    settings["Sun"] = constant_body(
        SUN_STATE,
        gravity_field_settings=CentralGravityFieldSettings.from_constants(SUN),
        shape_settings=SphericalBodyShapeSettings.from_constants(SUN),
    )
    return settings
