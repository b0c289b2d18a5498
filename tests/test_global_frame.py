"""
Tests for global frame enforcement and base-frame state translation.
"""
import numpy as np
import pytest
from astropy import units as u
from astropy.time import Time

from envsetup import (
    CycleDetected,
    FrameOrientationMismatch,
    MissingFrameOrigin,
    body_frame_table,
    construct_bodies,
    enforce_global_frame,
)
from envsetup.core.timebase import J2000_EPOCH
from envsetup.environment import ConstantEphemeris
from envsetup.settings import ConstantEphemerisSettings, SimpleRotationModelSettings
from envsetup.setup import frame_translations

from conftest import EARTH_STATE, constant_body

SC_STATE = np.array([2.0e6, -1.0e6, 5.0e5, 10.0, 1.6e3, -2.0])


def test_moon_gets_translation_to_earth(earth_moon_settings):
    bodies = construct_bodies(earth_moon_settings)
    enforce_global_frame(bodies, "SSB", "ECLIPJ2000")

    interface = bodies["Moon"].ephemeris_frame_to_base_frame
    assert interface is not None
    assert interface.base_frame_id == "Earth"
    for t in (0.0, 3600.0, 86400.0 * 10):
        np.testing.assert_array_equal(interface(t), bodies["Earth"].ephemeris.cartesian_state(t))


def test_moon_state_in_global_frame(earth_moon_settings):
    bodies = construct_bodies(earth_moon_settings)
    enforce_global_frame(bodies, "SSB", "ECLIPJ2000")

    t = 12345.0
    expected = bodies["Moon"].ephemeris.cartesian_state(t) + EARTH_STATE
    np.testing.assert_allclose(bodies["Moon"].state_in_base_frame_from_ephemeris(t), expected, rtol=1e-15)


def test_body_at_global_origin_gets_no_translation(earth_moon_settings):
    bodies = construct_bodies(earth_moon_settings)
    enforce_global_frame(bodies, "SSB", "ECLIPJ2000")
    assert bodies["Earth"].ephemeris_frame_to_base_frame is None
    np.testing.assert_array_equal(bodies["Earth"].state_in_base_frame_from_ephemeris(0.0), EARTH_STATE)


def test_missing_frame_origin():
    bodies = construct_bodies({"X": constant_body(np.zeros(6), origin="Y")})
    with pytest.raises(MissingFrameOrigin) as excinfo:
        enforce_global_frame(bodies, "SSB", "ECLIPJ2000")
    assert excinfo.value.body == "X"
    assert excinfo.value.origin == "Y"
    assert "X" in str(excinfo.value) and "Y" in str(excinfo.value)


def test_rotation_orientation_mismatch(earth_moon_settings):
    earth_moon_settings["Earth"].rotation_model_settings = SimpleRotationModelSettings(
        base_frame_orientation="J2000",
        target_frame_orientation="IAU_Earth",
        initial_orientation=np.eye(3),
        initial_time=0.0,
        rotation_rate=7.2921150e-5,
    )
    bodies = construct_bodies(earth_moon_settings)
    with pytest.raises(FrameOrientationMismatch) as excinfo:
        enforce_global_frame(bodies, "SSB", "ECLIPJ2000")
    err = excinfo.value
    assert err.body == "Earth"
    assert err.model == "rotation_model"
    assert (err.declared, err.expected) == ("J2000", "ECLIPJ2000")


def test_ephemeris_orientation_mismatch():
    bodies = construct_bodies({"Mars": constant_body(np.zeros(6), orientation="J2000")})
    with pytest.raises(FrameOrientationMismatch) as excinfo:
        enforce_global_frame(bodies, "SSB", "ECLIPJ2000")
    assert excinfo.value.body == "Mars"
    assert excinfo.value.model == "ephemeris"
    assert "J2000" in str(excinfo.value) and "ECLIPJ2000" in str(excinfo.value)


def test_failure_attaches_nothing(earth_moon_settings):
    earth_moon_settings["Zulu"] = constant_body(np.zeros(6), origin="Nowhere")
    bodies = construct_bodies(earth_moon_settings)
    with pytest.raises(MissingFrameOrigin):
        enforce_global_frame(bodies, "SSB", "ECLIPJ2000")
    assert frame_translations(bodies) == []


def _chain_settings(earth_moon_settings):
    settings = dict(earth_moon_settings)
    settings["Spacecraft"] = constant_body(SC_STATE, origin="Moon")
    return settings


@pytest.mark.parametrize("reverse", [False, True])
def test_origin_chain_composes_in_any_order(earth_moon_settings, reverse):
    bodies = construct_bodies(_chain_settings(earth_moon_settings))
    if reverse:
        bodies = dict(reversed(list(bodies.items())))
    enforce_global_frame(bodies, "SSB", "ECLIPJ2000")

    t = 7200.0
    moon = bodies["Moon"].ephemeris.cartesian_state(t)
    expected = SC_STATE + (moon + EARTH_STATE)
    np.testing.assert_allclose(bodies["Spacecraft"].state_in_base_frame_from_ephemeris(t), expected, rtol=1e-15)
    assert sorted(frame_translations(bodies)) == [("Moon", "Earth"), ("Spacecraft", "Moon")]


def test_translation_reads_origin_state_at_query_time(earth_moon_settings):
    bodies = construct_bodies(earth_moon_settings)
    enforce_global_frame(bodies, "SSB", "ECLIPJ2000")

    moved = EARTH_STATE + 1.0e3
    bodies["Earth"].ephemeris = ConstantEphemeris(moved, "SSB", "ECLIPJ2000")
    np.testing.assert_array_equal(bodies["Moon"].ephemeris_frame_to_base_frame(0.0), moved)


def test_global_origin_may_be_a_body(earth_moon_settings):
    earth_moon_settings["Earth"].ephemeris_settings = ConstantEphemerisSettings(
        np.zeros(6), frame_origin="Earth", frame_orientation="ECLIPJ2000",
    )
    # Earth declaring itself as origin is a creation-order cycle
    with pytest.raises(CycleDetected):
        construct_bodies(earth_moon_settings)

    earth_moon_settings["Earth"].ephemeris_settings = None
    bodies = construct_bodies(earth_moon_settings)
    enforce_global_frame(bodies, "Earth", "ECLIPJ2000")
    assert frame_translations(bodies) == []


def test_repeated_enforcement_drops_stale_translations(earth_moon_settings):
    bodies = construct_bodies(earth_moon_settings)
    enforce_global_frame(bodies, "SSB", "ECLIPJ2000")
    assert bodies["Moon"].ephemeris_frame_to_base_frame.base_frame_id == "Earth"

    bodies["Earth"].ephemeris = None
    enforce_global_frame(bodies, "Earth", "ECLIPJ2000")
    assert bodies["Moon"].ephemeris_frame_to_base_frame is None
    assert frame_translations(bodies) == []
    np.testing.assert_array_equal(
        bodies["Moon"].state_in_base_frame_from_ephemeris(60.0),
        bodies["Moon"].ephemeris.cartesian_state(60.0),
    )


def test_failed_repeat_keeps_previous_translations(earth_moon_settings):
    bodies = construct_bodies(earth_moon_settings)
    enforce_global_frame(bodies, "SSB", "ECLIPJ2000")
    with pytest.raises(MissingFrameOrigin):
        enforce_global_frame(bodies, "Earth", "ECLIPJ2000")
    assert frame_translations(bodies) == [("Moon", "Earth")]


def test_origin_cycle_in_body_map_detected(earth_moon_settings):
    bodies = construct_bodies(earth_moon_settings)
    bodies["Earth"].ephemeris = ConstantEphemeris(EARTH_STATE, "Moon", "ECLIPJ2000")
    with pytest.raises(CycleDetected) as excinfo:
        enforce_global_frame(bodies, "SSB", "ECLIPJ2000")
    assert set(excinfo.value.bodies) == {"Earth", "Moon"}
    assert frame_translations(bodies) == []


def test_longdouble_translation(earth_moon_settings):
    bodies = construct_bodies(_chain_settings(earth_moon_settings))
    enforce_global_frame(bodies, "SSB", "ECLIPJ2000", state_dtype=np.longdouble)

    interface = bodies["Spacecraft"].ephemeris_frame_to_base_frame
    state = interface(np.longdouble(3600.0))
    assert state.dtype == np.longdouble
    np.testing.assert_allclose(
        state.astype(float),
        bodies["Moon"].state_in_base_frame_from_ephemeris(3600.0),
        rtol=1e-10,
    )
    sc = bodies["Spacecraft"].state_in_base_frame_from_ephemeris(3600.0, state_dtype=np.longdouble)
    assert sc.dtype == np.longdouble


def test_astropy_time_translation(earth_moon_settings):
    bodies = construct_bodies(earth_moon_settings)
    enforce_global_frame(bodies, "SSB", "ECLIPJ2000", time_type=Time)

    interface = bodies["Moon"].ephemeris_frame_to_base_frame
    epoch = J2000_EPOCH + 3600.0 * u.s
    np.testing.assert_allclose(interface(epoch), interface(3600.0), rtol=1e-9)
    np.testing.assert_allclose(
        bodies["Moon"].state_in_base_frame_from_ephemeris(epoch),
        bodies["Moon"].state_in_base_frame_from_ephemeris(3600.0),
        rtol=1e-9,
    )


def test_body_frame_table(earth_moon_settings):
    bodies = construct_bodies(earth_moon_settings)
    enforce_global_frame(bodies, "SSB", "ECLIPJ2000")

    df = body_frame_table(bodies).set_index("body")
    assert list(df.index) == ["Earth", "Moon"]
    assert df.loc["Moon", "ephemeris_origin"] == "Earth"
    assert df.loc["Moon", "base_frame_origin"] == "Earth"
    assert df.loc["Earth", "rotation_target_orientation"] == "IAU_Earth"
    assert df.loc["Earth", "base_frame_origin"] is None
