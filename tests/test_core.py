"""
Tests for configuration, time representation and the constants catalogue.
"""
import numpy as np
import pytest
from astropy import units as u
from astropy.time import Time

from envsetup import EnvironmentConfig
from envsetup.core.bodies import EARTH, body_constants
from envsetup.core.errors import BodySetupError, CycleDetected, SubModelCreationFailure
from envsetup.core.timebase import J2000_EPOCH, coerce_time, scalar_type, seconds_since_j2000


def test_config_defaults():
    cfg = EnvironmentConfig()
    assert cfg.global_frame_origin == "SSB"
    assert cfg.global_frame_orientation == "ECLIPJ2000"
    assert cfg.state_dtype is np.float64
    assert cfg.time_type is float


def test_config_from_dict():
    cfg = EnvironmentConfig.from_dict({
        "global_frame_origin": "Earth",
        "global_frame_orientation": "J2000",
        "state_dtype": "longdouble",
        "time_type": "astropy",
    })
    assert cfg.state_dtype is np.longdouble
    assert cfg.time_type is Time
    assert cfg.as_dict() == {
        "global_frame_origin": "Earth",
        "global_frame_orientation": "J2000",
        "state_dtype": "longdouble",
        "time_type": "astropy",
    }


@pytest.mark.parametrize("time_type", [float, np.float64, np.longdouble, Time])
@pytest.mark.parametrize("state_dtype", [np.float64, np.longdouble])
def test_config_dict_round_trip(time_type, state_dtype):
    cfg = EnvironmentConfig("Earth", "J2000", state_dtype=state_dtype, time_type=time_type)
    restored = EnvironmentConfig.from_dict(cfg.as_dict())
    assert restored == cfg
    assert restored.time_type is time_type
    assert restored.state_dtype is state_dtype


def test_config_accepts_numpy_dtype_names():
    cfg = EnvironmentConfig.from_dict({"time_type": "float32"})
    assert cfg.time_type is np.float32


@pytest.mark.parametrize("data", [
    {"global_frame_origin": ""},
    {"state_dtype": "int64"},
    {"time_type": "julian"},
    {"frame": "SSB"},
])
def test_config_rejects_invalid_values(data):
    with pytest.raises(ValueError):
        EnvironmentConfig.from_dict(data)


def test_scalar_type():
    assert scalar_type("float64") is np.float64
    assert scalar_type(np.dtype(np.longdouble)) is np.longdouble
    with pytest.raises(ValueError):
        scalar_type(int)


def test_seconds_since_j2000_from_time():
    epoch = J2000_EPOCH + 1.5 * u.day
    assert seconds_since_j2000(epoch) == pytest.approx(1.5 * 86400.0, abs=1e-6)
    assert seconds_since_j2000(J2000_EPOCH) == 0.0


def test_seconds_since_j2000_longdouble_keeps_resolution():
    epoch = Time(2451545.0 + 1.0, 1e-9 / 86400.0, format="jd", scale="tdb")
    seconds = seconds_since_j2000(epoch, np.longdouble)
    assert seconds.dtype == np.longdouble
    if np.finfo(np.longdouble).eps < np.finfo(np.float64).eps:
        assert float(seconds - np.longdouble(86400.0)) == pytest.approx(1e-9, rel=1e-3)


def test_coerce_time_round_trip():
    as_time = coerce_time(3600.0, Time)
    assert isinstance(as_time, Time)
    assert coerce_time(as_time, float) == pytest.approx(3600.0, abs=1e-6)
    assert isinstance(coerce_time(np.longdouble(1.0), float), float)


def test_body_constants_lookup():
    assert body_constants("Earth") is EARTH
    with pytest.raises(KeyError, match="Pluto"):
        body_constants("Pluto")


def test_errors_share_base_and_context():
    err = CycleDetected(["A", "B"])
    assert isinstance(err, BodySetupError)
    assert err.context == {"bodies": ("A", "B")}

    cause = ValueError("bad")
    failure = SubModelCreationFailure("Moon", "ephemeris", cause)
    assert isinstance(failure, RuntimeError)
    assert "Moon" in str(failure) and "ephemeris" in str(failure) and "bad" in str(failure)
