# envsetup/settings/models.py
"""
Per-domain Model Settings
=========================

Data-only descriptions of the environment models a body can carry.
Nothing here builds a model; the factories in envsetup.environment turn
these into runtime objects.

Two capabilities matter for creation ordering and frame checks:

- ephemeris settings declare `frame_origin` and `frame_orientation`;
- rotation settings declare `base_frame_orientation`,
  `target_frame_orientation` and a `frame_origin` property that names
  the body the model is defined relative to (None for most models).

Units are SI throughout: meters, seconds (since J2000 TDB for epochs),
radians, kilograms.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from envsetup.core.bodies import BodyConstants

DEFAULT_FRAME_ORIGIN = "SSB"
DEFAULT_FRAME_ORIENTATION = "ECLIPJ2000"

STATE_COLUMNS = ("x_m", "y_m", "z_m", "vx_mps", "vy_mps", "vz_mps")


def _as_state(values, what: str) -> np.ndarray:
    state = np.asarray(values, dtype=float).reshape(-1)
    if state.shape != (6,):
        raise ValueError(f"{what} must have 6 components (position, velocity), got {state.shape}.")
    return state


# ============================================================
# Ephemeris
# ============================================================

class EphemerisSettings:
    """Common base; subclasses define frame_origin / frame_orientation fields."""
    frame_origin: str
    frame_orientation: str


@dataclass
class ConstantEphemerisSettings(EphemerisSettings):
    """
    Body at a fixed state (e.g. a barycenter or a ground reference).

    constant_state : 6-vector [m, m/s] w.r.t. frame_origin
    """
    constant_state: np.ndarray
    frame_origin: str = DEFAULT_FRAME_ORIGIN
    frame_orientation: str = DEFAULT_FRAME_ORIENTATION

    def __post_init__(self):
        self.constant_state = _as_state(self.constant_state, "constant_state")


@dataclass
class KeplerEphemerisSettings(EphemerisSettings):
    """
    Unperturbed elliptic orbit about frame_origin.

    initial_state_in_keplerian_elements :
        [a (m), e, i, argument of periapsis, RAAN, true anomaly] (rad)
    epoch_of_initial_state :
        seconds since J2000 (or an astropy Time)
    central_body_gravitational_parameter :
        GM of the frame origin [m^3/s^2]. If None it is read from the
        frame-origin body's gravity field when the ephemeris is created.
    """
    initial_state_in_keplerian_elements: Sequence[float]
    epoch_of_initial_state: float = 0.0
    central_body_gravitational_parameter: Optional[float] = None
    frame_origin: str = DEFAULT_FRAME_ORIGIN
    frame_orientation: str = DEFAULT_FRAME_ORIENTATION

    def __post_init__(self):
        elements = np.asarray(self.initial_state_in_keplerian_elements, dtype=float).reshape(-1)
        if elements.shape != (6,):
            raise ValueError("Keplerian elements must have 6 components.")
        if elements[0] <= 0.0:
            raise ValueError("Semi-major axis must be positive.")
        if not (0.0 <= elements[1] < 1.0):
            raise ValueError("Only elliptic orbits (0 <= e < 1) are supported.")
        if (
            self.central_body_gravitational_parameter is not None
            and self.central_body_gravitational_parameter <= 0.0
        ):
            raise ValueError("central_body_gravitational_parameter must be positive.")
        self.initial_state_in_keplerian_elements = elements


@dataclass
class TabulatedEphemerisSettings(EphemerisSettings):
    """
    State history {epoch [s]: 6-vector}, interpolated linearly per component.
    """
    body_state_history: Dict[float, np.ndarray]
    frame_origin: str = DEFAULT_FRAME_ORIGIN
    frame_orientation: str = DEFAULT_FRAME_ORIENTATION

    def __post_init__(self):
        if len(self.body_state_history) < 2:
            raise ValueError("Tabulated ephemeris needs at least two epochs.")
        self.body_state_history = {
            float(t): _as_state(s, f"state at t={t}")
            for t, s in sorted(self.body_state_history.items())
        }

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        time_column: str = "t_s",
        state_columns: Tuple[str, ...] = STATE_COLUMNS,
        frame_origin: str = DEFAULT_FRAME_ORIGIN,
        frame_orientation: str = DEFAULT_FRAME_ORIENTATION,
    ) -> "TabulatedEphemerisSettings":
        """Build from a time-history DataFrame (one row per epoch)."""
        missing = [c for c in (time_column, *state_columns) if c not in df.columns]
        if missing:
            raise ValueError(f"State history DataFrame is missing columns: {missing}")
        states = df[list(state_columns)].to_numpy(dtype=float)
        history = dict(zip(df[time_column].to_numpy(dtype=float), states))
        return cls(
            body_state_history=history,
            frame_origin=frame_origin,
            frame_orientation=frame_orientation,
        )


# ============================================================
# Rotation
# ============================================================

class RotationModelSettings:
    base_frame_orientation: str
    target_frame_orientation: str

    @property
    def frame_origin(self) -> Optional[str]:
        """Body this rotation model is defined relative to, if any."""
        return None


@dataclass
class SimpleRotationModelSettings(RotationModelSettings):
    """
    Uniform rotation about the body-fixed z-axis.

    initial_orientation : 3x3 rotation from target (body-fixed) to base frame at initial_time
    initial_time        : reference epoch [s since J2000]
    rotation_rate       : [rad/s]
    """
    base_frame_orientation: str
    target_frame_orientation: str
    initial_orientation: np.ndarray
    initial_time: float
    rotation_rate: float

    def __post_init__(self):
        R = np.asarray(self.initial_orientation, dtype=float)
        if R.shape != (3, 3):
            raise ValueError("initial_orientation must be a 3x3 matrix.")
        if not np.allclose(R @ R.T, np.eye(3), atol=1e-9):
            raise ValueError("initial_orientation must be orthonormal.")
        self.initial_orientation = R

    @classmethod
    def from_pole(
        cls,
        base_frame_orientation: str,
        target_frame_orientation: str,
        right_ascension: float,
        declination: float,
        prime_meridian: float,
        rotation_rate: float,
        initial_time: float = 0.0,
    ) -> "SimpleRotationModelSettings":
        """IAU-style pole (alpha, delta) and prime meridian W at initial_time [rad]."""
        def rot_x(a):
            c, s = np.cos(a), np.sin(a)
            return np.array([[1.0, 0.0, 0.0], [0.0, c, s], [0.0, -s, c]])

        def rot_z(a):
            c, s = np.cos(a), np.sin(a)
            return np.array([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])

        # base -> body-fixed = Rz(W) Rx(pi/2 - delta) Rz(pi/2 + alpha)
        to_target = rot_z(prime_meridian) @ rot_x(np.pi / 2 - declination) @ rot_z(np.pi / 2 + right_ascension)
        return cls(
            base_frame_orientation=base_frame_orientation,
            target_frame_orientation=target_frame_orientation,
            initial_orientation=to_target.T,
            initial_time=initial_time,
            rotation_rate=rotation_rate,
        )


@dataclass
class SynchronousRotationModelSettings(RotationModelSettings):
    """
    Tidally locked rotation: body-fixed x-axis points at central_body,
    z-axis along the orbit normal.
    """
    central_body: str
    base_frame_orientation: str
    target_frame_orientation: str

    @property
    def frame_origin(self) -> Optional[str]:
        return self.central_body


# ============================================================
# Gravity field
# ============================================================

class GravityFieldSettings:
    gravitational_parameter: float


@dataclass
class CentralGravityFieldSettings(GravityFieldSettings):
    gravitational_parameter: float

    def __post_init__(self):
        if self.gravitational_parameter <= 0.0:
            raise ValueError("gravitational_parameter must be positive.")

    @classmethod
    def from_constants(cls, constants: BodyConstants) -> "CentralGravityFieldSettings":
        return cls(gravitational_parameter=constants.mu)


@dataclass
class SphericalHarmonicsGravityFieldSettings(GravityFieldSettings):
    """
    Fully normalized spherical harmonic coefficients C[n, m], S[n, m].

    associated_reference_frame : body-fixed frame the coefficients are
        expressed in; must equal the rotation model's target frame.
    """
    gravitational_parameter: float
    reference_radius: float
    normalized_cosine_coefficients: np.ndarray
    normalized_sine_coefficients: np.ndarray
    associated_reference_frame: str

    def __post_init__(self):
        if self.gravitational_parameter <= 0.0 or self.reference_radius <= 0.0:
            raise ValueError("gravitational_parameter and reference_radius must be positive.")
        C = np.atleast_2d(np.asarray(self.normalized_cosine_coefficients, dtype=float))
        S = np.atleast_2d(np.asarray(self.normalized_sine_coefficients, dtype=float))
        if C.shape != S.shape:
            raise ValueError(f"Cosine and sine coefficient shapes differ: {C.shape} vs {S.shape}.")
        self.normalized_cosine_coefficients = C
        self.normalized_sine_coefficients = S


# ============================================================
# Atmosphere / shape / aerodynamics
# ============================================================

@dataclass
class ExponentialAtmosphereSettings:
    """
    rho = surface_density * exp(-h / scale_height), isothermal.
    """
    scale_height: float
    surface_density: float
    constant_temperature: float = 288.15
    specific_gas_constant: float = 287.0
    ratio_of_specific_heats: float = 1.4

    def __post_init__(self):
        if self.scale_height <= 0.0 or self.surface_density < 0.0:
            raise ValueError("scale_height must be positive and surface_density non-negative.")
        if self.constant_temperature <= 0.0:
            raise ValueError("constant_temperature must be positive.")


class BodyShapeSettings:
    pass


@dataclass
class SphericalBodyShapeSettings(BodyShapeSettings):
    radius: float

    def __post_init__(self):
        if self.radius <= 0.0:
            raise ValueError("radius must be positive.")

    @classmethod
    def from_constants(cls, constants: BodyConstants) -> "SphericalBodyShapeSettings":
        return cls(radius=constants.radius_m)


@dataclass
class OblateSpheroidBodyShapeSettings(BodyShapeSettings):
    equatorial_radius: float
    flattening: float

    def __post_init__(self):
        if self.equatorial_radius <= 0.0:
            raise ValueError("equatorial_radius must be positive.")
        if not (0.0 <= self.flattening < 1.0):
            raise ValueError("flattening must be in [0, 1).")


@dataclass
class ConstantAerodynamicCoefficientSettings:
    """
    force_coefficients  : [C_D, C_S, C_L] (aerodynamic frame) or [C_X, C_Y, C_Z] (body frame)
    moment_coefficients : [C_l, C_m, C_n]; zeros if omitted
    """
    reference_area: float
    force_coefficients: np.ndarray
    reference_length: float = 1.0
    moment_coefficients: Optional[np.ndarray] = None
    are_coefficients_in_aerodynamic_frame: bool = True

    def __post_init__(self):
        if self.reference_area <= 0.0 or self.reference_length <= 0.0:
            raise ValueError("reference_area and reference_length must be positive.")
        self.force_coefficients = np.asarray(self.force_coefficients, dtype=float).reshape(3)
        if self.moment_coefficients is None:
            self.moment_coefficients = np.zeros(3)
        else:
            self.moment_coefficients = np.asarray(self.moment_coefficients, dtype=float).reshape(3)


# ============================================================
# Radiation pressure
# ============================================================

@dataclass
class CannonballRadiationPressureSettings:
    """
    source_body       : radiating body (Sun, typically)
    area              : cross-section [m^2]
    radiation_pressure_coefficient : C_r
    occulting_bodies  : bodies that may shadow the source
    source_luminosity : [W]; taken from the constants catalogue if None
    """
    source_body: str
    area: float
    radiation_pressure_coefficient: float
    occulting_bodies: Tuple[str, ...] = ()
    source_luminosity: Optional[float] = None

    def __post_init__(self):
        if self.area <= 0.0:
            raise ValueError("area must be positive.")
        self.occulting_bodies = tuple(self.occulting_bodies)


# ============================================================
# Gravity field variations
# ============================================================

class GravityFieldVariationSettings:
    pass


@dataclass
class BasicSolidBodyTideSettings(GravityFieldVariationSettings):
    """
    Degree-2 solid tide raised by deforming_bodies with a single
    (real) Love number.
    """
    deforming_bodies: Sequence[str]
    love_number: float
    degree: int = 2

    def __post_init__(self):
        self.deforming_bodies = tuple(self.deforming_bodies)
        if not self.deforming_bodies:
            raise ValueError("At least one deforming body is required.")
        if self.degree != 2:
            raise ValueError("Only degree-2 solid body tides are supported.")


__all__ = [
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
