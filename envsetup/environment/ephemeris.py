# envsetup/environment/ephemeris.py
"""
Ephemeris Models
================

Time -> Cartesian state (position [m], velocity [m/s]) of a body w.r.t.
the ephemeris' reference frame origin, in its reference orientation.

Models:
- ConstantEphemeris
- KeplerEphemeris   : unperturbed elliptic two-body orbit (hapsira Orbit;
                      numpy path for extended-precision states)
- TabulatedEphemeris: linear interpolation of a state history

All models evaluate in the requested state scalar type, so a
np.longdouble query returns a np.longdouble state.
"""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np
from astropy import units as u
from hapsira.bodies import Body as Attractor
from hapsira.twobody import Orbit

from envsetup.core.timebase import J2000_EPOCH, scalar_type, seconds_since_j2000
from envsetup.settings.models import (
    ConstantEphemerisSettings,
    EphemerisSettings,
    KeplerEphemerisSettings,
    TabulatedEphemerisSettings,
)

KEPLER_MAX_ITERATIONS = 50


class Ephemeris:
    def __init__(self, reference_frame_origin: str, reference_frame_orientation: str):
        self.reference_frame_origin = reference_frame_origin
        self.reference_frame_orientation = reference_frame_orientation

    def cartesian_state(self, time: Any, state_dtype: Any = np.float64) -> np.ndarray:
        raise NotImplementedError


class ConstantEphemeris(Ephemeris):
    def __init__(self, constant_state, reference_frame_origin: str, reference_frame_orientation: str):
        super().__init__(reference_frame_origin, reference_frame_orientation)
        self.constant_state = np.array(constant_state, dtype=float)

    def cartesian_state(self, time: Any, state_dtype: Any = np.float64) -> np.ndarray:
        return self.constant_state.astype(scalar_type(state_dtype))


def _solve_kepler(mean_anomaly, eccentricity, scalar):
    """Newton iteration for E - e sin E = M."""
    # convergence is quadratic, so the step after this one is below precision
    tolerance = 1e-2 * np.sqrt(np.finfo(scalar).eps)
    E = mean_anomaly if eccentricity < 0.8 else scalar(np.pi)
    for _ in range(KEPLER_MAX_ITERATIONS):
        step = (E - eccentricity * np.sin(E) - mean_anomaly) / (1 - eccentricity * np.cos(E))
        E = E - step
        if abs(step) < tolerance:
            return E
    raise RuntimeError(
        f"Kepler's equation did not converge (M={float(mean_anomaly)}, e={float(eccentricity)})."
    )


class KeplerEphemeris(Ephemeris):
    """
    Elliptic orbit from [a, e, i, omega, RAAN, nu] at epoch_of_initial_state,
    about a central body with gravitational parameter mu.

    float64 states come from a hapsira Orbit propagated from the initial
    elements. Other scalar types (np.longdouble) solve Kepler's equation
    in that type, since hapsira works in float64 Quantities.
    """

    def __init__(
        self,
        initial_state_in_keplerian_elements,
        epoch_of_initial_state: Any,
        central_body_gravitational_parameter: float,
        reference_frame_origin: str,
        reference_frame_orientation: str,
    ):
        super().__init__(reference_frame_origin, reference_frame_orientation)
        self.elements = np.array(initial_state_in_keplerian_elements, dtype=float)
        self.epoch_of_initial_state = epoch_of_initial_state
        self.gravitational_parameter = float(central_body_gravitational_parameter)

        a, e, i, omega, raan, nu = self.elements
        attractor = Attractor(None, self.gravitational_parameter * u.m**3 / u.s**2, reference_frame_origin)
        self._orbit = Orbit.from_classical(
            attractor, a * u.m, e * u.one, i * u.rad, raan * u.rad, omega * u.rad, nu * u.rad,
            epoch=J2000_EPOCH,
        )

    def cartesian_state(self, time: Any, state_dtype: Any = np.float64) -> np.ndarray:
        scalar = scalar_type(state_dtype)
        if scalar is not np.float64:
            return self._extended_precision_state(time, scalar)

        dt = float(seconds_since_j2000(time) - seconds_since_j2000(self.epoch_of_initial_state))
        orbit = self._orbit if dt == 0.0 else self._orbit.propagate(dt * u.s)
        r, v = orbit.rv()
        return np.concatenate((r.to_value(u.m), v.to_value(u.m / u.s)))

    def _extended_precision_state(self, time: Any, scalar) -> np.ndarray:
        a, e, i, omega, raan, nu0 = (scalar(x) for x in self.elements)
        mu = scalar(self.gravitational_parameter)

        dt = seconds_since_j2000(time, scalar) - seconds_since_j2000(self.epoch_of_initial_state, scalar)

        # Mean anomaly at epoch from true anomaly
        E0 = 2 * np.arctan(np.sqrt((1 - e) / (1 + e)) * np.tan(nu0 / 2))
        M = E0 - e * np.sin(E0) + np.sqrt(mu / a**3) * dt
        M = np.remainder(M, scalar(2 * np.pi))

        E = _solve_kepler(M, e, scalar)
        nu = 2 * np.arctan2(np.sqrt(1 + e) * np.sin(E / 2), np.sqrt(1 - e) * np.cos(E / 2))
        r = a * (1 - e * np.cos(E))
        p = a * (1 - e * e)

        r_pf = np.array([r * np.cos(nu), r * np.sin(nu)], dtype=scalar)
        v_pf = np.sqrt(mu / p) * np.array([-np.sin(nu), e + np.cos(nu)], dtype=scalar)

        # Perifocal -> inertial (first two columns)
        cO, sO = np.cos(raan), np.sin(raan)
        cw, sw = np.cos(omega), np.sin(omega)
        ci, si = np.cos(i), np.sin(i)
        R = np.array(
            [
                [cO * cw - sO * sw * ci, -cO * sw - sO * cw * ci],
                [sO * cw + cO * sw * ci, -sO * sw + cO * cw * ci],
                [sw * si, cw * si],
            ],
            dtype=scalar,
        )
        return np.concatenate((R @ r_pf, R @ v_pf))


class TabulatedEphemeris(Ephemeris):
    """Per-component linear interpolation; no extrapolation."""

    def __init__(self, body_state_history: Mapping[float, np.ndarray],
                 reference_frame_origin: str, reference_frame_orientation: str):
        super().__init__(reference_frame_origin, reference_frame_orientation)
        epochs = sorted(body_state_history)
        self.epochs = np.array(epochs, dtype=float)
        self.states = np.array([body_state_history[t] for t in epochs], dtype=float)

    def cartesian_state(self, time: Any, state_dtype: Any = np.float64) -> np.ndarray:
        scalar = scalar_type(state_dtype)
        t = seconds_since_j2000(time, np.float64)
        if t < self.epochs[0] or t > self.epochs[-1]:
            raise ValueError(
                f"Time {float(t)} s outside tabulated ephemeris range "
                f"[{self.epochs[0]}, {self.epochs[-1]}] s."
            )
        state = [np.interp(t, self.epochs, self.states[:, k]) for k in range(6)]
        return np.array(state, dtype=scalar)


# ============================================================
# Factory
# ============================================================

def create_ephemeris(settings: EphemerisSettings, body, bodies) -> Ephemeris:
    """
    Build the ephemeris of `body` from its settings.

    A Kepler ephemeris without an explicit gravitational parameter reads it
    from its frame-origin body, which must already be in `bodies`.
    """
    if isinstance(settings, ConstantEphemerisSettings):
        return ConstantEphemeris(
            settings.constant_state, settings.frame_origin, settings.frame_orientation,
        )

    if isinstance(settings, KeplerEphemerisSettings):
        mu = settings.central_body_gravitational_parameter
        if mu is None:
            origin = bodies.get(settings.frame_origin)
            if origin is None:
                raise ValueError(
                    f"Kepler ephemeris of {body.name} has no gravitational parameter and its "
                    f"central body {settings.frame_origin} has not been created."
                )
            if origin.gravity_field_model is None:
                raise ValueError(
                    f"Kepler ephemeris of {body.name} has no gravitational parameter and its "
                    f"central body {settings.frame_origin} has no gravity field."
                )
            mu = origin.gravity_field_model.gravitational_parameter
        return KeplerEphemeris(
            settings.initial_state_in_keplerian_elements,
            settings.epoch_of_initial_state,
            mu,
            settings.frame_origin,
            settings.frame_orientation,
        )

    if isinstance(settings, TabulatedEphemerisSettings):
        return TabulatedEphemeris(
            settings.body_state_history, settings.frame_origin, settings.frame_orientation,
        )

    raise TypeError(f"Unsupported ephemeris settings type: {type(settings).__name__}")


__all__ = [
    "Ephemeris",
    "ConstantEphemeris",
    "KeplerEphemeris",
    "TabulatedEphemeris",
    "create_ephemeris",
]
