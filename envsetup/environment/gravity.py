# envsetup/environment/gravity.py
"""
Gravity Field Models
====================

- CentralGravityField             : point mass (mu only)
- SphericalHarmonicsGravityField  : normalized C_nm / S_nm in a body-fixed frame
- BasicSolidBodyTideVariation     : degree-2 tidal corrections to C_2m / S_2m

Variations are evaluated lazily: the tide model looks up the deforming
bodies' states when corrections are requested, so deforming bodies need
not exist when the variation is created.
"""

from __future__ import annotations

import math
from typing import Any, List, Mapping, Sequence, Tuple

import numpy as np

from envsetup.settings.models import (
    BasicSolidBodyTideSettings,
    CentralGravityFieldSettings,
    GravityFieldSettings,
    GravityFieldVariationSettings,
    SphericalHarmonicsGravityFieldSettings,
)


class CentralGravityField:
    def __init__(self, gravitational_parameter: float):
        self.gravitational_parameter = float(gravitational_parameter)

    def gravitational_potential(self, position: np.ndarray) -> float:
        return self.gravitational_parameter / float(np.linalg.norm(position))

    def acceleration(self, position: np.ndarray) -> np.ndarray:
        r = np.asarray(position, dtype=float)
        return -self.gravitational_parameter * r / np.linalg.norm(r) ** 3


class SphericalHarmonicsGravityField(CentralGravityField):
    def __init__(self, gravitational_parameter: float, reference_radius: float,
                 normalized_cosine_coefficients, normalized_sine_coefficients,
                 fixed_reference_frame: str):
        super().__init__(gravitational_parameter)
        self.reference_radius = float(reference_radius)
        self.normalized_cosine_coefficients = np.array(normalized_cosine_coefficients, dtype=float)
        self.normalized_sine_coefficients = np.array(normalized_sine_coefficients, dtype=float)
        self.fixed_reference_frame = fixed_reference_frame
        self.variations: List[Any] = []

    def add_variation(self, variation) -> None:
        self.variations.append(variation)

    def coefficients_at(self, time: Any) -> Tuple[np.ndarray, np.ndarray]:
        """Nominal coefficients plus the corrections of every variation at `time`."""
        C = self.normalized_cosine_coefficients.copy()
        S = self.normalized_sine_coefficients.copy()
        for variation in self.variations:
            dC, dS = variation.coefficient_corrections(time)
            n, m = min(C.shape[0], dC.shape[0]), min(C.shape[1], dC.shape[1])
            C[:n, :m] += dC[:n, :m]
            S[:n, :m] += dS[:n, :m]
        return C, S


def _legendre_degree_2(sin_lat: float) -> np.ndarray:
    """Fully normalized P_2m(sin(phi)), m = 0..2."""
    cos_lat_sq = 1.0 - sin_lat * sin_lat
    return np.array([
        math.sqrt(5.0) * (3.0 * sin_lat * sin_lat - 1.0) / 2.0,
        math.sqrt(15.0) * sin_lat * math.sqrt(cos_lat_sq),
        math.sqrt(15.0) / 2.0 * cos_lat_sq,
    ])


class BasicSolidBodyTideVariation:
    """
    dC_2m - i dS_2m = k2 / 5 * sum_j (GM_j / GM) (R / r_j)^3 P_2m(sin phi_j) exp(-i m lambda_j)

    with (r_j, phi_j, lambda_j) the body-fixed spherical position of
    deforming body j w.r.t. the deformed body.
    """

    def __init__(self, deformed_body, deforming_bodies: Sequence[str],
                 bodies: Mapping[str, Any], love_number: float):
        self.deformed_body = deformed_body
        self.deforming_bodies = tuple(deforming_bodies)
        self.bodies = bodies
        self.love_number = float(love_number)

    def coefficient_corrections(self, time: Any) -> Tuple[np.ndarray, np.ndarray]:
        field = self.deformed_body.gravity_field_model
        rotation = self.deformed_body.rotational_ephemeris
        own_position = self.deformed_body.state_in_base_frame_from_ephemeris(time)[:3]

        dC = np.zeros((3, 3))
        dS = np.zeros((3, 3))
        for name in self.deforming_bodies:
            deforming = self.bodies[name]
            r = deforming.state_in_base_frame_from_ephemeris(time)[:3] - own_position
            if rotation is not None:
                r = rotation.rotation_to_target_frame(time) @ r
            distance = float(np.linalg.norm(r))
            sin_lat = float(r[2]) / distance
            lon = math.atan2(float(r[1]), float(r[0]))
            mass_ratio = deforming.gravity_field_model.gravitational_parameter / field.gravitational_parameter
            factor = self.love_number / 5.0 * mass_ratio * (field.reference_radius / distance) ** 3
            P = _legendre_degree_2(sin_lat)
            for m in range(3):
                dC[2, m] += factor * P[m] * math.cos(m * lon)
                dS[2, m] += factor * P[m] * math.sin(m * lon)
        return dC, dS


# ============================================================
# Factories
# ============================================================

def create_gravity_field(settings: GravityFieldSettings, body, bodies) -> CentralGravityField:
    if isinstance(settings, SphericalHarmonicsGravityFieldSettings):
        rotation = body.rotational_ephemeris
        if rotation is not None and rotation.target_frame_orientation != settings.associated_reference_frame:
            raise ValueError(
                f"Spherical harmonic gravity field of {body.name} is defined in frame "
                f"{settings.associated_reference_frame}, but its rotation model targets "
                f"{rotation.target_frame_orientation}."
            )
        return SphericalHarmonicsGravityField(
            settings.gravitational_parameter,
            settings.reference_radius,
            settings.normalized_cosine_coefficients,
            settings.normalized_sine_coefficients,
            settings.associated_reference_frame,
        )

    if isinstance(settings, CentralGravityFieldSettings):
        return CentralGravityField(settings.gravitational_parameter)

    raise TypeError(f"Unsupported gravity field settings type: {type(settings).__name__}")


def create_gravity_field_variation(settings: GravityFieldVariationSettings, body, bodies):
    """Build one variation and register it with the body's gravity field."""
    if isinstance(settings, BasicSolidBodyTideSettings):
        if not isinstance(body.gravity_field_model, SphericalHarmonicsGravityField):
            raise ValueError(
                f"Solid body tide on {body.name} requires a spherical harmonic gravity field."
            )
        if body.name in settings.deforming_bodies:
            raise ValueError(f"Body {body.name} cannot raise a tide on itself.")
        variation = BasicSolidBodyTideVariation(body, settings.deforming_bodies, bodies, settings.love_number)
        body.gravity_field_model.add_variation(variation)
        return variation

    raise TypeError(f"Unsupported gravity field variation settings type: {type(settings).__name__}")


__all__ = [
    "CentralGravityField",
    "SphericalHarmonicsGravityField",
    "BasicSolidBodyTideVariation",
    "create_gravity_field",
    "create_gravity_field_variation",
]
