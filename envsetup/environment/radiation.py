# envsetup/environment/radiation.py
"""
Cannonball radiation pressure interface.

Pressure at the target from an isotropic source of luminosity L:

    P = L / (4 pi c d^2)

Shadowing uses a cylindrical shadow behind each occulting body (radius
from its shape model). Source, target and occulter states are looked up
in the body map on every evaluation.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Sequence

import numpy as np

from envsetup.core.bodies import body_constants
from envsetup.settings.models import CannonballRadiationPressureSettings

SPEED_OF_LIGHT = 299_792_458.0  # m/s


class CannonballRadiationPressureInterface:
    def __init__(self, source_body: str, target_body, bodies: Mapping[str, Any],
                 area: float, radiation_pressure_coefficient: float, source_luminosity: float,
                 occulting_bodies: Sequence[str] = ()):
        self.source_body = source_body
        self.target_body = target_body
        self.bodies = bodies
        self.area = area
        self.radiation_pressure_coefficient = radiation_pressure_coefficient
        self.source_luminosity = source_luminosity
        self.occulting_bodies = tuple(occulting_bodies)

    def _shadow_function(self, source_position, target_position, time) -> float:
        for name in self.occulting_bodies:
            occulter = self.bodies[name]
            if occulter.shape_model is None:
                raise ValueError(f"Occulting body {name} has no shape model.")
            occulter_position = occulter.state_in_base_frame_from_ephemeris(time)[:3]
            axis = occulter_position - source_position
            axis /= np.linalg.norm(axis)
            offset = target_position - occulter_position
            along = float(offset @ axis)
            if along > 0.0 and np.linalg.norm(offset - along * axis) < occulter.shape_model.average_radius:
                return 0.0
        return 1.0

    def radiation_pressure(self, time: Any) -> float:
        """Radiation pressure [N/m^2] at the target (zero in shadow)."""
        source_position = self.bodies[self.source_body].state_in_base_frame_from_ephemeris(time)[:3]
        target_position = self.target_body.state_in_base_frame_from_ephemeris(time)[:3]
        distance = float(np.linalg.norm(target_position - source_position))
        pressure = self.source_luminosity / (4.0 * math.pi * SPEED_OF_LIGHT * distance**2)
        return pressure * self._shadow_function(source_position, target_position, time)

    def force(self, time: Any) -> np.ndarray:
        """Force [N] on the target, directed away from the source."""
        source_position = self.bodies[self.source_body].state_in_base_frame_from_ephemeris(time)[:3]
        target_position = self.target_body.state_in_base_frame_from_ephemeris(time)[:3]
        direction = target_position - source_position
        direction /= np.linalg.norm(direction)
        return self.radiation_pressure(time) * self.radiation_pressure_coefficient * self.area * direction


def create_radiation_pressure_interface(settings, body, bodies) -> CannonballRadiationPressureInterface:
    if isinstance(settings, CannonballRadiationPressureSettings):
        luminosity = settings.source_luminosity
        if luminosity is None:
            luminosity = body_constants(settings.source_body).luminosity_W
        if luminosity is None:
            raise ValueError(f"No luminosity known for radiation source {settings.source_body}.")
        return CannonballRadiationPressureInterface(
            settings.source_body,
            body,
            bodies,
            settings.area,
            settings.radiation_pressure_coefficient,
            luminosity,
            settings.occulting_bodies,
        )
    raise TypeError(f"Unsupported radiation pressure settings type: {type(settings).__name__}")


__all__ = [
    "SPEED_OF_LIGHT",
    "CannonballRadiationPressureInterface",
    "create_radiation_pressure_interface",
]
