# envsetup/environment/shape.py

from __future__ import annotations

import numpy as np

from envsetup.settings.models import OblateSpheroidBodyShapeSettings, SphericalBodyShapeSettings


class SphericalBodyShape:
    def __init__(self, radius: float):
        self.radius = radius

    @property
    def average_radius(self) -> float:
        return self.radius

    def altitude(self, body_fixed_position) -> float:
        return float(np.linalg.norm(body_fixed_position)) - self.radius


class OblateSpheroidBodyShape:
    def __init__(self, equatorial_radius: float, flattening: float):
        self.equatorial_radius = equatorial_radius
        self.flattening = flattening
        self.polar_radius = equatorial_radius * (1.0 - flattening)

    @property
    def average_radius(self) -> float:
        return (2.0 * self.equatorial_radius + self.polar_radius) / 3.0

    def altitude(self, body_fixed_position) -> float:
        """Height above the ellipsoid along the geocentric radial (approximate)."""
        r = np.asarray(body_fixed_position, dtype=float)
        distance = float(np.linalg.norm(r))
        sin_lat = r[2] / distance
        cos_lat_sq = 1.0 - sin_lat * sin_lat
        a, b = self.equatorial_radius, self.polar_radius
        surface = a * b / np.sqrt(b * b * cos_lat_sq + a * a * sin_lat * sin_lat)
        return distance - float(surface)


def create_body_shape_model(settings, body, bodies):
    if isinstance(settings, SphericalBodyShapeSettings):
        return SphericalBodyShape(settings.radius)
    if isinstance(settings, OblateSpheroidBodyShapeSettings):
        return OblateSpheroidBodyShape(settings.equatorial_radius, settings.flattening)
    raise TypeError(f"Unsupported body shape settings type: {type(settings).__name__}")


__all__ = ["SphericalBodyShape", "OblateSpheroidBodyShape", "create_body_shape_model"]
