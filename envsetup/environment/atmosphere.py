# envsetup/environment/atmosphere.py

from __future__ import annotations

import math

from envsetup.settings.models import ExponentialAtmosphereSettings


class ExponentialAtmosphere:
    """
    Isothermal exponential atmosphere (rho = rho0 * exp(-h / H)).
    Altitudes below zero are clamped to the surface.
    """

    def __init__(self, scale_height: float, surface_density: float, constant_temperature: float,
                 specific_gas_constant: float, ratio_of_specific_heats: float):
        self.scale_height = scale_height
        self.surface_density = surface_density
        self.constant_temperature = constant_temperature
        self.specific_gas_constant = specific_gas_constant
        self.ratio_of_specific_heats = ratio_of_specific_heats

    def density(self, altitude: float) -> float:
        return self.surface_density * math.exp(-max(altitude, 0.0) / self.scale_height)

    def temperature(self, altitude: float) -> float:
        return self.constant_temperature

    def pressure(self, altitude: float) -> float:
        return self.density(altitude) * self.specific_gas_constant * self.constant_temperature

    def speed_of_sound(self, altitude: float) -> float:
        return math.sqrt(self.ratio_of_specific_heats * self.specific_gas_constant * self.constant_temperature)


def create_atmosphere_model(settings, body, bodies) -> ExponentialAtmosphere:
    if isinstance(settings, ExponentialAtmosphereSettings):
        return ExponentialAtmosphere(
            settings.scale_height,
            settings.surface_density,
            settings.constant_temperature,
            settings.specific_gas_constant,
            settings.ratio_of_specific_heats,
        )
    raise TypeError(f"Unsupported atmosphere settings type: {type(settings).__name__}")


__all__ = ["ExponentialAtmosphere", "create_atmosphere_model"]
