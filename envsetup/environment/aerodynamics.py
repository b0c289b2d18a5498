# envsetup/environment/aerodynamics.py

from __future__ import annotations

import numpy as np

from envsetup.settings.models import ConstantAerodynamicCoefficientSettings


class ConstantAerodynamicCoefficientInterface:
    def __init__(self, reference_area: float, reference_length: float,
                 force_coefficients, moment_coefficients,
                 are_coefficients_in_aerodynamic_frame: bool = True):
        self.reference_area = reference_area
        self.reference_length = reference_length
        self.force_coefficients = np.array(force_coefficients, dtype=float)
        self.moment_coefficients = np.array(moment_coefficients, dtype=float)
        self.are_coefficients_in_aerodynamic_frame = are_coefficients_in_aerodynamic_frame

    def aerodynamic_force(self, dynamic_pressure: float) -> np.ndarray:
        """Force components [N] in the coefficient frame."""
        return dynamic_pressure * self.reference_area * self.force_coefficients

    def aerodynamic_moment(self, dynamic_pressure: float) -> np.ndarray:
        return dynamic_pressure * self.reference_area * self.reference_length * self.moment_coefficients


def create_aerodynamic_coefficient_interface(settings, body, bodies) -> ConstantAerodynamicCoefficientInterface:
    if isinstance(settings, ConstantAerodynamicCoefficientSettings):
        return ConstantAerodynamicCoefficientInterface(
            settings.reference_area,
            settings.reference_length,
            settings.force_coefficients,
            settings.moment_coefficients,
            settings.are_coefficients_in_aerodynamic_frame,
        )
    raise TypeError(f"Unsupported aerodynamic coefficient settings type: {type(settings).__name__}")


__all__ = ["ConstantAerodynamicCoefficientInterface", "create_aerodynamic_coefficient_interface"]
