# envsetup/settings/body_settings.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .models import (
    EphemerisSettings,
    RotationModelSettings,
    GravityFieldSettings,
    ExponentialAtmosphereSettings,
    BodyShapeSettings,
    ConstantAerodynamicCoefficientSettings,
    CannonballRadiationPressureSettings,
    GravityFieldVariationSettings,
)


@dataclass
class BodySettings:
    """
    Settings for one body to be created. Every entry is optional; a body
    with no settings at all is still created (as an empty body).

    radiation_pressure_settings      : keyed by source body name
    gravity_field_variation_settings : applied in list order
    """
    atmosphere_settings: Optional[ExponentialAtmosphereSettings] = None
    ephemeris_settings: Optional[EphemerisSettings] = None
    gravity_field_settings: Optional[GravityFieldSettings] = None
    rotation_model_settings: Optional[RotationModelSettings] = None
    shape_settings: Optional[BodyShapeSettings] = None
    aerodynamic_coefficient_settings: Optional[ConstantAerodynamicCoefficientSettings] = None
    radiation_pressure_settings: Dict[str, CannonballRadiationPressureSettings] = field(default_factory=dict)
    gravity_field_variation_settings: List[GravityFieldVariationSettings] = field(default_factory=list)

    def frame_origins(self) -> Tuple[str, ...]:
        """Frame origins declared by the ephemeris and rotation settings, deduplicated."""
        origins: List[str] = []
        if self.ephemeris_settings is not None:
            origins.append(self.ephemeris_settings.frame_origin)
        if self.rotation_model_settings is not None:
            origin = self.rotation_model_settings.frame_origin
            if origin is not None and origin not in origins:
                origins.append(origin)
        return tuple(origins)


__all__ = ["BodySettings"]
