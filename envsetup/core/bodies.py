# envsetup/core/bodies.py

from dataclasses import dataclass


@dataclass(frozen=True)
class BodyConstants:
    name: str
    mu: float          # gravitational parameter [m^3/s^2]
    radius_m: float    # mean radius [m]
    luminosity_W: float | None = None  # only for radiation sources


# Catalogue of bodies used by the from_constants() settings helpers
SUN = BodyConstants(
    name="Sun",
    mu=1.32712440018e20,
    radius_m=695_700e3,
    luminosity_W=3.828e26,
)

EARTH = BodyConstants(
    name="Earth",
    mu=3.986004418e14,
    radius_m=6371e3,
)

MOON = BodyConstants(
    name="Moon",
    mu=4.9048695e12,
    radius_m=1737.4e3,
)

MARS = BodyConstants(
    name="Mars",
    mu=4.282837e13,
    radius_m=3389.5e3,
)

KNOWN_BODIES = {b.name: b for b in (SUN, EARTH, MOON, MARS)}


def body_constants(name: str) -> BodyConstants:
    """Look up catalogue constants by body name."""
    try:
        return KNOWN_BODIES[name]
    except KeyError:
        raise KeyError(
            f"No catalogue constants for body '{name}'; "
            f"known bodies: {sorted(KNOWN_BODIES)}"
        ) from None


__all__ = ["BodyConstants", "SUN", "EARTH", "MOON", "MARS", "KNOWN_BODIES", "body_constants"]
