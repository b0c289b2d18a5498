# envsetup/setup/create_bodies.py
"""
Body Construction
=================

construct_bodies() turns a mapping of BodySettings into a mapping of
Body objects:

1. resolve the creation order (frame-origin bodies first);
2. for each body, in that order, call the per-domain factories;
3. insert the finished body into the body map.

Because a body enters the map only once all its models exist, a factory
for body B can look up any body created before B (e.g. the central body
of a Kepler ephemeris). Factories may also keep a reference to the body
map itself and look bodies up later, at evaluation time.

The first factory failure aborts the whole construction with
SubModelCreationFailure; no partially filled body map is returned.

create_system_of_bodies() is the usual entry point: construction followed
by global frame enforcement.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from envsetup.core.config import EnvironmentConfig
from envsetup.core.errors import SubModelCreationFailure
from envsetup.environment.body import Body, NamedBodyMap
from envsetup.environment.aerodynamics import create_aerodynamic_coefficient_interface
from envsetup.environment.atmosphere import create_atmosphere_model
from envsetup.environment.ephemeris import create_ephemeris
from envsetup.environment.gravity import create_gravity_field, create_gravity_field_variation
from envsetup.environment.radiation import create_radiation_pressure_interface
from envsetup.environment.rotation import create_rotation_model
from envsetup.environment.shape import create_body_shape_model
from envsetup.settings.body_settings import BodySettings

from .creation_order import resolve_creation_order
from .global_frame import enforce_global_frame

log = logging.getLogger(__name__)

# factory(settings, body_under_construction, bodies_created_so_far) -> model
ModelFactory = Callable[[Any, Body, NamedBodyMap], Any]


@dataclass
class ModelFactories:
    """
    Per-domain model factories used by construct_bodies.

    Defaults are the built-in envsetup.environment factories; replace
    individual entries to plug in other model implementations.
    """
    ephemeris: ModelFactory = create_ephemeris
    atmosphere: ModelFactory = create_atmosphere_model
    rotation_model: ModelFactory = create_rotation_model
    shape: ModelFactory = create_body_shape_model
    gravity_field: ModelFactory = create_gravity_field
    gravity_field_variation: ModelFactory = create_gravity_field_variation
    aerodynamic_coefficients: ModelFactory = create_aerodynamic_coefficient_interface
    radiation_pressure: ModelFactory = create_radiation_pressure_interface


def _build(domain: str, factory: ModelFactory, settings: Any, body: Body, bodies: NamedBodyMap) -> Any:
    try:
        return factory(settings, body, bodies)
    except Exception as exc:
        raise SubModelCreationFailure(body.name, domain, exc) from exc


def _create_body(name: str, settings: BodySettings, bodies: NamedBodyMap, factories: ModelFactories) -> Body:
    body = Body(name)

    if settings.ephemeris_settings is not None:
        body.ephemeris = _build("ephemeris", factories.ephemeris, settings.ephemeris_settings, body, bodies)

    if settings.atmosphere_settings is not None:
        body.atmosphere_model = _build(
            "atmosphere", factories.atmosphere, settings.atmosphere_settings, body, bodies)

    if settings.rotation_model_settings is not None:
        body.rotational_ephemeris = _build(
            "rotation_model", factories.rotation_model, settings.rotation_model_settings, body, bodies)

    if settings.shape_settings is not None:
        body.shape_model = _build("shape", factories.shape, settings.shape_settings, body, bodies)

    if settings.gravity_field_settings is not None:
        body.gravity_field_model = _build(
            "gravity_field", factories.gravity_field, settings.gravity_field_settings, body, bodies)

    for variation_settings in settings.gravity_field_variation_settings:
        body.gravity_field_variations.append(_build(
            "gravity_field_variation", factories.gravity_field_variation, variation_settings, body, bodies))

    if settings.aerodynamic_coefficient_settings is not None:
        body.aerodynamic_coefficient_interface = _build(
            "aerodynamic_coefficients", factories.aerodynamic_coefficients,
            settings.aerodynamic_coefficient_settings, body, bodies)

    for source, radiation_settings in settings.radiation_pressure_settings.items():
        declared = getattr(radiation_settings, "source_body", source)
        if declared != source:
            mismatch = ValueError(
                f"Radiation pressure settings keyed by source {source} declare source {declared}.")
            raise SubModelCreationFailure(name, "radiation_pressure", mismatch) from mismatch
        body.radiation_pressure_interfaces[source] = _build(
            "radiation_pressure", factories.radiation_pressure, radiation_settings, body, bodies)

    return body


def _check_body_references(body_settings: Mapping[str, BodySettings], bodies: NamedBodyMap) -> None:
    """
    Bodies named inside radiation and tide settings are looked up when the
    models are evaluated, so they may be created later but must exist.
    """
    for name, settings in body_settings.items():
        references = [
            ("gravity_field_variation", getattr(variation, "deforming_bodies", ()))
            for variation in settings.gravity_field_variation_settings
        ]
        references += [
            ("radiation_pressure", (source, *getattr(radiation, "occulting_bodies", ())))
            for source, radiation in settings.radiation_pressure_settings.items()
        ]
        for domain, names in references:
            missing = [n for n in names if n not in bodies]
            if missing:
                error = ValueError(f"{domain} model refers to bodies not in the environment: {missing}")
                raise SubModelCreationFailure(name, domain, error) from error


def construct_bodies(
    body_settings: Mapping[str, BodySettings],
    factories: Optional[ModelFactories] = None,
) -> NamedBodyMap:
    """
    Create all bodies from their settings, frame-origin bodies first.

    Returns
    -------
    NamedBodyMap
        dict name -> Body, in creation order.

    Raises
    ------
    CycleDetected
        Frame-origin references among the bodies form a cycle.
    SubModelCreationFailure
        A model factory failed, or a radiation source, occulting body or
        tide-raising body is not among the created bodies. `body` and
        `domain` identify it and the original exception is chained as
        __cause__.
    """
    factories = factories or ModelFactories()
    order = resolve_creation_order(body_settings)

    bodies: NamedBodyMap = {}
    for name, settings in order:
        bodies[name] = _create_body(name, settings, bodies, factories)
        log.debug("Created body %s", name)

    _check_body_references(body_settings, bodies)
    log.info("Created %d bodies: %s", len(bodies), ", ".join(bodies))
    return bodies


def create_system_of_bodies(
    body_settings: Mapping[str, BodySettings],
    config: Optional[EnvironmentConfig] = None,
    factories: Optional[ModelFactories] = None,
) -> NamedBodyMap:
    """
    Construct all bodies and make their states consistent with the
    global frame in `config`. Either every step succeeds and the body map
    is returned, or the first error propagates and nothing is returned.
    """
    config = config or EnvironmentConfig()
    bodies = construct_bodies(body_settings, factories)
    enforce_global_frame(
        bodies,
        config.global_frame_origin,
        config.global_frame_orientation,
        state_dtype=config.state_dtype,
        time_type=config.time_type,
    )
    return bodies


__all__ = [
    "ModelFactory",
    "ModelFactories",
    "construct_bodies",
    "create_system_of_bodies",
]
