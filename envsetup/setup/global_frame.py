# envsetup/setup/global_frame.py
"""
Global Frame Enforcement
========================

All body states have to be expressible in one global frame (origin +
orientation) before propagation. enforce_global_frame() checks every
body against it:

- Ephemeris origin differs from the global origin:
    the origin must be another body in the map; a BaseStateInterface
    returning that body's global-frame state is attached, so that the
    dependent body's global state is its ephemeris state plus the
    origin's. Otherwise MissingFrameOrigin.
- Ephemeris orientation differs from the global orientation:
    FrameOrientationMismatch. There is no rotation correction.
- Rotation model base orientation differs from the global orientation:
    FrameOrientationMismatch.

Every body is checked before any interface is attached; if a check
fails, no body is modified. Bodies that need no translation lose any
interface left over from an earlier call, so enforcement can be
repeated with a different global frame.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Dict, List, Tuple

import numpy as np

from envsetup.core.errors import CycleDetected, FrameOrientationMismatch, MissingFrameOrigin
from envsetup.core.timebase import check_time_type, scalar_type
from envsetup.environment.body import BaseStateInterface, Body, NamedBodyMap

log = logging.getLogger(__name__)


def _check_origin_chains(translations: Dict[str, str]) -> None:
    """Translations body -> origin must not loop, or state queries would recurse forever."""
    resolved = set()
    for start in translations:
        path: List[str] = []
        current = start
        while current in translations and current not in resolved:
            if current in path:
                raise CycleDetected(path[path.index(current):])
            path.append(current)
            current = translations[current]
        resolved.update(path)


def enforce_global_frame(
    bodies: NamedBodyMap,
    global_frame_origin: str,
    global_frame_orientation: str,
    state_dtype: Any = np.float64,
    time_type: Any = float,
) -> None:
    """
    Validate the frames of all bodies and attach base-frame translations.

    Parameters
    ----------
    bodies : body map produced by construct_bodies
    global_frame_origin, global_frame_orientation : the global frame
    state_dtype : numpy floating type of the translation states
    time_type   : time representation passed to the origin state query
                  (float, numpy floating type or astropy Time)

    Raises
    ------
    MissingFrameOrigin
        Ephemeris origin is neither the global origin nor a body.
    FrameOrientationMismatch
        Ephemeris orientation or rotation base orientation is not the
        global orientation.
    CycleDetected
        Ephemeris origins of the bodies refer to each other in a loop.
    """
    state_dtype = scalar_type(state_dtype)
    time_type = check_time_type(time_type)

    translations: Dict[str, str] = {}
    for name, body in bodies.items():
        ephemeris = body.ephemeris
        if ephemeris is not None:
            origin = ephemeris.reference_frame_origin
            if origin != global_frame_origin:
                if origin not in bodies:
                    raise MissingFrameOrigin(name, origin, global_frame_origin)
                if bodies[origin].ephemeris is None:
                    log.warning(
                        "Body %s has ephemeris origin %s, which has no ephemeris of its own",
                        name, origin,
                    )
                translations[name] = origin

            orientation = ephemeris.reference_frame_orientation
            if orientation != global_frame_orientation:
                raise FrameOrientationMismatch(name, orientation, global_frame_orientation, "ephemeris")

        rotation = body.rotational_ephemeris
        if rotation is not None and rotation.base_frame_orientation != global_frame_orientation:
            raise FrameOrientationMismatch(
                name, rotation.base_frame_orientation, global_frame_orientation, "rotation_model",
            )

    _check_origin_chains(translations)

    for name, body in bodies.items():
        if name not in translations and body.ephemeris_frame_to_base_frame is not None:
            log.debug("Body %s: ephemeris origin is %s, base-frame interface removed", name, global_frame_origin)
            body.clear_ephemeris_frame_to_base_frame()

    for name, origin in translations.items():
        origin_body: Body = bodies[origin]
        state_function = partial(origin_body.state_in_base_frame_from_ephemeris, state_dtype=state_dtype)
        bodies[name].set_ephemeris_frame_to_base_frame(
            BaseStateInterface(origin, state_function, state_dtype=state_dtype, time_type=time_type)
        )
        log.debug("Body %s: ephemeris origin %s translated to %s", name, origin, global_frame_origin)

    log.info(
        "Global frame %s/%s set for %d bodies (%d translated)",
        global_frame_origin, global_frame_orientation, len(bodies), len(translations),
    )


def frame_translations(bodies: NamedBodyMap) -> List[Tuple[str, str]]:
    """(body, origin) pairs of all attached base-frame translations."""
    return [
        (name, body.ephemeris_frame_to_base_frame.base_frame_id)
        for name, body in bodies.items()
        if body.ephemeris_frame_to_base_frame is not None
    ]


__all__ = ["enforce_global_frame", "frame_translations"]
