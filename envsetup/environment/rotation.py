# envsetup/environment/rotation.py
"""
Rotational ephemerides: time -> rotation matrix between a body's
base (inertial) frame and its body-fixed target frame.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from envsetup.core.timebase import seconds_since_j2000
from envsetup.settings.models import (
    RotationModelSettings,
    SimpleRotationModelSettings,
    SynchronousRotationModelSettings,
)


class RotationalEphemeris:
    def __init__(self, base_frame_orientation: str, target_frame_orientation: str):
        self.base_frame_orientation = base_frame_orientation
        self.target_frame_orientation = target_frame_orientation

    def rotation_to_base_frame(self, time: Any) -> np.ndarray:
        raise NotImplementedError

    def rotation_to_target_frame(self, time: Any) -> np.ndarray:
        return self.rotation_to_base_frame(time).T


class SimpleRotationalEphemeris(RotationalEphemeris):
    def __init__(self, initial_orientation, initial_time: Any, rotation_rate: float,
                 base_frame_orientation: str, target_frame_orientation: str):
        super().__init__(base_frame_orientation, target_frame_orientation)
        self.initial_orientation = np.array(initial_orientation, dtype=float)
        self.initial_time = initial_time
        self.rotation_rate = float(rotation_rate)

    def rotation_to_base_frame(self, time: Any) -> np.ndarray:
        dt = float(seconds_since_j2000(time) - seconds_since_j2000(self.initial_time))
        angle = self.rotation_rate * dt
        c, s = np.cos(angle), np.sin(angle)
        spin = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
        return self.initial_orientation @ spin


class SynchronousRotationalEphemeris(RotationalEphemeris):
    """
    Body-fixed x-axis towards the central body, z-axis along the orbital
    angular momentum. relative_state_function(time) must return the
    body's state w.r.t. its central body.
    """

    def __init__(self, relative_state_function: Callable[[Any], np.ndarray], central_body: str,
                 base_frame_orientation: str, target_frame_orientation: str):
        super().__init__(base_frame_orientation, target_frame_orientation)
        self.relative_state_function = relative_state_function
        self.central_body = central_body

    def rotation_to_base_frame(self, time: Any) -> np.ndarray:
        state = np.asarray(self.relative_state_function(time), dtype=float)
        r, v = state[:3], state[3:]
        h = np.cross(r, v)
        if np.linalg.norm(r) == 0.0 or np.linalg.norm(h) == 0.0:
            raise ValueError("Synchronous rotation undefined for zero position or angular momentum.")
        x = -r / np.linalg.norm(r)
        z = h / np.linalg.norm(h)
        y = np.cross(z, x)
        return np.column_stack((x, y, z))


def create_rotation_model(settings: RotationModelSettings, body, bodies) -> RotationalEphemeris:
    if isinstance(settings, SimpleRotationModelSettings):
        return SimpleRotationalEphemeris(
            settings.initial_orientation,
            settings.initial_time,
            settings.rotation_rate,
            settings.base_frame_orientation,
            settings.target_frame_orientation,
        )

    if isinstance(settings, SynchronousRotationModelSettings):
        if settings.central_body not in bodies:
            raise ValueError(
                f"Synchronous rotation of {body.name} requires central body "
                f"{settings.central_body} to be created first."
            )
        if body.ephemeris is None:
            raise ValueError(f"Synchronous rotation of {body.name} requires an ephemeris.")
        central = bodies[settings.central_body]

        def relative_state(time):
            return (
                body.state_in_base_frame_from_ephemeris(time)
                - central.state_in_base_frame_from_ephemeris(time)
            )

        return SynchronousRotationalEphemeris(
            relative_state,
            settings.central_body,
            settings.base_frame_orientation,
            settings.target_frame_orientation,
        )

    raise TypeError(f"Unsupported rotation model settings type: {type(settings).__name__}")


__all__ = [
    "RotationalEphemeris",
    "SimpleRotationalEphemeris",
    "SynchronousRotationalEphemeris",
    "create_rotation_model",
]
