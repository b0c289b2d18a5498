# envsetup/environment/body.py
"""
Runtime body object and base-frame state adapter.

A Body is a container for the environment models built from its
BodySettings. Its ephemeris gives the state w.r.t. the ephemeris' own
frame origin; when that origin is not the global frame origin, a
BaseStateInterface is attached which supplies the origin's state in the
global frame, so that

    state in global frame = ephemeris state + base-frame interface state

The interface calls the origin body's accessor at query time, so chains
of origins (spacecraft -> Moon -> Earth -> global origin) resolve lazily
and the order in which adapters were attached does not matter.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from envsetup.core.timebase import check_time_type, coerce_time, scalar_type

log = logging.getLogger(__name__)


class BaseStateInterface:
    """
    Time-parameterized state of a frame origin in the global base frame.

    base_frame_id  : name of the origin body the state belongs to
    state_function : callable(time) -> 6-vector, evaluated on every call
    state_dtype    : numpy floating type of returned states
    time_type      : representation the state function expects
                     (float, numpy floating type or astropy Time)
    """

    def __init__(
        self,
        base_frame_id: str,
        state_function: Callable[[Any], np.ndarray],
        state_dtype: Any = np.float64,
        time_type: Any = float,
    ):
        self.base_frame_id = base_frame_id
        self.state_function = state_function
        self.state_dtype = scalar_type(state_dtype)
        self.time_type = check_time_type(time_type)

    def get_base_frame_state(self, time: Any) -> np.ndarray:
        state = self.state_function(coerce_time(time, self.time_type))
        return np.asarray(state, dtype=self.state_dtype)

    __call__ = get_base_frame_state

    def __repr__(self) -> str:
        return (
            f"BaseStateInterface(base_frame_id={self.base_frame_id!r}, "
            f"state_dtype={np.dtype(self.state_dtype).name})"
        )


class Body:
    """
    One body of the environment.

    Models are assigned once by the body factories; afterwards only
    the base-frame interface setters (frame enforcement) and
    `update_state_from_ephemeris` mutate the body.
    """

    def __init__(self, name: str):
        self.name = name
        self.ephemeris = None
        self.rotational_ephemeris = None
        self.gravity_field_model = None
        self.atmosphere_model = None
        self.shape_model = None
        self.aerodynamic_coefficient_interface = None
        self.radiation_pressure_interfaces: Dict[str, Any] = {}
        self.gravity_field_variations: List[Any] = []

        self.state: Optional[np.ndarray] = None
        self._ephemeris_frame_to_base_frame: Optional[BaseStateInterface] = None

    @property
    def ephemeris_frame_to_base_frame(self) -> Optional[BaseStateInterface]:
        return self._ephemeris_frame_to_base_frame

    def set_ephemeris_frame_to_base_frame(self, interface: BaseStateInterface) -> None:
        if self._ephemeris_frame_to_base_frame is not None:
            log.debug(
                "Body %s: replacing base-frame interface %s with %s",
                self.name, self._ephemeris_frame_to_base_frame.base_frame_id, interface.base_frame_id,
            )
        self._ephemeris_frame_to_base_frame = interface

    def clear_ephemeris_frame_to_base_frame(self) -> None:
        self._ephemeris_frame_to_base_frame = None

    def state_in_base_frame_from_ephemeris(self, time: Any, state_dtype: Any = np.float64) -> np.ndarray:
        """Ephemeris state, translated to the global frame origin if needed."""
        if self.ephemeris is None:
            raise ValueError(f"Body {self.name} has no ephemeris; cannot compute its state.")
        scalar = scalar_type(state_dtype)
        state = np.asarray(self.ephemeris.cartesian_state(time, scalar), dtype=scalar)
        if self._ephemeris_frame_to_base_frame is not None:
            state = state + np.asarray(self._ephemeris_frame_to_base_frame(time), dtype=scalar)
        return state

    def update_state_from_ephemeris(self, time: Any, state_dtype: Any = np.float64) -> np.ndarray:
        self.state = self.state_in_base_frame_from_ephemeris(time, state_dtype)
        return self.state

    @property
    def position(self) -> np.ndarray:
        if self.state is None:
            raise ValueError(f"State of body {self.name} has not been set.")
        return self.state[:3]

    @property
    def velocity(self) -> np.ndarray:
        if self.state is None:
            raise ValueError(f"State of body {self.name} has not been set.")
        return self.state[3:]

    def __repr__(self) -> str:
        return f"Body({self.name!r})"


NamedBodyMap = Dict[str, Body]


__all__ = ["BaseStateInterface", "Body", "NamedBodyMap"]
