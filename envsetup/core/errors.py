# envsetup/core/errors.py
"""
Environment setup errors
========================

All errors raised while building a system of bodies derive from
BodySetupError. They are configuration-time errors: the body settings
have to be corrected, retrying will not help.

- CycleDetected            : frame-origin references form a loop.
- SubModelCreationFailure  : a per-domain model factory raised.
- MissingFrameOrigin       : an ephemeris origin is neither the global
                             origin nor a body in the environment.
- FrameOrientationMismatch : an ephemeris or rotation model is defined
                             in a different orientation than the global one.
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple


class BodySetupError(RuntimeError):
    """Base class; keeps the structured context next to the message."""

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context


class CycleDetected(BodySetupError):
    """Bodies whose frame origins depend on each other in a loop."""

    def __init__(self, bodies: Sequence[str]):
        self.bodies: Tuple[str, ...] = tuple(bodies)
        loop = " -> ".join(self.bodies + self.bodies[:1])
        super().__init__(
            f"Cannot determine body creation order, frame origins form a cycle: {loop}",
            bodies=self.bodies,
        )


class SubModelCreationFailure(BodySetupError):
    """A model factory failed for one domain of one body; see __cause__."""

    def __init__(self, body: str, domain: str, cause: BaseException):
        self.body = body
        self.domain = domain
        super().__init__(
            f"Error when creating {domain} model of body {body}: {cause}",
            body=body,
            domain=domain,
        )


class MissingFrameOrigin(BodySetupError):
    def __init__(self, body: str, origin: str, global_frame_origin: str):
        self.body = body
        self.origin = origin
        self.global_frame_origin = global_frame_origin
        super().__init__(
            f"Error, body {body} has ephemeris in frame {origin}, "
            f"but no conversion to frame {global_frame_origin} can be made",
            body=body,
            origin=origin,
            global_frame_origin=global_frame_origin,
        )


class FrameOrientationMismatch(BodySetupError):
    """
    Orientation of an ephemeris ("ephemeris") or of a rotation model's
    base frame ("rotation_model") differs from the global orientation.
    """

    def __init__(self, body: str, declared: str, expected: str, model: str):
        self.body = body
        self.declared = declared
        self.expected = expected
        self.model = model
        label = "ephemeris orientation" if model == "ephemeris" else "rotation base orientation"
        super().__init__(
            f"Error, {label} of body {body} is not the same as global orientation: "
            f"{declared}, {expected}",
            body=body,
            declared=declared,
            expected=expected,
            model=model,
        )


__all__ = [
    "BodySetupError",
    "CycleDetected",
    "SubModelCreationFailure",
    "MissingFrameOrigin",
    "FrameOrientationMismatch",
]
