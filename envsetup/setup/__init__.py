"""
Environment Setup
=================

- resolve_creation_order  : frame-origin bodies before dependent bodies.
- construct_bodies        : per-domain factories, body by body.
- enforce_global_frame    : frame checks + base-frame translations.
- create_system_of_bodies : construct + enforce in one call.
- body_frame_table        : pandas summary of body frames.
"""

from .creation_order import resolve_creation_order
from .global_frame import enforce_global_frame, frame_translations
from .create_bodies import (
    ModelFactory,
    ModelFactories,
    construct_bodies,
    create_system_of_bodies,
)
from .summary import FRAME_TABLE_COLUMNS, body_frame_table

__all__ = [
    "resolve_creation_order",
    "enforce_global_frame",
    "frame_translations",
    "ModelFactory",
    "ModelFactories",
    "construct_bodies",
    "create_system_of_bodies",
    "FRAME_TABLE_COLUMNS",
    "body_frame_table",
]
