# envsetup/setup/summary.py

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from envsetup.environment.body import NamedBodyMap

FRAME_TABLE_COLUMNS = [
    "body",
    "ephemeris_origin",
    "ephemeris_orientation",
    "rotation_base_orientation",
    "rotation_target_orientation",
    "base_frame_origin",
]


def body_frame_table(bodies: NamedBodyMap) -> pd.DataFrame:
    """
    One row per body with the frames its models are defined in and the
    origin of its attached base-frame translation (None if not translated).
    """
    rows: List[Dict[str, Any]] = []
    for name, body in bodies.items():
        ephemeris = body.ephemeris
        rotation = body.rotational_ephemeris
        translation = body.ephemeris_frame_to_base_frame
        rows.append({
            "body": name,
            "ephemeris_origin": ephemeris.reference_frame_origin if ephemeris else None,
            "ephemeris_orientation": ephemeris.reference_frame_orientation if ephemeris else None,
            "rotation_base_orientation": rotation.base_frame_orientation if rotation else None,
            "rotation_target_orientation": rotation.target_frame_orientation if rotation else None,
            "base_frame_origin": translation.base_frame_id if translation else None,
        })
    return pd.DataFrame(rows, columns=FRAME_TABLE_COLUMNS)


__all__ = ["FRAME_TABLE_COLUMNS", "body_frame_table"]
