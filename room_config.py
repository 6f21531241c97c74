"""Tolerances and limits for wall-graph room detection.

Defaults live in code; a JSON file next to the caller may override any key.
"""

import json
import os

MERGE_EPSILON_M = 0.05
MIN_ROOM_AREA_M2 = 0.01
MAX_TRACE_STEPS = 10000
PICK_MIN_ROOM_AREA_M2 = 0.5


def default_room_config():
    return {
        "merge_epsilon_m": MERGE_EPSILON_M,
        "min_room_area_m2": MIN_ROOM_AREA_M2,
        "max_trace_steps": MAX_TRACE_STEPS,
        "pick_min_room_area_m2": PICK_MIN_ROOM_AREA_M2,
        "snapshot_faces": True,
    }


def _merge(base, patch):
    out = dict(base)
    for k, v in (patch or {}).items():
        out[k] = v
    return out


def load_room_config(path):
    data = default_room_config()
    if not path or not os.path.isfile(path):
        return data
    try:
        with open(path, "r") as f:
            parsed = json.load(f)
    except (IOError, OSError, ValueError):
        return data
    if isinstance(parsed, dict):
        data = _merge(data, parsed)
    return data


def resolve_room_config(cfg=None, path=None):
    """Explicit ``cfg`` keys win over the file, the file wins over defaults."""
    return _merge(load_room_config(path), cfg)
