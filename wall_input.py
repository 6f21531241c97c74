"""Validation of wall records handed to room detection.

Detection itself assumes well-typed walls; everything that can be wrong
with caller data is caught here instead.
"""

import json
import os


class WallInputError(ValueError):
    pass


def _coord(value, wall_id, field):
    if isinstance(value, bool):
        raise WallInputError("Wall '{}': {} is not a number".format(wall_id, field))
    try:
        return float(value)
    except (TypeError, ValueError):
        raise WallInputError("Wall '{}': {} is not a number".format(wall_id, field))


def _point(rec, key, wall_id):
    p = rec.get(key)
    if isinstance(p, dict):
        if "x" not in p or "y" not in p:
            raise WallInputError("Wall '{}': {} needs x and y".format(wall_id, key))
        return {
            "x": _coord(p["x"], wall_id, key + ".x"),
            "y": _coord(p["y"], wall_id, key + ".y"),
        }
    if isinstance(p, (list, tuple)) and len(p) >= 2:
        return {
            "x": _coord(p[0], wall_id, key + "[0]"),
            "y": _coord(p[1], wall_id, key + "[1]"),
        }
    raise WallInputError("Wall '{}': missing {} point".format(wall_id, key))


def wall_from_record(rec):
    """Normalize one record; extra editor keys are kept as they are."""
    if not isinstance(rec, dict):
        raise WallInputError("Wall record must be an object, got {}".format(type(rec).__name__))
    wall_id = rec.get("id")
    if wall_id is None or str(wall_id) == "":
        raise WallInputError("Wall record without id")
    wall_id = str(wall_id)
    out = dict(rec)
    out["id"] = wall_id
    out["start"] = _point(rec, "start", wall_id)
    out["end"] = _point(rec, "end", wall_id)
    return out


def walls_from_records(records):
    return [wall_from_record(r) for r in (records or [])]


def load_walls(path):
    if not path or not os.path.isfile(path):
        raise WallInputError("Wall file not found: {}".format(path))
    try:
        with open(path, "r") as f:
            parsed = json.load(f)
    except ValueError as ex:
        raise WallInputError("Wall file is not valid JSON: {}".format(ex))
    if isinstance(parsed, dict):
        parsed = parsed.get("walls")
    if not isinstance(parsed, list):
        raise WallInputError("Wall file must hold a list of walls or {\"walls\": [...]}")
    return walls_from_records(parsed)
