"""Wall editing helpers: hit testing, splitting, crossing lookup.

Walls are plain dicts; only ``id``, ``start``, ``end`` and the optional
``thickness`` are read. Other editor keys are carried through unchanged.
"""

from room_geometry import nearest_point_on_segment, point_dict, segment_intersection, xy


def find_wall_at_point(point, walls, threshold):
    """Closest wall within ``threshold`` plus half its thickness, or None."""
    best = None
    for wall in (walls or []):
        _, t, d = nearest_point_on_segment(point, wall["start"], wall["end"])
        # Clicks on the drawn wall body count, not just the centerline.
        limit = float(threshold) + (float(wall.get("thickness", 0.0) or 0.0) * 0.5)
        if d > limit:
            continue
        if (best is None) or (d < best["distance"]):
            best = {"wall_id": wall["id"], "t": t, "distance": d}
    return best


def split_wall_at_point(wall, point):
    p = point_dict(point)
    wall_a = dict(wall)
    wall_a["id"] = "{}_a".format(wall["id"])
    wall_a["start"] = point_dict(wall["start"])
    wall_a["end"] = dict(p)
    wall_a["openings"] = []

    wall_b = dict(wall)
    wall_b["id"] = "{}_b".format(wall["id"])
    wall_b["start"] = dict(p)
    wall_b["end"] = point_dict(wall["end"])
    wall_b["openings"] = []
    return wall_a, wall_b


def _param_on(p, a, b):
    ax, ay = xy(a)
    bx, by = xy(b)
    dx = bx - ax
    dy = by - ay
    vv = (dx * dx) + (dy * dy)
    if vv <= 0.0:
        return 0.0
    return (((p[0] - ax) * dx) + ((p[1] - ay) * dy)) / vv


def find_wall_intersections(start, end, walls):
    out = []
    for wall in (walls or []):
        pt = segment_intersection(start, end, wall["start"], wall["end"])
        if pt is None:
            continue
        out.append({
            "wall_id": wall["id"],
            "point": point_dict(pt),
            "t1": _param_on(pt, start, end),
            "t2": _param_on(pt, wall["start"], wall["end"]),
        })
    out.sort(key=lambda r: r["t1"])
    return out
