"""Plain 2D math for wall centerlines and room polygons (meters).

Points are (x, y) tuples. ``xy`` accepts the {"x", "y"} dicts used by wall
records, so callers can pass either shape.
"""

import math


def xy(p):
    if isinstance(p, dict):
        return (float(p["x"]), float(p["y"]))
    return (float(p[0]), float(p[1]))


def point_dict(p):
    x, y = xy(p)
    return {"x": x, "y": y}


def _sub(a, b):
    return (a[0] - b[0], a[1] - b[1])


def _dot(a, b):
    return (a[0] * b[0]) + (a[1] * b[1])


def _cross(a, b):
    return (a[0] * b[1]) - (a[1] * b[0])


def distance(a, b):
    ax, ay = xy(a)
    bx, by = xy(b)
    dx = ax - bx
    dy = ay - by
    return math.sqrt((dx * dx) + (dy * dy))


def edge_angle(a, b):
    """Angle of the vector a -> b from the positive x axis, in (-pi, pi]."""
    ax, ay = xy(a)
    bx, by = xy(b)
    return math.atan2(by - ay, bx - ax)


def signed_area(points):
    """Shoelace area; positive for counter-clockwise winding."""
    s = 0.0
    pts = [xy(p) for p in points]
    n = len(pts)
    for i in range(n):
        x1, y1 = pts[i]
        x2, y2 = pts[(i + 1) % n]
        s += (x1 * y2) - (x2 * y1)
    return 0.5 * s


def polygon_area(points):
    if len(points) < 3:
        return 0.0
    return abs(signed_area(points))


def point_in_polygon(point, polygon):
    px, py = xy(point)
    poly = [xy(p) for p in polygon]
    n = len(poly)
    if n < 3:
        return False
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = poly[i]
        xj, yj = poly[j]
        if (yi > py) != (yj > py):
            x_cross = (xj - xi) * (py - yi) / (yj - yi) + xi
            if px < x_cross:
                inside = not inside
        j = i
    return inside


def segment_intersection(a1, a2, b1, b2):
    """Intersection of segments a1-a2 and b1-b2, or None.

    Parallel and collinear pairs never intersect here.
    """
    p = xy(a1)
    q = xy(b1)
    d1 = _sub(xy(a2), p)
    d2 = _sub(xy(b2), q)
    den = _cross(d1, d2)
    if abs(den) < 1e-12:
        return None
    diff = _sub(q, p)
    t1 = _cross(diff, d2) / den
    t2 = _cross(diff, d1) / den
    if t1 < -1e-10 or t1 > 1.0 + 1e-10 or t2 < -1e-10 or t2 > 1.0 + 1e-10:
        return None
    return (p[0] + (d1[0] * t1), p[1] + (d1[1] * t1))


def nearest_point_on_segment(point, a, b):
    """Return (closest_point, t, distance) with t clamped to [0, 1]."""
    p = xy(point)
    a = xy(a)
    d = _sub(xy(b), a)
    vv = _dot(d, d)
    if vv <= 0.0:
        return a, 0.0, distance(p, a)
    t = _dot(_sub(p, a), d) / vv
    if t < 0.0:
        t = 0.0
    elif t > 1.0:
        t = 1.0
    c = (a[0] + (d[0] * t), a[1] + (d[1] * t))
    return c, t, distance(p, c)
