"""Face tracing over the angularly sorted wall graph.

Every directed edge belongs to exactly one face. From ``prev -> current``
the walk continues along the neighbor that precedes ``prev`` in
``current``'s counter-clockwise neighbor list, i.e. the first edge
clockwise from the way back. That is the sharpest left turn, so bounded
faces come out counter-clockwise (positive shoelace area, y up) and the
unbounded outer boundary comes out clockwise.

``next_edge_cw`` and ``INTERIOR_SIGN`` must change together: flipping the
turn rule without flipping the sign turns the exterior into the only room.
"""

from room_config import MAX_TRACE_STEPS, MIN_ROOM_AREA_M2
from room_geometry import signed_area

INTERIOR_SIGN = 1.0

FACE_ROOM = "room"
FACE_EXTERIOR = "exterior"
FACE_DEGENERATE = "degenerate"


def next_edge_cw(nodes, prev, current):
    neighbors = nodes[current]["neighbors"]
    if not neighbors:
        return None
    if len(neighbors) == 1:
        return neighbors[0]
    try:
        idx = neighbors.index(prev)
    except ValueError:
        return neighbors[0]
    return neighbors[idx - 1]


def trace_face(nodes, start_from, start_to, max_steps=MAX_TRACE_STEPS):
    """Walk one face from the directed edge ``start_from -> start_to``.

    Returns ``(walked, closed)``. A closed walk ends by repeating
    ``start_from``; dead ends and walks longer than ``max_steps`` are
    returned with ``closed`` False.
    """
    walked = [start_from]
    prev = start_from
    current = start_to
    for _ in range(int(max_steps)):
        walked.append(current)
        nxt = next_edge_cw(nodes, prev, current)
        if nxt is None:
            return walked, False
        prev, current = current, nxt
        if prev == start_from and current == start_to:
            return walked, True
    return walked, False


def trim_closing_node(face):
    if len(face) > 1 and face[-1] == face[0]:
        return face[:-1]
    return list(face)


def face_key(face):
    cleaned = trim_closing_node(face)
    if not cleaned:
        return tuple()
    i = cleaned.index(min(cleaned))
    return tuple(cleaned[i:] + cleaned[:i])


def trace_faces(nodes, max_steps=MAX_TRACE_STEPS, visited=None):
    """Trace every face once, starting from each unvisited directed edge.

    ``visited`` is the caller-owned set of ``(a, b)`` directed edges; a new
    one is used when omitted. Returns ``(faces, aborted)`` where ``faces``
    are closed node cycles without the closing node, in discovery order.
    """
    if visited is None:
        visited = set()
    faces = []
    aborted = 0
    for node in nodes:
        for neighbor in node["neighbors"]:
            if (node["id"], neighbor) in visited:
                continue
            walked, closed = trace_face(nodes, node["id"], neighbor, max_steps)
            for i in range(len(walked) - 1):
                visited.add((walked[i], walked[i + 1]))
            if not closed:
                aborted += 1
                continue
            faces.append(trim_closing_node(walked))
    return faces, aborted


def unique_faces(faces):
    out = {}
    for face in faces:
        key = face_key(face)
        if key not in out:
            out[key] = face
    return out


def face_signed_area(nodes, face):
    return signed_area([nodes[i]["position"] for i in face])


def classify_face(nodes, face, min_area=MIN_ROOM_AREA_M2):
    sa = face_signed_area(nodes, face)
    if (sa * INTERIOR_SIGN) <= 0.0:
        return FACE_EXTERIOR, sa
    if len(set(face)) < 3 or abs(sa) < min_area:
        return FACE_DEGENERATE, sa
    return FACE_ROOM, sa


def classify_faces(nodes, faces, min_area=MIN_ROOM_AREA_M2):
    """Deduplicate faces and tag each unique one as room/exterior/degenerate."""
    out = []
    for key, face in unique_faces(faces).items():
        kind, sa = classify_face(nodes, face, min_area)
        out.append({
            "key": key,
            "nodes": face,
            "signed_area": sa,
            "kind": kind,
        })
    return out
