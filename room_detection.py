"""Room detection from wall centerlines.

Pipeline:
- merge wall endpoints into graph nodes, sort neighbors by edge angle
- trace every face of the planar graph once
- drop repeated, exterior and near-zero-area faces
- map each remaining face back to its walls

Malformed geometry never raises here: it just produces fewer rooms.
"""

from room_config import MAX_TRACE_STEPS, MIN_ROOM_AREA_M2
from room_faces import FACE_DEGENERATE, FACE_EXTERIOR, FACE_ROOM, classify_faces, trace_faces
from room_geometry import point_dict
from room_graph import build_wall_graph, edge_count


def face_wall_ids(face, wall_node_pairs, walls):
    ids = []
    n = len(face)
    for i in range(n):
        a = face[i]
        b = face[(i + 1) % n]
        for w, (na, nb) in enumerate(wall_node_pairs):
            if (na == a and nb == b) or (na == b and nb == a):
                wid = walls[w]["id"]
                if wid not in ids:
                    ids.append(wid)
                break
    return ids


def _room_record(face, area, nodes, wall_node_pairs, walls):
    return {
        "wall_ids": face_wall_ids(face, wall_node_pairs, walls),
        "polygon": [point_dict(nodes[i]["position"]) for i in face],
        "area": area,
    }


def analyze_walls(walls, cfg=None):
    cfg = cfg or {}
    walls = list(walls or [])
    if not walls:
        return {"rooms": [], "debug": _empty_debug()}

    min_area = float(cfg.get("min_room_area_m2", MIN_ROOM_AREA_M2))
    max_steps = int(cfg.get("max_trace_steps", MAX_TRACE_STEPS))

    nodes, pairs = build_wall_graph(walls, cfg)
    visited = set()
    faces, aborted = trace_faces(nodes, max_steps, visited)
    classified = classify_faces(nodes, faces, min_area)

    rooms = []
    for f in classified:
        if f["kind"] != FACE_ROOM:
            continue
        rooms.append(_room_record(f["nodes"], abs(f["signed_area"]), nodes, pairs, walls))
    rooms.sort(key=lambda r: r["area"])

    debug = {
        "wall_count": len(walls),
        "node_count": len(nodes),
        "edge_count": edge_count(nodes),
        "directed_edges_visited": len(visited),
        "nodes": [
            {"id": n["id"], "position": [n["position"][0], n["position"][1]], "neighbors": list(n["neighbors"])}
            for n in nodes
        ],
        "wall_node_pairs": [[a, b] for a, b in pairs],
        "faces": [
            {"key": list(f["key"]), "nodes": list(f["nodes"]), "signed_area": f["signed_area"], "kind": f["kind"]}
            for f in classified
        ],
        "traced_face_count": len(faces),
        "unique_face_count": len(classified),
        "exterior_face_count": sum(1 for f in classified if f["kind"] == FACE_EXTERIOR),
        "degenerate_face_count": sum(1 for f in classified if f["kind"] == FACE_DEGENERATE),
        "aborted_trace_count": aborted,
        "room_count": len(rooms),
    }
    return {"rooms": rooms, "debug": debug}


def _empty_debug():
    return {
        "wall_count": 0,
        "node_count": 0,
        "edge_count": 0,
        "directed_edges_visited": 0,
        "nodes": [],
        "wall_node_pairs": [],
        "faces": [],
        "traced_face_count": 0,
        "unique_face_count": 0,
        "exterior_face_count": 0,
        "degenerate_face_count": 0,
        "aborted_trace_count": 0,
        "room_count": 0,
    }


def detect_rooms(walls, cfg=None):
    """Return rooms enclosed by ``walls``, smallest area first.

    Each room is ``{"wall_ids", "polygon", "area"}``; polygon vertices are
    {"x", "y"} dicts in boundary order without a repeated last vertex.
    """
    return analyze_walls(walls, cfg)["rooms"]
