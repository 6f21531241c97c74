"""Snapshot helpers for the room detection pipeline."""


def save_room_snapshot_stages(snapshot, walls, analysis, cfg):
    debug = analysis.get("debug", {})
    snapshot.save_json("20_walls_input.json", {"walls": list(walls or [])})
    snapshot.save_json("21_room_graph.json", {
        "node_count": debug.get("node_count", 0),
        "edge_count": debug.get("edge_count", 0),
        "nodes": debug.get("nodes", []),
        "wall_node_pairs": debug.get("wall_node_pairs", []),
    })
    if (cfg or {}).get("snapshot_faces", True):
        snapshot.save_json("22_faces.json", {
            "faces": debug.get("faces", []),
            "traced_face_count": debug.get("traced_face_count", 0),
            "exterior_face_count": debug.get("exterior_face_count", 0),
            "degenerate_face_count": debug.get("degenerate_face_count", 0),
            "aborted_trace_count": debug.get("aborted_trace_count", 0),
        })
    snapshot.save_json("23_rooms.json", {"rooms": analysis.get("rooms", [])})
    snapshot.save_json("24_detection_config.json", dict(cfg or {}))
