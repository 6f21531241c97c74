"""Room picking for the editor's room tool."""

from room_config import PICK_MIN_ROOM_AREA_M2
from room_detection import detect_rooms
from room_geometry import point_in_polygon, polygon_area

DEFAULT_ROOM_LABEL = "Room"
DEFAULT_ROOM_COLOR = "rgba(135,206,235,0.3)"


def pick_room_at_point(walls, point, cfg=None):
    cfg = cfg or {}
    walls = list(walls or [])
    if len(walls) < 3:
        return None
    min_area = float(cfg.get("pick_min_room_area_m2", PICK_MIN_ROOM_AREA_M2))
    for room in detect_rooms(walls, cfg):
        poly = room["polygon"]
        if len(poly) < 3:
            continue
        if polygon_area(poly) < min_area:
            continue
        if point_in_polygon(point, poly):
            return room
    return None


def build_room_element(room, floor_index, label=DEFAULT_ROOM_LABEL):
    return {
        "floor_index": int(floor_index),
        "locked": False,
        "visible": True,
        "wall_ids": list(room["wall_ids"]),
        "polygon": [dict(p) for p in room["polygon"]],
        "label": label,
        "color": DEFAULT_ROOM_COLOR,
        "area": room["area"],
        "fill_pattern": "solid",
    }
