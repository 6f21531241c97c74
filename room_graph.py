"""Planar wall graph: merged endpoints, adjacency, angular neighbor order."""

from room_config import MERGE_EPSILON_M
from room_geometry import distance, edge_angle, xy


def build_nodes(walls, merge_epsilon=MERGE_EPSILON_M):
    """Merge wall endpoints into nodes and connect them.

    Returns ``(nodes, wall_node_pairs)``. ``wall_node_pairs[i]`` is the node
    pair of ``walls[i]``; zero-length walls keep their pair but add no edge.
    Endpoints join the first node (creation order) closer than
    ``merge_epsilon``, so merging depends on wall order.
    """
    nodes = []
    wall_node_pairs = []

    def get_or_create(p):
        pt = xy(p)
        for node in nodes:
            if distance(pt, node["position"]) < merge_epsilon:
                return node["id"]
        nid = len(nodes)
        nodes.append({"id": nid, "position": pt, "neighbors": []})
        return nid

    for wall in (walls or []):
        a = get_or_create(wall["start"])
        b = get_or_create(wall["end"])
        wall_node_pairs.append((a, b))
        if a == b:
            continue
        # Parallel walls between one node pair collapse to a single edge.
        if b not in nodes[a]["neighbors"]:
            nodes[a]["neighbors"].append(b)
        if a not in nodes[b]["neighbors"]:
            nodes[b]["neighbors"].append(a)

    return nodes, wall_node_pairs


def sort_neighbors_by_angle(nodes):
    for node in nodes:
        origin = node["position"]
        node["neighbors"].sort(key=lambda n: edge_angle(origin, nodes[n]["position"]))
    return nodes


def edge_count(nodes):
    return sum(len(n["neighbors"]) for n in nodes) // 2


def build_wall_graph(walls, cfg=None):
    cfg = cfg or {}
    eps = float(cfg.get("merge_epsilon_m", MERGE_EPSILON_M))
    nodes, pairs = build_nodes(walls, eps)
    sort_neighbors_by_angle(nodes)
    return nodes, pairs
