import math
import os
import sys
import unittest

THIS_DIR = os.path.dirname(__file__)
ROOT_DIR = os.path.dirname(THIS_DIR)
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from room_graph import build_nodes, build_wall_graph, edge_count, sort_neighbors_by_angle


def _wall(wid, x1, y1, x2, y2):
    return {"id": wid, "start": {"x": x1, "y": y1}, "end": {"x": x2, "y": y2}}


class GraphBuilderTests(unittest.TestCase):
    def test_endpoints_within_epsilon_share_a_node(self):
        walls = [
            _wall("a", 0, 0, 2, 0),
            _wall("b", 2.04, 0, 2, 2),
        ]
        nodes, pairs = build_nodes(walls)
        self.assertEqual(len(nodes), 3)
        self.assertEqual(pairs, [(0, 1), (1, 2)])

    def test_endpoints_beyond_epsilon_stay_apart(self):
        walls = [
            _wall("a", 0, 0, 2, 0),
            _wall("b", 2.06, 0, 2, 2),
        ]
        nodes, pairs = build_nodes(walls)
        self.assertEqual(len(nodes), 4)
        self.assertEqual(pairs, [(0, 1), (2, 3)])

    def test_first_created_node_wins(self):
        walls = [
            _wall("a", 0, 0, 0, 5),
            _wall("b", 0.06, 0, 0.06, -5),
            # 0.03 from both bottom nodes; the older one takes it.
            _wall("c", 0.03, 0, 3, 0),
        ]
        nodes, pairs = build_nodes(walls)
        self.assertEqual(pairs[2][0], 0)
        self.assertIn(4, nodes[0]["neighbors"])
        self.assertNotIn(4, nodes[2]["neighbors"])

    def test_merged_node_keeps_first_position(self):
        walls = [
            _wall("a", 1, 1, 3, 1),
            _wall("b", 1.02, 0.98, 1, 4),
        ]
        nodes, _ = build_nodes(walls)
        self.assertEqual(nodes[0]["position"], (1.0, 1.0))

    def test_zero_length_wall_records_pair_without_edge(self):
        walls = [
            _wall("a", 0, 0, 1, 0),
            _wall("z", 5, 5, 5.01, 5),
        ]
        nodes, pairs = build_nodes(walls)
        self.assertEqual(pairs[1], (2, 2))
        self.assertEqual(nodes[2]["neighbors"], [])
        self.assertEqual(edge_count(nodes), 1)

    def test_parallel_walls_collapse_to_one_edge(self):
        walls = [
            _wall("a", 0, 0, 1, 0),
            _wall("a2", 1, 0, 0, 0),
            _wall("a3", 0, 0, 1, 0),
        ]
        nodes, pairs = build_nodes(walls)
        self.assertEqual(nodes[0]["neighbors"], [1])
        self.assertEqual(nodes[1]["neighbors"], [0])
        self.assertEqual(pairs, [(0, 1), (1, 0), (0, 1)])

    def test_custom_epsilon(self):
        walls = [
            _wall("a", 0, 0, 2, 0),
            _wall("b", 2.2, 0, 2, 2),
        ]
        nodes, _ = build_wall_graph(walls, {"merge_epsilon_m": 0.25})
        self.assertEqual(len(nodes), 3)


class AngularSorterTests(unittest.TestCase):
    def test_neighbors_sorted_by_outgoing_angle(self):
        walls = [
            _wall("up", 0, 0, 0, 1),
            _wall("left", 0, 0, -1, 0),
            _wall("right", 0, 0, 1, 0),
            _wall("down", 0, 0, 0, -1),
        ]
        nodes, _ = build_nodes(walls)
        sort_neighbors_by_angle(nodes)
        order = [nodes[n]["position"] for n in nodes[0]["neighbors"]]
        self.assertEqual(order, [(0.0, -1.0), (1.0, 0.0), (0.0, 1.0), (-1.0, 0.0)])

    def test_sorted_angles_are_ascending(self):
        walls = [
            _wall("a", 0, 0, 2, 1),
            _wall("b", 0, 0, -3, 0.5),
            _wall("c", 0, 0, 1, -4),
            _wall("d", 0, 0, -1, -1),
        ]
        nodes, _ = build_wall_graph(walls)
        ox, oy = nodes[0]["position"]
        angles = []
        for n in nodes[0]["neighbors"]:
            x, y = nodes[n]["position"]
            angles.append(math.atan2(y - oy, x - ox))
        self.assertEqual(angles, sorted(angles))


if __name__ == "__main__":
    unittest.main()
