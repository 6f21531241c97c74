import json
import os
import shutil
import sys
import tempfile
import unittest

THIS_DIR = os.path.dirname(__file__)
ROOT_DIR = os.path.dirname(THIS_DIR)
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from wall_input import WallInputError, load_walls, wall_from_record, walls_from_records


class WallRecordTests(unittest.TestCase):
    def test_normalizes_points_and_id(self):
        w = wall_from_record({"id": 7, "start": {"x": "1.5", "y": 0}, "end": [2, 3], "thickness": 0.2})
        self.assertEqual(w["id"], "7")
        self.assertEqual(w["start"], {"x": 1.5, "y": 0.0})
        self.assertEqual(w["end"], {"x": 2.0, "y": 3.0})
        self.assertEqual(w["thickness"], 0.2)

    def test_missing_id(self):
        with self.assertRaises(WallInputError):
            wall_from_record({"start": {"x": 0, "y": 0}, "end": {"x": 1, "y": 0}})
        with self.assertRaises(WallInputError):
            wall_from_record({"id": "", "start": {"x": 0, "y": 0}, "end": {"x": 1, "y": 0}})

    def test_missing_point(self):
        with self.assertRaises(WallInputError):
            wall_from_record({"id": "a", "start": {"x": 0, "y": 0}})
        with self.assertRaises(WallInputError):
            wall_from_record({"id": "a", "start": {"x": 0}, "end": {"x": 1, "y": 0}})

    def test_bad_coordinate(self):
        with self.assertRaises(WallInputError):
            wall_from_record({"id": "a", "start": {"x": "abc", "y": 0}, "end": {"x": 1, "y": 0}})
        with self.assertRaises(WallInputError):
            wall_from_record({"id": "a", "start": {"x": None, "y": 0}, "end": {"x": 1, "y": 0}})
        with self.assertRaises(WallInputError):
            wall_from_record({"id": "a", "start": {"x": True, "y": 0}, "end": {"x": 1, "y": 0}})

    def test_not_a_dict(self):
        with self.assertRaises(WallInputError):
            wall_from_record(["a", 0, 0, 1, 0])

    def test_error_is_a_value_error(self):
        self.assertTrue(issubclass(WallInputError, ValueError))

    def test_records_list(self):
        walls = walls_from_records([
            {"id": "a", "start": {"x": 0, "y": 0}, "end": {"x": 1, "y": 0}},
            {"id": "b", "start": {"x": 1, "y": 0}, "end": {"x": 1, "y": 1}},
        ])
        self.assertEqual([w["id"] for w in walls], ["a", "b"])
        self.assertEqual(walls_from_records(None), [])


class LoadWallsTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.mkdtemp(prefix="wallinput_")

    def tearDown(self):
        shutil.rmtree(self.tmp, ignore_errors=True)

    def _write(self, name, text):
        path = os.path.join(self.tmp, name)
        with open(path, "w") as f:
            f.write(text)
        return path

    def test_plain_list(self):
        path = self._write("walls.json", json.dumps([
            {"id": "a", "start": {"x": 0, "y": 0}, "end": {"x": 1, "y": 0}},
        ]))
        self.assertEqual(load_walls(path)[0]["end"], {"x": 1.0, "y": 0.0})

    def test_wrapped_list(self):
        path = self._write("plan.json", json.dumps({"walls": [
            {"id": "a", "start": [0, 0], "end": [0, 2]},
        ]}))
        self.assertEqual(load_walls(path)[0]["id"], "a")

    def test_missing_file(self):
        with self.assertRaises(WallInputError):
            load_walls(os.path.join(self.tmp, "none.json"))

    def test_invalid_json(self):
        path = self._write("bad.json", "[{")
        with self.assertRaises(WallInputError):
            load_walls(path)

    def test_wrong_shape(self):
        path = self._write("shape.json", json.dumps({"rooms": []}))
        with self.assertRaises(WallInputError):
            load_walls(path)


if __name__ == "__main__":
    unittest.main()
