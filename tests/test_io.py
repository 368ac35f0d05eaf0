import unittest
import sys
import os
import tempfile

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mazegen.core.grid import Maze
from mazegen.algo.dfs import generate_maze
from mazegen.io.serializer import MazeSerializer

def snapshot(maze):
    return [maze.wall_mask(coord) for coord in maze.coords()]

class TestIO(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.out = self.tmp.name

    def tearDown(self):
        self.tmp.cleanup()

    def test_round_trip_raw(self):
        maze = generate_maze((10, 6), seed=3)

        path = os.path.join(self.out, "raw.maze")
        MazeSerializer.save(maze, path, meta={"seed": 3})

        maze2, meta = MazeSerializer.load(path)
        self.assertEqual(maze2.size, maze.size)
        self.assertEqual(snapshot(maze2), snapshot(maze))
        self.assertEqual(meta, {"seed": 3})

    def test_round_trip_compressed(self):
        maze = generate_maze((60, 40), seed=8)
        path = os.path.join(self.out, "comp.maze")
        MazeSerializer.save(maze, path, compress=True)

        maze2, _ = MazeSerializer.load(path)
        self.assertEqual(snapshot(maze2), snapshot(maze))

    def test_seed_only(self):
        maze = generate_maze((10, 10), seed=12345)
        path = os.path.join(self.out, "seed.maze")
        meta = {"seed": 12345, "algo": "dfs"}
        MazeSerializer.save(maze, path, meta=meta, seed_only=True)

        maze2, meta2 = MazeSerializer.load(path)
        self.assertEqual(meta2["seed"], 12345)
        self.assertEqual(snapshot(maze2), snapshot(maze))

        # Header + Meta only
        self.assertLess(os.path.getsize(path), 200)

    def test_seed_only_requires_seed(self):
        with self.assertRaises(ValueError):
            MazeSerializer.save(Maze((2, 2)), os.path.join(self.out, "x.maze"), seed_only=True)

    def test_oversized_meta_leaves_no_file(self):
        path = os.path.join(self.out, "big.maze")
        with self.assertRaises(ValueError):
            MazeSerializer.save(Maze((2, 2)), path, meta={"x": "a" * 70000})
        self.assertFalse(os.path.exists(path))

    def test_invalid_files(self):
        path = os.path.join(self.out, "bad.maze")
        with open(path, "wb") as f:
            f.write(b"NOPE")
        with self.assertRaises(ValueError):
            MazeSerializer.load(path)

        with open(path, "wb") as f:
            f.write(b"MAZE\x01")
        with self.assertRaises(ValueError):
            MazeSerializer.load(path)

if __name__ == '__main__':
    unittest.main()
