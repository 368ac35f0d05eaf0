import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mazegen.core.grid import Direction, Maze, Size
from mazegen.core.analysis import MazeAnalyzer
from mazegen.algo.dfs import RecursiveBacktracker, generate_maze

def snapshot(maze):
    return [maze.wall_mask(coord) for coord in maze.coords()]

class TestGenerators(unittest.TestCase):
    def test_dfs_spanning_tree(self):
        for w, h in [(20, 20), (7, 3), (1, 9), (12, 1)]:
            maze = Maze(Size(w, h))
            algo = RecursiveBacktracker(maze, seed=42)
            algo.run_all()

            self.assertEqual(MazeAnalyzer.count_passages(maze), w * h - 1)
            self.assertEqual(MazeAnalyzer.reachable_count(maze), w * h, "DFS should visit every cell")
            self.assertTrue(MazeAnalyzer.is_perfect(maze))
            self.assertEqual(algo.passages_carved, w * h - 1)

    def test_transient_state_cleared(self):
        maze = Maze((6, 6))
        algo = RecursiveBacktracker(maze, seed=5)
        algo.run_all()
        self.assertEqual(algo.unvisited, set())
        self.assertEqual(algo.path_stack, [])
        self.assertIsNone(algo.current)
        # Every carve is undone by exactly one backtrack
        self.assertEqual(algo.backtracks, algo.passages_carved)

    def test_two_by_two(self):
        maze = generate_maze(Size(2, 2), seed=1512)
        internal = [
            ((0, 0), Direction.EAST),
            ((0, 0), Direction.SOUTH),
            ((1, 0), Direction.SOUTH),
            ((0, 1), Direction.EAST),
        ]
        open_walls = [pair for pair in internal if not maze.is_wall_enabled(*pair)]
        self.assertEqual(len(open_walls), 3)
        self.assertEqual(MazeAnalyzer.reachable_count(maze), 4)

    def test_single_cell(self):
        maze = generate_maze((1, 1), seed=0)
        self.assertEqual(MazeAnalyzer.count_passages(maze), 0)
        self.assertTrue(MazeAnalyzer.is_perfect(maze))

    def test_determinism(self):
        w, h = 10, 10
        grid1 = Maze((w, h))
        RecursiveBacktracker(grid1, seed=12345).run_all()

        grid2 = Maze((w, h))
        rec = RecursiveBacktracker(grid2, seed=12345)
        for _ in rec.run(): pass

        self.assertEqual(snapshot(grid1), snapshot(grid2))
        self.assertEqual(snapshot(grid1), snapshot(generate_maze((w, h), seed=12345)))

    def test_different_seeds_differ(self):
        self.assertNotEqual(
            snapshot(generate_maze((10, 10), seed=1)),
            snapshot(generate_maze((10, 10), seed=2)),
        )

    def test_rerun_resets_grid(self):
        maze = Maze((8, 5))
        maze.disable_all_walls()
        algo = RecursiveBacktracker(maze, seed=77)
        first = snapshot(algo.generate())

        # Tamper with the result, then regenerate
        maze.disable_all_walls()
        second = snapshot(algo.generate())

        self.assertEqual(first, second)
        self.assertTrue(MazeAnalyzer.is_perfect(maze))

    def test_progress_updates(self):
        maze = Maze((10, 10))
        updates = list(RecursiveBacktracker(maze, seed=9, progress_interval=10).run())
        self.assertEqual(updates[-1], "Done")
        # 99 carves + 99 backtracks = 198 steps
        self.assertEqual(len(updates), 198 // 10 + 1)

if __name__ == '__main__':
    unittest.main()
