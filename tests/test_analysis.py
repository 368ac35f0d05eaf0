import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mazegen.core.grid import Direction, Maze
from mazegen.core.analysis import MazeAnalyzer
from mazegen.algo.dfs import generate_maze

class TestAnalysis(unittest.TestCase):
    def test_stats_of_generated_maze(self):
        w, h = 20, 20
        maze = generate_maze((w, h), seed=42)
        stats = MazeAnalyzer.calculate_stats(maze)

        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], w * h)
        self.assertEqual(stats["passages"], w * h - 1)

    def test_walled_grid_is_not_perfect(self):
        maze = Maze((3, 3))
        maze.enable_all_walls()
        self.assertEqual(MazeAnalyzer.count_passages(maze), 0)
        self.assertEqual(MazeAnalyzer.reachable_count(maze), 1)
        self.assertFalse(MazeAnalyzer.is_perfect(maze))

    def test_loop_is_not_perfect(self):
        maze = generate_maze((4, 4), seed=8)
        # Opening any closed internal wall of a spanning tree adds a cycle
        closed = [
            (coord, d) for coord in maze.coords() for d in (Direction.EAST, Direction.SOUTH)
            if not maze.is_edge_wall(coord, d) and maze.is_wall_enabled(coord, d)
        ]
        self.assertEqual(len(closed), 24 - 15)
        maze.disable_wall(*closed[0])
        self.assertEqual(MazeAnalyzer.count_passages(maze), 16)
        self.assertFalse(MazeAnalyzer.is_perfect(maze))

    def test_open_grid(self):
        maze = Maze((3, 2))
        # 2 * 2 horizontal + 3 * 1 vertical neighbours
        self.assertEqual(MazeAnalyzer.count_passages(maze), 7)
        self.assertEqual(MazeAnalyzer.calculate_stats(maze)["dead_ends"], 0)

if __name__ == '__main__':
    unittest.main()
