from collections import deque
from mazegen.core.grid import Direction, Maze

class MazeAnalyzer:
    @staticmethod
    def count_passages(grid: Maze) -> int:
        """Number of open internal walls. Each edge is counted once (EAST/SOUTH side)."""
        passages = 0
        for coord in grid.coords():
            if not grid.is_wall_enabled(coord, Direction.EAST):
                passages += 1
            if not grid.is_wall_enabled(coord, Direction.SOUTH):
                passages += 1
        return passages

    @staticmethod
    def reachable_count(grid: Maze, start=(0, 0)) -> int:
        seen = {start}
        queue = deque([start])
        while queue:
            coord = queue.popleft()
            for neighbor, direction in grid.neighbors(coord):
                if neighbor not in seen and not grid.is_wall_enabled(coord, direction):
                    seen.add(neighbor)
                    queue.append(neighbor)
        return len(seen)

    @staticmethod
    def is_perfect(grid: Maze) -> bool:
        """
        True when the open passages form a spanning tree:
        every cell reachable and exactly width * height - 1 passages.
        """
        total = grid.width * grid.height
        if MazeAnalyzer.count_passages(grid) != total - 1:
            return False
        # Connected with n-1 edges implies acyclic
        return MazeAnalyzer.reachable_count(grid) == total

    @staticmethod
    def calculate_stats(grid: Maze):
        dead_ends = 0
        corridors = 0  # 2 walls
        junctions = 0  # 0, 1 walls

        def popcount_walls(coord):
            return sum(1 for d in Direction if grid.is_wall_enabled(coord, d))

        for coord in grid.coords():
            walls = popcount_walls(coord)
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: junctions += 1

        total = grid.width * grid.height
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "passages": MazeAnalyzer.count_passages(grid),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
        }
