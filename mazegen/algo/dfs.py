import logging
import random
from typing import Iterator, List, Optional, Set
from mazegen.core.grid import Coord, Maze, Size
from mazegen.algo.base import Generator

logger = logging.getLogger(__name__)

class RecursiveBacktracker(Generator):
    """
    Randomized depth-first backtracker.

    Starts from a fully walled grid at (0,0), carves into a random unvisited
    neighbor while one exists and pops the path stack otherwise. The result
    is a spanning tree: width * height - 1 open internal walls.
    """

    def __init__(self, grid: Maze, seed: Optional[int] = None, progress_interval: int = 100):
        super().__init__(grid, seed, progress_interval)
        self.unvisited: Set[Coord] = set()
        self.path_stack: List[Coord] = []
        self.current: Optional[Coord] = None
        self.passages_carved = 0
        self.backtracks = 0

    def _visit(self, coord: Coord):
        self.unvisited.discard(coord)
        if self.grid.event_writer:
            self.grid.event_writer.log_visit(*coord)

    def run(self) -> Iterator[str]:
        rng = random.Random(self.seed)

        # Reset so the pass can run from any prior wall state
        self.grid.enable_all_walls()
        self.path_stack.clear()
        self.unvisited = set(self.grid.coords())
        self.step_count = 0
        self.passages_carved = 0
        self.backtracks = 0

        self.current = (0, 0)
        self._visit(self.current)

        while self.path_stack or self.unvisited:
            candidates = [
                (coord, direction)
                for coord, direction in self.grid.neighbors(self.current)
                if coord in self.unvisited
            ]

            if candidates:
                next_coord, direction = rng.choice(candidates)

                # Carve
                self.grid.disable_wall(self.current, direction)
                self.path_stack.append(self.current)
                self.current = next_coord
                self._visit(next_coord)
                self.passages_carved += 1
            else:
                # Backtrack
                self.current = self.path_stack.pop()
                self.backtracks += 1
                if self.grid.event_writer:
                    self.grid.event_writer.log_backtrack(*self.current)

            self.step_count += 1
            if self.step_count % self.progress_interval == 0:
                yield f"Carving... Stack: {len(self.path_stack)} Unvisited: {len(self.unvisited)}"

        logger.debug(
            "Generated %dx%d maze (seed=%s): %d passages, %d backtracks",
            self.grid.width, self.grid.height, self.seed, self.passages_carved, self.backtracks,
        )
        self.current = None
        yield "Done"

    def generate(self) -> Maze:
        return self.run_all()


def generate_maze(size, seed: Optional[int] = None, event_writer=None) -> Maze:
    """Builds a maze of the given size and carves it with the backtracker."""
    grid = Maze(Size(*size), event_writer=event_writer)
    RecursiveBacktracker(grid, seed=seed).run_all()
    return grid
