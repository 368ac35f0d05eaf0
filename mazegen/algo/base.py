from abc import ABC, abstractmethod
from typing import Iterator, Optional
from mazegen.core.grid import Maze

class Generator(ABC):
    def __init__(self, grid: Maze, seed: Optional[int] = None, progress_interval: int = 100):
        self.grid = grid
        self.seed = seed
        # Yield a progress update every N steps
        self.progress_interval = max(1, progress_interval)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self) -> Maze:
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        return self.grid
