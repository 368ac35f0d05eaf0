from typing import Iterator, Optional
from mazegen.core.grid import Coord, Direction, Maze
from mazegen.core.events import (
    EventReader, EVT_VISIT, EVT_CARVE, EVT_BUILD, EVT_BACKTRACK, EVT_RESET, EVT_CLEAR,
)

class EventAdapter:
    """
    Adapts an EventReader stream to look like a Generator for the Renderer.
    Applies wall changes to the Maze as it iterates.
    """
    def __init__(self, grid: Maze, reader: EventReader):
        self.grid = grid
        self.reader = reader

        self.visited_count = 0
        self.backtracks = 0
        self.current: Optional[Coord] = None

    def run(self) -> Iterator[str]:
        count = 0
        for type_code, data in self.reader.stream_events():
            count += 1

            if type_code == EVT_VISIT:
                self.current = data
                self.visited_count += 1

            elif type_code == EVT_CARVE:
                x, y, d = data
                self.grid.disable_wall((x, y), Direction(d))

            elif type_code == EVT_BUILD:
                x, y, d = data
                self.grid.enable_wall((x, y), Direction(d))

            elif type_code == EVT_BACKTRACK:
                self.current = data
                self.backtracks += 1

            elif type_code == EVT_RESET:
                self.grid.enable_all_walls()

            elif type_code == EVT_CLEAR:
                self.grid.disable_all_walls()

            # Yield every N steps
            if count % 50 == 0:
                yield "Replay"

        yield "Done"

    def run_all(self) -> Maze:
        for _ in self.run():
            pass
        return self.grid
