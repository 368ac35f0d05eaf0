from enum import IntEnum
from typing import Iterator, List, NamedTuple, Tuple

Coord = Tuple[int, int]


class Direction(IntEnum):
    # Bitmask values, so a cell's wall set packs into one byte
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    @property
    def dx(self) -> int:
        return _DX[self]

    @property
    def dy(self) -> int:
        return _DY[self]


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}
_DX = {Direction.NORTH: 0, Direction.SOUTH: 0, Direction.EAST: 1, Direction.WEST: -1}
_DY = {Direction.NORTH: -1, Direction.SOUTH: 1, Direction.EAST: 0, Direction.WEST: 0}

ALL_DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


class Size(NamedTuple):
    width: int
    height: int


class Cell:
    """A single grid cell and the set of sides that currently carry a wall."""

    __slots__ = ('coord', 'walls')

    def __init__(self, coord: Coord, walls: int = 0):
        self.coord = coord
        self.walls = walls

    def enable_wall(self, direction: Direction):
        self.walls |= direction

    def disable_wall(self, direction: Direction):
        self.walls &= ~direction

    def is_wall_enabled(self, direction: Direction) -> bool:
        return (self.walls & direction) != 0

    def __repr__(self):
        return f"Cell({self.coord}, walls={self.walls:#06b})"


class Maze:
    """
    Rectangular grid of cells with symmetric wall state.

    All wall access goes through (coord, direction) so that the two cells
    sharing an edge always agree. Sides on the outer boundary always report
    a wall and cannot be opened.
    """

    __slots__ = ('_size', 'cells', 'event_writer')

    def __init__(self, size, event_writer=None):
        width, height = size
        if any(isinstance(v, bool) or not isinstance(v, int) for v in (width, height)):
            raise TypeError(f"Maze dimensions must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Maze dimensions must be positive, got {width}x{height}")

        self._size = Size(width, height)
        self.event_writer = event_writer

        # Flat row-major storage: index = row * width + col
        self.cells: List[Cell] = []
        for row in range(height):
            for col in range(width):
                cell = Cell((col, row))
                for direction in ALL_DIRECTIONS:
                    if self.is_edge_wall((col, row), direction):
                        cell.enable_wall(direction)
                self.cells.append(cell)

        if self.event_writer:
            self.event_writer.write_header(width, height)

    @property
    def size(self) -> Size:
        return self._size

    @property
    def width(self) -> int:
        return self._size.width

    @property
    def height(self) -> int:
        return self._size.height

    def is_valid_coord(self, coord: Coord) -> bool:
        col, row = coord
        return 0 <= col < self._size.width and 0 <= row < self._size.height

    def get_index(self, coord: Coord) -> int:
        if self.is_valid_coord(coord):
            return coord[1] * self._size.width + coord[0]
        raise IndexError(f"Coordinate {coord} out of bounds for {self._size.width}x{self._size.height} maze")

    def get_cell(self, coord: Coord) -> Cell:
        return self.cells[self.get_index(coord)]

    def coords(self) -> Iterator[Coord]:
        """Yields every coordinate in row-major order."""
        for row in range(self._size.height):
            for col in range(self._size.width):
                yield (col, row)

    def neighbors(self, coord: Coord) -> List[Tuple[Coord, Direction]]:
        """
        Returns (neighbor_coord, direction_to_neighbor) for every in-bounds
        neighbor, in the order EAST, SOUTH, WEST, NORTH. Walls are ignored.
        """
        col, row = coord
        candidates = [
            ((col + 1, row), Direction.EAST),
            ((col, row + 1), Direction.SOUTH),
        ]
        if col > 0:
            candidates.append(((col - 1, row), Direction.WEST))
        if row > 0:
            candidates.append(((col, row - 1), Direction.NORTH))

        return [(c, d) for c, d in candidates if self.is_valid_coord(c)]

    def is_edge_wall(self, coord: Coord, direction: Direction) -> bool:
        col, row = coord
        if direction == Direction.NORTH:
            return row == 0
        if direction == Direction.EAST:
            return col == self._size.width - 1
        if direction == Direction.SOUTH:
            return row == self._size.height - 1
        if direction == Direction.WEST:
            return col == 0
        raise ValueError(f"Unknown direction {direction!r}")

    def is_wall_enabled(self, coord: Coord, direction: Direction) -> bool:
        index = self.get_index(coord)
        if self.is_edge_wall(coord, direction):
            return True
        return self.cells[index].is_wall_enabled(direction)

    def _set_wall(self, coord: Coord, direction: Direction, enabled: bool) -> bool:
        """
        Updates the wall on both sides of the shared edge.
        Returns False (and changes nothing) for boundary sides.
        """
        index = self.get_index(coord)
        if self.is_edge_wall(coord, direction):
            return False

        # Not a boundary side, so the neighbor is in bounds
        neighbor_index = self.get_index((coord[0] + direction.dx, coord[1] + direction.dy))
        if enabled:
            self.cells[index].enable_wall(direction)
            self.cells[neighbor_index].enable_wall(direction.opposite)
        else:
            self.cells[index].disable_wall(direction)
            self.cells[neighbor_index].disable_wall(direction.opposite)
        return True

    def enable_wall(self, coord: Coord, direction: Direction):
        if self._set_wall(coord, direction, True) and self.event_writer:
            self.event_writer.log_build(coord[0], coord[1], direction)

    def disable_wall(self, coord: Coord, direction: Direction):
        if self._set_wall(coord, direction, False) and self.event_writer:
            self.event_writer.log_carve(coord[0], coord[1], direction)

    def enable_all_walls(self):
        for coord in self.coords():
            for direction in ALL_DIRECTIONS:
                self._set_wall(coord, direction, True)
        if self.event_writer:
            self.event_writer.log_reset()

    def disable_all_walls(self):
        for coord in self.coords():
            for direction in ALL_DIRECTIONS:
                self._set_wall(coord, direction, False)
        if self.event_writer:
            self.event_writer.log_clear()

    def wall_mask(self, coord: Coord) -> int:
        """Wall bitmask of a cell as reported by is_wall_enabled."""
        mask = 0
        for direction in ALL_DIRECTIONS:
            if self.is_wall_enabled(coord, direction):
                mask |= direction
        return mask

    def lines(self) -> Iterator[str]:
        """
        Yields the text diagram line by line. Each call starts a new pass.

        Row lines show EAST walls between cells, separator lines show the
        SOUTH walls of each column with a '#' corner between columns.
        """
        width, height = self._size

        yield " " + "_" * (width * 2 - 1)

        for row in range(height):
            wall_line = []
            for col in range(width - 1):
                wall_line.append(" ")
                wall_line.append("#" if self.is_wall_enabled((col, row), Direction.EAST) else " ")
            yield "|" + "".join(wall_line) + " |"

            if row < height - 1:
                floor_line = []
                for col in range(width):
                    if col > 0:
                        floor_line.append("#")
                    floor_line.append("#" if self.is_wall_enabled((col, row), Direction.SOUTH) else " ")
                yield "|" + "".join(floor_line) + "|"

    def display(self) -> str:
        return "\n".join(self.lines())

    def __str__(self):
        return self.display()

    def __repr__(self):
        return f"Maze({self._size.width}x{self._size.height})"
