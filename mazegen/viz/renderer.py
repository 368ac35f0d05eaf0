import pygame
from typing import List, Tuple
from mazegen.core.grid import ALL_DIRECTIONS, Coord, Direction, Maze

class Renderer:
    """
    Pygame front end. Reads the maze only through size and is_wall_enabled,
    so it can draw a finished maze or animate a generator/replay stepping it.
    """
    COLOR_BG = (0, 0, 0)
    COLOR_WALL = (255, 0, 0)
    COLOR_CURRENT = (60, 100, 160)  # Blue tint

    WALL_THICKNESS = 1
    CELL_SIZE = 25
    CELL_MARGIN = 2
    CELL_FULL_SIZE = (WALL_THICKNESS + CELL_MARGIN) * 2 + CELL_SIZE

    def __init__(self, grid: Maze, generator=None, steps_per_frame: int = 1, fps: int = 60):
        self.grid = grid
        self.generator = generator
        self.steps_per_frame = steps_per_frame
        self.fps = fps

        self.running = True
        self.clock = None
        self.surface = None
        self.gen_iter = None
        self.gen_finished = generator is None

    def window_size(self) -> Tuple[int, int]:
        width, height = self.grid.size
        return width * self.CELL_FULL_SIZE, height * self.CELL_FULL_SIZE

    def wall_rect(self, coord: Coord, direction: Direction) -> pygame.Rect:
        """Screen rectangle of one wall segment of a cell."""
        t, s, m = self.WALL_THICKNESS, self.CELL_SIZE, self.CELL_MARGIN
        if direction == Direction.NORTH:
            dx, dy, w, h = m + t, m, s, t
        elif direction == Direction.WEST:
            dx, dy, w, h = m, m + t, t, s
        elif direction == Direction.SOUTH:
            dx, dy, w, h = m + t, m + t * 2 + s, s, t
        else:
            dx, dy, w, h = m + t + s, m + t, t, s

        x = coord[0] * self.CELL_FULL_SIZE + dx
        y = coord[1] * self.CELL_FULL_SIZE + dy
        return pygame.Rect(x, y, w, h)

    def wall_rects(self) -> List[pygame.Rect]:
        rects = []
        width, height = self.grid.size
        for col in range(width):
            for row in range(height):
                for direction in ALL_DIRECTIONS:
                    if self.grid.is_wall_enabled((col, row), direction):
                        rects.append(self.wall_rect((col, row), direction))
        return rects

    def draw_maze(self, surface: pygame.Surface):
        surface.fill(self.COLOR_BG)

        current = getattr(self.generator, "current", None)
        if current is not None and not self.gen_finished:
            inset = self.CELL_MARGIN + self.WALL_THICKNESS
            pygame.draw.rect(surface, self.COLOR_CURRENT, (
                current[0] * self.CELL_FULL_SIZE + inset,
                current[1] * self.CELL_FULL_SIZE + inset,
                self.CELL_SIZE, self.CELL_SIZE,
            ))

        for rect in self.wall_rects():
            pygame.draw.rect(surface, self.COLOR_WALL, rect)

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"mazegen - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode(self.window_size())
        self.clock = pygame.time.Clock()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def step(self):
        """Advances the attached generator by a few progress updates."""
        if self.gen_finished:
            return
        try:
            for _ in range(self.steps_per_frame):
                next(self.gen_iter)
        except StopIteration:
            self.gen_finished = True

    def finish(self):
        """Drains the attached generator, continuing the pass already on screen."""
        if self.gen_finished:
            return
        if self.gen_iter is None:
            self.gen_iter = self.generator.run()
        for _ in self.gen_iter:
            pass
        self.gen_finished = True

    def run_loop(self):
        self.gen_iter = self.generator.run() if self.generator else None

        while self.running:
            self.handle_input()
            self.step()

            self.draw_maze(self.surface)
            pygame.display.flip()
            self.clock.tick(self.fps)

        pygame.quit()
