"""Grid maze: dimensions, random generation, connectivity checks and rendering."""

from __future__ import annotations

import random
from collections import deque

import pygame

TANK_SIZE = 30
BLOCK_SIZE = 60
BULLET_SIZE = 10

MAZE_WIDTH = 11
MAZE_HEIGHT = 11

SCREEN_WIDTH = BLOCK_SIZE * MAZE_WIDTH
SCREEN_HEIGHT = BLOCK_SIZE * MAZE_HEIGHT

WALL = 1
OPEN = 0
WALL_COLOR = (100, 100, 100)

_STEPS = ((0, -2), (-2, 0), (0, 2), (2, 0))


class Maze:
    """A rectangular grid of wall and open cells, indexed as ``cells[row][col]``."""

    def __init__(self, width: int = MAZE_WIDTH, height: int = MAZE_HEIGHT) -> None:
        if width < 3 or height < 3:
            raise ValueError(f"maze must be at least 3x3, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = [[WALL] * width for _ in range(height)]

    def generate(self, rng: random.Random | None = None) -> None:
        """Carve a fresh maze with a randomised depth-first walk from (1, 1)."""
        if rng is None:
            rng = random.Random()
        for row in self.cells:
            row[:] = [WALL] * self.width

        self.cells[1][1] = OPEN
        stack = [(1, 1)]
        while stack:
            y, x = stack.pop()
            steps = list(_STEPS)
            rng.shuffle(steps)
            for dy, dx in steps:
                ny, nx = y + dy, x + dx
                if (
                    0 < nx < self.width - 1
                    and 0 < ny < self.height - 1
                    and self.cells[ny][nx] == WALL
                ):
                    self.cells[ny][nx] = OPEN
                    self.cells[y + dy // 2][x + dx // 2] = OPEN
                    stack.append((ny, nx))

    def is_wall(self, row: int, col: int) -> bool:
        """Whether the cell is a wall; anything outside the grid counts as wall."""
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.cells[row][col] == WALL
        return True

    def is_reachable(self, start_x: int, start_y: int) -> bool:
        """Whether every open cell is reached from the start by two-cell hops."""
        visited = {(start_y, start_x)}
        queue = deque([(start_y, start_x)])
        while queue:
            y, x = queue.popleft()
            for dy, dx in _STEPS:
                ny, nx = y + dy, x + dx
                if (
                    0 < nx < self.width
                    and 0 < ny < self.height
                    and (ny, nx) not in visited
                    and self.cells[ny][nx] == OPEN
                ):
                    visited.add((ny, nx))
                    queue.append((ny, nx))

        return all(
            (y, x) in visited
            for y, row in enumerate(self.cells)
            for x, cell in enumerate(row)
            if cell == OPEN
        )

    def fix_connectivity(self) -> None:
        """Open the first single interior wall that makes the maze reachable from (1, 1)."""
        if self.is_reachable(1, 1):
            return
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                if self.cells[y][x] == WALL:
                    self.cells[y][x] = OPEN
                    if self.is_reachable(1, 1):
                        return
                    self.cells[y][x] = WALL

    def draw(self, surface: pygame.Surface) -> None:
        """Paint every wall cell as a grey block."""
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                if cell == WALL:
                    surface.fill(
                        WALL_COLOR,
                        pygame.Rect(x * BLOCK_SIZE, y * BLOCK_SIZE, BLOCK_SIZE, BLOCK_SIZE),
                    )